"""
walletgate_demo/models/product.py — Catalogue product models.
"""

from pydantic import Field

from walletgate_demo.models.common import DemoBase
from walletgate_demo.models.enums import Category


class ProductRequirements(DemoBase):
    """Verification a product needs before it can be bought."""
    age: int | None = Field(default=None, examples=[18])
    residency: bool = False
    identity: bool = False


class Product(DemoBase):
    """Storefront product."""
    id: str = Field(..., examples=["craft-beer"])
    name: str
    description: str
    price: float = Field(..., ge=0)
    category: Category
    emoji: str
    gradient: str
    merchant: str
    fulfillment: str
    badge: str
    requires: ProductRequirements = Field(default_factory=ProductRequirements)


class RequirementLine(DemoBase):
    """Human readable requirement shown on the checkout page."""
    icon: str
    label: str
    short: str


class PriceBreakdown(DemoBase):
    """Net price, VAT and total, rounded to cents."""
    price: float
    tax: float
    total: float


class ProductDetail(DemoBase):
    """Product with its requirement lines and price breakdown."""
    product: Product
    requirements: list[RequirementLine] = Field(default_factory=list)
    pricing: PriceBreakdown
