"""
walletgate_demo/services/catalogue.py — Demo product catalogue.

Eight products from fictional EU merchants, each carrying the verification
profile a real shop of that kind would need (age threshold, EU residency,
photo ID).
"""

from __future__ import annotations

import logging
import secrets
import string
import time

from walletgate_demo.exceptions import ProductNotFoundError
from walletgate_demo.models.enums import Category
from walletgate_demo.models.product import (
    PriceBreakdown,
    Product,
    ProductDetail,
    ProductRequirements,
    RequirementLine,
)

logger = logging.getLogger(__name__)

VAT_RATE = 0.19

# ═══════════════════════════════════════════════════════════════════════════
# CATALOGUE
# ═══════════════════════════════════════════════════════════════════════════

PRODUCTS: list[Product] = [
    Product(
        id="craft-beer",
        name="Bavarian Craft Beer Pack",
        description="Curated 12-pack of small-batch lagers and seasonal IPAs from Munich breweries.",
        price=34,
        category=Category.ALCOHOL,
        emoji="\U0001F37A",
        gradient="linear-gradient(135deg, #fbbf24 0%, #f59e0b 100%)",
        merchant="Nordic Bottle Shop",
        fulfillment="Ships in 2 business days",
        badge="18+",
        requires=ProductRequirements(age=18),
    ),
    Product(
        id="bordeaux-wine",
        name="Bordeaux Reserve 2019",
        description="Award-winning Château Margaux blend. Rich tannins, dark fruit, elegant finish.",
        price=89,
        category=Category.ALCOHOL,
        emoji="\U0001F377",
        gradient="linear-gradient(135deg, #7f1d1d 0%, #991b1b 100%)",
        merchant="Vino Europa",
        fulfillment="Ships in 3-5 business days",
        badge="18+",
        requires=ProductRequirements(age=18),
    ),
    Product(
        id="cbd-gummies",
        name="CBD Wellness Gummies",
        description="EU-compliant broad-spectrum CBD gummies. Lab-tested, vegan, traceable sourcing.",
        price=42,
        category=Category.WELLNESS,
        emoji="\U0001F33F",
        gradient="linear-gradient(135deg, #059669 0%, #047857 100%)",
        merchant="Greenfield Apothecary",
        fulfillment="Ships in 1-3 business days",
        badge="18+ · EU only",
        requires=ProductRequirements(age=18, residency=True),
    ),
    Product(
        id="festival-vip",
        name="Summer Festival VIP Pass",
        description="Front-row access, backstage lounge, complimentary drinks. Berlin, Aug 15-17.",
        price=119,
        category=Category.EVENTS,
        emoji="\U0001F3B5",
        gradient="linear-gradient(135deg, #7c3aed 0%, #6d28d9 100%)",
        merchant="Aurora Live",
        fulfillment="E-ticket delivered instantly",
        badge="18+ · ID required",
        requires=ProductRequirements(age=18, identity=True),
    ),
    Product(
        id="concert-tickets",
        name="Midnight Concert Tickets",
        description="Electronic music showcase at Berghain. Two GA tickets, Saturday night.",
        price=65,
        category=Category.EVENTS,
        emoji="\U0001F3B6",
        gradient="linear-gradient(135deg, #1e1b4b 0%, #312e81 100%)",
        merchant="NightOwl Tickets",
        fulfillment="QR tickets via email",
        badge="18+ · ID required",
        requires=ProductRequirements(age=18, identity=True),
    ),
    Product(
        id="racing-game",
        name="Racing League Deluxe",
        description="PEGI 16 open-world racing simulator. All DLC included. Instant Steam key.",
        price=59,
        category=Category.GAMING,
        emoji="\U0001F3CE\uFE0F",
        gradient="linear-gradient(135deg, #0369a1 0%, #0284c7 100%)",
        merchant="Pixel Harbor",
        fulfillment="Instant digital download",
        badge="16+",
        requires=ProductRequirements(age=16),
    ),
    Product(
        id="tactical-game",
        name="Tactical Ops: Europa",
        description="PEGI 18 multiplayer tactical shooter. Season pass + exclusive operator skin.",
        price=69,
        category=Category.GAMING,
        emoji="\U0001F3AE",
        gradient="linear-gradient(135deg, #374151 0%, #1f2937 100%)",
        merchant="Pixel Harbor",
        fulfillment="Instant digital download",
        badge="18+",
        requires=ProductRequirements(age=18),
    ),
    Product(
        id="sportsbet-topup",
        name="SportsBet Wallet Top-Up",
        description="Fund your regulated sportsbook wallet. Full KYC verification required by EU law.",
        price=75,
        category=Category.FINANCE,
        emoji="\u26BD",
        gradient="linear-gradient(135deg, #065f46 0%, #047857 100%)",
        merchant="Summit Sportsbook",
        fulfillment="Instant wallet credit",
        badge="18+ · EU · ID",
        requires=ProductRequirements(age=18, residency=True, identity=True),
    ),
]

_PRODUCTS_BY_ID: dict[str, Product] = {p.id: p for p in PRODUCTS}


# ═══════════════════════════════════════════════════════════════════════════
# LOOKUPS
# ═══════════════════════════════════════════════════════════════════════════


def list_products(category: Category = Category.ALL) -> list[Product]:
    """Products of one category in catalogue order; ``ALL`` returns everything."""
    if category is Category.ALL:
        return list(PRODUCTS)
    return [p for p in PRODUCTS if p.category is category]


def get_product(product_id: str) -> Product:
    product = _PRODUCTS_BY_ID.get(product_id)
    if product is None:
        logger.info("Unknown product requested: %s", product_id)
        raise ProductNotFoundError(product_id)
    return product


def describe_requirements(product: Product) -> list[RequirementLine]:
    """Checkout-page requirement lines, in the same order as the check list."""
    lines: list[RequirementLine] = []
    requires = product.requires
    if requires.age:
        lines.append(RequirementLine(
            icon="\U0001F5D3\uFE0F",
            label=f"You must be {requires.age} or older",
            short=f"{requires.age}+ age check",
        ))
    if requires.residency:
        lines.append(RequirementLine(
            icon="\U0001F1EA\U0001F1FA",
            label="EU residency is required",
            short="EU residency",
        ))
    if requires.identity:
        lines.append(RequirementLine(
            icon="\U0001F4F7",
            label="Photo ID will be verified",
            short="Identity check",
        ))
    return lines


def price_breakdown(product: Product) -> PriceBreakdown:
    tax = round(product.price * VAT_RATE, 2)
    total = round(product.price + tax, 2)
    return PriceBreakdown(price=product.price, tax=tax, total=total)


def product_detail(product_id: str) -> ProductDetail:
    product = get_product(product_id)
    return ProductDetail(
        product=product,
        requirements=describe_requirements(product),
        pricing=price_breakdown(product),
    )


# ═══════════════════════════════════════════════════════════════════════════
# ORDER IDS
# ═══════════════════════════════════════════════════════════════════════════

_BASE36 = string.digits + string.ascii_uppercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_order_id() -> str:
    """Order reference like ``EU-LZ8K2Q1M-4F7A``."""
    stamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(4))
    return f"EU-{stamp}-{suffix}"
