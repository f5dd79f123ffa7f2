"""
walletgate_demo/api/products.py — Catalogue endpoints.
"""

from fastapi import APIRouter

from walletgate_demo.models.checks import CheckDescriptor
from walletgate_demo.models.enums import Category
from walletgate_demo.models.product import Product, ProductDetail
from walletgate_demo.services import catalogue
from walletgate_demo.services.check_builder import build_product_checks
from walletgate_demo.services.snippets import build_snippets

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=list[Product],
    summary="List catalogue products",
)
async def list_products(category: Category = Category.ALL):
    """Products of one category, in catalogue order."""
    return catalogue.list_products(category)


@router.get(
    "/{product_id}",
    response_model=ProductDetail,
    summary="Product with requirements and pricing",
)
async def get_product(product_id: str):
    return catalogue.product_detail(product_id)


@router.get(
    "/{product_id}/checks",
    response_model=list[CheckDescriptor],
    response_model_exclude_none=True,
    summary="Checks WalletGate will run for the product",
)
async def get_product_checks(product_id: str):
    return build_product_checks(catalogue.get_product(product_id))


@router.get(
    "/{product_id}/snippets",
    summary="Integration snippets for the product's check list",
)
async def get_product_snippets(product_id: str) -> dict[str, str]:
    checks = build_product_checks(catalogue.get_product(product_id))
    return {lang.value: code for lang, code in build_snippets(checks).items()}
