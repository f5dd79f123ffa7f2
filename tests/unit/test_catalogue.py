"""Tests for the product catalogue."""

import re

import pytest

from walletgate_demo.exceptions import ProductNotFoundError
from walletgate_demo.models.enums import Category
from walletgate_demo.services import catalogue


def test_all_returns_full_catalogue_in_order():
    products = catalogue.list_products(Category.ALL)
    assert [p.id for p in products] == [p.id for p in catalogue.PRODUCTS]
    assert len(products) == 8


def test_category_filter_keeps_order():
    events = catalogue.list_products(Category.EVENTS)
    assert [p.id for p in events] == ["festival-vip", "concert-tickets"]


def test_category_without_match_in_other_categories():
    finance = catalogue.list_products(Category.FINANCE)
    assert all(p.category is Category.FINANCE for p in finance)


def test_get_product_unknown_raises():
    with pytest.raises(ProductNotFoundError) as exc_info:
        catalogue.get_product("space-rocket")
    assert exc_info.value.code == "DEMO_NOT_FOUND"
    assert exc_info.value.details == {"entity": "Product", "id": "space-rocket"}


def test_requirement_lines_follow_check_order():
    lines = catalogue.describe_requirements(catalogue.get_product("sportsbet-topup"))
    assert [line.short for line in lines] == ["18+ age check", "EU residency", "Identity check"]
    assert lines[0].label == "You must be 18 or older"


def test_requirement_lines_age_only():
    lines = catalogue.describe_requirements(catalogue.get_product("racing-game"))
    assert [line.short for line in lines] == ["16+ age check"]


def test_price_breakdown_adds_19_percent_vat():
    pricing = catalogue.price_breakdown(catalogue.get_product("craft-beer"))
    assert pricing.price == 34
    assert pricing.tax == pytest.approx(6.46)
    assert pricing.total == pytest.approx(40.46)


def test_product_detail_bundles_pricing_and_requirements():
    detail = catalogue.product_detail("cbd-gummies")
    assert detail.product.name == "CBD Wellness Gummies"
    assert [line.short for line in detail.requirements] == ["18+ age check", "EU residency"]
    assert detail.pricing.total == pytest.approx(49.98)


def test_order_id_format():
    order_id = catalogue.generate_order_id()
    assert re.fullmatch(r"EU-[0-9A-Z]+-[0-9A-Z]{4}", order_id)


def test_order_ids_differ():
    assert len({catalogue.generate_order_id() for _ in range(20)}) > 1
