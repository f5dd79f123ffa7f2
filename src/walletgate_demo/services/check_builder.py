"""
walletgate_demo/services/check_builder.py — Builds the WalletGate check list.

Pure functions, no I/O and no shared state:
    • clamp_age — normalises a requested age into [13, 99]
    • build_checks — requirement flags → ordered list of CheckDescriptor
    • build_product_checks — same, starting from a catalogue product
    • checks_payload — wire shape of the ``checks`` field

The list order is always age → residency → identity.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from walletgate_demo.models.checks import (
    DEFAULT_AGE,
    MAX_AGE,
    MIN_AGE,
    CheckDescriptor,
    CheckRequirementInput,
)
from walletgate_demo.models.enums import CheckType
from walletgate_demo.models.product import Product


def clamp_age(value: Any) -> int | float:
    """
    Clamps a requested age threshold into ``[MIN_AGE, MAX_AGE]``.

    NaN (and anything that is not a number) yields ``DEFAULT_AGE``, not the
    lower bound. Values inside the range are returned unchanged, fractions
    included. Whole floats such as ``21.0`` come back as ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return DEFAULT_AGE
    if isinstance(value, float) and math.isnan(value):
        return DEFAULT_AGE
    clamped = min(MAX_AGE, max(MIN_AGE, value))
    if isinstance(clamped, float) and clamped.is_integer():
        return int(clamped)
    return clamped


def build_checks(requirements: CheckRequirementInput) -> list[CheckDescriptor]:
    """Translates enabled requirement flags into the ordered check list."""
    checks: list[CheckDescriptor] = []
    if requirements.age_enabled:
        checks.append(
            CheckDescriptor(type=CheckType.AGE_OVER, value=clamp_age(requirements.age_value))
        )
    if requirements.residency_enabled:
        checks.append(CheckDescriptor(type=CheckType.RESIDENCY_EU))
    if requirements.identity_enabled:
        checks.append(CheckDescriptor(type=CheckType.IDENTITY_VERIFIED))
    return checks


def requirements_for_product(product: Product) -> CheckRequirementInput:
    """A product with no (or zero) age requirement does not request an age check."""
    requires = product.requires
    return CheckRequirementInput(
        age_enabled=bool(requires.age),
        age_value=requires.age if requires.age else DEFAULT_AGE,
        residency_enabled=requires.residency,
        identity_enabled=requires.identity,
    )


def build_product_checks(product: Product) -> list[CheckDescriptor]:
    return build_checks(requirements_for_product(product))


def checks_payload(checks: Iterable[CheckDescriptor]) -> list[dict[str, Any]]:
    """JSON array sent as ``checks`` in the session-creation request."""
    return [check.to_payload() for check in checks]


__all__ = [
    "clamp_age",
    "build_checks",
    "build_product_checks",
    "requirements_for_product",
    "checks_payload",
]
