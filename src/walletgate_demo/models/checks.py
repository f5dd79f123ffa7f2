"""
walletgate_demo/models/checks.py — Verification check models.

    • CheckDescriptor — one check sent to WalletGate
    • CheckRequirementInput — which checks the visitor or product asks for
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import ConfigDict, field_validator, model_validator

from walletgate_demo.models.common import DemoBase
from walletgate_demo.models.enums import CheckType

MIN_AGE = 13
MAX_AGE = 99
DEFAULT_AGE = 18


class CheckDescriptor(DemoBase):
    """One requested verification: ``{"type": ..., "value"?: ...}``."""

    model_config = ConfigDict(frozen=True)

    type: CheckType
    value: int | float | None = None

    @model_validator(mode="after")
    def _value_only_for_age(self) -> "CheckDescriptor":
        if self.type is CheckType.AGE_OVER:
            if self.value is None:
                raise ValueError("age_over check requires a value")
            if not MIN_AGE <= self.value <= MAX_AGE:
                raise ValueError(f"age_over value must be within [{MIN_AGE}, {MAX_AGE}]")
        if self.type is not CheckType.AGE_OVER and self.value is not None:
            raise ValueError(f"{self.type.value} check does not take a value")
        return self

    def to_payload(self) -> dict[str, Any]:
        """Wire shape; ``value`` is omitted when absent."""
        payload: dict[str, Any] = {"type": self.type.value}
        if self.value is not None:
            payload["value"] = self.value
        return payload


class CheckRequirementInput(DemoBase):
    """
    Checks wanted for a single build call.

    ``age_value`` is the raw requested threshold. Anything that does not
    parse as a number (empty text, ``None``) becomes NaN and is later
    replaced by the default age.
    """

    model_config = ConfigDict(frozen=True)

    age_enabled: bool = False
    age_value: int | float = DEFAULT_AGE
    residency_enabled: bool = False
    identity_enabled: bool = False

    @field_validator("age_value", mode="before")
    @classmethod
    def _coerce_age(cls, v: Any) -> Any:
        if v is None or isinstance(v, bool):
            return math.nan
        if isinstance(v, str):
            try:
                number = float(v)
            except ValueError:
                return math.nan
            return int(number) if number.is_integer() else number
        return v
