"""
walletgate_demo/models/common.py — Base types of the storefront models.

The WalletGate API speaks camelCase JSON, so every model accepts both the
Python field name and its camelCase alias.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DemoBase(BaseModel):
    """Base Pydantic model for storefront schemas."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
