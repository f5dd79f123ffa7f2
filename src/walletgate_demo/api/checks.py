"""
walletgate_demo/api/checks.py — Check list builder endpoint.

Lets the "build your own check" form preview the exact ``checks`` array
that would be sent to WalletGate.
"""

from fastapi import APIRouter

from walletgate_demo.models.checks import CheckDescriptor, CheckRequirementInput
from walletgate_demo.services.check_builder import build_checks

router = APIRouter(prefix="/checks", tags=["checks"])


@router.post(
    "/build",
    response_model=list[CheckDescriptor],
    response_model_exclude_none=True,
    summary="Build the ordered check list",
)
async def build(body: CheckRequirementInput):
    """Age → residency → identity; an empty list means nothing to verify."""
    return build_checks(body)
