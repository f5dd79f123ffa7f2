"""
walletgate_demo/api/sessions.py — Verification session endpoints.

Proxies the storefront's session calls to WalletGate so the browser never
needs to know the API base URL:
    • POST /checkout/{product_id}/sessions — start verification for a product
    • GET  /sessions/{session_id}          — current status (polled by the UI)
    • POST /sessions/{session_id}/simulate — force a demo outcome
"""

import logging

from fastapi import APIRouter, Depends, status

from walletgate_demo.adapters.walletgate_client import WalletGateClient
from walletgate_demo.dependencies import get_checkout_flow, get_walletgate_client
from walletgate_demo.models.session import (
    CheckoutStarted,
    SessionResponse,
    SimulateRequest,
    TimedSession,
)
from walletgate_demo.services.checkout_service import CheckoutFlow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


@router.post(
    "/checkout/{product_id}/sessions",
    response_model=CheckoutStarted,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Start verification for a product",
)
async def start_checkout(product_id: str, flow: CheckoutFlow = Depends(get_checkout_flow)):
    """Builds the product's checks and opens a WalletGate session for them."""
    flow.go_to_checkout(product_id)
    session = await flow.start_verification()
    logger.info("Checkout %s started session %s", flow.order_id, session.short_id)
    return CheckoutStarted(
        order_id=flow.order_id,
        product_id=product_id,
        checks=flow.checks,
        session=session,
        latency_ms=flow.create_latency_ms,
        status_label=flow.status_label,
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    summary="Read a verification session",
)
async def get_session(
    session_id: str,
    client: WalletGateClient = Depends(get_walletgate_client),
):
    return await client.get_session(session_id)


@router.post(
    "/sessions/{session_id}/simulate",
    response_model=TimedSession,
    summary="Force a demo outcome",
)
async def simulate_session(
    session_id: str,
    body: SimulateRequest,
    client: WalletGateClient = Depends(get_walletgate_client),
):
    """pass_all / fail_all / mixed."""
    return await client.simulate(session_id, body.outcome)
