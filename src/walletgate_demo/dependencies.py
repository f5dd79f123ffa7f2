"""
═══════════════════════════════════════════════════════════════════════════════
WalletGate Demo — FastAPI dependencies (Dependency Injection)
═══════════════════════════════════════════════════════════════════════════════

The WalletGate client is built once in ``lifespan`` from DemoSettings and
stored on ``app.state``. Routes receive it through ``get_walletgate_client``
so tests can swap it with ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Depends, Request

from walletgate_demo.adapters.walletgate_client import WalletGateClient
from walletgate_demo.config import DemoSettings, get_settings
from walletgate_demo.services.checkout_service import CheckoutFlow


def build_walletgate_client(settings: DemoSettings) -> WalletGateClient:
    """Creates a client bound to the configured base URL and timeout."""
    return WalletGateClient(
        base_url=settings.demo_api_base,
        timeout=settings.request_timeout_seconds,
    )


async def get_walletgate_client(request: Request) -> WalletGateClient:
    """
    Returns the application-wide WalletGate client.

    Falls back to a client built from settings when the app was started
    without the lifespan (e.g. a bare ``TestClient(app)``).
    """
    client = getattr(request.app.state, "walletgate_client", None)
    if client is None:
        client = build_walletgate_client(get_settings())
        request.app.state.walletgate_client = client
    return client


async def get_checkout_flow(
    client: WalletGateClient = Depends(get_walletgate_client),
) -> CheckoutFlow:
    """A fresh checkout flow per request; the API itself keeps no visitor state."""
    settings = get_settings()
    return CheckoutFlow(
        client,
        poll_interval=settings.poll_interval_seconds,
        poll_max_attempts=settings.poll_max_attempts,
    )
