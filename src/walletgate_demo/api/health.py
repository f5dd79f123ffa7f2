"""
walletgate_demo/api/health.py — Health check endpoint.

GET /api/v1/health — liveness plus the WalletGate endpoint in use.
"""

from fastapi import APIRouter

from walletgate_demo import __version__
from walletgate_demo.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Storefront backend health check")
async def health():
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "walletgate-demo",
        "version": __version__,
        "walletgate_api": settings.demo_api_base,
    }
