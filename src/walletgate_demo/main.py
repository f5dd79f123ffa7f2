"""
═══════════════════════════════════════════════════════════════════════════════
WalletGate Demo — Application Entry Point
═══════════════════════════════════════════════════════════════════════════════

Application factory for the storefront backend. Wires the catalogue,
check builder and WalletGate session proxy routers under ``/api/v1`` and
maps ``DemoError`` codes onto HTTP statuses.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from walletgate_demo import __version__
from walletgate_demo.config import get_settings
from walletgate_demo.dependencies import build_walletgate_client
from walletgate_demo.exceptions import DemoError, RateLimitedError

from walletgate_demo.api.checks import router as checks_router
from walletgate_demo.api.health import router as health_router
from walletgate_demo.api.products import router as products_router
from walletgate_demo.api.sessions import router as sessions_router

# ═══════════════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════════════
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

STATUS_MAP = {
    "DEMO_NOT_FOUND": 404,
    "DEMO_NO_CHECKS": 422,
    "DEMO_RATE_LIMITED": 429,
    "DEMO_UPSTREAM_ERROR": 502,
    "DEMO_TIMEOUT": 504,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Lifespan
# ═══════════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup:
        1. Builds the WalletGate client from DemoSettings.

    Shutdown:
        1. Closes the client's connection pool.
    """
    settings = get_settings()
    logger.info("🚀 WalletGate demo backend v%s starting...", __version__)
    logger.info("   WalletGate API: %s", settings.demo_api_base)

    client = build_walletgate_client(settings)
    app.state.walletgate_client = client

    yield

    app.state.walletgate_client = None
    await client.aclose()
    logger.info("🛑 WalletGate demo backend stopped")


# ═══════════════════════════════════════════════════════════════════════════════
# Application factory
# ═══════════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Creates and configures the storefront FastAPI application."""
    settings = get_settings()

    _is_production = settings.app_env == "production"

    app = FastAPI(
        redirect_slashes=False,
        title="WalletGate Demo Storefront",
        description=(
            "Backend of the EUDI wallet demo shop. Lists age-restricted products, "
            "builds the WalletGate check list for each and proxies verification "
            "sessions to the WalletGate API."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url=None if _is_production else "/docs",
        redoc_url=None if _is_production else "/redoc",
        openapi_url=None if _is_production else "/api/v1/openapi.json",
    )

    # ── CORS middleware ──────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "X-Request-ID"],
    )

    # ── API routers ──────────────────────────────────────────────────────
    v1_router = APIRouter(prefix="/api/v1")
    v1_router.include_router(products_router)
    v1_router.include_router(checks_router)
    v1_router.include_router(sessions_router)
    v1_router.include_router(health_router)
    app.include_router(v1_router)

    # ── Global DemoError handler ─────────────────────────────────────────
    @app.exception_handler(DemoError)
    async def demo_error_handler(request: Request, exc: DemoError) -> JSONResponse:
        """Maps DemoError codes onto HTTP statuses."""
        status_code = STATUS_MAP.get(exc.code, 500)
        headers = None
        if isinstance(exc, RateLimitedError) and exc.retry_after:
            headers = {"Retry-After": str(exc.retry_after)}
        return JSONResponse(
            status_code=status_code,
            headers=headers,
            content={
                "error": {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                }
            },
        )

    # ── Root endpoint ────────────────────────────────────────────────────
    @app.get("/")
    async def root():
        return {
            "name": "WalletGate Demo Storefront",
            "version": __version__,
            "docs": "/docs",
            "api": {
                "v1": {
                    "health": "/api/v1/health",
                    "products": "/api/v1/products",
                    "build_checks": "/api/v1/checks/build",
                    "checkout": "/api/v1/checkout/{product_id}/sessions",
                    "sessions": "/api/v1/sessions/{session_id}",
                },
            },
        }

    return app


# ═══════════════════════════════════════════════════════════════════════════════
# Module-level singleton
# ═══════════════════════════════════════════════════════════════════════════════
app = create_app()


def main() -> None:
    """Runs the storefront backend under Uvicorn."""
    settings = get_settings()
    logger.info("Starting WalletGate demo on %s:%s", settings.api_host, settings.api_port)
    uvicorn.run(
        "walletgate_demo.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
