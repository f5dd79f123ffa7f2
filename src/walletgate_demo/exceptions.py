"""
═══════════════════════════════════════════════════════════════════════════════
WalletGate Demo — Custom Exception Hierarchy
═══════════════════════════════════════════════════════════════════════════════

Base class ``DemoError`` for every storefront error.
HTTP status mapping lives in ``walletgate_demo.main:demo_error_handler``.

The check builder never raises: invalid ages are clamped and disabled
checks are omitted. These errors belong to the catalogue, the checkout
flow and the WalletGate HTTP client.
"""

import math


class DemoError(Exception):
    """
    Base exception for all storefront errors.

    Attributes
    ──────────
        message (str):  Human readable description, sent to the client.
        code (str):     String code, mapped onto an HTTP status.
        details (dict): Extra data (entity, id, retry hint, ...).
    """

    def __init__(
        self,
        message: str,
        code: str = "DEMO_ERROR",
        details: dict | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ProductNotFoundError(DemoError):
    """Unknown catalogue product: 404 Not Found."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="DEMO_NOT_FOUND",
            details={"entity": "Product", "id": product_id},
        )


class NoChecksError(DemoError):
    """Nothing to verify for the selection: 422 Unprocessable Entity."""

    def __init__(self, message: str = "No verification checks for this product."):
        super().__init__(message, code="DEMO_NO_CHECKS")


class WalletGateApiError(DemoError):
    """WalletGate API returned an error or an unreadable payload: 502."""

    def __init__(
        self,
        message: str = "Unable to start verification",
        status_code: int | None = None,
    ):
        details = {"upstream_status": status_code} if status_code is not None else None
        super().__init__(message, code="DEMO_UPSTREAM_ERROR", details=details)
        self.status_code = status_code


class RateLimitedError(WalletGateApiError):
    """WalletGate API answered 429 Too Many Requests."""

    def __init__(self, retry_after: float | None = None):
        if retry_after is not None and retry_after > 0:
            seconds = math.ceil(retry_after)
            retry_label = f"Try again in {seconds}s."
        else:
            seconds = None
            retry_label = "Please wait a moment and try again."
        super().__init__(f"Too many requests. {retry_label}", status_code=429)
        self.code = "DEMO_RATE_LIMITED"
        self.retry_after = seconds
        self.details = {"retry_after_seconds": seconds}


class RequestTimeoutError(WalletGateApiError):
    """WalletGate API did not answer within the configured timeout."""

    def __init__(self, message: str = "Request timed out. Please try again."):
        super().__init__(message)
        self.code = "DEMO_TIMEOUT"


__all__ = [
    "DemoError",
    "ProductNotFoundError",
    "NoChecksError",
    "WalletGateApiError",
    "RateLimitedError",
    "RequestTimeoutError",
]
