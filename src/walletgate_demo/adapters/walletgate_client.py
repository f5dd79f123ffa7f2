"""
walletgate_demo/adapters/walletgate_client.py — WalletGate demo API client.

Thin async wrapper over ``httpx.AsyncClient`` for the three demo endpoints:
    • POST /api/demo/sessions                 — create a verification session
    • GET  /api/demo/sessions/{id}            — read session status
    • POST /api/demo/sessions/{id}/simulate   — force a demo outcome

The base URL and timeout are passed in at construction time; the client
never looks at environment variables. Responses are wrapped as
``{"data": {...}}``; errors carry ``error`` or ``message``.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Sequence

import httpx

from walletgate_demo.exceptions import (
    NoChecksError,
    RateLimitedError,
    RequestTimeoutError,
    WalletGateApiError,
)
from walletgate_demo.models.checks import CheckDescriptor
from walletgate_demo.models.enums import SessionStatus, SimulationOutcome
from walletgate_demo.models.session import SessionResponse, TimedSession
from walletgate_demo.services.check_builder import checks_payload

logger = logging.getLogger(__name__)

SESSIONS_PATH = "/api/demo/sessions"


def _retry_after(response: httpx.Response, payload: dict[str, Any]) -> float | None:
    """Seconds to wait from ``Retry-After`` or the body's ``retryAfterSeconds``."""
    raw = response.headers.get("Retry-After") or payload.get("retryAfterSeconds")
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        return None
    return seconds


class WalletGateClient:
    """
    Async client for the WalletGate demo API.

    Either owns its ``httpx.AsyncClient`` (built from ``base_url`` and
    ``timeout``) or wraps one supplied by the caller, e.g. with a
    ``MockTransport`` in tests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 12.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "WalletGateClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Endpoints ────────────────────────────────────────────────────────

    async def create_session(self, checks: Sequence[CheckDescriptor]) -> TimedSession:
        """
        Creates a verification session for ``checks``.

        Raises:
            NoChecksError: ``checks`` is empty; nothing is sent.
            RateLimitedError: WalletGate answered 429.
            RequestTimeoutError: no answer within ``timeout``.
            WalletGateApiError: any other failure.
        """
        if not checks:
            raise NoChecksError()
        body = {"checks": checks_payload(checks)}
        data, latency_ms = await self._request(
            "POST", SESSIONS_PATH, json=body, default_error="Unable to start verification",
        )
        if not data.get("status"):
            data["status"] = SessionStatus.PENDING.value
        session = self._parse_session(data)
        logger.info(
            "WalletGate session %s created (%d checks, %d ms)",
            session.short_id, len(checks), latency_ms,
        )
        return TimedSession(session=session, latency_ms=latency_ms)

    async def get_session(self, session_id: str) -> SessionResponse:
        data, _ = await self._request(
            "GET", f"{SESSIONS_PATH}/{session_id}", default_error="Unable to load session",
        )
        return self._parse_session(data)

    async def simulate(
        self, session_id: str, outcome: SimulationOutcome | str
    ) -> TimedSession:
        """Forces a demo outcome on the session (``pass_all``, ``fail_all``, ``mixed``)."""
        outcome = SimulationOutcome(outcome)
        data, latency_ms = await self._request(
            "POST",
            f"{SESSIONS_PATH}/{session_id}/simulate",
            json={"outcome": outcome.value},
            default_error="Simulation failed",
        )
        session = self._parse_session(data)
        logger.info(
            "WalletGate session %s simulated %s -> %s",
            session.short_id, outcome.value, session.status.value,
        )
        return TimedSession(session=session, latency_ms=latency_ms)

    # ── Internals ────────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        default_error: str = "Request failed",
    ) -> tuple[dict[str, Any], int]:
        """Sends a request and returns the ``data`` object and latency in ms."""
        started = time.perf_counter()
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TimeoutException as exc:
            logger.warning("WalletGate %s %s timed out: %s", method, path, exc)
            raise RequestTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.warning("WalletGate %s %s failed: %s", method, path, exc)
            raise WalletGateApiError(default_error) from exc
        latency_ms = round((time.perf_counter() - started) * 1000)

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.status_code == 429:
            logger.warning("WalletGate rate limit hit on %s %s", method, path)
            raise RateLimitedError(_retry_after(response, payload))
        if response.is_error:
            message = payload.get("error") or payload.get("message") or default_error
            logger.warning(
                "WalletGate %s %s -> %d: %s", method, path, response.status_code, message,
            )
            raise WalletGateApiError(str(message), status_code=response.status_code)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise WalletGateApiError(
                "WalletGate response has no session data", status_code=response.status_code,
            )
        return data, latency_ms

    @staticmethod
    def _parse_session(data: dict[str, Any]) -> SessionResponse:
        try:
            return SessionResponse.model_validate(data)
        except ValueError as exc:
            raise WalletGateApiError(f"Malformed session payload: {exc}") from exc


__all__ = ["WalletGateClient", "SESSIONS_PATH"]
