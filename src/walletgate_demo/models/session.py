"""
walletgate_demo/models/session.py — WalletGate verification session models.

``SessionResponse`` mirrors the ``data`` object returned by
``/api/demo/sessions``. Field names follow Python, the camelCase
aliases follow the wire format.
"""

from datetime import datetime

from walletgate_demo.models.common import DemoBase
from walletgate_demo.models.checks import CheckDescriptor
from walletgate_demo.models.enums import SessionStatus, SimulationOutcome


class SessionResponse(DemoBase):
    """Remote verification session."""
    id: str
    status: SessionStatus = SessionStatus.PENDING
    verification_url: str | None = None
    created_at: datetime | None = None
    expires_at: datetime | None = None
    results: dict[str, bool] | None = None
    risk_score: float | None = None

    @property
    def all_passed(self) -> bool:
        """Every returned check passed; no results means not passed."""
        if not self.results:
            return False
        return all(self.results.values())

    @property
    def short_id(self) -> str:
        return self.id[:8] if self.id else "--------"


class SimulateRequest(DemoBase):
    """Body of ``POST /api/demo/sessions/{id}/simulate``."""
    outcome: SimulationOutcome


class TimedSession(DemoBase):
    """Session together with the round-trip latency of the call that produced it."""
    session: SessionResponse
    latency_ms: int


class CheckoutStarted(DemoBase):
    """Answer of the checkout endpoint: the new session and what was asked for."""
    order_id: str
    product_id: str
    checks: list[CheckDescriptor]
    session: SessionResponse
    latency_ms: int | None = None
    status_label: str
