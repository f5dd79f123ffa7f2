"""
walletgate_demo/services/checkout_service.py — Per-visitor checkout flow.

State of one storefront visit, modelled with explicit enums instead of
string comparisons:
    • View: store → checkout → result
    • SessionStatus: idle → pending → in_progress → completed | failed | expired

``CheckoutFlow`` owns no network code of its own. Sessions are created and
simulated through the injected ``WalletGateClient``; status polling is
delegated to ``SessionPoller``.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from walletgate_demo.adapters.walletgate_client import WalletGateClient
from walletgate_demo.exceptions import DemoError, NoChecksError
from walletgate_demo.models.checks import CheckDescriptor
from walletgate_demo.models.enums import SessionStatus, SimulationOutcome, View
from walletgate_demo.models.product import PriceBreakdown, Product, RequirementLine
from walletgate_demo.models.session import SessionResponse
from walletgate_demo.services import catalogue
from walletgate_demo.services.check_builder import build_product_checks
from walletgate_demo.services.polling import SessionPoller
from walletgate_demo.services.snippets import format_check_name, format_time_left

logger = logging.getLogger(__name__)

SHARE_LINK = "https://demo.walletgate.app"

# Statuses that move the visitor from the modal to the result page.
_RESULT_STATUSES = frozenset({SessionStatus.COMPLETED, SessionStatus.FAILED})


def modal_status_label(status: SessionStatus, all_passed: bool) -> str:
    """Text of the status pill in the verification modal."""
    if status is SessionStatus.COMPLETED:
        return "Verified!" if all_passed else "Declined"
    labels = {
        SessionStatus.IDLE: "Ready",
        SessionStatus.PENDING: "Waiting for scan",
        SessionStatus.IN_PROGRESS: "Verifying...",
        SessionStatus.FAILED: "Declined",
        SessionStatus.EXPIRED: "Expired",
    }
    return labels[status]


class CheckoutFlow:
    """One visitor's way through store, checkout and result."""

    def __init__(
        self,
        client: WalletGateClient,
        poll_interval: float = 10.0,
        poll_max_attempts: int = 90,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._poll_interval = poll_interval
        self._poll_max_attempts = poll_max_attempts
        self._monotonic = monotonic
        self._poller: SessionPoller | None = None

        self.view = View.STORE
        self.selected_product: Product | None = None
        self.order_id = catalogue.generate_order_id()
        self._reset()

    # ═══════════════════════════════════════════════════════════════════
    # NAVIGATION
    # ═══════════════════════════════════════════════════════════════════

    def _reset(self) -> None:
        self.stop_polling()
        self.session: SessionResponse | None = None
        self.status = SessionStatus.IDLE
        self.error: str | None = None
        self.loading = False
        self.show_modal = False
        self.started_at: float | None = None
        self.finished_at: float | None = None
        self.create_latency_ms: int | None = None
        self.simulate_latency_ms: int | None = None

    def go_to_store(self) -> None:
        self._reset()
        self.selected_product = None
        self.view = View.STORE

    def go_to_checkout(self, product_id: str) -> Product:
        product = catalogue.get_product(product_id)
        self._reset()
        self.selected_product = product
        self.order_id = catalogue.generate_order_id()
        self.view = View.CHECKOUT
        return product

    def retry(self) -> None:
        """Back to checkout for the same product with a fresh order id."""
        self._reset()
        self.order_id = catalogue.generate_order_id()
        self.view = View.CHECKOUT if self.selected_product else View.STORE

    # ═══════════════════════════════════════════════════════════════════
    # DERIVED STATE
    # ═══════════════════════════════════════════════════════════════════

    @property
    def checks(self) -> list[CheckDescriptor]:
        if self.selected_product is None:
            return []
        return build_product_checks(self.selected_product)

    @property
    def requirements(self) -> list[RequirementLine]:
        if self.selected_product is None:
            return []
        return catalogue.describe_requirements(self.selected_product)

    @property
    def pricing(self) -> PriceBreakdown | None:
        if self.selected_product is None:
            return None
        return catalogue.price_breakdown(self.selected_product)

    @property
    def all_passed(self) -> bool:
        return self.session.all_passed if self.session else False

    @property
    def short_session_id(self) -> str:
        return self.session.short_id if self.session else "--------"

    @property
    def status_label(self) -> str:
        return modal_status_label(self.status, self.all_passed)

    @property
    def elapsed_seconds(self) -> int | None:
        """Seconds from session creation to a completed/failed result."""
        if self.started_at is None or self.finished_at is None:
            return None
        return round(self.finished_at - self.started_at)

    def time_left(self, now: datetime | None = None) -> str:
        expires_at = self.session.expires_at if self.session else None
        return format_time_left(expires_at, now or datetime.now(timezone.utc))

    # ═══════════════════════════════════════════════════════════════════
    # WALLETGATE CALLS
    # ═══════════════════════════════════════════════════════════════════

    async def start_verification(self) -> SessionResponse:
        """
        Creates a WalletGate session for the selected product.

        On failure the message is kept in ``error`` for display and the
        exception is re-raised.
        """
        if self.selected_product is None:
            raise NoChecksError("No product selected.")
        self.error = None
        self.create_latency_ms = None
        self.simulate_latency_ms = None

        checks = self.checks
        if not checks:
            error = NoChecksError()
            self.error = error.message
            raise error

        self.loading = True
        try:
            timed = await self._client.create_session(checks)
        except DemoError as exc:
            self.error = exc.message
            logger.warning(
                "Verification start failed for %s: %s", self.selected_product.id, exc.message,
            )
            raise
        finally:
            self.loading = False

        self.create_latency_ms = timed.latency_ms
        self.started_at = self._monotonic()
        self.show_modal = True
        self.apply_session(timed.session)
        return timed.session

    async def simulate(self, outcome: SimulationOutcome | str) -> SessionResponse | None:
        if self.session is None:
            return None
        self.loading = True
        try:
            timed = await self._client.simulate(self.session.id, outcome)
        except DemoError as exc:
            self.error = exc.message
            raise
        finally:
            self.loading = False
        self.simulate_latency_ms = timed.latency_ms
        self.apply_session(timed.session)
        return timed.session

    def apply_session(self, session: SessionResponse) -> None:
        """Takes a fresh session snapshot; completed/failed opens the result page."""
        self.session = session
        self.status = session.status
        if session.status in _RESULT_STATUSES:
            if self.finished_at is None and self.started_at is not None:
                self.finished_at = self._monotonic()
            self.stop_polling()
            self.show_modal = False
            self.view = View.RESULT

    # ═══════════════════════════════════════════════════════════════════
    # POLLING
    # ═══════════════════════════════════════════════════════════════════

    def start_polling(self) -> SessionPoller | None:
        """Starts polling while the session waits for the wallet."""
        if self.session is None or not self.status.is_active:
            return None
        if self._poller is not None and self._poller.running:
            return self._poller
        self._poller = SessionPoller(
            self._client,
            self.session,
            interval=self._poll_interval,
            max_attempts=self._poll_max_attempts,
            on_update=self._on_poll_update,
        )
        self._poller.start()
        return self._poller

    def stop_polling(self) -> None:
        if self._poller is not None:
            self._poller.cancel()
            self._poller = None

    def _on_poll_update(self, session: SessionResponse) -> None:
        # Detach the poller first so apply_session does not cancel the running task.
        if session.status.is_terminal:
            self._poller = None
        self.apply_session(session)

    # ═══════════════════════════════════════════════════════════════════
    # SHARING
    # ═══════════════════════════════════════════════════════════════════

    def share_summary(self) -> str | None:
        """Plain-text summary of the result, or None before a session exists."""
        if self.selected_product is None or self.session is None:
            return None
        checks = ""
        if self.session.results:
            checks = ", ".join(
                f"{format_check_name(key)} {'✓' if passed else '✗'}"
                for key, passed in self.session.results.items()
            )
        lines = [
            "WalletGate Demo Result",
            f"Product: {self.selected_product.name}",
            f"Checks: {checks}",
            f"API Latency: {self.create_latency_ms}ms" if self.create_latency_ms is not None else "",
            f"Risk Score: {round(self.session.risk_score * 100)}%"
            if self.session.risk_score is not None else "",
            f"Verified in: {self.elapsed_seconds}s" if self.elapsed_seconds is not None else "",
            "",
            f"Try it: {SHARE_LINK}",
        ]
        return "\n".join(line for line in lines if line)


__all__ = ["CheckoutFlow", "modal_status_label"]
