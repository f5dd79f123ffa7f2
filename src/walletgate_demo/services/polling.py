"""
walletgate_demo/services/polling.py — Session status poller.

Re-fetches a WalletGate session until one of:
    1. the status is terminal (completed / failed / expired);
    2. ``expiresAt`` has passed — reported locally as ``expired``;
    3. ``max_attempts`` fetches have been made;
    4. the poller is cancelled.

Fetch errors are logged and the next attempt goes ahead as planned.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable

from walletgate_demo.adapters.walletgate_client import WalletGateClient
from walletgate_demo.exceptions import WalletGateApiError
from walletgate_demo.models.enums import SessionStatus
from walletgate_demo.models.session import SessionResponse

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[SessionResponse], Awaitable[None] | None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionPoller:
    """
    Explicit, cancellable polling task for one session.

    Usage::

        poller = SessionPoller(client, session, interval=10, on_update=cb)
        poller.start()
        final = await poller.wait()
    """

    def __init__(
        self,
        client: WalletGateClient,
        session: SessionResponse,
        interval: float = 10.0,
        max_attempts: int = 90,
        on_update: UpdateCallback | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._client = client
        self._session = session
        self._interval = interval
        self._max_attempts = max_attempts
        self._on_update = on_update
        self._clock = clock
        self._task: asyncio.Task[SessionResponse] | None = None
        self.attempts = 0

    @property
    def session(self) -> SessionResponse:
        """Latest known session."""
        return self._session

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task[SessionResponse]:
        if self._task is None:
            self._task = asyncio.create_task(
                self.run(), name=f"poll-session-{self._session.short_id}"
            )
        return self._task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.info("Polling for session %s cancelled", self._session.short_id)

    async def wait(self) -> SessionResponse:
        """Awaits the task; after cancellation returns the last known session."""
        task = self.start()
        await asyncio.wait({task})
        if task.cancelled():
            return self._session
        return task.result()

    def _deadline_passed(self) -> bool:
        expires_at = self._session.expires_at
        if expires_at is None:
            return False
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return self._clock() >= expires_at

    async def _notify(self, session: SessionResponse) -> None:
        if self._on_update is None:
            return
        result = self._on_update(session)
        if asyncio.iscoroutine(result):
            await result

    async def run(self) -> SessionResponse:
        """Polling loop. Returns the final session."""
        while self._session.status.is_active:
            if self.attempts >= self._max_attempts:
                logger.warning(
                    "Polling for session %s gave up after %d attempts",
                    self._session.short_id, self.attempts,
                )
                return self._session
            if self._deadline_passed():
                self._session = self._session.model_copy(
                    update={"status": SessionStatus.EXPIRED}
                )
                logger.info("Session %s expired while waiting", self._session.short_id)
                await self._notify(self._session)
                return self._session

            await asyncio.sleep(self._interval)
            self.attempts += 1
            try:
                fetched = await self._client.get_session(self._session.id)
            except WalletGateApiError as exc:
                logger.warning(
                    "Polling session %s failed (attempt %d): %s",
                    self._session.short_id, self.attempts, exc.message,
                )
                continue
            self._session = fetched
            await self._notify(fetched)

        logger.info(
            "Session %s reached status %s", self._session.short_id, self._session.status.value,
        )
        return self._session


__all__ = ["SessionPoller"]
