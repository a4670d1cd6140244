"""Once-per-second refresh of the live duration of the current session."""

import asyncio
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from poker_tracker.schemas.domain import AppState
from poker_tracker.services.stats_service import duration_minutes, format_duration
from poker_tracker.services.store import Store


class ActiveSessionTicker:
    """Keeps ``display`` current while a session is in progress.

    ``session_id`` names the session the display was computed for, so a
    reader can tell a fresh value from one left over by an earlier session.

    The tick only reads the store. It is armed from a store listener,
    which may run on a worker thread, so the task is scheduled onto the
    event loop captured by ``attach``. The task ends on its own as soon
    as there is no current session.
    """

    def __init__(self, store: Store, interval: float = 1.0) -> None:
        self.store = store
        self.interval = interval
        self.display = ""
        self.session_id: str | None = None
        self.ticks = 0
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task[None] | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def attach(self, loop: asyncio.AbstractEventLoop) -> None:
        """Bind to the running loop and start ticking if a session is open."""
        self._loop = loop
        self._unsubscribe = self.store.subscribe(self._on_change)
        self._on_change(self.store.state)

    async def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug("Duration ticker cancelled")
            self._task = None

    def _on_change(self, state: AppState) -> None:
        if state.current_session is None or self._loop is None:
            return
        self._loop.call_soon_threadsafe(self._ensure_task)

    def _ensure_task(self) -> None:
        if not self.running and self._loop is not None:
            self._task = self._loop.create_task(self._run())

    def refresh(self, now: datetime | None = None) -> bool:
        """Recompute the display once. Returns False when no session is open."""
        session = self.store.state.current_session
        if session is None:
            self.display = ""
            self.session_id = None
            return False
        self.display = format_duration(duration_minutes(session, now))
        self.session_id = session.id
        self.ticks += 1
        return True

    def display_for(self, session_id: str) -> str | None:
        """The last rendered display if it belongs to ``session_id``."""
        if self.session_id != session_id or not self.display:
            return None
        return self.display

    async def _run(self) -> None:
        logger.debug("Duration ticker started")
        while self.refresh():
            await asyncio.sleep(self.interval)
        logger.debug("Duration ticker stopped: no session in progress")
