"""
Single-flight guard

At most one redesign, edit or chat request runs per session. A second
request arriving while the slot is taken is rejected, never queued.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dreamroom.core.exceptions import SessionBusyError
from dreamroom.core import session as transitions
from dreamroom.models.state import DesignSession


class SingleFlightGuard:
    """One-slot guard around a session's remote calls."""

    def __init__(self, session: DesignSession):
        self._session = session
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def ensure_idle(self) -> None:
        """Raise SessionBusyError if a request is in flight."""
        if self.busy:
            raise SessionBusyError(self._session.session_id)

    @asynccontextmanager
    async def claim(self) -> AsyncIterator[DesignSession]:
        """
        Hold the slot for the duration of the block.

        The check and the acquire happen without an await in between, so two
        coroutines on the same loop can never both get in.
        """
        self.ensure_idle()
        async with self._lock:
            transitions.start_processing(self._session)
            try:
                yield self._session
            finally:
                transitions.finish_processing(self._session)
