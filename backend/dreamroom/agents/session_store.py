"""Simple in-memory registry of design sessions."""

from functools import lru_cache
from typing import Callable, Dict, Optional

from dreamroom.agents.studio import DesignStudio
from dreamroom.core.exceptions import SessionNotFoundError
from dreamroom.tools.generation import GenerationTool


class SessionStore:
    """Create and look up per-session studios. Sessions live until the process exits."""

    def __init__(self, tool_factory: Optional[Callable[[], GenerationTool]] = None) -> None:
        self._studios: Dict[str, DesignStudio] = {}
        self._tool_factory = tool_factory or GenerationTool

    def create(self) -> DesignStudio:
        """Create a new, empty session."""
        studio = DesignStudio(tool_factory=self._tool_factory)
        self._studios[studio.session_id] = studio
        return studio

    def get(self, session_id: str) -> DesignStudio:
        """Return a session's studio or raise SessionNotFoundError."""
        studio = self._studios.get(session_id)
        if studio is None:
            raise SessionNotFoundError(session_id)
        return studio


@lru_cache()
def get_session_store() -> SessionStore:
    """Process-wide session store."""
    return SessionStore()
