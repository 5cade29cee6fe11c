"""
DreamRoom Exceptions

Errors that reach the HTTP layer. Each carries a human-readable message and
a stable error code; main.py maps them to status codes.
Remote generation failures are not listed here: they become chat turns.
"""


class DreamRoomError(Exception):
    """Base class for all DreamRoom errors."""

    error_code = "DREAMROOM_ERROR"

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class InvalidImageError(DreamRoomError):
    """Uploaded bytes could not be decoded as an image."""

    error_code = "INVALID_IMAGE"


class SessionNotFoundError(DreamRoomError):
    error_code = "SESSION_NOT_FOUND"

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class SessionBusyError(DreamRoomError):
    """A request arrived while another one was still in flight for the session."""

    error_code = "SESSION_BUSY"

    def __init__(self, session_id: str):
        super().__init__(
            f"Session {session_id} is already processing a request. Wait for it to finish."
        )
        self.session_id = session_id
