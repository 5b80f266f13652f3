"""
Session module exceptions.
"""

from authgate.shared.exceptions import LogicError


class SessionReadOnlyError(LogicError):
    """Raised when writing to a session that can't be modified server side."""

    def __init__(self, session_type: str):
        super().__init__(
            f"Unable to persist auth info when using {session_type}",
            code="SESSION_READ_ONLY",
            details={"session_type": session_type},
        )
