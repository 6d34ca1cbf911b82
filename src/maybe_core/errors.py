"""Error types raised by maybe_core."""

from __future__ import annotations

__all__ = ['AbsentValueError']


class AbsentValueError(RuntimeError):
    """A value was demanded from Absent (unwrap/expect)."""

    def __init__(self, message: str = 'Called unwrap on Absent') -> None:
        self.message = message
        super().__init__(message)
