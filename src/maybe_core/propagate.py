"""Propagate exception for the .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to carry Absent up the call stack.

    It is caught by the @propagating decorator, which returns the carried
    value. The name does not end with "Error" because nothing went wrong:
    it is control flow, not a failure.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the value to hand back.

        Args:
            value: The Absent being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The value being propagated."""
        return self._value
