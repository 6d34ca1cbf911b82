"""@propagating decorator: turn .bail() on Absent into an Absent return value."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from maybe_core._logging import get_logger
from maybe_core.maybe import AbsentType, Present
from maybe_core.propagate import Propagate

__all__ = ['propagating']

P = ParamSpec('P')
T = TypeVar('T')


def _short_circuit(wrapped: Callable[..., Any], p: Propagate) -> AbsentType:
    get_logger(__name__).debug(
        'absent_short_circuit',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
    )
    return p.value


def propagating(
    func: Callable[P, Present[T] | AbsentType] | Callable[P, Awaitable[Present[T] | AbsentType]],
) -> Callable[P, Present[T] | AbsentType] | Callable[P, Awaitable[Present[T] | AbsentType]]:
    """Decorator that returns Absent when the body bails on an Absent.

    Inside the decorated function, ``m.bail()`` (or ``with m as x:``)
    yields the value of a Present and aborts the call for Absent. Any
    other exception passes through untouched.

    Automatically detects async functions and handles them appropriately.

    Args:
        func: The function to wrap. Must return a Maybe.

    Returns:
        A wrapped function with the same signature.

    Example:
        ```python
        @propagating
        def living_space(person: Person) -> Maybe[int]:
            residence = person.residence.bail()
            return lift(sum(room.area for room in residence.rooms))
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[Present[T] | AbsentType]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Present[T] | AbsentType:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                return _short_circuit(wrapped, p)

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, Present[T] | AbsentType],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Present[T] | AbsentType:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return _short_circuit(wrapped, p)

    return sync_wrapper(func)  # type: ignore[return-value]
