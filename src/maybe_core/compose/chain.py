"""chain() and kleisli() for threading a Maybe through Maybe-returning functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from maybe_core.maybe import AbsentType, Maybe, Present

__all__ = ['chain', 'kleisli']


def _bind_checked(current: Present[Any], fn: Callable[[Any], Any]) -> Maybe[Any]:
    """Bind one step, rejecting bare return values."""
    result = fn(current.value)
    if isinstance(result, Present | AbsentType):
        return result
    name = getattr(fn, '__qualname__', repr(fn))
    msg = f'{name} returned {type(result).__name__}, expected Present or Absent; wrap it with lift()'
    raise TypeError(msg)


# Overloads for type inference (up to 5 functions)
@overload
def chain[T](m: Maybe[T], /) -> Maybe[T]: ...
@overload
def chain[T, T1](m: Maybe[T], fn1: Callable[[T], Maybe[T1]], /) -> Maybe[T1]: ...
@overload
def chain[T, T1, T2](
    m: Maybe[T], fn1: Callable[[T], Maybe[T1]], fn2: Callable[[T1], Maybe[T2]], /
) -> Maybe[T2]: ...
@overload
def chain[T, T1, T2, T3](
    m: Maybe[T],
    fn1: Callable[[T], Maybe[T1]],
    fn2: Callable[[T1], Maybe[T2]],
    fn3: Callable[[T2], Maybe[T3]],
    /,
) -> Maybe[T3]: ...
@overload
def chain[T, T1, T2, T3, T4](
    m: Maybe[T],
    fn1: Callable[[T], Maybe[T1]],
    fn2: Callable[[T1], Maybe[T2]],
    fn3: Callable[[T2], Maybe[T3]],
    fn4: Callable[[T3], Maybe[T4]],
    /,
) -> Maybe[T4]: ...
@overload
def chain[T, T1, T2, T3, T4, T5](
    m: Maybe[T],
    fn1: Callable[[T], Maybe[T1]],
    fn2: Callable[[T1], Maybe[T2]],
    fn3: Callable[[T2], Maybe[T3]],
    fn4: Callable[[T3], Maybe[T4]],
    fn5: Callable[[T4], Maybe[T5]],
    /,
) -> Maybe[T5]: ...


def chain(m: Any, *fns: Callable[..., Any]) -> Any:
    """Bind a Maybe through a sequence of Maybe-returning functions.

    Equivalent to ``m.bind(fn1).bind(fn2)...``. Once a step yields Absent
    the remaining functions are never called.

    Args:
        m: The starting Maybe.
        *fns: Functions from a plain value to a Maybe.

    Returns:
        The Maybe produced by the last function, or Absent.

    Raises:
        TypeError: If m is not a Maybe, or a function returns a bare value.

    Example:
        ```python
        nested = {1: {2: {3: 'Hello!'}}}
        chain(
            lookup(nested, 1),
            lambda d: lookup(d, 2),
            lambda d: lookup(d, 3),
        )
        # Present(value='Hello!')
        ```
    """
    if not isinstance(m, Present | AbsentType):
        msg = f'chain() needs a Present or Absent to start from, got {type(m).__name__}'
        raise TypeError(msg)

    current: Any = m
    for fn in fns:
        if isinstance(current, AbsentType):
            return current
        current = _bind_checked(current, fn)
    return current


def kleisli(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose Maybe-returning functions left to right into one function.

    ``kleisli(f, g)(x)`` is ``lift(x).bind(f).bind(g)``.

    Args:
        *fns: Functions from a plain value to a Maybe.

    Returns:
        A function from a plain value to a Maybe.
    """

    def composed(value: Any) -> Any:
        return chain(Present(value), *fns)

    return composed
