"""Free-function API over Maybe values.

Each function takes the Maybe as an explicit first argument, mirroring
the methods on Present/Absent, so transformations can be passed around
and composed without bound methods.

Example:
    ```python
    from maybe_core import Absent
    from maybe_core.functions import bind, fmap, lift

    bind(lift(3), lambda x: lift(x + 1))  # Present(value=4)
    fmap(Absent, str)                      # Absent
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeIs

from maybe_core.maybe import Absent, AbsentType, Maybe, Present

__all__ = [
    'absent',
    'apply',
    'bind',
    'cat_maybes',
    'fmap',
    'from_nullable',
    'is_absent',
    'is_present',
    'lift',
    'maybe',
    'present',
    'pure',
    'sequence',
    'traverse',
]


def present[T](value: T) -> Maybe[T]:
    """Wrap a value in Present.

    Args:
        value: The value to wrap. None is wrapped like any other value.

    Returns:
        Maybe[T]: Present(value).
    """
    return Present(value)


def absent() -> AbsentType:
    """Return the Absent singleton."""
    return Absent


def lift[T](value: T) -> Maybe[T]:
    """Lift a bare value into Maybe.

    This is the explicit counterpart of implicit optional wrapping: it is
    the only way a plain value becomes a Maybe.

    Args:
        value: The value to lift.

    Returns:
        Maybe[T]: Present(value).
    """
    return Present(value)


pure = lift


def from_nullable[T](value: T | None) -> Maybe[T]:
    """Convert a nullable value to Maybe.

    Args:
        value: The value that may be None.

    Returns:
        Maybe[T]: Present(value) if value is not None, otherwise Absent.
    """
    return Present(value) if value is not None else Absent


def is_present[T](m: Maybe[T]) -> TypeIs[Present[T]]:
    """Check if a Maybe holds a value."""
    return isinstance(m, Present)


def is_absent[T](m: Maybe[T]) -> TypeIs[AbsentType]:
    """Check if a Maybe holds no value."""
    return isinstance(m, AbsentType)


def fmap[T, U](m: Maybe[T], f: Callable[[T], U]) -> Maybe[U]:
    """Transform the value inside a Maybe if present.

    Args:
        m: The Maybe to transform.
        f: Function to apply to the value. Never called for Absent.

    Returns:
        Maybe[U]: Present(f(x)) if m is Present(x), otherwise Absent.
    """
    return m.map(f)


def bind[T, U](m: Maybe[T], f: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """Chain a computation that may itself produce Absent.

    Args:
        m: The Maybe to chain from.
        f: Function that takes the value and returns a Maybe.

    Returns:
        Maybe[U]: f(x) if m is Present(x), otherwise Absent.
    """
    return m.bind(f)


def apply[A, B](mf: Maybe[Callable[[A], B]], mx: Maybe[A]) -> Maybe[B]:
    """Apply a function held in a Maybe to a value held in a Maybe.

    Args:
        mf: Maybe holding a one-argument function.
        mx: Maybe holding the argument.

    Returns:
        Maybe[B]: Present(f(x)) if both are present, otherwise Absent.
    """
    return mf.apply(mx)


def maybe[T, U](default: U, m: Maybe[T], f: Callable[[T], U]) -> U:
    """Eliminate a Maybe: apply f to a present value or fall back to default.

    Example:
        ```python
        maybe(False, person.pet, lambda pet: pet.age < 4)
        ```

    Args:
        default: Result for Absent.
        m: The Maybe to inspect.
        f: Function applied to the value if present.

    Returns:
        U: f(x) for Present(x), otherwise default.
    """
    return m.map_or(default, f)


def sequence[T](ms: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Collect values from an iterable of Maybes, stopping at the first Absent.

    The iterable is consumed lazily, so a generator is not advanced past
    the first Absent.

    Args:
        ms: An iterable of Maybe instances.

    Returns:
        Maybe[list[T]]: Present with every value if all are present, otherwise Absent.
    """
    out: list[T] = []
    for m in ms:
        if isinstance(m, Present):
            out.append(m.value)
        else:
            return Absent
    return Present(out)


def traverse[U, T](xs: Iterable[U], f: Callable[[U], Maybe[T]]) -> Maybe[list[T]]:
    """Map a Maybe-returning function over xs and collect the results.

    f is not called on elements after the first one that yields Absent.

    Args:
        xs: Values to map over.
        f: Function returning a Maybe.

    Returns:
        Maybe[list[T]]: Present with all results, or Absent.
    """
    return sequence(f(x) for x in xs)


def cat_maybes[T](ms: Iterable[Maybe[T]]) -> list[T]:
    """Return the values of the present elements, dropping Absent ones."""
    return [m.value for m in ms if isinstance(m, Present)]
