"""Maybe type: Present[T] | Absent for optional values.

Absence is a normal variant, not an error. Both variants are immutable
msgspec structs; every operation builds a new value.

Ordering is explicit: ``Absent`` sorts before any ``Present``, two
``Present`` values sort by their payloads. A ``Maybe`` is never compared
with a bare value, so ``Absent < 0`` raises ``TypeError``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from maybe_core.errors import AbsentValueError
from maybe_core.propagate import Propagate

__all__ = ['Absent', 'AbsentType', 'Maybe', 'Present']


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Maybe holding a value of type T.

    Examples:
        >>> Present(42).map(lambda x: x * 2)
        Present(value=84)
        >>> Present(3) < Present(5)
        True
        >>> Absent < Present(-1)
        True
    """

    value: T

    def __enter__(self) -> T:
        """Context manager entry - returns the contained value."""
        return self.value

    def __exit__(self, *_: object) -> None:
        pass

    def __str__(self) -> str:
        return f'{{Present {self.value}}}'

    # Ordering against another Maybe only; anything else is NotImplemented.

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self.value < other.value
        if isinstance(other, AbsentType):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self.value <= other.value
        if isinstance(other, AbsentType):
            return False
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self.value > other.value
        if isinstance(other, AbsentType):
            return True
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Present):
            return self.value >= other.value
        if isinstance(other, AbsentType):
            return True
        return NotImplemented

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value. Exceptions it raises
                reach the caller unchanged.

        Returns:
            Present containing f(value).
        """
        return Present(f(self.value))

    def bind[U](self, f: Callable[[T], Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Apply a Maybe-returning function to the contained value.

        Also known as flatMap or ``>>=``. The result of f is returned as
        is, never wrapped a second time.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value) without calling the default factory."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | AbsentType:
        """Return self if the predicate holds for the value, else Absent."""
        if predicate(self.value):
            return self
        return Absent

    def or_(self, _other: Present[T] | AbsentType) -> Present[T]:
        """Return self, ignoring the alternative."""
        return self

    def or_else(self, _f: Callable[[], Present[T] | AbsentType]) -> Present[T]:
        """Return self unchanged since this is Present."""
        return self

    def zip[U](self, other: Present[U] | AbsentType) -> Present[tuple[T, U]] | AbsentType:
        """Pair two present values into Present((a, b)).

        Returns Absent if other is Absent.
        """
        if isinstance(other, Present):
            return Present((self.value, other.value))
        return Absent

    def apply[A, B](
        self: Present[Callable[[A], B]], other: Present[A] | AbsentType
    ) -> Present[B] | AbsentType:
        """Apply the contained function to the value inside other.

        Args:
            other: Maybe holding the argument.

        Returns:
            Present(f(x)) if other is Present(x), else Absent.
        """
        if isinstance(other, Present):
            return Present(self.value(other.value))
        return Absent

    def flatten[U](self: Present[Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Remove one level of nesting: Present(Present(x)) -> Present(x).

        Raises:
            TypeError: If the contained value is not a Maybe.
        """
        if isinstance(self.value, Present | AbsentType):
            return self.value
        msg = f'flatten() needs a nested Maybe, got {type(self.value).__name__}'
        raise TypeError(msg)

    def bail(self) -> T:
        """Return the contained value (no-op for Present).

        For Absent this raises Propagate, which @propagating turns back
        into an Absent return value.
        """
        return self.value


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Maybe: no value.

    Use the ``Absent`` singleton rather than instantiating this class;
    all instances compare equal anyway.

    Examples:
        >>> Absent.map(lambda x: x * 2) is Absent
        True
        >>> Absent.unwrap_or(0)
        0
    """

    def __enter__(self) -> NoReturn:
        """Context manager entry - raises Propagate for Absent."""
        raise Propagate(self)

    def __exit__(self, *_: object) -> None:
        pass

    def __str__(self) -> str:
        return '{Absent}'

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Present):
            return True
        if isinstance(other, AbsentType):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Present | AbsentType):
            return True
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Present | AbsentType):
            return False
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Present):
            return False
        if isinstance(other, AbsentType):
            return True
        return NotImplemented

    def is_present(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value to return.

        Raises:
            AbsentValueError: Always.
        """
        raise AbsentValueError('Called unwrap on Absent')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Absent."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a fallback value."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            AbsentValueError: Always, carrying msg.
        """
        raise AbsentValueError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return Absent without calling the function."""
        return self

    def bind[T, U](self, _f: Callable[[T], Present[U] | AbsentType]) -> AbsentType:
        """Return Absent without calling the function."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default without calling the function."""
        return default

    def map_or_else[T, U](self, default_fn: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute the default since there is no value to map."""
        return default_fn()

    def filter[T](self, _predicate: Callable[[T], bool]) -> AbsentType:
        """Return Absent without calling the predicate."""
        return self

    def or_[T](self, other: Present[T] | AbsentType) -> Present[T] | AbsentType:
        """Return other since self is Absent."""
        return other

    def or_else[T](self, f: Callable[[], Present[T] | AbsentType]) -> Present[T] | AbsentType:
        """Compute a replacement Maybe since this is Absent."""
        return f()

    def zip[U](self, _other: Present[U] | AbsentType) -> AbsentType:
        """Return Absent; there is nothing to pair."""
        return self

    def apply[A](self, _other: Present[A] | AbsentType) -> AbsentType:
        """Return Absent; there is no function to apply."""
        return self

    def flatten(self) -> AbsentType:
        """Return Absent; there is no nesting to remove."""
        return self

    def bail(self) -> NoReturn:
        """Raise Propagate so an enclosing @propagating returns Absent.

        Raises:
            Propagate: Always, carrying this Absent.
        """
        raise Propagate(self)


Absent: AbsentType = AbsentType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Present[T] | AbsentType
