"""@do decorator for generator-based do-notation over Maybe."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any, ParamSpec, TypeVar

import wrapt

from maybe_core._logging import get_logger
from maybe_core.maybe import AbsentType, Present

__all__ = ['do']

P = ParamSpec('P')
T = TypeVar('T')


def do(
    func: Callable[P, Generator[Present[Any] | AbsentType, Any, T]],
) -> Callable[P, Present[T] | AbsentType]:
    """Decorator for generator-based do-notation with Maybe.

    Yield a Maybe to receive its value. Yielding Absent stops the
    generator (it is closed, so ``finally`` blocks run) and the call
    returns Absent. The generator's return value is wrapped in Present.

    Args:
        func: A generator function that yields Maybes and returns T.

    Returns:
        A function that returns Maybe[T].

    Raises:
        TypeError: If the generator yields something other than a Maybe.

    Example:
        ```python
        @do
        def greeting(nested):
            a = yield lookup(nested, 1)
            b = yield lookup(a, 2)
            return b.upper()
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Present[Any] | AbsentType, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Present[T] | AbsentType:
        gen = wrapped(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                if isinstance(step, AbsentType):
                    gen.close()
                    get_logger(__name__).debug(
                        'absent_short_circuit',
                        function=getattr(wrapped, '__qualname__', repr(wrapped)),
                    )
                    return step
                if not isinstance(step, Present):
                    gen.close()
                    msg = f'@do generators must yield Present or Absent, got {type(step).__name__}'
                    raise TypeError(msg)
                step = gen.send(step.value)
        except StopIteration as e:
            return Present(e.value)

    return wrapper(func)  # type: ignore[return-value]
