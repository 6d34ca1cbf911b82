"""Hypothesis strategies for property-based testing of maybe_core types."""

from collections.abc import Callable

from hypothesis import strategies as st
from maybe_core import Absent, Maybe, Present

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers(min_value=-(10**6), max_value=10**6)
texts = st.text(min_size=0, max_size=100)

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# -----------------------------------------------------------------------------
# Maybe strategies
# -----------------------------------------------------------------------------


def maybes[T](elements: st.SearchStrategy[T]) -> st.SearchStrategy[Maybe[T]]:
    """Generate Absent or Present(x) for x drawn from elements."""
    return st.one_of(st.just(Absent), elements.map(Present))


int_maybes = maybes(integers)
text_maybes = maybes(texts)

# Pure total functions int -> int
int_functions: st.SearchStrategy[Callable[[int], int]] = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    abs,
    lambda x: x // 3,
])

# Functions int -> Maybe[int], covering both outcomes
maybe_functions: st.SearchStrategy[Callable[[int], Maybe[int]]] = st.sampled_from([
    lambda x: Present(x + 1),
    lambda x: Present(x * 2),
    lambda x: Absent,
    lambda x: Present(x) if x % 2 == 0 else Absent,
    lambda x: Present(-x) if x > 0 else Absent,
])
