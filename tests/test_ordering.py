"""Tests for Maybe ordering: Absent first, Present values by payload."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from maybe_core import Absent, Present

from tests.strategies import int_maybes, integers, text_maybes


def _sort_key(m):
    return (0,) if m.is_absent() else (1, m.value)


class TestLessThan:
    """The four canonical orderings."""

    def test_absent_before_any_present(self):
        """Absent < Present(_) for any payload."""
        assert Absent < Present(0)
        assert Absent < Present(-(10**9))
        assert Absent < Present('')
        assert Absent < Present(None)

    def test_present_by_payload(self):
        assert Present(3) < Present(5)
        assert not Present(5) < Present(3)

    def test_absent_not_less_than_absent(self):
        assert not Absent < Absent

    def test_present_never_less_than_absent(self):
        assert not Present(-1) < Absent


class TestOtherOperators:
    """<=, > and >= follow the same rule."""

    def test_less_equal(self):
        assert Absent <= Absent
        assert Absent <= Present(1)
        assert Present(1) <= Present(1)
        assert not Present(1) <= Absent

    def test_greater(self):
        assert Present(1) > Absent
        assert Present(5) > Present(3)
        assert not Absent > Absent
        assert not Absent > Present(1)

    def test_greater_equal(self):
        assert Absent >= Absent
        assert Present(1) >= Absent
        assert Present(2) >= Present(2)
        assert not Absent >= Present(1)


class TestNoImplicitWrapping:
    """A Maybe only compares with another Maybe."""

    @pytest.mark.parametrize(
        'compare',
        [
            lambda: Absent < 0,
            lambda: Absent <= 0,
            lambda: Absent > 0,
            lambda: Absent >= 0,
            lambda: Present(1) < 2,
            lambda: 0 < Present(1),
            lambda: 'a' > Absent,
        ],
    )
    def test_comparison_with_bare_value_raises(self, compare):
        """Absent < 0 must not silently evaluate to True."""
        with pytest.raises(TypeError):
            compare()

    def test_unorderable_payloads_raise(self):
        """Errors from comparing payloads reach the caller."""
        with pytest.raises(TypeError):
            Present(None) < Present(1)  # noqa: B015


class TestTotalOrder:
    """Property tests over orderable payloads."""

    @given(int_maybes, int_maybes)
    def test_matches_reference_key(self, a, b):
        assert (a < b) == (_sort_key(a) < _sort_key(b))
        assert (a <= b) == (_sort_key(a) <= _sort_key(b))
        assert (a > b) == (_sort_key(a) > _sort_key(b))
        assert (a >= b) == (_sort_key(a) >= _sort_key(b))

    @given(int_maybes, int_maybes)
    def test_trichotomy(self, a, b):
        """Exactly one of a < b, a == b, a > b holds."""
        assert [a < b, a == b, a > b].count(True) == 1

    @given(text_maybes, text_maybes, text_maybes)
    def test_transitivity(self, a, b, c):
        if a < b and b < c:
            assert a < c

    @given(st.lists(int_maybes))
    def test_sorted_puts_absent_first(self, ms):
        result = sorted(ms)
        absent_count = ms.count(Absent)
        assert all(m is Absent for m in result[:absent_count])
        payloads = [m.value for m in result[absent_count:]]
        assert payloads == sorted(payloads)

    @given(integers)
    def test_min_max(self, x):
        assert min(Present(x), Absent) is Absent
        assert max(Present(x), Absent) == Present(x)
