"""Tests for chain() and kleisli()."""

import pytest
from hypothesis import given
from maybe_core import Absent, Present, chain, kleisli, lift, lookup

from tests.strategies import int_maybes, maybe_functions


class TestChain:
    """Tests for chain()."""

    def test_chain_without_functions_returns_input(self):
        m = Present(3)
        assert chain(m) is m
        assert chain(Absent) is Absent

    def test_chain_applies_in_order(self):
        result = chain(
            Present(2),
            lambda x: Present(x + 1),
            lambda x: Present(x * 10),
            lambda x: Present(str(x)),
        )
        assert result == Present('30')

    def test_chain_short_circuits(self, call_log):
        def f1(x):
            call_log.append('f1')
            return Absent

        def f2(x):
            call_log.append('f2')
            return Present(x)

        assert chain(Present(1), f1, f2) is Absent
        assert call_log == ['f1']

    def test_chain_from_absent_calls_nothing(self, call_log):
        def f(x):
            call_log.append('f')
            return Present(x)

        assert chain(Absent, f, f, f) is Absent
        assert call_log == []

    def test_chain_rejects_bare_return_value(self):
        """A function returning a plain value is an error, not implicitly lifted."""
        with pytest.raises(TypeError, match='wrap it with lift'):
            chain(Present(1), lambda x: x + 1)

    def test_chain_rejects_bare_start(self):
        with pytest.raises(TypeError, match='needs a Present or Absent'):
            chain(1, lift)

    def test_chain_nested_dictionary(self):
        """Nested lookups, one bind per level."""
        nested = {1: {2: {3: {4: {5: 'Hello!'}}}}}
        found = chain(
            lookup(nested, 1),
            lambda d: lookup(d, 2),
            lambda d: lookup(d, 3),
            lambda d: lookup(d, 4),
            lambda d: lookup(d, 5),
        )
        assert found == Present('Hello!')
        missing = chain(lookup(nested, 1), lambda d: lookup(d, 7), lambda d: lookup(d, 3))
        assert missing is Absent

    def test_chain_propagates_errors(self):
        def boom(_):
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            chain(Present(1), boom)

    @given(int_maybes, maybe_functions, maybe_functions)
    def test_chain_matches_bind(self, v, f, g):
        assert chain(v, f, g) == v.bind(f).bind(g)


class TestKleisli:
    """Tests for kleisli()."""

    def test_kleisli_composes(self):
        def parse(s):
            return Present(int(s)) if s.isdigit() else Absent

        def reciprocal(n):
            return Present(1 / n) if n else Absent

        parse_reciprocal = kleisli(parse, reciprocal)
        assert parse_reciprocal('4') == Present(0.25)
        assert parse_reciprocal('0') is Absent
        assert parse_reciprocal('x') is Absent

    def test_kleisli_empty_is_lift(self):
        assert kleisli()(5) == Present(5)

    @given(maybe_functions, maybe_functions, maybe_functions)
    def test_kleisli_associative(self, f, g, h):
        left = kleisli(kleisli(f, g), h)
        right = kleisli(f, kleisli(g, h))
        for x in (-3, 0, 4, 7):
            assert left(x) == right(x)
