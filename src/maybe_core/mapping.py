"""Maybe-returning lookups over mappings, and MaybeDict.

A plain ``dict`` lookup either succeeds or raises ``KeyError``; the
helpers here return ``Absent`` instead, so nested lookups compose with
``bind`` rather than nested ``try``/``if`` blocks.
"""

from __future__ import annotations

from collections.abc import Hashable, ItemsView, Iterator, KeysView, Mapping, ValuesView
from typing import Any

from maybe_core.maybe import Absent, AbsentType, Maybe, Present

__all__ = ['MaybeDict', 'lookup', 'lookup_path']


def lookup[K, V](mapping: Mapping[K, V], key: K) -> Maybe[V]:
    """Look up a key, returning Present(value) or Absent.

    Args:
        mapping: Any mapping (dict, MappingProxyType, ...).
        key: The key to look up.

    Returns:
        Maybe[V]: Present(mapping[key]) if the key exists, otherwise Absent.
    """
    if key in mapping:
        return Present(mapping[key])
    return Absent


def _step(key: Any) -> Any:
    def step(value: Any) -> Maybe[Any]:
        if isinstance(value, MaybeDict):
            return value[key]
        if isinstance(value, Mapping):
            return lookup(value, key)
        return Absent

    return step


def lookup_path(mapping: Mapping[Any, Any] | MaybeDict[Any, Any], *keys: Any) -> Maybe[Any]:
    """Walk nested mappings key by key.

    Example:
        ```python
        lookup_path({1: {2: {3: 'Hello!'}}}, 1, 2, 3)  # Present(value='Hello!')
        lookup_path({1: {2: {3: 'Hello!'}}}, 1, 9, 3)  # Absent
        ```

    Args:
        mapping: The outermost mapping.
        *keys: Keys to follow, outermost first.

    Returns:
        Maybe[Any]: Present(value) at the end of the path, or Absent as soon as
        a key is missing or an intermediate value is not a mapping. With no
        keys, Present(mapping).
    """
    result: Maybe[Any] = Present(mapping)
    for key in keys:
        result = result.bind(_step(key))
    return result


class MaybeDict[K: Hashable, V]:
    """Insertion-ordered dictionary whose lookups return Maybe.

    Reading a missing key gives Absent. Assigning ``Present(v)`` stores v;
    assigning ``Absent`` removes the key (missing keys are left alone).

    Example:
        ```python
        d = MaybeDict({'a': 1})
        d['a']            # Present(value=1)
        d['b']            # AbsentType()
        d['a'] = Absent   # removes 'a'
        ```
    """

    __slots__ = ('_store',)

    def __init__(self, items: Mapping[K, V] | None = None) -> None:
        self._store: dict[K, V] = dict(items) if items is not None else {}

    @classmethod
    def from_nested(cls, mapping: Mapping[Any, Any]) -> MaybeDict[Any, Any]:
        """Build a MaybeDict, converting nested mappings recursively."""
        return cls({
            key: cls.from_nested(value) if isinstance(value, Mapping) else value
            for key, value in mapping.items()
        })

    def __getitem__(self, key: K) -> Maybe[V]:
        return lookup(self._store, key)

    def __setitem__(self, key: K, value: Maybe[V]) -> None:
        if isinstance(value, Present):
            self._store[key] = value.value
        elif isinstance(value, AbsentType):
            self._store.pop(key, None)
        else:
            msg = f'MaybeDict values must be assigned as Present or Absent, got {type(value).__name__}'
            raise TypeError(msg)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[K]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MaybeDict):
            return self._store == other._store
        return NotImplemented

    def __repr__(self) -> str:
        return f'MaybeDict({self._store!r})'

    def keys(self) -> KeysView[K]:
        return self._store.keys()

    def values(self) -> ValuesView[V]:
        return self._store.values()

    def items(self) -> ItemsView[K, V]:
        return self._store.items()

    def get_path(self, *keys: Any) -> Maybe[Any]:
        """Nested lookup starting at this dictionary; see lookup_path()."""
        return lookup_path(self, *keys)
