"""Decorators: @propagating and @do."""

from maybe_core.decorators.do import do
from maybe_core.decorators.propagating import propagating

__all__ = [
    'do',
    'propagating',
]
