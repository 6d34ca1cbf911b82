"""Composition helpers: chain() and kleisli()."""

from maybe_core.compose.chain import chain, kleisli

__all__ = ['chain', 'kleisli']
