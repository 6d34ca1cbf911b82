"""maybe-core: an explicit optional value (Present | Absent) for Python 3.13+.

Flat imports (preferred):
    from maybe_core import Maybe, Present, Absent, lift, bind, fmap
    from maybe_core import chain, lookup_path, propagating, do

Submodule imports (for organization):
    from maybe_core.maybe import Present, Absent, Maybe
    from maybe_core.functions import sequence, traverse
    from maybe_core.mapping import MaybeDict
    from maybe_core.decorators import propagating
"""

# Configuration and logging
from maybe_core._config import MaybeConfig, get_config, init
from maybe_core._logging import configure_logging, get_logger

# Composition
from maybe_core.compose import chain, kleisli

# Decorators
from maybe_core.decorators import do, propagating

# Errors
from maybe_core.errors import AbsentValueError

# Free functions
from maybe_core.functions import (
    absent,
    apply,
    bind,
    cat_maybes,
    fmap,
    from_nullable,
    is_absent,
    is_present,
    lift,
    maybe,
    present,
    pure,
    sequence,
    traverse,
)

# Mappings
from maybe_core.mapping import MaybeDict, lookup, lookup_path

# Types
from maybe_core.maybe import Absent, AbsentType, Maybe, Present
from maybe_core.propagate import Propagate

__all__ = [
    # Types
    'Absent',
    'AbsentType',
    # Errors
    'AbsentValueError',
    'Maybe',
    # Configuration
    'MaybeConfig',
    # Mappings
    'MaybeDict',
    'Present',
    # Propagation
    'Propagate',
    # Free functions
    'absent',
    'apply',
    'bind',
    'cat_maybes',
    # Composition
    'chain',
    'configure_logging',
    # Decorators
    'do',
    'fmap',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'is_absent',
    'is_present',
    'kleisli',
    'lift',
    'lookup',
    'lookup_path',
    'maybe',
    'present',
    'propagating',
    'pure',
    'sequence',
    'traverse',
]
