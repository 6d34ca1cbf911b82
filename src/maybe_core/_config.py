"""Library configuration: MaybeConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from maybe_core._logging import configure_logging

__all__ = [
    'MaybeConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class MaybeConfig:
    """Configuration for maybe_core.

    Attributes:
        log_level: Logging level (e.g. "DEBUG"). None = logging left unconfigured.
        json_logs: Emit JSON logs if True, console-formatted logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Set by init()
_config: MaybeConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MAYBE_LOG_LEVEL.

    Unknown values are reported and ignored.
    """
    env_level = os.environ.get('MAYBE_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown MAYBE_LOG_LEVEL value '%s', leaving logging unconfigured", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the output format from MAYBE_LOG_FORMAT ("json" or "console").

    Defaults to JSON.
    """
    env_format = os.environ.get('MAYBE_LOG_FORMAT', '').strip().lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown MAYBE_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> MaybeConfig:
    """Initialize maybe_core with the given configuration.

    Arguments left as None are read from the environment
    (MAYBE_LOG_LEVEL, MAYBE_LOG_FORMAT).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from env,
            and if unset there, logging is not configured.
        json_logs: JSON (True) or console (False) output. None = from env.

    Returns:
        The MaybeConfig that was set.

    Raises:
        ValueError: If log_level is not a known level name.

    Example:
        ```python
        from maybe_core import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.upper()
        if resolved_level not in _LOG_LEVELS:
            msg = f'Unknown log level {log_level!r}; expected one of {", ".join(_LOG_LEVELS)}'
            raise ValueError(msg)

    resolved_json = _detect_json_logs() if json_logs is None else json_logs

    _config = MaybeConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> MaybeConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'maybe_core not initialized. Call maybe_core.init() first.'
        raise RuntimeError(msg)
    return _config
