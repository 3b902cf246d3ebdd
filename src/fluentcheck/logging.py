# ===== MODULE DOCSTRING ===== #
"""
Logger shared by every fluentcheck module.

Checks, the structural comparator and the message builder only log at
DEBUG level, as `TRACE module.func: ...` lines. The logger starts at
WARNING, so a passing test suite prints nothing; raise the verbosity to
follow how a check was evaluated and where a comparison diverged.

Usage:
    from fluentcheck.logging import set_verbosity, verbosity

    # For the whole session
    set_verbosity('DEBUG')

    # Around one suspicious assertion only
    with verbosity('DEBUG'):
        that(actual).is_equal_to(expected)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, Iterator, List, Union
import contextlib
import logging
import sys

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
LOG_FORMAT: Final[str] = '%(levelname)s:%(name)s: %(message)s'

VALID_LEVELS: Final[List[int]] = [
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL
]

DEFAULT_LEVEL: Final[int] = logging.WARNING

## ===== LOGGER SETUP ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

_handler: Final[logging.StreamHandler] = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))

if not _log.handlers:
    _log.addHandler(_handler)
    _log.setLevel(DEFAULT_LEVEL)

## ===== PUBLIC API ALIAS ===== ##
logger = _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'logger',
    'set_verbosity',
    'verbosity',
]

# ===== FUNCTIONS ===== #

def _resolve_level(level: Union[int, str]) -> int:
    """Turn a level constant or a level name ('debug', 'WARNING') into a valid level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if isinstance(resolved, int) and resolved in VALID_LEVELS:
            return resolved
    elif not isinstance(level, bool) and level in VALID_LEVELS:
        return level
    raise ValueError(
        f"Invalid logging level: {level!r}. "
        f"Valid levels: {[logging.getLevelName(l) for l in VALID_LEVELS]}"
    )

def set_verbosity(level: Union[int, str]) -> int:
    """Set the verbosity of the fluentcheck logger.

    Args:
        level: A logging level constant (logging.DEBUG) or its name ('debug').

    Returns:
        The level in force before the call, so that it can be restored.

    Raises:
        ValueError: If the level is not one of the standard logging levels.
    """
    resolved = _resolve_level(level)
    previous = _log.level
    _log.setLevel(resolved)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE logging.set_verbosity: Verbosity set to {logging.getLevelName(resolved)} (was {logging.getLevelName(previous)})")
    return previous

@contextlib.contextmanager
def verbosity(level: Union[int, str]) -> Iterator[logging.Logger]:
    """Raise (or lower) the verbosity for the duration of a block, then restore it.

    The previous level comes back even when a check inside the block fails.
    """
    previous = set_verbosity(level)
    try:
        yield _log
    finally:
        _log.setLevel(previous)
