# ===== MODULE DOCSTRING ===== #
"""Error utilities for fluentcheck: the failure exception, its causes and the mismatch record."""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Optional, Union, Final,
    Tuple, List, Any
)
import dataclasses
import logging
import enum

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== TYPE ALIASES ===== ##
PathSegment = Union[str, int, Any]
Path = Tuple[PathSegment, ...]

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'FailureCause',
    'Mismatch',
    'FluentCheckError',
    '_construct_mismatch_error',
    '_format_path',
]

# ===== CLASSES ===== #

class FailureCause(enum.Enum):
    """Why a check failed. Every cause surfaces as a FluentCheckError."""
    NULL_SUT = 'null_sut'
    PREDICATE_FAILURE = 'predicate_failure'
    NEGATION_UNSUPPORTED = 'negation_unsupported'
    STRUCTURAL_MISMATCH = 'structural_mismatch'
    MEMBERSHIP_MISMATCH = 'membership_mismatch'
    TYPE_MISMATCH = 'type_mismatch'

@dataclasses.dataclass(frozen=True)
class Mismatch:
    """Holds the first difference found by a structural comparison.

    Attributes:
        path (Tuple): Member names/indices from the comparison root to the difference.
        actual (Any): The actual member value at that path.
        expected (Any): The expected member value at that path.
        kind (str): One of 'null', 'type', 'value', 'length', 'missing', 'extra'.
        detail (Optional[str]): Human readable reason.
    """
    path: Path
    actual: Any
    expected: Any
    kind: str
    detail: Optional[str] = None

    @property
    def path_repr(self) -> str:
        return _format_path(self.path)

    @property
    def cause(self) -> FailureCause:
        return FailureCause.TYPE_MISMATCH if self.kind == 'type' else FailureCause.STRUCTURAL_MISMATCH

class FluentCheckError(AssertionError):
    """Raised when a check fails. Carries the fully formatted message."""
    def __init__(self, message: str, cause: Optional[FailureCause] = FailureCause.PREDICATE_FAILURE, mismatch: Optional[Mismatch] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.mismatch = mismatch

# ===== FUNCTIONS ===== #

def _format_path(path: Path) -> str:
    """Format a member path into a readable string (e.g., 'items[2].name', "table['a key']")."""
    if not path:
        return ""
    result = ""
    for item in path:
        if isinstance(item, bool):
            result += f"[{item!r}]"
        elif isinstance(item, int):
            result += f"[{item}]"
        elif isinstance(item, str) and item.isidentifier():
            result += f".{item}"
        else:
            # Keys that are not valid attribute names keep their repr
            result += f"[{item!r}]"
    return result.lstrip('.')

def _construct_mismatch_error(mismatch: Optional[Mismatch]) -> str:
    """Constructs a one-line description of a Mismatch, used for logging."""
    if mismatch is None:
        return "No mismatch."
    base_msg = f"{mismatch.kind} mismatch"
    if mismatch.path:
        base_msg += f" at '{mismatch.path_repr}'"
    base_msg += f": actual {mismatch.actual!r}, expected {mismatch.expected!r}"
    if mismatch.detail:
        base_msg += f". Reason: {mismatch.detail}"
    return base_msg
