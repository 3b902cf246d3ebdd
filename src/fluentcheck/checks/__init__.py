# ===== MODULE DOCSTRING ===== #
"""
Concrete checks and the `that` entry point.

    from fluentcheck import that

    that(result).is_equal_to(expected)
    that(count, 'count').is_strictly_positive().and_.is_strictly_less_than(10)
    that(user).considering(private=True).excluding('_cache').is_equal_to(other)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Any, Optional

## ===== LOCAL ===== ##
from ..checker import Checker
from .number_checks import NumberChecks
from .object_checks import ObjectChecks
from .reflection_checks import ReflectionCheck

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['Check', 'ReflectionCheck', 'that']

# ===== CLASSES ===== #

class Check(ObjectChecks, NumberChecks, Checker):
    """Check context carrying every built-in check."""

# ===== FUNCTIONS ===== #

def that(value: Any, name: Optional[str] = None) -> Check:
    """Start a chain of checks on `value`, optionally naming it in failure messages."""
    return Check(value, name=name)
