# ===== MODULE DOCSTRING ===== #
"""
Type utilities for fluentcheck.

Helpers shared by the structural comparator and the message formatter:
- MRO-cached instance checks
- Type compatibility rules for structural comparison
- Scalar classification (values compared with == rather than member-wise)
- Readable type names for failure messages
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from functools import lru_cache
from typing import (
    get_origin, get_args,
    Dict, List, Set, Any,
    Final, ForwardRef,
    Tuple, Type, Union,
    TypeVar,
)
import collections.abc
import datetime
import decimal
import fractions
import threading
import numbers
import inspect
import logging
import enum
import uuid
import types
import re

# ===== GLOBALS ===== #

## ===== TYPE ALIASES ===== ##
NoneType: Final[Type[None]] = type(None)

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== MRO CACHE ===== ##
# Global cache for MRO sets (maps type -> set of MRO types)
_mro_cache: Dict[type, Set[type]] = {}
_mro_cache_lock = threading.Lock()

## ===== SCALARS ===== ##
# Values of these types are compared with == and never walked member-wise
SCALAR_TYPES: Final[Tuple[type, ...]] = (
    numbers.Number,
    str, bytes, bytearray, memoryview,
    enum.Enum,
    datetime.date, datetime.time, datetime.timedelta, datetime.tzinfo,
    decimal.Decimal, fractions.Fraction,
    uuid.UUID,
    range, slice,
    type,
    re.Pattern,
    types.FunctionType, types.BuiltinFunctionType, types.MethodType,
    types.ModuleType,
    collections.abc.Set,
)

# ===== FUNCTIONS ===== #

## ===== MRO CACHE ===== ##
def get_cached_mro_set(value_type: Type) -> Set[Type]:
    """Calculates and caches the Method Resolution Order (MRO) set for a given type.

    Uses a lock for thread safety during cache writes and double-checking
    to minimize lock contention. Falls back gracefully if MRO calculation fails.

    Args:
        value_type: The type for which to get the MRO set.

    Returns:
        A set containing the types in the MRO of value_type.
    """
    cached_result = _mro_cache.get(value_type)
    if cached_result is not None:
        return cached_result

    with _mro_cache_lock:
        # Double check cache after acquiring lock
        cached_result = _mro_cache.get(value_type)
        if cached_result is not None:
            return cached_result

        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.get_cached_mro_set: Cache miss for {value_type!r}. Calculating MRO.")
        try:
            mro_set = set(inspect.getmro(value_type))
        except (AttributeError, TypeError) as e:
            _log.warning(f"Failed to calculate MRO for {value_type!r}: {e}. Performance may be affected.")
            mro_set = {value_type}
        _mro_cache[value_type] = mro_set
        return mro_set

def is_instance_optimized(value: Any, expected_type: Type) -> bool:
    """Checks isinstance using the MRO cache for potential speedup.

    Performs a direct type check first, then uses the cached MRO set.
    Falls back to standard `isinstance` for virtual subclasses (ABCs, Protocols).

    Args:
        value: The value to check.
        expected_type: The type to check against.

    Returns:
        True if the value is an instance of the expected type, False otherwise.
    """
    value_type = type(value)
    if value_type is expected_type:
        return True
    if expected_type in get_cached_mro_set(value_type):
        return True
    try:
        return isinstance(value, expected_type)
    except TypeError as te:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.is_instance_optimized: isinstance raised TypeError for {expected_type!r}: {te!r}. Result: False")
        return False

## ===== CLASSIFICATION ===== ##
def is_scalar(value: Any) -> bool:
    """True if the value is compared by equality rather than member by member."""
    return value is None or isinstance(value, SCALAR_TYPES)

def are_types_compatible(actual: Any, expected: Any) -> bool:
    """Decide whether two values can be compared member-wise.

    Compatible when one value's type appears in the other's MRO. All numbers
    are mutually compatible, as are all mappings and all sets.
    """
    actual_type, expected_type = type(actual), type(expected)
    if actual_type is expected_type:
        return True
    for family in (numbers.Number, collections.abc.Mapping, collections.abc.Set):
        if isinstance(actual, family) and isinstance(expected, family):
            return True
    return expected_type in get_cached_mro_set(actual_type) or actual_type in get_cached_mro_set(expected_type)

## ===== TYPE FORMATTING ===== ##
@lru_cache(maxsize=512)
def format_type_for_display(tp: Any) -> str:
    """Format a type into a user-friendly string representation for messages.

    Args:
        tp: A class or a typing construct.

    Returns:
        A string representation of the type.
    """
    if tp is Any: return "Any"
    if tp is NoneType or tp is None: return "None"
    if isinstance(tp, TypeVar): return str(tp)
    if isinstance(tp, ForwardRef): return tp.__forward_arg__

    origin = get_origin(tp)
    if origin is Union:
        args = get_args(tp)
        if len(args) == 2 and NoneType in args:
            inner = args[0] if args[1] is NoneType else args[1]
            return f"Optional[{format_type_for_display(inner)}]"
        return f"Union[{', '.join(format_type_for_display(t) for t in args)}]"
    if origin:
        origin_name = getattr(origin, '__name__', str(origin))
        args = get_args(tp)
        if args:
            return f"{origin_name}[{', '.join(format_type_for_display(a) for a in args)}]"
        return origin_name

    if isinstance(tp, type):
        if tp.__module__ in ('builtins', '__main__'):
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"

    result = str(tp)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE type_utils.format_type_for_display: Fallback format ({tp!r}) -> '{result}'")
    return result

# ===== PUBLIC API EXPORTS ===== #

__all__: Final[List[str]] = [
    'NoneType',
    'SCALAR_TYPES',
    'get_cached_mro_set',
    'is_instance_optimized',
    'is_scalar',
    'are_types_compatible',
    'format_type_for_display',
]
