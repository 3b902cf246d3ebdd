import pytest
import datetime
import decimal
import enum
from collections import OrderedDict
from typing import List, Dict, Optional, Union, Any

# Import internals for testing the cache directly
from fluentcheck.type_utils import (
    get_cached_mro_set,
    is_instance_optimized,
    is_scalar,
    are_types_compatible,
    format_type_for_display,
    _mro_cache,  # Import the cache dict itself
    _mro_cache_lock
)

# --- Test Setup ---

# Define some classes for testing
class Base: pass
class Derived(Base): pass
class Mixin:
    def mixin_method(self): pass
class ComplexDerived(Derived, Mixin): pass
class Unrelated: pass

class Color(enum.Enum):
    RED = 1

# Fixture to clear the MRO cache before each test function
@pytest.fixture(autouse=True)
def clear_mro_cache_fixture():
    with _mro_cache_lock:
        _mro_cache.clear()
    yield # Run the test
    with _mro_cache_lock:
        _mro_cache.clear()

# --- Direct Cache & Optimization Tests ---

def test_get_cached_mro_set_populates_cache():
    """Verify get_cached_mro_set calculates and caches the MRO set."""
    assert Base not in _mro_cache
    mro_set = get_cached_mro_set(Base)
    assert Base in _mro_cache
    assert _mro_cache[Base] == mro_set
    assert mro_set == {Base, object}

def test_get_cached_mro_set_uses_cache():
    """Verify get_cached_mro_set uses the cache on subsequent calls."""
    first_mro_set = get_cached_mro_set(Derived)
    assert _mro_cache[Derived] == {Derived, Base, object}
    second_mro_set = get_cached_mro_set(Derived)
    assert second_mro_set is first_mro_set

def test_get_cached_mro_set_complex_inheritance():
    """Test caching with multiple inheritance."""
    mro_set = get_cached_mro_set(ComplexDerived)
    assert ComplexDerived in _mro_cache
    assert mro_set == {ComplexDerived, Derived, Base, Mixin, object}

def test_is_instance_optimized_direct_match():
    assert is_instance_optimized(Derived(), Derived) is True

def test_is_instance_optimized_cache_hit():
    d = Derived()
    get_cached_mro_set(Derived) # Ensure cache is populated
    assert is_instance_optimized(d, Base) is True
    assert is_instance_optimized(d, Unrelated) is False
    assert is_instance_optimized(d, Mixin) is False

def test_is_instance_optimized_cache_miss():
    """Test that a check populates the cache if missed."""
    assert Derived not in _mro_cache
    assert is_instance_optimized(Derived(), Base) is True
    assert _mro_cache[Derived] == {Derived, Base, object}

def test_is_instance_optimized_virtual_subclass():
    """ABC registrations are not in the MRO; the isinstance fallback handles them."""
    from collections.abc import Sized
    assert is_instance_optimized([1, 2], Sized) is True

def test_is_instance_optimized_invalid_type_returns_false():
    assert is_instance_optimized(1, List[int]) is False

# --- Classification ---

@pytest.mark.parametrize("value", [
    None, 1, 2.5, True, 'text', b'raw', decimal.Decimal('1.5'), Color.RED,
    datetime.date(2024, 1, 1), datetime.timedelta(seconds=3), frozenset({1}), {1, 2}, int, len,
])
def test_scalars(value):
    assert is_scalar(value) is True

@pytest.mark.parametrize("value", [[1], (1,), {'a': 1}, Base(), OrderedDict()])
def test_non_scalars(value):
    assert is_scalar(value) is False

def test_type_compatibility():
    assert are_types_compatible(Derived(), Base()) is True
    assert are_types_compatible(Base(), ComplexDerived()) is True
    assert are_types_compatible(1, 2.0) is True
    assert are_types_compatible({}, OrderedDict()) is True
    assert are_types_compatible(Base(), Unrelated()) is False
    assert are_types_compatible([1], (1,)) is False

# --- Display ---

@pytest.mark.parametrize("tp, expected", [
    (int, "int"),
    (type(None), "None"),
    (Any, "Any"),
    (Optional[int], "Optional[int]"),
    (Union[int, str], "Union[int, str]"),
    (decimal.Decimal, "decimal.Decimal"),
])
def test_format_type_for_display(tp, expected):
    assert format_type_for_display(tp) == expected

def test_format_type_for_display_generic():
    assert format_type_for_display(Dict[str, int]) == "dict[str, int]"

def test_format_type_for_display_local_class():
    assert format_type_for_display(Derived) == f"{__name__}.Derived"
