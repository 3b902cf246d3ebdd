import logging
import pytest
import sys
import os

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from fluentcheck.type_utils import _mro_cache, _mro_cache_lock, format_type_for_display
from fluentcheck.member_accessor import _ACCESSORS, _accessors_lock
import fluentcheck.logging


@pytest.fixture(scope="function", autouse=True)
def reset_fluentcheck_logging():
    """Restores the default WARNING level after tests that raise verbosity."""
    yield
    fluentcheck.logging.set_verbosity(logging.WARNING)

@pytest.fixture(scope="function", autouse=True)
def clear_caches():
    """Clears internal caches and registered accessors before each test function runs."""
    with _mro_cache_lock:
        _mro_cache.clear()
    format_type_for_display.cache_clear()
    with _accessors_lock:
        _ACCESSORS.clear()
    yield # Test runs here
    with _accessors_lock:
        _ACCESSORS.clear()
