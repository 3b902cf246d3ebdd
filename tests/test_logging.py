import logging
import pytest

from fluentcheck import that, logger, set_verbosity, verbosity
from fluentcheck.error_utils import FluentCheckError

def test_logger_is_named_fluentcheck():
    assert logger.name == 'fluentcheck'
    assert logger.handlers, "fluentcheck logger should carry its stderr handler"

def test_default_level_is_warning():
    assert logger.level == logging.WARNING

def test_set_verbosity_changes_level():
    set_verbosity(logging.DEBUG)
    assert logger.level == logging.DEBUG
    set_verbosity(logging.ERROR)
    assert logger.level == logging.ERROR

@pytest.mark.parametrize("level", [0, 5, 1000, -10, "LOUD", "", True])
def test_set_verbosity_rejects_invalid_levels(level):
    with pytest.raises(ValueError, match="Invalid logging level"):
        set_verbosity(level)

@pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), ("INFO", logging.INFO), (" Error ", logging.ERROR)])
def test_set_verbosity_accepts_level_names(name, level):
    set_verbosity(name)
    assert logger.level == level

def test_set_verbosity_returns_previous_level():
    assert set_verbosity(logging.INFO) == logging.WARNING
    assert set_verbosity("error") == logging.INFO

def test_verbosity_is_restored_after_block(caplog):
    with verbosity("DEBUG") as log:
        assert log is logger
        assert logger.level == logging.DEBUG
        with caplog.at_level(logging.DEBUG, logger="fluentcheck"):
            that(0).is_zero()
    assert logger.level == logging.WARNING
    assert any("TRACE check_logic.end_check" in r.getMessage() for r in caplog.records)

def test_verbosity_is_restored_when_a_check_fails():
    with pytest.raises(FluentCheckError):
        with verbosity(logging.DEBUG):
            that(1).is_zero()
    assert logger.level == logging.WARNING

def test_verbosity_rejects_invalid_level_without_changing_it():
    with pytest.raises(ValueError):
        with verbosity("chatty"):
            pass
    assert logger.level == logging.WARNING

def test_debug_traces_passing_check(caplog):
    set_verbosity(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger='fluentcheck'):
        that(0).is_zero()
    assert any("TRACE check_logic.end_check: Check passed" in r.getMessage() for r in caplog.records)

def test_debug_traces_failing_check(caplog):
    set_verbosity(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger='fluentcheck'):
        with pytest.raises(FluentCheckError):
            that(1).is_zero()
    assert any("Check failed (predicate_failure)" in r.getMessage() for r in caplog.records)

def test_debug_traces_structural_mismatch(caplog):
    set_verbosity(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger='fluentcheck'):
        with pytest.raises(FluentCheckError):
            that({'a': {'b': 1}}).is_equal_to({'a': {'b': 2}})
    assert any("value mismatch at 'a.b'" in r.getMessage() for r in caplog.records)

def test_passing_checks_are_silent_at_default_level(caplog):
    with caplog.at_level(logging.WARNING, logger='fluentcheck'):
        that([1, 2]).is_equal_to([1, 2])
    assert not [r for r in caplog.records if r.name == 'fluentcheck']
