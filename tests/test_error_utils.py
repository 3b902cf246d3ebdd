import pytest

from fluentcheck.error_utils import (
    FluentCheckError, FailureCause, Mismatch,
    _format_path, _construct_mismatch_error,
)

@pytest.mark.parametrize("path, expected", [
    ((), ""),
    (('a',), "a"),
    (('a', 'b'), "a.b"),
    (('items', 2, 'name'), "items[2].name"),
    ((0, 1), "[0][1]"),
    (('table', 'a key'), "table['a key']"),
    (('flags', True), "flags[True]"),
    (((1, 2),), "[(1, 2)]"),
])
def test_format_path(path, expected):
    assert _format_path(path) == expected

def test_mismatch_cause():
    assert Mismatch(('a',), 1, 'x', 'type').cause is FailureCause.TYPE_MISMATCH
    assert Mismatch(('a',), 1, 2, 'value').cause is FailureCause.STRUCTURAL_MISMATCH
    assert Mismatch((), [1], [], 'length').path_repr == ""

def test_construct_mismatch_error():
    assert _construct_mismatch_error(None) == "No mismatch."
    text = _construct_mismatch_error(Mismatch(('a', 0), 1, 2, 'value', 'values differ'))
    assert text == "value mismatch at 'a[0]': actual 1, expected 2. Reason: values differ"

def test_fluent_check_error_is_assertion_error():
    error = FluentCheckError("boom", cause=FailureCause.NULL_SUT)
    assert isinstance(error, AssertionError)
    assert str(error) == "boom"
    assert error.message == "boom"
    assert error.cause is FailureCause.NULL_SUT
    assert error.mismatch is None
