import pytest

from fluentcheck import config
from fluentcheck.message import sut_label

def test_label_constants_exist_and_are_strings():
    """Verify label constants exist and are strings."""
    assert isinstance(config.DEFAULT_SUT_LABEL, str)
    assert isinstance(config.SUT_LABEL_PREFIX, str)
    assert isinstance(config.DEFAULT_EXPECTED_LABEL, str)
    assert isinstance(config.EXPECTED_VALUES_LABEL, str)
    assert isinstance(config.EXPECTED_TYPE_LABEL, str)
    assert isinstance(config.GIVEN_VALUE_LABEL, str)
    assert isinstance(config.DEFAULT_NEGATED_COMPARISON, str)

def test_display_constants_exist_and_are_valid():
    """Verify display setting constants exist and have sensible values."""
    assert isinstance(config.MAX_VALUE_REPR_LENGTH, int)
    assert config.MAX_VALUE_REPR_LENGTH > 0
    assert config.INDENT == '\t'
    assert isinstance(config.MAX_COMPARISON_DEPTH, int)
    assert config.MAX_COMPARISON_DEPTH > 0

@pytest.mark.parametrize("template", [
    config.NULL_MESSAGE,
    config.GENERIC_NEGATED_MESSAGE,
    config.NEGATION_UNSUPPORTED_MESSAGE,
])
def test_templates_take_the_label_placeholder(template):
    """Every default template formats with the sut label as first argument."""
    assert '{0}' in template
    assert 'checked value' in template.format(sut_label(), config.DEFAULT_EXPECTED_LABEL)

def test_default_sut_label():
    assert sut_label() == "checked value"
    assert sut_label('count') == "checked count"

def test_exports_are_defined():
    for name in config.__all__:
        assert hasattr(config, name)
