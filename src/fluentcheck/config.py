# ===== MODULE DOCSTRING ===== #
"""
Configuration constants for fluentcheck.

Message labels, default templates and limits shared by the formatter,
the check logic and the structural comparator.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List

# ===== GLOBALS ===== #

## ===== DISPLAY SETTINGS ===== ##
# Longest value representation rendered inside [brackets] before truncation
MAX_VALUE_REPR_LENGTH: Final[int] = 200
# Prefix of every value line in a message block
INDENT: Final[str] = '\t'

## ===== LABELS ===== ##
DEFAULT_SUT_LABEL: Final[str] = 'value'
SUT_LABEL_PREFIX: Final[str] = 'checked'
DEFAULT_EXPECTED_LABEL: Final[str] = 'expected value'
EXPECTED_VALUES_LABEL: Final[str] = 'expected value(s)'
EXPECTED_TYPE_LABEL: Final[str] = 'expected type'
GIVEN_VALUE_LABEL: Final[str] = 'given value'
DEFAULT_NEGATED_COMPARISON: Final[str] = 'different from'

## ===== MESSAGE TEMPLATES ===== ##
NULL_MESSAGE: Final[str] = 'The {0} is null.'
NEGATION_UNSUPPORTED_MESSAGE: Final[str] = "{0} can't be used when negated."
GENERIC_NEGATED_MESSAGE: Final[str] = 'The {0} passed the check whereas it must not.'

## ===== STRUCTURAL COMPARISON ===== ##
# Depth at which the comparator stops recursing and falls back to ==
MAX_COMPARISON_DEPTH: Final[int] = 200

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'MAX_VALUE_REPR_LENGTH',
    'INDENT',
    'DEFAULT_SUT_LABEL',
    'SUT_LABEL_PREFIX',
    'DEFAULT_EXPECTED_LABEL',
    'EXPECTED_VALUES_LABEL',
    'EXPECTED_TYPE_LABEL',
    'GIVEN_VALUE_LABEL',
    'DEFAULT_NEGATED_COMPARISON',
    'NULL_MESSAGE',
    'NEGATION_UNSUPPORTED_MESSAGE',
    'GENERIC_NEGATED_MESSAGE',
    'MAX_COMPARISON_DEPTH',
]
