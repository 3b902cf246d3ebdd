# ===== MODULE DOCSTRING ===== #
"""
Checks on numbers and other ordered values.

Sign checks accept real numbers (numbers.Real, bool excluded) and
datetime.timedelta. The ordering checks accept any pair of values that
supports `<` and `>`; anything else is a type mismatch, never a raw
TypeError.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Any
import datetime
import numbers
import logging

## ===== LOCAL ===== ##
from ..error_utils import FailureCause
from ..message import MessageOption

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['NumberChecks']

_NOT_A_NUMBER: Final[str] = "The {0} is not a number."
_NOT_COMPARABLE: Final[str] = "The {0} cannot be compared with the {1}."

# ===== FUNCTIONS ===== #

def _is_numeric(value: Any) -> bool:
    return isinstance(value, (numbers.Real, datetime.timedelta)) and not isinstance(value, bool)

def _are_orderable(actual: Any, other: Any) -> bool:
    try:
        bool(actual < other)
        bool(actual > other)
    except (TypeError, ValueError):
        return False
    return True

def _zero_like(value: Any) -> Any:
    """Zero in the value's own type, so that messages and comparisons stay homogeneous."""
    if isinstance(value, datetime.timedelta):
        return datetime.timedelta(0)
    try:
        return type(value)(0)
    except (TypeError, ValueError):
        return 0

# ===== CLASSES ===== #

class NumberChecks:
    """Numeric checks, mixed into Check."""

    def _sign_check(self, failing, message: str, negated_message: str):
        self.begin_check() \
            .fail_if_null() \
            .fail_when(lambda sut: not _is_numeric(sut), _NOT_A_NUMBER, MessageOption.NO_EXPECTED_BLOCK | MessageOption.WITH_TYPE, FailureCause.TYPE_MISMATCH) \
            .fail_when(failing, message, MessageOption.NO_EXPECTED_BLOCK) \
            .on_negate(negated_message, MessageOption.NO_EXPECTED_BLOCK) \
            .end_check()
        return self.build_link()

    ## ===== ZERO ===== ##
    def is_zero(self):
        return self._sign_check(
            lambda sut: sut != _zero_like(sut),
            "The {0} is different from zero.",
            "The {0} is equal to zero whereas it must not.",
        )

    def is_not_zero(self):
        return self.not_.is_zero()

    ## ===== SIGN ===== ##
    def is_strictly_positive(self):
        return self._sign_check(
            lambda sut: not sut > _zero_like(sut),
            "The {0} is not strictly positive (strictly greater than zero).",
            "The {0} is strictly positive (strictly greater than zero) whereas it must not.",
        )

    def is_positive_or_zero(self):
        return self._sign_check(
            lambda sut: sut < _zero_like(sut),
            "The {0} is not positive or equal to zero.",
            "The {0} is positive or equal to zero whereas it must not.",
        )

    def is_strictly_negative(self):
        return self._sign_check(
            lambda sut: not sut < _zero_like(sut),
            "The {0} is not strictly negative.",
            "The {0} is strictly negative, whereas it must not.",
        )

    def is_negative_or_zero(self):
        return self._sign_check(
            lambda sut: sut > _zero_like(sut),
            "The {0} is not negative or equal to zero.",
            "The {0} is negative or equal to zero, whereas it must not.",
        )

    ## ===== ORDERING ===== ##
    def _ordering_check(self, other: Any, failing, message: str, negated_message: str, label: str, negated_label: str):
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE number_checks._ordering_check: Comparing {self.label} to {other!r} ({label})")
        self.begin_check() \
            .fail_if_null() \
            .comparing_to(other, label, negated_label) \
            .fail_when(lambda sut: not _are_orderable(sut, other), _NOT_COMPARABLE, MessageOption.WITH_TYPE, FailureCause.TYPE_MISMATCH) \
            .fail_when(failing, message) \
            .on_negate(negated_message) \
            .end_check()
        return self.build_link()

    def is_strictly_less_than(self, other: Any):
        return self._ordering_check(
            other,
            lambda sut: not sut < other,
            "The {0} is greater than or equal to the {1}.",
            "The {0} is strictly less than the {1} whereas it must not.",
            'strictly less than', 'greater than or equal to',
        )

    def is_strictly_greater_than(self, other: Any):
        return self._ordering_check(
            other,
            lambda sut: not sut > other,
            "The {0} is less than or equal to the {1}.",
            "The {0} is strictly greater than the {1} whereas it must not.",
            'strictly greater than', 'less than or equal to',
        )

    def is_before(self, other: Any):
        return self._ordering_check(
            other,
            lambda sut: not sut < other,
            "The {0} is not before the {1}.",
            "The {0} is before the {1} whereas it must not.",
            'before', 'after',
        )

    def is_after(self, other: Any):
        return self._ordering_check(
            other,
            lambda sut: not sut > other,
            "The {0} is not after the {1}.",
            "The {0} is after the {1} whereas it must not.",
            'after', 'before',
        )
