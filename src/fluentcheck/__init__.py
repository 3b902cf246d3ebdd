# ===== MODULE DOCSTRING ===== #
"""
fluentcheck: fluent assertions with structural comparison.

    from fluentcheck import that

    that(answer).is_equal_to(42)
    that(answer).not_.is_zero().and_.is_strictly_less_than(100)
    that(order).considering(private=True).excluding('created_at').is_equal_to(expected)

Failures raise FluentCheckError (an AssertionError), so checks work in any
test runner.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List

## ===== LOCAL ===== ##
from .logging import logger, set_verbosity, verbosity
from .error_utils import FailureCause, FluentCheckError, Mismatch
from .criteria import Criteria
from .member_accessor import register_accessor, unregister_accessor
from .wrapper import ReflectionWrapper
from .message import FluentMessage, MessageOption
from .check_logic import CheckLogic
from .checker import Checker, CheckLink
from .checks import Check, ReflectionCheck, that

# ===== GLOBALS ===== #

__version__: Final[str] = '0.1.0'

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'that',
    'Check',
    'Checker',
    'CheckLink',
    'CheckLogic',
    'Criteria',
    'ReflectionWrapper',
    'ReflectionCheck',
    'FluentMessage',
    'MessageOption',
    'FluentCheckError',
    'FailureCause',
    'Mismatch',
    'register_accessor',
    'unregister_accessor',
    'set_verbosity',
    'verbosity',
    'logger',
]
