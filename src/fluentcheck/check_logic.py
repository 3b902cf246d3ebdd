# ===== MODULE DOCSTRING ===== #
"""
Check-logic builder.

Every check is written the same way: open a CheckLogic on the current
context, describe the failure conditions and the expected value
declaratively, then close it with `end_check()`:

    def is_zero(self):
        self.begin_check() \\
            .fail_if_null() \\
            .fail_when(lambda sut: sut != 0, "The {0} is different from zero.") \\
            .on_negate("The {0} is equal to zero whereas it must not.") \\
            .end_check()
        return self.build_link()

Nothing is evaluated before `end_check()`. Evaluation order:
1. negation support (`cant_be_negated`)
2. null guard (`fail_if_null`), respecting negation
3. not negated: failure rules in order, then analyzers
   negated: the negated rule if one was given, else the complement of
   the primary outcome

A builder is consumed by `end_check()` (or by `check_sut_attributes`);
using it afterwards raises RuntimeError.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Callable, Iterable, Optional,
    Final, List, Any,
    NamedTuple, TYPE_CHECKING,
)
import logging

## ===== LOCAL ===== ##
from .config import (
    NULL_MESSAGE, NEGATION_UNSUPPORTED_MESSAGE,
    GENERIC_NEGATED_MESSAGE, DEFAULT_EXPECTED_LABEL,
    DEFAULT_NEGATED_COMPARISON,
)
from .error_utils import FailureCause, FluentCheckError, Mismatch
from .message import FluentMessage, MessageBlock, MessageOption, sut_label
from .type_utils import format_type_for_display

if TYPE_CHECKING:
    from .checker import Checker

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== TYPE ALIASES ===== ##
Predicate = Callable[[Any], bool]
Analyzer = Callable[[Any, 'CheckLogic'], None]

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['CheckLogic', 'Predicate', 'Analyzer']

# ===== CLASSES ===== #

class _Rule(NamedTuple):
    predicate: Predicate
    message: str
    options: MessageOption
    cause: FailureCause

class _Failure(NamedTuple):
    message: str
    options: MessageOption
    cause: FailureCause
    mismatch: Optional[Mismatch]

class CheckLogic:
    """Consumed-once builder that configures and evaluates one check."""

    def __init__(self, checker: 'Checker'):
        self.checker = checker
        self._label = checker.label
        self._rules: List[_Rule] = []
        self._negate_rule: Optional[_Rule] = None
        self._negate_message: Optional[str] = None
        self._negate_options = MessageOption.NONE
        self._analyzers: List[Analyzer] = []
        self._expected: Optional[MessageBlock] = None
        self._index: Optional[int] = None
        self._non_negatable: Optional[str] = None
        self._null_message: Optional[str] = None
        # (message, label, value) of a null guard inherited through check_sut_attributes
        self._inherited_null_guard: Optional[tuple] = None
        self._explicit_failure: Optional[_Failure] = None
        self._analyzing = False
        self._spent = False
        self._failed = False

    def __repr__(self) -> str:
        state = 'spent' if self._spent else 'open'
        return f"CheckLogic({self.checker!r}, {state})"

    ## ===== STATE ===== ##
    @property
    def is_negated(self) -> bool:
        return self.checker.negated

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def value(self) -> Any:
        return self.checker.value

    @property
    def label(self) -> str:
        return self._label

    def _ensure_open(self, operation: str) -> None:
        # Analyzers may still adjust descriptors while the check evaluates
        if self._spent and not self._analyzing:
            raise RuntimeError(f"Check logic already ended; cannot call {operation}().")

    @staticmethod
    def _ensure_callable(candidate: Any, operation: str) -> None:
        if not callable(candidate):
            raise TypeError(f"{operation}() expects a callable, got {type(candidate).__name__}")

    ## ===== FAILURE CONDITIONS ===== ##
    def fail_when(self, predicate: Predicate, message: str, options: MessageOption = MessageOption.NONE,
                  cause: FailureCause = FailureCause.PREDICATE_FAILURE) -> 'CheckLogic':
        """Add a failure rule: the check fails if predicate(sut) is true."""
        self._ensure_open('fail_when')
        self._ensure_callable(predicate, 'fail_when')
        self._rules.append(_Rule(predicate, message, options, cause))
        return self

    def on_negate_when(self, predicate: Predicate, message: str, options: MessageOption = MessageOption.NONE) -> 'CheckLogic':
        """Failure rule used instead of the primary rules when the check is negated."""
        self._ensure_open('on_negate_when')
        self._ensure_callable(predicate, 'on_negate_when')
        self._negate_rule = _Rule(predicate, message, options, FailureCause.PREDICATE_FAILURE)
        return self

    def on_negate(self, message: str, options: MessageOption = MessageOption.NONE) -> 'CheckLogic':
        """Message used when the negated check fails because the primary rules passed."""
        self._ensure_open('on_negate')
        self._negate_message = message
        self._negate_options = options
        return self

    def cant_be_negated(self, check_name: str) -> 'CheckLogic':
        self._ensure_open('cant_be_negated')
        self._non_negatable = check_name
        return self

    def fail_if_null(self, message: str = NULL_MESSAGE) -> 'CheckLogic':
        self._ensure_open('fail_if_null')
        self._null_message = message
        return self

    def fail(self, message: str, options: MessageOption = MessageOption.NONE,
             cause: FailureCause = FailureCause.PREDICATE_FAILURE, mismatch: Optional[Mismatch] = None) -> 'CheckLogic':
        """Explicit failure.

        Inside an `analyze` action it records the analyzer's failure; during
        configuration it adds a rule that always fails.
        """
        if self._analyzing:
            if self._explicit_failure is None:
                self._explicit_failure = _Failure(message, options, cause, mismatch)
            return self
        return self.fail_when(lambda sut: True, message, options, cause)

    def analyze(self, action: Analyzer) -> 'CheckLogic':
        """Run action(sut, logic) at evaluation time.

        The action fails the check by calling `logic.fail(...)` or by raising
        FluentCheckError (for instance from a nested check).
        """
        self._ensure_open('analyze')
        self._ensure_callable(action, 'analyze')
        self._analyzers.append(action)
        return self

    ## ===== DESCRIPTORS ===== ##
    def set_sut_name(self, name: str) -> 'CheckLogic':
        self._ensure_open('set_sut_name')
        self._label = sut_label(name)
        return self

    def define_expected_value(self, value: Any, comparison: Optional[str] = None,
                              negated_comparison: Optional[str] = DEFAULT_NEGATED_COMPARISON) -> 'CheckLogic':
        self._ensure_open('define_expected_value')
        self._expected = MessageBlock(DEFAULT_EXPECTED_LABEL, value, 'single', comparison=comparison, negated_comparison=negated_comparison)
        return self

    def define_expected_result(self, value: Any, label: str, negated_label: Optional[str] = DEFAULT_NEGATED_COMPARISON) -> 'CheckLogic':
        self._ensure_open('define_expected_result')
        self._expected = MessageBlock('expected result', value, 'single', comparison=label, negated_comparison=negated_label)
        return self

    def define_expected_values(self, values: Iterable[Any], count: Optional[int] = None, comparison: Optional[str] = None,
                               negated_comparison: Optional[str] = DEFAULT_NEGATED_COMPARISON) -> 'CheckLogic':
        self._ensure_open('define_expected_values')
        message = FluentMessage('').expected_values(list(values), count, comparison, negated_comparison)
        self._expected = message.expected_block
        return self

    def define_possible_values(self, values: Iterable[Any], comparison: Optional[str] = 'one of',
                               negated_comparison: Optional[str] = 'none of') -> 'CheckLogic':
        self._ensure_open('define_possible_values')
        self._expected = FluentMessage('').possible_values(list(values), comparison, negated_comparison).expected_block
        return self

    def define_expected_type(self, expected_type: type) -> 'CheckLogic':
        self._ensure_open('define_expected_type')
        self._expected = FluentMessage('').expected_type(expected_type).expected_block
        return self

    def comparing_to(self, other: Any, label: Optional[str], negated_label: Optional[str]) -> 'CheckLogic':
        self._ensure_open('comparing_to')
        self._expected = FluentMessage('').comparing_to(other, label, negated_label).expected_block
        return self

    def set_values_index(self, index: int) -> 'CheckLogic':
        self._ensure_open('set_values_index')
        self._index = index
        return self

    ## ===== DERIVED CHECKS ===== ##
    def check_sut_attributes(self, extractor: Callable[[Any], Any], label: str) -> 'CheckLogic':
        """Continue on a value extracted from the sut (its length, an attribute...).

        Returns a new builder over the derived value, labelled
        "<label of the sut>'s <label>". This builder is consumed; its null
        guard, if any, still applies to the original sut.
        """
        self._ensure_open('check_sut_attributes')
        self._ensure_callable(extractor, 'check_sut_attributes')
        self._spent = True
        sut = self.checker.value
        derived_value = None if sut is None else extractor(sut)
        derived = CheckLogic(self.checker.derive(derived_value, label))
        if self._null_message is not None:
            derived._inherited_null_guard = (self._null_message, self._label, sut)
        elif self._inherited_null_guard is not None:
            derived._inherited_null_guard = self._inherited_null_guard
        if self._non_negatable is not None:
            derived._non_negatable = self._non_negatable
        return derived

    ## ===== MESSAGES ===== ##
    def build_message(self, template: str) -> FluentMessage:
        """A message pre-loaded with this check's sut and expected descriptions."""
        return (FluentMessage(template)
                .for_sut(self.checker.value, self._label)
                .with_index(self._index)
                .with_block(self._expected))

    def _error(self, message: str, options: MessageOption, cause: FailureCause,
               negated: bool = False, mismatch: Optional[Mismatch] = None) -> FluentCheckError:
        text = self.build_message(message).with_options(options).negated(negated).render()
        return FluentCheckError(text, cause=cause, mismatch=mismatch)

    ## ===== EVALUATION ===== ##
    def _run_analyzer(self, action: Analyzer) -> Optional[FluentCheckError]:
        self._explicit_failure = None
        self._analyzing = True
        try:
            action(self.checker.value, self)
        except FluentCheckError as error:
            return error
        finally:
            self._analyzing = False
        failure = self._explicit_failure
        if failure is None:
            return None
        return self._error(failure.message, failure.options, failure.cause, mismatch=failure.mismatch)

    def _evaluate_primary(self) -> Optional[FluentCheckError]:
        value = self.checker.value
        for rule in self._rules:
            if rule.predicate(value):
                return self._error(rule.message, rule.options, rule.cause)
        for action in self._analyzers:
            error = self._run_analyzer(action)
            if error is not None:
                return error
        return None

    def _evaluate(self) -> Optional[FluentCheckError]:
        negated = self.checker.negated

        if negated and self._non_negatable is not None:
            return FluentCheckError(NEGATION_UNSUPPORTED_MESSAGE.format(self._non_negatable), cause=FailureCause.NEGATION_UNSUPPORTED)

        if self._inherited_null_guard is not None and self._inherited_null_guard[2] is None:
            if negated:
                return None
            message, label, sut = self._inherited_null_guard
            text = FluentMessage(message).for_sut(sut, label).render()
            return FluentCheckError(text, cause=FailureCause.NULL_SUT)

        if self._null_message is not None and self.checker.value is None:
            if negated:
                return None
            return self._error(self._null_message, MessageOption.NO_EXPECTED_BLOCK, FailureCause.NULL_SUT)

        if negated:
            if self._negate_rule is not None:
                rule = self._negate_rule
                if rule.predicate(self.checker.value):
                    return self._error(rule.message, rule.options, rule.cause, negated=True)
                return None
            if self._evaluate_primary() is not None:
                return None
            message = self._negate_message or GENERIC_NEGATED_MESSAGE
            return self._error(message, self._negate_options, FailureCause.PREDICATE_FAILURE, negated=True)

        return self._evaluate_primary()

    def end_check(self) -> None:
        """Evaluate the check: return silently on success, raise FluentCheckError on failure."""
        self._ensure_open('end_check')
        self._spent = True
        error = self._evaluate()
        if error is None:
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug(f"TRACE check_logic.end_check: Check passed for {self._label} ({format_type_for_display(type(self.checker.value))}), negated={self.checker.negated}")
            return
        self._failed = True
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE check_logic.end_check: Check failed ({error.cause.value}) for {self._label}")
        raise error
