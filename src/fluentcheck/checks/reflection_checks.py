# ===== MODULE DOCSTRING ===== #
"""
Reflection-based checks.

`that(obj).considering(...)` wraps the checked value in a ReflectionWrapper
and returns a ReflectionCheck, whose checks work member by member:

    that(order).considering(private=True).excluding('created_at').is_equal_to(expected)
    that(config).considering().is_not_null()

The helpers `compare_structurally` and `mismatch_error` are shared with the
generic equality check.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Any, Optional
import logging

## ===== LOCAL ===== ##
from ..check_logic import CheckLogic
from ..checker import Checker
from ..criteria import Criteria
from ..error_utils import FailureCause, FluentCheckError, Mismatch
from ..message import MessageOption
from ..wrapper import ReflectionWrapper

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'ReflectionCheck',
    'compare_structurally',
    'mismatch_error',
]

## ===== TEMPLATES ===== ##
_DIFFERENT: Final[str] = "The {0} is different from the {1}."
_MISSING: Final[str] = "The {1} is absent from the checked value."
_EXTRA: Final[str] = "The {0} is absent from the expected value."

# ===== FUNCTIONS ===== #

def compare_structurally(actual: Any, expected: Any, criteria: Optional[Criteria] = None) -> Optional[Mismatch]:
    """Wrap both values with the same criteria and compare them."""
    criteria = criteria if criteria is not None else Criteria()
    return ReflectionWrapper.build(actual, criteria).compare_to(ReflectionWrapper.build(expected, criteria))

def mismatch_error(logic: CheckLogic, mismatch: Mismatch) -> FluentCheckError:
    """Render a Mismatch as the failure of the given check.

    A difference at the root describes the checked value itself; a deeper one
    describes the member at its path, on both sides.
    """
    options = MessageOption.WITH_TYPE if mismatch.kind == 'type' else MessageOption.NONE
    if mismatch.path:
        actual_label = f"{logic.label}'s member '{mismatch.path_repr}'"
        expected_label = f"expected value's member '{mismatch.path_repr}'"
    else:
        actual_label = logic.label
        expected_label = 'expected value'

    template = _DIFFERENT
    if mismatch.kind == 'missing':
        template, options = _MISSING, options | MessageOption.NO_CHECKED_BLOCK
    elif mismatch.kind == 'extra':
        template, options = _EXTRA, options | MessageOption.NO_EXPECTED_BLOCK

    message = (logic.build_message(template)
               .for_sut(mismatch.actual, actual_label)
               .expected(mismatch.expected, label=expected_label)
               .with_options(options))
    return FluentCheckError(message.render(), cause=mismatch.cause, mismatch=mismatch)

# ===== CLASSES ===== #

class ReflectionCheck(Checker):
    """Checks applied to the members of a value rather than to the value itself."""

    def __init__(self, value: Any, name: Optional[str] = None, negated: bool = False, label: Optional[str] = None,
                 criteria: Optional[Criteria] = None):
        super().__init__(value, name=name, negated=negated, label=label)
        self.criteria = criteria if criteria is not None else Criteria()
        self.wrapper = ReflectionWrapper.build(value, self.criteria)

    def _respawn(self, negated: bool) -> 'ReflectionCheck':
        return ReflectionCheck(self.value, name=self.name, negated=negated, label=self.label, criteria=self.criteria)

    def excluding(self, *names: str) -> 'ReflectionCheck':
        """Ignore members by name or by dotted path (e.g. 'meta.timestamp')."""
        return ReflectionCheck(self.value, name=self.name, negated=self.negated, label=self.label,
                               criteria=self.criteria.excluding(*names))

    ## ===== EQUALITY ===== ##
    def is_equal_to(self, expected: Any):
        """Checks that every considered member equals its expected counterpart."""
        expected_wrapper = ReflectionWrapper.build(expected, self.criteria)

        def compare(sut, logic):
            mismatch = self.wrapper.compare_to(expected_wrapper)
            if mismatch is not None:
                raise mismatch_error(logic, mismatch)

        self.begin_check() \
            .define_expected_value(expected) \
            .analyze(compare) \
            .on_negate("The {0} is equal to the {1} whereas it must not.") \
            .end_check()
        return self.build_link()

    def is_one_of(self, *values: Any):
        """Checks that the considered members match those of at least one candidate."""
        candidates = [ReflectionWrapper.build(v, self.criteria) for v in values]

        def match(sut, logic):
            if not self.wrapper.is_one_of(candidates):
                logic.fail("The {0} is equal to none of the {1} whereas it should.", cause=FailureCause.MEMBERSHIP_MISMATCH)

        self.begin_check() \
            .define_possible_values(values) \
            .analyze(match) \
            .on_negate("The {0} is equal to one of the {1} whereas it must not.") \
            .end_check()
        return self.build_link()

    ## ===== NULL SCANS ===== ##
    def is_null(self, max_depth: int = 0):
        """Checks that every member is null.

        Non-null members holding only null members themselves are accepted
        while max_depth allows descending into them.
        """
        def scan(sut, logic):
            def visitor(member, depth):
                if member.value is None:
                    return False
                if depth <= 0 or member.is_leaf:
                    raise FluentCheckError(
                        logic.build_message("The {0} has a non null member, whereas it should not.")
                        .for_sut(member.value, f"{logic.label}'s member '{member.label}'")
                        .with_options(MessageOption.NO_EXPECTED_BLOCK)
                        .render()
                    )
                return True
            self.wrapper.scan_fields(visitor, max_depth)

        self.begin_check() \
            .analyze(scan) \
            .on_negate("The {0} has only null members, whereas it should not.", MessageOption.NO_EXPECTED_BLOCK) \
            .end_check()
        return self.build_link()

    def is_not_null(self, max_depth: int = 0):
        """Checks that no member is null, down to max_depth levels."""
        def scan(sut, logic):
            def visitor(member, depth):
                if member.value is None:
                    raise FluentCheckError(
                        logic.build_message("The {0} is null, whereas it should not.")
                        .for_sut(None, f"{logic.label}'s member '{member.label}'")
                        .with_options(MessageOption.NO_EXPECTED_BLOCK)
                        .render()
                    )
                return True
            self.wrapper.scan_fields(visitor, max_depth)

        self.begin_check() \
            .fail_if_null() \
            .analyze(scan) \
            .on_negate("The {0} has no null member, whereas it should.", MessageOption.NO_EXPECTED_BLOCK) \
            .end_check()
        return self.build_link()
