# ===== MODULE DOCSTRING ===== #
"""Checks available on any value: equality, identity, nullity, type, membership and size."""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Callable, Final, List, Any, Optional
import collections.abc
import logging

## ===== LOCAL ===== ##
from ..criteria import Criteria
from ..error_utils import FailureCause
from ..message import MessageOption
from ..type_utils import is_instance_optimized
from ..wrapper import ReflectionWrapper
from .reflection_checks import ReflectionCheck, compare_structurally, mismatch_error

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['ObjectChecks']

# ===== CLASSES ===== #

class ObjectChecks:
    """Generic checks, mixed into Check. Relies on the Checker interface."""

    ## ===== EQUALITY ===== ##
    def is_equal_to(self, expected: Any):
        """Checks that the value is structurally equal to the expected one.

        Values of related types are compared member by member (see
        ReflectionWrapper.compare_to); the message points at the first
        differing member.
        """
        def compare(sut, logic):
            mismatch = compare_structurally(sut, expected)
            if mismatch is not None:
                raise mismatch_error(logic, mismatch)

        self.begin_check() \
            .define_expected_value(expected) \
            .analyze(compare) \
            .on_negate("The {0} is equal to the {1} whereas it must not.") \
            .end_check()
        return self.build_link()

    def is_not_equal_to(self, expected: Any):
        return self.not_.is_equal_to(expected)

    def is_same_reference_as(self, expected: Any):
        self.begin_check() \
            .define_expected_value(expected, 'same instance as', 'different instance than') \
            .fail_when(lambda sut: sut is not expected, "The {0} must be the same instance as the {1}.", MessageOption.WITH_HASH) \
            .on_negate("The {0} must not be the same instance as the {1}.", MessageOption.WITH_HASH) \
            .end_check()
        return self.build_link()

    ## ===== NULLITY ===== ##
    def is_null(self):
        self.begin_check() \
            .fail_when(lambda sut: sut is not None, "The {0} must be null.", MessageOption.NO_EXPECTED_BLOCK) \
            .on_negate("The {0} must not be null.", MessageOption.NO_EXPECTED_BLOCK) \
            .end_check()
        return self.build_link()

    def is_not_null(self):
        return self.not_.is_null()

    ## ===== TYPES ===== ##
    def is_instance_of(self, expected_type: type):
        self.begin_check() \
            .fail_if_null() \
            .define_expected_type(expected_type) \
            .fail_when(lambda sut: not is_instance_optimized(sut, expected_type),
                       "The {0} is not an instance of the {1}.", MessageOption.FORCE_TYPE, FailureCause.TYPE_MISMATCH) \
            .on_negate("The {0} is an instance of the {1} whereas it must not.", MessageOption.FORCE_TYPE) \
            .end_check()
        return self.build_link()

    def is_not_instance_of(self, expected_type: type):
        return self.not_.is_instance_of(expected_type)

    ## ===== MEMBERSHIP ===== ##
    def is_one_of(self, *values: Any):
        """Checks that the value is structurally equal to at least one of the candidates."""
        criteria = Criteria()
        candidates = [ReflectionWrapper.build(v, criteria) for v in values]

        def match(sut, logic):
            if not ReflectionWrapper.build(sut, criteria).is_one_of(candidates):
                logic.fail("The {0} is equal to none of the {1} whereas it should.", cause=FailureCause.MEMBERSHIP_MISMATCH)

        self.begin_check() \
            .define_possible_values(values) \
            .analyze(match) \
            .on_negate("The {0} is equal to one of the {1} whereas it must not.") \
            .end_check()
        return self.build_link()

    ## ===== SIZE & ELEMENTS ===== ##
    def has_size(self, expected_size: int):
        def size_of(sut):
            return len(sut) if isinstance(sut, collections.abc.Sized) else None

        self.begin_check() \
            .fail_if_null() \
            .check_sut_attributes(size_of, 'size') \
            .define_expected_value(expected_size) \
            .fail_when(lambda size: size is None, "The {0} is not available: the checked value has no size.", MessageOption.NO_EXPECTED_BLOCK) \
            .fail_when(lambda size: size != expected_size, "The {0} is different from the {1}.") \
            .on_negate("The {0} is equal to the {1} whereas it must not.") \
            .end_check()
        return self.build_link()

    def has_only_elements_that(self, predicate: Callable[[Any], bool], description: Optional[str] = None):
        """Checks that every element of the (iterable) value satisfies the predicate."""
        condition = description or getattr(predicate, '__name__', 'the condition')
        # Braces in the description are literal text, not template fields
        template_condition = condition.replace('{', '{{').replace('}', '}}')

        def scan(sut, logic):
            for index, element in enumerate(sut):
                if not predicate(element):
                    logic.set_values_index(index) \
                        .define_expected_result(element, f"an element satisfying {condition}", None) \
                        .fail(f"The {{0}} contains an element that does not satisfy {template_condition}.")
                    return

        self.begin_check() \
            .fail_if_null() \
            .analyze(scan) \
            .on_negate(f"The {{0}} contains only elements that satisfy {template_condition}, whereas it must not.", MessageOption.NO_EXPECTED_BLOCK) \
            .end_check()
        return self.build_link()

    ## ===== REFLECTION ===== ##
    def considering(self, criteria: Optional[Criteria] = None, *, private: bool = False, class_attributes: bool = False,
                    inherited: bool = True, duck_typing: bool = False, max_depth: Optional[int] = None,
                    excluding: tuple = ()) -> ReflectionCheck:
        """Switch to member-wise checks, selecting members with the given criteria or flags."""
        if criteria is None:
            criteria = Criteria(
                include_private=private,
                include_class_attributes=class_attributes,
                include_inherited=inherited,
                duck_typing=duck_typing,
                excluded=frozenset(excluding),
            )
            if max_depth is not None:
                criteria = criteria.limited_to(max_depth)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE object_checks.considering: Switching to reflection checks with {criteria!r}")
        return ReflectionCheck(self.value, name=self.name, negated=self.negated, label=self.label, criteria=criteria)
