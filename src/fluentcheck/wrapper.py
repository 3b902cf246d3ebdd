# ===== MODULE DOCSTRING ===== #
"""
Structural wrapper and recursive comparator.

A ReflectionWrapper holds one value together with the context needed to
compare it member by member: its declared type, the active Criteria, the
path from the comparison root and the identities of the objects already
visited on that path.

The comparison is depth-first and stops at the first difference, which is
returned as a Mismatch carrying the full member path. Cycles are broken on
pairs: when the same (actual, expected) pair of objects comes back on the
current path, that branch is considered equal and is not walked a second
time. A graph looping on one side only keeps being compared against the
other side's data. Each child receives a new set, so siblings never see
each other.

Field scans work on one side only and use the wrapper's own ancestor set.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Callable, Dict, List,
    Final, FrozenSet, Any,
    Optional, Iterable, Tuple,
)
import logging

## ===== LOCAL ===== ##
from .criteria import Criteria
from .error_utils import Mismatch, Path, _format_path, _construct_mismatch_error
from .member_accessor import get_members, has_member_layout, is_sequence
from .type_utils import are_types_compatible, format_type_for_display, is_scalar

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== TYPE ALIASES ===== ##
# visitor(wrapper, remaining_depth) -> whether to descend into the wrapper's members
FieldVisitor = Callable[['ReflectionWrapper', int], bool]
# (id(actual), id(expected)) pairs on the current comparison path
VisitedPairs = FrozenSet[Tuple[int, int]]

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['ReflectionWrapper', 'FieldVisitor']

# ===== FUNCTIONS ===== #

def _values_equal(actual: Any, expected: Any) -> bool:
    try:
        return bool(actual == expected)
    except (TypeError, ValueError):
        # Types whose __eq__ is not a plain boolean (arrays, frames)
        return actual is expected

# ===== CLASSES ===== #

class ReflectionWrapper:
    """One side of a structural comparison.

    Attributes:
        value: The wrapped value (never mutated).
        declared_type: The type the value is compared as; defaults to type(value).
        criteria: Member selection rules.
        path: Member names/indices from the comparison root.
        ancestors: ids of the objects on the path above this one.
    """

    def __init__(
        self,
        value: Any,
        criteria: Optional[Criteria] = None,
        declared_type: Optional[type] = None,
        path: Path = (),
        ancestors: FrozenSet[int] = frozenset(),
    ):
        self.value = value
        self.criteria = criteria if criteria is not None else Criteria()
        self.declared_type = declared_type if declared_type is not None else type(value)
        self.path = tuple(path)
        self.ancestors = ancestors

    @classmethod
    def build(cls, value: Any, criteria: Optional[Criteria] = None, declared_type: Optional[type] = None,
              path: Path = ()) -> 'ReflectionWrapper':
        """Wrap a value as the root of a comparison, optionally rooted at a member path."""
        if isinstance(value, ReflectionWrapper):
            return value
        return cls(value, criteria=criteria, declared_type=declared_type, path=path)

    def __repr__(self) -> str:
        return f"ReflectionWrapper({self.label!r}, {self.value!r})"

    @property
    def label(self) -> str:
        return _format_path(self.path) or 'root'

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def is_revisit(self) -> bool:
        """True if this value already appears on its own ancestor path."""
        return id(self.value) in self.ancestors

    @property
    def is_leaf(self) -> bool:
        return is_scalar(self.value) or not has_member_layout(self.value)

    ## ===== MEMBERS ===== ##
    def _child(self, name: Any, value: Any) -> 'ReflectionWrapper':
        return ReflectionWrapper(
            value,
            criteria=self.criteria,
            path=self.path + (name,),
            ancestors=self.ancestors | {id(self.value)},
        )

    def members(self) -> List['ReflectionWrapper']:
        """Child wrappers for every eligible, non-excluded member, in declaration order."""
        if self.is_leaf:
            return []
        children = []
        for name, getter in get_members(self.value, self.criteria):
            if self.criteria.is_excluded(name, self.path + (name,)):
                continue
            children.append(self._child(name, getter()))
        return children

    def _members_by_name(self) -> Dict[Any, 'ReflectionWrapper']:
        return {child.path[-1]: child for child in self.members()}

    ## ===== COMPARISON ===== ##
    def _mismatch(self, expected: 'ReflectionWrapper', kind: str, detail: Optional[str] = None) -> Mismatch:
        mismatch = Mismatch(path=self.path, actual=self.value, expected=expected.value, kind=kind, detail=detail)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE wrapper.compare_to: {_construct_mismatch_error(mismatch)}")
        return mismatch

    def compare_to(self, expected: 'ReflectionWrapper', visited: VisitedPairs = frozenset()) -> Optional[Mismatch]:
        """Compare this (actual) wrapper with an expected one, member by member.

        Args:
            expected: The wrapper of the expected value, at the same path.
            visited: (id(actual), id(expected)) pairs already being compared
                on the path above this one.

        Returns:
            The first Mismatch found, or None when both sides are structurally equal.
        """
        actual_value, expected_value = self.value, expected.value
        if actual_value is expected_value:
            return None
        if actual_value is None or expected_value is None:
            return self._mismatch(expected, 'null', 'null vs non-null' if actual_value is None else 'non-null vs null')

        duck = False
        if not are_types_compatible(actual_value, expected_value):
            if not self.criteria.duck_typing or self.is_leaf or expected.is_leaf:
                return self._mismatch(
                    expected, 'type',
                    f"type {format_type_for_display(type(actual_value))} vs {format_type_for_display(type(expected_value))}"
                )
            duck = True

        if self.is_leaf or expected.is_leaf:
            if _values_equal(actual_value, expected_value):
                return None
            return self._mismatch(expected, 'value')

        # Only the same pair met again closes a cycle; one side looping alone does not
        pair = (id(actual_value), id(expected_value))
        if pair in visited:
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug(f"TRACE wrapper.compare_to: Cycle detected at '{self.label}'. Treating as equal.")
            return None

        if self.depth >= self.criteria.max_depth:
            if _values_equal(actual_value, expected_value):
                return None
            return self._mismatch(expected, 'value', f"differs beyond depth {self.criteria.max_depth}")

        if is_sequence(actual_value) and is_sequence(expected_value) and len(actual_value) != len(expected_value):
            return self._mismatch(expected, 'length', f"length {len(actual_value)} vs {len(expected_value)}")

        return self._compare_members(expected, duck, visited | {pair})

    def _compare_members(self, expected: 'ReflectionWrapper', duck: bool, visited: VisitedPairs) -> Optional[Mismatch]:
        actual_members = self._members_by_name()
        expected_members = expected._members_by_name()

        if duck:
            names = [name for name in actual_members if name in expected_members]
            if not names:
                return self._mismatch(
                    expected, 'type',
                    f"no member in common between {format_type_for_display(type(self.value))} and {format_type_for_display(type(expected.value))}"
                )
        else:
            names = list(actual_members)
            names.extend(name for name in expected_members if name not in actual_members)

        for name in names:
            actual_child = actual_members.get(name)
            expected_child = expected_members.get(name)
            if expected_child is None:
                return Mismatch(path=actual_child.path, actual=actual_child.value, expected=None,
                                kind='extra', detail='member is absent from the expected value')
            if actual_child is None:
                return Mismatch(path=expected_child.path, actual=None, expected=expected_child.value,
                                kind='missing', detail='member is absent from the checked value')
            mismatch = actual_child.compare_to(expected_child, visited)
            if mismatch is not None:
                return mismatch
        return None

    ## ===== MEMBERSHIP ===== ##
    def is_one_of(self, candidates: Iterable['ReflectionWrapper']) -> bool:
        """True iff this wrapper is structurally equal to at least one candidate."""
        for candidate in candidates:
            if self.compare_to(candidate) is None:
                return True
        return False

    ## ===== FIELD SCAN ===== ##
    def scan_fields(self, visitor: FieldVisitor, max_depth: int = 0) -> None:
        """Visit members up to max_depth levels below this wrapper.

        The visitor receives each member wrapper and the remaining depth
        (0 for the deepest visited level) and returns whether to descend
        into that member. Objects already on the current path are not
        entered again.
        """
        for child in self.members():
            descend = visitor(child, max_depth)
            if descend and max_depth > 0 and not child.is_revisit:
                child.scan_fields(visitor, max_depth - 1)
