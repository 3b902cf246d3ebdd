# ===== MODULE DOCSTRING ===== #
"""
Member selection criteria for structural comparison.

A Criteria instance decides which members of a value take part in a
structural comparison or field scan. Instances are immutable; every
fluent method returns a modified copy, so one Criteria can be shared by
any number of wrappers.

Usage:
    criteria = Criteria().with_private().excluding('cache', 'meta.timestamp')
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import FrozenSet, Final, List, Optional
import dataclasses

## ===== LOCAL ===== ##
from .config import MAX_COMPARISON_DEPTH
from .error_utils import Path, _format_path

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['Criteria']

# ===== CLASSES ===== #

@dataclasses.dataclass(frozen=True)
class Criteria:
    """Which members of a value are eligible for structural inspection.

    Attributes:
        include_private (bool): Include members whose name starts with an underscore.
        include_class_attributes (bool): Include non-callable attributes defined on the class.
        include_inherited (bool): Include class attributes and slots contributed by base classes.
        max_depth (int): Depth past which members are compared with == instead of recursion.
        excluded (FrozenSet[str]): Member names, or dotted paths from the root, to skip.
        duck_typing (bool): Compare values of unrelated types on the members they share.
    """
    include_private: bool = False
    include_class_attributes: bool = False
    include_inherited: bool = True
    max_depth: int = MAX_COMPARISON_DEPTH
    excluded: FrozenSet[str] = frozenset()
    duck_typing: bool = False

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be positive or zero, got {self.max_depth}")
        # Accept any iterable of names
        object.__setattr__(self, 'excluded', frozenset(self.excluded))

    ## ===== FLUENT COPIES ===== ##
    def excluding(self, *names: str) -> 'Criteria':
        return dataclasses.replace(self, excluded=self.excluded | frozenset(names))

    def with_private(self) -> 'Criteria':
        return dataclasses.replace(self, include_private=True)

    def with_class_attributes(self) -> 'Criteria':
        return dataclasses.replace(self, include_class_attributes=True)

    def without_inherited(self) -> 'Criteria':
        return dataclasses.replace(self, include_inherited=False)

    def with_duck_typing(self) -> 'Criteria':
        return dataclasses.replace(self, duck_typing=True)

    def limited_to(self, depth: int) -> 'Criteria':
        return dataclasses.replace(self, max_depth=depth)

    ## ===== SELECTION ===== ##
    def accepts_name(self, name: object) -> bool:
        """Visibility rule applied to a member name, before exclusions."""
        if isinstance(name, str) and name.startswith('_'):
            if name.startswith('__') and name.endswith('__'):
                return False
            return self.include_private
        return True

    def is_excluded(self, name: object, path: Optional[Path] = None) -> bool:
        """True if the member is excluded by name or by its full dotted path."""
        if not self.excluded:
            return False
        if isinstance(name, str) and name in self.excluded:
            return True
        return path is not None and _format_path(path) in self.excluded
