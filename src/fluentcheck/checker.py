# ===== MODULE DOCSTRING ===== #
"""
Check context and chain link.

A Checker holds the value under test, its display label and the negation
flag. It is pure bookkeeping: checks open a CheckLogic against it, and on
success hand back a CheckLink so more checks can be chained.

    that(42).not_.is_zero().and_.is_strictly_positive()

Negation never mutates a context: `not_` returns a new view over the same
value with the flag flipped, so `not_.not_` restores the original
semantics.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Any, Optional
import logging

## ===== LOCAL ===== ##
from .check_logic import CheckLogic
from .message import MessageBlock, MessageOption, sut_label

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['Checker', 'CheckLink']

# ===== CLASSES ===== #

class Checker:
    """Per-call holder of the sut, its display label and the negation flag."""

    def __init__(self, value: Any, name: Optional[str] = None, negated: bool = False, label: Optional[str] = None):
        self.value = value
        self.name = name
        self.negated = negated
        self.label = label or sut_label(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, label={self.label!r}, negated={self.negated})"

    def _respawn(self, negated: bool) -> 'Checker':
        """A context of the same class over the same value."""
        return type(self)(self.value, name=self.name, negated=negated, label=self.label)

    @property
    def not_(self) -> 'Checker':
        """The same context with negation toggled."""
        return self._respawn(negated=not self.negated)

    def derive(self, value: Any, label: str) -> 'Checker':
        """A context over a value extracted from this one (e.g. its length), keeping negation."""
        return Checker(value, negated=self.negated, label=f"{self.label}'s {label}")

    def describe(self, options: MessageOption = MessageOption.NONE) -> str:
        """The rendered sut block, as it appears in failure messages."""
        return "\n".join(MessageBlock(self.label, self.value).render(options))

    def begin_check(self) -> CheckLogic:
        """Open a check-logic builder bound to this context."""
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE checker.begin_check: Opening check on {self!r}")
        return CheckLogic(self)

    def build_link(self) -> 'CheckLink':
        return CheckLink(self)

class CheckLink:
    """Returned by a passing check; continues the chain on the same value."""

    def __init__(self, checker: Checker):
        self._checker = checker

    @property
    def checker(self) -> Checker:
        return self._checker

    @property
    def and_(self) -> Checker:
        """A fresh context over the same value, negation reset."""
        return self._checker._respawn(negated=False)

    @property
    def not_(self) -> Checker:
        return self.and_.not_
