# ===== MODULE DOCSTRING ===== #
"""
Failure message formatting.

A FluentMessage turns a template plus a checked-value block and an
expected-value block into the final failure text:

    The checked value is different from the expected value.
    The checked value:
    	[1]
    The expected value:
    	[2]

The template's `{0}` receives the label of the checked value and `{1}`
the label of the expected block. MessageOption flags compose freely:
each one changes a single aspect of the rendering.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Optional, Sequence,
    Final, List, Any,
)
import dataclasses
import logging
import enum

## ===== LOCAL ===== ##
from .config import (
    MAX_VALUE_REPR_LENGTH, INDENT,
    DEFAULT_SUT_LABEL, SUT_LABEL_PREFIX,
    DEFAULT_EXPECTED_LABEL, EXPECTED_VALUES_LABEL,
    EXPECTED_TYPE_LABEL, GIVEN_VALUE_LABEL,
)
from .type_utils import format_type_for_display

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'MessageOption',
    'MessageBlock',
    'FluentMessage',
    'render_value',
    'sut_label',
]

# ===== OPTIONS ===== #

class MessageOption(enum.Flag):
    """Rendering options for failure messages."""
    NONE = 0
    # Removes the block describing the checked value
    NO_CHECKED_BLOCK = 1
    # Removes the block describing the expected value(s)
    NO_EXPECTED_BLOCK = 2
    # Renders types in place of values
    FORCE_TYPE = 4
    # Appends the type to each rendered value
    WITH_TYPE = 8
    # Appends the identity of each rendered value
    WITH_HASH = 16

# ===== FUNCTIONS ===== #

def render_value(value: Any) -> str:
    """Render one value as `[repr]`, truncating long representations."""
    value_repr = repr(value)
    if len(value_repr) > MAX_VALUE_REPR_LENGTH:
        value_repr = value_repr[:MAX_VALUE_REPR_LENGTH] + "..."
    return f"[{value_repr}]"

def _render_values(values: Sequence[Any], count: Optional[int] = None) -> str:
    count = len(values) if count is None else count
    items = ", ".join(render_value(v) for v in values)
    return f"{{{items}}} ({count} item{'' if count == 1 else 's'})"

def sut_label(name: Optional[str] = None) -> str:
    """Label of the checked value: 'checked value' or 'checked <name>'."""
    return f"{SUT_LABEL_PREFIX} {name or DEFAULT_SUT_LABEL}"

# ===== CLASSES ===== #

@dataclasses.dataclass
class MessageBlock:
    """One described value (or list of values) in a failure message.

    `kind` is one of 'single', 'list', 'possible', 'type' or 'given'.
    """
    label: str
    value: Any = None
    kind: str = 'single'
    count: Optional[int] = None
    comparison: Optional[str] = None
    negated_comparison: Optional[str] = None
    index: Optional[int] = None

    def _value_text(self, options: MessageOption, show_type: bool) -> str:
        if self.kind == 'type':
            return f"[{format_type_for_display(self.value)}]"
        if MessageOption.FORCE_TYPE in options:
            return f"[{format_type_for_display(type(self.value))}]"
        if self.kind in ('list', 'possible'):
            text = _render_values(list(self.value), self.count)
        else:
            text = render_value(self.value)
        if show_type or MessageOption.WITH_TYPE in options:
            text += f" of type: [{format_type_for_display(type(self.value))}]"
        if MessageOption.WITH_HASH in options:
            text += f" with id: [{id(self.value)}]"
        return text

    def render(self, options: MessageOption = MessageOption.NONE, negated: bool = False, show_type: bool = False) -> List[str]:
        """Render the block as its label line followed by its indented value line."""
        header = f"The {self.label}"
        if MessageOption.FORCE_TYPE in options and self.kind != 'type':
            header += "'s type"
        if self.index is not None:
            header += f" at index {self.index}"
        header += ":"
        comparison = self.negated_comparison if negated else self.comparison
        if comparison:
            header += f" {comparison}"
        return [header, f"{INDENT}{self._value_text(options, show_type)}"]

class FluentMessage:
    """Builds the text of one failure.

    Usage:
        text = (FluentMessage("The {0} is different from the {1}.")
                .for_sut(actual)
                .expected(expected)
                .render())
    """

    def __init__(self, template: str):
        self.template = template
        self.sut: MessageBlock = MessageBlock(sut_label(), None)
        self.expected_block: Optional[MessageBlock] = None
        self.options = MessageOption.NONE
        self.is_negated = False
        self._has_sut_value = False

    ## ===== CHECKED VALUE ===== ##
    def for_sut(self, value: Any, label: Optional[str] = None) -> 'FluentMessage':
        self.sut = MessageBlock(label or self.sut.label, value, index=self.sut.index)
        self._has_sut_value = True
        return self

    def with_index(self, index: Optional[int]) -> 'FluentMessage':
        self.sut.index = index
        return self

    ## ===== EXPECTED VALUE ===== ##
    def expected(self, value: Any, comparison: Optional[str] = None, negated_comparison: Optional[str] = None, label: str = DEFAULT_EXPECTED_LABEL) -> 'FluentMessage':
        self.expected_block = MessageBlock(label, value, 'single', comparison=comparison, negated_comparison=negated_comparison)
        return self

    def expected_values(self, values: Sequence[Any], count: Optional[int] = None, comparison: Optional[str] = None, negated_comparison: Optional[str] = None) -> 'FluentMessage':
        self.expected_block = MessageBlock(EXPECTED_VALUES_LABEL, list(values), 'list', count=count, comparison=comparison, negated_comparison=negated_comparison)
        return self

    def possible_values(self, values: Sequence[Any], comparison: Optional[str] = 'one of', negated_comparison: Optional[str] = 'none of') -> 'FluentMessage':
        self.expected_block = MessageBlock(EXPECTED_VALUES_LABEL, list(values), 'possible', comparison=comparison, negated_comparison=negated_comparison)
        return self

    def expected_type(self, expected_type: Any, comparison: Optional[str] = None, negated_comparison: Optional[str] = 'different from') -> 'FluentMessage':
        self.expected_block = MessageBlock(EXPECTED_TYPE_LABEL, expected_type, 'type', comparison=comparison, negated_comparison=negated_comparison)
        return self

    def comparing_to(self, value: Any, comparison: Optional[str] = None, negated_comparison: Optional[str] = None) -> 'FluentMessage':
        self.expected_block = MessageBlock(GIVEN_VALUE_LABEL, value, 'given', comparison=comparison, negated_comparison=negated_comparison)
        return self

    def with_block(self, block: Optional[MessageBlock]) -> 'FluentMessage':
        self.expected_block = dataclasses.replace(block) if block is not None else None
        return self

    ## ===== RENDERING ===== ##
    def with_options(self, options: MessageOption) -> 'FluentMessage':
        self.options |= options
        return self

    def negated(self, is_negated: bool = True) -> 'FluentMessage':
        self.is_negated = is_negated
        return self

    def _needs_type(self) -> bool:
        """Types are shown when both blocks would otherwise read the same."""
        expected = self.expected_block
        if expected is None or not self._has_sut_value or expected.kind not in ('single', 'given'):
            return False
        if type(self.sut.value) is type(expected.value):
            return False
        return render_value(self.sut.value) == render_value(expected.value)

    def header(self) -> str:
        expected_label = self.expected_block.label if self.expected_block is not None else DEFAULT_EXPECTED_LABEL
        return self.template.format(self.sut.label, expected_label)

    def render(self) -> str:
        show_type = self._needs_type()
        lines = [self.header()]
        if MessageOption.NO_CHECKED_BLOCK not in self.options and self._has_sut_value:
            lines.extend(self.sut.render(self.options, show_type=show_type))
        if MessageOption.NO_EXPECTED_BLOCK not in self.options and self.expected_block is not None:
            lines.extend(self.expected_block.render(self.options, negated=self.is_negated, show_type=show_type))
        text = "\n".join(lines)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE message.render: Generated message (length={len(text)}).")
        return text

    def __str__(self) -> str:
        return self.render()
