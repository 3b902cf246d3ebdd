# ===== MODULE DOCSTRING ===== #
"""
Member enumeration for structural comparison.

`get_members(value, criteria)` returns the ordered `(name, getter)` pairs
of a value:
- Registered accessors (see `register_accessor`) take precedence, looked up
  along the value type's MRO
- Mappings expose their keys
- Sequences (other than strings and bytes) expose their indices
- Objects expose dataclass fields, then `__slots__`, then the instance
  `__dict__`, then (when the criteria ask for it) class attributes

Members keep their declaration order; a name seen twice keeps its first
position. Getters are evaluated lazily so an excluded member is never read.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Callable, Dict, List,
    Final, Tuple, Any,
    Optional, Iterable,
)
import collections.abc
import dataclasses
import threading
import types
import logging

## ===== LOCAL ===== ##
from .criteria import Criteria

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('fluentcheck')

## ===== TYPE ALIASES ===== ##
Member = Tuple[Any, Callable[[], Any]]
Accessor = Callable[[Any, Criteria], Iterable[Member]]

## ===== ACCESSOR REGISTRY ===== ##
# Maps type -> accessor, consulted along the MRO of the inspected value
_ACCESSORS: Dict[type, Accessor] = {}
_accessors_lock = threading.Lock()

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Member',
    'Accessor',
    'register_accessor',
    'unregister_accessor',
    'get_members',
    'is_mapping',
    'is_sequence',
    'has_member_layout',
]

# ===== FUNCTIONS ===== #

## ===== REGISTRY ===== ##
def register_accessor(target_type: type, accessor: Accessor) -> None:
    """Install an explicit member accessor for a type and its subclasses.

    Args:
        target_type: The class whose instances the accessor describes.
        accessor: Callable taking (value, criteria) and returning (name, getter) pairs.

    Raises:
        TypeError: If target_type is not a class or accessor is not callable.
    """
    if not isinstance(target_type, type):
        raise TypeError(f"register_accessor expects a class, got {target_type!r}")
    if not callable(accessor):
        raise TypeError(f"accessor for {target_type.__qualname__} must be callable")
    with _accessors_lock:
        _ACCESSORS[target_type] = accessor
    _log.debug(f"TRACE member_accessor.register_accessor: Registered accessor for {target_type!r}")

def unregister_accessor(target_type: type) -> None:
    with _accessors_lock:
        _ACCESSORS.pop(target_type, None)

def _find_registered(value_type: type) -> Optional[Accessor]:
    if not _ACCESSORS:
        return None
    for klass in getattr(value_type, '__mro__', (value_type,)):
        accessor = _ACCESSORS.get(klass)
        if accessor is not None:
            return accessor
    return None

## ===== CLASSIFICATION ===== ##
def is_mapping(value: Any) -> bool:
    return isinstance(value, collections.abc.Mapping)

def is_sequence(value: Any) -> bool:
    return isinstance(value, collections.abc.Sequence) and not isinstance(value, (str, bytes, bytearray))

## ===== ENUMERATION ===== ##
def _getter(value: Any, name: str) -> Callable[[], Any]:
    return lambda: getattr(value, name)

def _item_getter(value: Any, key: Any) -> Callable[[], Any]:
    return lambda: value[key]

def _slot_names(value_type: type, criteria: Criteria) -> List[str]:
    classes = value_type.__mro__ if criteria.include_inherited else (value_type,)
    names: List[str] = []
    for klass in classes:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ('__dict__', '__weakref__'))
    return names

def _class_attribute_names(value_type: type, criteria: Criteria) -> List[str]:
    classes = value_type.__mro__ if criteria.include_inherited else (value_type,)
    names: List[str] = []
    for klass in classes:
        if klass is object:
            continue
        for name, attribute in klass.__dict__.items():
            if callable(attribute) or isinstance(attribute, (property, classmethod, staticmethod)):
                continue
            # Slot descriptors are instance state, reported by _slot_names
            if isinstance(attribute, (types.MemberDescriptorType, types.GetSetDescriptorType)):
                continue
            names.append(name)
    return names

def _object_members(value: Any, criteria: Criteria) -> List[Member]:
    value_type = type(value)
    names: List[str] = []
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names.extend(f.name for f in dataclasses.fields(value))
    names.extend(_slot_names(value_type, criteria))
    instance_dict = getattr(value, '__dict__', None)
    if isinstance(instance_dict, dict):
        names.extend(instance_dict)
    if criteria.include_class_attributes:
        names.extend(_class_attribute_names(value_type, criteria))

    members: List[Member] = []
    seen = set()
    for name in names:
        if name in seen or not criteria.accepts_name(name):
            continue
        seen.add(name)
        # Unset slots are absent, not None
        if not hasattr(value, name):
            continue
        members.append((name, _getter(value, name)))
    return members

def get_members(value: Any, criteria: Criteria) -> List[Member]:
    """Enumerate the members of a value per the given criteria.

    Exclusions are not applied here: they depend on the member's full path,
    which only the wrapper knows.

    Args:
        value: The inspected value (never None).
        criteria: Visibility rules.

    Returns:
        Ordered list of (name, getter) pairs.
    """
    accessor = _find_registered(type(value))
    if accessor is not None:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE member_accessor.get_members: Using registered accessor for {type(value).__name__}")
        return list(accessor(value, criteria))
    if is_mapping(value):
        return [(key, _item_getter(value, key)) for key in value]
    if is_sequence(value):
        return [(index, _item_getter(value, index)) for index in range(len(value))]
    return _object_members(value, criteria)

def has_member_layout(value: Any) -> bool:
    """True if the value can expose members at all (as opposed to an opaque object compared with ==)."""
    if _find_registered(type(value)) is not None or is_mapping(value) or is_sequence(value):
        return True
    if isinstance(getattr(value, '__dict__', None), dict):
        return True
    return any('__slots__' in klass.__dict__ for klass in type(value).__mro__ if klass is not object)
