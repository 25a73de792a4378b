# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.reflection

Access fields and properties by name through registered accessors.

Members are registered per type when the class is defined, lookups walk
the MRO of the runtime type. Field accessors bypass __setattr__, so frozen
dataclasses and other guarded attributes can be written.

Example

>>> @reflectable('_secret', properties=('size',))
... class Box:
...     def __init__(self):
...         self._secret = 42
...     @property
...     def size(self):
...         return 3
>>> get_field_value(Box(), '_secret'), get_property_value(Box(), 'size')
(42, 3)

"""

import logging
from collections.abc import Callable
from typing import Any, NamedTuple, TypeVar
from .lib.exceptions import MemberNotFound

logger = logging.getLogger(__name__)

T = TypeVar('T')
Getter = Callable[[object], Any] | None
Setter = Callable[[object, Any], None] | None


class Accessor(NamedTuple):

    """Getter and setter of a member."""

    getter: Getter
    setter: Setter


class Accessors:

    """Registered members and attached attributes of a type."""

    def __init__(self):
        self.fields: dict[str, Accessor] = {}
        self.properties: dict[str, Accessor] = {}
        self.attributes: list[object] = []


_registry: dict[type, Accessors] = {}


def accessors(cls: type) -> Accessors:
    """Return the registry entry of cls, created on first use."""
    if (entry := _registry.get(cls)) is None:
        entry = _registry[cls] = Accessors()
    return entry


def _field_accessor(name: str) -> Accessor:
    def getter(obj):
        try:
            return object.__getattribute__(obj, name)
        except AttributeError as exc:
            raise MemberNotFound(
                f"Field '{name}' is not set on "
                f"'{_full_name(type(obj))}' object.") from exc

    def setter(obj, value):
        object.__setattr__(obj, name, value)
    return Accessor(getter, setter)


def register_field(cls: type, name: str):
    """Register an instance attribute of cls."""
    accessors(cls).fields[name] = _field_accessor(name)
    logger.debug("Registered field %s.%s", cls.__qualname__, name)


def register_property(cls: type, name: str):
    """Register a property of cls or of one of its bases."""
    prop = next((klass.__dict__[name] for klass in cls.__mro__
                 if name in klass.__dict__), None)
    if not isinstance(prop, property):
        raise MemberNotFound(
            f"Property '{name}' not found in type '{_full_name(cls)}'.")
    accessors(cls).properties[name] = Accessor(prop.fget, prop.fset)
    logger.debug("Registered property %s.%s", cls.__qualname__, name)


def reflectable(*fields: str, properties=()) -> Callable[[type[T]], type[T]]:
    """Class decorator registering fields and properties."""
    def reflectable_(cls: type[T]) -> type[T]:
        for name in fields:
            register_field(cls, name)
        for name in properties:
            register_property(cls, name)
        return cls
    return reflectable_


def attach(*attributes: object) -> Callable[[type[T]], type[T]]:
    """Class decorator attaching attribute objects to the class."""
    def attach_(cls: type[T]) -> type[T]:
        accessors(cls).attributes.extend(attributes)
        return cls
    return attach_


def get_attribute(cls: type, attr_type: type[T]) -> T | None:
    """First attribute of type attr_type attached to cls or its bases."""
    for klass in cls.__mro__:
        if entry := _registry.get(klass):
            for attribute in entry.attributes:
                if isinstance(attribute, attr_type):
                    return attribute
    return None


def _full_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _lookup(obj: object, name: str, kind: str) -> Accessor:
    for klass in type(obj).__mro__:
        if entry := _registry.get(klass):
            members = entry.fields if kind == 'Field' else entry.properties
            if accessor := members.get(name):
                return accessor
    raise MemberNotFound(
        f"{kind} '{name}' not found in type '{_full_name(type(obj))}'.")


def _checked(value: Any, expected: type | None) -> Any:
    if expected is not None and not isinstance(value, expected):
        raise TypeError(f"Expected {expected.__name__}, "
                        f"got {type(value).__name__}")
    return value


def get_field_value(obj: object, name: str, expected: type | None = None
                    ) -> Any:
    """Value of the registered field name of obj."""
    return _checked(_lookup(obj, name, 'Field').getter(obj), expected)


def set_field_value(obj: object, name: str, value: Any):
    """Set the registered field name of obj."""
    _lookup(obj, name, 'Field').setter(obj, value)


def get_property_value(obj: object, name: str, expected: type | None = None
                       ) -> Any:
    """Value of the registered property name of obj."""
    accessor = _lookup(obj, name, 'Property')
    if accessor.getter is None:
        raise MemberNotFound(
            f"Property '{name}' of type '{_full_name(type(obj))}' "
            "has no getter.")
    return _checked(accessor.getter(obj), expected)


def set_property_value(obj: object, name: str, value: Any):
    """Set the registered property name of obj."""
    accessor = _lookup(obj, name, 'Property')
    if accessor.setter is None:
        raise MemberNotFound(
            f"Property '{name}' of type '{_full_name(type(obj))}' "
            "has no setter.")
    accessor.setter(obj, value)
