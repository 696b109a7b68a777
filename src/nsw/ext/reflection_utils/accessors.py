"""
Cached, by-name access to the public properties of objects.

How Properties Are Found
------------------------

Python classes do not formally declare their data fields, so the properties of a type are discovered heuristically,
by walking its MRO (base classes first) and collecting public names (i.e. not starting with ``_``) from:

- class annotations, including dataclass fields (``ClassVar`` annotations are excluded)
- `property` objects; these are readable if they have a getter and writable if they have a setter
- ``__slots__``

Methods and other descriptors are never considered properties. Fields of frozen dataclasses are read-only.

Alternatively, a class can describe its properties explicitly by defining a ``__property_accessors__`` attribute that
maps each property name to a ``(getter, setter)`` pair, where the setter may be None for read-only properties. In this
case no discovery is performed for that class.

The Accessor Cache
------------------

The table of accessors for a type is built the first time the type is encountered and is then stored in a
process-wide cache, to be reused for all instances of that type. The cache is never invalidated. It is safe to use
from multiple threads: if several threads build the table for the same type concurrently, the first one to be stored
wins and all threads end up using it.
"""

import dataclasses
import inspect
import logging
import threading
import typing

from operator import attrgetter
from types import MappingProxyType, MemberDescriptorType
from typing import Any, Callable, Dict, Optional, Mapping, Tuple

from nsw.ext.ensure.errors import ErrorKind, fail


_log = logging.getLogger(__name__)


Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


@dataclasses.dataclass(frozen=True)
class PropertyInfo:
    """Describes a property discovered on a type."""
    name: str
    declared_type: Any = None
    can_get: bool = True
    can_set: bool = False
    declaring_type: Optional[type] = None


@dataclasses.dataclass(frozen=True)
class TypeAccessors:
    """The table of accessors for all the properties of a type. Immutable once built."""
    owner_type: type
    properties: Mapping[str, PropertyInfo]
    getters: Mapping[str, Getter]
    setters: Mapping[str, Setter]


_cache: Dict[type, TypeAccessors] = dict()
_cache_lock = threading.Lock()


def get_type_accessors(cls: type) -> TypeAccessors:
    """
    Gets the table of property accessors for a type, building it if this is the first time the type is seen.
    """
    accessors = _cache.get(cls)
    if accessors is not None:
        return accessors

    accessors = _build_type_accessors(cls)

    with _cache_lock:
        return _cache.setdefault(cls, accessors)


def accessor_cache_size() -> int:
    """Returns the number of types for which accessors have been cached so far."""
    return len(_cache)


def _build_type_accessors(cls: type) -> TypeAccessors:
    _log.debug("Building property accessors for %s", cls.__qualname__)

    explicit = getattr(cls, '__property_accessors__', None)
    if explicit is not None:
        return _build_explicit_accessors(cls, explicit)

    properties = dict()
    getters = dict()
    setters = dict()

    for name, (info, getter, setter) in _discover_properties(cls).items():
        properties[name] = info
        if getter is not None:
            getters[name] = getter
        if setter is not None:
            setters[name] = setter

    return TypeAccessors(cls, MappingProxyType(properties), MappingProxyType(getters), MappingProxyType(setters))


def _build_explicit_accessors(cls: type, explicit: Mapping[str, Tuple[Optional[Getter], Optional[Setter]]]):
    properties = dict()
    getters = dict()
    setters = dict()

    for name, (getter, setter) in explicit.items():
        properties[name] = PropertyInfo(
            name, can_get=(getter is not None), can_set=(setter is not None), declaring_type=cls
        )
        if getter is not None:
            getters[name] = getter
        if setter is not None:
            setters[name] = setter

    return TypeAccessors(cls, MappingProxyType(properties), MappingProxyType(getters), MappingProxyType(setters))


def _discover_properties(cls: type) -> Dict[str, Tuple[PropertyInfo, Optional[Getter], Optional[Setter]]]:
    found = dict()
    frozen_fields = _get_frozen_dataclass_fields(cls)

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue

        for name, hint in inspect.get_annotations(klass).items():
            if _is_public(name) and not _is_class_var(hint) and not _is_non_data_member(klass, name):
                found[name] = _make_field_entry(name, hint, klass, writable=(name not in frozen_fields))

        for name in _get_slots(klass):
            if _is_public(name) and (name not in found):
                found[name] = _make_field_entry(name, None, klass, writable=True)

        for name, member in klass.__dict__.items():
            if _is_public(name) and isinstance(member, property):
                found[name] = _make_property_entry(name, member, klass)

    return found


def _make_field_entry(name: str, hint: Any, klass: type, writable: bool):
    setter = _make_attr_setter(name) if writable else None

    return PropertyInfo(name, hint, True, writable, klass), attrgetter(name), setter


def _make_property_entry(name: str, prop: property, klass: type):
    getter = prop.fget
    setter = prop.fset
    declared_type = getattr(getter, '__annotations__', dict()).get('return')

    return PropertyInfo(name, declared_type, getter is not None, setter is not None, klass), getter, setter


def _make_attr_setter(name: str) -> Setter:
    def _setter(instance, value):
        setattr(instance, name, value)

    return _setter


def _get_frozen_dataclass_fields(cls: type) -> frozenset:
    if dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen:
        return frozenset(field.name for field in dataclasses.fields(cls))

    return frozenset()


def _get_slots(klass: type) -> Tuple[str, ...]:
    slots = klass.__dict__.get('__slots__', ())

    return (slots,) if isinstance(slots, str) else tuple(slots)


def _is_public(name: str) -> bool:
    return not name.startswith('_')


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(('ClassVar', 'typing.ClassVar'))

    return (hint is typing.ClassVar) or (typing.get_origin(hint) is typing.ClassVar)


def _is_non_data_member(klass: type, name: str) -> bool:
    member = klass.__dict__.get(name)

    if isinstance(member, (property, MemberDescriptorType)):
        return False

    return (member is not None) and hasattr(member, '__get__')


class FastProperty:
    """
    Accessor for a single property of a type, backed by the accessor cache.

    Unlike `TypeWrapper`, which tolerates unknown or inaccessible properties, this is the strict interface: trying to
    read a property without a getter, or write one without a setter, raises a `NotSupportedError`.
    """
    _info: PropertyInfo
    _getter: Optional[Getter]
    _setter: Optional[Setter]

    def __init__(self, owner_type: type, name: str):
        accessors = get_type_accessors(owner_type)

        if name not in accessors.properties:
            raise AttributeError(f"Type {owner_type.__qualname__} has no property named {name!r}")

        self._info = accessors.properties[name]
        self._getter = accessors.getters.get(name)
        self._setter = accessors.setters.get(name)

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def info(self) -> PropertyInfo:
        return self._info

    @property
    def can_get(self) -> bool:
        return self._getter is not None

    @property
    def can_set(self) -> bool:
        return self._setter is not None

    def get(self, instance: Any) -> Any:
        if self._getter is None:
            fail(ErrorKind.NOT_SUPPORTED, f"Get {self.name} is not supported.")

        return self._getter(instance)

    def set(self, instance: Any, value: Any):
        if self._setter is None:
            fail(ErrorKind.NOT_SUPPORTED, f"Set {self.name} is not supported.")

        self._setter(instance, value)


class TypeWrapper:
    """
    Wraps an object so as to provide access to its public properties by name.

    The wrapper is lenient: reading an unknown or unreadable property returns a default value, and writing an unknown
    or read-only property does nothing (the `set` method reports whether the write happened). A field that is known
    but has not been set on the instance is also treated as unreadable. Errors raised by property getters propagate.

    Example::

        wrapper = TypeWrapper(user)
        wrapper.get('name')
        wrapper.set('age', 42)
    """
    _source: Any
    _accessors: TypeAccessors

    def __init__(self, obj: Any):
        self._source = obj
        self._accessors = get_type_accessors(obj.__class__)

    @property
    def source(self) -> Any:
        return self._source

    @property
    def properties(self) -> Mapping[str, PropertyInfo]:
        return self._accessors.properties

    def has(self, name: str) -> bool:
        return name in self._accessors.properties

    def get(self, name: str) -> Any:
        """Returns the value of a property, or None if it does not exist or cannot be read."""
        return self.get_or_default(name, None)

    def get_or_default(self, name: str, default: Any = None) -> Any:
        getter = self._accessors.getters.get(name)
        if getter is None:
            return default

        if not isinstance(getter, attrgetter):
            return getter(self._source)

        try:
            return getter(self._source)
        except AttributeError:
            return default

    def set(self, name: str, value: Any) -> bool:
        """
        Sets the value of a property. Returns False (and does nothing) if the property does not exist or is read-only.
        """
        setter = self._accessors.setters.get(name)
        if setter is None:
            return False

        setter(self._source, value)

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Returns a dict with the values of all the readable properties, in discovery order."""
        return {name: self.get(name) for name in self._accessors.getters.keys()}
