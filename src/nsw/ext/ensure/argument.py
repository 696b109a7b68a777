"""
Guards for checking the arguments received by a function.

All of these raise subclasses of `ArgumentError` (itself a `ValueError`), which remember the name of the offending
parameter. Guards that check a value return it, so that they can be used fluently::

    def __init__(self, name, items):
        self._name = not_blank_str(name, 'name')
        self._items = not_empty(items, 'items')
"""

import uuid

from typing import Any, Optional, Iterable, TypeVar, Type, Union, Tuple

from nsw.ext.ensure.errors import ErrorKind, fail


T = TypeVar('T')

_NULL_MESSAGE = "Value cannot be null."


def is_true(condition: bool, message: Optional[str] = None):
    """Raises an `ArgumentError` if `condition` is false."""
    if not condition:
        fail(ErrorKind.ARGUMENT_INVALID, message)


def is_not(condition: bool, message: Optional[str] = None):
    """Raises an `ArgumentError` if `condition` is true."""
    is_true(not condition, message)


def is_type(value: Any, type_: Union[type, Tuple[type, ...]], param_name: Optional[str] = None):
    """Raises an `ArgumentTypeError` if `value` is not an instance of `type_` (which can also be a tuple of types)."""
    if not isinstance(value, type_):
        fail(ErrorKind.ARGUMENT_TYPE, f"Value must be {_render_type(type_)}.", param_name)


def cast(value: Any, type_: Type[T], param_name: Optional[str] = None) -> T:
    """Like `is_type`, but returns the value if the check succeeds."""
    is_type(value, type_, param_name)

    return value


def not_none(value: Optional[T], param_name: Optional[str] = None) -> T:
    if value is None:
        fail(ErrorKind.ARGUMENT_NULL, _NULL_MESSAGE, param_name)

    return value


def not_none_named(**kwargs: Any):
    """
    Checks that none of the given keyword arguments is None, using the keyword as the parameter name. Example::

        not_none_named(source=source, target=target)

    The arguments are checked in the order they were given.
    """
    for name, value in kwargs.items():
        not_none(value, name)


def not_empty_uuid(value: Optional[uuid.UUID], param_name: Optional[str] = None) -> uuid.UUID:
    """Checks that a UUID is neither None nor the nil UUID (all zeros)."""
    if (value is None) or (value == _NIL_UUID):
        fail(ErrorKind.ARGUMENT_INVALID, f"Value cannot be {_NIL_UUID}.", param_name)

    return value


def not_empty_str(value: Optional[str], param_name: Optional[str] = None) -> str:
    if (value is None) or (value == ''):
        fail(ErrorKind.ARGUMENT_NULL, "String cannot be null or empty.", param_name)

    return value


def not_blank_str(value: Optional[str], param_name: Optional[str] = None) -> str:
    if (value is None) or (value.strip() == ''):
        fail(ErrorKind.ARGUMENT_NULL, "String cannot be null or white space.", param_name)

    return value


def is_empty(iterable: Optional[Iterable], param_name: Optional[str] = None):
    """
    Checks that an iterable is empty, but not None.

    Warning: for streams, this will consume the first item, if any.
    """
    if iterable is None:
        fail(ErrorKind.ARGUMENT_NULL, _NULL_MESSAGE, param_name)
    if _has_items(iterable):
        fail(ErrorKind.ARGUMENT_INVALID, "Value must be empty enumerable.", param_name)

    return iterable


def is_none_or_empty(iterable: Optional[Iterable], param_name: Optional[str] = None):
    if (iterable is not None) and _has_items(iterable):
        fail(ErrorKind.ARGUMENT_INVALID, "Value must be null or empty enumerable.", param_name)

    return iterable


def not_empty(iterable: Optional[Iterable], param_name: Optional[str] = None):
    """
    Checks that an iterable is neither None nor empty.

    Warning: for streams, this will consume the first item. Convert the stream to a list beforehand.
    """
    if (iterable is None) or not _has_items(iterable):
        fail(ErrorKind.ARGUMENT_NULL, _NULL_MESSAGE, param_name)

    return iterable


def in_range(value: Any, low: Any, high: Any, param_name: Optional[str] = None):
    """Checks that ``low <= value <= high``."""
    if not (low <= value <= high):
        fail(ErrorKind.ARGUMENT_OUT_OF_RANGE, f"Value must be between {low!r} and {high!r}.", param_name)

    return value


_NIL_UUID = uuid.UUID(int=0)


def _has_items(iterable: Iterable) -> bool:
    for _ in iterable:
        return True

    return False


def _render_type(type_: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(type_, tuple):
        return ' or '.join(_render_type(alt) for alt in type_)

    return type_.__qualname__ if type_.__module__ == 'builtins' else f"{type_.__module__}.{type_.__qualname__}"
