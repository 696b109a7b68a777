"""
Miscellaneous utilities for introspecting types and type hints.
"""

import types
import typing

from typing import Any, Optional


def is_base_type(cls: Optional[type], checking_type: type) -> bool:
    """
    Checks whether `checking_type` is `cls` itself or one of its ancestors. `object` never counts as a base type.
    """
    if (cls is None) or (checking_type is object):
        return False

    return checking_type in cls.__mro__


def is_subclass_of_raw_generic(generic: type, to_check: Any) -> bool:
    """
    Checks whether `to_check` derives from a generic class, irrespective of the type arguments.

    Example::

        class Box(Generic[T]): ...
        class IntBox(Box[int]): ...

        is_subclass_of_raw_generic(Box, IntBox)  # True
        is_subclass_of_raw_generic(Box, Box[str])  # True, parameterized types are reduced to their origin

    `object` never counts as a match.
    """
    if to_check is None:
        return False

    origin = typing.get_origin(to_check)
    if origin is not None:
        to_check = origin

    if not isinstance(to_check, type):
        return False

    return any(cls is generic for cls in to_check.__mro__ if cls is not object)


def create_generic_instance(generic: type, *type_args: Any, **kwargs: Any) -> Any:
    """
    Parameterizes a generic class with the given type arguments, and instantiates it with the given keyword arguments.
    """
    parameterized = generic[type_args] if len(type_args) != 1 else generic[type_args[0]]

    return parameterized(**kwargs)


def is_optional(type_hint: Any) -> bool:
    """
    Checks whether a type hint admits None, e.g. ``Optional[int]``, ``Union[str, None]`` or ``int | None``.
    """
    if (type_hint is None) or (type_hint is type(None)):
        return True

    origin = typing.get_origin(type_hint)
    if (origin is typing.Union) or (origin is types.UnionType):
        return any(is_optional(arg) for arg in typing.get_args(type_hint))

    return False
