"""
Miscellaneous utilities for working with dicts and mappings.
"""

import typing
from typing import TypeVar, Optional, Iterable, Tuple, Dict, List

from collections.abc import MutableMapping


K = TypeVar('K')
V = TypeVar('V')


def values_to_list(source_dict: Optional[typing.Mapping[K, V]]) -> Optional[List[V]]:
    """Returns the values of a dict as a list (in iteration order), or None if the dict is None."""
    return list(source_dict.values()) if source_dict is not None else None


def values_to_tuple(source_dict: Optional[typing.Mapping[K, V]]) -> Optional[Tuple[V, ...]]:
    return tuple(source_dict.values()) if source_dict is not None else None


def keys_to_list(source_dict: Optional[typing.Mapping[K, V]]) -> Optional[List[K]]:
    """Returns the keys of a dict as a list (in iteration order), or None if the dict is None."""
    return list(source_dict.keys()) if source_dict is not None else None


def keys_to_tuple(source_dict: Optional[typing.Mapping[K, V]]) -> Optional[Tuple[K, ...]]:
    return tuple(source_dict.keys()) if source_dict is not None else None


def append_missing(
    mut_dict: typing.MutableMapping[K, V], other: Optional[typing.Mapping[K, V]]
) -> typing.MutableMapping[K, V]:
    """
    Adds to a dict the key-value pairs from another dict, but only for keys that are not already present.

    Unlike ``dict.update()``, existing values are never overwritten, i.e. the original dict has priority.

    Args:
        mut_dict: The dict (or other mutable mapping) to add to. It will be modified in place.
        other: The dict to take new items from. None is treated as an empty dict.

    Returns:
        The same `mut_dict`, for convenience.
    """
    if not isinstance(mut_dict, MutableMapping):
        raise TypeError(f"Expected a mutable mapping, got {mut_dict.__class__.__name__}")

    if other is None:
        return mut_dict

    for key, value in other.items():
        if key not in mut_dict:
            mut_dict[key] = value

    return mut_dict


def groupings_to_dict(groupings: Iterable[Tuple[K, Iterable[V]]]) -> Dict[K, List[V]]:
    """
    Converts a stream of groupings, such as those produced by `itertools.groupby`, into a dict of lists.

    Note that the groups are consumed as they are encountered, so this works correctly with `groupby`'s shared
    underlying iterator.

    Throws a `ValueError` if the same key is encountered twice (which happens with `groupby` if the data was not
    sorted by the grouping key).
    """
    result = dict()

    for key, group in groupings:
        if key in result:
            raise ValueError(f"Duplicate grouping key: {key!r}")

        result[key] = list(group)

    return result
