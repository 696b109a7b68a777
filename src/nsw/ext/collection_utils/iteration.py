"""
General purpose utilities for splitting, paging and filtering sequences.

Most helpers come in two flavors: an ``iter_*`` version that streams its results (and thus also works on infinite
streams), and a convenience version that returns a list.
"""

from itertools import islice
from typing import Iterable, Iterator, Tuple, TypeVar, Optional, Callable, List


T = TypeVar('T')

Predicate = Callable[[T], bool]


def not_none_or_empty(seq: Optional[Iterable[T]], predicate: Optional[Predicate] = None) -> bool:
    """
    Checks whether a sequence (list, tuple, stream etc.) is neither None nor empty.

    If a `predicate` is supplied, the check is whether the sequence contains at least one item for which the
    predicate holds true.

    Warning: for streams, this consumes items up to and including the first relevant one.
    """
    if seq is None:
        return False
    if predicate is None:
        return any(True for _ in seq)

    return any(predicate(item) for item in seq)


def iter_sections(seq: Optional[Iterable[T]], length: int) -> Iterator[Tuple[T, ...]]:
    """
    Splits a sequence (list, tuple, stream etc.) into consecutive sections of a given length.

    Example::

        list(iter_sections(range(7), 3)) == [(0, 1, 2), (3, 4, 5), (6,)]

    Every section has exactly `length` items, except possibly the last one, which holds whatever remains. Nothing is
    produced if the sequence is None or if `length` is not positive.
    """
    if (seq is None) or (length <= 0):
        return

    iterator = iter(seq)

    while True:
        section = tuple(islice(iterator, length))
        if len(section) == 0:
            return

        yield section

        if len(section) < length:
            return


def split_sections(seq: Optional[Iterable[T]], length: int) -> List[Tuple[T, ...]]:
    """Convenience function. Like `iter_sections()` but returns a list."""
    return list(iter_sections(seq, length))


def iter_page(seq: Optional[Iterable[T]], page_index: int, page_size: int) -> Iterator[T]:
    """
    Streams the items in a given page of a sequence, i.e. the items at positions
    ``[page_index * page_size, (page_index + 1) * page_size)``, clipped to the length of the sequence.

    A None sequence, negative page index or non-positive page size produce an empty result.
    """
    if (seq is None) or (page_index < 0) or (page_size <= 0):
        return iter(())

    start = page_index * page_size

    return islice(seq, start, start + page_size)


def get_page(seq: Optional[Iterable[T]], page_index: int, page_size: int) -> List[T]:
    """Convenience function. Like `iter_page()` but returns a list."""
    return list(iter_page(seq, page_index, page_size))


def iter_ignore_nones(seq: Optional[Iterable[Optional[T]]]) -> Iterator[T]:
    """
    Streams the items in a sequence, skipping over None values. A None sequence is treated as empty.

    Example::

        for item in iter_ignore_nones([None, 'Hello World!', None, 'Good bye!']):
            ...  # Gets only the two strings
    """
    if seq is None:
        return

    for item in seq:
        if item is not None:
            yield item


def ignore_nones(seq: Optional[Iterable[Optional[T]]]) -> List[T]:
    return list(iter_ignore_nones(seq))


def iter_remove_where(seq: Optional[Iterable[T]], predicate: Optional[Predicate]) -> Iterator[T]:
    """
    Streams the items in a sequence for which the predicate does NOT hold.

    If either the sequence or the predicate is None, nothing is produced.
    """
    if (seq is None) or (predicate is None):
        return

    for item in seq:
        if not predicate(item):
            yield item


def remove_where(seq: Optional[Iterable[T]], predicate: Optional[Predicate]) -> List[T]:
    return list(iter_remove_where(seq, predicate))


def or_empty_if_none(seq: Optional[Iterable[T]]) -> Iterable[T]:
    """Returns the sequence as-is, or an empty tuple if it is None."""
    return seq if seq is not None else ()
