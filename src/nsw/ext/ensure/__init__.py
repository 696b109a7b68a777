"""
Precondition guards that raise categorized errors when conditions are not satisfied.

Each guard evaluates a condition and, if it does not hold, raises the exception corresponding to an `ErrorKind`. When
the condition holds, guards have no effect whatsoever. Example::

    ensure_that(len(items) > 0, "Need at least one item")
    ensure_not(is_closed, "Connection is closed", kind=ErrorKind.NOT_SUPPORTED)
    ensure_not_blank_str(name)

Guards specific to checking function arguments (which also record the parameter name) can be found in the
`nsw.ext.ensure.argument` module.
"""

from typing import Any, Optional, Iterable, Callable, TypeVar

from nsw.ext.ensure.errors import ErrorKind, EnsureError, NullReferenceError, NotSupportedError, ArgumentError, \
    ArgumentNullError, ArgumentTypeError, ArgumentOutOfRangeError, error_class_for, make_error, fail


__version__ = '1.0.0'


T = TypeVar('T')


def ensure_that(condition: bool, message: Optional[str] = None, kind: ErrorKind = ErrorKind.FAILURE):
    """Raises an error of the given kind (a generic failure by default) if `condition` is false."""
    if not condition:
        fail(kind, message)


def ensure_not(condition: bool, message: Optional[str] = None, kind: ErrorKind = ErrorKind.FAILURE):
    """Raises an error of the given kind (a generic failure by default) if `condition` is true."""
    ensure_that(not condition, message, kind)


def ensure_not_none(value: Any, message: Optional[str] = "Value must be not null."):
    """Raises a `NullReferenceError` if `value` is None."""
    ensure_that(value is not None, message, ErrorKind.NULL_REFERENCE)


def ensure_equal(left: Any, right: Any, message: Optional[str] = "Values must be equal."):
    """Raises an error if the two values are not equal (using ``==``)."""
    ensure_that(left == right, message)


def ensure_not_equal(left: Any, right: Any, message: Optional[str] = "Values must not be equal."):
    """Raises an error if the two values are equal."""
    ensure_that(left != right, message)


def ensure_contains(collection: Optional[Iterable[T]], predicate: Callable[[T], bool], message: Optional[str] = None):
    """
    Ensures that at least one item in a collection satisfies a predicate.

    A None or empty collection always fails the check.
    """
    ensure_that((collection is not None) and any(predicate(item) for item in collection), message)


def ensure_items(collection: Optional[Iterable[T]], predicate: Callable[[T], bool], message: Optional[str] = None):
    """
    Ensures that all the items in a collection satisfy a predicate.

    A None collection fails the check, whereas an empty one passes it.
    """
    ensure_that((collection is not None) and all(predicate(item) for item in collection), message)


def ensure_not_empty_str(value: Optional[str], message: Optional[str] = "String cannot be null or empty."):
    ensure_that((value is not None) and (value != ''), message)


def ensure_not_blank_str(value: Optional[str], message: Optional[str] = "String cannot be null or white space."):
    ensure_that((value is not None) and (value.strip() != ''), message)
