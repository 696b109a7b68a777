"""
Error kinds and exception classes raised by the precondition guards.
"""

from enum import Enum
from typing import Optional, NoReturn, Dict, Type


class ErrorKind(Enum):
    """The categories of failure that a guard can report."""
    FAILURE = 'failure'
    ARGUMENT_INVALID = 'argument_invalid'
    ARGUMENT_NULL = 'argument_null'
    ARGUMENT_TYPE = 'argument_type'
    ARGUMENT_OUT_OF_RANGE = 'argument_out_of_range'
    NULL_REFERENCE = 'null_reference'
    NOT_SUPPORTED = 'not_supported'


class EnsureError(Exception):
    """
    Base class for all errors raised by the guards in this package.

    The message is never None. Guards that receive no message use an empty string, so the error can always be
    displayed.
    """
    kind = ErrorKind.FAILURE
    message = ''

    def __init__(self, message: Optional[str] = ''):
        self.message = message if message is not None else ''
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NullReferenceError(EnsureError):
    kind = ErrorKind.NULL_REFERENCE


class NotSupportedError(EnsureError):
    kind = ErrorKind.NOT_SUPPORTED


class ArgumentError(EnsureError, ValueError):
    """
    Raised when an argument passed to a function is invalid.

    Apart from the message, the error remembers the name of the offending parameter (if known), and mentions it when
    converted to a string, e.g. ``Value cannot be null. (Parameter 'name')``.
    """
    kind = ErrorKind.ARGUMENT_INVALID
    param_name = None

    def __init__(self, message: Optional[str] = '', param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name

    def __str__(self) -> str:
        if self.param_name is None:
            return self.message

        return f"{self.message} (Parameter '{self.param_name}')".lstrip()


class ArgumentNullError(ArgumentError):
    kind = ErrorKind.ARGUMENT_NULL


class ArgumentTypeError(ArgumentError, TypeError):
    kind = ErrorKind.ARGUMENT_TYPE


class ArgumentOutOfRangeError(ArgumentError, IndexError):
    kind = ErrorKind.ARGUMENT_OUT_OF_RANGE


_ERROR_CLASSES: Dict[ErrorKind, Type[EnsureError]] = {
    cls.kind: cls
    for cls in (
        EnsureError, NullReferenceError, NotSupportedError,
        ArgumentError, ArgumentNullError, ArgumentTypeError, ArgumentOutOfRangeError,
    )
}


def error_class_for(kind: ErrorKind) -> Type[EnsureError]:
    """Returns the exception class used for reporting errors of a given kind."""
    try:
        return _ERROR_CLASSES[kind]
    except KeyError:
        raise TypeError(f"Invalid error kind: {kind!r}") from None


def make_error(kind: ErrorKind, message: Optional[str] = '', param_name: Optional[str] = None) -> EnsureError:
    """
    Creates (but does not raise) the exception corresponding to an error kind.

    The parameter name is only recorded for argument-related kinds; for the others it is ignored.
    """
    cls = error_class_for(kind)

    if issubclass(cls, ArgumentError):
        return cls(message, param_name)

    return cls(message)


def fail(kind: ErrorKind = ErrorKind.FAILURE, message: Optional[str] = '', param_name: Optional[str] = None) -> NoReturn:
    """
    Raises the exception corresponding to an error kind. See `make_error` for details.
    """
    raise make_error(kind, message, param_name)
