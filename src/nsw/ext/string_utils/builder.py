"""
Helpers for building text incrementally, with conditional and pattern-based appends.

The helpers work on any writable text stream; an `io.StringIO` serves as a string builder. Each helper returns the
stream it was given, so calls can be chained::

    out = io.StringIO()
    append_line_if(append_if(out, show_header, header), show_body, body)

    text = out.getvalue()

Lines are terminated with ``'\\n'``. Format strings use `str.format` syntax, e.g. ``'{0}% of {1} data'``.
"""

from typing import Any, TextIO, TypeVar

from nsw.ext.string_utils import match_pattern, format_with_mask


Out = TypeVar('Out', bound=TextIO)


def append_line_format(out: Out, format_: str, *args: Any) -> Out:
    """Appends a formatted string followed by a line terminator."""
    out.write(format_.format(*args) + '\n')

    return out


def append_line_if(out: Out, condition: bool, value: Any) -> Out:
    """Appends ``str(value)`` followed by a line terminator, if the condition is true."""
    if condition:
        out.write(f"{value}\n")

    return out


def append_line_format_if(out: Out, condition: bool, format_: str, *args: Any) -> Out:
    """Appends a formatted string followed by a line terminator, if the condition is true."""
    if condition:
        append_line_format(out, format_, *args)

    return out


def append_if(out: Out, condition: bool, value: Any) -> Out:
    """Appends ``str(value)``, if the condition is true."""
    if condition:
        out.write(str(value))

    return out


def append_format_if(out: Out, condition: bool, format_: str, *args: Any) -> Out:
    if condition:
        out.write(format_.format(*args))

    return out


def append_if_match(out: Out, pattern: str, value: str) -> Out:
    """
    Appends a value if it matches a wildcard pattern (``?`` for any character, ``*`` for any number of characters).
    See `match_pattern` for details.
    """
    if match_pattern(value, pattern):
        out.write(value)

    return out


def append_line_if_match(out: Out, pattern: str, value: str) -> Out:
    """Like `append_if_match`, but also appends a line terminator."""
    if match_pattern(value, pattern):
        out.write(value + '\n')

    return out


def append_mask(out: Out, mask: str, value: str) -> Out:
    """Appends a value formatted according to a mask, e.g. ``'A##-##'``. See `format_with_mask` for details."""
    out.write(format_with_mask(value, mask) or '')

    return out


def append_line_mask(out: Out, mask: str, value: str) -> Out:
    out.write((format_with_mask(value, mask) or '') + '\n')

    return out
