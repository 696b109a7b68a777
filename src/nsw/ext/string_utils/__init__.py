"""
A collection of utilities for working with strings.

Unless documented otherwise, the functions here accept None or an empty string as input and return it unchanged.
More specialized utilities can be found in the submodules:

- `nsw.ext.string_utils.slug`: converting text to URL-friendly slugs
- `nsw.ext.string_utils.html`: stripping and encoding HTML
- `nsw.ext.string_utils.relative_time`: human-friendly relative times ("3 days ago")
- `nsw.ext.string_utils.builder`: conditional appending to text streams
- `nsw.ext.string_utils.stringable`: wrappers with a custom ``str()``
- `nsw.ext.string_utils.symbol`: a table of commonly used special characters
"""

import io
import re

from typing import Optional, List, BinaryIO


__version__ = '1.0.0'


def crop(s: Optional[str], max_length: int, crop_end: Optional[str] = '…') -> Optional[str]:
    """
    Limits a string to a maximum length. If the string needs to be cut, its end is replaced by `crop_end`, such that
    the result is exactly `max_length` characters long.
    """
    if not s or len(s) <= max_length:
        return s

    if not crop_end:
        return s[:max_length]

    return s[:max_length - len(crop_end)] + crop_end


_LINE_BREAK_REGEX = re.compile(r'\r\n?|\n')


def replace_line_breaks(s: Optional[str], replacement: str) -> Optional[str]:
    """Replaces all line breaks (``\\r\\n``, ``\\r`` or ``\\n``) in a string."""
    return _LINE_BREAK_REGEX.sub(lambda _: replacement, s) if s else s


def safe_split(s: Optional[str], separator: str) -> List[str]:
    """Like ``str.split(separator)``, except that None or an empty string produce an empty list."""
    return s.split(separator) if s else []


def replicate(s: str, count: int) -> str:
    return s * count


def ignore_case_contains(s: Optional[str], to_check: Optional[str]) -> bool:
    """Checks whether `to_check` occurs in `s`, ignoring case. Always False if either string is None or empty."""
    if not s or not to_check:
        return False

    return to_check.casefold() in s.casefold()


def ignore_case_equal(s: Optional[str], to_check: Optional[str]) -> bool:
    """Checks whether two strings are equal, ignoring case. Two Nones are equal; None and a string are not."""
    if (s is None) or (to_check is None):
        return (s is None) and (to_check is None)

    return s.casefold() == to_check.casefold()


def is_in(value: Optional[str], *values: Optional[str]) -> bool:
    """Checks whether a string is exactly equal to any of the following arguments."""
    return any(value == candidate for candidate in values)


def remove_whitespaces(s: Optional[str]) -> Optional[str]:
    return ''.join(s.split()) if s else s


def right(s: Optional[str], length: int) -> Optional[str]:
    """Returns the last `length` characters of a string (or the whole string if it is shorter)."""
    return s[len(s) - length:] if s and (length < len(s)) else s


def left(s: Optional[str], length: int) -> Optional[str]:
    """Returns the first `length` characters of a string (or the whole string if it is shorter)."""
    return s[:length] if s and (length < len(s)) else s


def to_plural(singular: Optional[str]) -> Optional[str]:
    """
    Converts an English noun to its plural form, using a few simple rules:

    - ``-sh``, ``-ch``, ``-us``, ``-ss`` get an ``-es`` suffix
    - ``-y`` becomes ``-ies``
    - ``-o`` becomes ``-oes``
    - anything else gets an ``-s`` suffix

    Irregular nouns are not handled.
    """
    if not singular:
        return singular

    if singular.endswith(('sh', 'ch', 'us', 'ss')):
        return singular + 'es'
    if singular.endswith('y'):
        return singular[:-1] + 'ies'
    if singular.endswith('o'):
        return singular[:-1] + 'oes'

    return singular + 's'


def to_title_case(s: Optional[str]) -> Optional[str]:
    """
    Capitalizes the first letter of each space-separated word and lowercases the rest, except for words that are
    written in all capitals (e.g. acronyms), which are left alone.
    """
    if not s:
        return s

    def _convert_word(word):
        if (len(word) == 0) or is_all_capitals(word):
            return word

        return word[0].upper() + word[1:].lower()

    return ' '.join(_convert_word(word) for word in s.split(' '))


_SNAKE_CASE_PART_REGEX = re.compile(r'(?:^|_)(.)')


def to_pascal_case(s: Optional[str]) -> Optional[str]:
    """Converts a snake_case string to PascalCase, e.g. ``data_set`` to ``DataSet``."""
    if (s is None) or (s.strip() == ''):
        return s

    return _SNAKE_CASE_PART_REGEX.sub(lambda match: match.group(1).upper(), s)


def to_camel_case(s: Optional[str]) -> Optional[str]:
    """Converts a snake_case string to camelCase, e.g. ``data_set`` to ``dataSet``."""
    if not s:
        return s

    word = to_pascal_case(s)

    return word[:1].lower() + word[1:]


def is_all_capitals(s: Optional[str]) -> bool:
    """Checks whether a string consists only of uppercase letters. None, empty and blank strings do not qualify."""
    if (s is None) or (s.strip() == ''):
        return False

    return all(char.isupper() for char in s)


def format_with_mask(s: Optional[str], mask: Optional[str]) -> Optional[str]:
    """
    Formats a string according to a mask, e.g. ``format_with_mask('1234567890', 'A###-B###-C### D#')`` gives
    ``'A123-B456-C789 D0'``.

    Each ``#`` in the mask is replaced by the next character in the input string (or by nothing, if the input runs out).
    Any other character in the mask is copied as-is. Any excess input is dropped.
    """
    if not s or not mask:
        return s

    output = []
    index = 0

    for mask_char in mask:
        if mask_char != '#':
            output.append(mask_char)
        elif index < len(s):
            output.append(s[index])
            index += 1

    return ''.join(output)


def match_pattern(s: Optional[str], pattern: Optional[str]) -> bool:
    """
    Checks whether a string matches a wildcard pattern, where ``?`` stands for any single character, and ``*`` for
    zero or more characters.

    The match is case-sensitive and must cover the whole string. Wildcards do not match ``\\n``. An empty
    pattern matches nothing, as does a None input string.
    """
    if (s is None) or not pattern:
        return False

    return _compile_wildcard_pattern(pattern).fullmatch(s) is not None


def _compile_wildcard_pattern(pattern: str) -> re.Pattern:
    regex = ''.join('.*' if char == '*' else '.' if char == '?' else re.escape(char) for char in pattern)

    return re.compile(regex)


def concat_with(s: Optional[str], *values: Optional[str]) -> str:
    """Concatenates a string with any number of other strings. None values are treated as empty strings."""
    return (s or '') + ''.join(value or '' for value in values)


def to_ordinal(number: int) -> str:
    """Formats a number as an English ordinal, e.g. ``1st``, ``42nd``, ``113th``."""
    if number % 100 in (11, 12, 13):
        return f"{number}th"

    return f"{number}{_ORDINAL_SUFFIXES.get(number % 10, 'th')}"


_ORDINAL_SUFFIXES = {1: 'st', 2: 'nd', 3: 'rd'}


def to_stream(s: Optional[str], encoding: str = 'utf-8') -> BinaryIO:
    """Creates an in-memory binary stream containing the encoded string. None produces an empty stream."""
    return io.BytesIO((s or '').encode(encoding))
