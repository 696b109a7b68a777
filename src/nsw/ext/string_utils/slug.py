"""
Utilities for converting arbitrary text to URL-friendly slugs.
"""

import re
import unicodedata

from typing import Optional


_SYMBOL_REPLACEMENTS = (
    ('#', '-sharp '),
    ('@', '-at '),
    ('$', '-dollar '),
    ('%', '-percent '),
    ('&', '-and '),
    ('||', '-or '),
)

_WORD_DELIMITERS_REGEX = re.compile(r'[\s—–_]')  # whitespace, em-dash, en-dash, underscore
_INVALID_CHARS_REGEX = re.compile(r'[^a-z0-9\-]')
_MULTIPLE_HYPHENS_REGEX = re.compile(r'-{2,}')


def remove_diacritics(s: str) -> str:
    """Removes accents and other combining marks from a string, e.g. ``'marrón'`` becomes ``'marron'``."""
    decomposed = unicodedata.normalize('NFD', s)

    return unicodedata.normalize('NFC', ''.join(char for char in decomposed if unicodedata.category(char) != 'Mn'))


def to_slug(s: Optional[str]) -> str:
    """
    Converts a text to a slug, i.e. a lowercase, hyphen-delimited string containing only ASCII letters, digits and
    hyphens. Example::

        to_slug("The price $10 is more than 10% of Rock&Roll song price.")
        # 'the-price-dollar-10-is-more-than-10-percent-of-rock-and-roll-song-price'

    The conversion goes through the following steps:

    - The text is lowercased and diacritics are removed
    - Some symbols are spelled out (``#``, ``@``, ``$``, ``%``, ``&``, ``||``)
    - Whitespace, dashes and underscores become hyphens
    - All other characters outside ``[a-z0-9-]`` are dropped
    - Runs of hyphens are collapsed, and hyphens at either end are trimmed

    None or an empty string produce an empty string.
    """
    if not s:
        return ''

    value = remove_diacritics(s.lower())

    for symbol, replacement in _SYMBOL_REPLACEMENTS:
        value = value.replace(symbol, replacement)

    value = _WORD_DELIMITERS_REGEX.sub('-', value)
    value = _INVALID_CHARS_REGEX.sub('', value)
    value = _MULTIPLE_HYPHENS_REGEX.sub('-', value)

    return value.strip('-')


def to_slug_with_segments(s: Optional[str], separator: str = '/') -> str:
    """
    Converts a text made of segments, e.g. ``'blog/2012/07/01/Some Title'``, to a slug where each segment is slugified
    separately and the separators are preserved. Empty segments are dropped.
    """
    if not s:
        return ''

    segments = (segment for segment in s.split(separator) if segment != '')

    return separator.join(to_slug(segment) for segment in segments).strip(separator)


def to_url_friendly(title: Optional[str], remap_to_ascii: bool = False, max_length: int = 80) -> str:
    """
    Converts a title to a form that is more readable by both humans and search engines when included in a URL, e.g.
    ``http://example.com/product/123/this-is-the-product-title``.

    Args:
        title: The title to convert. None produces an empty string.
        remap_to_ascii: If True, international characters like ``'è'`` are replaced by their ASCII equivalents (or
            dropped if there is none). Otherwise they are kept as-is, as modern browsers display them correctly.
        max_length: The maximum length of the result.

    Returns:
        The URL-friendly version of the title. ASCII letters are lowercased, separator characters (space, ``,./\\-_=``)
        become single hyphens, and other ASCII characters are dropped.
    """
    if title is None:
        return ''

    output = []
    output_length = 0
    prev_dash = False

    for char in title:
        if ('a' <= char <= 'z') or ('0' <= char <= '9'):
            output.append(char)
            output_length += 1
            prev_dash = False
        elif 'A' <= char <= 'Z':
            output.append(char.lower())
            output_length += 1
            prev_dash = False
        elif char in ' ,./\\-_=':
            if not prev_dash and (output_length > 0):
                output.append('-')
                output_length += 1
                prev_dash = True
        elif ord(char) >= 128:
            replacement = remap_international_char_to_ascii(char) if remap_to_ascii else char
            if replacement != '':
                output.append(replacement)
                output_length += len(replacement)
                prev_dash = False

        if output_length >= max_length:
            break

    result = ''.join(output)

    if prev_dash or (len(result) > max_length):
        return result[:-1]

    return result


_INTERNATIONAL_CHAR_GROUPS = (
    ('àåáâäãåąā', 'a'),
    ('òóôõöøőð', 'o'),
    ('èéêěëę', 'e'),
    ('ùúûüŭů', 'u'),
    ('ìíîïı', 'i'),
    ('śşšŝ', 's'),
    ('çćčĉ', 'c'),
    ('żźž', 'z'),
    ('ĺľł', 'l'),
    ('ñń', 'n'),
    ('ýÿ', 'y'),
    ('ğĝ', 'g'),
    ('ŕř', 'r'),
    ('đď', 'd'),
)

_INTERNATIONAL_CHAR_SPECIALS = {
    'ß': 'ss',
    'Þ': 'th',
    'ť': 't',
    'ĥ': 'h',
    'ĵ': 'j',
}


def remap_international_char_to_ascii(char: str) -> str:
    """
    Returns the ASCII equivalent of an international character, e.g. ``'a'`` for ``'à'``, or an empty string if there
    is no known equivalent.
    """
    lower = char.lower()

    for group, replacement in _INTERNATIONAL_CHAR_GROUPS:
        if lower in group:
            return replacement

    return _INTERNATIONAL_CHAR_SPECIALS.get(char, '')
