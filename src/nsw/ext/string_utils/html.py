"""
Basic utilities for working with HTML text.

These are meant for quick cleanup and escaping jobs, not as a replacement for a proper HTML parser.
"""

import re

from typing import Optional


_TAG_REGEX = re.compile(r'<.*?>', re.DOTALL)

_ENCODED_CHARS = {
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    '&': '&amp;',
}


def strip_html(html: Optional[str]) -> str:
    """
    Removes all the tags from an HTML string, keeping just the text. Windows line breaks (``\\r\\n``) are removed,
    tabs become spaces, and runs of spaces are reduced.

    None or an empty string produce an empty string.
    """
    if not html:
        return ''

    text = _TAG_REGEX.sub('', html)
    text = text.replace('\t', ' ')
    text = text.replace('\r\n', '')
    text = text.replace('   ', ' ')

    return text.replace('  ', ' ')


def html_encode(text: Optional[str]) -> str:
    """
    Escapes a string for inclusion in HTML.

    The characters ``<``, ``>``, ``"`` and ``&`` are replaced by their named entities, and every character with a code
    point above 159 is replaced by a decimal numeric entity (e.g. ``&#233;`` for ``é``). Everything else is kept as-is.

    None or an empty string produce an empty string.
    """
    if not text:
        return ''

    return ''.join(_encode_char(char) for char in text)


def _encode_char(char: str) -> str:
    encoded = _ENCODED_CHARS.get(char)
    if encoded is not None:
        return encoded

    return f"&#{ord(char)};" if ord(char) > 159 else char
