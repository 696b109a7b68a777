"""
A table of special characters commonly used in web and document text.
"""


def get_symbol(code_point: int) -> str:
    """Returns the character with the given Unicode code point."""
    return chr(code_point)


class Symbol:
    NBSP = get_symbol(160)
    """No-break space"""

    COPYRIGHT = get_symbol(169)
    REGISTERED = get_symbol(174)
    TRADEMARK = get_symbol(8482)

    BULLET = get_symbol(8226)
    TRIANGULAR_BULLET = get_symbol(8227)
    HYPHEN_BULLET = get_symbol(8259)
    REFERENCE_MARK = get_symbol(8251)
    ELLIPSIS = get_symbol(8230)
    FEMININE = get_symbol(170)
    """Feminine ordinal indicator"""
    SECT = get_symbol(167)
    """Section sign"""

    CHECK = get_symbol(10003)
    HEAVY_CHECK = get_symbol(10004)
    BALLOT = get_symbol(10005)
    HEAVY_BALLOT = get_symbol(10006)

    CENT = get_symbol(162)
    DOLLAR = get_symbol(36)
    POUND = get_symbol(163)
    YEN = get_symbol(165)
    EURO = get_symbol(8364)
