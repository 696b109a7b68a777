"""
Conversion of time differences to human-friendly text, e.g. ``'3 days ago'`` or ``'next week'``.

The thresholds are:

==================== ======================================
Absolute difference  Text
==================== ======================================
< 5 seconds          ``just now``
< 60 seconds         ``N seconds ago/from now``
< 2 minutes          ``a minute ago/from now``
< 60 minutes         ``N minutes ago/from now``
< 2 hours            ``an hour ago/from now``
< 24 hours           ``N hours ago/from now``
< 2 days             ``last/next day``
< 7 days             ``N days ago/from now``
< 14 days            ``last/next week``
< 31 days            ``N weeks ago/from now``
< 61 days            ``last/next month``
< 365.25 days        ``N months ago/from now`` (30-day months)
< 731 days           ``last/next year``
otherwise            ``N years ago/from now`` (365-day years)
==================== ======================================

All counts are rounded down.
"""

import math

from datetime import datetime
from typing import Optional


_MINUTES_PER_DAY = 24 * 60


def to_relative_time_string(from_: datetime, to: Optional[datetime] = None) -> str:
    """
    Describes the moment `from_` relative to the moment `to`.

    If `from_` is later than `to`, the text refers to the past (``'2 hours ago'``, ``'last week'``), otherwise to the
    future (``'2 hours from now'``, ``'next week'``). The reference moment `to` defaults to the current time (in the
    same timezone as `from_`, if it is aware).
    """
    if to is None:
        to = datetime.now(from_.tzinfo)

    delta_seconds = (from_ - to).total_seconds()
    abs_seconds = abs(delta_seconds)

    if abs_seconds < 5:
        return "just now"

    suffix = "from now" if delta_seconds < 0 else "ago"

    if abs_seconds < 60:
        return f"{math.floor(abs_seconds)} seconds {suffix}"
    if abs_seconds < 120:
        return f"a minute {suffix}"

    minutes = abs_seconds / 60

    if minutes < 60:
        return f"{math.floor(minutes)} minutes {suffix}"
    if minutes < 120:
        return f"an hour {suffix}"
    if minutes < _MINUTES_PER_DAY:
        return f"{math.floor(minutes / 60)} hours {suffix}"

    prefix = "last" if delta_seconds > 0 else "next"
    days = minutes / _MINUTES_PER_DAY

    if days < 2:
        return f"{prefix} day"
    if days < 7:
        return f"{math.floor(days)} days {suffix}"
    if days < 14:
        return f"{prefix} week"
    if days < 31:
        return f"{math.floor(days / 7)} weeks {suffix}"
    if days < 61:
        return f"{prefix} month"
    if days < 365.25:
        return f"{math.floor(days / 30)} months {suffix}"
    if days < 731:
        return f"{prefix} year"

    return f"{math.floor(days / 365)} years {suffix}"
