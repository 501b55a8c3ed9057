"""
Summary: Permissive integer parsing for duration text.
Why: Malformed durations must coerce to zero instead of failing a load.
"""

from __future__ import annotations

import re
from typing import Final

_LEADING_INTEGER: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)")


def parse_duration(text: str | None) -> int:
    """Parse the leading integer of ``text`` the way ``atoi`` does.

    Leading whitespace and a sign are accepted, trailing garbage is ignored,
    and text without a leading integer yields ``0``. Negative results are
    clamped to ``0`` since a duration cannot be negative.
    """

    if not text:
        return 0
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return 0
    try:
        value = int(match.group(1))
    except ValueError:
        # Past the interpreter's int conversion digit limit.
        return 0
    return max(value, 0)


__all__ = ["parse_duration"]
