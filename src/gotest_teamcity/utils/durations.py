"""Go-style duration parsing (``1.5s``, ``-300ms``, ``1h2m3s``).

Durations are kept as integer nanoseconds so millisecond truncation
matches the runner's own arithmetic.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]+)")


def parse_duration(text: str) -> Optional[int]:
    """Parse ``text`` into nanoseconds, or return None if it is not a valid duration."""
    s = text.strip()
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        return None

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        m = _COMPONENT.match(s, pos)
        if m is None:
            return None
        whole, frac, unit = m.groups()
        if not whole and not frac:
            return None
        if unit not in UNITS:
            return None
        try:
            value = Decimal(f"{whole or '0'}.{frac or '0'}")
        except InvalidOperation:
            return None
        total += value * UNITS[unit]
        pos = m.end()

    ns = int(total)
    return -ns if negative else ns


def to_milliseconds(ns: int) -> int:
    """Whole milliseconds, truncated toward zero."""
    ms = abs(ns) // MILLISECOND
    return -ms if ns < 0 else ms
