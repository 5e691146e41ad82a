
import datetime
from typing import Callable

Clock = Callable[[], datetime.datetime]

# 2006-01-02T15:04:05.000
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

def format_timestamp(ts: datetime.datetime) -> str:
    return f"{ts.strftime(TIMESTAMP_FORMAT)}.{ts.microsecond // 1000:03d}"

def now_timestamp(clock: Clock = datetime.datetime.now) -> str:
    return format_timestamp(clock())

def fixed_clock(ts: datetime.datetime) -> Clock:
    """Clock that always returns ``ts``; used to make emitted timestamps deterministic."""
    return lambda: ts
