"""Line classification for ``go test -v`` output.

Patterns are tried in a fixed order and the first match wins; a
race-warning line is only recognised after the start, end and summary
patterns have been ruled out.
"""

import enum
import re
from dataclasses import dataclass
from typing import Optional

RUN = re.compile(r"^=== RUN\s+([a-zA-Z_]\S*)")
END = re.compile(r"^(\s*)--- (PASS|SKIP|FAIL):\s+([a-zA-Z_]\S*) \((-?[.\ds]+)\)")
SUMMARY = re.compile(r"^(ok|PASS|FAIL|exit status|Found)")
RACE = re.compile(r"^WARNING: DATA RACE")


class LineKind(enum.Enum):
    START = "start"
    END = "end"
    SUMMARY = "summary"
    RACE = "race"
    OTHER = "other"


@dataclass(frozen=True)
class Classification:
    kind: LineKind
    name: Optional[str] = None
    status: Optional[str] = None
    duration: Optional[str] = None
    indent: str = ""

    @property
    def is_boundary(self) -> bool:
        """Start, end and summary lines may close the test being accumulated."""
        return self.kind in (LineKind.START, LineKind.END, LineKind.SUMMARY)


def classify(line: str) -> Classification:
    m = RUN.match(line)
    if m:
        return Classification(LineKind.START, name=m.group(1))
    m = END.match(line)
    if m:
        indent, status, name, duration = m.groups()
        return Classification(LineKind.END, name=name, status=status, duration=duration, indent=indent)
    if SUMMARY.match(line):
        return Classification(LineKind.SUMMARY)
    if RACE.match(line):
        return Classification(LineKind.RACE)
    return Classification(LineKind.OTHER)
