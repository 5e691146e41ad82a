
from dataclasses import dataclass, field
from typing import List, Optional

PASS, FAIL, SKIP = "PASS", "FAIL", "SKIP"

@dataclass
class TestRecord:
    __test__ = False  # not a pytest class

    name: str
    start: str
    output: str = ""
    details: List[str] = field(default_factory=list)
    duration: int = 0  # nanoseconds
    status: Optional[str] = None
    race: bool = False
    suite: bool = False

    @property
    def ended(self) -> bool:
        return self.status is not None

@dataclass
class ConversionSummary:
    tests: int = 0
    passed: int = 0
    failed: int = 0
    ignored: int = 0
    suites: int = 0
    passthrough: int = 0
