"""TeamCity service-message writer.

Every attribute value is escaped with :func:`escape`; the captured test
output and passthrough lines are written untouched.
"""

import datetime
from typing import TextIO
from ..runners.records import TestRecord, ConversionSummary, PASS, FAIL, SKIP
from ..utils.clock import Clock, now_timestamp
from ..utils.durations import to_milliseconds

RACE_MESSAGE = "Race detected!"
PANIC_MESSAGE = "Test ended in panic."

_ESCAPES = (
    ("|", "||"),
    ("\n", "|n"),
    ("\r", "|n"),
    ("'", "|'"),
    ("]", "|]"),
    ("[", "|["),
)

def escape(s: str) -> str:
    # "|" first so the bars introduced below are not doubled again.
    for old, new in _ESCAPES:
        s = s.replace(old, new)
    return s

class TeamCityReporter:
    def __init__(self, sink: TextIO, name_prefix: str = "", clock: Clock = datetime.datetime.now):
        self.sink = sink
        self.name_prefix = f"{name_prefix} " if name_prefix else ""
        self.clock = clock
        self.summary = ConversionSummary()

    def _message(self, tag: str, **attrs) -> None:
        body = " ".join(f"{k}='{escape(str(v))}'" for k, v in attrs.items())
        self.sink.write(f"##teamcity[{tag} {body}]\n")

    def suite_started(self, name: str) -> None:
        self._message("testSuiteStarted", name=name)
        self.summary.suites += 1

    def suite_finished(self, name: str) -> None:
        self._message("testSuiteFinished", name=name)

    def passthrough(self, text: str) -> None:
        self.sink.write(text)
        self.summary.passthrough += 1

    def test(self, t: TestRecord) -> None:
        now = now_timestamp(self.clock)
        name = self.name_prefix + t.name
        self._message("testStarted", timestamp=t.start, name=name, captureStandardOutput="true")
        self.sink.write(t.output)
        self.summary.tests += 1
        if t.status == SKIP:
            self._message("testIgnored", timestamp=now, name=name)
            self.summary.ignored += 1
            return
        details = "\n".join(t.details)
        if t.race:
            self._message("testFailed", timestamp=now, name=name, message=RACE_MESSAGE, details=details)
        elif t.status == FAIL:
            self._message("testFailed", timestamp=now, name=name, details=details)
        elif t.status != PASS:
            self._message("testFailed", timestamp=now, name=name, message=PANIC_MESSAGE, details=details)
        if t.status == PASS and not t.race:
            self.summary.passed += 1
        else:
            self.summary.failed += 1
        self._message("testFinished", timestamp=now, name=name, duration=to_milliseconds(t.duration))
