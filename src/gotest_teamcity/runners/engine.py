"""Streaming state machine turning ``go test -v`` lines into TeamCity events.

A test is only written out once the next boundary line (start, end or
summary) shows that nothing more can be attributed to it. Whether a test
is a suite is decided at that point too, because children reveal their
parents retroactively.
"""

import datetime
import logging
from typing import Dict, Iterable, List, Optional, TextIO
from ..errors import EngineClosedError
from ..parsers.classifier import Classification, LineKind, classify
from ..reporters.teamcity import TeamCityReporter
from ..utils.clock import Clock, now_timestamp
from ..utils.durations import parse_duration
from .records import TestRecord, ConversionSummary

DETAIL_INDENT = "\t"


def parent_name(name: str) -> str:
    idx = name.rfind("/")
    return name[:idx] if idx != -1 else ""


def within(name: str, suite: str) -> bool:
    return name == suite or name.startswith(suite + "/")


class EventEngine:
    def __init__(self, sink: TextIO, name_prefix: str = "", clock: Clock = datetime.datetime.now):
        self.clock = clock
        self.reporter = TeamCityReporter(sink, name_prefix, clock)
        self.log = logging.getLogger("gotest_teamcity.engine")
        self.pending: Dict[str, TestRecord] = {}
        self.suites: List[str] = []
        self.current: Optional[TestRecord] = None
        self.detail_prefix = DETAIL_INDENT
        self.final = ""
        self.closed = False

    def _new_test(self, name: str) -> TestRecord:
        if name in self.pending:
            self.log.debug("%s started again before it was reported; dropping the earlier run", name)
            del self.pending[name]
        t = TestRecord(name=name, start=now_timestamp(self.clock))
        self.pending[name] = t
        n = parent_name(name)
        while n:
            p = self.pending.get(n)
            if p is not None:
                p.suite = True
            n = parent_name(n)
        return t

    def _open_ancestors(self, name: str) -> None:
        # Parents that never reported a result (e.g. they panicked) still
        # group their children; the parent itself is reported at flush.
        opened = []
        n = parent_name(name)
        while n:
            p = self.pending.get(n)
            if p is not None and p.suite and n not in self.suites:
                opened.append(n)
            n = parent_name(n)
        for n in reversed(opened):
            self.reporter.suite_started(n)
            self.suites.append(n)

    def _finalize(self, t: TestRecord) -> None:
        while self.suites and not within(t.name, self.suites[-1]):
            self.reporter.suite_finished(self.suites.pop())
        self._open_ancestors(t.name)
        if t.suite and t.name not in self.suites:
            self.reporter.suite_started(t.name)
            self.suites.append(t.name)
        self.reporter.test(t)
        del self.pending[t.name]

    def feed(self, line: str) -> None:
        if self.closed:
            raise EngineClosedError("engine already flushed")
        c = classify(line)
        t = self.current
        if t is not None and t.ended and c.is_boundary:
            self._finalize(t)
            self.current = t = None

        if c.kind is LineKind.START:
            self.current = self._new_test(c.name)
        elif c.kind is LineKind.END:
            self._end(c)
        elif c.kind is LineKind.SUMMARY:
            self.final += line
        elif c.kind is LineKind.RACE and t is not None:
            t.race = True
        else:
            self._other(line)

    def _end(self, c: Classification) -> None:
        t = self.pending.get(c.name)
        if t is None:
            self.log.debug("end line for %s without a matching start", c.name)
            t = self._new_test(c.name)
        self.detail_prefix = c.indent + DETAIL_INDENT
        t.status = c.status
        duration = parse_duration(c.duration)
        if duration is None:
            self.log.debug("unparseable duration %r for %s", c.duration, c.name)
            duration = 0
        t.duration = duration
        self.current = t

    def _other(self, line: str) -> None:
        t = self.current
        if t is None:
            self.reporter.passthrough(line)
            return
        stripped = line[:-1] if line.endswith("\n") else line
        if t.ended and stripped.startswith(self.detail_prefix):
            t.details.append(stripped[len(self.detail_prefix):])
        else:
            t.output += line

    def flush(self) -> ConversionSummary:
        """Report everything still open and return the conversion counters."""
        if self.closed:
            return self.reporter.summary
        self.closed = True
        if self.current is not None:
            self._finalize(self.current)
            self.current = None
        while self.suites:
            self.reporter.suite_finished(self.suites.pop())
        if self.pending:
            self.log.debug("%d test(s) never reported a result", len(self.pending))
        for t in list(self.pending.values()):
            self.reporter.test(t)
        self.pending.clear()
        self.reporter.sink.write(self.final)
        return self.reporter.summary

    def process(self, lines: Iterable[str]) -> ConversionSummary:
        for line in lines:
            if not line.endswith("\n"):
                line += "\n"
            self.feed(line)
        return self.flush()


def convert(lines: Iterable[str], sink: TextIO, name_prefix: str = "",
            clock: Clock = datetime.datetime.now) -> ConversionSummary:
    return EventEngine(sink, name_prefix, clock).process(lines)
