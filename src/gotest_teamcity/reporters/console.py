
import logging
from typing import Optional
from ..runners.records import ConversionSummary
class ConsoleReporter:
    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logging.getLogger("gotest_teamcity")
    def emit(self, summary: ConversionSummary) -> None:
        self.log.info("Converted %d tests: %d passed, %d failed, %d ignored (%d suites, %d passthrough lines)",
                      summary.tests, summary.passed, summary.failed, summary.ignored,
                      summary.suites, summary.passthrough)
