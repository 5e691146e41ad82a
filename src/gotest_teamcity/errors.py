
class GotestTeamcityError(Exception):
    """Base class for errors raised by gotest_teamcity."""

class ConfigError(GotestTeamcityError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"invalid config {path}: {reason}")
        self.path = path
        self.reason = reason

class EngineClosedError(GotestTeamcityError):
    """Raised when lines are fed to an engine that has already been flushed."""
