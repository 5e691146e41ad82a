
import logging
from rich.console import Console
from rich.logging import RichHandler
def setup_logging(level: str = "WARNING"):
    # stdout carries the service messages; diagnostics go to stderr only.
    logging.basicConfig(level=level.upper(), format="%(message)s", datefmt="[%X]",
                        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)])
    return logging.getLogger("gotest_teamcity")
