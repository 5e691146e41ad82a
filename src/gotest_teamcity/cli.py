
import enum
import io
from typing import Iterator, Optional
import typer
from .config import load_config, ConverterConfig
from .errors import ConfigError
from .logging import setup_logging
from .runners.engine import EventEngine
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="Convert `go test -v` output into TeamCity service messages")

class LogLevel(str, enum.Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"

def _lines(src, log) -> Iterator[str]:
    # A failed read ends the stream like EOF; what was read so far is still flushed.
    try:
        yield from src
    except OSError as e:
        log.warning("input read failed, treating as end of stream: %s", e)

@app.command()
def convert(
    name: Optional[str] = typer.Option(None, "--name", help="Add prefix to test name"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    input_file: typer.FileBinaryRead = typer.Option("-", "--input", "-i", lazy=False, help="go test -v output, '-' for stdin"),
    output_file: typer.FileBinaryWrite = typer.Option("-", "--output", "-o", lazy=False, help="Where to write service messages, '-' for stdout"),
    log_level: Optional[LogLevel] = typer.Option(None, "--log-level", case_sensitive=False, help="Diagnostics on stderr"),
):
    try:
        cfg: ConverterConfig = load_config(config)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)
    log = setup_logging(log_level.value if log_level else cfg.log_level)
    prefix = cfg.name_prefix if name is None else name

    src = io.TextIOWrapper(input_file, encoding="utf-8", errors="surrogateescape", newline="\n")
    sink = io.TextIOWrapper(output_file, encoding="utf-8", errors="surrogateescape", newline="")
    try:
        summary = EventEngine(sink, prefix).process(_lines(src, log))
        sink.flush()
    finally:
        # the underlying streams belong to click
        src.detach()
        sink.detach()
    ConsoleReporter(log).emit(summary)
