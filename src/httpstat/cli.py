"""httpstat CLI: phase-by-phase latency breakdown for a single HTTP request."""

import logging

import typer
from rich.console import Console

from httpstat import __version__

from .config import load_config
from .core import derive_phases, write_report
from .errors import ConfigError, TransportError
from .logging import configure_logging
from .models import ReportOptions
from .output import OutputContext
from .services import run_probe

USAGE = "Usage: httpstat <URL>"

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"httpstat {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="httpstat",
    help="Measure DNS, TCP, TLS, server and transfer time of one HTTP request",
    add_completion=False,
)


@app.command()
def main(
    url: str | None = typer.Argument(
        None,
        help="URL to request",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error diagnostics",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the report as JSON",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.001,
        help="Request timeout in seconds (overrides HTTPSTAT_TIMEOUT)",
    ),
) -> None:
    """Request URL once and print status, headers and a timing breakdown."""
    output = OutputContext(
        console=Console(no_color=no_color),
        err_console=Console(stderr=True, no_color=no_color),
        json_mode=json_output,
    )

    if not url:
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    try:
        config = load_config()
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(1) from None

    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color, debug=config.debug)

    try:
        result = run_probe(url, timeout=timeout or config.timeout)
    except TransportError as e:
        output.error(str(e), {"url": e.url, "code": e.code})
        raise typer.Exit(1) from None

    phases = derive_phases(result.record)
    options = ReportOptions(show_remote_address=config.show_ip, show_body=config.show_body)
    saved = write_report(
        output, result.response, phases, options, result.connection, config.body_path
    )
    if not saved:
        # Timing and headers were reported; exit status stays 0
        logger.debug("Body not persisted to %s", config.body_path)
