"""Typer CLI application."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from byte_encodings.core.encoding import Encoding, encoding_labels
from byte_encodings.core.errors import EncodingError
from byte_encodings.convert import bytes_to_string, convert_encoding, string_to_bytes

LOG_LEVEL_ENVVAR = "BYTE_ENCODINGS_LOG_LEVEL"

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(level: LogLevel, verbose: bool = False) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.value,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="byte-encodings",
        help="Convert between byte buffers and hex, Base64, bit strings and text encodings.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def fail(exc: Exception) -> NoReturn:
        err_console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1)

    @app.callback()
    def root(
        log_level: Annotated[LogLevel, typer.Option(
            "--log-level", envvar=LOG_LEVEL_ENVVAR, case_sensitive=False, help="Logging level",
        )] = LogLevel.WARNING,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ) -> None:
        """Convert between byte buffers and their text forms."""
        configure_logging(log_level, verbose)

    @app.command()
    def encodings() -> None:
        """List supported encodings and their aliases."""
        table = Table(title="Supported encodings")
        table.add_column("Encoding", style="bold cyan")
        table.add_column("Labels")
        for encoding in Encoding:
            table.add_row(encoding.value, ", ".join(encoding_labels(encoding)))
        console.print(table)

    @app.command()
    def convert(
        value: Annotated[str, typer.Argument(help="Text to convert")],
        source: Annotated[str, typer.Option("--from", "-f", help="Encoding of VALUE")],
        dest: Annotated[str, typer.Option("--to", "-t", help="Encoding of the output")],
    ) -> None:
        """Convert text from one encoding to another."""
        try:
            result = convert_encoding(value, source, dest)
        except EncodingError as exc:
            fail(exc)
        else:
            typer.echo(result)

    @app.command()
    def encode(
        path: Annotated[Path, typer.Argument(help="File to read, or - for stdin")],
        encoding: Annotated[str, typer.Option("--encoding", "-e", help="Output encoding")] = "hex",
    ) -> None:
        """Encode a file's bytes as text."""
        try:
            data = sys.stdin.buffer.read() if str(path) == "-" else path.read_bytes()
        except OSError as exc:
            fail(exc)
        logger.info("read %d bytes from %s", len(data), path)
        try:
            result = bytes_to_string(data, encoding)
        except EncodingError as exc:
            fail(exc)
        else:
            typer.echo(result)

    @app.command()
    def decode(
        value: Annotated[str, typer.Argument(help="Encoded text")],
        encoding: Annotated[str, typer.Option("--encoding", "-e", help="Encoding of VALUE")] = "hex",
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write raw bytes here")] = None,
    ) -> None:
        """Decode text to bytes."""
        try:
            data = string_to_bytes(value, encoding)
        except EncodingError as exc:
            fail(exc)

        if output is None:
            typer.echo(data.hex())
        else:
            try:
                output.write_bytes(data)
            except OSError as exc:
                fail(exc)
            console.print(f"[green]Wrote {len(data)} bytes → {output}[/]")

    return app
