"""CLI for the ``statement_converter`` package.

This module exposes a callable command handler (:func:`cmd_convert`) and a
Typer-based console interface. Environment variables are loaded from a local
``.env`` with ``python-dotenv`` (without overriding existing ones) before
settings are resolved. Conversion logic lives in
:mod:`statement_converter.api`.
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from .api import convert_file
from .config import StatementSettings
from .errors import ConversionError
from .ingest.utils import STDIN_PATH
from .logging_setup import configure_logging, get_logger

logger = get_logger(__name__)


def cmd_convert(
    csv_path: str | None,
    *,
    output: Path | None = None,
    delimiter: str | None = None,
    broker_id: str | None = None,
    account_id: str | None = None,
) -> int:
    """Convert a fund-export CSV into an OFX statement.

    Behavior
    --------
    - Reads ``csv_path`` (stdin when ``None`` or ``-``).
    - Writes the statement to ``output`` when given, else to stdout.
    - On any error writes a single ``Error: ...`` line to stderr, writes no
      statement at all, and returns ``1``. Returns ``0`` on success.
    """

    try:
        settings = StatementSettings.from_env(
            delimiter=delimiter,
            broker_id=broker_id,
            account_id=account_id,
        )
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        document = convert_file(csv_path, settings=settings)
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: '{csv_path}' is not UTF-8 text: {e}", file=sys.stderr)
        return 1
    except csv.Error as e:
        print(f"Error: Failed to parse CSV: {e}", file=sys.stderr)
        return 1
    except ConversionError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if output is None:
        typer.echo(document, nl=False)
        return 0

    try:
        output.write_text(document, encoding="utf-8")
    except OSError as e:
        print(f"Error: failed to write '{output}': {e}", file=sys.stderr)
        return 1
    logger.info("wrote statement to %s", output)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Convert fund/brokerage CSV exports into OFX investment statements. "
        "Loads STATEMENT_* settings from a local .env before running."
    ),
)


@app.command("convert")
def convert_cmd(
    csv_path: Annotated[
        str | None,
        typer.Argument(help="CSV export to convert; omit or pass '-' to read stdin."),
    ] = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", dir_okay=False, help="Write to a file instead of stdout."),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option(help="Input field delimiter (falls back to STATEMENT_DELIMITER)."),
    ] = None,
    broker_id: Annotated[
        str | None,
        typer.Option(help="Override <BROKERID> (falls back to STATEMENT_BROKER_ID)."),
    ] = None,
    account_id: Annotated[
        str | None,
        typer.Option(help="Override <ACCTID> (falls back to STATEMENT_ACCOUNT_ID)."),
    ] = None,
) -> None:
    """Convert one export and print the OFX statement."""

    code = cmd_convert(
        None if csv_path == STDIN_PATH else csv_path,
        output=output,
        delimiter=delimiter,
        broker_id=broker_id,
        account_id=account_id,
    )
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: Annotated[
        str | None,
        typer.Option(help="Log level (falls back to STATEMENT_CONVERTER_LOG_LEVEL)."),
    ] = None,
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


def main() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    main()
