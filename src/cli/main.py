"""CLI entrypoint (Typer).

Pipeline: flags -> `resolve_options` -> `generate_secret` -> `dispatch_secret`.
Errors from the core surface here as a single `Error: ...` line on stderr and
a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path

import structlog
import typer

from adapters.random_sources import build_random_source
from adapters.secret_output import dispatch_secret
from cli.ui_components import build_error_console, print_error
from core.domain.errors import PassgenError
from core.logging_config import configure_logging
from core.services.generators import generate_secret
from core.services.option_resolver import resolve_options

app = typer.Typer(
    name="passgen",
    help="Generate a random password (characters) or passphrase (words).",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_err_console = build_error_console()

logger = structlog.get_logger()


@app.command()
def generate(
    type_: str = typer.Option(
        "chars",
        "--type",
        metavar="chars|words",
        help="Type of password to generate.",
    ),
    min_length: int | None = typer.Option(
        None,
        "--min-length",
        help="Minimum length (default: 8 for chars, 2 for words).",
        show_default=False,
    ),
    max_length: int | None = typer.Option(
        None,
        "--max-length",
        help="Maximum length (default: 16 for chars, 5 for words).",
        show_default=False,
    ),
    uppercase: bool = typer.Option(
        False,
        "--uppercase",
        help="Include uppercase letters (chars) or capitalize words (words).",
    ),
    numbers: bool = typer.Option(False, "--numbers", help="Include numbers in the password (chars)."),
    symbols: bool = typer.Option(False, "--symbols", help="Include symbols @!$#%^&* in the password (chars)."),
    separator: str = typer.Option("-", "--separator", help="Separator between words (words)."),
    file: Path | None = typer.Option(
        None,
        "--file",
        help="Save the password to a file instead of printing it.",
        dir_okay=False,
    ),
    word_count: int | None = typer.Option(
        None,
        "--word-count",
        min=1,
        help="Fixed number of words (words). Defaults to a draw from the length range.",
        show_default=False,
    ),
    secure: bool = typer.Option(False, "--secure", help="Use the operating system's entropy source."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs on stderr."),
) -> None:
    """Generate a password or passphrase and print it (or save it with --file)."""

    configure_logging(verbose=verbose)

    raw = {
        "type": type_,
        "min_length": min_length,
        "max_length": max_length,
        "uppercase": uppercase,
        "numbers": numbers,
        "symbols": symbols,
        "separator": separator,
        "file": file,
        "word_count": word_count,
    }

    try:
        options = resolve_options(raw)
        secret = generate_secret(options, build_random_source(secure=secure))
        dispatch_secret(secret, options.output_path)
    except PassgenError as exc:
        logger.debug("generation_failed", error=type(exc).__name__)
        print_error(_err_console, str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
