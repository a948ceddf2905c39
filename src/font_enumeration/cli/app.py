"""CLI application entry point for font-info.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import structlog
import typer

from font_enumeration import __version__
from font_enumeration.backends import system_backend
from font_enumeration.cli.output import (
    HumanReadableOutput,
    JsonOutput,
    Output,
    console,
    print_error,
    print_font_json,
    print_font_table,
)
from font_enumeration.config import (
    FontEnumerationSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    get_default_settings,
)
from font_enumeration.core import Collection
from font_enumeration.exceptions import FontLoadError, SystemCollectionUnavailable
from font_enumeration.io import FontReader
from font_enumeration.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="font-info",
    help="Print metrics of fonts in a font file or installed on this system.",
    add_completion=False,
    no_args_is_help=True,
)

STDIN_HELP = (
    "Command-line argument '--font-file' or '--family-name' must be given. If neither "
    "argument is given and stdin is not an interactive terminal, this program attempts "
    "to parse the data on stdin as a font file."
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]font-info[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Print metrics of fonts in a font file or installed on this system."""


def _stdin_is_terminal() -> bool:
    return sys.stdin.isatty()


def _settings(output: OutputConfig, verbose: bool, log_file: Path | None) -> FontEnumerationSettings:
    try:
        settings = get_default_settings()
    except SystemCollectionUnavailable as e:
        print_error("Could not enumerate system fonts", details=e.reason)
        raise typer.Exit(code=1)
    return settings.model_copy(
        update={
            "output": output,
            "logging": LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else "WARNING",
            ),
        }
    )


def _inspect(reader: FontReader, out: Output) -> None:
    """Push every face of one font source to the output."""
    reader.load()
    try:
        for index, face in reader.iter_faces():
            try:
                out.push_font(reader.source, index, face)
            except Exception as e:
                raise FontLoadError(reader.source, str(e)) from e
    finally:
        reader.close()


def _family_font_files(
    family_name: str,
    settings: FontEnumerationSettings,
    logger: structlog.stdlib.BoundLogger,
) -> list[Path]:
    """Distinct font files of a family, in enumeration order."""
    collection = Collection.new(system_backend(settings.backend, logger=logger), logger=logger)

    font_files: list[Path] = []
    for font in collection.by_family(family_name):
        if font.path not in font_files:
            font_files.append(font.path)
    return font_files


@app.command()
def info(
    font_file: Annotated[
        Path | None,
        typer.Option(
            "--font-file",
            help="Find all fonts in the given file",
        ),
    ] = None,
    family_name: Annotated[
        str | None,
        typer.Option(
            "--family-name",
            help="Find all fonts belonging to a font family using system font loading utilities",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="The format of the output",
        ),
    ] = OutputFormat.HUMAN_READABLE,
    print_features: Annotated[
        bool,
        typer.Option(
            "--print-features",
            help="Print font features",
        ),
    ] = False,
    print_writing_systems: Annotated[
        bool,
        typer.Option(
            "--print-writing-systems",
            help="Print supported writing systems",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print verbose debug output",
        ),
    ] = False,
) -> None:
    """Print metrics of fonts in a font file.

    With neither --font-file nor --family-name, font data is read from stdin.

    Example:
        font-info info --family-name "DejaVu Sans" --format json
    """
    if font_file is not None and family_name is not None:
        print_error("Cannot use --font-file and --family-name together")
        raise typer.Exit(code=1)

    output = OutputConfig(
        format=output_format,
        print_features=print_features,
        print_writing_systems=print_writing_systems,
    )
    settings = _settings(output, verbose, log_file)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    out: Output
    if settings.output.format is OutputFormat.JSON:
        out = JsonOutput(settings.output)
    else:
        out = HumanReadableOutput(settings.output)

    try:
        if font_file is not None:
            logger.info("Reading font file", path=str(font_file))
            _inspect(FontReader.from_path(font_file), out)

        elif family_name is not None:
            logger.info("Querying for font family", family=family_name)
            for path in _family_font_files(family_name, settings, logger):
                logger.info("Reading font file", path=str(path))
                _inspect(FontReader.from_path(path), out)

        else:
            if _stdin_is_terminal():
                print_error(STDIN_HELP)
                raise typer.Exit(code=1)

            logger.info("Reading font data from stdin")
            _inspect(FontReader.from_stream(sys.stdin.buffer), out)

        out.finish()

    except FontLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except SystemCollectionUnavailable as e:
        print_error("Could not enumerate system fonts", details=e.reason)
        raise typer.Exit(code=1)


@app.command("list")
def list_fonts(
    family_name: Annotated[
        str | None,
        typer.Option(
            "--family-name",
            help="Only list fonts of this family (case-insensitive)",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="The format of the output",
        ),
    ] = OutputFormat.HUMAN_READABLE,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print verbose debug output",
        ),
    ] = False,
) -> None:
    """List fonts installed on this system."""
    settings = _settings(OutputConfig(format=output_format), verbose, None)
    logger = configure_logging(console_level=settings.logging.log_level)

    try:
        collection = Collection.new(system_backend(settings.backend, logger=logger), logger=logger)
    except SystemCollectionUnavailable as e:
        print_error("Could not enumerate system fonts", details=e.reason)
        raise typer.Exit(code=1)

    fonts = collection.all() if family_name is None else collection.by_family(family_name)

    if output_format is OutputFormat.JSON:
        count = print_font_json(fonts)
    else:
        count = print_font_table(fonts)
    logger.debug("Fonts listed", count=count)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
