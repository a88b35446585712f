"""Command line entry points for `rowslc` and `colslc`."""

import sys
from contextlib import ExitStack
from typing import Annotated, NoReturn

import typer
from loguru import logger
from pydantic import ValidationError

from slices import __version__
from slices.configuration import SlicerConfig
from slices.filter import InvalidFilter
from slices.slicer import ColSlicer, RowSlicer, Slicer
from slices.utils import configure_logging, open_input

FilePathArg = Annotated[
    str | None,
    typer.Argument(help="Path to input file. Reads standard input if omitted or '-'.", show_default=False),
]
FiltersOpt = Annotated[
    list[str] | None,
    typer.Option("--filters", "-f", help="Filters to be applied: N, N:M, N:, :M or ':'. May be repeated."),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug information to standard error.")]


def _version_callback(prog: str):  # noqa: ANN202
    def callback(value: bool) -> None:  # noqa: FBT001
        if value:
            typer.echo(f"{prog} {__version__}")
            raise typer.Exit

    return callback


def _fail(message: str) -> NoReturn:
    """Print a single diagnostic line and exit with a non-zero status."""
    typer.echo(f"error: {message}", err=True)
    raise typer.Exit(code=1)


def run(slicer_cls: type[Slicer], filepath: str | None, filters: list[str] | None, *, verbose: bool = False) -> None:
    """Validate options, then stream the input through `slicer_cls` to standard output.

    Filters are parsed before the input is opened so a malformed filter never
    produces partial output.
    """
    overrides = {"log_level": "DEBUG"} if verbose else {}
    try:
        config = SlicerConfig(filepath=filepath, filters=filters or [], **overrides)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(loc) for loc in error["loc"])
        _fail(f"invalid configuration for {field}: {error['msg']}")

    configure_logging(config.log_level)

    try:
        selection = config.selection()
    except InvalidFilter as exc:
        _fail(str(exc))

    logger.debug(f"Filters: [{', '.join(config.filters)}] -> {type(selection).__name__}")

    with ExitStack() as stack:
        try:
            reader = stack.enter_context(open_input(config.filepath))
        except OSError as exc:
            _fail(f"failed to open file {config.filepath}: {exc.strerror or exc}")

        slicer = slicer_cls(reader, selection)
        try:
            slicer.slice(sys.stdout)
        except (OSError, UnicodeDecodeError) as exc:
            _fail(f"slice operation failed: {exc}")


rowslc = typer.Typer(add_completion=False, help="Select rows (lines) of a text stream.")
colslc = typer.Typer(add_completion=False, help="Select whitespace-delimited columns of a text stream.")


@rowslc.command()
def rows(
    filepath: FilePathArg = None,
    filters: FiltersOpt = None,
    verbose: VerboseOpt = False,  # noqa: FBT002
    version: Annotated[  # noqa: ARG001, FBT002
        bool,
        typer.Option("--version", callback=_version_callback("rowslc"), is_eager=True, help="Show the version."),
    ] = False,
) -> None:
    """Emit the lines whose 1-based line number is selected, unmodified.

    Without filters every line is emitted.
    """
    run(RowSlicer, filepath, filters, verbose=verbose)


@colslc.command()
def columns(
    filepath: FilePathArg = None,
    filters: FiltersOpt = None,
    verbose: VerboseOpt = False,  # noqa: FBT002
    version: Annotated[  # noqa: ARG001, FBT002
        bool,
        typer.Option("--version", callback=_version_callback("colslc"), is_eager=True, help="Show the version."),
    ] = False,
) -> None:
    """Emit the selected whitespace-delimited fields of each line, joined by single spaces.

    Without filters every line is emitted unmodified.
    """
    run(ColSlicer, filepath, filters, verbose=verbose)
