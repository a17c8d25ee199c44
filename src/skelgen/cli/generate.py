"""Skeleton generation commands."""

from pathlib import Path
from typing import Annotated

import typer

from skelgen.config import get_project_dir
from skelgen.generators import create_class_writer, create_test_writer
from skelgen.logging import get_logger
from skelgen.writer import SkeletonWriter

_logger = get_logger("cli.generate")

app = typer.Typer(
    name="generate",
    help="Generate test case and class skeletons",
    no_args_is_help=True,
)


def _project_path(path: Path | None) -> str:
    """Resolve a CLI path against the project directory; None stays empty."""
    if path is None:
        return ""
    return str(get_project_dir() / path)


def _write(writer: SkeletonWriter, target: Path | None) -> None:
    try:
        written = writer.write(_project_path(target))
    except OSError as e:
        _logger.debug("Failed to write skeleton: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Wrote {writer.get_out_class_name()} to {written}", err=True)


@app.command("test")
def test(
    class_name: Annotated[str, typer.Argument(help="Qualified name of the class under test")],
    source_file: Annotated[
        Path | None,
        typer.Argument(help="Source file declaring the class"),
    ] = None,
    test_class: Annotated[
        str,
        typer.Option("--test-class", "-c", help="Name of the generated test case"),
    ] = "",
    test_file: Annotated[
        Path | None,
        typer.Option("--test-file", "-o", help="Source file of the generated test case"),
    ] = None,
    target: Annotated[
        Path | None,
        typer.Option("--target", "-t", help="Write here instead of the test file"),
    ] = None,
) -> None:
    """Generate a test case skeleton for a class."""
    writer = create_test_writer(
        class_name,
        _project_path(source_file),
        test_class,
        _project_path(test_file),
    )
    _write(writer, target)


@app.command("class")
def class_(
    test_class: Annotated[str, typer.Argument(help="Qualified name of the test case")],
    source_file: Annotated[
        Path | None,
        typer.Argument(help="Source file declaring the test case"),
    ] = None,
    class_name: Annotated[
        str,
        typer.Option("--class", "-c", help="Name of the generated class"),
    ] = "",
    class_file: Annotated[
        Path | None,
        typer.Option("--class-file", "-o", help="Source file of the generated class"),
    ] = None,
    target: Annotated[
        Path | None,
        typer.Option("--target", "-t", help="Write here instead of the class file"),
    ] = None,
) -> None:
    """Generate a class skeleton for a test case."""
    writer = create_class_writer(
        test_class,
        _project_path(source_file),
        class_name,
        _project_path(class_file),
    )
    _write(writer, target)
