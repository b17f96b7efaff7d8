"""Command-line interface for schemadoc."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from schemadoc.config import (
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_OUTPUT,
    OutputFormat,
    parse_libraries,
)
from schemadoc.driver import generate_doc
from schemadoc.errors import error_boundary
from schemadoc.logging import configure_logging

app = typer.Typer(
    name="schemadoc",
    help="Generate reference documentation for schema packages",
    add_completion=False,
)


@app.callback()
@error_boundary
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", envvar=ENV_LOG_LEVEL, help="Log level"),
    ] = "info",
    log_format: Annotated[
        str,
        typer.Option(
            "--log-format",
            envvar=ENV_LOG_FORMAT,
            help="Log format (auto, console, json)",
        ),
    ] = "auto",
) -> None:
    """Generate reference documentation for schema packages."""
    configure_logging(level=log_level, format=log_format)


@app.command(name="doc")
@error_boundary
def doc_cmd(
    package: Annotated[
        str,
        typer.Argument(help="Package to document: PACKAGE or PATH"),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            envvar=ENV_OUTPUT,
            help="Output format (txt|md|json)",
        ),
    ] = OutputFormat.TEXT.value,
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Write the report to a file, or into a directory, instead of stdout",
        ),
    ] = None,
    library: Annotated[
        Optional[list[str]],
        typer.Option(
            "--library",
            "-L",
            help="Additional library as NAME=DIRECTORY (repeatable)",
        ),
    ] = None,
) -> None:
    """Document a package.

    Examples:
        schemadoc doc schemadoc.io/os
        schemadoc doc schemadoc.io/git -o md
        schemadoc doc ./mypkg.yaml -o json -f docs/mypkg.json
        schemadoc doc acme/deploy -L acme=./packages
    """
    output_format = OutputFormat.parse(output)
    libraries = parse_libraries(library)

    written = generate_doc(
        package,
        output_format,
        libraries=libraries,
        output_path=file,
    )
    if written is not None:
        typer.echo(f"Report written to {written}", err=True)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
