"""Documentation pipeline: load a package, walk its fields, render them."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any, Mapping, TextIO

from schemadoc.compiler import load_package
from schemadoc.config import OutputFormat
from schemadoc.errors import WriteError
from schemadoc.renderers.base import BaseRenderer
from schemadoc.renderers.factory import get_renderer
from schemadoc.scanner import IOClassifier, ScanContext
from schemadoc.tree import ValueNode
from schemadoc.walker import discover_fields

logger = logging.getLogger(__name__)


def print_doc(
    package_name: str,
    root: ValueNode,
    renderer: BaseRenderer[Any],
    *,
    classifier: IOClassifier | None = None,
    context: ScanContext | None = None,
) -> None:
    """Render the documentation of the package rooted at *root*.

    Fields are discovered before anything is written, so a discovery failure
    leaves the output untouched.

    Raises:
        FieldDiscoveryError: If the fields of *root* cannot be listed.
        SerializationError: If the JSON document cannot be serialized.
    """
    fields = discover_fields(root)
    logger.debug(
        "Discovered fields",
        extra={"fields": {"package": package_name, "count": len(fields)}},
    )

    classifier = classifier or IOClassifier()
    context = context or ScanContext()

    renderer.begin_package(package_name, root)
    for field in fields:
        renderer.begin_field(field)

        inputs = classifier.scan_inputs(context, field.value)
        renderer.render_inputs(field.name, inputs)

        outputs = classifier.scan_outputs(context, field.value)
        renderer.render_outputs(field.name, outputs)

        logger.debug(
            "Rendered field",
            extra={
                "fields": {
                    "field": field.name,
                    "inputs": len(inputs),
                    "outputs": len(outputs),
                }
            },
        )
    renderer.finish()


def report_stem(package: str) -> str:
    """File name, without extension, of the report for *package*."""
    return Path(package).stem or "package"


def render_doc(
    package_name: str,
    root: ValueNode,
    format: OutputFormat | str = OutputFormat.TEXT,
    **renderer_options: Any,
) -> str:
    """Render the documentation of *root* and return it as a string."""
    buffer = StringIO()
    renderer = get_renderer(format, stream=buffer, **renderer_options)
    print_doc(package_name, root, renderer)
    return buffer.getvalue()


def generate_doc(
    package: str,
    format: OutputFormat | str = OutputFormat.TEXT,
    *,
    libraries: Mapping[str, str | Path] | None = None,
    stream: TextIO | None = None,
    output_path: str | Path | None = None,
    **renderer_options: Any,
) -> Path | None:
    """Compile *package* and write its documentation.

    The format is checked before the package is loaded. The report goes to
    *output_path* when given, otherwise to *stream* (stdout by default). An
    existing directory as *output_path* receives a file named after the
    package with the format's extension.

    Returns:
        The path written to, or None when writing to a stream.

    Raises:
        ConfigurationError: If *format* is unknown.
        CompileError: If the package cannot be compiled.
        FieldDiscoveryError: If the package fields cannot be listed.
        SerializationError: If the JSON document cannot be serialized.
        WriteError: If *output_path* cannot be written.
    """
    output_format = OutputFormat.parse(format)
    root = load_package(package, libraries)

    if output_path is None:
        renderer = get_renderer(output_format, stream=stream, **renderer_options)
        print_doc(package, root, renderer)
        return None

    buffer = StringIO()
    renderer = get_renderer(output_format, stream=buffer, **renderer_options)
    path = Path(output_path)
    if path.is_dir():
        path = path / f"{report_stem(package)}{renderer.file_extension}"
    print_doc(package, root, renderer)
    content = buffer.getvalue()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Failed to write report to {path}: {e}") from e
    logger.info(
        "Report written",
        extra={"fields": {"path": str(path), "format": renderer.name}},
    )
    return path
