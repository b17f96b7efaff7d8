"""schemadoc - reference documentation for schema packages.

Example:
    >>> import schemadoc
    >>> root = schemadoc.load_package("schemadoc.io/os")
    >>> print(schemadoc.render_doc("schemadoc.io/os", root, "md"))
"""

from schemadoc.compiler import build, default_sources, load_package
from schemadoc.config import OutputFormat
from schemadoc.describe import NO_COMMENT, ValueDescriber
from schemadoc.document import DocumentBuilder, FieldDoc, PackageDoc, ValueSummary
from schemadoc.driver import generate_doc, print_doc, render_doc
from schemadoc.errors import (
    CompileError,
    ConfigurationError,
    FieldDiscoveryError,
    SchemaDocError,
    SerializationError,
    WriteError,
)
from schemadoc.formatting import md_escape, terminal_trim
from schemadoc.renderers import get_renderer
from schemadoc.scanner import IOClassifier, ScanContext
from schemadoc.tree import Field, Kind, ValueNode
from schemadoc.walker import discover_fields

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "generate_doc",
    "print_doc",
    "render_doc",
    "get_renderer",
    "OutputFormat",
    # Tree
    "build",
    "default_sources",
    "load_package",
    "Field",
    "Kind",
    "ValueNode",
    "discover_fields",
    # Description and classification
    "NO_COMMENT",
    "ValueDescriber",
    "IOClassifier",
    "ScanContext",
    "md_escape",
    "terminal_trim",
    # Documents
    "DocumentBuilder",
    "FieldDoc",
    "PackageDoc",
    "ValueSummary",
    # Errors
    "SchemaDocError",
    "CompileError",
    "ConfigurationError",
    "FieldDiscoveryError",
    "SerializationError",
    "WriteError",
]
