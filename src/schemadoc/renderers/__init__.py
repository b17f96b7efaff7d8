"""Renderers turning a package's documented fields into a report.

Example:
    >>> from schemadoc.renderers import get_renderer
    >>>
    >>> renderer = get_renderer("md", stream=sys.stdout)
    >>> print_doc("schemadoc.io/os", root, renderer)

Supported formats:
    - Plain text: "txt"
    - Markdown: "md"
    - JSON: "json"
"""

from schemadoc.renderers.base import (
    BaseRenderer,
    RendererConfig,
)
from schemadoc.renderers.factory import get_renderer, list_available_formats
from schemadoc.renderers.json_renderer import JSONRenderer
from schemadoc.renderers.markdown_renderer import MarkdownRenderer
from schemadoc.renderers.text_renderer import TextRenderer

__all__ = [
    # Base classes
    "BaseRenderer",
    "RendererConfig",
    # Formats
    "JSONRenderer",
    "MarkdownRenderer",
    "TextRenderer",
    # Factory functions
    "get_renderer",
    "list_available_formats",
]
