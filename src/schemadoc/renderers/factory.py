"""Factory functions for creating renderers."""

from __future__ import annotations

from typing import Any

from schemadoc.config import OutputFormat
from schemadoc.renderers.base import BaseRenderer
from schemadoc.renderers.json_renderer import JSONRenderer
from schemadoc.renderers.markdown_renderer import MarkdownRenderer
from schemadoc.renderers.text_renderer import TextRenderer

_RENDERERS: dict[OutputFormat, type[BaseRenderer[Any]]] = {
    OutputFormat.TEXT: TextRenderer,
    OutputFormat.MARKDOWN: MarkdownRenderer,
    OutputFormat.JSON: JSONRenderer,
}


def get_renderer(format: OutputFormat | str, **kwargs: Any) -> BaseRenderer[Any]:
    """Create a renderer for the specified format.

    Args:
        format: ``txt``, ``md`` or ``json``.
        **kwargs: Passed to the renderer (``stream``, ``describer``, and
            format-specific configuration options).

    Returns:
        Configured renderer instance.

    Raises:
        ConfigurationError: If the format is unknown.

    Example:
        >>> renderer = get_renderer("md", stream=buffer, heading_level=1)
    """
    return _RENDERERS[OutputFormat.parse(format)](**kwargs)


def list_available_formats() -> list[str]:
    """List the names accepted by get_renderer()."""
    return [fmt.value for fmt in _RENDERERS]
