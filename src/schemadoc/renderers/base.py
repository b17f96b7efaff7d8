"""Base classes and interfaces for renderers.

A renderer receives the package, then each documented field followed by its
inputs and outputs, in that order, and writes the report to its stream.
Every format renders the same content; only syntax and truncation differ.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Generic, TextIO, TypeVar

from schemadoc.describe import ValueDescriber
from schemadoc.document import ValueSummary, summarize
from schemadoc.tree import Field, ValueNode


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class RendererConfig:
    """Base configuration for all renderers.

    Subclasses extend this with format-specific options.
    """


ConfigT = TypeVar("ConfigT", bound=RendererConfig)


# =============================================================================
# Abstract Base Renderer
# =============================================================================


class BaseRenderer(ABC, Generic[ConfigT]):
    """Abstract base class for all renderers.

    Type Parameters:
        ConfigT: The configuration type for this renderer.

    Example:
        >>> renderer = TextRenderer(stream=sys.stdout)
        >>> renderer.begin_package("schemadoc.io/os", root)
        >>> for field in discover_fields(root):
        ...     renderer.begin_field(field)
        ...     renderer.render_inputs(field.name, inputs)
        ...     renderer.render_outputs(field.name, outputs)
        >>> renderer.finish()
    """

    # Class-level attributes
    name: str = "base"
    file_extension: str = ".txt"

    def __init__(
        self,
        config: ConfigT | None = None,
        *,
        stream: TextIO | None = None,
        describer: ValueDescriber | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Renderer configuration. If None, uses default configuration.
            stream: Destination of the report. Defaults to stdout.
            describer: Produces labels, types and doc strings of values.
            **kwargs: Additional configuration options to override.
        """
        config = config or self._default_config()

        for key in kwargs:
            if not hasattr(config, key):
                raise TypeError(f"{type(self).__name__} has no option {key!r}")
        # Overrides apply to a copy; the caller's config is left as is.
        self._config = replace(config, **kwargs) if kwargs else config

        self._stream = stream or sys.stdout
        self._describer = describer or ValueDescriber()

    @classmethod
    @abstractmethod
    def _default_config(cls) -> ConfigT:
        """Create default configuration for this renderer type."""

    @property
    def config(self) -> ConfigT:
        return self._config

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def describer(self) -> ValueDescriber:
        return self._describer

    # -------------------------------------------------------------------------
    # Abstract Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def begin_package(self, name: str, root: ValueNode) -> None:
        """Render the package name and description."""

    @abstractmethod
    def begin_field(self, field: Field) -> None:
        """Render the name and description of a documented field."""

    @abstractmethod
    def render_inputs(self, owner: str, values: list[ValueNode]) -> None:
        """Render the inputs of the field named *owner*."""

    @abstractmethod
    def render_outputs(self, owner: str, values: list[ValueNode]) -> None:
        """Render the outputs of the field named *owner*.

        This is the last call made for a field.
        """

    # -------------------------------------------------------------------------
    # Concrete Methods
    # -------------------------------------------------------------------------

    def finish(self) -> None:
        """Complete the report. Called once after the last field."""
        self._stream.flush()

    def write(self, text: str) -> None:
        self._stream.write(text)

    def doc_string(self, node: ValueNode) -> str:
        return self._describer.doc_string(node)

    def summarize(self, owner: str, values: list[ValueNode]) -> list[ValueSummary]:
        """Describe each of *values* as listed under the field *owner*."""
        return [summarize(owner, value, self._describer) for value in values]
