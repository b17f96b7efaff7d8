"""JSON renderer.

The report is assembled in a :class:`DocumentBuilder` while the fields are
visited and serialized once by :meth:`JSONRenderer.finish`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from schemadoc.document import DocumentBuilder, PackageDoc
from schemadoc.errors import SerializationError
from schemadoc.renderers.base import BaseRenderer, RendererConfig
from schemadoc.tree import Field, ValueNode


@dataclass
class JSONRendererConfig(RendererConfig):
    """Configuration for the JSON renderer.

    Attributes:
        indent: Number of spaces for indentation (None for compact).
        sort_keys: Whether to sort dictionary keys.
        ensure_ascii: Whether to escape non-ASCII characters.
    """

    indent: int | None = 4
    sort_keys: bool = False
    ensure_ascii: bool = False


class JSONRenderer(BaseRenderer[JSONRendererConfig]):
    """JSON renderer.

    Example:
        >>> renderer = JSONRenderer(stream=buffer)
        >>> print_doc("schemadoc.io/os", root, renderer)
        >>> renderer.document.fields[0].name
        '#ReadFile'
    """

    name = "json"
    file_extension = ".json"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._builder = DocumentBuilder()

    @classmethod
    def _default_config(cls) -> JSONRendererConfig:
        return JSONRendererConfig()

    @property
    def document(self) -> PackageDoc:
        """The document assembled so far."""
        return self._builder.build()

    def begin_package(self, name: str, root: ValueNode) -> None:
        self._builder.begin_package(name, self.doc_string(root))

    def begin_field(self, field: Field) -> None:
        self._builder.begin_field(field.name, self.doc_string(field.value))

    def render_inputs(self, owner: str, values: list[ValueNode]) -> None:
        self._builder.set_inputs(self.summarize(owner, values))

    def render_outputs(self, owner: str, values: list[ValueNode]) -> None:
        self._builder.set_outputs(self.summarize(owner, values))
        self._builder.commit_field()

    def render_document(self, document: PackageDoc) -> str:
        """Serialize *document*.

        Raises:
            SerializationError: If the document cannot be serialized.
        """
        try:
            return json.dumps(
                document.to_dict(),
                indent=self._config.indent,
                sort_keys=self._config.sort_keys,
                ensure_ascii=self._config.ensure_ascii,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"json marshal: {e}") from e

    def finish(self) -> None:
        self.write(self.render_document(self.document) + "\n")
        super().finish()
