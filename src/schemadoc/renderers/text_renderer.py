"""Plain text renderer.

Writes a line-oriented report meant to be read in a terminal. Descriptions of
inputs and outputs are shortened to fit half of the terminal width.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemadoc.formatting import WidthProvider, align_columns, stream_width_provider, terminal_trim
from schemadoc.renderers.base import BaseRenderer, RendererConfig
from schemadoc.tree import Field, ValueNode


@dataclass
class TextRendererConfig(RendererConfig):
    """Configuration for the text renderer.

    Attributes:
        padding: Indentation unit, also used as the gap between columns.
        width_provider: Reports the terminal width used to shorten
            descriptions. Probes the output stream when None.
    """

    padding: str = "    "
    width_provider: WidthProvider | None = None


class TextRenderer(BaseRenderer[TextRendererConfig]):
    """Plain text renderer.

    Example output::

        Package schemadoc.io/os

        Operating system primitives

        #ReadFile

            Read a file from a directory

            Inputs:
                path        string    Path of the file
    """

    name = "txt"
    file_extension = ".txt"

    @classmethod
    def _default_config(cls) -> TextRendererConfig:
        return TextRendererConfig()

    def _width_provider(self) -> WidthProvider:
        return self._config.width_provider or stream_width_provider(self._stream)

    def begin_package(self, name: str, root: ValueNode) -> None:
        self.write(f"Package {name}\n")
        self.write(f"\n{self.doc_string(root)}\n")

    def begin_field(self, field: Field) -> None:
        pad = self._config.padding
        self.write(f"\n{field.name}\n\n{pad}{self.doc_string(field.value)}\n")

    def render_inputs(self, owner: str, values: list[ValueNode]) -> None:
        self._render_group("Inputs", owner, values)

    def render_outputs(self, owner: str, values: list[ValueNode]) -> None:
        self._render_group("Outputs", owner, values)

    def _render_group(self, title: str, owner: str, values: list[ValueNode]) -> None:
        pad = self._config.padding
        if not values:
            self.write(f"\n{pad}{title}: none\n")
            return

        self.write(f"\n{pad}{title}:\n")
        width_provider = self._width_provider()
        rows = [
            [summary.name, summary.type, terminal_trim(summary.description, width_provider)]
            for summary in self.summarize(owner, values)
        ]
        for line in align_columns(rows, padding=len(pad), indent=pad * 2):
            self.write(f"{line}\n")
