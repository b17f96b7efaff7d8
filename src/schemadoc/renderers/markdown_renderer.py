"""Markdown renderer.

Writes the report as GitHub-flavored Markdown. Every user-authored string
placed in the output is escaped with :func:`md_escape`.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemadoc.describe import NO_COMMENT
from schemadoc.formatting import md_escape
from schemadoc.renderers.base import BaseRenderer, RendererConfig
from schemadoc.tree import Field, ValueNode


@dataclass
class MarkdownRendererConfig(RendererConfig):
    """Configuration for the Markdown renderer.

    Attributes:
        heading_level: Heading level of the package title (1-4).
    """

    heading_level: int = 2


class MarkdownRenderer(BaseRenderer[MarkdownRendererConfig]):
    """Markdown renderer.

    The package is a level-2 heading by default, each field a level-3
    heading and each input/output table a level-4 heading.
    """

    name = "md"
    file_extension = ".md"

    @classmethod
    def _default_config(cls) -> MarkdownRendererConfig:
        return MarkdownRendererConfig()

    def _heading(self, text: str, level: int = 1) -> str:
        """Create a Markdown heading, *level* being relative to the package."""
        adjusted_level = min(6, max(1, level + self._config.heading_level - 1))
        return f"{'#' * adjusted_level} {text}"

    def _table(self, headers: list[str], alignments: list[str], rows: list[list[str]]) -> str:
        lines = ["| " + " | ".join(headers) + " |", "| " + " | ".join(alignments) + " |"]
        for row in rows:
            lines.append("| " + " | ".join(row) + " |")
        return "\n".join(lines)

    def begin_package(self, name: str, root: ValueNode) -> None:
        self.write(self._heading(f"Package {md_escape(name)}", 1) + "\n")
        comment = self.doc_string(root)
        if comment == NO_COMMENT:
            self.write("\n")
            return
        self.write(f"\n{md_escape(comment)}\n\n")

    def begin_field(self, field: Field) -> None:
        self.write(self._heading(md_escape(field.name), 2) + "\n\n")
        comment = self.doc_string(field.value)
        if comment != NO_COMMENT:
            self.write(f"{md_escape(comment)}\n\n")

    def render_inputs(self, owner: str, values: list[ValueNode]) -> None:
        self._render_group("Inputs", "_No input._", owner, values)

    def render_outputs(self, owner: str, values: list[ValueNode]) -> None:
        self._render_group("Outputs", "_No output._", owner, values)

    def _render_group(
        self,
        title: str,
        empty: str,
        owner: str,
        values: list[ValueNode],
    ) -> None:
        self.write(self._heading(f"{md_escape(owner)} {title}", 3) + "\n\n")
        if not values:
            self.write(f"{empty}\n\n")
            return

        rows = [
            [f"*{summary.name}*", f"``{md_escape(summary.type)}``", md_escape(summary.description)]
            for summary in self.summarize(owner, values)
        ]
        table = self._table(
            ["Name", "Type", "Description"],
            ["-------------", ":-------------:", ":-------------:"],
            rows,
        )
        self.write(f"{table}\n\n")
