"""Display strings for value nodes."""

from __future__ import annotations

import json
from typing import Any

from schemadoc.tree import ValueNode

NO_COMMENT = "-"

# Comment lines carrying these prefixes are notes for maintainers.
HIDDEN_DOC_PREFIXES = ("FIXME: ", "TODO: ", "INTERNAL: ")

SECRET_TYPE = "#Secret"
ARTIFACT_TYPE = "#Artifact"


def _literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


class ValueDescriber:
    """Produces the type, documentation and label shown for a value."""

    def format_value(self, node: ValueNode) -> str:
        """Return a single-line description of the value's type."""
        if node.has_attr("secret"):
            return SECRET_TYPE
        if node.has_attr("artifact"):
            return ARTIFACT_TYPE

        if node.enum:
            text = " | ".join(_literal(v) for v in node.enum)
        else:
            text = node.type_name or node.kind.value
        if node.has_default:
            text = f"*{_literal(node.default)} | {text}"
        return text.replace("\n", "\\n")

    def doc_string(self, node: ValueNode) -> str:
        """Return the value's documentation on one line, or ``NO_COMMENT``."""
        lines: list[str] = []
        for group in node.doc:
            for line in group.strip().splitlines():
                line = line.strip()
                if not line or line.startswith(HIDDEN_DOC_PREFIXES):
                    continue
                lines.append(line)
        if not lines:
            return NO_COMMENT
        return " ".join(lines)

    def format_label(self, owner: str, node: ValueNode) -> str:
        """Return the value's path relative to *owner*."""
        return node.path_str.removeprefix(f"{owner}.")
