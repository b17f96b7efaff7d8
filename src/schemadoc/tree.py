"""Compiled value tree.

A package compiles into a tree of :class:`ValueNode` objects. The root node is
a struct whose members are the package's top-level fields and definitions.
Renderers only read from the tree; nothing here mutates it after compilation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFINITION_PREFIX = "#"


class Kind(Enum):
    """Structural kind of a value."""

    STRUCT = "struct"
    LIST = "list"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    NUMBER = "number"
    BOOL = "bool"
    BYTES = "bytes"
    NULL = "null"
    TOP = "_"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_definition_label(label: str) -> bool:
    """Return True if *label* names a definition rather than a regular field."""
    return label.startswith(DEFINITION_PREFIX)


@dataclass
class ValueNode:
    """A single value in the compiled tree.

    Attributes:
        path: Labels from the package root to this value.
        kind: Structural kind.
        type_name: Declared type as written in the source.
        doc: Attached comment groups, in source order.
        attrs: Attribute names (``input``, ``output``, ``secret``...).
        default: Default value, or ``MISSING``.
        enum: Allowed values, if the value is an enumeration.
        reference: Name of the definition this value refers to, if any.
        members: Nested members for struct values, in declaration order.
    """

    path: tuple[str, ...]
    kind: Kind
    type_name: str = ""
    doc: list[str] = field(default_factory=list)
    attrs: frozenset[str] = frozenset()
    default: Any = MISSING
    enum: list[Any] | None = None
    reference: str | None = None
    members: dict[str, "ValueNode"] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.path[-1] if self.path else ""

    @property
    def path_str(self) -> str:
        """Dotted path of the value, empty for the root."""
        return ".".join(self.path)

    @property
    def is_definition(self) -> bool:
        return is_definition_label(self.label)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def fields(self, definitions: bool = False) -> list["Field"]:
        """List the direct members of a struct value.

        Args:
            definitions: Include definitions as well as regular fields.

        Returns:
            Members in declaration order.

        Raises:
            ValueError: If the value is not a struct.
        """
        if self.kind is not Kind.STRUCT:
            where = self.path_str or "<root>"
            raise ValueError(
                f"{where}: cannot list fields of a {self.kind.value} value"
            )
        return [
            Field(name=label, value=node, is_definition=is_definition_label(label))
            for label, node in self.members.items()
            if definitions or not is_definition_label(label)
        ]

    def lookup(self, *labels: str) -> "ValueNode | None":
        node: ValueNode | None = self
        for label in labels:
            if node is None:
                return None
            node = node.members.get(label)
        return node


@dataclass(frozen=True)
class Field:
    """A named member of a struct value."""

    name: str
    value: ValueNode
    is_definition: bool = False
