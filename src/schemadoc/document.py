"""Structured documentation records.

These records back the JSON output. Their ``to_dict`` methods produce the
serialized shape: ``Name``, ``Description`` and ``Fields`` for a package;
``Name``, ``Description``, ``Inputs`` and ``Outputs`` for a field; ``Name``,
``Type`` and ``Description`` for a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from schemadoc.describe import ValueDescriber
from schemadoc.tree import ValueNode


@dataclass
class ValueSummary:
    """Label, type and description of one input or output."""

    name: str
    type: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"Name": self.name, "Type": self.type, "Description": self.description}


@dataclass
class FieldDoc:
    name: str
    description: str = ""
    inputs: list[ValueSummary] = field(default_factory=list)
    outputs: list[ValueSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Description": self.description,
            "Inputs": [v.to_dict() for v in self.inputs],
            "Outputs": [v.to_dict() for v in self.outputs],
        }


@dataclass
class PackageDoc:
    name: str
    description: str = ""
    fields: list[FieldDoc] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Description": self.description,
            "Fields": [f.to_dict() for f in self.fields],
        }


def summarize(
    owner: str,
    node: ValueNode,
    describer: ValueDescriber,
) -> ValueSummary:
    """Describe *node* as displayed under the field named *owner*."""
    return ValueSummary(
        name=describer.format_label(owner, node),
        type=describer.format_value(node),
        description=describer.doc_string(node),
    )


class DocumentBuilder:
    """Assembles a :class:`PackageDoc` one field at a time.

    A field is opened with :meth:`begin_field`, receives its inputs and
    outputs, and is appended to the package by :meth:`commit_field`.
    """

    def __init__(self) -> None:
        self._package: PackageDoc | None = None
        self._current: FieldDoc | None = None

    @property
    def package(self) -> PackageDoc:
        if self._package is None:
            raise RuntimeError("begin_package() has not been called")
        return self._package

    @property
    def current(self) -> FieldDoc:
        if self._current is None:
            raise RuntimeError("no field in progress")
        return self._current

    def begin_package(self, name: str, description: str) -> None:
        self._package = PackageDoc(name=name)
        if description:
            self._package.description = description

    def begin_field(self, name: str, description: str) -> None:
        self._current = FieldDoc(name=name)
        if description:
            self._current.description = description

    def set_inputs(self, inputs: list[ValueSummary]) -> None:
        self.current.inputs = inputs

    def set_outputs(self, outputs: list[ValueSummary]) -> None:
        self.current.outputs = outputs

    def commit_field(self) -> FieldDoc:
        committed = self.current
        self.package.fields.append(committed)
        self._current = None
        return committed

    def build(self) -> PackageDoc:
        if self._current is not None:
            raise RuntimeError(f"field {self._current.name} was not committed")
        return self.package
