"""Classify the values of a definition into inputs and outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from schemadoc.tree import Kind, ValueNode

INPUT_ATTR = "input"
OUTPUT_ATTR = "output"


@dataclass
class ScanContext:
    """State shared by the scans of one rendering pass."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))


class IOClassifier:
    """Finds values marked with the ``input`` or ``output`` attribute.

    Values are visited depth first in declaration order. Definitions nested in
    a struct are not visited. A value referring to another definition may
    itself be collected, but its members are not scanned.
    """

    def scan_inputs(self, ctx: ScanContext, node: ValueNode) -> list[ValueNode]:
        return self._scan(ctx, node, INPUT_ATTR)

    def scan_outputs(self, ctx: ScanContext, node: ValueNode) -> list[ValueNode]:
        return self._scan(ctx, node, OUTPUT_ATTR)

    def _scan(self, ctx: ScanContext, node: ValueNode, attr: str) -> list[ValueNode]:
        found: list[ValueNode] = []
        self._visit(ctx, node, attr, found)
        return found

    def _visit(
        self,
        ctx: ScanContext,
        node: ValueNode,
        attr: str,
        found: list[ValueNode],
    ) -> None:
        if node.kind is not Kind.STRUCT:
            return
        for member in node.fields():
            value = member.value
            if value.has_attr(attr):
                found.append(value)
            if value.reference is not None:
                ctx.logger.debug(
                    "Skipping reference",
                    extra={"fields": {"path": value.path_str, "reference": value.reference}},
                )
                continue
            self._visit(ctx, value, attr, found)
