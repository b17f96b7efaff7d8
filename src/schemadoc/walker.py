"""Discover the documented fields of a package."""

from __future__ import annotations

from schemadoc.errors import FieldDiscoveryError
from schemadoc.tree import Field, Kind, ValueNode


def discover_fields(root: ValueNode) -> list[Field]:
    """Return the struct-shaped definitions of *root*, in declaration order.

    Regular fields and definitions of any other kind are skipped.

    Raises:
        FieldDiscoveryError: If the members of *root* cannot be listed.
    """
    try:
        members = root.fields(definitions=True)
    except ValueError as e:
        raise FieldDiscoveryError(f"cannot get fields: {e}") from e

    return [
        member
        for member in members
        if member.is_definition and member.value.kind is Kind.STRUCT
    ]
