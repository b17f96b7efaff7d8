"""Compile YAML packages into value trees.

A package is a YAML file, or a directory of YAML files merged in file-name
order. Each file is a mapping::

    doc: Filesystem operations
    fields:
      "#ReadFile":
        doc: Read a file from a directory
        fields:
          path: {type: string, attrs: [input], doc: Path of the file}
          contents: {type: string, attrs: [output]}
      "#Mode": {type: int, default: 420}

Labels starting with ``#`` are definitions. A node spec is either a type name
or a mapping using the keys in ``NODE_KEYS``. A type of ``#Name`` refers to a
definition of the same package, which is compiled in place.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from schemadoc.errors import CompileError
from schemadoc.tree import MISSING, Kind, ValueNode, is_definition_label

logger = logging.getLogger(__name__)

STDLIB_PATH = "schemadoc.io"
STDLIB_DIR = Path(__file__).resolve().parent / "stdlib"

YAML_SUFFIXES = (".yaml", ".yml")
PACKAGE_KEYS = frozenset({"doc", "fields"})
NODE_KEYS = frozenset({"type", "doc", "default", "enum", "attrs", "fields", "items"})

_SCALAR_KINDS = {
    "string": Kind.STRING,
    "int": Kind.INT,
    "float": Kind.FLOAT,
    "number": Kind.NUMBER,
    "bool": Kind.BOOL,
    "bytes": Kind.BYTES,
    "null": Kind.NULL,
    "_": Kind.TOP,
}


def default_sources() -> dict[str, Path]:
    """Return the library mapping containing only the bundled library."""
    return {STDLIB_PATH: STDLIB_DIR}


# =============================================================================
# Package Resolution
# =============================================================================


def _package_files(path: Path) -> list[Path]:
    if path.is_file():
        return [path]
    files = sorted(p for p in path.iterdir() if p.is_file() and p.suffix in YAML_SUFFIXES)
    if not files:
        raise CompileError(f"no YAML files in package directory {path}", str(path))
    return files


def resolve_package(sources: Mapping[str, str | Path], package: str) -> list[Path]:
    """Locate the files making up *package*.

    An existing filesystem path is used as is. Anything else is read as
    ``<library>/<sub/path>`` and looked up in *sources*.

    Raises:
        CompileError: If the package cannot be found.
    """
    candidate = Path(package)
    if candidate.exists():
        return _package_files(candidate)

    library, _, subpath = package.partition("/")
    root = sources.get(library)
    if root is None:
        raise CompileError(
            f"cannot find package {package}",
            package,
            hint=f"Known libraries: {', '.join(sorted(sources)) or 'none'}",
        )

    base = Path(root) / subpath if subpath else Path(root)
    for suffix in YAML_SUFFIXES:
        file = base.parent / f"{base.name}{suffix}"
        if file.is_file():
            return [file]
    if base.is_dir():
        return _package_files(base)
    raise CompileError(f"cannot find package {package} in {root}", package)


def _read_yaml(path: Path, package: str) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CompileError(f"cannot read {path}: {e}", package) from e
    except yaml.YAMLError as e:
        raise CompileError(f"invalid YAML in {path}: {e}", package) from e


# =============================================================================
# Compiler
# =============================================================================


class _Compiler:
    """Turns parsed YAML documents into a ValueNode tree."""

    def __init__(self, package: str) -> None:
        self._package = package
        self._definitions: dict[str, Any] = {}
        self._resolving: list[str] = []

    def _error(self, path: tuple[str, ...], message: str) -> CompileError:
        where = ".".join(path) or "<root>"
        return CompileError(f"{self._package}: {where}: {message}", self._package)

    def compile(self, documents: list[tuple[Path, Any]]) -> ValueNode:
        docs: list[str] = []
        members_spec: dict[str, Any] = {}

        for source, data in documents:
            if data is None:
                continue
            if not isinstance(data, dict):
                raise CompileError(
                    f"{source}: a package file must be a mapping, got {type(data).__name__}",
                    self._package,
                )
            unknown = set(data) - PACKAGE_KEYS
            if unknown:
                raise CompileError(
                    f"{source}: unknown package keys: {', '.join(sorted(map(str, unknown)))}",
                    self._package,
                )
            if data.get("doc") is not None:
                docs.append(str(data["doc"]))

            fields = data.get("fields") or {}
            if not isinstance(fields, dict):
                raise CompileError(f"{source}: 'fields' must be a mapping", self._package)
            for label, spec in fields.items():
                label = str(label)
                if label in members_spec:
                    raise CompileError(f"{source}: duplicate member {label}", self._package)
                members_spec[label] = spec

        self._definitions = {
            label: spec for label, spec in members_spec.items() if is_definition_label(label)
        }
        members = {label: self._node((label,), spec) for label, spec in members_spec.items()}
        return ValueNode(path=(), kind=Kind.STRUCT, type_name="struct", doc=docs, members=members)

    def _node(self, path: tuple[str, ...], spec: Any) -> ValueNode:
        if spec is None:
            spec = {}
        elif isinstance(spec, str):
            spec = {"type": spec}
        elif not isinstance(spec, dict):
            raise self._error(path, f"expected a mapping or a type name, got {type(spec).__name__}")

        unknown = set(spec) - NODE_KEYS
        if unknown:
            raise self._error(path, f"unknown keys: {', '.join(sorted(map(str, unknown)))}")

        type_name = str(spec.get("type") or "")
        doc = self._doc(path, spec.get("doc"))
        attrs = self._attrs(path, spec.get("attrs"))
        default = spec.get("default", MISSING)
        enum = spec.get("enum")
        if enum is not None and not isinstance(enum, list):
            raise self._error(path, "'enum' must be a list")

        if "fields" in spec:
            fields = spec["fields"] or {}
            if not isinstance(fields, dict):
                raise self._error(path, "'fields' must be a mapping")
            members = {
                str(label): self._node(path + (str(label),), child)
                for label, child in fields.items()
            }
            return ValueNode(
                path=path,
                kind=Kind.STRUCT,
                type_name=type_name or "struct",
                doc=doc,
                attrs=attrs,
                default=default,
                members=members,
            )

        if is_definition_label(type_name):
            target = self._resolve(path, type_name)
            return ValueNode(
                path=path,
                kind=target.kind,
                type_name=type_name,
                doc=doc or target.doc,
                attrs=attrs,
                default=target.default if default is MISSING else default,
                enum=target.enum if enum is None else enum,
                reference=type_name,
                members=target.members,
            )

        if "items" in spec or type_name.startswith("["):
            if not type_name:
                item = self._node(path + ("[]",), spec["items"])
                type_name = f"[...{item.type_name}]"
            return ValueNode(
                path=path, kind=Kind.LIST, type_name=type_name, doc=doc,
                attrs=attrs, default=default, enum=enum,
            )

        kind = _SCALAR_KINDS.get(type_name)
        if kind is None and not type_name:
            sample = enum[0] if enum else default
            kind, type_name = _infer_kind(sample)
        elif kind is None:
            # Types from other packages are kept verbatim.
            kind = Kind.TOP
        return ValueNode(
            path=path, kind=kind, type_name=type_name, doc=doc,
            attrs=attrs, default=default, enum=enum,
        )

    def _resolve(self, path: tuple[str, ...], name: str) -> ValueNode:
        spec = self._definitions.get(name)
        if spec is None:
            raise self._error(path, f"reference to undefined definition {name}")
        if name in self._resolving:
            chain = " -> ".join(self._resolving + [name])
            raise self._error(path, f"reference cycle: {chain}")
        self._resolving.append(name)
        try:
            return self._node(path, spec)
        finally:
            self._resolving.pop()

    def _doc(self, path: tuple[str, ...], doc: Any) -> list[str]:
        if doc is None:
            return []
        if isinstance(doc, list):
            return [str(d) for d in doc]
        if isinstance(doc, str):
            return [doc]
        raise self._error(path, "'doc' must be a string or a list of strings")

    def _attrs(self, path: tuple[str, ...], attrs: Any) -> frozenset[str]:
        if attrs is None:
            return frozenset()
        if isinstance(attrs, str):
            return frozenset({attrs})
        if isinstance(attrs, list):
            return frozenset(str(a) for a in attrs)
        raise self._error(path, "'attrs' must be a list of names")


def _infer_kind(sample: Any) -> tuple[Kind, str]:
    if sample is MISSING or sample is None:
        return Kind.TOP, "_"
    # bool before int: bool is an int subclass
    for py_type, kind in ((bool, Kind.BOOL), (int, Kind.INT), (float, Kind.FLOAT), (str, Kind.STRING)):
        if isinstance(sample, py_type):
            return kind, kind.value
    if isinstance(sample, list):
        return Kind.LIST, "[..._]"
    if isinstance(sample, dict):
        return Kind.STRUCT, "struct"
    return Kind.TOP, "_"


# =============================================================================
# Public API
# =============================================================================


def build(sources: Mapping[str, str | Path], package: str) -> ValueNode:
    """Compile *package* into a value tree.

    Args:
        sources: Library name to source directory mapping.
        package: Filesystem path, or ``<library>/<sub/path>``.

    Returns:
        The root value of the package.

    Raises:
        CompileError: If the package cannot be found or compiled.
    """
    files = resolve_package(sources, package)
    logger.debug(
        "Compiling package",
        extra={"fields": {"package": package, "files": [str(f) for f in files]}},
    )
    documents = [(f, _read_yaml(f, package)) for f in files]
    return _Compiler(package).compile(documents)


def load_package(
    package: str,
    libraries: Mapping[str, str | Path] | None = None,
) -> ValueNode:
    """Compile *package* against the bundled library plus *libraries*."""
    sources: dict[str, str | Path] = dict(default_sources())
    if libraries:
        sources.update(libraries)
    return build(sources, package)
