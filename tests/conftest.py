"""Shared fixtures for schemadoc tests."""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path

import pytest

from schemadoc.compiler import build
from schemadoc.tree import ValueNode

SAMPLE_PACKAGE = """\
doc: Sample package for tests

fields:
  "#Build":
    doc: Build an image
    fields:
      source:
        type: string
        attrs: [input]
        doc: Source directory
      tag:
        type: string
        default: latest
        attrs: [input]
        doc: Image tag
      image:
        attrs: [output, artifact]
        doc: Built image

  "#Noop":
    fields:
      note:
        type: string

  "#Version":
    type: string
    doc: Version string

  name:
    type: string

  settings:
    fields:
      level:
        type: int
        attrs: [input]
"""

TINY_PACKAGE = """\
fields:
  "#A":
    doc: Alpha
    fields:
      x:
        type: string
        attrs: [input]
        doc: X value
"""


@pytest.fixture(autouse=True)
def reset_schemadoc_logger():
    """Drop handlers installed by configure_logging() between tests."""
    yield
    logger = logging.getLogger("schemadoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_package(tmp_path: Path):
    """Write a YAML package to a temporary file and return its path."""

    def _write(content: str, name: str = "pkg.yaml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_path(write_package) -> Path:
    return write_package(SAMPLE_PACKAGE, "sample.yaml")


@pytest.fixture
def sample_root(sample_path: Path) -> ValueNode:
    """Compiled root of SAMPLE_PACKAGE."""
    return build({}, str(sample_path))


@pytest.fixture
def tiny_root(write_package) -> ValueNode:
    """Compiled root of TINY_PACKAGE."""
    return build({}, str(write_package(TINY_PACKAGE, "tiny.yaml")))


@pytest.fixture
def open_terminal():
    """Open pseudo-terminals of a given width.

    Returns a function taking a column count and returning
    ``(master_fd, stream)``, *stream* being a text stream on the terminal.
    """
    pty = pytest.importorskip("pty")
    fcntl = pytest.importorskip("fcntl")
    termios = pytest.importorskip("termios")
    opened = []

    def _open(columns: int):
        master, slave = pty.openpty()
        fcntl.ioctl(slave, termios.TIOCSWINSZ, struct.pack("HHHH", 24, columns, 0, 0))
        stream = open(slave, "w", encoding="utf-8")
        opened.append((master, stream))
        return master, stream

    yield _open
    for master, stream in opened:
        stream.close()
        os.close(master)


def _read_terminal(master: int) -> str:
    select = pytest.importorskip("select")
    chunks = []
    while select.select([master], [], [], 0.5)[0]:
        data = os.read(master, 4096)
        if not data:
            break
        chunks.append(data)
    return b"".join(chunks).decode("utf-8").replace("\r\n", "\n")


@pytest.fixture
def read_terminal():
    """Function reading everything written to a pseudo-terminal so far."""
    return _read_terminal
