"""Configuration values for schemadoc.

Options are set on the command line; each global option can also be supplied
through the environment variable named here.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from schemadoc.errors import ConfigurationError

ENV_OUTPUT = "SCHEMADOC_OUTPUT"
ENV_LOG_LEVEL = "SCHEMADOC_LOG_LEVEL"
ENV_LOG_FORMAT = "SCHEMADOC_LOG_FORMAT"


class OutputFormat(Enum):
    """Report formats."""

    TEXT = "txt"
    MARKDOWN = "md"
    JSON = "json"

    @classmethod
    def parse(cls, value: "OutputFormat | str") -> "OutputFormat":
        """Convert an option value to an OutputFormat.

        Raises:
            ConfigurationError: If *value* is not a known format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                "output must be either `txt`, `md` or `json`",
                details={"output": value},
            ) from None


def parse_libraries(specs: list[str] | None) -> dict[str, Path]:
    """Parse ``NAME=DIR`` library options into a mapping.

    Raises:
        ConfigurationError: If an entry has no name or no directory.
    """
    libraries: dict[str, Path] = {}
    for spec in specs or []:
        name, sep, directory = spec.partition("=")
        name, directory = name.strip(), directory.strip()
        if not sep or not name or not directory:
            raise ConfigurationError(
                f"invalid library mapping: {spec!r}",
                hint="Use --library NAME=DIRECTORY",
            )
        libraries[name] = Path(directory)
    return libraries
