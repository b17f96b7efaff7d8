"""Error types and CLI error handling for schemadoc.

Every failure the tool can report is a :class:`SchemaDocError` carrying an
:class:`ErrorCode`. The CLI turns these into a logged message and a process
exit code through :func:`error_boundary`.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from typing import Any, Callable, TypeVar

import typer

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Process exit codes."""

    GENERAL_ERROR = 1
    CONFIG_INVALID = 3
    COMPILE_FAILED = 4
    FIELD_DISCOVERY_FAILED = 5
    SERIALIZATION_FAILED = 6
    WRITE_FAILED = 7


# =============================================================================
# Exception Classes
# =============================================================================


class SchemaDocError(Exception):
    """Base exception for schemadoc errors.

    Attributes:
        message: Error message
        code: Error code
        details: Additional error details
        hint: Helpful hint for resolution
    """

    default_code = ErrorCode.GENERAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class ConfigurationError(SchemaDocError):
    """Invalid option or configuration value."""

    default_code = ErrorCode.CONFIG_INVALID


class CompileError(SchemaDocError):
    """A package cannot be located or compiled into a value tree."""

    default_code = ErrorCode.COMPILE_FAILED

    def __init__(
        self,
        message: str,
        package: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"package": package} if package else None,
            hint=hint,
        )
        self.package = package


class FieldDiscoveryError(SchemaDocError):
    """The members of a package root cannot be listed."""

    default_code = ErrorCode.FIELD_DISCOVERY_FAILED


class RenderError(SchemaDocError):
    """Base class for failures while producing a report."""

    default_code = ErrorCode.GENERAL_ERROR


class SerializationError(RenderError):
    """The assembled JSON document cannot be serialized."""

    default_code = ErrorCode.SERIALIZATION_FAILED


class WriteError(RenderError):
    """Writing a report to a file failed."""

    default_code = ErrorCode.WRITE_FAILED


# =============================================================================
# Error Boundary
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Turn errors raised by a CLI command into a logged fatal exit.

    Args:
        func: Command function to wrap

    Returns:
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except SchemaDocError as e:
            logger.error(e.message, extra={"fields": e.details})
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            if e.hint:
                typer.echo(typer.style(f"Hint: {e.hint}", fg="yellow"), err=True)
            raise typer.Exit(e.code.value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore
