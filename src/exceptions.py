"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses raised by the site build: unreadable inputs,
malformed documents, metadata schema violations, template syntax errors and
rendering failures. Every build error is fatal; the hierarchy exists so the
entry point can report any of them uniformly and so tests can assert on the
exact failure mode.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'SCHEMA_VIOLATION'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging, typically the offending
        ``path``.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'path': 'a.md'})
    >>> e.code
    'CODE'
    >>> e.path
    'a.md'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    @property
    def path(self) -> str | None:
        """Return the offending file path recorded in the context, if any."""
        value = self.context.get("path")
        return None if value is None else str(value)

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class IoFailureError(AppError):
    """Raised when a source file, template or directory cannot be read or written."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("IO_FAILURE", message, context=context, transient=False)


class MalformedDocumentError(AppError):
    """Raised when a document does not split into preamble, metadata and body."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "MALFORMED_DOCUMENT", message, context=context, transient=False
        )


class SchemaViolationError(AppError):
    """Raised for front matter that fails the closed record schema."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "SCHEMA_VIOLATION", message, context=context, transient=False
        )


class RenderFailureError(AppError):
    """Raised when Markdown conversion or template rendering fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("RENDER_FAILURE", message, context=context, transient=False)


class TemplateError(AppError):
    """Raised when a page template or fragment is syntactically invalid."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("TEMPLATE_ERROR", message, context=context, transient=False)
