"""Custom exception classes for the mail builder.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class MailBuilderError(Exception):
    """Base exception for mail builder errors.

    All package-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(MailBuilderError):
    """Raised when component input or a tree description is invalid.

    Only raised while constructing components or parsing descriptions,
    never while rendering.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, status_code=400, detail=detail)
        self.field = field


class NotFoundError(MailBuilderError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} not found: {identifier}",
            status_code=404,
        )
        self.resource = resource
        self.identifier = identifier


class TemplateNotFoundError(NotFoundError):
    """Raised when a template source has no fragment for an identifier.

    Propagates unchanged through every enclosing container, aborting
    the whole render.
    """

    def __init__(self, template_id: str):
        super().__init__("Template", template_id)
        self.template_id = template_id


TemplateNotFound = TemplateNotFoundError


class ConfigurationError(MailBuilderError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name
