"""API errors rendered into the ``{"error": {...}}`` envelope."""

from typing import Any

from fastapi import status


class PageGateError(Exception):
    """Base exception for the pagegate API.

    Subclasses set ``code`` and ``status_code``; instances may override both.
    """

    code = "error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code or self.code
        self.status_code = status_code or self.status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(PageGateError):
    """A route that is not one of the site's candidate pages."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, identifier: str | None = None):
        if identifier:
            super().__init__(f"{resource} '{identifier}' not found")
        else:
            super().__init__(f"{resource} not found")


class ValidationError(PageGateError):
    code = "validation_error"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, details={"field": field} if field else None)


class ConfigurationError(PageGateError):
    """The business configuration could not be loaded."""

    code = "configuration_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details=details)
