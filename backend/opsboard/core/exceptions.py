"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class OpsboardError(Exception):
    """Base exception for opsboard."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(OpsboardError):
    """Resource not found."""

    pass


class ValidationError(OpsboardError):
    """Validation error."""

    pass


class InfrastructureError(OpsboardError):
    """Infrastructure-related error (DB, external services, etc.)."""

    pass
