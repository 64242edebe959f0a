"""Error taxonomy shared by services and the HTTP layer.

Every error carries the HTTP status it maps to; the application installs a
single handler that renders them as ``{"error": message}``.
"""

from fastapi import status


class PathwiseError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(PathwiseError):
    """Missing or malformed request field."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PathwiseError):
    status_code = status.HTTP_404_NOT_FOUND


class GenerationFailed(PathwiseError):
    """The generation provider call failed (network, non-2xx, provider error)."""


class MalformedGenerationOutput(PathwiseError):
    """The provider returned text that is not the expected structured data."""


class PersistenceError(PathwiseError):
    """The store was unavailable or a write failed."""
