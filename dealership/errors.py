"""
Error hierarchy for the dealership API.

Every error carries a machine-readable code, a user-facing message and the
HTTP status the request boundary answers with. Handlers in
``dealership.error_handlers`` turn them into the JSON envelope
``{"error": {"code": ..., "message": ...}}``.
"""
from typing import Any, Optional

FEATURED_LIMIT_MESSAGE = "At most 3 cars may be featured at once"


class DealershipError(Exception):
    """Base class for all errors surfaced to API callers."""

    code = "DEALERSHIP_ERROR"
    http_status = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        error = {"code": self.code, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class ValidationFailed(DealershipError):
    """Malformed or missing input."""

    code = "VALIDATION_ERROR"
    http_status = 400


class FeaturedLimitExceeded(DealershipError):
    """Writing the car would put more than three cars on the landing page."""

    code = "FEATURED_LIMIT_EXCEEDED"
    http_status = 400

    def __init__(self, message: str = FEATURED_LIMIT_MESSAGE):
        super().__init__(message)


class NotFound(DealershipError):
    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class StoreError(DealershipError):
    """The database failed unexpectedly."""

    code = "DATABASE_ERROR"
    http_status = 500


class ImageUploadError(DealershipError):
    """The image host rejected the upload or could not be reached."""

    code = "IMAGE_UPLOAD_ERROR"
    http_status = 502
