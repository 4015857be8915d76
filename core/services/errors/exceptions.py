"""Domain exceptions raised by the study services."""
from typing import Optional


class StudyError(Exception):
    """Base error carrying the HTTP status it maps to."""
    status_code = 500
    error = "Internal error"

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidRequestError(StudyError):
    """Malformed or missing input."""
    status_code = 400
    error = "Invalid request"


class UploadTooLargeError(StudyError):
    status_code = 413
    error = "Upload too large"


class NotFoundError(StudyError):
    """Unknown document or notes id."""
    status_code = 404
    error = "Not found"


class TextNotAvailableError(StudyError):
    """Document exists but has no extracted text yet."""
    status_code = 400
    error = "Text not available"


class StorageError(StudyError):
    """Upload file could not be written or removed."""
    status_code = 500
    error = "Storage error"
