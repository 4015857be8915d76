"""Error types, handling and fallback text."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.exceptions import (
    InvalidRequestError,
    NotFoundError,
    StorageError,
    StudyError,
    TextNotAvailableError,
    UploadTooLargeError,
)
from core.services.errors.fallback_responses import FallbackResponses

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "StudyError",
    "InvalidRequestError",
    "UploadTooLargeError",
    "NotFoundError",
    "TextNotAvailableError",
    "StorageError",
]
