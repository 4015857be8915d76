"""Error handling utilities."""
from typing import Optional

from core.models.common import ErrorResponse
from core.services.errors.exceptions import StudyError
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Centralized error handling with fallback text."""

    @staticmethod
    def handle_extraction_error(error: Exception, filename: Optional[str] = None) -> str:
        """Log a failed extraction and return the placeholder text."""
        logger.error(f"PDF text extraction error for '{filename or 'unknown'}': {str(error)}")
        return FallbackResponses.get_response("extraction_failed")

    @staticmethod
    def handle_empty_extraction(filename: Optional[str] = None) -> str:
        """Handle a PDF that parsed but yielded no text."""
        logger.warning(f"No text extracted from '{filename or 'unknown'}'")
        return FallbackResponses.get_response("no_text_extracted")

    @staticmethod
    def to_error_response(error: StudyError) -> ErrorResponse:
        """Convert a domain error into the API error body."""
        if error.status_code >= 500:
            logger.error(f"{error.error}: {error.message}")
        else:
            logger.warning(f"{error.error}: {error.message}")
        return ErrorResponse(error=error.message, detail=error.detail)
