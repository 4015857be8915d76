"""Document lookups shared by the study flows."""
from core.models.document import Document
from core.services.errors import NotFoundError, TextNotAvailableError
from core.services.storage import StudyStorage


def require_document(storage: StudyStorage, document_id: str) -> Document:
    document = storage.documents.get(document_id)
    if document is None:
        raise NotFoundError("PDF not found", detail=f"No document with id {document_id}")
    return document


def require_text(storage: StudyStorage, document_id: str) -> Document:
    """Return the document, failing if its text has not been extracted yet."""
    document = require_document(storage, document_id)
    if not document.has_text:
        raise TextNotAvailableError("PDF text content not available")
    return document
