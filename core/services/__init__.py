"""Core services package, organized by domain.

Main Services:
- DocumentService, QuestionService, ChatService, NotesService: request flows
- PDFService: text extraction from uploaded PDFs
- PromptBuilder: prompts handed to the client-side AI provider

Usage:
    from core.services import DocumentService, PDFService, UploadStorage
    from core.services.storage import create_memory_storage

    storage = create_memory_storage()
    documents = DocumentService(storage, PDFService(), UploadStorage("uploads"))
    document = await documents.upload("notes.pdf", "application/pdf", pdf_bytes)
"""
# Document services
from core.services.documents import PDFService, UploadStorage

# Prompt rendering
from core.services.prompts import PromptBuilder

# Request flows
from core.services.study import ChatService, DocumentService, NotesService, QuestionService

__all__ = [
    "DocumentService",
    "QuestionService",
    "ChatService",
    "NotesService",
    "PDFService",
    "UploadStorage",
    "PromptBuilder",
]
