"""Request flows behind the HTTP routes.

Services:
- DocumentService: upload, list, download and delete documents
- QuestionService: prepare/commit question generation
- ChatService: tutoring chat in general and per-document scopes
- NotesService: prepare/commit study notes
"""
from core.services.study.chat_service import ChatService
from core.services.study.document_service import DocumentService
from core.services.study.notes_service import NotesService
from core.services.study.question_service import QuestionService

__all__ = ["DocumentService", "QuestionService", "ChatService", "NotesService"]
