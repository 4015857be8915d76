"""Repository interfaces for documents and their artifacts.

The study services only depend on these protocols, so a persistent backend
can replace the in-memory one without touching the request flows.
"""
from dataclasses import dataclass
from typing import List, Optional, Protocol

from core.models.chat import ChatMessage, ChatMessageCreate, ChatScope
from core.models.document import Document, DocumentCreate
from core.models.notes import StudyNotes, StudyNotesCreate
from core.models.question import Question, QuestionCreate


class QuestionRepository(Protocol):
    def create(self, data: QuestionCreate) -> Question: ...

    def list_by_document(self, document_id: str) -> List[Question]: ...

    def delete_by_document(self, document_id: str) -> None: ...


class ChatMessageRepository(Protocol):
    def create(self, data: ChatMessageCreate) -> ChatMessage: ...

    def list_by_scope(self, scope: ChatScope) -> List[ChatMessage]: ...

    def delete_by_scope(self, scope: ChatScope) -> None: ...


class StudyNotesRepository(Protocol):
    def create(self, data: StudyNotesCreate) -> StudyNotes: ...

    def get(self, notes_id: str) -> Optional[StudyNotes]: ...

    def list_by_document(self, document_id: str) -> List[StudyNotes]: ...

    def delete(self, notes_id: str) -> None: ...

    def delete_by_document(self, document_id: str) -> None: ...


class DocumentRepository(Protocol):
    def create(self, data: DocumentCreate) -> Document: ...

    def get(self, document_id: str) -> Optional[Document]: ...

    def list_all(self) -> List[Document]: ...

    def set_extracted_text(self, document_id: str, text: str) -> None: ...

    def delete(self, document_id: str) -> None: ...


@dataclass
class StudyStorage:
    """The four repositories a request flow works against."""
    documents: DocumentRepository
    questions: QuestionRepository
    chat_messages: ChatMessageRepository
    notes: StudyNotesRepository
