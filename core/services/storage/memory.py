"""In-memory repositories.

Rows live in insertion-ordered dicts and every lookup is a linear scan.
Nothing is locked and nothing survives a restart.
"""
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from core.models.chat import ChatMessage, ChatMessageCreate, ChatScope, DocumentScope
from core.models.document import Document, DocumentCreate
from core.models.notes import StudyNotes, StudyNotesCreate
from core.models.question import Question, QuestionCreate
from core.services.storage.repositories import (
    ChatMessageRepository,
    QuestionRepository,
    StudyNotesRepository,
    StudyStorage,
)
from core.utils.logger import logger

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicClock:
    """UTC clock that never runs backwards, even if the wall clock does."""

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or _utcnow
        self._last: Optional[datetime] = None

    def __call__(self) -> datetime:
        current = self._now()
        if self._last is not None and current < self._last:
            current = self._last
        self._last = current
        return current


def _new_id() -> str:
    return str(uuid.uuid4())


class _Table(Generic[T]):
    """Insertion-ordered row map shared by the repositories."""

    def __init__(self, clock: Optional[MonotonicClock] = None):
        self.clock = clock or MonotonicClock()
        self.rows: Dict[str, T] = {}

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        doomed = [row_id for row_id, row in self.rows.items() if predicate(row)]
        for row_id in doomed:
            del self.rows[row_id]
        return len(doomed)


def _oldest_first(rows: Iterable[T]) -> List[T]:
    # Timestamps never decrease with insertion, so a stable sort keeps ties in insertion order
    return sorted(rows, key=lambda row: row.created_at)  # type: ignore[attr-defined]


def _newest_first(rows: Iterable[T]) -> List[T]:
    return list(reversed(_oldest_first(rows)))


class InMemoryQuestionRepository:
    def __init__(self, clock: Optional[MonotonicClock] = None):
        self._table: _Table[Question] = _Table(clock)

    def create(self, data: QuestionCreate) -> Question:
        question = Question(id=_new_id(), created_at=self._table.clock(), **data.model_dump())
        self._table.rows[question.id] = question
        return question

    def list_by_document(self, document_id: str) -> List[Question]:
        return _newest_first(q for q in self._table.rows.values() if q.document_id == document_id)

    def delete_by_document(self, document_id: str) -> None:
        removed = self._table.delete_where(lambda q: q.document_id == document_id)
        if removed:
            logger.debug(f"Removed {removed} question(s) for document {document_id}")


class InMemoryChatMessageRepository:
    def __init__(self, clock: Optional[MonotonicClock] = None):
        self._table: _Table[ChatMessage] = _Table(clock)

    def create(self, data: ChatMessageCreate) -> ChatMessage:
        message = ChatMessage(id=_new_id(), created_at=self._table.clock(), **data.model_dump())
        self._table.rows[message.id] = message
        return message

    def list_by_scope(self, scope: ChatScope) -> List[ChatMessage]:
        return _oldest_first(m for m in self._table.rows.values() if m.scope == scope)

    def delete_by_scope(self, scope: ChatScope) -> None:
        removed = self._table.delete_where(lambda m: m.scope == scope)
        if removed:
            logger.debug(f"Removed {removed} chat message(s) in scope {scope}")


class InMemoryStudyNotesRepository:
    def __init__(self, clock: Optional[MonotonicClock] = None):
        self._table: _Table[StudyNotes] = _Table(clock)

    def create(self, data: StudyNotesCreate) -> StudyNotes:
        notes = StudyNotes(id=_new_id(), created_at=self._table.clock(), **data.model_dump())
        self._table.rows[notes.id] = notes
        return notes

    def get(self, notes_id: str) -> Optional[StudyNotes]:
        return self._table.rows.get(notes_id)

    def list_by_document(self, document_id: str) -> List[StudyNotes]:
        return _newest_first(n for n in self._table.rows.values() if n.document_id == document_id)

    def delete(self, notes_id: str) -> None:
        self._table.rows.pop(notes_id, None)

    def delete_by_document(self, document_id: str) -> None:
        removed = self._table.delete_where(lambda n: n.document_id == document_id)
        if removed:
            logger.debug(f"Removed {removed} note(s) for document {document_id}")


class InMemoryDocumentRepository:
    """Document table that cascades deletes into the artifact repositories."""

    def __init__(
        self,
        questions: QuestionRepository,
        chat_messages: ChatMessageRepository,
        notes: StudyNotesRepository,
        clock: Optional[MonotonicClock] = None
    ):
        self._documents: Dict[str, Document] = {}
        self._clock = clock or MonotonicClock()
        self._questions = questions
        self._chat_messages = chat_messages
        self._notes = notes

    def create(self, data: DocumentCreate) -> Document:
        document = Document(id=_new_id(), uploaded_at=self._clock(), **data.model_dump())
        self._documents[document.id] = document
        return document

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def list_all(self) -> List[Document]:
        documents = sorted(self._documents.values(), key=lambda d: d.uploaded_at)
        return list(reversed(documents))

    def set_extracted_text(self, document_id: str, text: str) -> None:
        document = self._documents.get(document_id)
        if document is None:
            return
        self._documents[document_id] = document.model_copy(update={"text_content": text})

    def delete(self, document_id: str) -> None:
        self._documents.pop(document_id, None)
        self._questions.delete_by_document(document_id)
        self._chat_messages.delete_by_scope(DocumentScope(document_id))
        self._notes.delete_by_document(document_id)


def create_memory_storage() -> StudyStorage:
    """Wire the four in-memory repositories together."""
    questions = InMemoryQuestionRepository()
    chat_messages = InMemoryChatMessageRepository()
    notes = InMemoryStudyNotesRepository()
    documents = InMemoryDocumentRepository(questions, chat_messages, notes)
    return StudyStorage(
        documents=documents,
        questions=questions,
        chat_messages=chat_messages,
        notes=notes
    )
