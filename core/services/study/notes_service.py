"""Two-phase study notes generation. Notes accumulate; nothing is cleared on prepare."""
from typing import List

from core.models.notes import (
    GenerateNotesRequest,
    NotesCommitRequest,
    NotesPrepareResponse,
    StudyNotes,
    StudyNotesCreate,
)
from core.services.errors import InvalidRequestError, NotFoundError
from core.services.prompts import PromptBuilder
from core.services.storage import StudyStorage
from core.services.study.lookups import require_document, require_text
from core.utils.logger import logger


class NotesService:
    def __init__(self, storage: StudyStorage, prompt_builder: PromptBuilder, model: str):
        self.storage = storage
        self.prompt_builder = prompt_builder
        self.model = model

    def prepare(self, request: GenerateNotesRequest) -> NotesPrepareResponse:
        document = require_text(self.storage, request.document_id)
        logger.info(f"Prepared {request.style} notes generation for document {document.id}")
        return NotesPrepareResponse(
            text=document.text_content,
            request=request,
            document_name=document.original_name,
            prompt=self.prompt_builder.build_notes_prompt(request, document.text_content),
            model=self.model
        )

    def commit(self, request: NotesCommitRequest) -> StudyNotes:
        if not request.content or not request.content.strip():
            raise InvalidRequestError("Missing required fields", detail="content is required")
        require_document(self.storage, request.document_id)
        notes = self.storage.notes.create(StudyNotesCreate(
            document_id=request.document_id,
            title=request.title or f"Study Notes - {request.style}",
            content=request.content,
            style=request.style,
            chapter=request.chapter,
            include_key_terms=request.include_key_terms,
            include_examples=request.include_examples
        ))
        logger.info(f"Saved notes {notes.id} for document {request.document_id}")
        return notes

    def list_notes(self, document_id: str) -> List[StudyNotes]:
        return self.storage.notes.list_by_document(document_id)

    def get_notes(self, notes_id: str) -> StudyNotes:
        notes = self.storage.notes.get(notes_id)
        if notes is None:
            raise NotFoundError("Notes not found", detail=f"No notes with id {notes_id}")
        return notes

    def delete_notes(self, notes_id: str) -> None:
        self.get_notes(notes_id)
        self.storage.notes.delete(notes_id)
        logger.info(f"Deleted notes {notes_id}")
