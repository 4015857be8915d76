"""FastAPI dependency providers for storage and services."""
from functools import lru_cache

from fastapi import Depends

from app.config import settings
from core.services.documents import PDFService, UploadStorage
from core.services.prompts import PromptBuilder
from core.services.storage import StudyStorage, create_memory_storage
from core.services.study import ChatService, DocumentService, NotesService, QuestionService

# Process-wide store; contents are lost on restart
_storage = create_memory_storage()


def get_storage() -> StudyStorage:
    return _storage


@lru_cache
def get_pdf_service() -> PDFService:
    return PDFService()


def get_upload_storage() -> UploadStorage:
    return UploadStorage(settings.UPLOAD_DIR)


@lru_cache
def get_prompt_builder() -> PromptBuilder:
    return PromptBuilder(chat_context_chars=settings.CHAT_CONTEXT_CHARS)


def get_document_service(
    storage: StudyStorage = Depends(get_storage),
    pdf_service: PDFService = Depends(get_pdf_service),
    upload_storage: UploadStorage = Depends(get_upload_storage)
) -> DocumentService:
    return DocumentService(
        storage,
        pdf_service,
        upload_storage,
        max_upload_size=settings.MAX_UPLOAD_SIZE,
        allowed_content_type=settings.ALLOWED_CONTENT_TYPE
    )


def get_question_service(
    storage: StudyStorage = Depends(get_storage),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder)
) -> QuestionService:
    return QuestionService(storage, prompt_builder, model=settings.AI_MODEL)


def get_chat_service(
    storage: StudyStorage = Depends(get_storage),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder)
) -> ChatService:
    return ChatService(
        storage,
        prompt_builder,
        model=settings.AI_MODEL,
        history_limit=settings.CHAT_HISTORY_LIMIT
    )


def get_notes_service(
    storage: StudyStorage = Depends(get_storage),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder)
) -> NotesService:
    return NotesService(storage, prompt_builder, model=settings.AI_MODEL)
