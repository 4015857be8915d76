"""Question generation endpoints (prepare/commit around the client-side AI call)."""
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_question_service
from core.models.question import (
    GenerateQuestionsRequest,
    Question,
    QuestionsCommitRequest,
    QuestionsPrepareResponse,
)
from core.services.study import QuestionService

router = APIRouter()


@router.post("/prepare", response_model=QuestionsPrepareResponse)
async def prepare_questions(
    request: GenerateQuestionsRequest,
    service: QuestionService = Depends(get_question_service)
):
    """
    Return document text and prompt for question generation.

    Existing questions for the document are cleared.

    Args:
        request: Document id, count, difficulty and question types

    Returns:
        Document text, the echoed request and the rendered prompt
    """
    return service.prepare(request)


@router.post("/commit", response_model=List[Question])
async def commit_questions(
    request: QuestionsCommitRequest,
    service: QuestionService = Depends(get_question_service)
):
    """
    Persist questions produced by the client-side AI call.

    Args:
        request: Document id plus either a questions list or the raw AI reply

    Returns:
        The stored questions
    """
    return service.commit(request)


@router.get("/{document_id}", response_model=List[Question])
async def list_questions(document_id: str, service: QuestionService = Depends(get_question_service)):
    """
    List questions for a document.

    Args:
        document_id: Document identifier

    Returns:
        Questions, newest first
    """
    return service.list_questions(document_id)
