"""Two-phase question generation: prepare material, then commit results.

The previous questions are cleared during prepare. A commit that never
arrives leaves the document with no questions until the client retries.
"""
from typing import List

from pydantic import ValidationError

from core.models.question import (
    GenerateQuestionsRequest,
    Question,
    QuestionCreate,
    QuestionPayload,
    QuestionsCommitRequest,
    QuestionsPrepareResponse,
)
from core.services.errors import InvalidRequestError
from core.services.prompts import PromptBuilder, parse_questions_response
from core.services.storage import StudyStorage
from core.services.study.lookups import require_document, require_text
from core.utils.logger import logger


class QuestionService:
    def __init__(self, storage: StudyStorage, prompt_builder: PromptBuilder, model: str):
        self.storage = storage
        self.prompt_builder = prompt_builder
        self.model = model

    def prepare(self, request: GenerateQuestionsRequest) -> QuestionsPrepareResponse:
        """Validate the document, clear its questions and hand back the material."""
        document = require_text(self.storage, request.document_id)
        self.storage.questions.delete_by_document(document.id)
        logger.info(f"Prepared question generation for document {document.id} "
                    f"({request.count} {request.difficulty} question(s))")
        return QuestionsPrepareResponse(
            text=document.text_content,
            request=request,
            prompt=self.prompt_builder.build_questions_prompt(request, document.text_content),
            model=self.model
        )

    def commit(self, request: QuestionsCommitRequest) -> List[Question]:
        """Persist externally generated questions; the batch is validated up front."""
        require_document(self.storage, request.document_id)
        payloads = request.questions
        if payloads is None:
            try:
                payloads = [
                    QuestionPayload.model_validate(item)
                    for item in parse_questions_response(request.raw_response)
                ]
            except ValidationError as e:
                raise InvalidRequestError("Invalid question in AI response", detail=str(e)) from e

        saved = [
            self.storage.questions.create(
                QuestionCreate(document_id=request.document_id, **payload.model_dump())
            )
            for payload in payloads
        ]
        logger.info(f"Saved {len(saved)} question(s) for document {request.document_id}")
        return saved

    def list_questions(self, document_id: str) -> List[Question]:
        return self.storage.questions.list_by_document(document_id)
