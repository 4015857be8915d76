"""Question data models."""
from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from core.models.common import CamelModel

QuestionType = Literal["mcq", "short", "long", "true_false", "fill_blank"]
Difficulty = Literal["easy", "medium", "hard"]


class QuestionPayload(CamelModel):
    """A question as produced by the external generator."""
    type: QuestionType
    difficulty: Difficulty
    question: str = Field(..., min_length=1)
    options: Optional[List[str]] = None  # MCQ only
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _stringify_answer(cls, value: Any) -> Any:
        # Generators answer true/false items with JSON booleans
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    @model_validator(mode="after")
    def _mcq_needs_options(self) -> "QuestionPayload":
        if self.type == "mcq" and (not self.options or len(self.options) < 2):
            raise ValueError("MCQ requires at least two options.")
        return self


class QuestionCreate(QuestionPayload):
    """Question payload bound to a document."""
    document_id: str


class Question(QuestionCreate):
    """Persisted question."""
    id: str
    created_at: datetime


class GenerateQuestionsRequest(CamelModel):
    """Parameters for a question generation run."""
    document_id: str = Field(..., min_length=1)
    count: int = Field(..., ge=1, le=50)
    difficulty: Difficulty
    types: List[QuestionType] = Field(..., min_length=1)


class QuestionsPrepareResponse(CamelModel):
    """Material handed to the client for question synthesis."""
    text: str
    request: GenerateQuestionsRequest
    prompt: str
    model: str


class QuestionsCommitRequest(CamelModel):
    """Generated questions to persist, either parsed or as the raw AI reply."""
    document_id: str = Field(..., min_length=1)
    questions: Optional[List[QuestionPayload]] = None
    raw_response: Optional[str] = None

    @model_validator(mode="after")
    def _needs_questions(self) -> "QuestionsCommitRequest":
        if self.questions is None and self.raw_response is None:
            raise ValueError("Either questions or rawResponse is required.")
        return self
