"""Study notes models."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from core.models.common import CamelModel

NotesStyle = Literal["summary", "detailed", "outline"]


class StudyNotesCreate(CamelModel):
    document_id: str
    title: str
    content: str  # HTML
    style: NotesStyle
    chapter: Optional[str] = None
    include_key_terms: bool = False
    include_examples: bool = False


class StudyNotes(StudyNotesCreate):
    """Persisted study notes."""
    id: str
    created_at: datetime


class GenerateNotesRequest(CamelModel):
    """Parameters for a notes generation run."""
    document_id: str = Field(..., min_length=1)
    style: NotesStyle
    chapter: Optional[str] = None
    include_key_terms: bool = False
    include_examples: bool = False


class NotesPrepareResponse(CamelModel):
    text: str
    request: GenerateNotesRequest
    document_name: str
    prompt: str
    model: str


class NotesCommitRequest(CamelModel):
    """Generated notes to persist."""
    document_id: str = Field(..., min_length=1)
    content: str
    title: Optional[str] = None
    style: NotesStyle = "summary"
    chapter: Optional[str] = None
    include_key_terms: bool = False
    include_examples: bool = False
