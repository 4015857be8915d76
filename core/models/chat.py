"""Chat message models and conversation scopes."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Literal, Optional, Union

from core.models.common import CamelModel

ChatRole = Literal["user", "assistant"]


@dataclass(frozen=True)
class GeneralScope:
    """Conversation not tied to any document."""

    @property
    def document_id(self) -> None:
        return None


@dataclass(frozen=True)
class DocumentScope:
    """Conversation about a single document."""
    document_id: str


ChatScope = Union[GeneralScope, DocumentScope]


def scope_for(document_id: Optional[str]) -> ChatScope:
    """Map an optional document id (empty counts as absent) to its scope."""
    if document_id:
        return DocumentScope(document_id)
    return GeneralScope()


class ChatMessageCreate(CamelModel):
    role: ChatRole
    content: str
    document_id: Optional[str] = None


class ChatMessage(ChatMessageCreate):
    """Persisted chat message."""
    id: str
    created_at: datetime

    @property
    def scope(self) -> ChatScope:
        return scope_for(self.document_id)


class ChatMessageRequest(CamelModel):
    """Message posted by the student."""
    role: ChatRole = "user"
    content: str
    document_id: Optional[str] = None


class ChatResponseRequest(CamelModel):
    """Tutor reply produced by the external provider."""
    content: str
    document_id: Optional[str] = None


class ChatHistoryItem(CamelModel):
    role: ChatRole
    content: str


class ChatExchangeResponse(CamelModel):
    """Stored user message plus everything needed to synthesize a reply."""
    message: ChatMessage
    context: List[ChatHistoryItem]
    document_text: Optional[str] = None
    prompt: str
    model: str
