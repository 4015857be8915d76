"""Tutoring chat persistence and context gathering."""
from typing import List, Optional

from core.models.chat import (
    ChatExchangeResponse,
    ChatHistoryItem,
    ChatMessage,
    ChatMessageCreate,
    ChatMessageRequest,
    ChatResponseRequest,
    DocumentScope,
    scope_for,
)
from core.services.errors import InvalidRequestError
from core.services.prompts import PromptBuilder
from core.services.storage import StudyStorage
from core.services.study.lookups import require_document
from core.utils.logger import logger


class ChatService:
    """
    Chat flows over the general and per-document scopes.

    A message without a document id belongs to the general conversation and is
    never listed or cleared together with a document's conversation.
    """

    def __init__(self, storage: StudyStorage, prompt_builder: PromptBuilder, model: str, history_limit: int = 10):
        self.storage = storage
        self.prompt_builder = prompt_builder
        self.model = model
        self.history_limit = history_limit

    def list_messages(self, document_id: Optional[str] = None) -> List[ChatMessage]:
        return self.storage.chat_messages.list_by_scope(scope_for(document_id))

    def post_user_message(self, request: ChatMessageRequest) -> ChatExchangeResponse:
        """
        Store a student message and gather context for the reply.

        Returns:
            The stored message, the last history_limit messages of the scope
            (oldest first, ending with this one), the document text if any,
            and the tutor prompt
        """
        if request.role != "user":
            raise InvalidRequestError("Only user messages can be posted here; use /chat/response")
        content = self._require_content(request.content)
        scope = scope_for(request.document_id)

        document_text = None
        if isinstance(scope, DocumentScope):
            document_text = require_document(self.storage, scope.document_id).text_content

        message = self.storage.chat_messages.create(
            ChatMessageCreate(role="user", content=content, document_id=scope.document_id)
        )
        messages = self.storage.chat_messages.list_by_scope(scope)
        recent = messages[-self.history_limit:] if self.history_limit > 0 else []
        context = [ChatHistoryItem(role=m.role, content=m.content) for m in recent]

        return ChatExchangeResponse(
            message=message,
            context=context,
            document_text=document_text,
            prompt=self.prompt_builder.build_chat_prompt(context, document_text),
            model=self.model
        )

    def post_assistant_message(self, request: ChatResponseRequest) -> ChatMessage:
        content = self._require_content(request.content, "Response content required")
        scope = scope_for(request.document_id)
        if isinstance(scope, DocumentScope):
            require_document(self.storage, scope.document_id)
        return self.storage.chat_messages.create(
            ChatMessageCreate(role="assistant", content=content, document_id=scope.document_id)
        )

    def clear(self, document_id: Optional[str] = None) -> None:
        scope = scope_for(document_id)
        self.storage.chat_messages.delete_by_scope(scope)
        logger.info(f"Cleared chat history for {scope}")

    @staticmethod
    def _require_content(content: str, message: str = "Message content required") -> str:
        if not content or not content.strip():
            raise InvalidRequestError(message)
        return content
