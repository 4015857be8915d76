"""Tutoring chat endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_chat_service
from core.models.chat import ChatExchangeResponse, ChatMessage, ChatMessageRequest, ChatResponseRequest
from core.models.common import APIResponse
from core.services.study import ChatService

router = APIRouter()


@router.get("/messages", response_model=List[ChatMessage])
async def list_messages(
    document_id: Optional[str] = Query(None, alias="documentId"),
    service: ChatService = Depends(get_chat_service)
):
    """
    List the messages of one chat scope.

    Args:
        document_id: Document identifier; omitted means the general chat

    Returns:
        Messages in conversation order, oldest first
    """
    return service.list_messages(document_id)


@router.post("/message", response_model=ChatExchangeResponse)
async def post_message(request: ChatMessageRequest, service: ChatService = Depends(get_chat_service)):
    """
    Store a student message and return the context for the tutor reply.

    Args:
        request: Message content and optional document id

    Returns:
        The stored message, recent context, document text and tutor prompt
    """
    return service.post_user_message(request)


@router.post("/response", response_model=ChatMessage)
async def post_response(request: ChatResponseRequest, service: ChatService = Depends(get_chat_service)):
    """
    Save the tutor reply produced by the client-side AI call.

    Args:
        request: Reply content and optional document id

    Returns:
        The stored assistant message
    """
    return service.post_assistant_message(request)


@router.delete("", response_model=APIResponse)
async def clear_chat(
    document_id: Optional[str] = Query(None, alias="documentId"),
    service: ChatService = Depends(get_chat_service)
):
    """
    Clear one chat scope.

    Args:
        document_id: Document identifier; omitted means the general chat

    Returns:
        Success message
    """
    service.clear(document_id)
    return APIResponse(success=True, message="Chat cleared successfully")
