"""Study notes endpoints."""
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_notes_service
from core.models.common import APIResponse
from core.models.notes import GenerateNotesRequest, NotesCommitRequest, NotesPrepareResponse, StudyNotes
from core.services.study import NotesService

router = APIRouter()


@router.post("/prepare", response_model=NotesPrepareResponse)
async def prepare_notes(request: GenerateNotesRequest, service: NotesService = Depends(get_notes_service)):
    """
    Return document text and prompt for notes generation.

    Args:
        request: Document id, style and content options

    Returns:
        Document text, the echoed request, the document name and the rendered prompt
    """
    return service.prepare(request)


@router.post("/commit", response_model=StudyNotes)
async def commit_notes(request: NotesCommitRequest, service: NotesService = Depends(get_notes_service)):
    """
    Persist notes produced by the client-side AI call.

    Args:
        request: Document id, HTML content and notes options

    Returns:
        The stored notes
    """
    return service.commit(request)


@router.get("/detail/{notes_id}", response_model=StudyNotes)
async def get_notes(notes_id: str, service: NotesService = Depends(get_notes_service)):
    """
    Get one set of notes.

    Args:
        notes_id: Notes identifier

    Returns:
        The notes
    """
    return service.get_notes(notes_id)


@router.get("/{document_id}", response_model=List[StudyNotes])
async def list_notes(document_id: str, service: NotesService = Depends(get_notes_service)):
    """
    List notes for a document.

    Args:
        document_id: Document identifier

    Returns:
        Notes, newest first
    """
    return service.list_notes(document_id)


@router.delete("/{notes_id}", response_model=APIResponse)
async def delete_notes(notes_id: str, service: NotesService = Depends(get_notes_service)):
    """
    Delete one set of notes.

    Args:
        notes_id: Notes identifier

    Returns:
        Success message
    """
    service.delete_notes(notes_id)
    return APIResponse(success=True, message="Notes deleted successfully")
