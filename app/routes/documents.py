"""Document upload and management endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.config import settings
from app.dependencies import get_document_service
from core.models.common import APIResponse
from core.models.document import Document
from core.services.errors import InvalidRequestError
from core.services.study import DocumentService

router = APIRouter()


@router.get("", response_model=List[Document])
async def list_documents(service: DocumentService = Depends(get_document_service)):
    """
    List uploaded documents.

    Returns:
        Documents, newest upload first
    """
    return service.list_documents()


@router.post("", response_model=Document)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    service: DocumentService = Depends(get_document_service)
):
    """
    Upload a PDF and extract its text.

    Args:
        file: PDF file to upload

    Returns:
        The stored document; its text is the extracted content or a placeholder
    """
    if file is None:
        raise InvalidRequestError("No PDF file uploaded")

    # One byte past the limit is enough to detect an oversized upload
    data = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    return await service.upload(file.filename, file.content_type, data)


@router.get("/{document_id}", response_model=Document)
async def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """
    Get document metadata.

    Args:
        document_id: Document identifier

    Returns:
        The document, including its extracted text
    """
    return service.get_document(document_id)


@router.get("/{document_id}/file")
async def download_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """
    Stream the stored PDF back under its original name.

    Args:
        document_id: Document identifier

    Returns:
        The PDF file
    """
    document = service.get_document(document_id)
    return FileResponse(
        service.get_file_path(document_id),
        media_type="application/pdf",
        filename=document.original_name
    )


@router.delete("/{document_id}", response_model=APIResponse)
async def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """
    Delete a document, its file, and every question, note and chat message tied to it.

    Args:
        document_id: Document identifier

    Returns:
        Success message
    """
    service.delete_document(document_id)
    return APIResponse(success=True, message="PDF deleted successfully")
