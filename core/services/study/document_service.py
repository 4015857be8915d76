"""Document upload, listing and deletion."""
from pathlib import Path
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from core.models.document import Document, DocumentCreate
from core.services.documents import PDFService, UploadStorage
from core.services.errors import (
    ErrorHandler,
    InvalidRequestError,
    NotFoundError,
    StorageError,
    UploadTooLargeError,
)
from core.services.storage import StudyStorage
from core.services.study.lookups import require_document
from core.utils.logger import logger


class DocumentService:
    """Coordinates the document store, the upload directory and text extraction."""

    def __init__(
        self,
        storage: StudyStorage,
        pdf_service: PDFService,
        upload_storage: UploadStorage,
        max_upload_size: int = 10 * 1024 * 1024,
        allowed_content_type: str = "application/pdf"
    ):
        self.storage = storage
        self.pdf_service = pdf_service
        self.upload_storage = upload_storage
        self.max_upload_size = max_upload_size
        self.allowed_content_type = allowed_content_type

    def list_documents(self) -> List[Document]:
        return self.storage.documents.list_all()

    def get_document(self, document_id: str) -> Document:
        return require_document(self.storage, document_id)

    def get_file_path(self, document_id: str) -> Path:
        """Path of the stored upload for a document."""
        document = require_document(self.storage, document_id)
        path = Path(document.file_path)
        if not path.exists():
            raise NotFoundError("PDF file not found", detail=f"Missing file for document {document_id}")
        return path

    async def upload(self, original_name: Optional[str], content_type: Optional[str], data: bytes) -> Document:
        """
        Store an uploaded PDF and extract its text.

        The record is created before the file is written; a failed write
        leaves it behind without text. Extraction never fails the upload.
        Store updates run on the event loop; only the disk write and the
        extraction run in the threadpool.

        Args:
            original_name: Client-side filename
            content_type: Declared mime type of the part
            data: File bytes (at most max_upload_size + 1 are needed to detect oversize)

        Returns:
            The stored document with its text populated
        """
        if not original_name:
            raise InvalidRequestError("No PDF file uploaded")
        if content_type != self.allowed_content_type:
            raise InvalidRequestError(
                "Only PDF files are allowed",
                detail=f"Unsupported content type '{content_type}'"
            )
        if len(data) > self.max_upload_size:
            raise UploadTooLargeError(
                "File too large",
                detail=f"Maximum upload size is {self.max_upload_size} bytes"
            )

        stored_name = self.upload_storage.new_filename()
        document = self.storage.documents.create(DocumentCreate(
            filename=stored_name,
            original_name=original_name,
            file_path=str(self.upload_storage.path_for(stored_name)),
            file_size=len(data)
        ))

        try:
            await run_in_threadpool(self.upload_storage.write, stored_name, data)
        except OSError as e:
            logger.error(f"Failed to write upload for document {document.id}: {str(e)}")
            raise StorageError("Failed to upload PDF", detail=str(e)) from e

        text = await run_in_threadpool(self._extract_text, data, original_name)
        self.storage.documents.set_extracted_text(document.id, text)
        logger.info(f"Uploaded '{original_name}' as document {document.id} ({len(data)} bytes)")
        return require_document(self.storage, document.id)

    def delete_document(self, document_id: str) -> None:
        """Delete the backing file, then the document and its artifacts."""
        document = require_document(self.storage, document_id)
        try:
            self.upload_storage.remove(document.file_path)
        except OSError as e:
            raise StorageError("Failed to delete PDF", detail=str(e)) from e
        self.storage.documents.delete(document_id)
        logger.info(f"Deleted document {document_id}")

    def _extract_text(self, data: bytes, filename: str) -> str:
        try:
            text = self.pdf_service.extract_text(data)
        except Exception as e:
            return ErrorHandler.handle_extraction_error(e, filename)
        if not text or not text.strip():
            return ErrorHandler.handle_empty_extraction(filename)
        return text
