"""Document handling services.

Services:
- PDFService: Extract text from PDF documents
- UploadStorage: Store uploaded files on disk
"""
from core.services.documents.pdf_service import PDFService
from core.services.documents.upload_storage import UploadStorage

__all__ = ["PDFService", "UploadStorage"]
