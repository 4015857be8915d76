"""PDF processing service."""
import io
from typing import Optional

import fitz  # PyMuPDF

from core.utils.azure_utils import get_document_intelligence_client
from core.utils.logger import logger
from core.utils.text_utils import clean_text


class PDFService:
    """Service for extracting text from PDF files."""

    def __init__(self, doc_intelligence_client: Optional[object] = None):
        """Use the given Azure client, or the configured one if any."""
        self.doc_intelligence_client = doc_intelligence_client or get_document_intelligence_client()

    def extract_text(self, pdf_bytes: bytes) -> str:
        """
        Extract text from a PDF.

        Uses Azure Document Intelligence when configured, PyMuPDF otherwise.

        Args:
            pdf_bytes: PDF file as bytes

        Returns:
            Extracted text, possibly empty for image-only documents

        Raises:
            Exception: Whatever the backend raises for unreadable input
        """
        if self.doc_intelligence_client:
            return self._extract_with_azure(pdf_bytes)
        return self._extract_locally(pdf_bytes)

    def _extract_locally(self, pdf_bytes: bytes) -> str:
        page_texts = []
        with fitz.open(stream=pdf_bytes, filetype="pdf") as pdf:
            for page in pdf:
                text = page.get_text().strip()
                if text:
                    page_texts.append(text)
        logger.debug(f"Extracted text from {len(page_texts)} page(s) with PyMuPDF")
        return clean_text("\n\n".join(page_texts))

    def _extract_with_azure(self, pdf_bytes: bytes) -> str:
        try:
            with io.BytesIO(pdf_bytes) as file_stream:
                poller = self.doc_intelligence_client.begin_analyze_document(
                    model_id="prebuilt-read",
                    body=file_stream,
                    content_type="application/pdf"
                )
                result = poller.result()
                return clean_text(result.content or "")
        except Exception as e:
            logger.error(f"Error extracting text with Azure: {str(e)}")
            raise
