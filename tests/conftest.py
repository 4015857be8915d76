"""Shared fixtures: fresh storage, temporary upload directory, sample PDFs."""
from typing import Optional

import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_storage, get_upload_storage
from app.main import app
from core.models.document import DocumentCreate
from core.services.documents import UploadStorage
from core.services.prompts import PromptBuilder
from core.services.storage import create_memory_storage


class StubPDFService:
    """PDF service double returning fixed text or raising."""

    def __init__(self, text: str = "Photosynthesis converts light into chemical energy.",
                 error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = 0

    def extract_text(self, pdf_bytes: bytes) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return self.text


def build_pdf(*pages: str) -> bytes:
    """Render a small PDF with one text line per page."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def stub_pdf_service():
    """Factory for PDF service doubles."""
    return StubPDFService


@pytest.fixture
def storage():
    return create_memory_storage()


@pytest.fixture
def upload_storage(tmp_path):
    return UploadStorage(str(tmp_path / "uploads"))


@pytest.fixture
def prompt_builder():
    return PromptBuilder(chat_context_chars=2000)


@pytest.fixture
def make_document(storage):
    """Insert a document record directly, optionally with text."""
    def _make(text: Optional[str] = "Cells are the basic unit of life.", name: str = "biology.pdf"):
        document = storage.documents.create(DocumentCreate(
            filename="stored-" + name,
            original_name=name,
            file_path="/nonexistent/" + name,
            file_size=100
        ))
        if text is not None:
            storage.documents.set_extracted_text(document.id, text)
        return storage.documents.get(document.id)
    return _make


@pytest.fixture
def client(storage, upload_storage):
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_upload_storage] = lambda: upload_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
