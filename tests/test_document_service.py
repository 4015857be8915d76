"""Tests for DocumentService."""
import asyncio
from pathlib import Path

import pytest

from core.services.documents import UploadStorage
from core.services.errors import (
    FallbackResponses,
    InvalidRequestError,
    NotFoundError,
    StorageError,
    UploadTooLargeError,
)
from core.services.study import DocumentService


def _upload(service, *args):
    return asyncio.run(service.upload(*args))


@pytest.fixture
def pdf_service(stub_pdf_service):
    return stub_pdf_service()


@pytest.fixture
def service(storage, pdf_service, upload_storage):
    return DocumentService(storage, pdf_service, upload_storage, max_upload_size=1024)


class TestDocumentUpload:
    """Upload validation, persistence and best-effort extraction."""

    def test_upload_stores_record_file_and_text(self, service, storage):
        document = _upload(service, "biology.pdf", "application/pdf", b"x" * 512)

        assert document.original_name == "biology.pdf"
        assert document.file_size == 512
        assert Path(document.file_path).read_bytes() == b"x" * 512
        assert document.filename == Path(document.file_path).name
        assert document.text_content == "Photosynthesis converts light into chemical energy."
        assert storage.documents.list_all() == [document]

    def test_extraction_failure_uses_placeholder(self, storage, upload_storage, stub_pdf_service):
        service = DocumentService(storage, stub_pdf_service(error=RuntimeError("broken")), upload_storage)
        document = _upload(service, "broken.pdf", "application/pdf", b"%PDF-broken")
        assert document.text_content == FallbackResponses.get_response("extraction_failed")

    def test_empty_extraction_uses_notice(self, storage, upload_storage, stub_pdf_service):
        service = DocumentService(storage, stub_pdf_service(text="   "), upload_storage)
        document = _upload(service, "scan.pdf", "application/pdf", b"%PDF-scan")
        assert document.text_content == "No text content could be extracted from this PDF."

    def test_rejects_wrong_content_type(self, service, storage):
        with pytest.raises(InvalidRequestError):
            _upload(service, "notes.txt", "text/plain", b"hello")
        assert storage.documents.list_all() == []

    def test_rejects_missing_file(self, service):
        with pytest.raises(InvalidRequestError):
            _upload(service, None, None, b"")

    def test_rejects_oversized_upload(self, service, storage, pdf_service):
        with pytest.raises(UploadTooLargeError):
            _upload(service, "big.pdf", "application/pdf", b"x" * 1025)
        assert storage.documents.list_all() == []
        assert pdf_service.calls == 0

    def test_accepts_upload_at_size_limit(self, service):
        assert _upload(service, "exact.pdf", "application/pdf", b"x" * 1024).file_size == 1024

    def test_write_failure_leaves_record_without_text(self, storage, pdf_service, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        service = DocumentService(storage, pdf_service, UploadStorage(str(blocker)))

        with pytest.raises(StorageError):
            _upload(service, "doc.pdf", "application/pdf", b"data")

        [orphan] = storage.documents.list_all()
        assert orphan.text_content is None
        assert pdf_service.calls == 0


class TestDocumentManagement:
    """Lookup, download path and deletion."""

    def test_get_unknown_document(self, service):
        with pytest.raises(NotFoundError):
            service.get_document("missing")

    def test_delete_removes_file_and_record(self, service, storage):
        document = _upload(service, "doc.pdf", "application/pdf", b"data")
        service.delete_document(document.id)

        assert not Path(document.file_path).exists()
        assert storage.documents.get(document.id) is None

    def test_delete_tolerates_missing_file(self, service, storage):
        document = _upload(service, "doc.pdf", "application/pdf", b"data")
        Path(document.file_path).unlink()
        service.delete_document(document.id)
        assert storage.documents.get(document.id) is None

    def test_delete_unknown_document(self, service):
        with pytest.raises(NotFoundError):
            service.delete_document("missing")

    def test_file_path_missing_on_disk(self, service, make_document):
        document = make_document()
        with pytest.raises(NotFoundError):
            service.get_file_path(document.id)
