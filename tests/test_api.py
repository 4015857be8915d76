"""End-to-end tests through the HTTP routes."""
import inspect

from fastapi.routing import APIRoute

from app.config import settings
from app.main import app
from core.services.errors import FallbackResponses

PLACEHOLDERS = {
    FallbackResponses.get_response("extraction_failed"),
    FallbackResponses.get_response("no_text_extracted"),
}


def _upload(client, data: bytes, name: str = "doc.pdf", content_type: str = "application/pdf"):
    return client.post("/api/documents", files={"file": (name, data, content_type)})


class TestHealth:
    def test_root_and_health(self, client):
        assert client.get("/").json()["status"] == "running"
        assert client.get("/health").json() == {"status": "healthy"}


class TestDocumentsAPI:
    """Upload, list, download and delete."""

    def test_upload_1kb_file(self, client):
        response = _upload(client, b"\x00" * 1024)

        assert response.status_code == 200
        body = response.json()
        assert body["fileSize"] == 1024
        assert body["originalName"] == "doc.pdf"
        assert body["textContent"] in PLACEHOLDERS

        listed = client.get("/api/documents").json()
        assert [d["id"] for d in listed] == [body["id"]]
        assert listed[0]["fileSize"] == 1024

    def test_upload_real_pdf_extracts_text(self, client, make_pdf):
        body = _upload(client, make_pdf("Plants need sunlight")).json()
        assert "Plants need sunlight" in body["textContent"]

    def test_upload_wrong_type(self, client):
        response = _upload(client, b"hello", name="notes.txt", content_type="text/plain")
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert client.get("/api/documents").json() == []

    def test_upload_without_file(self, client):
        assert client.post("/api/documents").status_code == 400

    def test_upload_over_limit_returns_413(self, client, monkeypatch, upload_storage):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 1024)

        at_limit = _upload(client, b"x" * 1024)
        assert at_limit.status_code == 200

        response = _upload(client, b"x" * 1025, name="big.pdf")
        assert response.status_code == 413
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "File too large"
        assert [d["id"] for d in client.get("/api/documents").json()] == [at_limit.json()["id"]]
        assert len(list(upload_storage.upload_dir.iterdir())) == 1

    def test_download_and_detail(self, client):
        document = _upload(client, b"%PDF-fake").json()

        assert client.get(f"/api/documents/{document['id']}").json()["id"] == document["id"]
        download = client.get(f"/api/documents/{document['id']}/file")
        assert download.status_code == 200
        assert download.content == b"%PDF-fake"

    def test_delete_cascades(self, client, storage):
        document = _upload(client, b"%PDF-fake").json()
        doc_id = document["id"]
        client.post("/api/questions/commit", json={
            "documentId": doc_id,
            "questions": [{"type": "short", "difficulty": "easy", "question": "Q"}],
        })
        client.post("/api/notes/commit", json={"documentId": doc_id, "content": "<p>n</p>"})
        client.post("/api/chat/message", json={"role": "user", "content": "hi", "documentId": doc_id})
        client.post("/api/chat/message", json={"role": "user", "content": "general"})

        assert client.delete(f"/api/documents/{doc_id}").status_code == 200

        assert client.get("/api/documents").json() == []
        assert client.get(f"/api/questions/{doc_id}").json() == []
        assert client.get(f"/api/notes/{doc_id}").json() == []
        assert client.get("/api/chat/messages", params={"documentId": doc_id}).json() == []
        assert len(client.get("/api/chat/messages").json()) == 1
        assert client.get(f"/api/documents/{doc_id}/file").status_code == 404

    def test_delete_unknown(self, client):
        assert client.delete("/api/documents/missing").status_code == 404


class TestQuestionsAPI:
    """Prepare/commit question generation."""

    def test_commit_then_list(self, client, make_document):
        document = make_document()
        payload = {"type": "mcq", "difficulty": "easy", "question": "Q1",
                   "options": ["A", "B", "C", "D"], "correctAnswer": "A"}

        response = client.post("/api/questions/commit", json={"documentId": document.id, "questions": [payload]})
        assert response.status_code == 200

        [stored] = client.get(f"/api/questions/{document.id}").json()
        assert stored["id"]
        assert stored["createdAt"]
        assert stored["documentId"] == document.id
        for key, value in payload.items():
            assert stored[key] == value

    def test_prepare_clears_previous_questions(self, client, make_document):
        document = make_document(text="Atoms have protons.")
        client.post("/api/questions/commit", json={
            "documentId": document.id,
            "questions": [{"type": "long", "difficulty": "hard", "question": "Old"}],
        })

        response = client.post("/api/questions/prepare", json={
            "documentId": document.id, "count": 3, "difficulty": "easy", "types": ["short"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == "Atoms have protons."
        assert body["request"]["documentId"] == document.id
        assert body["request"]["types"] == ["short"]
        assert client.get(f"/api/questions/{document.id}").json() == []

    def test_prepare_errors(self, client, make_document):
        prepare = {"count": 3, "difficulty": "easy", "types": ["short"]}
        assert client.post("/api/questions/prepare", json={"documentId": "missing", **prepare}).status_code == 404

        no_text = make_document(text=None)
        assert client.post("/api/questions/prepare", json={"documentId": no_text.id, **prepare}).status_code == 400

        document = make_document()
        for bad in ({"count": 0}, {"count": 51}, {"types": []}, {"difficulty": "extreme"}):
            body = {"documentId": document.id, **prepare, **bad}
            assert client.post("/api/questions/prepare", json=body).status_code == 400

    def test_commit_malformed(self, client, make_document):
        document = make_document()
        assert client.post("/api/questions/commit", json={"documentId": document.id}).status_code == 400
        assert client.post("/api/questions/commit", json={
            "documentId": document.id, "questions": [{"type": "mcq", "difficulty": "easy"}],
        }).status_code == 400
        assert client.post("/api/questions/commit", json={
            "documentId": document.id, "rawResponse": "no json here",
        }).status_code == 400
        assert client.get(f"/api/questions/{document.id}").json() == []


class TestChatAPI:
    """Chat message flow and scopes."""

    def test_message_and_response_flow(self, client, make_document):
        document = make_document(text="Gravity pulls objects together.")

        exchange = client.post("/api/chat/message", json={
            "role": "user", "content": "What is gravity?", "documentId": document.id,
        }).json()
        assert exchange["message"]["role"] == "user"
        assert exchange["documentText"] == "Gravity pulls objects together."
        assert exchange["context"] == [{"role": "user", "content": "What is gravity?"}]

        reply = client.post("/api/chat/response", json={"content": "A force.", "documentId": document.id})
        assert reply.status_code == 200
        assert reply.json()["role"] == "assistant"

        messages = client.get("/api/chat/messages", params={"documentId": document.id}).json()
        assert [m["content"] for m in messages] == ["What is gravity?", "A force."]

    def test_empty_response_rejected(self, client):
        assert client.post("/api/chat/response", json={"content": ""}).status_code == 400

    def test_general_scope_isolated(self, client, make_document):
        document = make_document()
        client.post("/api/chat/message", json={"role": "user", "content": "general"})
        client.post("/api/chat/message", json={"role": "user", "content": "scoped", "documentId": document.id})

        assert client.delete("/api/chat").status_code == 200

        assert client.get("/api/chat/messages").json() == []
        scoped = client.get("/api/chat/messages", params={"documentId": document.id}).json()
        assert [m["content"] for m in scoped] == ["scoped"]


class TestNotesAPI:
    """Notes prepare/commit/detail/delete."""

    def test_notes_lifecycle(self, client, make_document):
        document = make_document(name="chem.pdf")

        prepared = client.post("/api/notes/prepare", json={"documentId": document.id, "style": "summary"}).json()
        assert prepared["documentName"] == "chem.pdf"

        notes = client.post("/api/notes/commit", json={
            "documentId": document.id, "content": "<h1>Bonds</h1>", "style": "summary",
            "includeExamples": True,
        }).json()
        assert notes["title"] == "Study Notes - summary"
        assert notes["includeExamples"] is True

        assert client.get(f"/api/notes/detail/{notes['id']}").json()["content"] == "<h1>Bonds</h1>"
        assert [n["id"] for n in client.get(f"/api/notes/{document.id}").json()] == [notes["id"]]

        assert client.delete(f"/api/notes/{notes['id']}").status_code == 200
        assert client.get(f"/api/notes/detail/{notes['id']}").status_code == 404
        assert client.delete(f"/api/notes/{notes['id']}").status_code == 404

    def test_notes_errors(self, client, make_document):
        assert client.post("/api/notes/prepare", json={"documentId": "missing", "style": "summary"}).status_code == 404
        no_text = make_document(text=None)
        assert client.post("/api/notes/prepare", json={"documentId": no_text.id, "style": "summary"}).status_code == 400
        assert client.post("/api/notes/commit", json={"documentId": no_text.id, "content": ""}).status_code == 400


class TestRouteHandlers:
    def test_api_handlers_run_on_event_loop(self):
        """API handlers are coroutines, so store access stays on the event loop."""
        api_routes = [r for r in app.routes if isinstance(r, APIRoute) and r.path.startswith("/api")]

        assert len(api_routes) == 17
        for route in api_routes:
            assert inspect.iscoroutinefunction(route.endpoint), route.path
