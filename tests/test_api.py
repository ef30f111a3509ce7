from __future__ import annotations

from pathlib import Path
from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from docvocab.api import get_document_extractor, get_vocabulary_miner
from docvocab.config import Settings
from docvocab.errors import ToolUnavailableError
from docvocab.extract import DocumentExtractor
from docvocab.main import app
from docvocab.vocabulary import VocabularyMiner

from conftest import FakePdfTool

VOCABULARY_JSON = (
    '{"categories":[{"name":"Drug Names","terms":["Atorvastatin","Rosuvastatin"]},'
    '{"name":"Acronyms","terms":["LDL-C"]}],"suggested_name":"Lipid Clinic"}'
)


@pytest.fixture
def client() -> Iterator[TestClient]:
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _use_pdf_tool(tool: FakePdfTool) -> None:
    app.dependency_overrides[get_document_extractor] = lambda: DocumentExtractor(
        pdf_tool=tool, settings=Settings()
    )


def _use_transport(handler) -> None:  # noqa: ANN001
    app.dependency_overrides[get_vocabulary_miner] = lambda: VocabularyMiner(
        Settings(), transport=httpx.MockTransport(handler)
    )


def test_healthz_returns_ok(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"


def test_tools_healthcheck_reports_missing_binary(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PDFTOTEXT_BINARY", "pdftotext-not-installed-anywhere")

    payload = client.get("/healthz/tools").json()

    assert payload["binary"] == "pdftotext-not-installed-anywhere"
    assert payload["available"] is False
    assert "poppler-utils" in payload["reason"]


def test_document_text_endpoint_returns_plain_text(client: TestClient, tmp_path: Path) -> None:
    path = tmp_path / "note.txt"
    path.write_text("Rosuvastatin 10 mg daily\n", encoding="utf-8")
    _use_pdf_tool(FakePdfTool())

    response = client.post("/documents/text", json={"path": str(path)})

    assert response.status_code == 200
    assert response.json() == {"text": "Rosuvastatin 10 mg daily\n"}


def test_document_text_endpoint_rejects_unsupported_format(client: TestClient, tmp_path: Path) -> None:
    _use_pdf_tool(FakePdfTool())

    response = client.post("/documents/text", json={"path": str(tmp_path / "setup.exe")})

    assert response.status_code == 415
    assert response.json()["detail"] == "Unsupported file type: exe"


def test_document_text_endpoint_reports_missing_tool(client: TestClient, tmp_path: Path) -> None:
    _use_pdf_tool(FakePdfTool(error=ToolUnavailableError("pdftotext")))

    response = client.post("/documents/text", json={"path": str(tmp_path / "scan.pdf")})

    assert response.status_code == 503
    assert "poppler-utils" in response.json()["detail"]


def test_document_text_endpoint_reports_read_failure(client: TestClient, tmp_path: Path) -> None:
    _use_pdf_tool(FakePdfTool())

    response = client.post("/documents/text", json={"path": str(tmp_path / "missing.md")})

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Failed to read file")


def test_vocabulary_endpoint_returns_categories(client: TestClient) -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers["Authorization"]
        return httpx.Response(200, json={"choices": [{"message": {"content": VOCABULARY_JSON}}]})

    _use_transport(handler)

    response = client.post("/vocabulary/terms", json={"text": "LDL-C 190", "api_key": "sk-live"})

    assert response.status_code == 200
    assert response.json() == {
        "categories": [
            {"name": "Drug Names", "terms": ["Atorvastatin", "Rosuvastatin"]},
            {"name": "Acronyms", "terms": ["LDL-C"]},
        ],
        "suggested_name": "Lipid Clinic",
    }
    assert seen["authorization"] == "Bearer sk-live"


def test_vocabulary_endpoint_maps_upstream_errors_to_502(client: TestClient) -> None:
    _use_transport(lambda request: httpx.Response(429, text='{"error":"rate limited"}'))

    response = client.post("/vocabulary/terms", json={"text": "LDL-C 190", "api_key": "sk-live"})

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert "429" in detail
    assert "rate limited" in detail


def test_vocabulary_endpoint_requires_credential(client: TestClient) -> None:
    response = client.post("/vocabulary/terms", json={"text": "LDL-C 190", "api_key": ""})

    assert response.status_code == 422


def test_vocabulary_endpoint_maps_non_ascii_credential_to_502(client: TestClient) -> None:
    _use_transport(lambda request: httpx.Response(200, json={"choices": [{"message": {"content": VOCABULARY_JSON}}]}))

    response = client.post("/vocabulary/terms", json={"text": "LDL-C 190", "api_key": "sk-clé"})

    assert response.status_code == 502
    assert response.json()["detail"].startswith("Request failed")
    assert "sk-cl" not in response.json()["detail"]
