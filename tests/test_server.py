import importlib

import pytest
from fastapi.testclient import TestClient

from directives.document_cache import DOCUMENT_CACHE
import server
from server import app


@pytest.fixture
def client():
    DOCUMENT_CACHE.clear()
    with TestClient(app) as c:
        yield c
    DOCUMENT_CACHE.clear()


def test_compose_without_backend(client):
    resp = client.post("/directives", json={"workingDirectory": "/repo"})
    assert resp.status_code == 200
    data = resp.json()
    assert "database_instructions" not in data["sections"]
    assert "Current working directory: `/repo`" in data["document"]
    assert data["downstream_placeholders"] == []


def test_compose_with_backend(client):
    resp = client.post(
        "/directives",
        json={
            "workingDirectory": "/repo",
            "allowedMarkupVocabulary": ["b"],
            "backendIntegration": {"isConnected": True, "hasSelectedProject": True},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["sections"].index("database_instructions") == 6
    assert "available HTML elements: <b>\n" in data["document"]
    assert data["downstream_placeholders"] == ["projectId"]


def test_snake_case_body_accepted(client):
    resp = client.post("/directives", json={"working_directory": "/snake"})
    assert resp.status_code == 200
    assert "`/snake`" in resp.json()["document"]


def test_empty_body_uses_defaults(client):
    resp = client.post("/directives", json={})
    assert resp.status_code == 200
    assert "`/home/project`" in resp.json()["document"]


def test_invalid_body_rejected(client):
    resp = client.post("/directives", json={"allowedMarkupVocabulary": 5})
    assert resp.status_code == 422


def test_list_sections(client):
    resp = client.get("/directives/sections")
    assert resp.status_code == 200
    sections = {s["name"]: s for s in resp.json()}
    assert len(sections) == 12
    assert sections["database_instructions"]["required"] is False
    assert sections["system_constraints"]["slots"] == ["cwd"]
    assert sections["identity"]["required"] is True


def test_unknown_field_rejected(client):
    resp = client.post("/directives", json={"backend": {"isConnected": True}})
    assert resp.status_code == 422


@pytest.fixture
def configured_server(tmp_path, monkeypatch):
    path = tmp_path / "directives.jsonc"
    path.write_text(
        '{\n  // defaults for every request\n  "workingDirectory": "/srv/app",\n  "allowedMarkupVocabulary": ["b"]\n}',
        encoding="utf-8",
    )
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", str(path))
    DOCUMENT_CACHE.clear()
    module = importlib.reload(server)
    try:
        with TestClient(module.app) as c:
            yield c
    finally:
        monkeypatch.delenv("DIRECTIVES_CONFIG_PATH", raising=False)
        importlib.reload(server)
        DOCUMENT_CACHE.clear()


def test_file_defaults_reach_composed_document(configured_server):
    resp = configured_server.post("/directives", json={})
    assert resp.status_code == 200
    document = resp.json()["document"]
    assert "Current working directory: `/srv/app`" in document
    assert "available HTML elements: <b>\n" in document


def test_empty_request_values_keep_file_defaults(configured_server):
    resp = configured_server.post(
        "/directives", json={"workingDirectory": "", "allowedMarkupVocabulary": []}
    )
    assert resp.status_code == 200
    document = resp.json()["document"]
    assert "`/srv/app`" in document
    assert "available HTML elements: <b>\n" in document


def test_request_values_override_file_defaults(configured_server):
    resp = configured_server.post("/directives", json={"workingDirectory": "/other"})
    document = resp.json()["document"]
    assert "`/other`" in document
    assert "available HTML elements: <b>\n" in document
