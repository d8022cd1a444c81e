"""Tests for text_chunking.app."""

import pytest
from fastapi.testclient import TestClient

from text_chunking import ChunkerConfig, ChunkingServiceConfig
from text_chunking.app import create_app


@pytest.fixture
def client(service_config):
    return TestClient(create_app(service_config))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_settings(tmp_path):
    config = ChunkingServiceConfig(
        data_dir=str(tmp_path),
        chunking=ChunkerConfig(chunk_size=400, chunk_overlap=300, min_chunk_size=100),
    )
    response = TestClient(create_app(config)).get("/settings")
    assert response.json() == {"chunk_size": 400, "chunk_overlap": 200, "min_chunk_size": 100}


def test_chunk_inline(client):
    response = client.post(
        "/chunk",
        json={"text": "First.\n\nSecond.", "metadata": {"post_id": 7}, "document_id": "post-7"},
    )
    body = response.json()

    assert response.status_code == 200
    assert body["document_id"] == "post-7"
    assert body["total_chunks"] == 1
    assert body["output_path"] is None
    assert body["chunks"][0]["content"] == "First. Second."
    assert body["chunks"][0]["metadata"]["post_id"] == 7


def test_chunk_empty_text(client):
    body = client.post("/chunk", json={"text": ""}).json()
    assert body["total_chunks"] == 0
    assert body["chunks"] == []


def test_chunk_persist_and_fetch(client):
    response = client.post(
        "/chunk",
        json={"text": "Stored text.", "document_id": "stored", "persist": True},
    )
    assert response.json()["output_path"]

    fetched = client.get("/documents/stored/chunks")
    assert fetched.status_code == 200
    assert fetched.json()["chunks"][0]["content"] == "Stored text."


def test_chunk_file(client, tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("Notes for the file endpoint.", encoding="utf-8")

    response = client.post("/chunk/file", json={"path": str(source)})
    body = response.json()

    assert response.status_code == 200
    assert body["document_id"] == "notes"
    assert body["output_path"]


def test_chunk_file_missing(client, tmp_path):
    response = client.post("/chunk/file", json={"path": str(tmp_path / "nope.txt")})
    assert response.status_code == 404


def test_unknown_document(client):
    assert client.get("/documents/unknown/chunks").status_code == 404


def test_persist_rejects_traversal_id(client, tmp_path):
    response = client.post(
        "/chunk",
        json={"text": "Escape.", "document_id": "../outside", "persist": True},
    )
    assert response.status_code == 400
    assert not (tmp_path / "outside").exists()
