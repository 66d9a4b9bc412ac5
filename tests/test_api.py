# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

import api.main
from highlight.colors import hash_color


@pytest.fixture
def client(fake_analyzer, monkeypatch):
    monkeypatch.setattr(api.main, "get_analyzer", lambda model=None: fake_analyzer)
    return TestClient(api.main.app)


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_analyze(client):
    resp = client.post("/analyze", json={"text": "TODO run the DataPipeline"})
    assert resp.status_code == 200
    assert resp.json()["spans"] == [
        {"from": 0, "to": 4, "type": "keyword"},
        {"from": 5, "to": 8, "type": "action"},
        {"from": 13, "to": 25, "type": "variable-hash", "hashColor": hash_color("DataPipeline")},
    ]


def test_analyze_empty_text(client):
    assert client.post("/analyze", json={"text": "  "}).json() == {"spans": []}


def test_analyze_requires_text(client):
    assert client.post("/analyze", json={}).status_code == 422


def test_decorations(client):
    resp = client.post("/decorations", json={"text": "run this\nTODO later", "ranges": [[9, 19]]})
    assert resp.status_code == 200
    assert resp.json()["decorations"] == [{"from": 9, "to": 13, "class": "cm-semantic-keyword"}]
