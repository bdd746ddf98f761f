"""Tests for the synchronous generation endpoints."""
import io
import zipfile

from fastapi.testclient import TestClient

from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE
from umlgen.main import app

client = TestClient(app)


def test_health():
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_rejects_empty_diagram():
    """No classes means the generator is never invoked and the user gets a message."""
    response = client.post("/v1/generate", json={"classes": [], "relations": []})
    assert response.status_code == 400
    assert response.json()["detail"] == EMPTY_DIAGRAM_MESSAGE


def test_generate_returns_zip(library_diagram):
    response = client.post("/v1/generate", json=library_diagram)

    assert response.status_code == 200, response.text
    assert response.headers["content-type"] == "application/zip"
    assert 'filename="library-api.zip"' in response.headers["content-disposition"]
    assert response.headers["x-generation-failures"] == "0"

    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        names = zf.namelist()
        assert "pom.xml" in names
        assert "src/main/java/com/example/library/model/Author.java" in names
        book = zf.read("src/main/java/com/example/library/model/Book.java").decode("utf-8")
        assert "private Author author;" in book


def test_preview_resolves_relation_kind():
    """The producer's qualitative kind maps through the fixed lookup (aggr -> ONE_TO_MANY)."""
    payload = {
        "classes": [{"name": "Team"}, {"name": "Player", "attributes": ["name"]}],
        "relations": [{"source": "Team", "target": "Player", "kind": "aggr"}],
    }
    response = client.post("/v1/generate/preview", json=payload)

    assert response.status_code == 200, response.text
    body = response.json()
    team = body["files"]["src/main/java/com/example/model/Team.java"]
    player = body["files"]["src/main/java/com/example/model/Player.java"]
    assert "private Set<Player> players" in team
    assert "private Team team;" in player
    assert body["failures"] == []


def test_preview_explicit_type_wins_over_kind():
    payload = {
        "classes": [{"name": "A"}, {"name": "B"}],
        "relations": [{"source": "A", "target": "B", "kind": "aggr", "type": "MANY_TO_ONE"}],
    }
    body = client.post("/v1/generate/preview", json=payload).json()
    assert "private B b;" in body["files"]["src/main/java/com/example/model/A.java"]


def test_preview_reports_warnings():
    payload = {
        "classes": [{"name": "A"}, {"name": "a"}],
        "relations": [{"source": "A", "target": "Missing", "type": "ONE_TO_ONE"}],
    }
    body = client.post("/v1/generate/preview", json=payload).json()
    assert len(body["warnings"]) == 2


def test_invalid_payload_is_422():
    response = client.post("/v1/generate", json={"classes": [{"attributes": []}]})
    assert response.status_code == 422
