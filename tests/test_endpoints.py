# ===============================================
# tests/test_endpoints.py
# HTTP surface with the generator swapped via dependency overrides
# ===============================================

import pytest
from fastapi.testclient import TestClient

from ilmquest.app import app, get_chat_generator
from ilmquest.errors import GenerationError
from ilmquest.generate import ChatGenerator, EchoDevClient

client = TestClient(app)


class FailingClient:
    model = "failing"

    def __init__(self, exc):
        self.exc = exc

    def generate(self, messages, params):
        raise self.exc


@pytest.fixture
def use_client():
    def _use(model_client):
        app.dependency_overrides[get_chat_generator] = lambda: ChatGenerator(model_client=model_client)
    yield _use
    app.dependency_overrides.clear()


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_chat_ok(use_client):
    use_client(EchoDevClient())
    history = [{"role": "user", "content": "salam"}, {"role": "assistant", "content": "wa alaykum"}]
    r = client.post("/api/chat", json={"question": "What is wudu?", "history": history})
    assert r.status_code == 200
    data = r.json()
    assert set(data) == {"text", "citations", "suggested_followups", "history"}
    assert "What is wudu?" in data["text"]
    assert len(data["suggested_followups"]) == 2
    assert data["citations"][0]["source"] == "Islamic Scholarship"
    assert data["history"][:2] == history
    assert data["history"][2] == {"role": "user", "content": "What is wudu?"}
    assert data["history"][3] == {"role": "assistant", "content": data["text"]}


@pytest.mark.parametrize("body", [{}, {"question": ""}, {"question": None, "history": []}])
def test_chat_requires_question(use_client, body):
    use_client(EchoDevClient())
    r = client.post("/api/chat", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Question is required"}


@pytest.mark.parametrize("exc", [GenerationError("secret upstream detail", 502), RuntimeError("boom")])
def test_chat_upstream_failure_is_generic(use_client, exc):
    use_client(FailingClient(exc))
    r = client.post("/api/chat", json={"question": "q"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to get response from AI"}
    assert "secret" not in r.text
