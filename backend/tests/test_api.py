import json
import logging

import pytest
from fastapi.testclient import TestClient

from core import config
from portfolio.assistant import AssistantUpstreamError, LocalAssistant, RemoteAssistant
from portfolio.main import app, get_assistant


QUESTION = {"messages": [{"role": "user", "content": "What cloud platforms does Ryan know?"}]}


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _use(strategy):
    app.dependency_overrides[get_assistant] = lambda: strategy


def test_healthz(client: TestClient):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_chat_success_shape(client: TestClient, fake_openai):
    fake = fake_openai(content='Azure, GCP and AWS.\n```json\n{"skills": ["Azure", "GCP", "AWS"], "experiences": ["vivint"]}\n```')
    _use(RemoteAssistant(client=fake))

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 200
    body = response.json()
    assert body["content"] == "Azure, GCP and AWS."
    assert body["skills"] == ["Azure", "GCP", "AWS"]
    assert body["experiences"] == ["vivint"]


def test_chat_malformed_block_still_answers(client: TestClient, fake_openai):
    _use(RemoteAssistant(client=fake_openai(content='Azure!\n```json\n{"skills": [oops]}\n```')))

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 200
    body = response.json()
    assert body["content"]
    assert body["skills"] == []
    assert body["experiences"] == []


def test_chat_missing_credential_never_calls_upstream(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from portfolio.assistant import remote

    def _no_client(*args, **kwargs):
        raise AssertionError("upstream client must not be built")

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(remote, "AsyncOpenAI", _no_client)
    _use(RemoteAssistant())

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 500
    assert response.json() == {"error": "OpenAI API key not configured"}


@pytest.mark.parametrize("payload", [
    {},
    {"messages": "hello"},
    {"messages": [{"role": "wizard", "content": "hi"}]},
    {"messages": [{"role": "user"}]},
])
def test_chat_rejects_bad_shapes(client: TestClient, payload):
    response = client.post("/api/chat", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Messages array is required"}


def test_chat_rejects_non_json_body(client: TestClient):
    response = client.post("/api/chat", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_chat_wrong_method(client: TestClient):
    response = client.get("/api/chat")

    assert response.status_code == 405
    assert "error" in response.json()


def test_chat_forwards_upstream_status(client: TestClient):
    class _Failing:
        async def answer(self, messages):
            raise AssistantUpstreamError(503)

    _use(_Failing())

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 503
    assert response.json() == {"error": "Failed to get AI response"}


def test_chat_unexpected_error(client: TestClient):
    class _Broken:
        async def answer(self, messages):
            raise KeyError("boom")

    _use(_Broken())

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_chat_local_strategy(client: TestClient):
    _use(LocalAssistant(thinking_delay=0))

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 200
    body = response.json()
    assert "Azure" in body["skills"]
    assert body["content"]


def test_resume_endpoint(client: TestClient):
    body = client.get("/api/resume").json()

    assert body["profile"]["name"] == "Ryan Moe"
    assert [exp["id"] for exp in body["experiences"]] == ["visyfy", "vivint", "optilogic", "prior"]
    assert len(body["skills"]) == 23
    assert len(body["references"]) == 4


def test_skills_endpoint_filters(client: TestClient):
    body = client.get("/api/skills", params={"category": "database"}).json()
    assert [item["name"] for item in body["items"]] == ["Postgres", "NoSQL"]
    assert body["items"][0]["color"] == "#4ECB71"

    assert client.get("/api/skills", params={"category": "snacks"}).status_code == 400


def test_related_experiences_endpoint(client: TestClient):
    body = client.get("/api/experiences/related", params=[("skills", "python"), ("skills", "Docker")]).json()
    assert body["experiences"] == ["vivint", "optilogic", "prior"]


def test_connectors_endpoint(client: TestClient):
    payload = {
        "active_skills": ["Playwright", "Missing"],
        "skills": {"Playwright": {"left": 100, "top": 20, "width": 80, "height": 80}},
        "experiences": {
            "optilogic": {"left": 0, "top": 900, "width": 600, "height": 200},
        },
        "scroll": {"x": 0, "y": 100},
        "style": "circuit",
    }

    body = client.post("/api/connectors", json=payload).json()

    assert body["style"] == "circuit"
    assert len(body["paths"]) == 1
    path = body["paths"][0]
    assert path["id"] == "Playwright-optilogic"
    assert path["start"] == {"x": 140.0, "y": 200.0}
    assert path["end"]["y"] == 1000.0
    assert path["geometry"]["kind"] in {"circuit", "fallback"}
    assert path["marker"]["begin"] == 0.5
    assert path["marker"]["duration"] == 2.0
    assert path["marker"]["keyframes"] == [
        {"at": 0.0, "scale": 1.0, "opacity": 0.0},
        {"at": 0.15, "scale": 1.0, "opacity": 1.0},
        {"at": 0.85, "scale": 1.0, "opacity": 1.0},
        {"at": 1.0, "scale": 0.0, "opacity": 0.0},
    ]


def test_chat_unknown_strategy_is_a_json_error(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "ASSISTANT_STRATEGY", "bogus")

    response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Unknown assistant strategy: bogus"}


def test_unhandled_dependency_failure_is_a_json_error():
    def _explode():
        raise RuntimeError("dependency broke")

    app.dependency_overrides[get_assistant] = _explode
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post("/api/chat", json=QUESTION)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_chat_events_are_logged_redacted(client: TestClient, caplog: pytest.LogCaptureFixture):
    _use(LocalAssistant(thinking_delay=0))

    with caplog.at_level(logging.INFO, logger="portfolio"):
        response = client.post("/api/chat", json=QUESTION)

    assert response.status_code == 200
    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "portfolio"]
    by_name = {event["event"]: event for event in events if event["component"] == "api"}
    assert by_name["chat_request"]["messages"] == {"redacted": True, "count": 1}
    assert by_name["chat_response"]["content"]["redacted"] is True
    assert "cloud" not in json.dumps(by_name)
