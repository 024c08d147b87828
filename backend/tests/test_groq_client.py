import json

import pytest
import requests

from chat_proxy.clients.groq_client import GroqClient, build_groq_client
from chat_proxy.config import Settings
from chat_proxy.domain.chat import CompletionFailure, CompletionReply
from chat_proxy.domain.errors import UpstreamFailure
from chat_proxy.services.groq_service import run_chat_completion


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text
        self.content = text.encode()

    def json(self):
        return json.loads(self.text)


def make_client():
    return GroqClient(
        "secret",
        url="https://groq.test/chat/completions",
        model="llama-3.3-70b-versatile",
        temperature=0.7,
        max_tokens=512,
        timeout_seconds=5,
    )


@pytest.fixture
def captured(monkeypatch):
    calls = {}
    state = {"response": FakeResponse(200, {"choices": [{"message": {"content": "hello"}}]})}

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.update(url=url, headers=headers, json=json, timeout=timeout)
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    monkeypatch.setattr("chat_proxy.clients.http_client.requests.post", fake_post)
    calls["state"] = state
    return calls


def test_complete_sends_expected_request(captured):
    messages = [{"role": "user", "content": "hi"}]

    result = make_client().complete(messages)

    assert result == CompletionReply(text="hello")
    assert captured["url"] == "https://groq.test/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer secret"
    assert captured["json"] == {
        "model": "llama-3.3-70b-versatile",
        "messages": messages,
        "temperature": 0.7,
        "max_tokens": 512,
    }
    assert captured["timeout"] == 5


@pytest.mark.parametrize("body", [
    {},
    {"choices": []},
    {"choices": [{}]},
    {"choices": [{"message": {}}]},
    {"choices": [{"message": {"content": None}}]},
])
def test_missing_content_is_empty_reply(captured, body):
    captured["state"]["response"] = FakeResponse(200, body)

    assert make_client().complete([]) == CompletionReply(text="")


def test_non_json_success_is_failure(captured):
    captured["state"]["response"] = FakeResponse(200, text="<html>ok</html>")

    result = make_client().complete([])

    assert isinstance(result, CompletionFailure)
    assert result.status_code == 200


def test_empty_success_body_is_failure(captured):
    captured["state"]["response"] = FakeResponse(204, text="")

    result = make_client().complete([])

    assert isinstance(result, CompletionFailure)
    assert result.status_code == 204


def test_non_json_success_raises_upstream_failure(captured):
    captured["state"]["response"] = FakeResponse(200, text="<html>gateway</html>")

    with pytest.raises(UpstreamFailure):
        run_chat_completion(messages=[], groq_client=make_client())


def test_upstream_error_message_is_extracted(captured):
    captured["state"]["response"] = FakeResponse(400, {"error": {"message": "bad request"}})

    result = make_client().complete([])

    assert result == CompletionFailure(message="bad request", status_code=400)


def test_upstream_error_without_message_is_generic(captured):
    captured["state"]["response"] = FakeResponse(502, text="Bad Gateway")

    result = make_client().complete([])

    assert result == CompletionFailure(message="Groq API failed", status_code=502)


def test_network_error_is_failure(captured):
    captured["state"]["response"] = requests.ConnectionError("connection reset")

    result = make_client().complete([])

    assert isinstance(result, CompletionFailure)
    assert result.status_code is None
    assert "connection reset" in result.message


def test_timeout_is_failure(captured):
    captured["state"]["response"] = requests.Timeout("read timed out")

    result = make_client().complete([])

    assert isinstance(result, CompletionFailure)


def test_run_chat_completion_raises_on_failure(captured):
    captured["state"]["response"] = FakeResponse(401, {"error": {"message": "invalid api key"}})

    with pytest.raises(UpstreamFailure) as excinfo:
        run_chat_completion(messages=[], groq_client=make_client())

    assert excinfo.value.detail == "invalid api key"
    assert excinfo.value.upstream_status == 401
    assert excinfo.value.message == "Internal Server Error"


def test_run_chat_completion_returns_text(captured):
    assert run_chat_completion(messages=[], groq_client=make_client()) == "hello"


def test_build_groq_client_without_key():
    assert build_groq_client(Settings(GROQ_API_KEY="")) is None


def test_build_groq_client_uses_settings():
    client = build_groq_client(Settings(GROQ_API_KEY="k", GROQ_MODEL="m", UPSTREAM_TIMEOUT_SECONDS=3))

    assert client.api_key == "k"
    assert client.model == "m"
    assert client.temperature == 0.7
    assert client.max_tokens == 512
    assert client.timeout_seconds == 3
