from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest

import equacaopro.completion as completion
from equacaopro.completion import CompletionClient
from equacaopro.errors import ConfigurationError, RequestError
from equacaopro.runtime_config import DEFAULT_BASE_URL, DEFAULT_MODEL, RuntimeSettings


def _install_fake_openai(monkeypatch: pytest.MonkeyPatch, create) -> dict[str, object]:
    captured: dict[str, object] = {}

    class DummyOpenAI:
        def __init__(self, **kwargs: object) -> None:
            captured.update(kwargs)
            self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))

    monkeypatch.setattr(completion, "OpenAI", DummyOpenAI)
    return captured


def _response(content: object) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_missing_credential_fails_before_any_request(monkeypatch: pytest.MonkeyPatch) -> None:
    attempts: list[object] = []
    _install_fake_openai(monkeypatch, lambda **kwargs: attempts.append(kwargs))

    client = CompletionClient()
    with pytest.raises(ConfigurationError):
        client.generate("prompt", "system")
    assert attempts == []


def test_missing_credential_skips_transport() -> None:
    calls: list[str] = []
    client = CompletionClient(
        RuntimeSettings(api_key="   "),
        transport=lambda prompt, system, **_: calls.append(prompt) or "ok",
    )
    with pytest.raises(ConfigurationError):
        client.generate("prompt", "system")
    assert calls == []


def test_credential_is_read_at_call_time(monkeypatch: pytest.MonkeyPatch) -> None:
    client = CompletionClient(transport=lambda prompt, system, **_: "resposta")
    with pytest.raises(ConfigurationError):
        client.generate("prompt", "system")

    monkeypatch.setenv("API_KEY", "secret")
    assert client.generate("prompt", "system") == "resposta"


def test_request_shape_uses_system_instruction_and_model(monkeypatch: pytest.MonkeyPatch) -> None:
    call: dict[str, object] = {}

    def create(**kwargs: object) -> SimpleNamespace:
        call.update(kwargs)
        return _response("### **[DIAGNÓSTICO]**\nX")

    captured = _install_fake_openai(monkeypatch, create)
    monkeypatch.setenv("GEMINI_API_KEY", "token")

    text = CompletionClient().generate("the prompt", "the system")

    assert text == "### **[DIAGNÓSTICO]**\nX"
    assert captured == {"api_key": "token", "max_retries": 0, "base_url": DEFAULT_BASE_URL}
    assert call["model"] == DEFAULT_MODEL
    assert call["messages"] == [
        {"role": "system", "content": "the system"},
        {"role": "user", "content": "the prompt"},
    ]


def test_custom_model_and_sdk_default_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    call: dict[str, object] = {}

    def create(**kwargs: object) -> SimpleNamespace:
        call.update(kwargs)
        return _response("ok")

    captured = _install_fake_openai(monkeypatch, create)
    settings = RuntimeSettings(api_key="token", model="gpt-4o-mini", base_url="")

    CompletionClient(settings).generate("p", "s")

    assert "base_url" not in captured
    assert call["model"] == "gpt-4o-mini"


def test_status_error_maps_to_request_error(monkeypatch: pytest.MonkeyPatch) -> None:
    request = httpx.Request("POST", "https://example.invalid/chat/completions")
    response = httpx.Response(503, request=request)

    def create(**kwargs: object) -> SimpleNamespace:
        raise openai.APIStatusError(
            "Service Unavailable",
            response=response,
            body={"error": {"message": "model overloaded"}},
        )

    _install_fake_openai(monkeypatch, create)
    client = CompletionClient(RuntimeSettings(api_key="token"))

    with pytest.raises(RequestError) as excinfo:
        client.generate("p", "s")
    assert excinfo.value.status == 503
    assert excinfo.value.message == "model overloaded"


def test_connection_error_maps_to_request_error(monkeypatch: pytest.MonkeyPatch) -> None:
    request = httpx.Request("POST", "https://example.invalid/chat/completions")

    def create(**kwargs: object) -> SimpleNamespace:
        raise openai.APIConnectionError(request=request)

    _install_fake_openai(monkeypatch, create)
    client = CompletionClient(RuntimeSettings(api_key="token"))

    with pytest.raises(RequestError) as excinfo:
        client.generate("p", "s")
    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, openai.APIConnectionError)


@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(choices=[]),
        _response(None),
        _response("   "),
    ],
)
def test_malformed_payload_maps_to_request_error(
    monkeypatch: pytest.MonkeyPatch, response: SimpleNamespace
) -> None:
    _install_fake_openai(monkeypatch, lambda **kwargs: response)
    client = CompletionClient(RuntimeSettings(api_key="token"))

    with pytest.raises(RequestError):
        client.generate("p", "s")


def test_content_parts_are_joined(monkeypatch: pytest.MonkeyPatch) -> None:
    parts = [{"type": "text", "text": "### Um\n"}, {"type": "text", "text": "dois"}]
    _install_fake_openai(monkeypatch, lambda **kwargs: _response(parts))
    client = CompletionClient(RuntimeSettings(api_key="token"))

    assert client.generate("p", "s") == "### Um\ndois"


def test_exactly_one_attempt_per_call(monkeypatch: pytest.MonkeyPatch) -> None:
    attempts: list[int] = []
    request = httpx.Request("POST", "https://example.invalid/chat/completions")

    def create(**kwargs: object) -> SimpleNamespace:
        attempts.append(1)
        raise openai.APITimeoutError(request=request)

    _install_fake_openai(monkeypatch, create)
    client = CompletionClient(RuntimeSettings(api_key="token"))

    with pytest.raises(RequestError):
        client.generate("p", "s")
    assert attempts == [1]
