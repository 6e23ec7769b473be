"""Model gateway against a mocked OpenAI client."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from config import Settings
from orchestrator.errors import BackendError
from orchestrator.llm_openai import OpenAIGateway, _tool_spec, extract_tool_call
from orchestrator.models import Message, ToolCallRequest, ToolResult
from orchestrator.prompts import seed_transcript


def _choice(content=None, tool_calls=None):
    return SimpleNamespace(message=SimpleNamespace(role="assistant", content=content, tool_calls=tool_calls))


def _function_call(name, arguments, call_id="call_1"):
    return SimpleNamespace(id=call_id, type="function", function=SimpleNamespace(name=name, arguments=arguments))


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def gateway(settings, registry, client):
    return OpenAIGateway(settings, registry, client=client)


def test_tool_spec_shape(registry):
    spec = _tool_spec(registry.schemas()[0])

    assert spec["type"] == "function"
    assert spec["function"]["name"] == "geocode"
    assert spec["function"]["parameters"]["required"] == ["location"]


def test_extract_tool_call_none_without_calls():
    assert extract_tool_call(_choice(content="hi")) is None


def test_answer(gateway, client):
    client.chat.completions.create.return_value = SimpleNamespace(choices=[_choice(content="Sunny and 21°C.")])

    resp = gateway.complete(seed_transcript("Weather in Rome?"))

    assert not resp.wants_tool
    assert resp.answer == "Sunny and 21°C."


def test_tool_call(gateway, client):
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[_choice(tool_calls=[_function_call("geocode", '{"location": "Rome"}')])]
    )

    resp = gateway.complete(seed_transcript("Weather in Rome?"))

    assert resp.wants_tool
    assert resp.tool_call == ToolCallRequest(id="call_1", name="geocode", arguments='{"location": "Rome"}')


def test_top_choice_wins(gateway, client):
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[_choice(content="first"), _choice(content="second")]
    )

    assert gateway.complete(seed_transcript("hi")).answer == "first"


def test_empty_content_is_empty_answer(gateway, client):
    client.chat.completions.create.return_value = SimpleNamespace(choices=[_choice(content=None)])

    assert gateway.complete(seed_transcript("hi")).answer == ""


def test_request_payload(gateway, client, settings, registry):
    client.chat.completions.create.return_value = SimpleNamespace(choices=[_choice(content="ok")])
    call = ToolCallRequest(id="call_9", name="geocode", arguments='{"location": "Rome"}')
    transcript = seed_transcript("Weather in Rome?") + (
        Message.assistant_tool_call(call),
        Message.tool_result(call, ToolResult(name="geocode", content='{"results": []}')),
    )

    gateway.complete(transcript)

    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == settings.model == "gpt-3.5-turbo"
    assert kwargs["tools"] == [_tool_spec(d) for d in registry.schemas()]
    assert kwargs["parallel_tool_calls"] is False
    assert "temperature" not in kwargs

    messages = kwargs["messages"]
    assert messages[0] == {"role": "system", "content": "Only use the functions you have been provided with."}
    assert messages[3] == {
        "role": "assistant",
        "content": None,
        "tool_calls": [{
            "id": "call_9",
            "type": "function",
            "function": {"name": "geocode", "arguments": '{"location": "Rome"}'},
        }],
    }
    assert messages[4] == {"role": "tool", "tool_call_id": "call_9", "name": "geocode", "content": '{"results": []}'}


def test_transport_failure_is_backend_error(gateway, client):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

    with pytest.raises(BackendError, match="failed chat"):
        gateway.complete(seed_transcript("hi"))

    assert client.chat.completions.create.call_count == 1


def test_no_choices_is_backend_error(gateway, client):
    client.chat.completions.create.return_value = SimpleNamespace(choices=[])

    with pytest.raises(BackendError):
        gateway.complete(seed_transcript("hi"))


def test_missing_key_surfaces_on_first_call(registry, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
    monkeypatch.delenv("OPENAI_API_KEY")

    gateway = OpenAIGateway(Settings(openai_api_key=None), registry)

    with pytest.raises(BackendError):
        gateway.complete(seed_transcript("hi"))


def test_client_built_without_retries(registry, settings, monkeypatch):
    built = {}

    def fake_openai(**kwargs):
        built.update(kwargs)
        return MagicMock()

    monkeypatch.setattr("orchestrator.llm_openai.OpenAI", fake_openai)

    OpenAIGateway(settings, registry).client

    assert built == {"api_key": "sk-test", "timeout": settings.http_timeout, "max_retries": 0}
