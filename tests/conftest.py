"""
tests/conftest.py

Shared fixtures: settings with fake keys, an httpx client backed by a mock
transport that imitates both tool services, and a scripted model gateway.
"""

import json
from typing import List

import httpx
import pytest

from config import Settings
from orchestrator.models import GatewayResponse, ToolCallRequest
from tools.registry import default_registry


GEO_BODY = json.dumps({
    "results": [{"name": "Paris", "latitude": 48.85341, "longitude": 2.3488, "country": "France"}],
})
WEATHER_BODY = json.dumps({
    "weather": [{"main": "Clouds", "description": "broken clouds"}],
    "main": {"temp": 17.2, "humidity": 71},
    "name": "Paris",
})


class ScriptedGateway:
    """Returns (or raises) the scripted steps in order and records every transcript it saw."""

    def __init__(self, steps):
        self.steps = list(steps)
        self.calls: List[tuple] = []

    def complete(self, transcript):
        self.calls.append(tuple(transcript))
        step = self.steps[len(self.calls) - 1]
        if isinstance(step, Exception):
            raise step
        return step


def tool_call(name, arguments, call_id=None) -> GatewayResponse:
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return GatewayResponse(tool_call=ToolCallRequest(id=call_id or f"call_{name}", name=name, arguments=arguments))


def final(text) -> GatewayResponse:
    return GatewayResponse(answer=text)


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", openweathermap_api_key="owm-test")


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def http(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        if request.url.host == "geocoding-api.open-meteo.com":
            return httpx.Response(200, text=GEO_BODY)
        if request.url.host == "api.openweathermap.org":
            return httpx.Response(200, text=WEATHER_BODY)
        return httpx.Response(404, text="not found")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def registry(settings, http):
    return default_registry(settings, http)
