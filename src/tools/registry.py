"""
src/tools/registry.py — tool name -> (schema, handler) lookup table

The registry does no I/O and no validation. It stores each tool's parameter
contract as a pydantic model class (the dispatcher validates against it) and
derives the JSON schema advertised to the model from that same class, once.

Usage:
    registry = default_registry(settings, http)
    registry.schemas()        # -> [ToolDefinition, ...] for the model gateway
    registry.get("weather")   # -> RegisteredTool or None
"""


from functools import partial
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type

import httpx
from pydantic import BaseModel

from config import Settings
from orchestrator.models import ToolDefinition
from tools import geocode, weather


Handler = Callable[[BaseModel], str]


class RegisteredTool(NamedTuple):

    definition: ToolDefinition
    schema: Type[BaseModel]
    handler: Handler


def _parameters(schema: Type[BaseModel]) -> Dict[str, Any]:
    """JSON schema for `schema`, trimmed to what the model needs (no titles)."""

    raw = schema.model_json_schema()
    properties = {
        field: {k: v for k, v in spec.items() if k != "title"}
        for field, spec in raw.get("properties", {}).items()
    }

    return {
        "type": "object",
        "properties": properties,
        "required": list(raw.get("required", [])),
    }


class ToolRegistry:

    def __init__(self):

        self._tools: Dict[str, RegisteredTool] = {}

    def register(self, name: str, description: str, schema: Type[BaseModel], handler: Handler) -> ToolDefinition:
        """Add a tool. Names are unique."""

        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")

        definition = ToolDefinition(name=name, description=description, parameters=_parameters(schema))
        self._tools[name] = RegisteredTool(definition, schema, handler)

        return definition

    def get(self, name: str) -> Optional[RegisteredTool]:

        return self._tools.get(name)

    def names(self) -> List[str]:

        return list(self._tools)

    def schemas(self) -> List[ToolDefinition]:
        """Every ToolDefinition, in registration order."""

        return [t.definition for t in self._tools.values()]

    def __contains__(self, name: object) -> bool:

        return name in self._tools

    def __len__(self) -> int:

        return len(self._tools)


def default_registry(settings: Settings, http: httpx.Client) -> ToolRegistry:
    """The geocode and weather tools, bound to explicit settings and HTTP client."""

    registry = ToolRegistry()
    registry.register(
        geocode.NAME,
        geocode.DESCRIPTION,
        geocode.GeocodeArgs,
        partial(geocode.geocode, http=http, settings=settings),
    )
    registry.register(
        weather.NAME,
        weather.DESCRIPTION,
        weather.WeatherArgs,
        partial(weather.weather, http=http, settings=settings),
    )

    return registry
