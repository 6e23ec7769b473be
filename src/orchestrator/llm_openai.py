"""
src/orchestrator/llm_openai.py

OpenAI gateway for function calling.
- OpenAIGateway.complete(): one completion over the transcript plus the tool specs
- extract_tool_call(): normalise the tool call (if any) on a response choice

No retries: the client is built with max_retries=0 and every OpenAIError
becomes a BackendError.
"""


import logging
from typing import Any, Dict, List, Optional, Sequence

from openai import OpenAI, OpenAIError

from config import Settings
from orchestrator.errors import BackendError
from orchestrator.models import GatewayResponse, Message, ToolCallRequest, ToolDefinition
from tools.registry import ToolRegistry


logger = logging.getLogger(__name__)


def _tool_spec(definition: ToolDefinition) -> Dict[str, Any]:
    """Build an OpenAI function spec."""

    parameters = definition.parameters

    return {
        "type": "function",
        "function": {
            "name": definition.name,
            "description": definition.description,
            "parameters": {
                "type": "object",
                "properties": parameters.get("properties", {}),
                "required": parameters.get("required", []),
            },
        },
    }


def extract_tool_call(choice) -> Optional[ToolCallRequest]:
    """
    First function tool call on a response choice, or None.

    Arguments stay raw; decoding is the dispatcher's job.
    """

    tcs = getattr(choice.message, "tool_calls", None)

    if not tcs:
        return None

    for tc in tcs:
        if tc.type == "function" and tc.function:
            return ToolCallRequest(id=tc.id or "", name=tc.function.name, arguments=tc.function.arguments or "")

    return None


class OpenAIGateway:

    def __init__(self, settings: Settings, registry: ToolRegistry, client: Optional[OpenAI] = None):

        self.settings = settings
        self.tool_specs: List[Dict[str, Any]] = [_tool_spec(d) for d in registry.schemas()]
        self._client = client

    @property
    def client(self) -> OpenAI:
        # Built on first use: a missing key must fail the first call, not startup.
        if self._client is None:
            self._client = OpenAI(
                api_key=self.settings.openai_api_key,
                timeout=self.settings.http_timeout,
                max_retries=0,
            )

        return self._client

    def complete(self, transcript: Sequence[Message]) -> GatewayResponse:
        """
        Send the transcript and tool specs, return the top choice decoded.

        Raises:
            BackendError: on any OpenAI client error or an empty choice list.
        """

        kwargs: Dict[str, Any] = {}
        if self.tool_specs:
            kwargs["tools"] = self.tool_specs
            kwargs["parallel_tool_calls"] = False   # One tool call per response

        try:
            resp = self.client.chat.completions.create(
                model=self.settings.model,
                messages=[m.to_openai() for m in transcript],
                **kwargs,
            )
        except OpenAIError as e:
            raise BackendError(f"failed chat: {e}") from e

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise BackendError("failed chat: backend returned no choices")

        for i, choice in enumerate(choices):
            logger.debug("choice %d: %s", i, choice.message)

        choice = choices[0]
        tool_call = extract_tool_call(choice)
        if tool_call is not None:
            return GatewayResponse(tool_call=tool_call)

        return GatewayResponse(answer=choice.message.content or "")
