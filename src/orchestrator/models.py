"""
src/orchestrator/models.py

Pydantic models for the transcript, tool-calling I/O and audit entries.
"""


import json
from typing import Any, Dict, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


Role = Literal["system", "user", "assistant", "tool"]


class ToolCallRequest(BaseModel):
    """The model's decision to call one tool instead of answering."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str
    arguments: Union[str, Dict[str, Any]] = "{}"    # Raw payload, decoded by the dispatcher

    def arguments_json(self) -> str:

        if isinstance(self.arguments, str):
            return self.arguments

        return json.dumps(self.arguments, ensure_ascii=False)


class Message(BaseModel):
    """
    One transcript entry.

    An assistant message carries either `content` or a `tool_call`. A tool
    message carries the tool's output in `content`, the tool `name`, and the
    `tool_call_id` of the assistant message directly before it.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: Optional[str] = None
    name: Optional[str] = None
    tool_call: Optional[ToolCallRequest] = None
    tool_call_id: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)

    @classmethod
    def assistant_tool_call(cls, call: ToolCallRequest) -> "Message":
        return cls(role="assistant", tool_call=call)

    @classmethod
    def tool_result(cls, call: ToolCallRequest, result: "ToolResult") -> "Message":
        return cls(role="tool", name=call.name, tool_call_id=call.id, content=result.content)

    def to_openai(self) -> Dict[str, Any]:
        """Render in the chat completions wire shape."""

        out: Dict[str, Any] = {"role": self.role, "content": self.content}

        if self.tool_call is not None:
            out["tool_calls"] = [{
                "id": self.tool_call.id,
                "type": "function",
                "function": {
                    "name": self.tool_call.name,
                    "arguments": self.tool_call.arguments_json(),
                },
            }]
        if self.role == "tool":
            out["tool_call_id"] = self.tool_call_id
            out["name"] = self.name
            out["content"] = self.content or ""

        return out


Transcript = Tuple[Message, ...]


class ToolDefinition(BaseModel):
    """Name, description and JSON-schema parameter contract advertised to the model."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Dict[str, Any]


class ToolResult(BaseModel):

    name: str
    content: str = ""


class GatewayResponse(BaseModel):
    """Top choice of one completion: a terminal answer or a tool call."""

    answer: Optional[str] = None
    tool_call: Optional[ToolCallRequest] = None

    @property
    def wants_tool(self) -> bool:
        return self.tool_call is not None


class AuditEntry(BaseModel):

    step: str
    ok: bool
    detail: str
    tool_call: Optional[ToolCallRequest] = None
    tool_result: Optional[ToolResult] = None


class OrchestratorResult(BaseModel):

    answer: str
    transcript: List[Message]   # Final transcript, closing answer included
    audit: List[AuditEntry] = Field(default_factory=list)

    @property
    def tool_rounds(self) -> int:
        return sum(1 for a in self.audit if a.step == "tool_result")
