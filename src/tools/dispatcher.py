"""
src/tools/dispatcher.py — execute one tool call requested by the model

Steps for `invoke(name, raw_args)`:
1) decode the raw payload (JSON text or an already decoded mapping)
2) log the call
3) look the name up; an unknown name yields an empty result, not an error
4) validate arguments against the tool's schema model (strict types)
5) run the handler and return its text untouched

Handler errors (ToolIOError and anything else) propagate unchanged.
"""


import json
import logging
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from orchestrator.errors import ArgumentDecodeError, TypeMismatchError
from orchestrator.models import ToolResult
from tools.registry import ToolRegistry


logger = logging.getLogger(__name__)


def decode_arguments(raw_args: Union[str, Mapping[str, Any], None]) -> Dict[str, Any]:
    """Turn the wire payload into a field map."""

    if raw_args is None or raw_args == "":
        return {}
    if isinstance(raw_args, Mapping):
        return dict(raw_args)

    try:
        args = json.loads(raw_args)
    except (TypeError, ValueError) as e:
        raise ArgumentDecodeError(f"Malformed tool arguments {raw_args!r}: {e}") from e

    if not isinstance(args, dict):
        raise ArgumentDecodeError(f"Tool arguments must be a JSON object, got {type(args).__name__}")

    return args


class ToolDispatcher:

    def __init__(self, registry: ToolRegistry):

        self.registry = registry

    def invoke(self, name: str, raw_args: Union[str, Mapping[str, Any], None]) -> ToolResult:

        args = decode_arguments(raw_args)
        logger.info("invoke function %s %s", name, args)

        tool = self.registry.get(name)
        if tool is None:
            # No error for unknown names; the model sees an empty tool message.
            logger.warning("Unknown tool %r requested; returning empty result", name)
            return ToolResult(name=name, content="")

        try:
            validated = tool.schema.model_validate(args)
        except ValidationError as e:
            raise TypeMismatchError(f"Bad arguments for {name}: {e}") from e

        return ToolResult(name=name, content=tool.handler(validated))
