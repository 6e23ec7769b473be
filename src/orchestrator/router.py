"""
src/orchestrator/router.py

Router: runs the function-calling loop over a transcript, executes tool calls
through the dispatcher, and returns a tidy result.

Loop states:
    Deciding -> (answer) -> Done
    Deciding -> (tool call) -> dispatch -> Deciding with transcript + 2 entries
    Deciding -> (transcript too long) -> TooDeepError
"""


import logging
from typing import List, Sequence

from config import MAX_TRANSCRIPT_LENGTH
from orchestrator import prompts
from orchestrator.errors import TooDeepError
from orchestrator.models import AuditEntry, Message, OrchestratorResult, Transcript


logger = logging.getLogger(__name__)


# -------- Orchestrate ----------------------------------------------------------
def run(
    transcript: Sequence[Message],
    *,
    gateway,
    dispatcher,
    max_transcript_length: int = MAX_TRANSCRIPT_LENGTH,
) -> OrchestratorResult:
    """
    Drive the model until it answers.

    `gateway` needs `complete(transcript) -> GatewayResponse`; `dispatcher`
    needs `invoke(name, raw_args) -> ToolResult`. Gateway and dispatcher
    errors propagate and end the run.

    Raises:
        TooDeepError: once the transcript holds more than `max_transcript_length` entries.
    """

    current: Transcript = tuple(transcript)
    audit: List[AuditEntry] = []
    round_idx = 0

    while True:
        # Each tool round-trip adds two entries (request + result)
        if len(current) > max_transcript_length:
            raise TooDeepError(
                f"too in-depth conversation: {len(current)} messages after {round_idx} rounds "
                f"(limit {max_transcript_length})"
            )

        round_idx += 1
        resp = gateway.complete(current)

        # If the model returned a normal message and no tool call, we are done
        if not resp.wants_tool:
            answer = resp.answer or ""
            audit.append(AuditEntry(step=f"model_round_{round_idx}", ok=True, detail="No tool call: returning text."))
            return OrchestratorResult(answer=answer, transcript=list(current) + [Message.assistant(answer)], audit=audit)

        tc = resp.tool_call
        audit.append(AuditEntry(step="tool_call", ok=True, detail=f"Calling {tc.name}", tool_call=tc))
        result = dispatcher.invoke(tc.name, tc.arguments)
        audit.append(AuditEntry(step="tool_result", ok=True, detail=f"{len(result.content)} chars", tool_call=tc, tool_result=result))

        current = current + (Message.assistant_tool_call(tc), Message.tool_result(tc, result))
        logger.debug("round %d: %s done, transcript now %d messages", round_idx, tc.name, len(current))


def query(inquiry: str, *, gateway, dispatcher, max_transcript_length: int = MAX_TRANSCRIPT_LENGTH) -> OrchestratorResult:
    """
    Entry point: seed a fresh transcript with the system instructions and the
    inquiry, then run the loop.
    """

    return run(
        prompts.seed_transcript(inquiry),
        gateway=gateway,
        dispatcher=dispatcher,
        max_transcript_length=max_transcript_length,
    )
