"""
src/orchestrator/prompts.py

Fixed system instructions and the seed transcript for one inquiry.
"""


from typing import Tuple

from config import MAX_ANSWER_WORDS
from orchestrator.models import Message, Transcript


SYSTEM_INSTRUCTIONS: Tuple[str, ...] = (
    "Only use the functions you have been provided with.",
    f"Only answer in {MAX_ANSWER_WORDS} words or less.",
)


def seed_transcript(inquiry: str) -> Transcript:
    """Both system instructions followed by the user's inquiry."""

    return tuple(Message.system(s) for s in SYSTEM_INSTRUCTIONS) + (Message.user(inquiry),)
