"""
src/app.py

Command-line entry point:

    weather-assistant What is the weather in Paris?

Words are joined by spaces into one inquiry. The answer goes to stdout; any
failure goes to stderr with exit code 1. Logs are written to stderr.
"""


import logging
from typing import List, Optional

import httpx
import typer

from config import MIN_INQUIRY_LENGTH, Settings, load_settings
from orchestrator.errors import AgentError, InputError
from orchestrator.llm_openai import OpenAIGateway
from orchestrator.router import query
from tools.dispatcher import ToolDispatcher
from tools.registry import default_registry


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(add_completion=False, help="Answer a question using an LLM with geocoding and weather tools.")


def parse_inquiry(words: Optional[List[str]]) -> str:
    """Join the positional words; reject anything shorter than MIN_INQUIRY_LENGTH."""

    inquiry = " ".join(words or [])

    if len(inquiry) < MIN_INQUIRY_LENGTH:
        raise InputError("Supply some inquiry!")

    return inquiry


def answer(inquiry: str, settings: Settings) -> str:
    """Wire settings, HTTP client, tools and gateway together for one inquiry."""

    with httpx.Client(timeout=settings.http_timeout) as http:
        registry = default_registry(settings, http)
        result = query(
            inquiry,
            gateway=OpenAIGateway(settings, registry),
            dispatcher=ToolDispatcher(registry),
        )

    return result.answer


@app.command()
def ask(
    words: Optional[List[str]] = typer.Argument(None, help="The inquiry, e.g. What's the weather in Paris?"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log tool calls and model choices."),
):
    settings = load_settings()
    logging.basicConfig(level="DEBUG" if verbose else settings.log_level, format=LOG_FORMAT)

    try:
        inquiry = parse_inquiry(words)
    except InputError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    try:
        text = answer(inquiry, settings)
    except AgentError as e:
        typer.echo(f"Failed query answer: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(text)


def main():
    app()


if __name__ == "__main__":

    main()

# EOF
