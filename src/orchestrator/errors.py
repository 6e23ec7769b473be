"""
src/orchestrator/errors.py

Error taxonomy. Everything is raised straight up the stack; only the CLI
catches AgentError and turns it into a message and an exit code.
"""


class AgentError(RuntimeError):
    """Base class for every failure that ends an inquiry."""


class InputError(AgentError):
    """Missing or too short inquiry on the command line."""


class ArgumentDecodeError(AgentError):
    """The model's tool-call payload is not a JSON object."""


class TypeMismatchError(AgentError):
    """A tool-call argument is missing or has the wrong primitive type."""


class BackendError(AgentError):
    """Transport, auth or rate-limit failure from the model backend."""


class ToolIOError(AgentError):
    """HTTP failure inside a tool handler (network error or non-2xx status)."""


class TooDeepError(AgentError):
    """The transcript grew past the depth bound."""
