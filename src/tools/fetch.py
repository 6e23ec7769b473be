"""
src/tools/fetch.py — shared GET helper for tool handlers

Handlers receive an httpx.Client built once per process (timeout included),
so nothing here reads ambient state.
"""


import logging
from typing import Any, Dict

import httpx

from orchestrator.errors import ToolIOError


logger = logging.getLogger(__name__)


def get_text(http: httpx.Client, url: str, params: Dict[str, Any]) -> str:
    """
    GET `url` and return the body as text.

    Raises:
        ToolIOError: on transport failure, timeout, or a non-2xx status.
    """

    try:
        resp = http.get(url, params=params)
    except httpx.HTTPError as e:
        raise ToolIOError(f"GET {url} failed: {e}") from e

    logger.debug("GET %s -> %s", resp.url, resp.status_code)

    if not resp.is_success:
        raise ToolIOError(f"GET {url} returned HTTP {resp.status_code}: {resp.text[:200]}")

    return resp.text
