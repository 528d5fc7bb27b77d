"""HTTP session helpers."""

import json
from typing import Any

import aiohttp

from ..exceptions import ResponseParseError
from .config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT


def build_timeout(
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
) -> aiohttp.ClientTimeout:
    """Convert millisecond timeouts into an aiohttp timeout."""
    return aiohttp.ClientTimeout(
        sock_connect=connect_timeout / 1000, sock_read=read_timeout / 1000
    )


async def create_session(
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
) -> aiohttp.ClientSession:
    """Create an aiohttp session for API calls.

    Args:
        connect_timeout: Connect timeout in milliseconds
        read_timeout: Read timeout in milliseconds

    Returns:
        New client session (caller closes it)
    """
    return aiohttp.ClientSession(timeout=build_timeout(connect_timeout, read_timeout))


def parse_json_response(text: str) -> Any:
    """Parse a response body as JSON.

    Raises:
        ResponseParseError: If the body is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in response body: {e}") from e
