"""Gemini transport client.

Architectural role:
    Executes the single outbound HTTP call for a prompt request and returns the
    raw status plus parsed body. Interpretation of that body belongs to
    `gemini_connect.llm.service`.

Model invocation flow:
    `service.complete` -> `send_request(url, api_key, payload)` ->
    `UpstreamReply(status_code, body)`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once and is bounded
    only by httpx's default timeout.

Failure handling model:
    - Transport failures (DNS, connect, read, timeout) raise `TransportError`.
    - Non-JSON or non-object bodies are tolerated and parsed as `{}`.
    - HTTP error statuses are returned, not raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from gemini_connect.core.errors import TransportError
from gemini_connect.llm.provider_config import API_KEY_HEADER


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamReply:
    """Status and parsed JSON body of one upstream response."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def parse_body(response: httpx.Response) -> dict[str, Any]:
    """Parse a response body as a JSON object.

    Returns:
        The decoded object, or `{}` when the body is empty, not JSON, or JSON
        that is not an object.
    """
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


async def send_request(
    url: str,
    api_key: str,
    payload: dict[str, Any],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UpstreamReply:
    """POST `payload` to `url` once and return the upstream reply.

    Args:
        url: Fully resolved Gemini method URL.
        api_key: Key sent in the `x-goog-api-key` header.
        payload: JSON request body.
        transport: Optional httpx transport override, used by tests.

    Raises:
        TransportError: When the request does not complete.
    """
    headers = {
        "Content-Type": "application/json",
        API_KEY_HEADER: api_key,
    }

    logger.info("Gemini request target: %s", url)

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.post(url, headers=headers, json=payload)
    except httpx.RequestError as exc:
        logger.warning("Gemini transport failure for %s: %s", url, type(exc).__name__)
        raise TransportError("upstream unreachable", details=str(exc)) from exc

    return UpstreamReply(status_code=response.status_code, body=parse_body(response))
