"""Completion proxy: prompt in, normalized envelope out.

Architectural role:
    Canonical entrypoint used by the HTTP adapter for `/api/gemini`. Bridges a
    caller prompt and a per-request `ProviderConfig` to the transport in
    `gemini_connect.llm.client`, and hides upstream response variability
    behind `CompletionResult`.

Model call flow:
    validate prompt/config -> `select_method(model_id)` -> URL + payload ->
    `client.send_request(...)` -> interpret status/body -> result.

Failure handling model:
    Every failure is raised internally as a `ProxyError` subclass and
    converted into a `CompletionFailure` before returning. Unexpected faults
    become `InternalError`. Nothing escapes `complete`.

Determinism:
    Stateless. Identical inputs against a deterministic upstream yield
    identical results.
"""

import logging
from typing import Any

import httpx

from gemini_connect.core.errors import (
    ConfigurationError,
    EmptyResponse,
    InternalError,
    InvalidRequest,
    ProxyError,
    UpstreamError,
)
from gemini_connect.core.results import CompletionFailure, CompletionResult, CompletionSuccess
from gemini_connect.llm.client import send_request
from gemini_connect.llm.methods import build_payload, build_upstream_url, select_method
from gemini_connect.llm.provider_config import ProviderConfig


logger = logging.getLogger(__name__)

GENERIC_UPSTREAM_MESSAGE = "upstream error"
EMPTY_RESPONSE_MESSAGE = "no text returned from upstream"


def extract_text(body: Any) -> str:
    """Join the non-empty text parts of the first candidate.

    Total over any input: missing keys, wrong types and empty lists all
    yield `""`.
    """
    if not isinstance(body, dict):
        return ""

    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""

    texts = []
    for part in parts:
        if not isinstance(part, dict):
            continue
        text = part.get("text")
        if isinstance(text, str) and text:
            texts.append(text)

    return "\n".join(texts).strip()


def upstream_error_message(body: Any) -> str:
    """Return `body.error.message` when present, else a generic message."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message.strip():
                return message
    return GENERIC_UPSTREAM_MESSAGE


def _validate(prompt: Any, config: ProviderConfig) -> None:
    # Order matters: the first failing check wins.
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidRequest("prompt required")
    if not config.api_key:
        raise ConfigurationError("api key missing")
    if not config.model_id:
        raise ConfigurationError("model missing")


async def _complete(
    prompt: str,
    config: ProviderConfig,
    transport: httpx.AsyncBaseTransport | None,
) -> CompletionSuccess:
    _validate(prompt, config)

    method = select_method(config.model_id)
    url = build_upstream_url(config.model_id, method)

    reply = await send_request(url, config.api_key, build_payload(prompt), transport=transport)

    if not reply.ok:
        raise UpstreamError(
            upstream_error_message(reply.body),
            status_code=reply.status_code,
            details=reply.body,
        )

    text = extract_text(reply.body)
    if not text:
        raise EmptyResponse(EMPTY_RESPONSE_MESSAGE, details=reply.body)

    return CompletionSuccess(text=text)


async def complete(
    prompt: Any,
    config: ProviderConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CompletionResult:
    """Serve one prompt against the configured Gemini model.

    Args:
        prompt: Caller prompt. Must be a string with non-whitespace content.
        config: Credentials and model id resolved for this request.
        transport: Optional httpx transport override, used by tests.

    Returns:
        `CompletionSuccess` with the extracted text, or `CompletionFailure`
        describing exactly one of the failure kinds in `ErrorKind`.
    """
    try:
        return await _complete(prompt, config, transport)

    except InvalidRequest as err:
        logger.info("Rejected prompt request: %s", err.message)
        return CompletionFailure.from_error(err)

    except ProxyError as err:
        logger.warning(
            "Completion failed: kind=%s status=%s message=%s model=%s",
            err.kind.value,
            err.status_code,
            err.message,
            config.model_id,
        )
        return CompletionFailure.from_error(err)

    except Exception as exc:
        logger.exception("Completion crashed for model=%s", config.model_id)
        return CompletionFailure.from_error(InternalError("completion failed", details=str(exc)))
