"""Upstream method selection and request shaping.

Architectural role:
    Maps a configured model identifier to the Gemini RPC method that serves it
    and builds the target address and request body for `client.send_request`.

Determinism:
    Every function here is pure. Selection is re-evaluated on every call so a
    model change in configuration is picked up by the next request.
"""

from enum import Enum

from gemini_connect.llm.provider_config import GEMINI_BASE_URL

BIDI_MODEL_TOKEN = "native-audio-preview"


class UpstreamMethod(str, Enum):
    """Gemini method names used as the `:method` suffix of the target URL."""

    STANDARD_GENERATE = "generateContent"
    BIDIRECTIONAL_GENERATE = "bidiGenerateContent"


def select_method(model_id: str | None) -> UpstreamMethod:
    """Select the upstream method for `model_id`.

    Native-audio preview models only accept `bidiGenerateContent`; the token is
    matched case-insensitively anywhere in the identifier. All other values,
    including `None`, select `generateContent`.
    """
    if model_id and BIDI_MODEL_TOKEN in model_id.lower():
        return UpstreamMethod.BIDIRECTIONAL_GENERATE
    return UpstreamMethod.STANDARD_GENERATE


def build_upstream_url(model_id: str, method: UpstreamMethod, base_url: str = GEMINI_BASE_URL) -> str:
    """Return `{base}/{model_id}:{method}`.

    The model id is used as configured (`models/gemini-1.5-flash`); a leading
    slash is dropped so the join never doubles it.
    """
    return f"{base_url.rstrip('/')}/{model_id.lstrip('/')}:{method.value}"


def build_payload(prompt: str) -> dict:
    """Wrap `prompt` as a single user-authored content turn."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": prompt}]},
        ],
    }
