"""Provider configuration for the Gemini completion proxy.

Architectural role:
    Resolves the upstream credentials and model identifier consumed by
    `gemini_connect.llm.service.complete` and the endpoint constants consumed by
    `gemini_connect.llm.client`.

Model call flow integration:
    - `http_api` calls `load_provider_config()` once per prompt request.
    - `service.complete` validates the resulting `ProviderConfig`.
    - `client.send_request` attaches the key under `API_KEY_HEADER`.

Determinism:
    Deterministic for a fixed process environment and key file. Values are
    resolved at call time, never at import time, so configuration changes take
    effect on the next request without a restart.

Failure behavior:
    Missing key or model material is represented as `None`. Reporting it is the
    proxy's job, not this module's.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

API_KEY_HEADER = "x-goog-api-key"

# Environment names read per request.
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"
KEY_FILE_ENV = "GEMINI_KEY_FILE"


@dataclass(frozen=True)
class ProviderConfig:
    """Upstream call parameters resolved for one request.

    Attributes:
        api_key: Gemini API key, or `None` when not configured.
        model_id: Model resource name such as `models/gemini-1.5-flash`, or
            `None` when not configured.
    """

    api_key: str | None = None
    model_id: str | None = None

    def __repr__(self) -> str:
        key_state = "set" if self.api_key else "missing"
        return f"ProviderConfig(api_key=<{key_state}>, model_id={self.model_id!r})"


def _clean(value):
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_key(path):
    """Load an API key from a key file.

    Args:
        path: Key file path or `None`.

    Returns:
        Stripped file contents, or `None` when the path is unset, missing or
        empty.
    """
    if not path:
        return None
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return _clean(f.read())


def load_provider_config() -> ProviderConfig:
    """Resolve `ProviderConfig` from the current process environment.

    Resolution order for the key:
        1. `GEMINI_API_KEY`.
        2. Contents of the file named by `GEMINI_KEY_FILE`.

    Edge cases:
        - Whitespace-only values count as absent.
    """
    api_key = _clean(os.getenv(API_KEY_ENV))
    if api_key is None:
        api_key = load_key(os.getenv(KEY_FILE_ENV))

    return ProviderConfig(
        api_key=api_key,
        model_id=_clean(os.getenv(MODEL_ENV)),
    )
