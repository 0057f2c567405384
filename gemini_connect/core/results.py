"""Completion result envelope returned by `service.complete`.

Architectural role:
    Carries the outcome of one prompt request from the proxy to the HTTP
    adapter. A result is always exactly one of `CompletionSuccess` or
    `CompletionFailure`; the adapter maps it to the inbound JSON contract with
    `to_response_body`.
"""

from dataclasses import dataclass
from typing import Any, Union

from gemini_connect.core.errors import ErrorKind, ProxyError


@dataclass(frozen=True)
class CompletionSuccess:
    text: str


@dataclass(frozen=True)
class CompletionFailure:
    """Normalized failure.

    Attributes:
        kind: Failure category.
        message: Human-readable message exposed as `error`.
        details: Optional diagnostic payload exposed as `details`.
        status_code: HTTP status the inbound contract assigns to this failure.
    """

    kind: ErrorKind
    message: str
    details: Any = None
    status_code: int = 500

    @classmethod
    def from_error(cls, err: ProxyError) -> "CompletionFailure":
        return cls(
            kind=err.kind,
            message=err.message,
            details=err.details,
            status_code=err.status_code,
        )


CompletionResult = Union[CompletionSuccess, CompletionFailure]


def to_response_body(result: CompletionResult) -> tuple[int, dict]:
    """Map a result to `(status_code, json_body)`.

    Success -> `(200, {"response": text})`.
    Failure -> `(status, {"error": message})`, plus `details` when present.
    """
    if isinstance(result, CompletionSuccess):
        return 200, {"response": result.text}

    body = {"error": result.message}
    if result.details is not None:
        body["details"] = result.details
    return result.status_code, body
