"""Error taxonomy for the completion proxy.

Architectural role:
    Defines the exceptions raised inside `gemini_connect.llm` while a prompt is
    being served. `service.complete` catches every one of them and converts it
    into a `CompletionFailure` value, so none of these escape to the HTTP layer.

Each error carries a human-readable message, an optional machine-readable
`details` payload and the HTTP status the inbound contract assigns to it.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Mutually exclusive failure categories."""

    INVALID_REQUEST = "InvalidRequest"
    CONFIGURATION_ERROR = "ConfigurationError"
    TRANSPORT_ERROR = "TransportError"
    UPSTREAM_ERROR = "UpstreamError"
    EMPTY_RESPONSE = "EmptyResponse"
    INTERNAL_ERROR = "InternalError"


class ProxyError(Exception):
    """Base class for failures surfaced to the proxy caller."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRequest(ProxyError):
    """The caller sent an empty or malformed prompt."""

    kind = ErrorKind.INVALID_REQUEST
    status_code = 400


class ConfigurationError(ProxyError):
    """API key or model id is not configured for this deployment."""

    kind = ErrorKind.CONFIGURATION_ERROR
    status_code = 500


class TransportError(ProxyError):
    """The outbound call did not complete (DNS, connect, read failure)."""

    kind = ErrorKind.TRANSPORT_ERROR
    status_code = 502


class UpstreamError(ProxyError):
    """The upstream answered with a non-success status."""

    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: int, details: Any = None):
        super().__init__(message, details)
        self.status_code = status_code


class EmptyResponse(ProxyError):
    """The upstream succeeded but returned no usable text."""

    kind = ErrorKind.EMPTY_RESPONSE
    status_code = 502


class InternalError(ProxyError):
    kind = ErrorKind.INTERNAL_ERROR
    status_code = 500
