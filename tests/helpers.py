"""
Test helpers: a recording upstream stub and Gemini body builders.
"""

import json

import httpx

TEST_API_KEY = "test-secret-key-123"
TEST_MODEL = "models/gemini-1.5-flash"


class RecordingUpstream:
    """Deterministic upstream stub that records every request it receives.

    `error` is an exception factory taking the outgoing `httpx.Request`; when
    set, the stub raises it instead of answering.
    """

    def __init__(self, status_code=200, body=None, text=None, error=None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.error = error
        self.requests = []

    @property
    def call_count(self):
        return len(self.requests)

    def last_json(self):
        return json.loads(self.requests[-1].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body if self.body is not None else {})

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


def candidates_body(*texts):
    return {
        "candidates": [
            {"content": {"parts": [{"text": t} for t in texts]}},
        ]
    }


def connection_refused(request):
    return httpx.ConnectError("[Errno 111] Connection refused", request=request)
