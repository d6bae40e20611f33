"""Canned HTTP traffic for client tests.

HTTP is served by httpx.MockTransport so no test touches the network.
"""

from __future__ import annotations

from typing import Any

import httpx

BASE_URL = "https://asana.test/api/1.0"


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses.

    Each response is one of:
    - dict: served as a 200 JSON body
    - httpx.Response: served as-is
    - Exception: raised from the transport
    """

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return httpx.Response(200, json=response)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def page(records: list[dict[str, Any]], offset: str | None = None) -> dict[str, Any]:
    """Build a listing envelope, with a next_page cursor when offset is given."""
    envelope: dict[str, Any] = {"data": records}
    if offset is not None:
        envelope["next_page"] = {"offset": offset, "path": f"/?offset={offset}", "uri": None}
    else:
        envelope["next_page"] = None
    return envelope
