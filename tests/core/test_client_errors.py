"""Tests for Client error handling - transport, API and decode errors."""

import httpx
import pytest
from pydantic import BaseModel

from asana_client.core.exceptions import (
    APIError,
    AsanaError,
    DecodeError,
    TransportError,
    TransportTimeoutError,
)
from tests.fixtures.http import RecordingHandler


class Strict(BaseModel):
    gid: str
    count: int


# =============================================================================
# Transport Error Tests
# =============================================================================


class TestTransportErrors:
    """Tests for failures before a response arrives."""

    def test_connect_error(self, make_client):
        handler = RecordingHandler(httpx.ConnectError("Connection refused"))
        with pytest.raises(TransportError) as exc_info:
            make_client(handler).get("/users/me")
        assert exc_info.value.url.endswith("/users/me")
        assert "Connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self, make_client):
        handler = RecordingHandler(httpx.ReadTimeout("Timed out"))
        with pytest.raises(TransportTimeoutError) as exc_info:
            make_client(handler).get("/users/me")
        assert exc_info.value.timeout == 30.0
        assert "timed out" in str(exc_info.value)

    def test_per_call_timeout_reported(self, make_client):
        handler = RecordingHandler(httpx.ConnectTimeout("Timed out"))
        with pytest.raises(TransportTimeoutError) as exc_info:
            make_client(handler).get("/users/me", timeout=2.5)
        assert exc_info.value.timeout == 2.5

    def test_too_many_redirects(self, make_client):
        handler = RecordingHandler(httpx.TooManyRedirects("Exceeded maximum allowed redirects."))
        with pytest.raises(TransportError) as exc_info:
            make_client(handler).get("/users/me")
        assert "redirects" in str(exc_info.value)

    def test_timeout_is_transport_error(self):
        assert issubclass(TransportTimeoutError, TransportError)


# =============================================================================
# API Error Tests
# =============================================================================


class TestAPIErrors:
    """Tests for non-2xx responses."""

    def test_error_envelope(self, make_client):
        handler = RecordingHandler(
            httpx.Response(
                403,
                json={"errors": [{"message": "Forbidden", "phrase": "6 sad squid snuggle softly"}]},
            )
        )
        with pytest.raises(APIError) as exc_info:
            make_client(handler).get("/workspaces/1")

        error = exc_info.value
        assert error.status_code == 403
        assert error.errors == [{"message": "Forbidden", "phrase": "6 sad squid snuggle softly"}]
        assert "HTTP 403" in str(error)
        assert "Forbidden" in str(error)

    def test_non_json_error_body(self, make_client):
        handler = RecordingHandler(httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(APIError) as exc_info:
            make_client(handler).get("/workspaces")
        assert exc_info.value.status_code == 502
        assert exc_info.value.errors == []
        assert exc_info.value.body == "Bad Gateway"

    def test_post_error(self, make_client):
        handler = RecordingHandler(
            httpx.Response(400, json={"errors": [{"message": "target: Invalid URL"}]})
        )
        with pytest.raises(APIError, match="Invalid URL"):
            make_client(handler).post("/webhooks", {"target": "nope"})

    def test_api_error_is_asana_error(self):
        assert issubclass(APIError, AsanaError)


# =============================================================================
# Decode Error Tests
# =============================================================================


class TestDecodeErrors:
    """Tests for responses that are not the expected JSON."""

    def test_malformed_json(self, make_client):
        handler = RecordingHandler(httpx.Response(200, text="{not json"))
        with pytest.raises(DecodeError, match="not valid JSON"):
            make_client(handler).get("/users/me")

    def test_envelope_not_object(self, make_client):
        handler = RecordingHandler(httpx.Response(200, json=[1, 2, 3]))
        with pytest.raises(DecodeError, match="not a JSON object"):
            make_client(handler).get("/users/me")

    def test_shape_mismatch(self, make_client):
        handler = RecordingHandler({"data": {"gid": "1", "count": "many"}})
        with pytest.raises(DecodeError, match="expected shape"):
            make_client(handler).get("/things/1", Strict)

    def test_malformed_next_page(self, make_client):
        handler = RecordingHandler({"data": [], "next_page": {"path": "/x"}})
        with pytest.raises(DecodeError, match="next_page"):
            make_client(handler).get("/things")

    def test_body_not_utf8(self, make_client):
        handler = RecordingHandler(httpx.Response(200, content=b'{"data": "\xff"}'))
        with pytest.raises(DecodeError, match="not valid JSON") as exc_info:
            make_client(handler).get("/users/me")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_content_decoding_failure(self, make_client):
        handler = RecordingHandler(httpx.DecodingError("Error -3 while decompressing data"))
        with pytest.raises(DecodeError, match="could not be decoded"):
            make_client(handler).get("/users/me")
