"""Transport Client - authenticated HTTP access to the Asana API.

Every request:
- carries ``Authorization: Bearer <token>`` and the feature headers
- merges the configured default options with the per-call overrides
- sends options as query parameters (GET, DELETE) or inside the JSON
  envelope ``{"data": ..., "options": ...}`` (POST, PUT)
- decodes the ``data`` member of the response and its ``next_page`` cursor

Errors are raised as TransportError, APIError or DecodeError and are never
retried here.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import ClientConfig
from .exceptions import APIError, DecodeError, TransportError, TransportTimeoutError
from .options import Options, merge_options
from .pager import NextPage

logger = logging.getLogger(__name__)

_QUERY_METHODS = ("GET", "DELETE")


class Client:
    """Synchronous Asana API client.

    The client keeps no per-request state, so one instance can serve several
    threads as long as each call passes its own options.

    Example:
        >>> with Client(ClientConfig(token="0/abc")) as client:
        ...     me, _ = client.get("/users/me")
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None):
        """Initialize the client.

        Args:
            config: Immutable client configuration.
            http_client: Optional pre-built httpx client (e.g. with a mock
                transport). The caller keeps ownership of it.
        """
        self.config = config
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=config.timeout)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool if this client created it."""
        if self._owns_http:
            self._http.close()

    # -------------------------------------------------------------------------
    # Public verbs
    # -------------------------------------------------------------------------

    def get(
        self,
        path: str,
        result_type: Any = None,
        options: Sequence[Options | None] = (),
        *,
        timeout: float | None = None,
    ) -> tuple[Any, NextPage | None]:
        """Fetch a record or one page of a listing.

        Args:
            path: Resource path relative to the base URL, e.g. "/users/me".
            result_type: Shape to decode ``data`` into (a pydantic model,
                ``list[Model]``...). Raw JSON is returned when None.
            options: Overrides merged over the configured default options.
            timeout: Per-call deadline in seconds.

        Returns:
            Tuple of (decoded data, next page cursor or None).
        """
        payload = self._request("GET", path, options, timeout=timeout)
        return self._decode(payload, result_type, path), self._next_page(payload, path)

    def post(
        self,
        path: str,
        body: Any,
        result_type: Any = None,
        options: Sequence[Options | None] = (),
        *,
        timeout: float | None = None,
    ) -> Any:
        """Create a resource and return the decoded response data."""
        payload = self._request("POST", path, options, body=body, timeout=timeout)
        return self._decode(payload, result_type, path)

    def put(
        self,
        path: str,
        body: Any,
        result_type: Any = None,
        options: Sequence[Options | None] = (),
        *,
        timeout: float | None = None,
    ) -> Any:
        """Update a resource and return the decoded response data."""
        payload = self._request("PUT", path, options, body=body, timeout=timeout)
        return self._decode(payload, result_type, path)

    def delete(
        self,
        path: str,
        options: Sequence[Options | None] = (),
        *,
        timeout: float | None = None,
    ) -> None:
        """Delete a resource."""
        self._request("DELETE", path, options, timeout=timeout)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def trace(self, message: str, level: int = 1) -> None:
        """Log a trace line when the configured verbosity reaches level."""
        if self.config.verbose >= level:
            logger.debug(message)

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        options: Sequence[Options | None],
        *,
        body: Any = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        merged = merge_options(self.config.default_options, options)
        url = self._url(path)
        effective_timeout = timeout if timeout is not None else self.config.timeout
        debug = merged.debug if merged.debug is not None else self.config.debug

        headers = {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": "application/json",
            **merged.to_headers(),
        }

        params: dict[str, str] | None = None
        envelope: dict[str, Any] | None = None
        if method in _QUERY_METHODS:
            params = merged.to_query_params()
        else:
            envelope = {"data": body}
            body_options = merged.to_body_options()
            if body_options:
                envelope["options"] = body_options

        self.trace(f"{method} {url} {params or ''}".rstrip())
        if debug and envelope is not None:
            logger.debug(f"Request body: {json.dumps(envelope, default=str)}")

        try:
            response = self._http.request(
                method,
                url,
                params=params,
                json=envelope,
                headers=headers,
                timeout=effective_timeout,
            )
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(url, effective_timeout) from e
        except httpx.DecodingError as e:
            raise DecodeError(f"Response from {method} {path} could not be decoded", str(e)) from e
        except httpx.RequestError as e:
            raise TransportError(f"Failed to connect to {url}", f"Network error: {e}", url) from e

        if debug:
            logger.debug(f"Response {response.status_code}: {response.text}")

        if not response.is_success:
            raise self._api_error(response)

        if not response.content:
            return {}

        try:
            payload = response.json()
        except json.JSONDecodeError as e:
            raise DecodeError(
                f"Response from {method} {path} is not valid JSON",
                f"Parse error at line {e.lineno}, column {e.colno}: {e.msg}",
            ) from e
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Response from {method} {path} is not valid JSON",
                f"Body is not valid {e.encoding}: {e.reason} at byte {e.start}",
            ) from e

        if not isinstance(payload, dict):
            raise DecodeError(
                f"Response from {method} {path} is not a JSON object",
                f"Received {type(payload).__name__}",
            )
        return payload

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        errors: list[dict[str, Any]] | None = None
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("errors"), list):
            errors = [e for e in data["errors"] if isinstance(e, dict)]
        return APIError(response.status_code, errors, response.text or None)

    @staticmethod
    def _decode(payload: dict[str, Any], result_type: Any, path: str) -> Any:
        data = payload.get("data")
        if result_type is None:
            return data
        try:
            return TypeAdapter(result_type).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response from {path} does not match the expected shape",
                f"{e.error_count()} validation errors: {e.errors()[0]['msg']}",
            ) from e

    def _next_page(self, payload: dict[str, Any], path: str) -> NextPage | None:
        raw = payload.get("next_page")
        if raw is None:
            return None
        try:
            next_page = NextPage.model_validate(raw)
        except ValidationError as e:
            raise DecodeError(f"Response from {path} has a malformed next_page", str(e)) from e
        self.trace(f"Next page offset {next_page.offset}", level=2)
        return next_page
