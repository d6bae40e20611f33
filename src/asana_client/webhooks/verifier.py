"""Webhook signature verification.

Asana signs each delivery with HMAC-SHA256 over the raw body, keyed by the
secret exchanged during the registration handshake, and sends the hex digest
in ``X-Hook-Signature``. The handshake itself arrives with ``X-Hook-Secret``
instead; storing that secret is up to the receiver.

Usage:
    verifier = SecretsVerifier.from_headers(request.headers, secret)
    for chunk in request.stream():
        verifier.write(chunk)
    verifier.ensure()  # raises SignatureMismatchError on tampering
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
from collections.abc import Mapping

import httpx

from .exceptions import (
    MalformedSignatureError,
    MissingSignatureError,
    SignatureMismatchError,
    WebhookError,
)

HOOK_SECRET_HEADER = "X-Hook-Secret"
HOOK_SIGNATURE_HEADER = "X-Hook-Signature"


def _lookup(headers: Mapping[str, str], name: str) -> str | None:
    # httpx.Headers gives case-insensitive access for plain dicts too
    return httpx.Headers(headers).get(name)


def handshake_secret(headers: Mapping[str, str]) -> str | None:
    """Return the one-time handshake secret, or None for a normal delivery."""
    return _lookup(headers, HOOK_SECRET_HEADER) or None


class SecretsVerifier:
    """Accumulates an HMAC over a delivery body and checks it once.

    A verifier belongs to a single delivery. After ensure() it refuses
    further use.
    """

    def __init__(self, signature: bytes, secret: str | bytes):
        key = secret.encode("utf-8") if isinstance(secret, str) else secret
        self._signature = signature
        self._hmac = hmac.new(key, digestmod=hashlib.sha256)
        self._finalized = False

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], secret: str | bytes) -> SecretsVerifier:
        """Create a verifier from the delivery headers.

        Raises:
            MissingSignatureError: If X-Hook-Signature is absent or empty.
            MalformedSignatureError: If X-Hook-Signature is not hexadecimal.
        """
        value = _lookup(headers, HOOK_SIGNATURE_HEADER)
        if not value:
            raise MissingSignatureError(HOOK_SIGNATURE_HEADER)
        try:
            signature = binascii.unhexlify(value.strip())
        except (binascii.Error, ValueError) as e:
            raise MalformedSignatureError(HOOK_SIGNATURE_HEADER, value) from e
        return cls(signature, secret)

    def write(self, chunk: bytes) -> int:
        """Feed a chunk of the raw body. Returns the number of bytes consumed."""
        if self._finalized:
            raise WebhookError("Verifier already finalized", "Create a new verifier per delivery.")
        self._hmac.update(chunk)
        return len(chunk)

    def ensure(self) -> None:
        """Compare the accumulated digest with the delivered signature.

        Raises:
            SignatureMismatchError: If the digests differ.
        """
        if self._finalized:
            raise WebhookError("Verifier already finalized", "Create a new verifier per delivery.")
        self._finalized = True
        computed = self._hmac.digest()
        if not hmac.compare_digest(computed, self._signature):
            raise SignatureMismatchError(computed.hex())


def verify_signature(headers: Mapping[str, str], body: bytes, secret: str | bytes) -> None:
    """Verify a fully-read delivery body in one call."""
    verifier = SecretsVerifier.from_headers(headers, secret)
    verifier.write(body)
    verifier.ensure()
