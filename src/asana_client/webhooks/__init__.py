"""Inbound webhook support.

This module verifies and decodes deliveries sent by Asana to a registered
webhook target. It includes:

- SecretsVerifier: Incremental HMAC-SHA256 signature check
- handshake_secret: Read the one-time secret sent on registration
- parse_hook: Decode a delivery body into Event records

Usage:
    from asana_client.webhooks import handshake_secret, parse_hook, verify_signature

    secret = handshake_secret(headers)
    if secret is not None:
        store(secret)  # echo it back in the response as X-Hook-Secret
    else:
        verify_signature(headers, body, stored_secret)
        events = parse_hook(body)
"""

from __future__ import annotations

from asana_client.webhooks.events import (
    Event,
    EventActor,
    EventChange,
    EventResource,
    EventValue,
    parse_hook,
)
from asana_client.webhooks.exceptions import (
    MalformedSignatureError,
    MissingSignatureError,
    SignatureMismatchError,
    WebhookError,
)
from asana_client.webhooks.verifier import (
    HOOK_SECRET_HEADER,
    HOOK_SIGNATURE_HEADER,
    SecretsVerifier,
    handshake_secret,
    verify_signature,
)

__all__ = [
    # Verification
    "HOOK_SECRET_HEADER",
    "HOOK_SIGNATURE_HEADER",
    "SecretsVerifier",
    "handshake_secret",
    "verify_signature",
    # Events
    "Event",
    "EventActor",
    "EventChange",
    "EventResource",
    "EventValue",
    "parse_hook",
    # Exceptions
    "WebhookError",
    "MissingSignatureError",
    "MalformedSignatureError",
    "SignatureMismatchError",
]
