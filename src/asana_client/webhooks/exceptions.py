"""Webhook authentication errors.

Any of these means the delivery must be rejected.
"""

from __future__ import annotations

from asana_client.core.exceptions import AsanaError


class WebhookError(AsanaError):
    """Base exception for inbound webhook failures."""


class MissingSignatureError(WebhookError):
    """Raised when a delivery has no signature header."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Missing {header} header", "Unsigned deliveries must be rejected.")


class MalformedSignatureError(WebhookError):
    """Raised when the signature header is not hexadecimal."""

    def __init__(self, header: str, value: str):
        self.header = header
        self.value = value
        super().__init__(f"{header} header is not valid hexadecimal", f"Received {value!r}")


class SignatureMismatchError(WebhookError):
    """Raised when the computed HMAC does not match the delivered signature."""

    def __init__(self, computed: str):
        self.computed = computed
        super().__init__("Webhook signature does not match", f"Computed signature {computed}")
