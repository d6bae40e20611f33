"""Webhook event payloads.

A delivery body is ``{"events": [...]}``. Each event names the resource that
changed, the user who changed it, and optionally the parent and the field
change.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from asana_client.core.exceptions import DecodeError


class _EventPart(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # JSON null decodes to the member's zero value
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class EventActor(_EventPart):
    """The user that triggered the event."""

    id: str = Field(default="", alias="gid")
    resource_type: str = ""


class EventResource(_EventPart):
    """A resource or parent referenced by an event."""

    id: str = Field(default="", alias="gid")
    resource_type: str = ""
    resource_subtype: str | None = None


class EventValue(_EventPart):
    id: str = Field(default="", alias="gid")
    resource_type: str = ""


class EventChange(_EventPart):
    """The field-level change carried by a "changed" event."""

    field: str = ""
    action: str = ""
    new_value: EventValue | None = None


class Event(_EventPart):
    """A single webhook event."""

    actor: EventActor | None = Field(default=None, alias="user")
    created_at: datetime | None = None
    action: str = ""
    parent: EventResource | None = None
    change: EventChange | None = None
    resource: EventResource = Field(default_factory=EventResource)

    def __str__(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class EventData(_EventPart):
    events: list[Event] = Field(default_factory=list)


def parse_hook(body: bytes | str | IO[bytes]) -> list[Event]:
    """Decode a webhook delivery into its events, preserving order.

    Args:
        body: Raw request body, as bytes, text or a readable binary stream.

    Raises:
        DecodeError: If the body is not JSON or the events are malformed.
    """
    raw = body if isinstance(body, (bytes, str)) else body.read()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError("Cannot decode webhook payload", str(e)) from e

    if not isinstance(data, dict):
        raise DecodeError("Cannot decode webhook payload", "Body is not a JSON object")

    try:
        return EventData.model_validate(data).events
    except ValidationError as e:
        raise DecodeError(
            "Webhook payload has malformed events",
            f"{e.error_count()} validation errors: {e.errors()[0]['msg']}",
        ) from e
