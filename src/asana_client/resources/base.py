"""Shared record capabilities.

Records compose the capabilities they have instead of inheriting a common
base entity: a Story has an ID and a creation time, a Webhook filter has
neither.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Base for decoded API records. Unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class HasID(BaseModel):
    """Globally unique, read-only record ID (``gid`` on the wire)."""

    id: str = Field(default="", alias="gid")
    resource_type: str | None = None


class HasName(BaseModel):
    name: str = ""


class HasCreated(BaseModel):
    """Read-only creation timestamp."""

    created_at: datetime | None = None


class Compact(Record, HasID, HasName):
    """Compact reference embedded inside other records."""
