"""Webhook registrations.

These helpers manage the webhooks registered by the authenticated app.
Verifying and decoding the deliveries lives in asana_client.webhooks.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from asana_client.core.client import Client
from asana_client.core.options import Options
from asana_client.core.pager import NextPage, page_all

from .base import Compact, HasCreated, HasID, Record

PAGE_SIZE = 100


class Filter(BaseModel):
    """Restricts which events a webhook delivers."""

    model_config = ConfigDict(frozen=True)

    action: str
    resource_type: str
    resource_subtype: str | None = None
    fields: list[str] | None = None


class Webhook(Record, HasID, HasCreated):
    active: bool = False
    resource: Compact | None = None
    target: str = ""
    filters: list[Filter] = []
    last_failure_at: datetime | None = None
    last_failure_content: str | None = None
    last_success_at: datetime | None = None


def webhooks(
    client: Client, workspace_id: str, options: Sequence[Options] = ()
) -> tuple[list[Webhook], NextPage | None]:
    """List one page of webhooks registered in a workspace."""
    client.trace(f"Listing webhooks for workspace {workspace_id}")
    return client.get("/webhooks", list[Webhook], [Options(workspace=workspace_id), *options])


def all_webhooks(
    client: Client,
    workspace_id: str,
    options: Sequence[Options] = (),
    *,
    cancel: threading.Event | None = None,
) -> list[Webhook]:
    """List every webhook registered in a workspace."""
    return page_all(
        lambda page: webhooks(client, workspace_id, [page, *options]), PAGE_SIZE, cancel=cancel
    )


def create_webhook(
    client: Client, resource: str, target: str, filters: Sequence[Filter] = ()
) -> Webhook:
    """Register a webhook on a resource.

    The server performs the X-Hook-Secret handshake with ``target`` before
    this call returns.
    """
    body = {
        "resource": resource,
        "target": target,
        "filters": [f.model_dump(exclude_none=True) for f in filters],
    }
    client.trace(f"Registering webhook on {resource} -> {target}")
    return client.post("/webhooks", body, Webhook)


def delete_webhook(client: Client, webhook_id: str) -> None:
    client.trace(f"Deleting webhook {webhook_id}")
    client.delete(f"/webhooks/{webhook_id}")
