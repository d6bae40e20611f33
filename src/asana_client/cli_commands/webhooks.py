"""Webhook commands - manage registrations and check captured deliveries."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core import console
from ..core.exceptions import DecodeError
from ..resources import webhooks as webhook_api
from ..webhooks import HOOK_SIGNATURE_HEADER, WebhookError, parse_hook, verify_signature
from .common import api_errors, create_client

webhooks_app = typer.Typer(help="Manage webhooks and verify deliveries.", no_args_is_help=True)


@webhooks_app.command("list")
def list_webhooks(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace whose webhooks to list"),
) -> None:
    """List the webhooks registered in a workspace."""
    with api_errors(), create_client(ctx.obj) as client:
        records = webhook_api.all_webhooks(client, workspace_id)

    if not records:
        console.print("[dim]No webhooks registered.[/dim]")
        return

    for webhook in records:
        state = "[green]active[/green]" if webhook.active else "[yellow]inactive[/yellow]"
        resource = webhook.resource.id if webhook.resource else "?"
        console.print(f"  Webhook {webhook.id} {state} {resource} -> {webhook.target}")
        if webhook.last_failure_content:
            console.detail(f"Last failure: {webhook.last_failure_content}")

    inactive = sum(1 for webhook in records if not webhook.active)
    if inactive:
        console.warning(f"{inactive} inactive webhooks will not receive deliveries")


@webhooks_app.command("create")
def create(
    ctx: typer.Context,
    resource_id: str = typer.Argument(..., help="Resource to watch"),
    target: str = typer.Argument(..., help="HTTPS URL that receives deliveries"),
) -> None:
    """Register a webhook on a resource."""
    with api_errors(), create_client(ctx.obj) as client:
        webhook = webhook_api.create_webhook(client, resource_id, target)

    console.success(f"Webhook {webhook.id} registered for {target}")


@webhooks_app.command("delete")
def delete(
    ctx: typer.Context,
    webhook_id: str = typer.Argument(..., help="Webhook to delete"),
) -> None:
    """Delete a webhook."""
    with api_errors(), create_client(ctx.obj) as client:
        webhook_api.delete_webhook(client, webhook_id)

    console.success(f"Webhook {webhook_id} deleted")


@webhooks_app.command("verify")
def verify(
    body_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Captured delivery body"
    ),
    signature: str = typer.Option(..., "--signature", help=f"Value of {HOOK_SIGNATURE_HEADER}"),
    secret: str = typer.Option(
        ..., "--secret", envvar="ASANA_HOOK_SECRET", help="Secret from the handshake"
    ),
) -> None:
    """Verify a captured delivery and print its events.

    Examples:
        asana webhooks verify body.json --signature 5bdc... --secret s3cret
    """
    body = body_file.read_bytes()
    try:
        verify_signature({HOOK_SIGNATURE_HEADER: signature}, body, secret)
        events = parse_hook(body)
    except (WebhookError, DecodeError) as e:
        console.error(str(e))
        raise typer.Exit(1) from None

    console.success(f"Signature valid, {len(events)} events")
    for event in events:
        when = event.created_at.isoformat() if event.created_at else "-"
        console.print(
            f"  {when} {event.action} "
            f"{event.resource.resource_type} {event.resource.id}"
        )
        if event.change is not None:
            console.detail(f"{event.change.action} {event.change.field}")


def register_webhook_commands(app: typer.Typer) -> None:
    """Register the webhooks command group with the Typer app."""
    app.add_typer(webhooks_app, name="webhooks")
