"""Workspaces, portfolios and team memberships."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from asana_client.core.client import Client
from asana_client.core.options import Options, fields_for
from asana_client.core.pager import NextPage, page_all

from .base import Compact, HasID, HasName, Record

PAGE_SIZE = 100


class Workspace(Record, HasID, HasName):
    """A workspace or organization.

    Organizations are workspaces tied to an email domain.
    """

    is_organization: bool = False
    email_domains: list[str] | None = None


class Portfolio(Record, HasID, HasName):
    owner: Compact | None = None


class TeamMembership(Record, HasID):
    """Membership of a user in a team."""

    is_guest: bool = False
    team: Compact | None = None
    user: Compact | None = None


def workspaces(
    client: Client, options: Sequence[Options] = ()
) -> tuple[list[Workspace], NextPage | None]:
    """List one page of workspaces visible to the authenticated user."""
    client.trace("Listing workspaces")
    return client.get("/workspaces", list[Workspace], options)


def all_workspaces(
    client: Client, options: Sequence[Options] = (), *, cancel: threading.Event | None = None
) -> list[Workspace]:
    return page_all(lambda page: workspaces(client, [page, *options]), PAGE_SIZE, cancel=cancel)


def portfolios(
    client: Client, workspace_id: str, options: Sequence[Options] = ()
) -> tuple[list[Portfolio], NextPage | None]:
    """List one page of the authenticated user's portfolios in a workspace.

    The workspace and owner scope is applied last so callers cannot widen it.
    """
    client.trace(f"Listing portfolios in workspace {workspace_id}")
    scope = Options(workspace=workspace_id, owner="me")
    return client.get("/portfolios", list[Portfolio], [*options, scope])


def fetch_team_membership(client: Client, membership_id: str) -> TeamMembership:
    """Load a team membership with every field populated."""
    client.trace(f"Loading team membership details for {membership_id!r}")
    # Non-default fields are only returned when asked for
    membership, _ = client.get(
        f"/team_memberships/{membership_id}",
        TeamMembership,
        [fields_for(TeamMembership)],
    )
    return membership
