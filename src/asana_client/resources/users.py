"""Users and their task lists.

The special user ID ``me`` refers to the authenticated user anywhere a user
ID is accepted.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from asana_client.core.client import Client
from asana_client.core.options import Options
from asana_client.core.pager import NextPage, page_all

from .base import Compact, HasID, HasName, Record

USERS_PAGE_SIZE = 50


class User(Record, HasID, HasName):
    """An account that can be given access to workspaces, projects and tasks."""

    email: str | None = None
    photo: dict[str, str] | None = None
    workspaces: list[Compact] | None = None


class TaskList(Record, HasID, HasName):
    """A user's "My Tasks" list within one workspace."""


def current_user(client: Client, options: Sequence[Options] = ()) -> User:
    """Fetch the authenticated user."""
    user, _ = client.get("/users/me", User, options)
    return user


def fetch_user(client: Client, user_id: str, options: Sequence[Options] = ()) -> User:
    """Load the full record for a user."""
    client.trace(f"Loading details for user {user_id!r}")
    user, _ = client.get(f"/users/{user_id}", User, options)
    return user


def user_task_list(
    client: Client, user_id: str, workspace_id: str, options: Sequence[Options] = ()
) -> TaskList:
    """Fetch the task list of a user in a workspace."""
    client.trace(f"Getting task list for user {user_id!r}")
    task_list, _ = client.get(
        f"/users/{user_id}/user_task_list",
        TaskList,
        [Options(workspace=workspace_id), *options],
    )
    return task_list


def users(
    client: Client, workspace_id: str, options: Sequence[Options] = ()
) -> tuple[list[User], NextPage | None]:
    """List one page of users visible in a workspace."""
    client.trace(f"Listing users in workspace {workspace_id}")
    return client.get("/users", list[User], [Options(workspace=workspace_id), *options])


def all_users(
    client: Client,
    workspace_id: str,
    options: Sequence[Options] = (),
    *,
    cancel: threading.Event | None = None,
) -> list[User]:
    """List every user visible in a workspace.

    Setting ``cancel`` stops the listing before its next page request.
    """
    return page_all(
        lambda page: users(client, workspace_id, [page, *options]),
        USERS_PAGE_SIZE,
        cancel=cancel,
    )
