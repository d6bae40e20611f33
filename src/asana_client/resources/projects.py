"""Projects, their sections and their tasks."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from datetime import date, datetime

from asana_client.core.client import Client
from asana_client.core.options import Options
from asana_client.core.pager import NextPage, page_all

from .base import Compact, HasCreated, HasID, HasName, Record

PAGE_SIZE = 100


class Project(Record, HasID, HasName, HasCreated):
    """A prioritized list of tasks or a board of columns."""

    archived: bool = False
    color: str | None = None
    notes: str | None = None
    layout: str | None = None
    workspace: Compact | None = None


class Section(Record, HasID, HasName, HasCreated):
    project: Compact | None = None


class Task(Record, HasID, HasName, HasCreated):
    """A unit of work."""

    completed: bool | None = None
    due_on: date | None = None
    due_at: datetime | None = None
    notes: str | None = None
    assignee: Compact | None = None
    resource_subtype: str | None = None
    is_rendered_as_separator: bool | None = None


# =============================================================================
# Projects
# =============================================================================


def projects(
    client: Client, workspace_id: str, options: Sequence[Options] = ()
) -> tuple[list[Project], NextPage | None]:
    """List one page of projects in a workspace."""
    client.trace(f"Listing projects in workspace {workspace_id}")
    return client.get("/projects", list[Project], [Options(workspace=workspace_id), *options])


def all_projects(
    client: Client,
    workspace_id: str,
    options: Sequence[Options] = (),
    *,
    cancel: threading.Event | None = None,
) -> list[Project]:
    return page_all(
        lambda page: projects(client, workspace_id, [page, *options]), PAGE_SIZE, cancel=cancel
    )


# =============================================================================
# Sections
# =============================================================================


def sections(
    client: Client, project_id: str, options: Sequence[Options] = ()
) -> tuple[list[Section], NextPage | None]:
    """List one page of sections in a project."""
    client.trace(f"Listing sections in project {project_id}")
    return client.get(f"/projects/{project_id}/sections", list[Section], options)


def create_section(client: Client, project_id: str, name: str) -> Section:
    """Add a section to the end of a project."""
    client.trace(f"Creating section {name!r} in project {project_id}")
    return client.post(f"/projects/{project_id}/sections", {"name": name}, Section)


# =============================================================================
# Tasks
# =============================================================================


def tasks(
    client: Client, project_id: str, options: Sequence[Options] = ()
) -> tuple[list[Task], NextPage | None]:
    """List one page of tasks in a project."""
    client.trace(f"Listing tasks in project {project_id}")
    return client.get("/tasks", list[Task], [Options(project=project_id), *options])


def all_tasks(
    client: Client,
    project_id: str,
    options: Sequence[Options] = (),
    *,
    cancel: threading.Event | None = None,
) -> list[Task]:
    return page_all(
        lambda page: tasks(client, project_id, [page, *options]), PAGE_SIZE, cancel=cancel
    )


def fetch_task(client: Client, task_id: str, options: Sequence[Options] = ()) -> Task:
    """Load the full record for a task."""
    client.trace(f"Loading details for task {task_id!r}")
    task, _ = client.get(f"/tasks/{task_id}", Task, options)
    return task


def subtasks(
    client: Client, task_id: str, options: Sequence[Options] = ()
) -> tuple[list[Task], NextPage | None]:
    """List one page of subtasks of a task."""
    client.trace(f"Listing subtasks of task {task_id}")
    return client.get(f"/tasks/{task_id}/subtasks", list[Task], options)
