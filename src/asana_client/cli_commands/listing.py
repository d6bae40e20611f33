"""Listing commands - workspaces, projects, tasks and stories."""

from __future__ import annotations

import typer

from ..core import console
from ..core.options import Options
from ..resources import projects as project_api
from ..resources import stories as story_api
from ..resources import workspaces as workspace_api
from .common import api_errors, create_client

PROJECT_FIELDS = ("name", "section_migration_status", "layout")


def workspaces(ctx: typer.Context) -> None:
    """List the workspaces and organizations you can access.

    Examples:
        asana workspaces
    """
    with api_errors(), create_client(ctx.obj) as client:
        records = workspace_api.all_workspaces(client)

    for workspace in records:
        kind = "Organization" if workspace.is_organization else "Workspace"
        console.print(f"  {kind} {workspace.id} {workspace.name!r}")


def projects(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace to list projects for"),
) -> None:
    """List every project in a workspace."""
    with api_errors(), create_client(ctx.obj) as client:
        records = project_api.all_projects(client, workspace_id, [Options(fields=PROJECT_FIELDS)])

    for project in records:
        console.print(f"  Project {project.id} {project.name!r}")


def tasks(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project to list sections and tasks for"),
) -> None:
    """Show the sections and tasks of a project."""
    with api_errors(), create_client(ctx.obj) as client:
        section_records, _ = project_api.sections(client, project_id)
        task_records = project_api.all_tasks(client, project_id)

    console.newline()
    console.info("Sections:")
    for section in section_records:
        console.print(f"  Section {section.id} {section.name!r}")

    console.newline()
    console.info("Tasks:")
    for task in task_records:
        separator = task.is_rendered_as_separator or False
        console.print(f"  Task {task.id} {task.name!r} (separator: {separator})")


def task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task to show"),
    stories: bool = typer.Option(False, "--stories", "-s", help="List the stories on the task"),
) -> None:
    """Show a task, its subtasks and optionally its stories."""
    with api_errors(), create_client(ctx.obj) as client:
        record = project_api.fetch_task(client, task_id)
        children, _ = project_api.subtasks(client, task_id)
        story_records = story_api.all_task_stories(client, task_id) if stories else []

    console.print(f"Task {record.id}: {record.name!r}")
    console.print(f"  Completed: {record.completed}")
    if record.completed is False and (record.due_at or record.due_on):
        console.print(f"  Due: {record.due_at or record.due_on}")
    if record.notes:
        console.print(f"  Notes: {record.notes!r}")
    for child in children:
        console.print(f"  Subtask {child.id}: {child.name!r}")

    for story in story_records:
        author = story.created_by.name if story.created_by else "unknown"
        console.print(f"Story {story.id} ({author}):")
        console.detail(story.text)


def add_section(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project to add the section to"),
    name: str = typer.Argument(..., help="Name of the new section"),
) -> None:
    """Add a section to the end of a project."""
    with api_errors(), create_client(ctx.obj) as client:
        section = project_api.create_section(client, project_id, name)

    console.success(f"Section {section.id} {section.name!r} created")


def register_listing_commands(app: typer.Typer) -> None:
    """Register listing commands with the Typer app."""
    app.command()(workspaces)
    app.command()(projects)
    app.command()(tasks)
    app.command()(task)
    app.command(name="add-section")(add_section)
