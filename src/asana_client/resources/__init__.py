"""Typed records and helpers for the Asana entities used by the CLI."""

from asana_client.resources.base import Compact, HasCreated, HasID, HasName, Record
from asana_client.resources.projects import Project, Section, Task
from asana_client.resources.stories import Story, TaskStory
from asana_client.resources.users import TaskList, User
from asana_client.resources.webhooks import Filter, Webhook
from asana_client.resources.workspaces import Portfolio, TeamMembership, Workspace

__all__ = [
    # Capabilities
    "Record",
    "HasID",
    "HasName",
    "HasCreated",
    "Compact",
    # Records
    "User",
    "TaskList",
    "Workspace",
    "Portfolio",
    "TeamMembership",
    "Project",
    "Section",
    "Task",
    "TaskStory",
    "Story",
    "Webhook",
    "Filter",
]
