"""Stories - the activity history and comments on a task.

Stories are generated by the system whenever users act on a task; comments
are user-generated stories. Apart from comments they cannot be modified.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from asana_client.core.client import Client
from asana_client.core.options import Options
from asana_client.core.pager import NextPage, page_all

from .base import Compact, HasCreated, HasID, Record

PAGE_SIZE = 100


class TaskStory(Record, HasID, HasCreated):
    """Compact representation of a story on a task."""

    created_by: Compact | None = None
    resource_subtype: str | None = None
    text: str = ""


class Story(TaskStory):
    """Full story record."""

    html_text: str | None = None
    source: str | None = None
    type: str | None = None
    target: Compact | None = None
    num_hearts: int | None = None


def task_stories(
    client: Client, task_id: str, options: Sequence[Options] = ()
) -> tuple[list[TaskStory], NextPage | None]:
    """List one page of stories on a task."""
    client.trace(f"Listing stories for task {task_id}")
    return client.get(f"/tasks/{task_id}/stories", list[TaskStory], options)


def all_task_stories(
    client: Client,
    task_id: str,
    options: Sequence[Options] = (),
    *,
    cancel: threading.Event | None = None,
) -> list[TaskStory]:
    return page_all(
        lambda page: task_stories(client, task_id, [page, *options]), PAGE_SIZE, cancel=cancel
    )


def create_comment(client: Client, task_id: str, text: str) -> Story:
    """Add a comment story to a task."""
    client.trace(f"Creating comment for task {task_id}")
    return client.post(f"/tasks/{task_id}/stories", {"text": text}, Story)


def delete_story(client: Client, story_id: str) -> None:
    client.trace(f"Deleting story {story_id}")
    client.delete(f"/stories/{story_id}")
