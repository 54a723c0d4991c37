"""Turn fetched GitHub issues into task payloads."""

import json

from ..github.models import IssueDetails, Task, TaskPayload


def format_task(issue: IssueDetails) -> TaskPayload:
    """Reshape an issue: title stays title, body becomes description, url becomes source."""
    return TaskPayload(
        task=Task(
            title=issue.title,
            description=issue.body,
            source=issue.url,
        )
    )


def render_task(payload: TaskPayload, indent: int = 2) -> str:
    """
    Serialize a task payload as indented JSON text.

    Args:
        payload: Task payload to serialize
        indent: JSON indentation level

    Returns:
        JSON-formatted string
    """
    return json.dumps(payload.to_dict(), indent=indent, ensure_ascii=False)
