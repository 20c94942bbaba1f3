"""JSON decoder for the tasks API response."""

import json
from typing import Any

from tasks_exporter.core.errors import DecodeError
from tasks_exporter.core.models import TaskRecord, TaskSnapshot


def _decode_record(index: int, raw: Any) -> TaskRecord:
    if not isinstance(raw, dict):
        raise DecodeError(f"task {index} is not an object")
    action = raw.get("action")
    if not isinstance(action, str):
        raise DecodeError(f"task {index} has no string 'action' field")
    return TaskRecord(action=action)


def decode_tasks_response(body: bytes | str) -> TaskSnapshot:
    """Decode a ``group_by=none`` tasks response.

    Unlike a lenient JSON unmarshal, a missing or null ``tasks`` and a task
    without an ``action`` string are rejected rather than read as no tasks
    or an empty action.

    Args:
        body: Raw response body, e.g. ``{"tasks": [{"action": "..."}]}``.

    Returns:
        TaskSnapshot with one record per task, in response order.
        Fields other than ``tasks`` and each task's ``action`` are ignored.

    Raises:
        DecodeError: If the body is not valid JSON or has the wrong shape.
    """
    try:
        document = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"invalid tasks response: {e}") from e

    if not isinstance(document, dict):
        raise DecodeError("tasks response is not a JSON object")
    raw_tasks = document.get("tasks")
    if not isinstance(raw_tasks, list):
        raise DecodeError("tasks response has no 'tasks' list")

    return TaskSnapshot(
        tasks=tuple(_decode_record(i, raw) for i, raw in enumerate(raw_tasks))
    )
