"""Reduction of a task snapshot into per-action counts."""

from tasks_exporter.core.models import AggregatedTaskStats, TaskSnapshot


def aggregate_tasks(snapshot: TaskSnapshot) -> AggregatedTaskStats:
    """Count tasks by action.

    Args:
        snapshot: Tasks returned by one fetch. May be empty.

    Returns:
        AggregatedTaskStats with one entry per distinct action observed.
        Actions absent from the snapshot are not present in the result.
    """
    counts: dict[str, int] = {}
    for task in snapshot.tasks:
        counts[task.action] = counts.get(task.action, 0) + 1
    return AggregatedTaskStats(count_by_action=counts)
