"""Core domain models for task stats."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TaskRecord:
    """A single in-flight task as reported by the tasks API.

    Only the action is kept; every other upstream field is dropped on decode.

    Attributes:
        action: Operation type (e.g., indices:data/write/bulk).
    """

    action: str


@dataclass(frozen=True)
class TaskSnapshot:
    """All task records returned by one fetch, in response order."""

    tasks: tuple[TaskRecord, ...] = ()


@dataclass(frozen=True)
class AggregatedTaskStats:
    """Task counts keyed by action for a single collection cycle."""

    count_by_action: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MetricDescriptor:
    """Name, help text and label schema of a metric family.

    Attributes:
        name: Fully qualified metric name.
        documentation: Help text shown by the collector.
        labels: Label names, in the order label values are given.
    """

    name: str
    documentation: str
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricSample:
    """A single metric measurement.

    Attributes:
        name: Metric name (e.g., elasticsearch_task_stats_action_total).
        timestamp: Unix timestamp in seconds.
        value: The metric value.
        labels: Key-value pairs for metric dimensions.
    """

    name: str
    timestamp: float
    value: float
    labels: dict[str, str] = field(default_factory=dict)
