"""Metric descriptors and helpers for creating MetricSample objects."""

import time

from tasks_exporter.core.config import DEFAULT_NAMESPACE
from tasks_exporter.core.models import MetricDescriptor, MetricSample

TASK_ACTION_HELP = "Number of tasks of a certain action"


def build_fq_name(namespace: str, subsystem: str, name: str) -> str:
    """Join non-empty name parts with underscores.

    Args:
        namespace: Metric namespace (e.g., "elasticsearch")
        subsystem: Metric subsystem (e.g., "task_stats")
        name: Metric name (e.g., "action_total")

    Returns:
        Fully qualified metric name, or "" when name is empty
    """
    if not name:
        return ""
    return "_".join(part for part in (namespace, subsystem, name) if part)


def task_action_descriptor(namespace: str = DEFAULT_NAMESPACE) -> MetricDescriptor:
    """Create the descriptor of the per-action task gauge for a namespace."""
    return MetricDescriptor(
        name=build_fq_name(namespace, "task_stats", "action_total"),
        documentation=TASK_ACTION_HELP,
        labels=("action",),
    )


TASK_ACTION_DESCRIPTOR = task_action_descriptor()


def gauge(
    descriptor: MetricDescriptor,
    value: float,
    *label_values: str,
) -> MetricSample:
    """Create a gauge metric sample for a descriptor.

    Args:
        descriptor: Metric name and label schema
        value: Current gauge value
        *label_values: One value per descriptor label, in order

    Returns:
        MetricSample with current timestamp

    Raises:
        ValueError: If the number of label values does not match the schema
    """
    if len(label_values) != len(descriptor.labels):
        raise ValueError(
            f"{descriptor.name} expects {len(descriptor.labels)} label values, "
            f"got {len(label_values)}"
        )
    return MetricSample(
        name=descriptor.name,
        timestamp=time.time(),
        value=float(value),
        labels=dict(zip(descriptor.labels, label_values, strict=True)),
    )
