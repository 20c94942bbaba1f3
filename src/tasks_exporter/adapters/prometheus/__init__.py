"""Prometheus collector adapter."""

from tasks_exporter.adapters.prometheus.collector import (
    TaskCollector,
    build_registry,
    new_task_collector,
)

__all__ = ["TaskCollector", "build_registry", "new_task_collector"]
