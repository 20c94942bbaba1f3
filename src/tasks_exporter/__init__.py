"""Prometheus exporter for in-flight task counts grouped by action."""

from tasks_exporter.adapters.frameworks.asgi import create_asgi_app
from tasks_exporter.adapters.http.fetcher import HTTPTaskFetcher
from tasks_exporter.adapters.prometheus.collector import (
    TaskCollector,
    build_registry,
    new_task_collector,
)
from tasks_exporter.core.aggregate import aggregate_tasks
from tasks_exporter.core.config import DEFAULT_ACTION_FILTER, ExporterConfig
from tasks_exporter.core.encoding.tasks_json import decode_tasks_response
from tasks_exporter.core.errors import (
    CollectionError,
    DecodeError,
    StatusError,
    TasksExporterError,
    TransportError,
)
from tasks_exporter.core.metrics import TASK_ACTION_DESCRIPTOR
from tasks_exporter.core.models import (
    AggregatedTaskStats,
    MetricDescriptor,
    MetricSample,
    TaskRecord,
    TaskSnapshot,
)

__all__ = [
    "DEFAULT_ACTION_FILTER",
    "TASK_ACTION_DESCRIPTOR",
    "AggregatedTaskStats",
    "CollectionError",
    "DecodeError",
    "ExporterConfig",
    "HTTPTaskFetcher",
    "MetricDescriptor",
    "MetricSample",
    "StatusError",
    "TaskCollector",
    "TaskRecord",
    "TaskSnapshot",
    "TasksExporterError",
    "TransportError",
    "aggregate_tasks",
    "build_registry",
    "create_asgi_app",
    "decode_tasks_response",
    "new_task_collector",
]
