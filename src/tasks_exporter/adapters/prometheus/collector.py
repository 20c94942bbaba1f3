"""Prometheus collector publishing task counts per action.

Each scrape runs one collection cycle: fetch the task snapshot, aggregate it
and emit one gauge sample per distinct action. A failed fetch fails the whole
cycle and nothing is emitted.
"""

import logging
from collections.abc import Iterable

import httpx
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector, CollectorRegistry

from tasks_exporter.adapters.http.fetcher import HTTPTaskFetcher
from tasks_exporter.core.aggregate import aggregate_tasks
from tasks_exporter.core.config import DEFAULT_NAMESPACE, ExporterConfig
from tasks_exporter.core.errors import CollectionError, DecodeError, TransportError
from tasks_exporter.core.metrics import (
    TASK_ACTION_DESCRIPTOR,
    gauge,
    task_action_descriptor,
)
from tasks_exporter.core.models import MetricDescriptor
from tasks_exporter.core.ports import MetricSink, TaskSourcePort


class TaskCollector(Collector):
    """Collector adapter turning task snapshots into gauge samples."""

    def __init__(
        self,
        source: TaskSourcePort,
        descriptor: MetricDescriptor = TASK_ACTION_DESCRIPTOR,
    ) -> None:
        """Initialize the collector.

        Args:
            source: Task source queried once per cycle.
            descriptor: Metric name, help and label schema of every sample.
        """
        self._source = source
        self._descriptor = descriptor

    @property
    def descriptor(self) -> MetricDescriptor:
        return self._descriptor

    def update(self, sink: MetricSink) -> None:
        """Run one collection cycle, emitting samples into sink.

        Args:
            sink: Callable receiving one MetricSample per distinct action.

        Raises:
            CollectionError: If fetching or decoding fails. No samples are
                emitted in that case.
        """
        try:
            snapshot = self._source.fetch()
        except (TransportError, DecodeError) as e:
            raise CollectionError(f"failed to fetch and decode task stats: {e}") from e

        stats = aggregate_tasks(snapshot)
        for action, count in stats.count_by_action.items():
            sink(gauge(self._descriptor, count, action))

    def _family(self) -> GaugeMetricFamily:
        return GaugeMetricFamily(
            self._descriptor.name,
            self._descriptor.documentation,
            labels=list(self._descriptor.labels),
        )

    def describe(self) -> Iterable[GaugeMetricFamily]:
        """Describe the metric family without contacting the cluster."""
        yield self._family()

    def collect(self) -> Iterable[GaugeMetricFamily]:
        """Run a cycle and yield its samples as a single gauge family."""
        family = self._family()
        labels = self._descriptor.labels
        self.update(
            lambda sample: family.add_metric(
                [sample.labels[name] for name in labels], sample.value
            )
        )
        yield family


def new_task_collector(
    logger: logging.Logger,
    base_url: str | httpx.URL,
    client: httpx.Client,
    config: ExporterConfig | None = None,
) -> TaskCollector:
    """Create a task collector reading from base_url.

    Args:
        logger: Logger for collector and fetcher events.
        base_url: Cluster URL the tasks path is resolved against.
        client: Configured HTTP client.
        config: Action filter and namespace (default: ExporterConfig()).

    Returns:
        Ready to register TaskCollector.

    Raises:
        ValueError: If logger, base_url or client is missing.
    """
    if logger is None:
        raise ValueError("logger is required")
    if client is None:
        raise ValueError("client is required")
    if not base_url:
        raise ValueError("base_url is required")

    config = config or ExporterConfig()
    fetcher = HTTPTaskFetcher(
        client, base_url, action_filter=config.action_filter, logger=logger
    )
    descriptor = (
        TASK_ACTION_DESCRIPTOR
        if config.namespace == DEFAULT_NAMESPACE
        else task_action_descriptor(config.namespace)
    )
    logger.info(
        "task collector created", extra={"action_filter": config.action_filter}
    )
    return TaskCollector(fetcher, descriptor=descriptor)


def build_registry(
    config: ExporterConfig,
    client: httpx.Client,
    logger: logging.Logger | None = None,
) -> CollectorRegistry:
    """Create a registry holding a single task collector for config.base_url."""
    registry = CollectorRegistry()
    collector = new_task_collector(
        logger or logging.getLogger(__name__), config.base_url, client, config
    )
    registry.register(collector)
    return registry
