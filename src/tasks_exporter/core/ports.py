"""Port interfaces for task sources and metric sinks.

The collector depends only on these protocols, not on concrete HTTP clients
or metric registries.
"""

from typing import Protocol, runtime_checkable

from tasks_exporter.core.models import MetricSample, TaskSnapshot


@runtime_checkable
class TaskSourcePort(Protocol):
    """Port for reading the current task inventory.

    Adapters implementing this protocol return one snapshot per call.
    Examples: HTTPTaskFetcher.
    """

    def fetch(self) -> TaskSnapshot:
        """Fetch and decode the current task snapshot.

        Raises:
            TransportError: If the endpoint is unreachable or answers non-200.
            DecodeError: If the response body cannot be decoded.
        """
        ...


@runtime_checkable
class MetricSink(Protocol):
    """Receiver of metric samples emitted during a collection cycle."""

    def __call__(self, sample: MetricSample) -> None:
        """Accept one metric sample."""
        ...
