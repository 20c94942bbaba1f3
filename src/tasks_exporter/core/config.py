"""Exporter configuration.

Values are read once at startup and never mutated. Environment variables:

- ES_URI: Base URL of the cluster (default: http://localhost:9200)
- ES_TASKS_ACTIONS: Filter on task actions, passed as-is to the tasks API
  ``actions`` parameter (default: indices:*)
- ES_NAMESPACE: Metric namespace (default: elasticsearch)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:9200"
DEFAULT_ACTION_FILTER = "indices:*"
DEFAULT_NAMESPACE = "elasticsearch"


@dataclass(frozen=True)
class ExporterConfig:
    """Immutable settings shared by every collection cycle.

    Attributes:
        base_url: Cluster URL the tasks path is resolved against.
        action_filter: Value of the tasks API ``actions`` query parameter.
            Wildcards and comma separated lists are interpreted upstream.
        namespace: Prefix of the exported metric name.
    """

    base_url: str = DEFAULT_BASE_URL
    action_filter: str = DEFAULT_ACTION_FILTER
    namespace: str = DEFAULT_NAMESPACE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExporterConfig":
        """Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read from (default: os.environ).

        Returns:
            ExporterConfig with unset or empty variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            base_url=env.get("ES_URI") or DEFAULT_BASE_URL,
            action_filter=env.get("ES_TASKS_ACTIONS") or DEFAULT_ACTION_FILTER,
            namespace=env.get("ES_NAMESPACE") or DEFAULT_NAMESPACE,
        )
