"""Example ASGI application exporting task counts per action.

Run with:
    ES_URI=http://localhost:9200 uvicorn examples.asgi_example:app

Endpoints:
    /metrics - Prometheus text format, one sample per in-flight task action

Configuration:
    ES_URI            - cluster URL (default: http://localhost:9200)
    ES_TASKS_ACTIONS  - task actions filter (default: indices:*)
    ES_NAMESPACE      - metric namespace (default: elasticsearch)
"""

import logging

import httpx

from tasks_exporter import ExporterConfig, build_registry, create_asgi_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

config = ExporterConfig.from_env()
client = httpx.Client(timeout=5.0)
registry = build_registry(config, client, logging.getLogger("tasks_exporter"))

app = create_asgi_app(registry)
