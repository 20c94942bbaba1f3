"""HTTP adapters for reading the tasks API."""

from tasks_exporter.adapters.http.fetcher import HTTPTaskFetcher

__all__ = ["HTTPTaskFetcher"]
