"""Exceptions raised while fetching and publishing task stats."""


class TasksExporterError(Exception):
    """Base class for all tasks exporter errors."""


class TransportError(TasksExporterError):
    """The tasks endpoint could not be reached.

    Attributes:
        url: The requested URL.
        host: Target host.
        port: Target port, None when the scheme default is used.
        path: Target path.
    """

    def __init__(
        self,
        message: str,
        url: str,
        host: str = "",
        port: int | None = None,
        path: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.host = host
        self.port = port
        self.path = path


class StatusError(TransportError):
    """The tasks endpoint answered with a status other than 200."""

    def __init__(
        self,
        url: str,
        status_code: int,
        host: str = "",
        port: int | None = None,
        path: str = "",
    ) -> None:
        super().__init__(
            f"HTTP request to {url} failed with code {status_code}",
            url,
            host=host,
            port=port,
            path=path,
        )
        self.status_code = status_code


class DecodeError(TasksExporterError):
    """The response body is not valid JSON or has the wrong shape."""


class CollectionError(TasksExporterError):
    """A whole collection cycle failed and no samples were emitted."""
