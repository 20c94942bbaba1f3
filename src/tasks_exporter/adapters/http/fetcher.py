"""httpx adapter for the tasks API.

Issues one ``GET <base>/_tasks?group_by=none&actions=<filter>`` per call and
decodes the body into a TaskSnapshot. Timeouts, TLS and authentication are
whatever the supplied client is configured with.
"""

import logging

import httpx

from tasks_exporter.core.config import DEFAULT_ACTION_FILTER
from tasks_exporter.core.encoding.tasks_json import decode_tasks_response
from tasks_exporter.core.errors import StatusError, TransportError
from tasks_exporter.core.models import TaskSnapshot

TASKS_PATH = "_tasks"


class HTTPTaskFetcher:
    """Implementation of TaskSourcePort backed by an httpx.Client."""

    def __init__(
        self,
        client: httpx.Client,
        base_url: str | httpx.URL,
        action_filter: str = DEFAULT_ACTION_FILTER,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: Configured HTTP client used for every request.
            base_url: Cluster URL; the tasks path is resolved relative to it.
            action_filter: Passed verbatim as the ``actions`` query parameter.
            logger: Logger receiving resource-release warnings.
        """
        self._client = client
        self._base_url = httpx.URL(base_url)
        self._action_filter = action_filter
        self._logger = logger or logging.getLogger(__name__)

    @property
    def action_filter(self) -> str:
        return self._action_filter

    def tasks_url(self) -> httpx.URL:
        """Return the tasks endpoint URL including query parameters."""
        url = self._base_url.join(TASKS_PATH)
        return url.copy_merge_params(
            {"group_by": "none", "actions": self._action_filter}
        )

    def fetch(self) -> TaskSnapshot:
        """Fetch and decode the current task snapshot.

        Returns:
            TaskSnapshot decoded from the response body.

        Raises:
            TransportError: If the request fails at the network level.
            StatusError: If the endpoint answers with a status other than 200.
            DecodeError: If the body is not a valid tasks response.
        """
        url = self.tasks_url()
        request = self._client.build_request("GET", url)
        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise self._transport_error(url, e) from e

        try:
            if response.status_code != httpx.codes.OK:
                raise StatusError(
                    str(url),
                    response.status_code,
                    host=url.host,
                    port=url.port,
                    path=url.path,
                )
            body = self._read(url, response)
        finally:
            self._close(response)

        return decode_tasks_response(body)

    def _transport_error(self, url: httpx.URL, cause: Exception) -> TransportError:
        port = "" if url.port is None else url.port
        return TransportError(
            f"failed to get task stats from "
            f"{url.scheme}://{url.host}:{port}{url.path}: {cause}",
            url=str(url),
            host=url.host,
            port=url.port,
            path=url.path,
        )

    def _read(self, url: httpx.URL, response: httpx.Response) -> bytes:
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
        except Exception as e:
            # httpx closes the stream once the body is consumed; a failure
            # after that point is a close failure, not a read failure.
            if not response.is_closed:
                if isinstance(e, httpx.HTTPError):
                    raise self._transport_error(url, e) from e
                raise
            self._close_failed(e)
        return b"".join(chunks)

    def _close(self, response: httpx.Response) -> None:
        try:
            response.close()
        except Exception as e:
            self._close_failed(e)

    def _close_failed(self, error: Exception) -> None:
        self._logger.warning(
            "failed to close http response", extra={"error": str(error)}
        )
