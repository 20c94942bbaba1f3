"""Test helpers shared by unit and integration tests."""

import json

import httpx

from tasks_exporter.core.models import TaskRecord, TaskSnapshot

BASE_URL = "http://localhost:9200"


def tasks_body(*actions: str) -> bytes:
    """Build a tasks API response body carrying one task per action."""
    tasks = [
        {
            "node": "oTUltX4IQMOUUVeiohTt8A",
            "id": i,
            "type": "transport",
            "action": action,
            "running_time_in_nanos": 1000 * i,
            "cancellable": False,
        }
        for i, action in enumerate(actions)
    ]
    return json.dumps({"tasks": tasks}).encode()


def snapshot(*actions: str) -> TaskSnapshot:
    """Build a TaskSnapshot carrying one record per action."""
    return TaskSnapshot(tasks=tuple(TaskRecord(action=a) for a in actions))


class FailingCloseStream(httpx.SyncByteStream):
    """Response stream whose close() fails."""

    def __init__(self, body: bytes = b"") -> None:
        self._body = body

    def __iter__(self):
        yield self._body

    def close(self) -> None:
        raise OSError("close failed")


class FakeTaskSource:
    """TaskSourcePort returning a fixed snapshot or raising a fixed error."""

    def __init__(
        self,
        result: TaskSnapshot | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result or TaskSnapshot()
        self.error = error
        self.calls = 0

    def fetch(self) -> TaskSnapshot:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


class ResetStream(httpx.SyncByteStream):
    """Response stream that breaks off partway through the body."""

    def __iter__(self):
        yield b'{"tasks": ['
        raise httpx.ReadError("connection reset by peer")
