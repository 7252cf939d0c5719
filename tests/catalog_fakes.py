"""Shared fakes for the catalog tests."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Mapping, Optional, Tuple

from showcase.errors import ApiError


def make_records(count: int, *, start: int = 1, title_field: str = "title") -> List[Dict[str, Any]]:
    return [
        {
            "id": index,
            title_field: f"Item {index}",
            "thumbnail": f"uploads/item-{index}.jpg",
            "launch_date": "2024-03-15T10:00:00",
            "created_at": "2024-03-15T10:00:00",
        }
        for index in range(start, start + count)
    ]


class FakeApi:
    """In-memory stand-in for :class:`ApiClient` serving paged listings.

    ``listings`` maps an endpoint to ``(response_key, records)``.  Every call
    is recorded as ``(path, params)``.
    """

    def __init__(
        self,
        listings: Optional[Mapping[str, Tuple[str, List[Dict[str, Any]]]]] = None,
        *,
        reference: Optional[Mapping[str, List[Dict[str, Any]]]] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.listings = dict(listings or {})
        self.reference = dict(reference or {})
        self.details = dict(details or {})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_with: Optional[Exception] = None
        self.closed = False

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        params = dict(params or {})
        self.calls.append((path, params))
        if self.fail_with is not None:
            raise self.fail_with
        if path in self.details:
            return self.details[path]
        name = path.split("/")[0]
        if name in self.reference:
            return {"data": {name: self.reference[name], "total": len(self.reference[name])}}
        if path not in self.listings:
            raise ApiError(f"Request to {path} failed with status 404", status_code=404)
        key, records = self.listings[path]
        keyword = str(params.get("keyword") or "").lower()
        if keyword:
            records = [r for r in records if keyword in str(r.get("title", r.get("name", ""))).lower()]
        page = int(params.get("page", 1))
        limit = int(params.get("limit", 6))
        chunk = records[(page - 1) * limit: page * limit]
        return {"data": {key: chunk, "total": len(records)}}

    def listing_calls(self) -> List[Dict[str, Any]]:
        return [params for path, params in self.calls if path in self.listings]

    def close(self) -> None:
        self.closed = True


class FakeSensor:
    """Visibility sensor driven by the test."""

    def __init__(self) -> None:
        self.callback = None
        self.released = False
        self.rechecks = 0
        self.visible = False

    def observe(self, callback) -> None:
        self.callback = callback
        self.released = False

    def release(self) -> None:
        self.released = True
        self.callback = None

    def recheck(self) -> None:
        self.rechecks += 1
        if self.visible and self.callback is not None:
            self.callback(True)

    def show(self) -> None:
        self.visible = True
        if self.callback is not None:
            self.callback(True)

    def hide(self) -> None:
        self.visible = False
        if self.callback is not None:
            self.callback(False)


class PendingFetch:
    """One fetch queued by :class:`ManualRunner`."""

    def __init__(self, task, on_success, on_error) -> None:
        self.task = task
        self.on_success = on_success
        self.on_error = on_error

    def run(self) -> None:
        try:
            result = self.task()
        except Exception as exc:
            self.on_error(exc)
            return
        self.on_success(result)

    def resolve(self, result: Any) -> None:
        self.on_success(result)

    def reject(self, error: Exception) -> None:
        self.on_error(error)


class ManualRunner:
    """Fetch runner that queues work until the test completes it, in any order."""

    def __init__(self) -> None:
        self.pending: Deque[PendingFetch] = deque()

    def submit(self, task, on_success, on_error) -> None:
        self.pending.append(PendingFetch(task, on_success, on_error))

    @property
    def has_pending(self) -> bool:
        return bool(self.pending)

    def run_next(self) -> None:
        self.pending.popleft().run()

    def run_all(self) -> None:
        while self.pending:
            self.run_next()


def png_bytes(width: int = 8, height: int = 6, color: str = "#3366cc") -> bytes:
    """Encode a solid-colour PNG with Qt."""
    from PySide6.QtCore import QBuffer, QByteArray, QIODevice
    from PySide6.QtGui import QColor, QImage

    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor(color))
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return bytes(data.data())


class FakeImageFetcher:
    """Serve image bytes by URL; unknown URLs raise :class:`ApiError`."""

    def __init__(self, images: Optional[Mapping[str, bytes]] = None) -> None:
        self.images = dict(images or {})
        self.requested: List[str] = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.images:
            raise ApiError(f"Request to {url} failed with status 404", status_code=404)
        return self.images[url]

    def close(self) -> None:
        pass
