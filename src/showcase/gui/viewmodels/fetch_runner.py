"""Strategies for executing a view model's fetches.

The view model never talks to threads directly: it hands a zero-argument
task plus success/failure callbacks to a runner.  Front-ends pick the runner
that matches their event loop; ``QtFetchRunner`` lives in
:mod:`showcase.gui.ui.workers`.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

Task = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class FetchRunner(Protocol):
    def submit(self, task: Task, on_success: SuccessCallback, on_error: ErrorCallback) -> None: ...


class ImmediateRunner:
    """Run each task synchronously inside ``submit``."""

    def submit(self, task: Task, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        try:
            result = task()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)


__all__ = ["FetchRunner", "ImmediateRunner"]
