"""GUI entry point for the Showcase catalog browser."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from ..appctx import AppContext
from .ui.main_window import MainWindow
from .utils.console_logger import ensure_console_logger


def main(
    argv: list[str] | None = None,
    *,
    settings_path: Path | None = None,
    api_url: str | None = None,
    image_url: str | None = None,
) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    app = QApplication.instance() or QApplication(arguments)

    context = AppContext.create(settings_path, api_url=api_url, image_url=image_url)
    level = getattr(logging, str(context.settings.get("log_level", "WARNING")), logging.WARNING)
    ensure_console_logger(logging.getLogger("showcase"), "showcase-console", level=level)

    window = MainWindow(context)
    window.show()
    # Allow opening a catalog directly via argv[1].
    window.open_initial_page(arguments[1] if len(arguments) > 1 else None)
    try:
        return app.exec()
    finally:
        context.close()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
