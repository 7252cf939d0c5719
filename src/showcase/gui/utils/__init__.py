from .console_logger import ensure_console_logger

__all__ = ["ensure_console_logger"]
