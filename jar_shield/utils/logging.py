"""Logging utilities for JarShield."""

import logging
from pathlib import Path
from typing import Optional, Dict, Any
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


class JarShieldLogger:
    """Logger wrapper with rich formatting on the error channel."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup rich stderr handler with custom theme."""
        # Diagnostics go to stderr so the report on stdout stays parseable
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
        )

        formatter = logging.Formatter(
            fmt="%(name)s: %(message)s",
            datefmt="[%X]"
        )
        handler.setFormatter(formatter)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def set_level(self, level: int) -> None:
        """Change the level of the underlying logger."""
        self.logger.setLevel(level)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


_LOGGERS: Dict[str, JarShieldLogger] = {}
_LEVEL = logging.INFO
# Shared by every logger, replaced when setup_logging is called again
_FILE_HANDLER: Optional[logging.FileHandler] = None


def _replace_file_handler(log_file: Optional[Path]) -> None:
    """Swap the shared file handler on every registered logger."""
    global _FILE_HANDLER

    if _FILE_HANDLER is not None:
        for wrapper in _LOGGERS.values():
            wrapper.logger.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    if log_file:
        _FILE_HANDLER = logging.FileHandler(log_file, encoding="utf-8")
        _FILE_HANDLER.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        for wrapper in _LOGGERS.values():
            wrapper.logger.addHandler(_FILE_HANDLER)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    verbose: bool = False
) -> None:
    """Setup logging configuration for JarShield.

    Calling it again replaces the previous configuration, including the log
    file: without ``log_file`` no file receives records any more.

    Args:
        level: Logging level
        log_file: Optional log file path, receives a plain-text copy of every record
        verbose: Enable verbose logging
    """
    global _LEVEL

    if verbose:
        level = logging.DEBUG
    _LEVEL = level

    for wrapper in _LOGGERS.values():
        wrapper.set_level(level)
    _replace_file_handler(log_file)


def get_logger(name: str) -> JarShieldLogger:
    """Get a JarShield logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    if name not in _LOGGERS:
        wrapper = JarShieldLogger(name, _LEVEL)
        if _FILE_HANDLER is not None:
            wrapper.logger.addHandler(_FILE_HANDLER)
        _LOGGERS[name] = wrapper
    return _LOGGERS[name]
