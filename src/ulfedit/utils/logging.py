"""Logging utilities for ulfedit."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from ulfedit.core.history import HistoryEvent

_installed_handlers: list[logging.Handler] = []


@dataclass
class EditStats:
    """Counters for one editing session."""

    pushed_count: int = 0
    undone_count: int = 0
    redone_count: int = 0
    save_count: int = 0

    @property
    def net_edits(self) -> int:
        """Edits currently applied, counting each push or redo once."""
        return self.pushed_count + self.redone_count - self.undone_count


def get_logger(name: str = "ulfedit") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by an earlier call
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger("ulfedit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class HistoryLogger:
    """Command history listener that logs events and keeps EditStats.

    Example:
        history.subscribe(HistoryLogger(get_logger("ulfedit.history")))
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EditStats()

    def __call__(self, event: "HistoryEvent") -> None:
        action = event.action
        if action == "push" and not event.merged:
            self._stats.pushed_count += 1
        elif action == "undo":
            self._stats.undone_count += 1
        elif action == "redo":
            self._stats.redone_count += 1

        self._logger.debug(
            "History changed",
            action=action,
            label=event.label,
            index=event.index,
            clean=event.clean,
            merged=event.merged,
        )

    def log_save(self, path: Path) -> None:
        """Log a successful save."""
        self._logger.info("Font saved", path=str(path))
        self._stats.save_count += 1

    def log_load(self, path: Path, blocks: int) -> None:
        self._logger.info("Font loaded", path=str(path), blocks=blocks)

    def log_failure(self, operation: str, path: Path, error: Exception) -> None:
        """Log a failed load or save."""
        self._logger.error(
            "Font file operation failed",
            operation=operation,
            path=str(path),
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> EditStats:
        """Get current editing statistics."""
        return self._stats
