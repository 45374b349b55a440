"""Operator-facing status reporting."""

from enum import Enum

import click
import structlog

logger = structlog.get_logger(__name__)


class Level(str, Enum):
    """Classification of a status line."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_STYLES: dict[Level, tuple[str, str | None]] = {
    Level.INFO: ("•", None),
    Level.SUCCESS: ("✓", "green"),
    Level.WARNING: ("!", "yellow"),
    Level.ERROR: ("✗", "red"),
}


class Reporter:
    """Prints classified status lines and keeps their history."""

    def __init__(self, quiet: bool = False) -> None:
        self._quiet = quiet
        self.history: list[tuple[Level, str]] = []

    def _emit(self, level: Level, message: str) -> None:
        self.history.append((level, message))
        logger.debug("status", level=level.value, message=message)
        if self._quiet and level in (Level.INFO, Level.SUCCESS):
            return
        marker, color = _STYLES[level]
        click.secho(f"{marker} {message}", fg=color, err=level == Level.ERROR)

    def info(self, message: str) -> None:
        self._emit(Level.INFO, message)

    def success(self, message: str) -> None:
        self._emit(Level.SUCCESS, message)

    def warning(self, message: str) -> None:
        self._emit(Level.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(Level.ERROR, message)

    def messages(self, level: Level) -> list[str]:
        return [message for lvl, message in self.history if lvl == level]
