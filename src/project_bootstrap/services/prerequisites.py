"""Prerequisite tool checks."""

import shutil
from collections.abc import Callable
from typing import NamedTuple

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import PrerequisiteError

logger = structlog.get_logger(__name__)

Locator = Callable[[str], str | None]


class Tool(NamedTuple):
    label: str
    executable: str
    hint: str


class ToolStatus(NamedTuple):
    tool: Tool
    path: str | None

    @property
    def available(self) -> bool:
        return self.path is not None


class PrerequisiteChecker:
    """Verifies that the GitHub CLI and git are resolvable on PATH.

    The GitHub CLI is checked first; each missing tool is fatal on its own.
    """

    def __init__(self, settings: Settings, locator: Locator | None = None) -> None:
        self._locator = locator or shutil.which
        self._tools = [
            Tool("GitHub CLI (gh)", settings.gh_executable, "https://cli.github.com/"),
            Tool("Git", settings.git_executable, "https://git-scm.com/downloads"),
        ]

    def statuses(self) -> list[ToolStatus]:
        """Resolve every tool without stopping at the first missing one."""
        return [ToolStatus(tool, self._locator(tool.executable)) for tool in self._tools]

    def check(self) -> None:
        """Raise PrerequisiteError for the first missing tool."""
        for tool in self._tools:
            path = self._locator(tool.executable)
            if path is None:
                logger.error("Missing prerequisite", tool=tool.executable)
                raise PrerequisiteError(tool.label, tool.hint)
            logger.debug("Found prerequisite", tool=tool.executable, path=path)
