"""External process invocation."""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import structlog

from project_bootstrap.core.exceptions import CommandError

logger = structlog.get_logger(__name__)


@dataclass
class CommandResult:
    """Captured result of an external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runs an argument vector in an explicit working directory."""

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        check: bool = True,
    ) -> CommandResult: ...


class SubprocessRunner:
    """CommandRunner backed by subprocess.

    Arguments are passed as a list, never through a shell.
    """

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        check: bool = True,
    ) -> CommandResult:
        argv = [str(arg) for arg in args]
        logger.debug("Running command", args=argv, cwd=str(cwd) if cwd else None)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandError(argv, 127, str(e)) from e

        result = CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if check and not result.ok:
            logger.debug("Command failed", args=argv, returncode=result.returncode)
            raise CommandError(argv, result.returncode, result.stderr)
        return result
