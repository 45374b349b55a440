"""Exceptions raised by the project bootstrapper."""

from typing import Any


class BootstrapError(Exception):
    """Base exception for bootstrap failures.

    Carries the process exit code the CLI terminates with.
    """

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BootstrapError):
    """Invalid settings or an unusable root path."""


class ValidationError(BootstrapError):
    """A resolved parameter failed validation."""


class NameCollisionError(ValidationError):
    """The target path for a project name already exists."""


class PrerequisiteError(BootstrapError):
    """A required external tool is not available on PATH."""

    def __init__(self, tool: str, hint: str) -> None:
        super().__init__(
            f"{tool} is not installed or not on PATH. Install it from {hint}",
            details={"tool": tool, "hint": hint},
        )
        self.tool = tool
        self.hint = hint


class CommandError(BootstrapError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        detail = stderr.strip() or "no output"
        super().__init__(
            f"Command failed ({returncode}): {' '.join(command)}: {detail}",
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class MaterializationError(BootstrapError):
    """The repository could not be created, cloned or initialized."""
