"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from project_bootstrap.core.exceptions import ConfigurationError

CONFIRM_MODES = ("three-way", "two-way")
LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Settings loaded from ``BOOTSTRAP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOTSTRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" | "json"

    # Parameter defaults
    root_path: str = "~/Projects"
    default_template: str | None = None
    # Use default_template when no --template is given
    template_fallback: bool = False

    # Confirmation gate: "three-way" (yes/no/skip) | "two-way" (yes/no)
    confirm_mode: str = "three-way"

    # Local init
    default_branch: str = "main"
    seed_readme: bool = True
    initial_commit_message: str = "Initial commit"

    # Template cleanup
    bootstrap_scripts: list[str] = Field(default_factory=lambda: ["start.ps1", "start.sh"])
    cleanup_commit_message: str = "Remove bootstrap script"

    # External tools
    git_executable: str = "git"
    gh_executable: str = "gh"
    editor_executable: str = "code"

    # Workspace / editor
    workspace_suffix: str = ".code-workspace"
    open_workspace_file: bool = True

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.root_path = str(Path(self.root_path).expanduser())
        self.confirm_mode = self.confirm_mode.lower()
        self.log_format = self.log_format.lower()

    @property
    def allows_skip(self) -> bool:
        return self.confirm_mode == "three-way"

    def validate_choices(self) -> None:
        """Raise ConfigurationError for unsupported enumerated values."""
        if self.confirm_mode not in CONFIRM_MODES:
            raise ConfigurationError(
                f"Unknown confirm mode: {self.confirm_mode}",
                details={"allowed": list(CONFIRM_MODES)},
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format: {self.log_format}",
                details={"allowed": list(LOG_FORMATS)},
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
