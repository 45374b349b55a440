"""GitHub operations through the gh CLI."""

from pathlib import Path

import structlog

from project_bootstrap.core.models.bootstrap import BootstrapConfig
from project_bootstrap.git.runner import CommandRunner

logger = structlog.get_logger(__name__)


class GitHubCLI:
    """Creates repositories and looks up the authenticated user via gh."""

    def __init__(self, runner: CommandRunner, executable: str = "gh") -> None:
        self._runner = runner
        self._executable = executable

    def _run_gh(self, cwd: Path | None, *args: str) -> str:
        result = self._runner.run([self._executable, *args], cwd=cwd)
        return result.stdout.strip()

    @staticmethod
    def _common_create_args(config: BootstrapConfig) -> list[str]:
        args = ["--private" if config.is_private else "--public"]
        if config.description:
            args.extend(["--description", config.description])
        return args

    def current_user(self) -> str:
        """Login of the authenticated user."""
        return self._run_gh(None, "api", "user", "--jq", ".login")

    def create_from_template(self, config: BootstrapConfig) -> None:
        """Create the remote repository from a template and clone it.

        gh clones into ``<cwd>/<name>``, so the root path is the working
        directory.
        """
        if config.template_ref is None:
            raise ValueError("create_from_template requires a template reference")
        self._run_gh(
            config.root_path,
            "repo",
            "create",
            config.name,
            "--template",
            str(config.template_ref),
            *self._common_create_args(config),
            "--clone",
        )
        logger.info(
            "Created repository from template",
            name=config.name,
            template=str(config.template_ref),
            visibility=config.visibility.value,
        )

    def create_from_source(self, config: BootstrapConfig, push: bool = True) -> None:
        """Create the remote repository from the local working copy."""
        args = [
            "repo",
            "create",
            config.name,
            "--source",
            str(config.target_path),
            "--remote",
            "origin",
            *self._common_create_args(config),
        ]
        if push:
            args.append("--push")
        self._run_gh(config.target_path, *args)
        logger.info(
            "Created repository from local source",
            name=config.name,
            visibility=config.visibility.value,
            pushed=push,
        )
