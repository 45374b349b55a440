"""Editor launch."""

import shutil
from pathlib import Path

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import CommandError
from project_bootstrap.core.models.bootstrap import BootstrapConfig
from project_bootstrap.core.models.report import StepResult
from project_bootstrap.git.runner import CommandRunner
from project_bootstrap.services.prerequisites import Locator
from project_bootstrap.services.reporter import Reporter

logger = structlog.get_logger(__name__)

STEP = "editor"


class EditorLauncher:
    """Opens the workspace file (or the repository directory) in the editor."""

    def __init__(
        self,
        settings: Settings,
        runner: CommandRunner,
        reporter: Reporter,
        locator: Locator | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner
        self._reporter = reporter
        self._locator = locator or shutil.which

    def launch(self, config: BootstrapConfig, workspace_file: Path | None = None) -> StepResult:
        if not config.open_editor:
            return StepResult.skipped(STEP, "Editor launch not requested")

        executable = self._locator(self._settings.editor_executable)
        if executable is None:
            self._reporter.info(
                f"{self._settings.editor_executable} not found on PATH; "
                f"open {config.target_path} manually"
            )
            return StepResult.skipped(STEP, "Editor not found")

        if self._settings.open_workspace_file and workspace_file is not None and workspace_file.is_file():
            target = workspace_file
        else:
            target = config.target_path

        try:
            self._runner.run([executable, str(target)], cwd=config.root_path)
        except CommandError as e:
            logger.warning("Editor launch failed", editor=executable, error=str(e))
            self._reporter.warning(f"Could not launch the editor: {e}")
            return StepResult.failed(STEP, str(e), opened=str(target))

        self._reporter.success(f"Opened {target} in {self._settings.editor_executable}")
        return StepResult.ok(STEP, "Editor launched", opened=str(target))
