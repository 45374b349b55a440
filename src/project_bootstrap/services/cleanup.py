"""Removal of the bootstrap script left in template content."""

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import CommandError
from project_bootstrap.core.models.bootstrap import RepositoryTarget
from project_bootstrap.core.models.report import StepResult
from project_bootstrap.git.client import GitClient
from project_bootstrap.services.reporter import Reporter

logger = structlog.get_logger(__name__)

STEP = "template_cleanup"


class TemplateCleanup:
    """Deletes bootstrap scripts from a cloned template, commits and pushes."""

    def __init__(self, settings: Settings, git: GitClient, reporter: Reporter) -> None:
        self._settings = settings
        self._git = git
        self._reporter = reporter

    def run(self, target: RepositoryTarget) -> StepResult:
        scripts = [
            target.path / name
            for name in self._settings.bootstrap_scripts
            if (target.path / name).is_file()
        ]
        if not scripts:
            return StepResult.skipped(STEP, "No bootstrap script in template")

        removed = [script.name for script in scripts]
        try:
            for script in scripts:
                script.unlink()
            if not self._git.has_changes(target.path):
                return StepResult.skipped(STEP, "Bootstrap script was not tracked", removed=removed)
            self._git.add_all(target.path)
            commit = self._git.commit(target.path, self._settings.cleanup_commit_message)
            self._git.push(target.path)
        except (CommandError, OSError) as e:
            logger.warning("Template cleanup failed", path=str(target.path), error=str(e))
            self._reporter.warning(f"Could not clean up template content: {e}")
            return StepResult.failed(STEP, str(e), removed=removed)

        self._reporter.success(f"Removed {', '.join(removed)} and pushed the cleanup commit")
        return StepResult.ok(STEP, "Bootstrap script removed", removed=removed, commit=commit)
