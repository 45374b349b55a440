"""Main bootstrap pipeline."""

from pathlib import Path

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import ValidationError
from project_bootstrap.core.models.bootstrap import BootstrapRequest, MaterializationMode
from project_bootstrap.core.models.report import BootstrapReport, StepStatus
from project_bootstrap.git.client import GitClient
from project_bootstrap.git.github import GitHubCLI
from project_bootstrap.git.runner import CommandRunner, SubprocessRunner
from project_bootstrap.services.cleanup import TemplateCleanup
from project_bootstrap.services.editor import EditorLauncher
from project_bootstrap.services.materialization import RepositoryMaterializer
from project_bootstrap.services.prerequisites import Locator, PrerequisiteChecker
from project_bootstrap.services.prompts import ClickInputProvider, InputProvider
from project_bootstrap.services.reporter import Reporter
from project_bootstrap.services.resolution import ParameterResolver
from project_bootstrap.services.workspace import WorkspaceWriter

logger = structlog.get_logger(__name__)


class BootstrapPipeline:
    """Pipeline for bootstrapping a new project.

    Orchestrates the full run:
    1. Verify gh and git are installed (fatal, before any mutation)
    2. Resolve parameters from flags and prompts
    3. Create the target directory
    4. Ask for confirmation (yes / no / skip)
    5. Clone the template or initialize locally (fatal on failure)
    6. Remove the bootstrap script from template content (best-effort)
    7. Write the workspace file (best-effort)
    8. Launch the editor (best-effort)
    """

    def __init__(
        self,
        settings: Settings,
        runner: CommandRunner | None = None,
        inputs: InputProvider | None = None,
        reporter: Reporter | None = None,
        locator: Locator | None = None,
    ) -> None:
        self._settings = settings
        self._reporter = reporter or Reporter()
        runner = runner or SubprocessRunner()
        inputs = inputs or ClickInputProvider()
        git = GitClient(runner, settings.git_executable)
        github = GitHubCLI(runner, settings.gh_executable)

        # Initialize components
        self._prerequisites = PrerequisiteChecker(settings, locator)
        self._resolver = ParameterResolver(settings, inputs, self._reporter)
        self._materializer = RepositoryMaterializer(settings, git, github, inputs, self._reporter)
        self._cleanup = TemplateCleanup(settings, git, self._reporter)
        self._workspace = WorkspaceWriter(settings, self._reporter)
        self._editor = EditorLauncher(settings, runner, self._reporter, locator)

    def run(self, request: BootstrapRequest) -> BootstrapReport:
        """Run the bootstrap; fatal errors propagate as BootstrapError."""
        self._settings.validate_choices()
        if not request.interactive and not request.assume_yes:
            raise ValidationError("Running without input requires --yes")

        # 1. Prerequisites
        self._prerequisites.check()
        self._reporter.success("Found gh and git")

        # 2. Parameters
        config = self._resolver.resolve(request)
        report = BootstrapReport(config=config)

        # 3-4. Directory and confirmation gate
        self._materializer.prepare(config)
        try:
            decision = self._materializer.confirm(config, assume_yes=request.assume_yes)
        except (Exception, KeyboardInterrupt):
            self._materializer.rollback()
            raise

        # 5. Materialization
        target = self._materializer.materialize(config, decision)
        if target is None:
            report.cancelled = True
            self._reporter.info("Cancelled; nothing was created")
            logger.info("Bootstrap cancelled", name=config.name)
            return report
        report.target = target

        # 6. Template cleanup
        if target.mode == MaterializationMode.TEMPLATE_CLONE:
            report.steps.append(self._cleanup.run(target))

        # 7. Workspace file
        workspace = self._workspace.write(config)
        report.steps.append(workspace)
        workspace_file = (
            Path(workspace.details["path"]) if workspace.status == StepStatus.OK else None
        )

        # 8. Editor
        report.steps.append(self._editor.launch(config, workspace_file))

        if report.degraded:
            self._reporter.warning(f"{config.name} is ready at {target.path}, with warnings")
        else:
            self._reporter.success(f"{config.name} is ready at {target.path}")
        logger.info(
            "Bootstrap complete",
            name=config.name,
            mode=target.mode.value,
            degraded=report.degraded,
        )
        return report
