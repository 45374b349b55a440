"""Editor workspace file emission."""

from pathlib import Path

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.models.bootstrap import BootstrapConfig
from project_bootstrap.core.models.report import StepResult
from project_bootstrap.core.models.workspace import WorkspaceDescriptor
from project_bootstrap.services.reporter import Reporter

logger = structlog.get_logger(__name__)

STEP = "workspace"


class WorkspaceWriter:
    """Writes ``<root>/<name><suffix>`` pointing at the repository folder."""

    def __init__(self, settings: Settings, reporter: Reporter) -> None:
        self._settings = settings
        self._reporter = reporter

    def path_for(self, config: BootstrapConfig) -> Path:
        return config.root_path / f"{config.name}{self._settings.workspace_suffix}"

    def write(self, config: BootstrapConfig) -> StepResult:
        """Write the workspace file, replacing any existing one."""
        path = self.path_for(config)
        descriptor = WorkspaceDescriptor.for_folder(config.name)
        try:
            path.write_text(descriptor.to_json(), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write workspace file", path=str(path), error=str(e))
            self._reporter.warning(f"Could not write workspace file {path}: {e}")
            return StepResult.failed(STEP, str(e), path=str(path))

        self._reporter.success(f"Wrote workspace file {path}")
        return StepResult.ok(STEP, "Workspace file written", path=str(path))
