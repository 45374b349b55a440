"""Bootstrap steps."""

from project_bootstrap.services.cleanup import TemplateCleanup
from project_bootstrap.services.editor import EditorLauncher
from project_bootstrap.services.materialization import (
    Decision,
    MaterializationState,
    RepositoryMaterializer,
)
from project_bootstrap.services.prerequisites import PrerequisiteChecker
from project_bootstrap.services.prompts import ClickInputProvider, InputProvider
from project_bootstrap.services.reporter import Level, Reporter
from project_bootstrap.services.resolution import ParameterResolver
from project_bootstrap.services.workspace import WorkspaceWriter

__all__ = [
    "PrerequisiteChecker",
    "ParameterResolver",
    "RepositoryMaterializer",
    "Decision",
    "MaterializationState",
    "TemplateCleanup",
    "WorkspaceWriter",
    "EditorLauncher",
    "InputProvider",
    "ClickInputProvider",
    "Reporter",
    "Level",
]
