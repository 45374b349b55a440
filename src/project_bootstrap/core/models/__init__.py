"""Domain models for the project bootstrapper."""

from project_bootstrap.core.models.bootstrap import (
    BootstrapConfig,
    BootstrapRequest,
    MaterializationMode,
    RepositoryTarget,
    TemplateReference,
    Visibility,
)
from project_bootstrap.core.models.report import BootstrapReport, StepResult, StepStatus
from project_bootstrap.core.models.workspace import WorkspaceDescriptor, WorkspaceFolder

__all__ = [
    "BootstrapConfig",
    "BootstrapRequest",
    "TemplateReference",
    "Visibility",
    "MaterializationMode",
    "RepositoryTarget",
    "WorkspaceDescriptor",
    "WorkspaceFolder",
    "StepResult",
    "StepStatus",
    "BootstrapReport",
]
