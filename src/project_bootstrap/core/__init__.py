"""Core domain models and exceptions for the project bootstrapper."""

from project_bootstrap.core.exceptions import (
    BootstrapError,
    CommandError,
    ConfigurationError,
    MaterializationError,
    NameCollisionError,
    PrerequisiteError,
    ValidationError,
)
from project_bootstrap.core.models import (
    BootstrapConfig,
    BootstrapRequest,
    BootstrapReport,
    MaterializationMode,
    RepositoryTarget,
    StepResult,
    StepStatus,
    TemplateReference,
    Visibility,
    WorkspaceDescriptor,
)

__all__ = [
    # Models
    "BootstrapConfig",
    "BootstrapRequest",
    "TemplateReference",
    "Visibility",
    "MaterializationMode",
    "RepositoryTarget",
    "WorkspaceDescriptor",
    "StepResult",
    "StepStatus",
    "BootstrapReport",
    # Exceptions
    "BootstrapError",
    "ConfigurationError",
    "ValidationError",
    "NameCollisionError",
    "PrerequisiteError",
    "CommandError",
    "MaterializationError",
]
