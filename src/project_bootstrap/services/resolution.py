"""Parameter resolution: flags first, prompts for what is missing."""

from pathlib import Path

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import (
    ConfigurationError,
    NameCollisionError,
    ValidationError,
)
from project_bootstrap.core.models.bootstrap import (
    BootstrapConfig,
    BootstrapRequest,
    TemplateReference,
    Visibility,
)
from project_bootstrap.services.prompts import InputProvider
from project_bootstrap.services.reporter import Reporter
from project_bootstrap.utils.naming import is_valid_repo_name, suggest_repo_name

logger = structlog.get_logger(__name__)


class ParameterResolver:
    """Builds a BootstrapConfig from a BootstrapRequest.

    A missing or rejected name is prompted for until a valid, non-colliding
    value is entered. Without interactive input the first rejection is raised.
    """

    def __init__(self, settings: Settings, inputs: InputProvider, reporter: Reporter) -> None:
        self._settings = settings
        self._inputs = inputs
        self._reporter = reporter

    def resolve(self, request: BootstrapRequest) -> BootstrapConfig:
        root_path = self.resolve_root_path(request.root_path)
        template_ref = self.resolve_template(request.template, request.template_fallback)
        name = self.resolve_name(request.name, root_path, interactive=request.interactive)

        config = BootstrapConfig(
            name=name,
            root_path=root_path,
            description=request.description,
            visibility=Visibility.PRIVATE if request.private else Visibility.PUBLIC,
            template_ref=template_ref,
            open_editor=request.open_editor,
        )
        logger.info(
            "Resolved configuration",
            name=config.name,
            root_path=str(config.root_path),
            template=str(template_ref) if template_ref else None,
        )
        return config

    def resolve_root_path(self, root_path: str | None) -> Path:
        path = Path(root_path or self._settings.root_path).expanduser()
        if not path.is_dir():
            raise ConfigurationError(
                f"Root path does not exist: {path}",
                details={"root_path": str(path)},
            )
        return path.resolve()

    def resolve_name(self, candidate: str | None, root_path: Path, interactive: bool = True) -> str:
        """Return the first acceptable name, prompting as long as needed."""
        while True:
            if candidate is None:
                if not interactive:
                    raise ValidationError("A project name is required")
                candidate = self._inputs.ask("Project name")

            problem = self.check_name(candidate, root_path)
            if problem is None:
                return candidate.strip()
            if not interactive:
                raise problem

            logger.debug("Rejected project name", name=candidate, reason=problem.message)
            self._reporter.warning(problem.message)
            candidate = None

    @staticmethod
    def check_name(name: str, root_path: Path) -> ValidationError | None:
        """Return the reason name is unusable under root_path, or None."""
        name = name.strip()
        if not name:
            return ValidationError("Project name cannot be empty")
        if not is_valid_repo_name(name):
            suggestion = suggest_repo_name(name)
            hint = f"; try '{suggestion}'" if suggestion else ""
            return ValidationError(
                f"'{name}' is not a valid repository name{hint}",
                details={"name": name, "suggestion": suggestion},
            )
        target = root_path / name
        if target.exists() or target.is_symlink():
            return NameCollisionError(
                f"A file or directory already exists at {target}",
                details={"path": str(target)},
            )
        return None

    def resolve_template(
        self, template: str | None, template_fallback: bool | None = None
    ) -> TemplateReference | None:
        """Parse the template reference; empty means local init.

        The configured default template only applies when no template was
        given and the fallback is enabled.
        """
        use_fallback = (
            self._settings.template_fallback if template_fallback is None else template_fallback
        )
        if template is None and use_fallback:
            template = self._settings.default_template
            if not template:
                raise ConfigurationError(
                    "Template fallback is enabled but no default template is configured"
                )

        if template is None or not template.strip():
            return None

        try:
            return TemplateReference.parse(template)
        except ValueError as e:
            raise ValidationError(str(e), details={"template": template}) from e
