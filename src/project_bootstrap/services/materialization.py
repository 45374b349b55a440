"""Repository materialization: template clone or local init."""

import shutil
from enum import Enum
from pathlib import Path

import structlog

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.exceptions import (
    CommandError,
    MaterializationError,
    NameCollisionError,
)
from project_bootstrap.core.models.bootstrap import (
    BootstrapConfig,
    MaterializationMode,
    RepositoryTarget,
)
from project_bootstrap.git.client import GitClient
from project_bootstrap.git.github import GitHubCLI
from project_bootstrap.services.prompts import InputProvider
from project_bootstrap.services.reporter import Reporter
from project_bootstrap.utils.markdown import render_readme
from project_bootstrap.utils.urls import repository_url

logger = structlog.get_logger(__name__)


class Decision(str, Enum):
    """Operator answer at the confirmation gate."""

    YES = "yes"
    NO = "no"
    SKIP = "skip"


class MaterializationState(str, Enum):
    UNCONFIRMED = "unconfirmed"
    CANCELLED = "cancelled"
    TEMPLATE_CLONE = "template_clone"
    LOCAL_INIT = "local_init"
    READY = "ready"


class RepositoryMaterializer:
    """Produces the local working copy for a resolved configuration.

    States: unconfirmed -> {cancelled | template_clone | local_init} -> ready.
    The target directory is created by prepare() and removed again on
    cancellation; it is never touched when it existed before the run.
    """

    def __init__(
        self,
        settings: Settings,
        git: GitClient,
        github: GitHubCLI,
        inputs: InputProvider,
        reporter: Reporter,
    ) -> None:
        self._settings = settings
        self._git = git
        self._github = github
        self._inputs = inputs
        self._reporter = reporter
        self._created: Path | None = None
        self.state = MaterializationState.UNCONFIRMED

    def prepare(self, config: BootstrapConfig) -> Path:
        """Create the empty target directory."""
        target = config.target_path
        try:
            target.mkdir()
        except FileExistsError as e:
            raise NameCollisionError(
                f"A file or directory already exists at {target}",
                details={"path": str(target)},
            ) from e
        except OSError as e:
            logger.error("Could not create directory", path=str(target), error=str(e))
            raise MaterializationError(
                f"Could not create {target}: {e}",
                details={"path": str(target)},
            ) from e
        self._created = target
        self._reporter.info(f"Created directory {target}")
        return target

    def confirm(self, config: BootstrapConfig, assume_yes: bool = False) -> Decision:
        """Show the configuration and ask whether to go ahead."""
        self._reporter.info(f"Project:     {config.name}")
        self._reporter.info(f"Location:    {config.target_path}")
        self._reporter.info(f"Visibility:  {config.visibility.value}")
        if config.description:
            self._reporter.info(f"Description: {config.description}")
        self._reporter.info(f"Template:    {config.template_ref or '(none, local init)'}")

        if assume_yes:
            return Decision.YES

        if self._settings.allows_skip:
            choices = [Decision.YES.value, Decision.NO.value, Decision.SKIP.value]
            prompt = "Create the GitHub repository? (skip = local only)"
        else:
            choices = [Decision.YES.value, Decision.NO.value]
            prompt = "Create the GitHub repository?"

        while True:
            answer = self._inputs.choose(prompt, choices, default=Decision.YES.value)
            decision = self._parse_decision(answer, choices)
            if decision is not None:
                logger.debug("Confirmation answered", decision=decision.value)
                return decision
            self._reporter.warning(f"Please answer one of: {', '.join(choices)}")

    @staticmethod
    def _parse_decision(answer: str, choices: list[str]) -> Decision | None:
        answer = answer.strip().lower()
        for choice in choices:
            if answer and choice.startswith(answer):
                return Decision(choice)
        return None

    def materialize(self, config: BootstrapConfig, decision: Decision) -> RepositoryTarget | None:
        """Run the transition chosen at the gate; None means cancelled."""
        if decision == Decision.NO:
            self.state = MaterializationState.CANCELLED
            self.rollback()
            return None

        try:
            if decision == Decision.YES and config.uses_template:
                self.state = MaterializationState.TEMPLATE_CLONE
                target = self._clone_template(config)
            else:
                if decision == Decision.SKIP and config.uses_template:
                    self._reporter.warning(
                        f"Skipping remote creation; template {config.template_ref} is not applied"
                    )
                self.state = MaterializationState.LOCAL_INIT
                target = self._init_local(config, create_remote=decision == Decision.YES)
        except MaterializationError:
            self._discard_if_empty()
            raise
        except (CommandError, OSError) as e:
            logger.error("Materialization failed", state=self.state.value, error=str(e))
            self._discard_if_empty()
            raise MaterializationError(
                f"Could not materialize {config.name}: {e}",
                details={"state": self.state.value, "path": str(config.target_path)},
            ) from e

        self.state = MaterializationState.READY
        return target

    def _clone_template(self, config: BootstrapConfig) -> RepositoryTarget:
        target = config.target_path
        self._reporter.info(f"Creating {config.name} from template {config.template_ref}")
        gh_error: CommandError | None = None
        try:
            self._github.create_from_template(config)
        except CommandError as e:
            logger.warning("gh repo create failed", name=config.name, error=str(e))
            gh_error = e

        if not (target / ".git").exists():
            self._reporter.warning(f"gh did not clone into {target}; cloning explicitly")
            try:
                login = self._github.current_user()
                self._git.clone(repository_url(login, config.name), target)
            except CommandError as e:
                raise self._clone_failure(config, gh_error or e) from (gh_error or e)

        if not (target / ".git").exists():
            if gh_error is not None:
                raise self._clone_failure(config, gh_error) from gh_error
            raise MaterializationError(
                f"Repository was created but no working copy exists at {target}",
                details={"path": str(target)},
            )

        remote_url = self._git.get_remote_url(target)
        self._reporter.success(f"Cloned {remote_url or config.name} into {target}")
        return RepositoryTarget(
            path=target,
            mode=MaterializationMode.TEMPLATE_CLONE,
            branch=self._git.get_current_branch(target),
            remote_url=remote_url,
        )

    def _clone_failure(self, config: BootstrapConfig, error: CommandError) -> MaterializationError:
        logger.error("Template clone failed", name=config.name, error=str(error))
        return MaterializationError(
            f"Could not materialize {config.name}: {error}",
            details={"state": self.state.value, "path": str(config.target_path)},
        )

    def _init_local(self, config: BootstrapConfig, create_remote: bool) -> RepositoryTarget:
        target = config.target_path
        branch = self._settings.default_branch
        self._git.init(target, branch)

        committed = False
        if self._settings.seed_readme:
            readme = target / "README.md"
            readme.write_text(render_readme(config.name, config.description), encoding="utf-8")
            self._git.add_all(target)
            self._git.commit(target, self._settings.initial_commit_message)
            committed = True
        self._reporter.success(f"Initialized local repository at {target}")

        remote_url = None
        if create_remote:
            self._github.create_from_source(config, push=committed)
            remote_url = self._git.get_remote_url(target)
            self._reporter.success(f"Created remote repository {remote_url or config.name}")

        return RepositoryTarget(
            path=target,
            mode=MaterializationMode.LOCAL_INIT,
            branch=branch,
            remote_url=remote_url,
        )

    def rollback(self) -> bool:
        """Remove the directory created by prepare(); failures are only reported."""
        target = self._created
        if target is None or not target.exists():
            return False
        try:
            shutil.rmtree(target)
        except OSError as e:
            logger.warning("Could not remove directory", path=str(target), error=str(e))
            self._reporter.warning(f"Could not remove {target}: {e}")
            return False
        self._created = None
        self._reporter.info(f"Removed {target}")
        return True

    def _discard_if_empty(self) -> None:
        target = self._created
        if target is None or not target.is_dir() or any(target.iterdir()):
            return
        try:
            target.rmdir()
        except OSError as e:
            logger.warning("Could not remove empty directory", path=str(target), error=str(e))
            return
        self._created = None
