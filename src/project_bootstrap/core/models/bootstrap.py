"""Bootstrap configuration models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator

from project_bootstrap.utils.urls import GITHUB_HOST, parse_repo_reference


class Visibility(str, Enum):
    """Visibility of the remote repository."""

    PRIVATE = "private"
    PUBLIC = "public"


class MaterializationMode(str, Enum):
    """How the local working copy was produced."""

    TEMPLATE_CLONE = "template_clone"
    LOCAL_INIT = "local_init"


class TemplateReference(BaseModel):
    """A template repository given as a URL or an ``owner/repo`` slug."""

    owner: str
    repo: str
    host: str = GITHUB_HOST

    @classmethod
    def parse(cls, reference: str) -> "TemplateReference":
        host, owner, repo = parse_repo_reference(reference)
        return cls(owner=owner, repo=repo, host=host)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.slug if self.host == GITHUB_HOST else f"{self.host}/{self.slug}"


class BootstrapConfig(BaseModel):
    """Fully resolved parameters for one bootstrap run."""

    name: str
    root_path: Path
    description: str = ""
    visibility: Visibility = Visibility.PRIVATE
    template_ref: TemplateReference | None = None
    open_editor: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("root_path")
    @classmethod
    def _root_path_exists(cls, value: Path) -> Path:
        value = value.expanduser()
        if not value.is_dir():
            raise ValueError(f"root path does not exist: {value}")
        return value.resolve()

    @property
    def target_path(self) -> Path:
        return self.root_path / self.name

    @property
    def uses_template(self) -> bool:
        return self.template_ref is not None

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE


class RepositoryTarget(BaseModel):
    """The materialized local working copy."""

    path: Path
    mode: MaterializationMode
    branch: str = "main"
    remote_url: str | None = None


class BootstrapRequest(BaseModel):
    """Raw parameters as given on the command line; None means not given."""

    name: str | None = None
    root_path: str | None = None
    description: str = ""
    private: bool = True
    template: str | None = None
    template_fallback: bool | None = None
    open_editor: bool = False
    interactive: bool = True
    assume_yes: bool = False
