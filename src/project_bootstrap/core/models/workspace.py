"""Editor workspace descriptor."""

from typing import Any

from pydantic import BaseModel, Field


def _default_settings() -> dict[str, Any]:
    # Keep the .git folder visible in the explorer
    return {"files.exclude": {"**/.git": False}}


class WorkspaceFolder(BaseModel):
    """A folder entry of a workspace file."""

    path: str
    name: str | None = None


class WorkspaceDescriptor(BaseModel):
    """A ``.code-workspace`` document: folder list plus editor settings."""

    folders: list[WorkspaceFolder] = Field(default_factory=list)
    settings: dict[str, Any] = Field(default_factory=_default_settings)

    @classmethod
    def for_folder(cls, path: str) -> "WorkspaceDescriptor":
        return cls(folders=[WorkspaceFolder(path=path)])

    def to_json(self) -> str:
        """Serialize to the indented JSON editors expect."""
        return self.model_dump_json(indent=4, exclude_none=True) + "\n"
