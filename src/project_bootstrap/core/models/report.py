"""Step outcomes and the run report."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from project_bootstrap.core.models.bootstrap import BootstrapConfig, RepositoryTarget


class StepStatus(str, Enum):
    """Outcome of a best-effort step."""

    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


class StepResult(BaseModel):
    """Outcome of one step, returned instead of only being printed."""

    step: str
    status: StepStatus
    message: str = ""
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def ok(cls, step: str, message: str = "", **details: Any) -> "StepResult":
        return cls(step=step, status=StepStatus.OK, message=message, details=details)

    @classmethod
    def skipped(cls, step: str, message: str = "", **details: Any) -> "StepResult":
        return cls(step=step, status=StepStatus.SKIPPED, message=message, details=details)

    @classmethod
    def failed(cls, step: str, message: str = "", **details: Any) -> "StepResult":
        return cls(step=step, status=StepStatus.FAILED, message=message, details=details)


class BootstrapReport(BaseModel):
    """Result of a bootstrap run."""

    config: BootstrapConfig | None = None
    target: RepositoryTarget | None = None
    steps: list[StepResult] = Field(default_factory=list)
    cancelled: bool = False

    @property
    def degraded(self) -> bool:
        """True when at least one best-effort step failed."""
        return any(step.status == StepStatus.FAILED for step in self.steps)

    def step(self, name: str) -> StepResult | None:
        for result in self.steps:
            if result.step == name:
                return result
        return None
