"""Tests for template cleanup."""

from pathlib import Path

import pytest

from project_bootstrap.config.settings import Settings
from project_bootstrap.core.models.bootstrap import RepositoryTarget
from project_bootstrap.core.models.report import StepStatus
from project_bootstrap.git.client import GitClient
from project_bootstrap.services.cleanup import TemplateCleanup
from project_bootstrap.services.reporter import Level, Reporter
from tests.factories import RepositoryTargetFactory
from tests.fakes import FakeRunner


@pytest.fixture
def tracked(runner: FakeRunner) -> None:
    """Report the deleted script as a working tree change."""
    runner.on("git", "status", "--porcelain", stdout=" D start.ps1\n")


@pytest.fixture
def target(tmp_path: Path) -> RepositoryTarget:
    path = tmp_path / "demo"
    path.mkdir()
    (path / "README.md").write_text("# template\n")
    return RepositoryTargetFactory(path=path)


@pytest.mark.unit
class TestTemplateCleanup:
    """Tests for TemplateCleanup."""

    def test_skipped_without_script(
        self, settings: Settings, git: GitClient, runner: FakeRunner, reporter: Reporter, target: RepositoryTarget
    ) -> None:
        result = TemplateCleanup(settings, git, reporter).run(target)
        assert result.status == StepStatus.SKIPPED
        assert runner.calls == []

    @pytest.mark.usefixtures("tracked")
    def test_removes_script_commits_and_pushes(
        self, settings: Settings, git: GitClient, runner: FakeRunner, reporter: Reporter, target: RepositoryTarget
    ) -> None:
        (target.path / "start.ps1").write_text("Write-Host bootstrap")
        runner.on("git", "rev-parse", "HEAD", stdout="deadbeef\n")

        result = TemplateCleanup(settings, git, reporter).run(target)

        assert result.status == StepStatus.OK
        assert result.details == {"removed": ["start.ps1"], "commit": "deadbeef"}
        assert not (target.path / "start.ps1").exists()
        assert (target.path / "README.md").exists()
        commands = runner.commands("git")
        assert ["git", "add", "-A"] in commands
        assert ["git", "commit", "-m", "Remove bootstrap script"] in commands
        assert commands[-1] == ["git", "push"]
        assert all(cwd == target.path for _, cwd in runner.calls)

    @pytest.mark.usefixtures("tracked")
    def test_removes_every_configured_script(
        self, root_path: Path, git: GitClient, reporter: Reporter, target: RepositoryTarget
    ) -> None:
        settings = Settings(_env_file=None, root_path=str(root_path), bootstrap_scripts=["start.ps1", "setup.sh"])
        (target.path / "start.ps1").write_text("")
        (target.path / "setup.sh").write_text("")

        result = TemplateCleanup(settings, git, reporter).run(target)

        assert result.details["removed"] == ["start.ps1", "setup.sh"]

    @pytest.mark.usefixtures("tracked")
    def test_push_failure_is_reported_not_raised(
        self, settings: Settings, git: GitClient, runner: FakeRunner, reporter: Reporter, target: RepositoryTarget
    ) -> None:
        (target.path / "start.ps1").write_text("")
        runner.on("git", "push", returncode=1, stderr="remote rejected")

        result = TemplateCleanup(settings, git, reporter).run(target)

        assert result.status == StepStatus.FAILED
        assert "remote rejected" in result.message
        assert "remote rejected" in reporter.messages(Level.WARNING)[0]

    def test_untracked_script_needs_no_commit(
        self, settings: Settings, git: GitClient, runner: FakeRunner, reporter: Reporter, target: RepositoryTarget
    ) -> None:
        (target.path / "start.ps1").write_text("")

        result = TemplateCleanup(settings, git, reporter).run(target)

        assert result.status == StepStatus.SKIPPED
        assert not (target.path / "start.ps1").exists()
        assert runner.commands("git", "commit") == []
        assert runner.commands("git", "push") == []
