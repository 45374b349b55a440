"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from project_bootstrap.config.logging import configure_logging
from project_bootstrap.config.settings import Settings, get_settings
from project_bootstrap.git.client import GitClient
from project_bootstrap.git.github import GitHubCLI
from project_bootstrap.services.reporter import Reporter
from tests.fakes import FakeRunner


@pytest.fixture
def root_path(tmp_path: Path) -> Path:
    """An existing parent directory for new projects."""
    path = tmp_path / "proj"
    path.mkdir()
    return path


@pytest.fixture
def settings(root_path: Path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, root_path=str(root_path))


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(quiet=True)


@pytest.fixture
def git(runner: FakeRunner) -> GitClient:
    return GitClient(runner)


@pytest.fixture
def github(runner: FakeRunner) -> GitHubCLI:
    return GitHubCLI(runner)


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Author identity for commits made by the real git binary."""
    for key in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{key}_NAME", "Test")
        monkeypatch.setenv(f"GIT_{key}_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    configure_logging(log_level="WARNING")
