"""Tests for the gh CLI wrapper."""

from pathlib import Path

import pytest

from project_bootstrap.core.models.bootstrap import TemplateReference, Visibility
from project_bootstrap.git.github import GitHubCLI
from tests.factories import BootstrapConfigFactory
from tests.fakes import FakeRunner


@pytest.mark.unit
class TestGitHubCLI:
    """Argument vectors sent to gh."""

    def test_current_user(self, github: GitHubCLI, runner: FakeRunner) -> None:
        runner.on("gh", "api", "user", stdout="octocat\n")
        assert github.current_user() == "octocat"
        assert runner.commands("gh") == [["gh", "api", "user", "--jq", ".login"]]

    def test_create_from_template(self, github: GitHubCLI, runner: FakeRunner, root_path: Path) -> None:
        config = BootstrapConfigFactory(
            name="demo",
            root_path=root_path,
            description="A demo",
            template_ref=TemplateReference.parse("acme/tpl"),
        )
        github.create_from_template(config)

        assert runner.commands("gh") == [
            [
                "gh", "repo", "create", "demo",
                "--template", "acme/tpl",
                "--private",
                "--description", "A demo",
                "--clone",
            ]
        ]
        assert runner.cwd_of("gh", "repo", "create") == config.root_path

    def test_create_from_template_public_without_description(
        self, github: GitHubCLI, runner: FakeRunner, root_path: Path
    ) -> None:
        config = BootstrapConfigFactory(
            name="demo",
            root_path=root_path,
            description="",
            visibility=Visibility.PUBLIC,
            template_ref=TemplateReference.parse("https://github.com/acme/tpl.git"),
        )
        github.create_from_template(config)

        argv = runner.commands("gh", "repo", "create")[0]
        assert "--public" in argv
        assert "--private" not in argv
        assert "--description" not in argv

    def test_create_from_template_requires_template(
        self, github: GitHubCLI, root_path: Path
    ) -> None:
        with pytest.raises(ValueError):
            github.create_from_template(BootstrapConfigFactory(root_path=root_path))

    def test_create_from_source(self, github: GitHubCLI, runner: FakeRunner, root_path: Path) -> None:
        config = BootstrapConfigFactory(name="demo", root_path=root_path, description="")
        github.create_from_source(config)

        assert runner.commands("gh") == [
            [
                "gh", "repo", "create", "demo",
                "--source", str(config.target_path),
                "--remote", "origin",
                "--private",
                "--push",
            ]
        ]
        assert runner.cwd_of("gh") == config.target_path

    def test_create_from_source_without_push(
        self, github: GitHubCLI, runner: FakeRunner, root_path: Path
    ) -> None:
        config = BootstrapConfigFactory(name="demo", root_path=root_path)
        github.create_from_source(config, push=False)
        assert "--push" not in runner.commands("gh")[0]
