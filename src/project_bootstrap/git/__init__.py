"""Git and GitHub integration for the project bootstrapper."""

from project_bootstrap.git.client import GitClient
from project_bootstrap.git.github import GitHubCLI
from project_bootstrap.git.runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = ["GitClient", "GitHubCLI", "CommandRunner", "CommandResult", "SubprocessRunner"]
