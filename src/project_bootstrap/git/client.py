"""Git client over the git CLI."""

from pathlib import Path

import structlog

from project_bootstrap.core.exceptions import CommandError
from project_bootstrap.git.runner import CommandRunner

logger = structlog.get_logger(__name__)


class GitClient:
    """Runs git commands against an explicit repository path.

    Uses the git CLI through a CommandRunner (no gitpython dependency).
    """

    def __init__(self, runner: CommandRunner, executable: str = "git") -> None:
        self._runner = runner
        self._executable = executable

    def _run_git(self, repo_path: Path, *args: str, check: bool = True) -> str:
        """Run a git command in repo_path and return stdout."""
        result = self._runner.run([self._executable, *args], cwd=repo_path, check=check)
        return result.stdout.strip() if result.ok else ""

    def init(self, repo_path: Path, branch: str = "main") -> None:
        """Initialize an empty repository in place."""
        self._run_git(repo_path, "init", f"--initial-branch={branch}")
        logger.info("Initialized repository", path=str(repo_path), branch=branch)

    def clone(self, url: str, destination: Path) -> None:
        """Clone url into destination (which may be an existing empty directory)."""
        self._run_git(destination.parent, "clone", url, str(destination))
        logger.info("Cloned repository", url=url, path=str(destination))

    def add_all(self, repo_path: Path) -> None:
        """Stage all changes, including deletions."""
        self._run_git(repo_path, "add", "-A")

    def commit(self, repo_path: Path, message: str) -> str:
        """Commit staged changes and return the new HEAD hash."""
        self._run_git(repo_path, "commit", "-m", message)
        commit = self.get_current_commit(repo_path)
        logger.info("Committed", path=str(repo_path), commit=commit[:8])
        return commit

    def push(self, repo_path: Path, remote: str | None = None, branch: str | None = None) -> None:
        """Push to the given remote/branch, or to the tracking branch when omitted."""
        args = ["push"]
        if remote:
            args.append(remote)
            if branch:
                args.append(branch)
        self._run_git(repo_path, *args)

    def has_changes(self, repo_path: Path) -> bool:
        """Check whether the working tree or index has changes."""
        return bool(self._run_git(repo_path, "status", "--porcelain"))

    def get_current_commit(self, repo_path: Path) -> str:
        """Get the current HEAD commit hash."""
        return self._run_git(repo_path, "rev-parse", "HEAD")

    def get_current_branch(self, repo_path: Path) -> str:
        """Get the current branch name."""
        try:
            return self._run_git(repo_path, "rev-parse", "--abbrev-ref", "HEAD")
        except CommandError:
            return "main"

    def get_remote_url(self, repo_path: Path, remote: str = "origin") -> str | None:
        """Get the remote URL, if available."""
        url = self._run_git(repo_path, "remote", "get-url", remote, check=False)
        return url or None
