"""Tests for the subprocess-backed command runner."""

import sys
from pathlib import Path

import pytest

from project_bootstrap.core.exceptions import CommandError
from project_bootstrap.git.runner import SubprocessRunner


@pytest.mark.unit
class TestSubprocessRunner:
    """Tests for SubprocessRunner."""

    def test_captures_stdout(self) -> None:
        result = SubprocessRunner().run([sys.executable, "-c", "print('hello')"])
        assert result.ok
        assert result.stdout.strip() == "hello"

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        result = SubprocessRunner().run(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_arguments_are_not_shell_interpreted(self) -> None:
        result = SubprocessRunner().run(
            [sys.executable, "-c", "import sys; print(sys.argv[1])", "$(echo hi); rm -rf x"]
        )
        assert result.stdout.strip() == "$(echo hi); rm -rf x"

    def test_failure_raises(self) -> None:
        with pytest.raises(CommandError) as exc_info:
            SubprocessRunner().run(
                [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"]
            )
        assert exc_info.value.returncode == 3
        assert exc_info.value.stderr == "bad"

    def test_failure_without_check(self) -> None:
        result = SubprocessRunner().run([sys.executable, "-c", "raise SystemExit(2)"], check=False)
        assert result.returncode == 2
        assert result.ok is False

    def test_missing_executable(self) -> None:
        with pytest.raises(CommandError) as exc_info:
            SubprocessRunner().run(["definitely-not-a-real-tool-xyz"])
        assert exc_info.value.returncode == 127
