"""Tests for status reporting."""

import pytest

from project_bootstrap.services.reporter import Level, Reporter


@pytest.mark.unit
class TestReporter:
    """Tests for Reporter."""

    def test_levels_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        reporter = Reporter()
        reporter.info("checking")
        reporter.success("done")
        reporter.warning("careful")
        reporter.error("broken")

        captured = capsys.readouterr()
        assert "• checking" in captured.out
        assert "✓ done" in captured.out
        assert "! careful" in captured.out
        assert "✗ broken" in captured.err
        assert "broken" not in captured.out

    def test_history(self) -> None:
        reporter = Reporter(quiet=True)
        reporter.info("a")
        reporter.warning("b")
        reporter.warning("c")
        assert reporter.history == [(Level.INFO, "a"), (Level.WARNING, "b"), (Level.WARNING, "c")]
        assert reporter.messages(Level.WARNING) == ["b", "c"]

    def test_quiet_keeps_warnings(self, capsys: pytest.CaptureFixture[str]) -> None:
        reporter = Reporter(quiet=True)
        reporter.info("hidden")
        reporter.warning("shown")
        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "shown" in captured.out
