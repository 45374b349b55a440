"""Tests for markdown utility functions."""

import pytest

from project_bootstrap.utils.markdown import render_readme


@pytest.mark.unit
class TestRenderReadme:
    """Tests for render_readme function."""

    def test_title_only(self) -> None:
        assert render_readme("demo") == "# demo\n"

    def test_with_description(self) -> None:
        assert render_readme("demo", "A demo project.") == "# demo\n\nA demo project.\n"

    def test_blank_description_ignored(self) -> None:
        assert render_readme("demo", "   ") == "# demo\n"
