"""Operator input providers."""

from collections.abc import Sequence
from typing import Protocol

import click


class InputProvider(Protocol):
    """Source of interactive answers."""

    def ask(self, prompt: str, default: str | None = None) -> str: ...

    def choose(self, prompt: str, choices: Sequence[str], default: str | None = None) -> str: ...


class ClickInputProvider:
    """Reads answers from the terminal through click.

    Answers are returned as typed; callers validate and re-prompt.
    """

    def ask(self, prompt: str, default: str | None = None) -> str:
        return click.prompt(prompt, default=default or "", show_default=bool(default))

    def choose(self, prompt: str, choices: Sequence[str], default: str | None = None) -> str:
        return click.prompt(
            f"{prompt} [{'/'.join(choices)}]",
            default=default or "",
            show_default=bool(default),
        )
