"""Input sources for values the operator supplies interactively."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import click


class InputSource(Protocol):
    """Obtains a string from the operator given a prompt."""

    def ask(self, prompt: str, secret: bool = False) -> str: ...


class ConsoleInput:
    """Reads answers from the terminal via click.prompt.

    Blank answers are accepted and returned as "". Ctrl-C and EOF raise
    click.Abort, which the CLI turns into a non-zero exit.
    """

    def ask(self, prompt: str, secret: bool = False) -> str:
        value = click.prompt(
            prompt,
            default="",
            show_default=False,
            hide_input=secret,
            err=True,
        )
        return str(value).strip()


class ScriptedInput:
    """Replays a fixed list of answers instead of reading the terminal."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str, secret: bool = False) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise click.Abort()
        return self._answers.pop(0)
