"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from io import StringIO

import pytest
from rich.console import Console


class ScriptedInput:
    """Return queued lines for each prompt and raise ``EOFError`` when exhausted."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def console() -> Console:
    """Console writing plain text into memory."""

    return Console(file=StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def console_output(console: Console) -> Callable[[], str]:
    """Return a callable reading everything printed so far."""

    def _read() -> str:
        file = console.file
        assert isinstance(file, StringIO)
        return file.getvalue()

    return _read


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], ScriptedInput]:
    """Build scripted prompt readers."""

    return ScriptedInput
