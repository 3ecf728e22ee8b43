import io
from typing import Callable, Iterable

import pytest
from rich.console import Console

from informal.errors import InputStreamClosed


class ScriptedInput:
    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if self.reads >= len(self._lines):
            raise InputStreamClosed()
        line = self._lines[self.reads]
        self.reads += 1
        return line


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    def make(*lines: str) -> ScriptedInput:
        return ScriptedInput(lines)

    return make
