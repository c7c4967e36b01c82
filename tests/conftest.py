"""Shared pytest fixtures and configuration for the ttyask test suite.

Guidelines
----------
* No test touches the real terminal; prompts are driven by scripted
  fake collaborators.
* Rich and questionary are mocked wherever their rendering would
  require a TTY.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import pytest

from ttyask.core.models import PromptSettings
from ttyask.core.prompter import Prompter
from ttyask.exceptions import InputClosedError


class ScriptedReader:
    """LineReader that replays a fixed list of answers."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: list[str] = list(lines)
        self.reads: int = 0

    def read_line(self) -> str:
        if not self.lines:
            raise InputClosedError("scripted input exhausted")
        self.reads += 1
        return self.lines.pop(0)


@dataclass
class Written:
    text: str
    color: str | None
    bold: bool
    newline: bool


@dataclass
class RecordingRenderer:
    """TextRenderer that keeps every write for later assertions."""

    writes: list[Written] = field(default_factory=list)

    def write(
        self,
        text: str,
        *,
        color: str | None = None,
        bold: bool = False,
        newline: bool = True,
    ) -> None:
        self.writes.append(Written(text, color, bold, newline))

    @property
    def texts(self) -> list[str]:
        return [w.text for w in self.writes]


@dataclass
class RecordingTable:
    """TableRenderer that keeps every rendered table."""

    tables: list[list[list[str]]] = field(default_factory=list)

    def render(self, rows: Sequence[Sequence[str]], *, separator: str = " ") -> None:
        self.tables.append([list(row) for row in rows])


@dataclass
class Harness:
    reader: ScriptedReader
    renderer: RecordingRenderer
    table: RecordingTable
    prompter: Prompter


@pytest.fixture
def make_harness():
    """Build a prompter wired to scripted answers and recording renderers."""

    def _make(
        lines: Iterable[str] = (),
        *,
        auto_yes: bool = False,
        translator=None,
    ) -> Harness:
        reader = ScriptedReader(lines)
        renderer = RecordingRenderer()
        table = RecordingTable()
        prompter = Prompter(
            reader,
            renderer,
            table,
            translator,
            PromptSettings(auto_yes=auto_yes),
        )
        return Harness(reader, renderer, table, prompter)

    return _make


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()
