"""Shared types for contrast-tool: ColorInput, Command, Report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from contrast_checker.core.color import Color


@dataclass(frozen=True)
class ColorInput:
    """A parsed colour together with the text it came from."""

    text: str  # as typed on the command line
    color: Color
    label: str = ''  # unique report key, set by label_inputs

    @property
    def key(self) -> str:
        return self.label or self.text


def label_inputs(inputs: list[ColorInput]) -> list[ColorInput]:
    """Give each input a unique report key: its text, plus [position] when the text repeats."""
    counts = Counter(item.text for item in inputs)
    return [
        replace(item, label=item.text if counts[item.text] == 1 else f'{item.text} [{i + 1}]')
        for i, item in enumerate(inputs)
    ]


class Command:
    """A self-registering command.

    Usage in a command module:

        command = Command(name='luminance', help='Relative luminance per colour')

        @command.run
        def run(colors, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colors: list[ColorInput], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colors, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    inputs: list[str] = field(default_factory=list)
    subjects: dict[str, dict[str, Any]] = field(default_factory=dict)
    ratios: dict[str, float] = field(default_factory=dict)  # subject -> contrast ratio
    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def pass_count(self) -> int:
        return len(self.passed)

    @property
    def fail_count(self) -> int:
        return len(self.failed)

    def add(self, subject: str, command_name: str, data: dict[str, Any]) -> None:
        """Add command results for a subject (a colour or a colour pair)."""
        self.subjects.setdefault(subject, {})[command_name] = data

    def record_ratio(self, subject: str, ratio: float) -> None:
        self.ratios[subject] = ratio

    def record_pass(self, subject: str) -> None:
        self.passed.append(subject)

    def record_fail(self, subject: str) -> None:
        self.failed.append(subject)
