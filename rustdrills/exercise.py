"""Exercise descriptions, compilation and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import tomllib
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2


def temp_file() -> str:
    """Return the path of the per-process build artefact."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the `I AM NOT DONE` marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in the exercise list."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> subprocess.CompletedProcess:
        """Compile the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        return subprocess.run(args, capture_output=True, check=False)

    def run(self) -> subprocess.CompletedProcess:
        """Run the previously compiled binary."""
        return subprocess.run([temp_file()], capture_output=True, check=False)

    def clean(self) -> None:
        """Remove the compiled binary, ignoring a missing file."""
        with suppress(OSError):
            os.remove(temp_file())

    def state(self) -> list[ContextLine] | None:
        """Return None when done, else the lines around the pending marker."""
        source = Path(self.path).read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return None

        lines = source.splitlines()
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.match(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"marker in {self} spans several lines")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines[first : last + 1], start=first)
        ]


def load_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise list."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err} in exercise list") from None