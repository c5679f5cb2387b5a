"""Command line entry point: verify, watch, run and hint."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustdrills.exercise import Exercise, load_exercises
from rustdrills.run import run
from rustdrills.verify import VerificationError, verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_BANNER = (
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
)


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _package_version() -> str:
    try:
        return version("rustdrills")
    except PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustdrills",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--version", action="version", version=_package_version())
    parser.set_defaults(command=None)
    commands = parser.add_subparsers(dest="_subcommand")

    verify_cmd = commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_cmd.set_defaults(command="verify")

    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")

    run_cmd = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_cmd.add_argument("name")
    run_cmd.set_defaults(command="run")

    hint_cmd = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_cmd.add_argument("name")
    hint_cmd.set_defaults(command="hint")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print()
        for line in _BANNER:
            print(line)
        print()

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the rustdrills directory")
        print("Try `cd rustdrills/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path(INFO_FILE).read_text(encoding="utf-8"))

    if args.command in ("run", "hint"):
        exercise = next((e for e in exercises if e.name == args.name), None)
        if exercise is None:
            print("No exercise found for your given name!")
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise)
        except VerificationError:
            return 1
    elif args.command == "verify":
        try:
            verify(exercises)
        except VerificationError:
            return 1
    elif args.command == "watch":
        watch(exercises)
    else:
        print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


class _SharedHint:
    """The hint of the exercise that failed last, shared with the shell thread."""

    def __init__(self, hint: str | None):
        self._lock = threading.Lock()
        self._hint = hint

    def get(self) -> str | None:
        with self._lock:
            return self._hint

    def set(self, hint: str | None) -> None:
        with self._lock:
            self._hint = hint


class _RustFileHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue):
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _clear_screen() -> None:
    print("\x1bc")


def _failed_hint(exercises: Iterable[Exercise]) -> str | None:
    try:
        verify(exercises)
    except VerificationError as err:
        return err.exercise.hint
    return None


def _ends_with(path: Path, tail: Path) -> bool:
    tail_parts = Path(tail).parts
    return bool(tail_parts) and path.parts[-len(tail_parts):] == tail_parts


def _pending_from(exercises: Iterable[Exercise], filepath: Path) -> list[Exercise]:
    """Exercises from the one stored at filepath onwards, in list order."""
    return list(itertools.dropwhile(lambda e: not _ends_with(filepath, e.path), exercises))


def _collect_changes(events: queue.Queue) -> list[Path]:
    """Wait for changes and return them once no new ones came for a while."""
    paths = [events.get()]
    while True:
        try:
            path = events.get(timeout=DEBOUNCE_SECONDS)
        except queue.Empty:
            return paths
        if path not in paths:
            paths.append(path)


def _spawn_watch_shell(shared: _SharedHint) -> None:
    print("Type 'hint' to get help")

    def shell() -> None:
        for line in sys.stdin:
            if line.strip() == "hint":
                hint = shared.get()
                if hint is not None:
                    print(hint)
            else:
                print(f"unknown command: {line}")

    threading.Thread(target=shell, daemon=True).start()


def watch(exercises: Iterable[Exercise]) -> None:
    """Verify the exercises again each time a Rust file under exercises/ changes."""
    exercises = list(exercises)
    events: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_RustFileHandler(events), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        shared = _SharedHint(_failed_hint(exercises))
        _spawn_watch_shell(shared)
        while True:
            for path in _collect_changes(events):
                if path.suffix == ".rs" and path.exists():
                    pending = _pending_from(exercises, path.resolve())
                    _clear_screen()
                    shared.set(_failed_hint(pending))
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """Tell whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


if __name__ == "__main__":
    sys.exit(main())