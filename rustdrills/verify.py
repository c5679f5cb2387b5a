"""Checking exercises in order and prompting for completion."""

from __future__ import annotations

import itertools
import sys
import threading
from collections.abc import Iterable

from rustdrills.exercise import Exercise, Mode


class VerificationError(Exception):
    """An exercise failed to compile, to pass its tests, or is not done."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _ansi(text: object, *codes: str) -> str:
    if not sys.stdout.isatty():
        return str(text)
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _green(text: object) -> str:
    return _ansi(text, "32")


def _red(text: object) -> str:
    return _ansi(text, "31")


def _bold(text: object) -> str:
    return _ansi(text, "1")


def _blue(text: object, bold: bool = False) -> str:
    return _ansi(text, "34", "1") if bold else _ansi(text, "34")


def _emoji(symbol: str, fallback: str) -> str:
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower()
    return symbol if encoding.startswith("utf") else fallback


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class _Spinner:
    """A terminal spinner drawn on stderr while work is in progress."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str):
        self._message = message
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        if sys.stderr.isatty():
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()

    def _tick(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                sys.stderr.write(f"\r\x1b[2K{frame} {self._message}")
                sys.stderr.flush()
            if self._stop.wait(0.1):
                return

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def finish_and_clear(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        sys.stderr.write("\r\x1b[2K")
        sys.stderr.flush()

    def __enter__(self) -> _Spinner:
        return self

    def __exit__(self, *exc_info) -> None:
        self.finish_and_clear()


def verify(exercises: Iterable[Exercise]) -> None:
    """Check exercises in order; raise VerificationError at the first failure."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, skip_prompt=False)
        else:
            passed = _compile_only(exercise)
        if not passed:
            raise VerificationError(exercise)


def test(exercise: Exercise) -> None:
    """Compile and run the tests of one exercise without prompting."""
    if not _compile_and_test(exercise, skip_prompt=True):
        raise VerificationError(exercise)


def _compile_only(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}..."):
        output = exercise.compile()
    if output.returncode == 0:
        print(_green(f"{_emoji('✅', '✓')} Successfully compiled {exercise}!"))
        exercise.clean()
        return _prompt_for_completion(exercise)

    print(_red(f"{_emoji('⚠️ ', '!')} Compilation of {exercise} failed! Compiler error message:\n"))
    print(_decode(output.stderr))
    exercise.clean()
    return False


def _compile_and_test(exercise: Exercise, skip_prompt: bool) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        output = exercise.compile()
        if output.returncode != 0:
            spinner.finish_and_clear()
            print(_red(
                f"{_emoji('⚠️ ', '!')} Compiling of {exercise} failed! "
                "Please try again. Here's the output:"
            ))
            print(_decode(output.stderr))
            exercise.clean()
            return False

        spinner.set_message(f"Running {exercise}...")
        result = exercise.run()

    if result.returncode == 0:
        print(_green(f"{_emoji('✅', '✓')} Successfully tested {exercise}!"))
        exercise.clean()
        return skip_prompt or _prompt_for_completion(exercise)

    print(_red(
        f"{_emoji('⚠️ ', '!')} Testing of {exercise} failed! "
        "Please try again. Here's the output:"
    ))
    print(_decode(result.stdout))
    exercise.clean()
    return False


def _prompt_for_completion(exercise: Exercise) -> bool:
    context = exercise.state()
    if context is None:
        return True

    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    else:
        success_msg = "The code is compiling, and the tests pass!"

    print()
    print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()
    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {_bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in context:
        text = _bold(context_line.line) if context_line.important else context_line.line
        print(f"{_blue(f'{context_line.number:>2}', bold=True)} {_blue('|')}  {text}")
    return False