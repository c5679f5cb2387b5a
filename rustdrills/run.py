"""Running a single exercise."""

from __future__ import annotations

from rustdrills.exercise import Exercise, Mode
from rustdrills.verify import (
    VerificationError,
    _Spinner,
    _decode,
    _emoji,
    _green,
    _red,
    test,
)


def run(exercise: Exercise) -> None:
    """Run or test one exercise; raise VerificationError on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise, run it and show its output."""
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = exercise.compile()
        spinner.set_message(f"Running {exercise}...")
        if compiled.returncode != 0:
            spinner.finish_and_clear()
            print(_red(
                f"{_emoji('⚠️ ', '!')} Compilation of {exercise} failed! "
                "Compiler error message:\n"
            ))
            print(_decode(compiled.stderr))
            exercise.clean()
            raise VerificationError(exercise)
        result = exercise.run()

    print(_decode(result.stdout))
    if result.returncode == 0:
        print(_green(f"{_emoji('✅', '✓')} Successfully ran {exercise}"))
        exercise.clean()
        return

    print(_decode(result.stderr))
    print(_red(f"{_emoji('⚠️ ', '!')} Ran {exercise} with errors"))
    exercise.clean()
    raise VerificationError(exercise)