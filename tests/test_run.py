import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustdrills.exercise import Exercise, Mode, temp_file
from rustdrills.run import compile_and_run, run
from rustdrills.verify import VerificationError

PENDING = "// I AM NOT DONE\n\nfn main() {\n\n}\n"


def _tools(compile_code=0, run_code=0, stdout=b"", stderr=b""):
    calls = []

    def fake(args, **kwargs):
        calls.append(list(args))
        if args[0] == "rustc":
            return subprocess.CompletedProcess(args, compile_code, b"", b"compiler says no")
        return subprocess.CompletedProcess(args, run_code, stdout, stderr)

    return fake, calls


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _exercise(directory, name, mode, text="fn main() {\n}\n"):
    path = directory / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_compile_and_run_success(workdir, capsys):
    exercise = _exercise(workdir, "compSuccess", Mode.COMPILE)
    fake, calls = _tools(stdout=b"hello from binary")
    Path(temp_file()).touch()
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        compile_and_run(exercise)
    out = capsys.readouterr().out
    assert "hello from binary" in out
    assert "Successfully ran" in out
    assert calls[1] == [temp_file()]
    assert not Path(temp_file()).exists()


def test_compile_and_run_runtime_error(workdir, capsys):
    exercise = _exercise(workdir, "compPanic", Mode.COMPILE)
    fake, _ = _tools(run_code=101, stderr=b"thread panicked")
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        with pytest.raises(VerificationError) as info:
            compile_and_run(exercise)
    assert info.value.exercise is exercise
    out = capsys.readouterr().out
    assert "thread panicked" in out
    assert "with errors" in out


def test_compile_and_run_compile_failure(workdir, capsys):
    exercise = _exercise(workdir, "compFailure", Mode.COMPILE)
    fake, calls = _tools(compile_code=1)
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        with pytest.raises(VerificationError):
            compile_and_run(exercise)
    assert len(calls) == 1
    assert "compiler says no" in capsys.readouterr().out


def test_run_compile_exercise_does_not_prompt(workdir, capsys):
    exercise = _exercise(workdir, "pending_exercise", Mode.COMPILE, PENDING)
    fake, _ = _tools()
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_uses_test_flag(workdir, capsys):
    exercise = _exercise(workdir, "pending_test_exercise", Mode.TEST, PENDING)
    fake, calls = _tools()
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        run(exercise)
    assert calls[0][:2] == ["rustc", "--test"]
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_failure_raises(workdir):
    exercise = _exercise(workdir, "testNotPassed", Mode.TEST)
    fake, _ = _tools(run_code=101)
    with mock.patch("rustdrills.exercise.subprocess.run", fake):
        with pytest.raises(VerificationError) as info:
            run(exercise)
    assert info.value.exercise is exercise