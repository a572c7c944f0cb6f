import subprocess
from unittest.mock import MagicMock, patch

import pytest

from rustlings.exercise import Exercise, Mode, temp_file
from rustlings.run import reset, run
from rustlings.verify import VerificationFailed

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "fn main() {\n}\n"


class FakeToolchain:
    def __init__(self, compile_code=0, run_code=0, compile_err=b"", run_out=b"", run_err=b""):
        self.compile_code = compile_code
        self.run_code = run_code
        self.compile_err = compile_err
        self.run_out = run_out
        self.run_err = run_err
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(cmd, self.compile_code, b"", self.compile_err)
        return subprocess.CompletedProcess(cmd, self.run_code, self.run_out, self.run_err)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_exercise(directory, name, source, mode):
    path = directory / f"{name}.rs"
    path.write_text(source, encoding="utf-8")
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_run_compile_success(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_out=b"hello output"))
    ex = make_exercise(workdir, "compSuccess", FINISHED, Mode.COMPILE)
    assert run(ex) is None
    out = capsys.readouterr().out
    assert "hello output" in out
    assert "Successfully ran" in out


def test_run_compile_failure(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(compile_code=1, compile_err=b"bad syntax"))
    ex = make_exercise(workdir, "compFailure", FINISHED, Mode.COMPILE)
    with pytest.raises(VerificationFailed) as info:
        run(ex)
    assert info.value.exercise is ex
    out = capsys.readouterr().out
    assert "Compilation of" in out
    assert "bad syntax" in out


def test_run_with_errors(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_code=1, run_err=b"panicked"))
    ex = make_exercise(workdir, "compSuccess", FINISHED, Mode.COMPILE)
    with pytest.raises(VerificationFailed):
        run(ex)
    out = capsys.readouterr().out
    assert "with errors" in out
    assert "panicked" in out


def test_run_compile_exercise_does_not_prompt(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    ex = make_exercise(workdir, "pending_exercise", PENDING, Mode.COMPILE)
    run(ex)
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert "Successfully ran" in out


def test_run_test_exercise_does_not_prompt(workdir, monkeypatch, capsys):
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    ex = make_exercise(workdir, "pending_test_exercise", PENDING, Mode.TEST)
    run(ex)
    assert "I AM NOT DONE" not in capsys.readouterr().out
    assert "--test" in fake.calls[0]


def test_run_test_success_with_output(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_out=b"THIS TEST TOO SHALL PASS"))
    ex = make_exercise(workdir, "testSuccess", FINISHED, Mode.TEST)
    run(ex, verbose=True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_run_test_success_without_output(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_out=b"THIS TEST TOO SHALL PASS"))
    ex = make_exercise(workdir, "testSuccess", FINISHED, Mode.TEST)
    run(ex, verbose=False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_run_test_not_passed(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_code=101))
    ex = make_exercise(workdir, "testNotPassed", FINISHED, Mode.TEST)
    with pytest.raises(VerificationFailed):
        run(ex)


def test_run_clippy_runs_binary(workdir, monkeypatch):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    ex = make_exercise(workdir, "clippy1", FINISHED, Mode.CLIPPY)
    run(ex)
    assert fake.calls[-1] == [temp_file(), ""]


def test_reset_stashes_file(tmp_path):
    ex = Exercise(name="intro1", path=tmp_path / "intro1.rs", mode=Mode.COMPILE, hint="")
    process = MagicMock()
    with patch("subprocess.Popen", return_value=process) as popen:
        result = reset(ex)
    popen.assert_called_once_with(["git", "stash", "--", str(ex.path)])
    assert result is process


def test_reset_failure(tmp_path):
    ex = Exercise(name="intro1", path=tmp_path / "intro1.rs", mode=Mode.COMPILE, hint="")
    with patch("subprocess.Popen", side_effect=FileNotFoundError("git")):
        with pytest.raises(OSError):
            reset(ex)