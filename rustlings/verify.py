"""Verification of exercises in order, with progress reporting."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .exercise import CompileError, CompiledExercise, Exercise, Mode, RunError
from .ui import no_emoji, style, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, run or pass its tests."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


class _ProgressBar:
    """A plain text progress bar showing position, length and percentage."""

    def __init__(self, position: int, total: int, stream: TextIO | None = None):
        self.position = position
        self.total = total
        self.stream = stream if stream is not None else sys.stderr
        self.percentage = position / total * 100.0 if total else 0.0
        self._draw()

    def inc(self) -> None:
        self.position += 1
        if self.total:
            self.percentage += 100.0 / self.total
        self._draw()

    def _draw(self) -> None:
        if self.total:
            filled = min(self.position * _BAR_WIDTH // self.total, _BAR_WIDTH)
        else:
            filled = _BAR_WIDTH
        head = ">" if filled < _BAR_WIDTH else ""
        rest = _BAR_WIDTH - filled - len(head)
        bar = "#" * filled + head + "-" * rest
        print(
            f"Progress: [{bar}] {self.position}/{self.total} ({self.percentage:.1f} %)",
            file=self.stream,
        )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Compile and run each exercise in turn.

    Raises VerificationFailed for the first exercise that fails or is still
    marked as not done.
    """
    num_done, total = progress
    bar = _ProgressBar(num_done, total)
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, True, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise, success_hints)
        else:
            passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerificationFailed(exercise)
        bar.inc()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    if not _compile_and_test(exercise, False, verbose, False):
        raise VerificationFailed(exercise)


def _compile(exercise: Exercise) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except CompileError as exc:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        return None


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    compiled = _compile(exercise)
    if compiled is None:
        return False
    compiled.close()
    return _prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    compiled = _compile(exercise)
    if compiled is None:
        return False
    with compiled:
        try:
            output = compiled.run()
        except RunError as exc:
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            return False
        return _prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    compiled = _compile(exercise)
    if compiled is None:
        return False
    with compiled:
        try:
            output = compiled.run()
        except RunError as exc:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            return False
        if verbose:
            print(output.stdout)
        if interactive:
            return _prompt_for_completion(exercise, None, success_hints)
        return True


def _separator() -> str:
    return style("=" * 20, bold=True)


def _prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    state = exercise.state()
    if state.done():
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
        success_msg = "The code is compiling, and the tests pass!"
    else:
        success(f"Successfully compiled {exercise}!")
        if no_emoji():
            success_msg = "The code is compiling, and Clippy is happy!"
        else:
            success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if no_emoji():
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()
    if success_hints:
        print("Hints:")
        print(_separator())
        print(exercise.hint)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{style('`I AM NOT DONE`', bold=True)} comment:"
    )
    print()
    for context_line in state.context:
        line = (
            style(context_line.line, bold=True)
            if context_line.important
            else context_line.line
        )
        number = style(f"{context_line.number:>2}", "blue", bold=True)
        print(f"{number} {style('|', 'blue')}  {line}")

    return False