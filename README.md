# rustlings

A library for working through a course of small exercises. Each exercise
is a source file that starts out broken. It fails to compile, its tests
fail, or the linter complains. You fix it, the library checks it, and you
move on to the next one. The package also contains plain Python modules
with worked solutions to the course topics.

## Installing

```
pip install .
```

The package depends only on the standard library. Checking exercises
starts external programs, so these must be on your `PATH`:

- `rustc` for every exercise.
- `cargo clippy` for lint exercises.
- `git` for `reset`.

## The exercise list

`load_exercises(path="info.toml")` in `rustlings.exercise` reads a TOML
file with an `exercises` array. Each entry has four keys:

- `name`
- `path`
- `mode`: `compile`, `test` or `clippy`.
- `hint`

An exercise counts as finished once the `I AM NOT DONE` comment is removed
from its file.

Run from the course directory, because temporary binaries and the lint
`Cargo.toml` are written relative to the current directory.

```python
from rustlings.exercise import load_exercises
from rustlings.verify import verify, VerificationFailed

exercises = load_exercises("info.toml")
pending = [e for e in exercises if not e.looks_done()]

try:
    verify(exercises, (0, len(exercises)), False, False)
except VerificationFailed as failure:
    print("stuck on", failure.exercise)
```

## What the modules do

### `rustlings.exercise`

This module holds `Exercise`, `Mode`, `State` and `ContextLine`.

- `Exercise.state()` returns the lines around the `I AM NOT DONE` marker.
  These are two lines either side, with the marker line flagged
  `important`. When the marker is gone it returns an empty state, and
  `State.done()` is true.
- `Exercise.compile()` returns a `CompiledExercise`, or raises
  `CompileError` holding the compiler output.
- `CompiledExercise.run()` returns an `ExerciseOutput`, or raises
  `RunError`. Used in a `with` block, it removes its temporary binary on
  exit.

### `rustlings.verify`

- `verify(exercises, progress, verbose, success_hints)` checks each
  exercise in turn. It prints a text progress bar to stderr and raises
  `VerificationFailed` at the first exercise that fails or is still marked
  as not done. For such an exercise it prints the marker context, and the
  hint when `success_hints` is true.
- `test(exercise, verbose)` compiles and runs a test exercise without
  prompting.

### `rustlings.run`

- `run(exercise, verbose)` compiles and runs, or tests, a single exercise.
  It raises `VerificationFailed` on failure.
- `reset(exercise)` starts `git stash -- <path>` and returns the process.

### `rustlings.project`

`RustAnalyzerProject` builds the contents of `rust-project.json` for
editor support.

- `get_sysroot_src()` takes the sources from `RUST_SRC_PATH`, or else asks
  `rustc --print sysroot`.
- `exercises_to_json(root="./exercises")` adds one crate for every `.rs`
  file below `root`.
- `write_to_disk(path="./rust-project.json")` writes the file.

### `rustlings.ui`

This module provides coloured `warn` and `success` lines and `style`.
Setting `NO_EMOJI` in the environment gives plain-text markers.

## Worked solutions

The modules below are ordinary Python:

- `rustlings.basics`
- `rustlings.sequences`
- `rustlings.options`
- `rustlings.errors`
- `rustlings.hashmaps`
- `rustlings.iterators`
- `rustlings.progress`
- `rustlings.messages`
- `rustlings.orders`
- `rustlings.traits`
- `rustlings.lists`

For example:

```python
from rustlings.basics import Append, Trim, transformer, calculate_price_of_apples
from rustlings.iterators import divide, factorial, NotDivisibleError
from rustlings.errors import parse_pos_nonzero
from rustlings.options import maybe_icecream

transformer([(" hi ", Trim()), ("foo", Append(2))])   # ['hi', 'foobarbar']
calculate_price_of_apples(41)                          # 41
factorial(4)                                           # 24
parse_pos_nonzero("42")                                # PositiveNonzeroInteger(value=42)
maybe_icecream(25)                                     # None
divide(81, 6)                                          # raises NotDivisibleError
```

## What the package does not do

There is no command-line program, so the package has no `watch`, `list`,
`hint` or `verify` commands and does not re-check exercises when files
change. To do those things, call the functions above from your own code.

The package has no solutions for the type-conversion topic.

## Running the tests

```
pip install ".[test]"
pytest
```