# rustdrills

A command-line runner for small Rust exercises. It compiles each exercise
with `rustc`, runs it or its tests, and tells you when you are ready to
move on. The package also holds worked solutions to the exercises written
as plain Python functions and classes.

## Installation

```
pip install rustdrills
```

The runner calls `rustc`, so it must be on your `PATH`. Check it with
`rustc --version`.

## What you need to provide

The package does not ship the exercises themselves. The runner works on
an exercise directory that you supply, holding:

- `info.toml`, the ordered list of exercises (see below);
- the `.rs` files that `info.toml` points to, under `exercises/`;
- `default_out.txt`, the text printed when the runner is started without
  a command.

## Usage

Run every command from the exercise directory. If there is no
`info.toml` in the current directory, or `rustc --version` cannot be run
successfully, the runner prints a message and exits with status 1.
Wrong command-line usage also exits with status 1.

```
rustdrills
```

Prints a welcome banner followed by the contents of `default_out.txt`.

```
rustdrills verify
```

Goes through all exercises in the order of `info.toml` (short form: `v`).
It stops with exit status 1 at the first one that fails to compile, fails
its tests, or still carries an `I AM NOT DONE` comment. In that last case
it shows the lines around the comment, so you know what to remove once you
are happy with your solution.

```
rustdrills watch
```

Runs `verify` once, then again whenever a `.rs` file under `exercises/` is
created or changed (short form: `w`). Changes are collected until none has
arrived for two seconds. Verification restarts at the exercise whose path
matches the changed file. While it is watching, type `hint` and press
Enter to see the hint for the exercise that failed last. Stop it with
Ctrl-C.

```
rustdrills run <name>
```

Compiles and runs a single exercise, or compiles and runs its tests for
test exercises (short form: `r`). The exit status is 0 on success and 1
otherwise. `run` never asks you to remove the `I AM NOT DONE` comment.

```
rustdrills hint <name>
```

Prints the hint for an exercise (short form: `h`).

```
rustdrills --version
```

Prints the installed version.

Compiled exercises are written to `temp_<process id>` in the current
directory and removed after each check.

## The exercise list

`info.toml` lists the exercises in order. Each entry has a `name`, a
`path` to its source file, a `mode` that is either `compile` or `test`,
and a `hint`:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

An entry with a missing field makes `load_exercises` raise `ValueError`.

## Using it from Python

```python
from pathlib import Path

from rustdrills.exercise import load_exercises
from rustdrills.verify import VerificationError, verify

exercises = load_exercises(Path("info.toml").read_text())
try:
    verify(exercises)
except VerificationError as err:
    print("stopped at", err.exercise.name)
```

- `rustdrills.exercise` has `Mode`, `Exercise`, `ContextLine`,
  `load_exercises` and `temp_file`. `Exercise.state()` returns `None` when
  the exercise is done, or, while it still has its `I AM NOT DONE` marker,
  the lines around it as `ContextLine` entries (up to two before and two
  after, with the marker line flagged as `important`).
- `rustdrills.verify` has `verify`, `test` and `VerificationError`.
- `rustdrills.run` has `run` and `compile_and_run`, which raise
  `VerificationError` on failure.
- `rustdrills.cli` has `main`, `watch` and `rustc_exists`.

## Worked solutions

The solutions are grouped by topic:

- `rustdrills.basics`: `calculate_apple_price`, `times_two`, `bigger`,
  `is_even`, `sale_price`, `square`, `call_me`, `classify_char`,
  `current_favorite_color`, `is_a_color_word`.
- `rustdrills.errors`: `generate_nametag_text`, `total_cost`, `purchase`,
  `read_and_validate`, `pop_too_much`, `PositiveNonzeroInteger` and
  `CreationError`.
- `rustdrills.iterators`: `capitalize_first`, `capitalize_words`,
  `capitalize_joined`, `divide`, `divide_all`, `factorial`, and the errors
  `DivisionError`, `NotDivisibleError`, `DivideByZeroError`.
- `rustdrills.shapes`: the messages `Quit`, `Echo`, `Move`, `ChangeColor`,
  `Point`, `State`, `ColorClassicStruct`, `ColorTupleStruct`, `UnitStruct`,
  `Order` and `create_order_template`.
- `rustdrills.ownership`: `fill_vec`, `offset_sums`, `run_jobs`,
  `JobStatus`, `my_macro`, `greet`, `make_sausage`, `favorite_snacks`.

```python
from rustdrills.basics import calculate_apple_price
from rustdrills.errors import total_cost
from rustdrills.iterators import divide, factorial

calculate_apple_price(35)  # 70
calculate_apple_price(65)  # 65
total_cost("34")           # 171
divide(81, 9)              # 9
factorial(4)               # 24
```

## Running the tests

```
pip install "rustdrills[test]"
pytest
```