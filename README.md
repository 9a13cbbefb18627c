# rustdrill

Support code for a set of small Rust exercises. It has three parts:

- `rustdrill.ui` prints coloured status lines to the terminal.
- `rustdrill.project` writes a `rust-project.json` file so that rust-analyzer
  treats every exercise file as its own crate.
- `rustdrill.drills` holds worked Python solutions to the exercises, grouped by topic.

The package has no dependencies outside the Python standard library.

## Requirements

- Python 3.11 or newer
- `rustc` on your `PATH` if you call `RustAnalyzerProject.get_sysroot_src()`
  without setting `RUST_SRC_PATH`

## Installation

```
pip install .
```

## Terminal styling: `rustdrill.ui`

```python
from rustdrill.ui import style, warn, success

style("done", "green", "bold")   # text wrapped in ANSI codes
warn("Compiling of foo.rs failed!")
success("Successfully ran foo.rs")
```

- `style(text, *args)` wraps `text` in the ANSI codes named by `args`. The
  names are `bold`, `dim`, `italic`, `underlined`, `black`, `red`, `green`,
  `yellow`, `blue`, `magenta`, `cyan` and `white`. An unknown name raises
  `ValueError`. With no names, the text comes back unchanged.
- `warn(message)` prints a red line that starts with a warning sign.
  `success(message)` prints a green line that starts with a check mark. Both
  return the line they printed. If `NO_EMOJI` is set in the environment, the
  markers are the plain characters `!` and `✓`.

## rust-analyzer support: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` takes the path from `RUST_SRC_PATH` when it is set.
  Otherwise it runs `rustc --print sysroot` and appends
  `lib/rustlib/src/rust/library`. It stores the result and returns it.
- `exercises_to_json(root="exercises")` adds a `Crate` for each `.rs` file
  below `root`, in sorted order. `add_path(path)` does the same for one path
  and ignores any file that does not end in `.rs`.
- Each `Crate` has `root_module`, `edition` (`"2021"`), `deps` (empty) and
  `cfg` (`["test"]`). The `test` entry lets rust-analyzer work inside
  `#[test]` blocks.
- `to_dict()` returns the project as plain data. `write_to_disk(path)` writes
  it as compact JSON. The default path is `./rust-project.json`.

## Worked solutions: `rustdrill.drills`

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `Command` and `transformer`, `ReportCard` |
| `basics` | `intro_text`, `greeting`, `variables_demo`, `ring_lines`, `sale_price`, `is_even`, `square` |
| `conditionals` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `primitives` | `time_greetings`, `classify_char`, `check_array_size`, `nice_slice`, `describe_cat`, `second` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map` |
| `move_semantics` | `fill_vec`, `new_filled_vec`, `add_through_references`, `last_char`, `string_uppercase` |
| `structs` | `ColorClassic`, `ColorTuple`, `UnitLike`, `Order`, `create_order_template`, `Package` |
| `strings` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `string_samples` |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `CreationError`, `PositiveNonzeroInteger`, `ParsePosNonzeroError`, `parse_pos_nonzero` |
| `modules` | `make_sausage`, `favorite_snacks`, `seconds_since_epoch` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `SomeStruct`, `OtherStruct`, `some_func` |
| `lifetimes` | `longest`, `Book` |
| `iterators` | `favorite_fruits`, `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string` |

Some examples:

```python
from rustdrill.drills.quizzes import Command, ReportCard, calculate_price_of_apples, transformer
from rustdrill.drills.errors import ParsePosNonzeroError, parse_pos_nonzero
from rustdrill.drills.hashmaps import build_scores_table

calculate_price_of_apples(40)  # 80
calculate_price_of_apples(41)  # 41

transformer([("hello", Command("uppercase")), ("foo", Command("append", 2))])
# ["HELLO", "foobarbar"]

ReportCard("A+", "Gary Plotter", 11).render()
# "Gary Plotter (11) - achieved a grade of A+"

table = build_scores_table("England,France,4,2\nFrance,Italy,3,1\n")
table["France"].goals_scored     # 5
table["France"].goals_conceded   # 5

parse_pos_nonzero("42").value    # 42
try:
    parse_pos_nonzero("0")
except ParsePosNonzeroError as exc:
    exc.source.reason            # "zero"
```

Failures raise exceptions:

- `Package` with a weight under 10 grams raises `ValueError`.
- `generate_nametag_text("")` raises `ValueError`.
- `total_cost("beep boop")` raises `ValueError("invalid digit found in string")`.
- `PositiveNonzeroInteger` raises `CreationError` for zero or negative values.

## What this package does not do

This package has no command-line program. It cannot compile exercises,
run them or their tests, check for the `I AM NOT DONE` marker, list progress,
show hints, reset exercises, or watch files for changes. To do any of this,
call `rustc` or `cargo` yourself. The helpers in `rustdrill.ui` and
`rustdrill.project` do only what is described above.