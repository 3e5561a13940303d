# schoolkit

A collection of small utilities from school assignments and hobby projects:
descriptive statistics, equation helpers, a wire sizing calculator, a visit
tracker, a terminal tic-tac-toe game, an integer expression evaluator and a
few build and packaging helpers. Everything runs on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Statistics (`schoolkit.stats`)

```python
from schoolkit.stats import mean, median, mode, data_range, variance, std_deviation

mean([200, 623, 114, 7])            # 236.0
mode([1, 5, 6, 7, 5, 8])            # 5
data_range([2, 9, 15, 102, 1])      # 101
variance([2, 9, 15, 102, 1], True)  # 1846.7  (sample variance, n - 1)
```

`median` takes the middle element(s) of the list in the order given; sort the
data first for the conventional median. `mode` returns the first-seen value
on ties. All functions raise `ValueError` on an empty sequence, and a sample
variance needs at least two values. `largest`, `smallest` and `std_deviation`
are also available.

### Triangle benchmark (`schoolkit.trianglebench`)

```python
from schoolkit.trianglebench import run

run(100)  # 170
```

`run(calc)` counts pairs `a <= b <= min(a*a, calc)` for which
`a*a - a*b + b*b` is a perfect square.

### Small maths helpers

- `schoolkit.mathbits`: `to_binary(number)` (binary digits read as a decimal
  integer), `fibonacci(count)` (a generator starting at 0),
  `integrate(func, start, end, amount)` (trapezoid rule) and
  `second_number(r1, s)` (the R2 for which S is the mean of R1 and R2).
- `schoolkit.merit`: `grade_points(letter)` for grades A–F and
  `merit(grades, extra)`, the mean grade points plus 0–2.5 extra points.
- `schoolkit.derivative`: `differentiate("5x^3 - 5x^2 + 9x + 6")` returns
  `"15x^2 - 10x + 9"`. Terms are separated by spaces; constants are dropped
  together with the operator before them.
- `schoolkit.solvers`: `solve_quadratic(a, b, c)` and
  `solve_cubic(a, b, c, d)`; complex roots come back as `complex`.
- `schoolkit.graph_equations`: `line_from_points`, `quadratic_from_roots`
  and `cubic_from_roots` recover coefficients from points read off a graph;
  `format_line`, `format_quadratic` and `format_cubic` render them as
  `y = ...` with signs folded into the operators.
- `schoolkit.calculator`: `evaluate("2 + 3 * 4")` returns `14`. Only decimal
  integers and `+ - * /` carry a value; other operands and operators count as
  zero, arithmetic wraps like a 64-bit signed integer and division truncates
  toward zero. Parentheses group.

### Wire sizing (`schoolkit.wire`)

Works out how many threads a hoist wire needs for a load, and its mass,
strength, extension and drum length for one and three layers. Build a
`Material` (or take one of `MATERIALS`: `titan`, `cfrp`, `nylon`), pass it to
`analyse` to get a `WireReport`, and print it with `format_report`.
`load_materials(path)` reads several materials from an XML file with a
`<materials>` root. The single-step formulas (`thread_area`, `thread_mass`,
`thread_capacity`, `required_threads`, `wire_diameter`, `total_extension`,
`spool_length`, `three_layer_spool_length`) are public too.

### Visit tracking (`schoolkit.medley`)

`parse_names(content)` extracts student names from the plain text of a
weekly access report. `record_visits(names, path)` adds one visit per name to
an XML file of `Person` entries, creating it if needed; `load_visits` and
`save_visits` read and write that file. `people_below` and `format_below`
list everyone with fewer visits than a limit, `check_limit` accepts a limit
from 2 to 10, and `term_filename(today)` names the file for the school term
(`VT-<year>.xml` or `HT-<year>.xml`; July raises `ValueError`).

### Tic-tac-toe (`schoolkit.tictactoe`)

`Game.play(tile)` places the current player's marker on tile 0–8 and returns
an `Outcome` once the game is decided; `Game.reset()` starts over.
`has_won(cells)` checks nine booleans for a completed line.

### Other helpers

- `schoolkit.buildtool`: `detect_language(filename)` and
  `build_command(filename)` for `.cpp`, `.cxx` and `.go` files.
- `schoolkit.gomake`: `release_command()` and
  `cross_compile_commands(release)` return `go build` commands with their
  environments.
- `schoolkit.solus`: `clone_command`, `fetch`, `fetch_all` (clones in
  parallel, refusing repositories already present) and `local_repo_command`.
- `schoolkit.download`: `target_path(url, outpath)` and
  `download(url, outpath=None)`.
- `schoolkit.reaction`: `measure_reaction(wait, read_line, clock)`.
- `schoolkit.diary`: `Diary` (a text file with `write` and `read`) and
  `run_diary(diary, sleep)`, which raises `ValueError` on a wrong answer.

## Commands

| Command     | What it does                                                          |
|-------------|-----------------------------------------------------------------------|
| `mathbits`  | `binary`, `fibonacci`, `integral` and `r2` subcommands                |
| `meritcalc` | merit points from grades typed one per line plus extra merit (0–2.5)  |
| `derivata`  | derivative of a polynomial given as arguments                         |
| `eqsolve`   | `eqsolve quadratic A B C` or `eqsolve cubic A B C D`                  |
| `eqfunc`    | `eqfunc straight`, `quadratic` or `cubic`, asking for graph points    |
| `gruvlinan` | wire report for `titan`, `cfrp` or `nylon`, or `--xml PATH`, `--ask`  |
| `cmpp`      | `cmpp import report.txt`, `cmpp less 5`; `--data` picks the file      |
| `tictactoe` | play tic-tac-toe in the terminal                                      |
| `evalcalc`  | evaluate an integer expression                                        |
| `buildtool` | build a `.cpp`, `.cxx` or `.go` file with optimising flags            |
| `gomake`    | `go build` helper with `--release`, `--cross-compile` and `clean`     |
| `solfetch`  | clone one or more package repositories                                |
| `solloc`    | copy built packages to the local repository, or `--clean` it          |
| `getfile`   | `getfile URL` or `getfile URL -o PATH`                                |
| `reaction`  | measure your reaction time                                            |
| `diary`     | a diary story played through a text file (`--path` to choose it)      |

Commands that are missing their values ask for them on standard input.
`buildtool`, `gomake`, `solfetch` and `solloc` run external tools (`sh`,
`clang++`, `go`, `git`, `sudo`) and need them installed; `gomake` runs on
Linux only.

## What it does not do

- There is no graphical interface: the visit tracker and tic-tac-toe are
  used from the terminal or as a library.
- `cmpp import` does not read PDF files. It takes a text file holding the
  report's text, already extracted by another tool.