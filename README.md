# libunit

A small unit-test runner. A test is a function that takes no arguments and
returns `1` (or `True`) for success and `0` (or `False`) for failure. Tests
are loaded into titled groups. Each group is launched in turn, and the
results are printed as a framed, coloured report: a title per group, one
line per test, a counter for the group, and a final total.

## Installation

```
pip install .
```

To run the package's own tests:

```
pip install .[test]
pytest
```

## Writing tests

```python
from libunit.report import Counter
from libunit.runner import TestGroup


def addition_works():
    return 100 + 100 == 200


def addition_is_wrong():
    return 100 + 100 == 1000000


counter = Counter()
group = TestGroup("ARITHMETIC")
group.load("addition ok", addition_works)
group.load("addition ko", addition_is_wrong)
all_passed = group.launch(counter)
```

`TestGroup.launch(counter, stream=None)` writes the group's title, one line
per test and the group's summary to `stream` (standard output by default).
It adds the group's results to `counter`, empties the group, and returns
`True` when every test in it passed.

Each test is run through `libunit.runner.run_isolated(function)`, which
returns an `Outcome` and never lets the test's own errors reach the caller:

| What the test does                          | `Outcome`  | Reported as     |
|---------------------------------------------|------------|-----------------|
| returns `1` / `True`                        | `OK`       | `OK`            |
| returns `0` / `False`                       | `KO`       | `KO`            |
| raises `SystemExit(-signal.SIGSEGV)`        | `SIGSEGV`  | `SIGSEGV`       |
| raises `SystemExit(-signal.SIGBUS)`         | `SIGBUS`   | `SIGBUS`        |
| returns anything else, or raises an error   | `UNKNOWN`  | `unknown error` |

A `SystemExit` is read like an exit status: codes 1 and 0 give `OK` and
`KO`. When a test raises any other exception, its traceback is printed to
standard error. `KeyboardInterrupt` is not caught. Each `Outcome` has a
`label`, a `color` and a `passed` property.

## The report

`libunit.report` holds the pieces of the report. `Counter` keeps a running
`success` and `total`, has `add(success, total)`, and has an `all_passed`
property. The `render_*` functions return the framed lines as strings:

- `render_title(title)`
- `render_test_line(name, msg, color)`
- `render_local_counter(success, total)`
- `render_final_counter(counter)`
- `render_frame_line(empty)`
- `render_close_frame_right(already_printed)`

The colour codes they use are module constants such as `GREEN`, `RED`,
`YELLOW`, `MAGENTA` and `RESET`.

## Formatted output

`libunit.printf` provides a small printf-style formatter. It handles
`%c %s %p %d %i %u %x %X %%` with the flags `- + # 0 space`, a width and a
`.precision`:

```python
from libunit.printf import sformat, printf, eprintf

sformat("%05d|%-4s|%#x", 42, "ab", 255)   # '00042|ab  |0xff'
printf("% 4i total\n", 7)                 # writes to standard output, returns 11
eprintf("%s: error\n", "name")            # writes to standard error
```

`sformat` returns the text; `printf` and `eprintf` write it and return its
length. An unknown conversion or a missing argument raises
`libunit.printf.FormatError`. Its `partial` attribute holds the text
rendered before the error, and `printf`/`eprintf` write that text before
raising. The single-field formatters `format_int`, `format_uint`,
`format_hexa` and `format_pointer` are available too. `%d`, `%i`, `%u`, `%x`
and `%X` treat their values as 32-bit or 64-bit machine integers and wrap
them as such. `%p` prints `(nil)` for zero.

`libunit.fields` has the `FormatFlags` dataclass, `parse_flags(spec)` to
read the options after a `%`, `with_defaults(**changes)` to build flags, and
the `format_char` and `format_string` formatters. A `None` string prints as
`(null)`.

`libunit.convert` has the number helpers the formatter uses: `ltobase`,
`ultobase`, `atol`, `atoi` and `is_integer`.

## Command line

```
libunit
```

This runs the bundled template group, which holds one test that always
passes, and prints the final summary. The exit status is 0 when every test
passed and non-zero otherwise.

## What it does not do

Tests run in the same Python process as the runner. A test that really
crashes the interpreter, for example through a fault in native code, ends
the whole run; only a test that raises `SystemExit` with a negative signal
number is reported as `SIGSEGV` or `SIGBUS`. There is no test discovery:
groups and tests are loaded by hand, and the `libunit` command runs only
its bundled template group.