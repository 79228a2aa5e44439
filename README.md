# envlint

`envlint` repairs common problems in `.env` files. You give it the lines of a
file and the warnings reported against them. It applies a fixed sequence of
fixers to the lines in place. It also has helpers to find files, write them
back, keep a timestamped backup and compare the keys of several files.

## Lines and warnings

`envlint.entries` holds the data the fixers work on:

- `LineEntry(number, raw_string, total_lines, path=None)` is one line of a
  file. `key` and `value` give the parts around the first `=`; both are `None`
  for blank lines and comments. A leading `export ` is not part of the key.
  `is_empty()`, `is_comment()`, `is_empty_or_comment()` and `is_last_line()`
  describe the line. `mark_as_deleted()` flags it for removal, and
  `control_comment()` parses it as a control comment (see below).
- `Warning(line, check_name, message)` is a problem reported on a line. Its
  `line_number` is the number of that line.
- `remove_invalid_leading_chars(key)` drops everything before the first letter
  or underscore of a key.

## What it fixes

Fixers live in `envlint.fixes` and derive from `envlint.fixes.base.Fixer`.
They run in a fixed order. The order matters, because an early fix can create
work for a later one.

Fixers that change one line at a time (`envlint.fixes.line_fixers`) run first:

| Check                | Fixer                     | Fix                                                     |
|----------------------|---------------------------|---------------------------------------------------------|
| `KeyWithoutValue`    | `KeyWithoutValueFixer`    | `FOO` becomes `FOO=`                                    |
| `LowercaseKey`       | `LowercaseKeyFixer`       | `foO=BAR` becomes `FOO=BAR`                             |
| `SpaceCharacter`     | `SpaceCharacterFixer`     | `FOO = BAR` becomes `FOO=BAR`                           |
| `TrailingWhitespace` | `TrailingWhitespaceFixer` | `FOO=BAR   ` becomes `FOO=BAR`                          |
| `LeadingCharacter`   | `LeadingCharacterFixer`   | `.FOO`, ` FOO`, `*FOO` and `1FOO` all become `FOO`      |
| `QuoteCharacter`     | `QuoteCharacterFixer`     | `FOO="bar"` becomes `FOO=bar`                           |
| `IncorrectDelimiter` | `IncorrectDelimiterFixer` | `RAILS-ENV=development` becomes `RAILS_ENV=development` |
| `ExtraBlankLine`     | `ExtraBlankLineFixer`     | removes the flagged blank line                          |

These fixers change only the lines that a warning for their check points at.

Fixers that work on the whole file run after them:

| Check             | Fixer                                         | Fix                                                                 |
|-------------------|-----------------------------------------------|---------------------------------------------------------------------|
| `UnorderedKey`    | `envlint.fixes.unordered_key.UnorderedKeyFixer` | sorts keys within each block; a key's comments above it move with it |
| `DuplicatedKey`   | `envlint.fixes.collection.DuplicatedKeyFixer`   | comments out later duplicates: `FOO=BAZ` becomes `# FOO=BAZ`        |
| `EndingBlankLine` | `envlint.fixes.collection.EndingBlankLineFixer` | adds the missing blank line at the end of the file                  |

`UnorderedKey` and `DuplicatedKey` run even without warnings of their own,
because the fixers before them can produce new unordered or duplicated keys.

## Control comments

A check can be switched off for part of a file and back on later:

```
# dotenv-linter:off UnorderedKey
B=2
A=1
# dotenv-linter:on UnorderedKey
```

Several checks can be named, separated by commas. `UnorderedKeyFixer` and
`DuplicatedKeyFixer` leave the lines between such comments alone when their
check is named. The single-line fixers do not look at control comments. For
`UnorderedKey`, blank lines, the last line and every control comment, whatever
check it names, separate the blocks that are sorted.

## Running the fixers

```python
from envlint.entries import LineEntry, Warning
from envlint.fixes.runner import run

lines = [
    LineEntry(1, "A=B", 3),
    LineEntry(2, "c=d", 3),
    LineEntry(3, "\n", 3),
]
warnings = [Warning(lines[1], "LowercaseKey", "The c key should be in uppercase")]

run(warnings, lines)   # 1
lines[1].raw_string    # "C=d"
```

`run(warnings, lines, skip_checks=())` applies every fixer whose check is not
named in `skip_checks`, removes the lines marked as deleted and returns the
count the fixers report. It returns 0 when there are no warnings. It also
returns 0 when a warning names a line number that does not fit the lines;
`Fixer.fix_warnings` raises `envlint.fixes.base.FixError` in that case.
`envlint.fixes.runner.fixers()` returns the fixers in the order they run.

## Files

`envlint.files` holds the file helpers:

```python
from pathlib import Path
from envlint.files import get_relative_path

get_relative_path(Path("/a/b/.env"), Path("/a"))   # Path("b/.env")
get_relative_path(Path("/.env"), Path("/a/b/c"))   # Path("../../../.env")
```

- `write_file(path, lines)` writes every entry except the last one, each
  followed by a line feed. The last entry stands for the final line feed.
- `backup_file(path)` copies the file to `<name>_<timestamp>.bak` next to it
  and returns the path of the copy.
- `collect_file_paths(inputs, excludes, recursive, is_env_file)` collects the
  files to work on. Files named in `inputs` are always taken. Directories
  contribute the files that `is_env_file` accepts, and with `recursive` their
  subdirectories too, except symbolic links. Paths that do not exist are
  ignored, anything in `excludes` is left out, and the result is sorted
  without duplicates.
- `compare_keys(files)` takes pairs of a path and its lines. It returns a
  `CompareWarning(path, missing_keys)` for every file that lacks keys found in
  another file.

## What it does not do

`envlint` does not find problems on its own. There are no checks that produce
warnings; the warnings have to come from elsewhere. It does not read files
into `LineEntry` values and has no command-line program. It also does not
print reports.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.