# dirtree

`dirtree` prints an indented listing of a directory in the layout of the classic
`tree` command. It can filter entries by wildcard pattern and limit how deep it
goes. It can show sizes, modification dates and permissions, and it can write the
result to a file.

## Installation

```
pip install .
```

## Usage

```
dirtree [PATH] [options]
```

`PATH` defaults to the current directory. The first line of the listing is the
directory's own name, or its resolved absolute path with `-f`. A summary line
follows the tree unless `--noreport` is given:

```
$ dirtree project
project
├── dir_a
│   └── file_a1.txt
├── dir_b
└── file_root.txt

2 directories, 2 files
```

Entries are sorted by name. With `-t` they are sorted by modification time,
oldest first, and ties are broken by name. Hidden entries, whose names begin
with `.`, are left out unless `-a` is given.

### Options

| Option | Meaning |
| --- | --- |
| `-a`, `--all` | Include hidden files |
| `-L N`, `--level N` | Show at most N levels of the tree |
| `-d`, `--directories` | List directories only |
| `-i`, `--no-indent` | Turn off indentation lines |
| `-s`, `--size` | Print each file's size in bytes, e.g. `[ 1024B]` |
| `-H`, `--human-readable` | Print sizes as B, KB, MB, GB, TB, e.g. `[1.0 KB]` |
| `-P PATTERN`, `--pattern PATTERN` | List only files whose name matches the pattern (directories are always shown) |
| `-I PATTERN`, `--exclude PATTERN` | Leave out files and directories whose name matches the pattern |
| `-f`, `--full-path` | Print the full path of each entry |
| `-C`, `--color` | Colour entry names |
| `-n`, `--no-color` | Never colour the output (overrides `--color`) |
| `-A`, `--ascii` | Draw the tree with ASCII characters (`\|`, `+---`, `\---`) |
| `-t`, `--sort-by-time` | Sort by modification time instead of name |
| `-r`, `--reverse` | Reverse the sort order |
| `-D`, `--mod-date` | Print each entry's modification date (UTC) |
| `-o FILE`, `--output FILE` | Write the listing to FILE instead of standard output |
| `--filelimit N` | Do not descend into directories with more than N entries |
| `--dirsfirst` | List directories before files |
| `-F`, `--classify` | Append `/` to directories, `@` to symbolic links, `*` to executable files (Unix) |
| `--noreport` | Leave out the directory and file count at the end |
| `-p` | Print permissions for each entry, e.g. `[-rw-r--r--]` (Unix) |
| `-V`, `--version` | Print the version and exit |

Patterns support `*`, `?`, `**` (as a whole path component), and bracket
expressions such as `[a-z]` and `[!0-9]`. An invalid pattern is reported on
standard error, and the command exits with status 1.

With `-C` the colours are fixed. Directories are bold blue, symbolic links are
cyan, and executables are green. Archives (`tar`, `gz`, `xz`, `bz2`, `zip`, `7z`)
are red, and images (`jpg`, `jpeg`, `bmp`, `gif`, `png`) are yellow.

### Examples

Two levels deep, with sizes and hidden files:

```
dirtree -L 2 -s -a src
```

Only Python files, directories first, saved to a file:

```
dirtree -P "*.py" --dirsfirst -o listing.txt
```

## Use from Python

```python
from dirtree.options import GlobPattern, TreeOptions
from dirtree.traversal import list_directory

options = TreeOptions(level=2, dirs_first=True, pattern_glob=GlobPattern("*.py"))
stats = list_directory("src", options)
print(stats.directories, stats.files)
```

`list_directory` writes the listing to standard output, or to
`options.output_file` when that is set. It returns a `TreeStats` holding the
counts of directories and files.

`GlobPattern(...)` raises `PatternError`, a `ValueError`, for a malformed
pattern. `GlobPattern.matches(name)` tests a whole name against the pattern.

Other helpers:

- `dirtree.utils.bytes_to_human_readable(1024)` returns `"1.0 KB"`.
- `dirtree.display.format_permissions(0o644, False)` returns `"[-rw-r--r--]"`.
- `dirtree.display.colorize(path, text)` wraps `text` in ANSI colour codes
  chosen by the kind of entry at `path`.
- `dirtree.traversal.format_date(0)` returns `"1970-01-01 00:00:00"`.

## Limits

- Colours do not follow the `LS_COLORS` environment variable.
- `-F` marks only directories, symbolic links and executable files.
- Permissions (`-p`) and executable marks (`-F`) are shown only on Unix-like
  systems.

## Running the tests

```
pip install ".[test]"
pytest
```