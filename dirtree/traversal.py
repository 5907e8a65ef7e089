"""Recursive directory walking and rendering of the tree listing."""

from __future__ import annotations

import contextlib
import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, Sequence

from .display import colorize, format_permissions
from .options import TreeOptions
from .utils import bytes_to_human_readable

_SECONDS_PER_DAY = 86400
_DAY_WRAP = 36525


@dataclass
class TreeStats:
    """Running count of listed directories and files."""

    directories: int = 0
    files: int = 0


@dataclass
class _EntryInfo:
    entry: os.DirEntry
    mtime_ns: int


def _summary(stats: TreeStats) -> str:
    dir_word = "directory" if stats.directories == 1 else "directories"
    file_word = "file" if stats.files == 1 else "files"
    return f"{stats.directories} {dir_word}, {stats.files} {file_word}"


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def format_date(timestamp: float) -> str:
    """Format seconds since the epoch as ``YYYY-MM-DD HH:MM:SS`` (UTC)."""
    if timestamp < 0:
        return "Unknown date"
    secs = int(timestamp)
    days_left = (secs // _SECONDS_PER_DAY) % _DAY_WRAP
    hours = (secs // 3600) % 24
    minutes = (secs // 60) % 60
    seconds = secs % 60

    year, month, day = 1970, 1, 1
    while days_left > 0:
        days_in_year = 366 if _is_leap(year) else 365
        if days_left >= days_in_year:
            days_left -= days_in_year
            year += 1
            continue
        days_in_month = _days_in_month(year, month)
        if days_left >= days_in_month:
            days_left -= days_in_month
            month += 1
            if month > 12:
                month = 1
                year += 1
        else:
            day += days_left
            days_left = 0

    return f"{year:04d}-{month:02d}-{day:02d} {hours:02d}:{minutes:02d}:{seconds:02d}"


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _should_skip(entry: os.DirEntry, options: TreeOptions) -> bool:
    name = entry.name
    if not options.all_files and name.startswith("."):
        return True
    if options.exclude_pattern is not None and options.exclude_pattern.matches(name):
        return True
    is_dir = entry.is_dir()
    if options.pattern_glob is not None and not is_dir and not options.pattern_glob.matches(name):
        return True
    return options.dir_only and not is_dir


def _is_dir_entry(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _mtime_ns(entry: os.DirEntry) -> int:
    try:
        return entry.stat(follow_symlinks=False).st_mtime_ns
    except OSError as exc:
        _warn(f"Warning: Could not get metadata/mod_time for {entry.path!r}: {exc}")
        return 0


def _read_entries(current_path: str | os.PathLike, options: TreeOptions) -> list[_EntryInfo] | None:
    try:
        with os.scandir(current_path) as it:
            entries = list(it)
    except OSError as exc:
        _warn(f"Error reading directory {os.fspath(current_path)!r}: {exc}")
        return None
    return [
        _EntryInfo(entry, _mtime_ns(entry))
        for entry in entries
        if not _should_skip(entry, options)
    ]


def _sorted_entries(infos: list[_EntryInfo], options: TreeOptions) -> list[_EntryInfo]:
    if options.sort_by_time:
        def key(info: _EntryInfo):
            return (info.mtime_ns, info.entry.name)
    else:
        def key(info: _EntryInfo):
            return info.entry.name

    if not options.dirs_first:
        return sorted(infos, key=key, reverse=options.reverse)

    dirs = [info for info in infos if _is_dir_entry(info.entry)]
    files = [info for info in infos if not _is_dir_entry(info.entry)]
    return sorted(dirs, key=key, reverse=options.reverse) + sorted(
        files, key=key, reverse=options.reverse
    )


def _indicator(mode: int) -> str:
    if stat.S_ISDIR(mode):
        return "/"
    if stat.S_ISLNK(mode):
        return "@"
    if stat.S_ISREG(mode) and os.name == "posix" and mode & 0o111:
        return "*"
    return ""


def _line_prefix(options: TreeOptions, is_last: bool) -> str:
    if options.no_indent:
        return ""
    if options.ascii:
        return "+---" if is_last else "\\---"
    return "└── " if is_last else "├── "


def _format_entry_line(
    entry: os.DirEntry,
    options: TreeOptions,
    indent_state: Sequence[bool],
    is_last: bool,
) -> str:
    info = entry.stat(follow_symlinks=False)
    mode = info.st_mode
    is_dir = stat.S_ISDIR(mode)
    parts: list[str] = []

    if options.print_permissions and os.name == "posix":
        parts.append(format_permissions(mode, is_dir) + " ")

    if not options.no_indent:
        vertical = "|   " if options.ascii else "│   "
        parts.extend("    " if parent_last else vertical for parent_last in indent_state)

    parts.append(_line_prefix(options, is_last))

    name = entry.path if options.full_path else entry.name
    if options.color and not options.no_color:
        name = colorize(entry.path, name)
    parts.append(name)

    if options.classify:
        parts.append(_indicator(mode))

    if not is_dir and (options.print_size or options.human_readable):
        if options.human_readable:
            parts.append(f" [{bytes_to_human_readable(info.st_size)}]")
        else:
            parts.append(f" [{info.st_size:5d}B]")

    if options.print_mod_date:
        parts.append(f" [{format_date(info.st_mtime)}]")

    return "".join(parts)


def _should_descend(path: str, options: TreeOptions, depth: int) -> bool:
    if options.level is not None and depth + 1 >= options.level:
        return False
    if options.file_limit is not None:
        try:
            with os.scandir(path) as it:
                count = sum(1 for _ in it)
        except OSError as exc:
            _warn(f"Warning: Could not read directory {path!r} to check filelimit: {exc}")
            return True
        if count > options.file_limit:
            return False
    return True


def traverse_directory(
    writer: IO[str],
    current_path: str | os.PathLike,
    options: TreeOptions,
    depth: int,
    stats: TreeStats,
    indent_state: Sequence[bool],
) -> None:
    """Write the lines for the contents of ``current_path`` and recurse into subdirectories."""
    infos = _read_entries(current_path, options)
    if infos is None:
        return
    ordered = _sorted_entries(infos, options)
    last_index = len(ordered) - 1

    for index, info in enumerate(ordered):
        entry = info.entry
        is_last = index == last_index
        writer.write(_format_entry_line(entry, options, indent_state, is_last) + "\n")

        if _is_dir_entry(entry):
            stats.directories += 1
            if _should_descend(entry.path, options, depth):
                traverse_directory(
                    writer,
                    entry.path,
                    options,
                    depth + 1,
                    stats,
                    (*indent_state, is_last),
                )
        else:
            stats.files += 1


@contextlib.contextmanager
def _open_writer(output_file: str | None) -> Iterator[IO[str]]:
    if output_file is None:
        yield sys.stdout
        return
    with open(output_file, "w", encoding="utf-8", newline="") as handle:
        yield handle


def _display_name(path: Path, full_path: bool) -> str:
    if full_path:
        return str(path.resolve(strict=True))
    name = path.name
    if not name or name == "..":
        return "."
    return name


def list_directory(path: str | os.PathLike, options: TreeOptions) -> TreeStats:
    """Write the full tree listing for ``path`` and return the counts."""
    root = Path(path)
    stats = TreeStats()
    with _open_writer(options.output_file) as writer:
        writer.write(_display_name(root, options.full_path) + "\n")
        traverse_directory(writer, os.fspath(path), options, 0, stats, ())
        if not options.no_report:
            writer.write(f"\n{_summary(stats)}\n")
        writer.flush()
    return stats