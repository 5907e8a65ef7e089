"""Command-line entry point for the tree listing."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .options import GlobPattern, PatternError, TreeOptions
from .traversal import list_directory

_VERSION = "1.0.0"


def _unsigned(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``tree`` command."""
    parser = argparse.ArgumentParser(
        prog="tree",
        description="Produce an indented directory listing of files.",
    )
    parser.add_argument("path", nargs="?", default=".", help="The path to the directory to list.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-a", "--all", dest="all_files", action="store_true", help="Include hidden files.")
    parser.add_argument("-L", "--level", type=_unsigned, help="Descend only level directories deep.")
    parser.add_argument("-d", "--directories", dest="dir_only", action="store_true", help="List directories only.")
    parser.add_argument("-i", "--no-indent", dest="no_indent", action="store_true", help="Turn off file/directory indentation.")
    parser.add_argument("-s", "--size", dest="print_size", action="store_true", help="Print the size of each file in bytes.")
    parser.add_argument("-H", "--human-readable", dest="human_readable", action="store_true", help="Print the size in a more human-readable format.")
    parser.add_argument("-P", "--pattern", help="List only those files that match the wild-card pattern.")
    parser.add_argument("-I", "--exclude", help="Do not list files that match the wild-card pattern.")
    parser.add_argument("-f", "--full-path", dest="full_path", action="store_true", help="Prints the full path prefix for each file.")
    parser.add_argument(
        "-C",
        "--color",
        action="store_true",
        help="Turn colorization on always, using built-in color defaults. Helpful when piping output to other programs.",
    )
    parser.add_argument("-n", "--no-color", dest="no_color", action="store_true", help="Turn colorization off always (--no-color overrides --color).")
    parser.add_argument("-A", "--ascii", action="store_true", help="Use ASCII characters for the indentation lines.")
    parser.add_argument("-t", "--sort-by-time", dest="sort_by_time", action="store_true", help="Sort output by last modification time instead of alphabetically.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")
    parser.add_argument("-D", "--mod-date", dest="print_mod_date", action="store_true", help="Print the date of last modification.")
    parser.add_argument("-o", "--output", dest="output_file", help="Send output to filename.")
    parser.add_argument("--filelimit", dest="file_limit", type=_unsigned, metavar="#", help="Do not descend directories that contain more than # entries.")
    parser.add_argument("--dirsfirst", dest="dirs_first", action="store_true", help="List directories before files.")
    parser.add_argument("-F", "--classify", action="store_true", help="Append indicator (one of */=@|%%>) to entries.")
    parser.add_argument("--noreport", dest="no_report", action="store_true", help="Omits printing of the file and directory report at the end of the tree listing.")
    parser.add_argument("-p", dest="print_permissions", action="store_true", help="Print the protections for each file (unix only).")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``tree`` command and return its exit status."""
    args = build_parser().parse_args(argv)

    try:
        pattern_glob = GlobPattern(args.pattern) if args.pattern is not None else None
    except PatternError as exc:
        print(f"Error: Invalid pattern: {exc}", file=sys.stderr)
        return 1
    try:
        exclude_pattern = GlobPattern(args.exclude) if args.exclude is not None else None
    except PatternError as exc:
        print(f"Error: Invalid exclude pattern: {exc}", file=sys.stderr)
        return 1

    options = TreeOptions(
        all_files=args.all_files,
        level=args.level,
        full_path=args.full_path,
        dir_only=args.dir_only,
        no_indent=args.no_indent,
        print_size=args.print_size,
        human_readable=args.human_readable,
        pattern_glob=pattern_glob,
        exclude_pattern=exclude_pattern,
        color=args.color,
        no_color=args.no_color,
        ascii=args.ascii,
        sort_by_time=args.sort_by_time,
        reverse=args.reverse,
        print_mod_date=args.print_mod_date,
        output_file=args.output_file,
        file_limit=args.file_limit,
        dirs_first=args.dirs_first,
        classify=args.classify,
        no_report=args.no_report,
        print_permissions=args.print_permissions,
    )

    try:
        list_directory(args.path, options)
    except OSError as exc:
        # Listing failures are reported but do not change the exit status.
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())