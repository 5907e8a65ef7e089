"""Listing options and the wildcard patterns used to filter entries."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

_ERROR_WILDCARDS = "wildcards are either regular `*` or recursive `**`"
_ERROR_RECURSIVE_WILDCARDS = "recursive wildcards must form a single path component"
_ERROR_INVALID_RANGE = "invalid range pattern"

_SEPARATORS = os.sep + (os.altsep or "")
_SEPARATOR_CLASS = "[" + re.escape(_SEPARATORS) + "]"


class PatternError(ValueError):
    """Raised when a wildcard pattern cannot be parsed."""

    def __init__(self, pos: int, msg: str) -> None:
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")
        self.pos = pos
        self.msg = msg


def _is_separator(ch: str) -> bool:
    return ch in _SEPARATORS


def _char_specifiers(chars: str) -> list[tuple[str, str]]:
    """Split the body of a bracket expression into (start, end) ranges."""
    specs: list[tuple[str, str]] = []
    i = 0
    while i < len(chars):
        if i + 3 <= len(chars) and chars[i + 1] == "-":
            specs.append((chars[i], chars[i + 2]))
            i += 3
        else:
            specs.append((chars[i], chars[i]))
            i += 1
    return specs


def _char_class(chars: str, negate: bool) -> str:
    parts = []
    for start, end in _char_specifiers(chars):
        if start == end:
            parts.append(re.escape(start))
        elif start < end:
            parts.append(f"{re.escape(start)}-{re.escape(end)}")
        # A reversed range matches nothing and contributes nothing.
    body = "".join(parts)
    if not body:
        return "." if negate else "(?!)"
    return f"[{'^' if negate else ''}{body}]"


def _translate(pattern: str) -> str:
    """Turn a wildcard pattern into an equivalent regular expression."""
    out: list[str] = []
    n = len(pattern)
    i = 0
    while i < n:
        ch = pattern[i]
        if ch == "?":
            out.append(".")
            i += 1
        elif ch == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            count = i - start
            if count > 2:
                raise PatternError(start + 2, _ERROR_WILDCARDS)
            if count == 1:
                out.append(".*")
                continue
            if not (start == 0 or _is_separator(pattern[start - 1])):
                raise PatternError(i, _ERROR_RECURSIVE_WILDCARDS)
            if i == n:
                out.append(".*")
            elif _is_separator(pattern[i]):
                i += 1
                out.append(f"(?:.*{_SEPARATOR_CLASS})?")
            else:
                raise PatternError(i, _ERROR_RECURSIVE_WILDCARDS)
        elif ch == "[":
            if i + 4 <= n and pattern[i + 1] == "!":
                close = pattern.find("]", i + 3)
                if close != -1:
                    out.append(_char_class(pattern[i + 2:close], negate=True))
                    i = close + 1
                    continue
            elif i + 3 <= n and pattern[i + 1] != "!":
                close = pattern.find("]", i + 2)
                if close != -1:
                    out.append(_char_class(pattern[i + 1:close], negate=False))
                    i = close + 1
                    continue
            raise PatternError(i, _ERROR_INVALID_RANGE)
        else:
            out.append(re.escape(ch))
            i += 1
    return "".join(out)


@dataclass(frozen=True)
class GlobPattern:
    """A shell-style wildcard pattern supporting ``*``, ``**``, ``?`` and ``[...]``."""

    pattern: str
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(_translate(self.pattern), re.DOTALL))

    def matches(self, name: str) -> bool:
        """Return True when the whole of ``name`` matches the pattern."""
        return self._regex.fullmatch(name) is not None

    def __str__(self) -> str:
        return self.pattern


@dataclass
class TreeOptions:
    """Settings that control what is listed and how each line looks."""

    all_files: bool = False
    level: int | None = None
    full_path: bool = False
    dir_only: bool = False
    no_indent: bool = False
    print_size: bool = False
    human_readable: bool = False
    pattern_glob: GlobPattern | None = None
    exclude_pattern: GlobPattern | None = None
    color: bool = False
    no_color: bool = False
    ascii: bool = False
    sort_by_time: bool = False
    reverse: bool = False
    print_mod_date: bool = False
    output_file: str | None = None
    file_limit: int | None = None
    dirs_first: bool = False
    classify: bool = False
    no_report: bool = False
    print_permissions: bool = False