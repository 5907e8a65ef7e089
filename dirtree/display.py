"""Colouring of entry names and rendering of permission bits."""

from __future__ import annotations

import os
import stat
from pathlib import Path

_RESET = "\x1b[0m"
_BOLD_BLUE = "\x1b[1;34m"
_CYAN = "\x1b[36m"
_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_YELLOW = "\x1b[33m"

_ARCHIVE_EXTENSIONS = frozenset({"tar", "gz", "xz", "bz2", "zip", "7z"})
_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "bmp", "gif", "png"})

_PERMISSION_BITS = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def _paint(style: str, text: str) -> str:
    return f"{style}{text}{_RESET}"


def _is_executable(path: Path) -> bool:
    try:
        st = path.stat()
    except OSError:
        return False
    if not stat.S_ISREG(st.st_mode):
        return False
    if os.name == "nt":
        extensions = os.environ.get("PATHEXT", ".COM;.EXE;.BAT;.CMD").upper().split(";")
        return path.suffix.upper() in extensions
    return bool(st.st_mode & 0o111)


def colorize(path: str | os.PathLike, text: str) -> str:
    """Wrap ``text`` in ANSI colour codes chosen by the kind of entry at ``path``."""
    path = Path(path)
    try:
        mode = path.lstat().st_mode
    except OSError:
        return text

    if stat.S_ISDIR(mode):
        return _paint(_BOLD_BLUE, text)
    if stat.S_ISLNK(mode):
        return _paint(_CYAN, text)
    if _is_executable(path):
        return _paint(_GREEN, text)

    extension = path.suffix[1:].lower()
    if extension in _ARCHIVE_EXTENSIONS:
        return _paint(_RED, text)
    if extension in _IMAGE_EXTENSIONS:
        return _paint(_YELLOW, text)
    return text


def format_permissions(mode: int, is_dir: bool) -> str:
    """Render permission bits as ``[drwxr-xr-x]``."""
    bits = "".join(char if mode & mask else "-" for mask, char in _PERMISSION_BITS)
    return f"[{'d' if is_dir else '-'}{bits}]"