import os
from pathlib import Path

import pytest

from dirtree.cli import build_parser, main


def _run(capsys, *args):
    code = main([str(a) for a in args])
    return code, capsys.readouterr().out


def test_short_flags():
    args = build_parser().parse_args(["-a", "-L", "2", "-d"])
    assert args.all_files is True
    assert args.level == 2
    assert args.dir_only is True


def test_long_flags():
    args = build_parser().parse_args(["--all", "--level=2", "--directories"])
    assert args.all_files is True
    assert args.level == 2
    assert args.dir_only is True


def test_mixed_flags():
    args = build_parser().parse_args(["-a", "--level=2", "-d", "--pattern=*.rs"])
    assert args.all_files is True
    assert args.level == 2
    assert args.dir_only is True
    assert args.pattern == "*.rs"


def test_directory_argument():
    args = build_parser().parse_args(["test_dir", "--all"])
    assert args.path == "test_dir"
    assert args.all_files is True


def test_default_directory():
    assert build_parser().parse_args([]).path == "."


@pytest.mark.parametrize("value", ["invalid", "abc", "-1"])
def test_invalid_level_value(value):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([f"--level={value}"])
    assert excinfo.value.code == 2


def test_display_options():
    args = build_parser().parse_args(
        ["--no-indent", "--size", "--human-readable", "--color", "--ascii"]
    )
    assert args.no_indent is True
    assert args.print_size is True
    assert args.human_readable is True
    assert args.color is True
    assert args.ascii is True


def test_color_precedence():
    args = build_parser().parse_args(["--no-color", "--color"])
    assert args.color is True
    assert args.no_color is True


def test_multiple_values():
    args = build_parser().parse_args(["--pattern=*.rs", "--level=3", "src/dir"])
    assert args.pattern == "*.rs"
    assert args.level == 3
    assert args.path == "src/dir"


def test_size_related_flags():
    args = build_parser().parse_args(["--size", "--human-readable"])
    assert args.print_size is True
    assert args.human_readable is True


def test_output_to_file(tmp_path):
    content = tmp_path / "content"
    content.mkdir()
    (content / "dummy.txt").write_text("content")
    out = tmp_path / "output.txt"
    assert main([str(content), "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "dummy.txt" in text
    assert "0 directories, 1 file" in text


def test_file_limit(capsys, tmp_path):
    sub = tmp_path / "sub_dir"
    sub.mkdir()
    for i in (1, 2, 3):
        (sub / f"file{i}.txt").write_text(str(i))
    (tmp_path / "root_file.txt").write_text("root")

    _, full = _run(capsys, tmp_path)
    for name in ("sub_dir", "file1.txt", "file2.txt", "file3.txt", "root_file.txt"):
        assert name in full
    assert "1 directory" in full
    assert "4 files" in full

    _, limited = _run(capsys, tmp_path, "--filelimit=2")
    assert "sub_dir" in limited
    for name in ("file1.txt", "file2.txt", "file3.txt"):
        assert name not in limited
    assert "root_file.txt" in limited
    assert "1 directory, 1 file" in limited


def test_dirsfirst(capsys, tmp_path):
    (tmp_path / "sub_dir_b").mkdir()
    (tmp_path / "sub_dir_a").mkdir()
    (tmp_path / "file_c.txt").write_text("c")
    (tmp_path / "file_a.txt").write_text("a")
    names = ["file_a.txt", "file_c.txt", "sub_dir_a", "sub_dir_b"]

    def positions(output):
        return {name: output.find(name) for name in names}

    _, default = _run(capsys, tmp_path)
    p = positions(default)
    assert p["file_a.txt"] < p["file_c.txt"] < p["sub_dir_a"] < p["sub_dir_b"]

    _, first = _run(capsys, tmp_path, "--dirsfirst")
    p = positions(first)
    assert p["sub_dir_a"] < p["sub_dir_b"] < p["file_a.txt"] < p["file_c.txt"]

    _, reverse = _run(capsys, tmp_path, "--dirsfirst", "-r")
    p = positions(reverse)
    assert p["sub_dir_b"] < p["sub_dir_a"] < p["file_c.txt"] < p["file_a.txt"]


def test_classify_flag(capsys, tmp_path):
    (tmp_path / "sub_dir").mkdir()
    (tmp_path / "file.txt").write_text("text")
    script = tmp_path / "script.sh"
    script.write_text("echo hello")
    os.chmod(script, 0o755)

    _, content = _run(capsys, tmp_path, "-F")
    assert "sub_dir/" in content
    assert "file.txt/" not in content
    assert "file.txt*" not in content
    if os.name == "posix":
        assert "script.sh*" in content
    else:
        assert "script.sh*" not in content
    assert "1 directory, 2 files" in content


def test_no_report_flag(capsys, tmp_path):
    (tmp_path / "file1.txt").write_text("1")
    (tmp_path / "file2.txt").write_text("2")

    _, with_report = _run(capsys, tmp_path)
    assert "file1.txt" in with_report
    assert "0 directories, 2 files" in with_report

    _, without = _run(capsys, tmp_path, "--noreport")
    assert "file2.txt" in without
    assert "directories, " not in without
    assert "files" not in without
    last_line = without.rstrip().splitlines()[-1]
    assert last_line.endswith("file2.txt")


def test_permissions_flag(capsys, tmp_path):
    (tmp_path / "sub_dir").mkdir()
    target = tmp_path / "file.txt"
    target.write_text("text")
    os.chmod(target, 0o644)

    _, content = _run(capsys, tmp_path, "-p")
    lines = content.splitlines()
    file_line = next(line for line in lines if line.endswith("file.txt"))
    dir_line = next(line for line in lines if line.endswith("sub_dir"))
    if os.name == "posix":
        assert file_line.startswith("[-rw-r--r--] ")
        assert dir_line.startswith("[drw")
    else:
        assert "[" not in content
    assert "1 directory, 1 file" in content


def test_invalid_pattern(capsys, tmp_path):
    assert main([str(tmp_path), "-P", "["]) == 1
    err = capsys.readouterr().err
    assert "Error: Invalid pattern: Pattern syntax error near position 0" in err


def test_invalid_exclude_pattern(capsys, tmp_path):
    assert main([str(tmp_path), "-I", "***"]) == 1
    assert "Error: Invalid exclude pattern" in capsys.readouterr().err


def test_listing_error_is_reported(capsys, tmp_path):
    code = main([str(tmp_path / "missing"), "-f"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.err.startswith("Error: ")


def test_basic_tree_via_command(capsys, tmp_path):
    base = tmp_path / "basic"
    (base / "dir1").mkdir(parents=True)
    (base / "dir2").mkdir()
    (base / "dir1" / "file2.txt").write_text("2")
    (base / "file1.txt").write_text("1")
    (base / ".hidden.txt").write_text("h")

    _, output = _run(capsys, base)
    assert output.splitlines()[0] == "basic"
    assert "dir1" in output and "dir2" in output and "file1.txt" in output
    assert ".hidden.txt" not in output

    _, shown = _run(capsys, "-a", base)
    assert ".hidden.txt" in shown

    _, ascii_out = _run(capsys, "-A", base)
    assert "|   " in ascii_out and "+---" in ascii_out

    _, colored = _run(capsys, "-C", base)
    assert "\x1b[" in colored
    _, plain = _run(capsys, "-C", "-n", base)
    assert "\x1b[" not in plain

    _, full = _run(capsys, "-f", base)
    assert os.path.join(str(base), "dir1", "file2.txt") in full
    assert Path(full.splitlines()[0]) == base.resolve()