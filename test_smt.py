# Copyright (C) 2022 Matthew Marting
# SPDX-License-Identifier: GPL-3.0-or-later

import pytest

from smt import main


def test_prints_tokens(tmp_path, capsys):
    path = tmp_path / "formula.txt"
    path.write_text("~(a | b)\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0: `~'",
        "1: `('",
        "2: identifier `a'",
        "3: `|'",
        "4: identifier `b'",
        "5: `)'",
    ]


def test_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "formula.txt"
    path.write_text("a & 1\n", encoding="utf-8")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith(f"{path}:1:5: error: unexpected input: Expected identifier in 1\n")


def test_unreadable_file(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"Problem reading {path}\n"


def test_missing_filename(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0
    assert "usage: smt <filename>" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"Problem reading {path}\n"
