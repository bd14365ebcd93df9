"""Tests for the gridwalk command line front end."""

from __future__ import annotations

import io
import sys

import pytest

from gridwalk.cli import build_parser, main


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("R8, R4, R4, R8\n")
    return path


class TestArguments:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.input == "-"
        assert args.part == "both"
        assert args.verbose is False

    def test_rejects_unknown_part(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--part", "3"])
        assert excinfo.value.code == 2


class TestMain:
    def test_both_parts_from_file(self, input_file, capsys):
        assert main([str(input_file)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["part1: 8", "part2: 4"]

    def test_part_one_only(self, input_file, capsys):
        assert main([str(input_file), "--part", "1"]) == 0
        assert capsys.readouterr().out.splitlines() == ["part1: 8"]

    def test_part_two_only(self, input_file, capsys):
        assert main([str(input_file), "--part", "2"]) == 0
        assert capsys.readouterr().out.splitlines() == ["part2: 4"]

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("R5, L5, R5, R3"))
        assert main(["--part", "1"]) == 0
        assert capsys.readouterr().out.strip() == "part1: 12"

    def test_dash_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("R2, R2, R2"))
        assert main(["-", "--part", "1"]) == 0
        assert capsys.readouterr().out.strip() == "part1: 2"

    def test_parse_error_exit_status(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("R2, X5")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid instruction 'X5'" in captured.err

    @pytest.mark.skipif(
        not 0 < getattr(sys, "get_int_max_str_digits", lambda: 0)() < 5000,
        reason="needs an int/str conversion limit below 5000 digits",
    )
    def test_oversized_amount_exit_status(self, tmp_path, capsys):
        path = tmp_path / "huge.txt"
        path.write_text("R" + "1" * 5000)
        assert main([str(path)]) == 1
        assert "too large" in capsys.readouterr().err

    def test_no_revisit_exit_status(self, tmp_path, capsys):
        path = tmp_path / "straight.txt"
        path.write_text("R2, L3")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert "part1: 5" in captured.out
        assert "no cell visited twice" in captured.err

    def test_part_one_ignores_missing_revisit(self, tmp_path, capsys):
        path = tmp_path / "straight.txt"
        path.write_text("R2, L3")
        assert main([str(path), "--part", "1"]) == 0

    def test_missing_file_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.txt")])
        assert excinfo.value.code == 2

    def test_verbose_runs(self, input_file, capsys):
        assert main([str(input_file), "-v"]) == 0
        assert "part2: 4" in capsys.readouterr().out
