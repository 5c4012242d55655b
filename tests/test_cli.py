"""
Tests for the command-line entry points.
"""

import io
import json

import pytest

from rdparse.cli import SELF_TEST_LINES, calc_main, format_job, job_main
from rdparse.parser.job_parser import parse_job


class TestJobMain:
    """Tests for rdparse-job."""

    def test_parse_line(self, capsys):
        assert job_main(["ls -l | wc > n.txt"]) == 0
        out = capsys.readouterr().out
        assert "command[0]: 'ls' '-l'" in out
        assert "command[1]: 'wc'" in out
        assert "redirect: 'n.txt'" in out

    def test_json_format(self, capsys):
        assert job_main(["--format", "json", "a | b"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"commands": [["a"], ["b"]], "redirect": None}

    def test_table_format(self, capsys):
        assert job_main(["--format", "table", "a x | b"]) == 0
        out = capsys.readouterr().out
        assert "stage" in out
        assert "redirect: (none)" in out

    def test_self_test(self, capsys):
        assert job_main(["--self-test"]) == 0
        out = capsys.readouterr().out
        assert out.count("input: ") == len(SELF_TEST_LINES)

    def test_missing_line_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            job_main([])
        assert exc_info.value.code == 2

    def test_extra_argument_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            job_main(["a", "b"])
        assert exc_info.value.code == 2

    def test_line_starting_with_dash(self, capsys):
        assert job_main(["--", "-x | y"]) == 0
        out = capsys.readouterr().out
        assert "command[0]: '-x'" in out
        assert "command[1]: 'y'" in out

    def test_help_mentions_double_dash(self, capsys):
        with pytest.raises(SystemExit):
            job_main(["--help"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "put -- before a line that starts with -" in help_text

    def test_line_with_self_test_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            job_main(["--self-test", "a"])
        assert exc_info.value.code == 2


class TestFormatJob:
    """Tests for the job printer."""

    def test_empty_job(self):
        text = format_job(parse_job(""))
        assert "(no commands)" in text
        assert "redirect: (none)" in text

    def test_empty_redirect(self):
        assert "redirect: ''" in format_job(parse_job("a >"))


class TestCalcMain:
    """Tests for rdparse-calc."""

    def test_repl(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2+3*4;\n(2+3)*4;\n"))
        assert calc_main([]) == 0
        out = capsys.readouterr().out
        assert out == "Calc> => 14\nCalc> => 20\nCalc> "

    def test_error_exit_status(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2#3;\n1;\n"))
        assert calc_main([]) == 1
        captured = capsys.readouterr()
        assert "invalid character '#'" in captured.err
        assert "=> 1" in captured.out

    def test_abort_on_error(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2+;\n1;\n"))
        assert calc_main(["--abort-on-error"]) == 1
        assert "=> 1" not in capsys.readouterr().out

    def test_bits_option(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("200;"))
        assert calc_main(["--bits", "8"]) == 1
        assert "int8" in capsys.readouterr().err

    def test_invalid_bits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            calc_main(["--bits", "12"])
        assert exc_info.value.code == 2
