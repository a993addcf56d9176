import io
import sys

import pytest

from tinyunix.grep import grep, main, match, match_here, match_star


@pytest.mark.parametrize(
    "re, text, expected",
    [
        ("abc", "xxabcxx", True),
        ("abc", "ab", False),
        ("^abc", "abcx", True),
        ("^abc", "xabc", False),
        ("a.c", "abc", True),
        ("a.c", "ac", False),
        ("ab*c", "ac", True),
        ("ab*c", "abbbc", True),
        ("ab*c", "abxc", False),
        ("c$", "abc", True),
        ("c$", "abcd", False),
        ("", "", True),
        (".*", "", True),
        ("^$", "", True),
        ("^$", "a", False),
        ("^a.*z$", "abcz", True),
    ],
)
def test_match(re, text, expected):
    assert match(re, text) is expected


def test_match_here_is_anchored():
    assert match_here("ab", "abc") is True
    assert match_here("ab", "cab") is False


def test_match_star():
    assert match_star("a", "b", "aaab") is True
    assert match_star("a", "b", "aaac") is False
    assert match_star(".", "c", "xyzc") is True


def test_grep_yields_matching_lines():
    stream = io.StringIO("foo\nbar\nfood\n")
    assert list(grep("foo", stream)) == ["foo\n", "food\n"]


def test_grep_ignores_unterminated_last_line():
    stream = io.StringIO("foo\nfoo")
    assert list(grep("foo", stream)) == ["foo\n"]


def test_grep_handles_lines_across_chunks():
    long_line = "x" * 3000 + "needle\n"
    stream = io.StringIO("hay\n" + long_line + "hay\n")
    assert list(grep("needle$", stream)) == [long_line]


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage: grep" in capsys.readouterr().err


def test_main_reads_files(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("alpha\nbeta\ngamma\n")
    assert main(["^.a", str(path)]) == 0
    assert capsys.readouterr().out == "gamma\n"


def test_main_reports_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert main(["x", missing]) == 1
    assert capsys.readouterr().out == f"grep: cannot open {missing}\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("one\ntwo\nthree\n"))
    assert main(["o$"]) == 0
    assert capsys.readouterr().out == "two\n"