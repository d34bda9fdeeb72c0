"""
Tests for the command-line front end
"""

import pytest
from click.testing import CliRunner

from markovgen.markov_chain.generate import main


@pytest.fixture
def runner():
    return CliRunner()


def last_line(result):
    return result.output.splitlines()[-1]


class TestCli:
    def test_word_generation(self, runner, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("one two three", encoding="utf-8")

        result = runner.invoke(main, ["--order", "2", "--count", "6", str(path)])

        assert result.exit_code == 0, result.output
        assert last_line(result) == "one two three one two three"

    def test_char_generation(self, runner, tmp_path):
        path = tmp_path / "chars.txt"
        path.write_text("abc", encoding="utf-8")

        result = runner.invoke(main, ["-k", "3", "-n", "5", "--split", "char", str(path)])

        assert result.exit_code == 0, result.output
        assert last_line(result) == "abcab"

    def test_seed_is_reproducible(self, runner, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("the cat sat on the mat and the dog sat on the cat", encoding="utf-8")
        args = ["--order", "1", "--count", "30", "--seed", "11", str(path)]

        first = runner.invoke(main, args)
        second = runner.invoke(main, args)

        assert first.exit_code == 0, first.output
        assert last_line(first) == last_line(second)
        assert len(last_line(first).split(" ")) == 30

    def test_multiple_files(self, runner, tmp_path):
        first = tmp_path / "first.txt"
        first.write_text("red", encoding="utf-8")
        second = tmp_path / "second.txt"
        second.write_text("red", encoding="utf-8")

        result = runner.invoke(main, ["--order", "1", "--count", "3", str(first), str(second)])

        assert result.exit_code == 0, result.output
        assert last_line(result) == "red red red"

    def test_unreadable_file_is_skipped(self, runner, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_bytes(b"\xff\xfe\xfa")
        good = tmp_path / "good.txt"
        good.write_text("go", encoding="utf-8")

        result = runner.invoke(main, ["--count", "2", str(bad), str(good)])

        assert result.exit_code == 0, result.output
        assert last_line(result) == "go go"

    def test_no_readable_files(self, runner, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_bytes(b"\xff\xfe\xfa")

        result = runner.invoke(main, [str(bad)])

        assert result.exit_code == 1

    def test_requires_files(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.txt")])
        assert result.exit_code == 2

    def test_invalid_order(self, runner, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("one two", encoding="utf-8")
        result = runner.invoke(main, ["--order", "0", str(path)])
        assert result.exit_code == 2

    def test_demo(self, runner):
        result = runner.invoke(main, ["--demo", "--seed", "1"])

        assert result.exit_code == 0, result.output
        assert "Generated gibberish:" in result.output
        assert "More gibberish:" in result.output
