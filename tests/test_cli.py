"""Test the command-line interface."""

import os
import subprocess
import sys

import pytest

from mudstuck import __main__ as cli


def test_render_text(capsys):
    status = cli.main(["--text", '#(if (closed rusty.metal.door) "zu" "offen")'])
    assert status == 0
    assert capsys.readouterr().out == "zu\n"


def test_render_text_wraps(capsys):
    status = cli.main(["--text", "eins zwei drei", "--width", "5"])
    assert status == 0
    assert capsys.readouterr().out == "eins\nzwei\ndrei\n"


def test_render_error(capsys):
    status = cli.main(["--text", "#(locked rusty.metal.door)"])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert "invalid value: false" in captured.err


def test_render_parse_error(capsys):
    status = cli.main(["--text", "#(if"])
    assert status == 1
    assert "Parse error at 4: unexpected end of string in call expression" in capsys.readouterr().err


def test_show_ast(capsys):
    status = cli.main(["--text", "a#b", "--ast"])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == [
        "Sequence()",
        "  Literal('a')",
        "  Identifier('b')",
    ]


def test_show_command(capsys):
    status = cli.main(["--command", "put the coin into purse"])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == [
        "verb: PUT",
        "direct object: coin",
        "indirect object: INTO purse",
    ]


def test_show_command_tree(capsys):
    status = cli.main(["--command", "get lamp", "--lark"])
    assert status == 0
    output = capsys.readouterr().out
    assert output.startswith("start")
    assert "lamp" in output


def test_show_command_error(capsys):
    assert cli.main(["--command", "dance"]) == 1
    assert "not a valid verb" in capsys.readouterr().err
    assert cli.main(["--command", "dance", "--lark"]) == 1


@pytest.mark.parametrize(
    "argv",
    [["--ast"], ["--lark"], ["--text", "x", "--command", "eat"], ["--width", "0"]],
)
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as info:
        cli.main(argv)
    assert info.value.code == 2


def test_cli_plays_session():
    result = subprocess.run(
        [sys.executable, "-m", "mudstuck"],
        input="look\nd\nquit\n",
        capture_output=True,
        text=True,
        encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "Ein kleiner Raum mit Wänden aus rohem Fels" in result.stdout
    assert "Die Tür ist geschlossen." in result.stdout
