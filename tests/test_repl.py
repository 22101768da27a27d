"""Tests for the interactive session."""

import pytest

import mudstuck
from mudstuck import repl


@pytest.fixture
def session(world):
    return repl.Session(mudstuck.PlayerState(world))


def test_blank_line(session):
    assert session.handle_line("   ") == []
    assert not session.done


@pytest.mark.parametrize("line", ["quit", "q", " Q "])
def test_quit(session, line):
    assert session.handle_line(line) == []
    assert session.done


@pytest.mark.parametrize("line", ["help", "h"])
def test_help(session, line):
    assert session.handle_line(line) == repl.HELP


@pytest.mark.parametrize("line", ["look", "l", "LOOK"])
def test_look(session, line):
    assert session.handle_line(line) == ["Ein kleiner Raum", "Hier steht eine einfache Tür."]


def test_describe_default(session):
    assert session.handle_line("d") == ["Metalltür", "Sie ist zu."]


def test_describe_name(session):
    assert session.handle_line("desc small.room") == session.player.describe("small.room")
    assert session.handle_line("desc lamp") == ["Es gibt nichts, was lamp heißt."]


def test_player_command(session):
    assert session.handle_line("get the lamp") == [
        "trying to get lamp",
        "I don't know how to do that.",
    ]


def test_bad_player_command(session):
    assert session.handle_line("dance wildly") == [
        "I don't know how to do that.",
        "(cannot parse command: not a valid verb)",
    ]


def test_repl_loop(world, monkeypatch, capsys):
    lines = iter(["look", "quit", "look"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))
    repl.repl(mudstuck.PlayerState(world))
    output = capsys.readouterr().out
    assert output.startswith(repl.GREETING[0])
    assert output.count("Ein kleiner Raum") == 1


def test_repl_stops_at_end_of_input(world, monkeypatch, capsys):
    def no_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    repl.repl(mudstuck.PlayerState(world))
    assert capsys.readouterr().out.endswith("\n\n")
