"""Tests for parsing player commands."""

import pytest

import mudstuck
from mudstuck import Command, Connector, Verb


@pytest.mark.parametrize(
    "text, expected",
    [
        ("eat", Command(Verb.EAT)),
        ("get lamp", Command(Verb.GET, ("lamp",))),
        ("Take THE  Lamp", Command(Verb.GET, ("lamp",))),
        ("put coin into purse", Command(Verb.PUT, ("coin",), (Connector.INTO, ("purse",)))),
        ("give the gold coin to an old man", Command(Verb.PUT, ("gold", "coin"), (Connector.TO, ("old", "man")))),
        ("north", Command(Verb.MOVE, ("north",))),
        ("west door", Command(Verb.MOVE, ("west", "door"))),
        ("go north", Command(Verb.MOVE, ("north",))),
        ("get getaway car", Command(Verb.GET, ("getaway", "car"))),
        ("get the", Command(Verb.GET)),
        ("use into lock", Command(Verb.USE, None, (Connector.INTO, ("lock",)))),
        ("drop eat on the table", Command(Verb.PUT, ("eat",), (Connector.ONTO, ("table",)))),
    ],
)
def test_parse_command(text, expected):
    assert mudstuck.parse_command(text) == expected


def test_indirect_object_keeps_connectors():
    command = mudstuck.parse_command("put the coin in a purse with holes")
    assert command.direct_object == ("coin",)
    assert command.indirect_object == (Connector.INTO, ("purse", "with", "holes"))


@pytest.mark.parametrize("word, verb", mudstuck.VERBS.items())
def test_every_verb(word, verb):
    assert mudstuck.parse_command(f"{word} thing").verb is verb


@pytest.mark.parametrize("word, connector", mudstuck.CONNECTORS.items())
def test_every_connector(word, connector):
    command = mudstuck.parse_command(f"put thing {word} box")
    assert command.indirect_object == (connector, ("box",))


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "command expected"),
        ("   ", "command expected"),
        ("lamp get", "not a valid verb"),
        ("the lamp", "not a valid verb"),
        ("into the box", "not a valid verb"),
        ("put coin into", "indirect object required after connector"),
        ("put coin into the", "indirect object required after connector"),
    ],
)
def test_command_errors(text, message):
    with pytest.raises(mudstuck.CommandError) as info:
        mudstuck.parse_command(text)
    assert info.value.message == message
    assert str(info.value) == f"cannot parse command: {message}"


def test_command_str():
    assert str(mudstuck.parse_command("put the coin into purse")) == "put coin into purse"
    assert str(mudstuck.parse_command("north")) == "move north"
    assert str(mudstuck.parse_command("sleep")) == "sleep"


def test_command_tree():
    tree = mudstuck.command_tree("put coin into purse")
    assert tree.data == "start"
    assert [kid.data for kid in tree.children] == ["verb", "object", "indirect"]


@pytest.mark.parametrize("word, direction", mudstuck.DIRECTIONS.items())
def test_every_direction(word, direction):
    command = mudstuck.parse_command(word.upper())
    assert command.verb is Verb.MOVE
    assert command.direct_object == (direction.value,)


def test_command_tree_exported():
    assert "command_tree" in mudstuck._command.__all__
    tree = mudstuck.command_tree("get lamp")
    assert [kid.data for kid in tree.children] == ["verb", "object"]
