"""Parse player commands.

Commands are simple sentences of the form VERB [OBJECT] [CONNECTOR
OBJECT]. The verb gives the intended action, the first object is the
thing to manipulate and the connector with the second object tells how.
Objects are named by one or more words:

    eat
    get lamp
    put coin into purse
    north

A direction on its own means moving that way. The sentence grammar lives
in `lark/command.lark`.
"""

__all__ = [
    "Command",
    "Verb",
    "Connector",
    "Direction",
    "VERBS",
    "CONNECTORS",
    "DIRECTIONS",
    "parse_command",
    "command_tree",
]

import enum
import logging
from dataclasses import dataclass

import lark

import mudstuck


logger = logging.getLogger(__name__)


class Verb(enum.Enum):
    GET = "get"
    PUT = "put"
    USE = "use"
    MOVE = "move"
    BUY = "buy"
    DRINK = "drink"
    EAT = "eat"
    SLEEP = "sleep"


class Connector(enum.Enum):
    INTO = "into"
    ONTO = "onto"
    UNDER = "under"
    BESIDE = "beside"
    TO = "to"
    FROM = "from"
    WITH = "with"


class Direction(enum.Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


VERBS = {
    "get": Verb.GET,
    "take": Verb.GET,
    "acquire": Verb.GET,
    "put": Verb.PUT,
    "give": Verb.PUT,
    "toss": Verb.PUT,
    "drop": Verb.PUT,
    "use": Verb.USE,
    "move": Verb.MOVE,
    "go": Verb.MOVE,
    "buy": Verb.BUY,
    "drink": Verb.DRINK,
    "eat": Verb.EAT,
    "sleep": Verb.SLEEP,
}

CONNECTORS = {
    "in": Connector.INTO,
    "into": Connector.INTO,
    "on": Connector.ONTO,
    "onto": Connector.ONTO,
    "under": Connector.UNDER,
    "to": Connector.TO,
    "from": Connector.FROM,
    "with": Connector.WITH,
}

DIRECTIONS = {direction.value: direction for direction in Direction}


@dataclass(frozen=True)
class Command:
    """A parsed player command.

    Attributes:
        verb: (Verb) Intended action
        direct_object: (tuple[str] | None) Name of the manipulated object
        indirect_object: (tuple[Connector, tuple[str]] | None) Connector and
            name of the second object
    """

    verb: Verb
    direct_object: tuple | None = None
    indirect_object: tuple | None = None

    def __str__(self):
        parts = [self.verb.value]
        if self.direct_object:
            parts.append(" ".join(self.direct_object))
        if self.indirect_object:
            connector, name = self.indirect_object
            parts.append(connector.value)
            parts.append(" ".join(name))
        return " ".join(parts)


def parse_command(text):
    """Parse a sentence typed by the player.

    Args:
        text: (str) Command sentence

    Returns:
        (Command) Parsed command

    Raises:
        mudstuck.CommandError: If the sentence is not a valid command
    """
    words = text.lower().split()
    if not words:
        raise mudstuck.CommandError("command expected")

    try:
        tree = command_tree(" ".join(words))
    except lark.exceptions.UnexpectedInput as e:
        # Every later word is accepted, so only the first can fail
        raise mudstuck.CommandError("not a valid verb") from e

    command = _convert_tree(tree)
    logger.debug("Parsed command %r as %s", text, command)
    return command


def command_tree(text):
    """Parse normalized command text into the raw Lark tree.

    Args:
        text: (str) Lowercase command sentence

    Returns:
        (lark.Tree) Parse tree of the `start` rule
    """
    return _lark_parser("command").parse(text)


def _convert_tree(tree):
    """Convert the lark `start` tree into a Command."""
    verb = None
    direct_object = []
    indirect_object = None

    for kid in tree.children:
        match kid.data:
            case "verb":
                verb = VERBS[kid.children[0].value]
            case "direction":
                verb = Verb.MOVE
                direct_object.append(DIRECTIONS[kid.children[0].value].value)
            case "object":
                direct_object.extend(token.value for token in kid.children)
            case "indirect":
                connector = CONNECTORS[kid.children[0].value]
                name = tuple(token.value for token in kid.children[1:])
                if not name:
                    raise mudstuck.CommandError(
                        "indirect object required after connector"
                    )
                indirect_object = (connector, name)
            case _:
                raise ValueError(f"Unhandled grammar rule: {kid.data}")

    return Command(
        verb,
        tuple(direct_object) if direct_object else None,
        indirect_object,
    )


_parsers = {}


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(
        path, rel_to=__file__, parser="lalr", propagate_positions=True
    )
    _parsers[name] = parser
    return parser
