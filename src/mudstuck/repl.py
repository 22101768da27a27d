"""Interactive read-eval-print loop for playing in a world."""

import logging

import mudstuck


logger = logging.getLogger(__name__)

PROMPT = ">> "

DEFAULT_DESCRIBE = "rusty.metal.door"

HELP = [
    "Commands:",
    "  help or h         show this help",
    "  quit or q         quit the game",
    "  look or l         describe your surroundings",
    "  desc or d [NAME]  describe the thing called NAME",
]

GREETING = [
    'If you don\'t know what to do, type "help" (without the quotes).',
    'To leave the game, type "quit".',
    "",
]


class Session:
    """State of one interactive game session.

    Args:
        player: (PlayerState) The player issuing commands

    Attributes:
        player: (PlayerState) The player issuing commands
        done: (bool) The player asked to quit
    """

    def __init__(self, player):
        self.player = player
        self.done = False

    def handle_line(self, line):
        """Handle a single line of input.

        Supports the session commands listed in HELP; anything else is
        parsed as a player command.

        Returns:
            (list[str]) Output lines
        """
        words = line.split()
        if not words:
            return []
        logger.debug("Input %r", line)

        head = words[0].lower()
        if head in ("quit", "q") and len(words) == 1:
            self.done = True
            return []
        if head in ("look", "l") and len(words) == 1:
            return self.player.look()
        if head in ("help", "h") and len(words) == 1:
            return list(HELP)
        if head in ("desc", "d"):
            name = words[1] if len(words) > 1 else DEFAULT_DESCRIBE
            return self.player.describe(name)

        try:
            command = mudstuck.parse_command(line)
        except mudstuck.CommandError as e:
            return ["I don't know how to do that.", f"({e})"]
        return [f"trying to {command}", "I don't know how to do that."]


def repl(player, prompt=PROMPT):
    """Run the interactive loop until the player quits."""
    logger.info("Starting session in %s", player.world.name)
    for line in GREETING:
        print(line)

    session = Session(player)
    while not session.done:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        for output in session.handle_line(line):
            print(output)

