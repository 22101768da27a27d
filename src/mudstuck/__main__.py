"""Command-line interface for mudstuck.

Without options this starts an interactive game in the example world.
The other modes help when writing descriptions and commands:

    python -m mudstuck --text '#(if (closed rusty.metal.door) "zu" "offen")'
    python -m mudstuck --text '#(locked rusty.metal.door)' --ast
    python -m mudstuck --command "put coin into purse" --lark
"""

import argparse
import logging
import sys

import lark

import mudstuck
from mudstuck import repl


def render_text(source, world, width):
    """Render a template and print it wrapped.

    Returns:
        (int) Process exit status
    """
    try:
        text = mudstuck.render(source, world)
    except mudstuck.ParseError as e:
        print(f"Parse error at {e.position}: {e.message}", file=sys.stderr)
        return 1
    except mudstuck.EvalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for line in mudstuck.wrap_text(text, width):
        print(line)
    return 0


def show_ast(source):
    """Print the parse tree of a template.

    Returns:
        (int) Process exit status
    """
    try:
        node = mudstuck.parse(source)
    except mudstuck.ParseError as e:
        print(f"Parse error at {e.position}: {e.message}", file=sys.stderr)
        return 1
    node.print_tree()
    return 0


def show_command(sentence, raw):
    """Print a parsed player command, or its raw Lark tree.

    Returns:
        (int) Process exit status
    """
    try:
        if raw:
            tree = mudstuck.command_tree(" ".join(sentence.lower().split()))
            print(tree.pretty(), end="")
            return 0
        command = mudstuck.parse_command(sentence)
    except (mudstuck.CommandError, lark.exceptions.LarkError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"verb: {command.verb.name}")
    if command.direct_object:
        print(f"direct object: {' '.join(command.direct_object)}")
    if command.indirect_object:
        connector, name = command.indirect_object
        print(f"indirect object: {connector.name} {' '.join(name)}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mudstuck",
        description="Mudstuck text adventure")
    parser.add_argument("--text", metavar="TEMPLATE",
        help="Render a template against the example world")
    parser.add_argument("--ast", action="store_true",
        help="Show the parse tree of --text instead of rendering it")
    parser.add_argument("--command", metavar="SENTENCE",
        help="Parse a player command and show its parts")
    parser.add_argument("--lark", action="store_true",
        help="Show the raw Lark tree of --command")
    parser.add_argument("--width", type=int, default=mudstuck.WRAP_WIDTH,
        help="Line width for wrapped output (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Log informational messages")
    parser.add_argument("--debug", action="store_true",
        help="Log debugging messages")

    args = parser.parse_args(argv)

    if args.text is not None and args.command is not None:
        parser.error("--text cannot be combined with --command")
    if args.ast and args.text is None:
        parser.error("--ast requires --text")
    if args.lark and args.command is None:
        parser.error("--lark requires --command")
    if args.width < 1:
        parser.error("--width must be positive")

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if args.debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is not None:
        return show_command(args.command, args.lark)

    world = mudstuck.make_example_world()
    if args.text is not None:
        if args.ast:
            return show_ast(args.text)
        return render_text(args.text, world, args.width)

    repl.repl(mudstuck.PlayerState(world, width=args.width))
    return 0


if __name__ == "__main__":
    sys.exit(main())
