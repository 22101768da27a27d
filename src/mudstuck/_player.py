"""What the player sees: rendered and wrapped entity descriptions."""

__all__ = ["PlayerState", "wrap_text", "WRAP_WIDTH"]

import logging
import textwrap

import mudstuck


logger = logging.getLogger(__name__)

WRAP_WIDTH = 72


def wrap_text(text, width=WRAP_WIDTH):
    """Break text on spaces into lines of at most `width` characters.

    Words longer than the width are kept whole on a line of their own.

    Args:
        text: (str) Text to wrap
        width: (int) Maximum line length

    Returns:
        (list[str]) Wrapped lines, empty for empty text
    """
    return textwrap.wrap(
        text, width, break_long_words=False, break_on_hyphens=False
    )


class PlayerState:
    """A player standing somewhere in a world.

    Args:
        world: (World) World the player is in
        location: (Hashable | None) Entity id of the player's location,
            defaults to the world's start location
        width: (int) Line width for wrapped output

    Attributes:
        world: (World) World the player is in
        location: (Hashable) Entity id of the player's location
        width: (int) Line width for wrapped output
    """

    __slots__ = ("world", "location", "width")

    def __init__(self, world, location=None, width=WRAP_WIDTH):
        self.world = world
        self.location = world.start_location if location is None else location
        self.width = width

    def __repr__(self):
        return f"PlayerState<{self.location}>"

    def look(self):
        """Describe the player's surroundings.

        Returns:
            (list[str]) Output lines
        """
        entity = self.world.entity(self.location)
        return self._descriptions(entity)

    def describe(self, name):
        """Describe an entity referred to by its dotted name.

        Args:
            name: (str) Dotted name like `rusty.metal.door`

        Returns:
            (list[str]) Output lines
        """
        entity_id = self.world.lookup(name)
        if entity_id is None:
            return [f"Es gibt nichts, was {name} heißt."]
        return self._descriptions(self.world.entity(entity_id))

    def _descriptions(self, entity):
        lines = []
        lines.extend(self._render(entity.short_description))
        lines.extend(self._render(entity.long_description))
        return lines

    def _render(self, template):
        """Render and wrap a template, reporting failures as a line."""
        try:
            text = mudstuck.render(template, self.world)
        except (mudstuck.ParseError, mudstuck.EvalError) as e:
            logger.debug("Cannot render %r: %s", template, e)
            return [f"an error has occurred: {e}"]
        return wrap_text(text, self.width)
