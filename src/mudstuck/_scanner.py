"""Character cursor used by the template parser.

Works like a peekable iterator over the code points of a string, with the
current character always available and None marking the end of input.
"""

__all__ = ["Scanner", "skip_ws"]


WHITESPACE = frozenset(" \t\r\n")


class Scanner:
    """A stream of characters and a current position.

    Args:
        text: (str) Source text to scan

    Attributes:
        text: (str) Source text
        pos: (int) Index of the current character, len(text) at end of input
    """

    __slots__ = ("text", "pos")

    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def current(self):
        """(str | None) Current character, or None at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next(self):
        """Move to the next character, staying put once at end of input."""
        if self.pos < len(self.text):
            self.pos += 1

    def __repr__(self):
        return f"Scanner<{self.pos}/{len(self.text)}>"


def skip_ws(scanner):
    """Skip spaces, tabs, carriage returns and line feeds.

    Afterwards the current character is not whitespace, or the scanner
    is at end of input.
    """
    while scanner.current is not None and scanner.current in WHITESPACE:
        scanner.next()
