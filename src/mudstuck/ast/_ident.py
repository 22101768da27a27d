"""Nodes for identifiers."""

__all__ = ["Identifier"]

from dataclasses import dataclass

from . import _base


@dataclass(frozen=True)
class Identifier(_base.AstNode):
    """Bare name inside an expression.

    Either one of the reserved builtin function names or a dotted entity
    name path like `rusty.metal.door`.

    Attributes:
        token: (str) Identifier text as written
    """

    token: str

    @property
    def path(self):
        """(tuple[str]) Token split into name path words."""
        return tuple(self.token.split("."))

    def unparse(self) -> str:
        return self.token
