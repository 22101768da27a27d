"""Nodes for function calls."""

__all__ = ["Call"]

from dataclasses import dataclass

from . import _base


@dataclass(frozen=True)
class Call(_base.AstNode):
    """Parenthesized application of a function to arguments.

    Attributes:
        callee: (AstNode) Expression producing the function
        arguments: (tuple[AstNode]) Argument expressions in source order
    """

    callee: _base.AstNode
    arguments: tuple = ()

    def __post_init__(self):
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def unparse(self) -> str:
        parts = [self.callee.unparse()]
        parts.extend(arg.unparse() for arg in self.arguments)
        return f"({' '.join(parts)})"
