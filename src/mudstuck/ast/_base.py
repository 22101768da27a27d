"""Node for base classes."""

__all__ = ["AstNode"]

import dataclasses
import sys


class AstNode:
    """Base class for all AST nodes.

    AST nodes are immutable value objects describing a parsed template.
    They carry no evaluation logic; the evaluator walks them against a
    world. Nodes compare equal when their contents are equal.

    This is a base class that should not be instantiated directly.
    Subclasses must implement unparse().
    """

    __slots__ = ()

    def unparse(self) -> str:
        """Convert this node back to template source.

        Used for debugging and error messages. Should produce source that
        parses back to an equivalent AST.

        Returns:
            Source code string
        """
        raise NotImplementedError(f"{self.__class__.__name__}.unparse() not implemented")

    def children(self):
        """(list[AstNode]) Direct child nodes in source order."""
        kids = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, AstNode):
                kids.append(value)
            elif isinstance(value, tuple):
                kids.extend(v for v in value if isinstance(v, AstNode))
        return kids

    def print_tree(self, depth=0, file=None):
        """Print ast nodes for debugging."""
        file = file or sys.stdout
        labels = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, str):
                labels.append(repr(value))
        indent = "  " * depth
        print(f"{indent}{type(self).__name__}({', '.join(labels)})", file=file)
        for child in self.children():
            child.print_tree(depth + 1, file=file)
