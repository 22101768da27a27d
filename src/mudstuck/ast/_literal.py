"""Nodes for literal values."""

__all__ = ["Literal", "StringLiteral"]

from dataclasses import dataclass

from . import _base


@dataclass(frozen=True)
class Literal(_base.AstNode):
    """Verbatim run of template text outside of any expression."""

    text: str

    def unparse(self) -> str:
        return self.text


@dataclass(frozen=True)
class StringLiteral(_base.AstNode):
    """Quoted string inside an expression."""

    text: str

    def unparse(self) -> str:
        # No escapes exist, so pick whichever quote the text doesn't use
        if '"' not in self.text:
            return f'"{self.text}"'
        if "'" not in self.text:
            return f"'{self.text}'"
        raise ValueError(f"String cannot be quoted: {self.text!r}")
