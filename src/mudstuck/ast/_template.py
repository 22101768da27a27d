"""Nodes for template level structure."""

__all__ = ["Empty", "Sequence", "segments", "unparse_template"]

from dataclasses import dataclass

from . import _base, _literal


@dataclass(frozen=True)
class Empty(_base.AstNode):
    """Empty template, the identity of concatenation."""

    def unparse(self) -> str:
        return ""


@dataclass(frozen=True)
class Sequence(_base.AstNode):
    """Concatenation of two sub-templates.

    The parser builds left-nested chains, so `left` is another Sequence
    or the first segment, and `right` is always a single segment.

    Attributes:
        left: (AstNode) Template rendered first
        right: (AstNode) Template rendered second
    """

    left: _base.AstNode
    right: _base.AstNode

    def unparse(self) -> str:
        return unparse_template(self)


def segments(node):
    """Flatten nested sequences into their segments in source order.

    Walks without recursion so long templates don't hit the interpreter
    recursion limit. Empty nodes contribute nothing.

    Args:
        node: (AstNode) Template node

    Returns:
        (list[AstNode]) Segment nodes, none of them Sequence or Empty
    """
    result = []
    pending = [node]
    while pending:
        node = pending.pop()
        if isinstance(node, Sequence):
            pending.append(node.right)
            pending.append(node.left)
        elif not isinstance(node, Empty):
            result.append(node)
    return result


def unparse_template(node):
    """Convert a parsed template back to template source.

    Unlike `AstNode.unparse`, expression segments are prefixed with the
    sigil, so a lone expression comes back as `#(...)`.

    Args:
        node: (AstNode) Template node

    Returns:
        (str) Template source
    """
    parts = []
    for segment in segments(node):
        if isinstance(segment, _literal.Literal):
            parts.append(segment.unparse())
        else:
            parts.append("#" + segment.unparse())
    return "".join(parts)
