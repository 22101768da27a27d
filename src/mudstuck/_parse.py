"""Parse template source into AST nodes.

Templates are literal text with embedded expressions introduced by the
`#` sigil. Expressions are either a quoted string, a bare identifier or a
parenthesized call whose arguments are again expressions:

    Die Tür ist #(if (closed rusty.metal.door) "zu" "offen").

The parser is a small recursive descent over a `Scanner`. It produces a
left-nested chain of `Sequence` nodes with one segment per literal run or
expression, in source order. A template with a single segment is just
that segment, and an empty template is `Empty`.
"""

__all__ = ["parse", "SIGIL"]

import logging

import mudstuck
from mudstuck import ast
from mudstuck._scanner import Scanner, skip_ws


logger = logging.getLogger(__name__)

SIGIL = "#"
QUOTES = ("'", '"')


def parse(text):
    """Parse template source.

    Args:
        text: (str) Template source

    Returns:
        (ast.AstNode) Template AST

    Raises:
        mudstuck.ParseError: If an embedded expression is malformed
    """
    scanner = Scanner(text)
    result = None
    while scanner.current is not None:
        if scanner.current == SIGIL:
            scanner.next()
            try:
                segment = _parse_expr(scanner)
            except RecursionError:
                raise mudstuck.ParseError(
                    "expression nested too deeply", scanner.pos
                ) from None
        else:
            segment = _parse_literal(scanner)
        result = segment if result is None else ast.Sequence(result, segment)
    logger.debug("Parsed template %r", text)
    if result is None:
        return ast.Empty()
    return result


def _is_ident_start(c):
    return c is not None and (c.isascii() and c.isalpha() or c == "_")


def _is_ident_char(c):
    return c is not None and (c.isascii() and c.isalnum() or c in "_.")


def _parse_literal(scanner):
    """Consume text up to the next sigil or end of input."""
    start = scanner.pos
    while scanner.current is not None and scanner.current != SIGIL:
        scanner.next()
    return ast.Literal(scanner.text[start:scanner.pos])


def _parse_expr(scanner):
    """Parse one expression: call, string literal or identifier."""
    skip_ws(scanner)
    c = scanner.current
    if c is None:
        raise mudstuck.ParseError(
            "unexpected end of string in expression", scanner.pos
        )
    if c == "(":
        scanner.next()
        return _parse_call(scanner)
    if c in QUOTES:
        scanner.next()
        return _parse_string(c, scanner)
    if _is_ident_start(c):
        return _parse_ident(scanner)
    raise mudstuck.ParseError(
        f"unexpected character in expression: {c}", scanner.pos
    )


def _parse_ident(scanner):
    c = scanner.current
    if c is None:
        raise mudstuck.ParseError(
            "unexpected end of string in identifier", scanner.pos
        )
    if not _is_ident_start(c):
        raise mudstuck.ParseError("identifier expected", scanner.pos)
    start = scanner.pos
    while _is_ident_char(scanner.current):
        scanner.next()
    return ast.Identifier(scanner.text[start:scanner.pos])


def _parse_call(scanner):
    """Parse a call after its opening parenthesis, through the closing one."""
    skip_ws(scanner)
    callee = _parse_ident(scanner)
    args = []
    while True:
        skip_ws(scanner)
        c = scanner.current
        if c is None:
            raise mudstuck.ParseError(
                "unexpected end of string in call expression", scanner.pos
            )
        if c == ")":
            scanner.next()
            return ast.Call(callee, args)
        args.append(_parse_expr(scanner))


def _parse_string(quote, scanner):
    """Parse a string literal after its opening quote."""
    start = scanner.pos
    while scanner.current != quote:
        if scanner.current is None:
            raise mudstuck.ParseError(
                "unexpected end of string in string literal", scanner.pos
            )
        scanner.next()
    text = scanner.text[start:scanner.pos]
    scanner.next()
    return ast.StringLiteral(text)
