"""Evaluate template ASTs against a world.

Evaluation is a pure function of the AST and the world. Errors raise
`EvalError` immediately; nothing is retried or defaulted except the
documented false result of `closed` and `locked` for entities without
that attribute.
"""

__all__ = ["Evaluator", "evaluate", "render"]

import logging

import mudstuck
from mudstuck import ast


logger = logging.getLogger(__name__)

_implementations = {
    builtin.function: builtin for builtin in mudstuck.BUILTINS.values()
}


class Evaluator:
    """Reduces AST nodes to runtime values.

    Args:
        world: (World) World queried by identifiers and builtins

    Attributes:
        world: (World) World queried by identifiers and builtins
    """

    __slots__ = ("world",)

    def __init__(self, world):
        self.world = world

    def __repr__(self):
        return f"Evaluator<{self.world!r}>"

    def evaluate(self, node):
        """Evaluate a node to produce a Value.

        Args:
            node: (ast.AstNode) Node to evaluate

        Returns:
            (Value) Result of the evaluation

        Raises:
            mudstuck.EvalError: If the node cannot be evaluated
        """
        try:
            match node:
                case ast.Empty():
                    return mudstuck.StringValue("")
                case ast.Literal(text) | ast.StringLiteral(text):
                    return mudstuck.StringValue(text)
                case ast.Sequence():
                    return self._concat(node)
                case ast.Identifier(token):
                    return self._identifier(token)
                case ast.Call(callee, arguments):
                    return self._call(callee, arguments)
        except RecursionError:
            raise mudstuck.EvalError("expression nested too deeply") from None
        raise mudstuck.EvalError(f"internal error, unknown node {node!r}")

    def force(self, value, what="expression"):
        """Evaluate a deferred argument inside a special form.

        Args:
            value: (Value) Argument handed to the special form
            what: (str) Description of the argument for error messages

        Returns:
            (Value) Result of evaluating the deferred expression

        Raises:
            mudstuck.EvalError: If the argument was not deferred
        """
        if not isinstance(value, mudstuck.DeferredExpression):
            raise mudstuck.EvalError(f"internal error, {what} already evaluated")
        return self.evaluate(value.node)

    def apply(self, function, args):
        """Apply a function value to a list of argument values.

        Args:
            function: (FunctionValue) Function to call
            args: (list[Value]) Evaluated arguments, or deferred expressions
                for special forms

        Returns:
            (Value) Function result
        """
        if not isinstance(function, mudstuck.FunctionValue):
            raise mudstuck.EvalError("non-function in function position")
        _check_arity(function, len(args))
        if not function.special:
            for arg in args:
                if isinstance(arg, mudstuck.DeferredExpression):
                    raise mudstuck.EvalError(
                        f"internal error, deferred argument passed to {function.name}"
                    )
        builtin = _implementations[function.function]
        return builtin.implementation(self, args)

    def _concat(self, node):
        # Flattened so long templates don't recurse once per segment
        parts = []
        for segment in ast.segments(node):
            value = self.evaluate(segment)
            if not isinstance(value, mudstuck.StringValue):
                raise mudstuck.EvalError("invalid operand for concatenation")
            parts.append(value.text)
        return mudstuck.StringValue("".join(parts))

    def _identifier(self, token):
        builtin = mudstuck.lookup_builtin(token)
        if builtin is not None:
            return builtin.value()
        entity_id = self.world.lookup(token)
        if entity_id is None:
            raise mudstuck.EvalError(f"undefined identifier: {token}")
        return mudstuck.EntityReference(entity_id)

    def _call(self, callee, arguments):
        function = self.evaluate(callee)
        if not isinstance(function, mudstuck.FunctionValue):
            raise mudstuck.EvalError("non-function in function position")

        # Checked before any argument is evaluated
        _check_arity(function, len(arguments))

        if function.special:
            args = [mudstuck.DeferredExpression(arg) for arg in arguments]
        else:
            args = [self.evaluate(arg) for arg in arguments]
        return self.apply(function, args)


def _check_arity(function, count):
    if count < function.min_args:
        raise mudstuck.ArityError(function.name, "min", function.min_args, count)
    if count > function.max_args:
        raise mudstuck.ArityError(function.name, "max", function.max_args, count)


def evaluate(node, world):
    """Evaluate an AST against a world.

    Args:
        node: (ast.AstNode) Parsed template or expression
        world: (World) World to query

    Returns:
        (Value) Result of the evaluation

    Raises:
        mudstuck.EvalError: If the node cannot be evaluated
    """
    return Evaluator(world).evaluate(node)


def render(text, world):
    """Parse and evaluate a template into its final text.

    Args:
        text: (str) Template source
        world: (World) World to query

    Returns:
        (str) Rendered text

    Raises:
        mudstuck.ParseError: If the template is malformed
        mudstuck.EvalError: If evaluation fails or does not produce text
    """
    node = mudstuck.parse(text)
    value = evaluate(node, world)
    if not isinstance(value, mudstuck.StringValue):
        logger.debug("Template %r produced %r", text, value)
        raise mudstuck.EvalError(f"invalid value: {value.format()}")
    return value.text
