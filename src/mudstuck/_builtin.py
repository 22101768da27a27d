"""Builtin functions available to templates.

The set is closed: templates can call `if`, `closed` and `locked` and
nothing else. Each entry records its arity and whether it is a special
form, which receives its arguments as unevaluated `DeferredExpression`
values and decides itself what to evaluate.
"""

__all__ = ["Builtin", "BUILTINS", "lookup_builtin"]

from collections.abc import Callable
from dataclasses import dataclass

import mudstuck


@dataclass(frozen=True)
class Builtin:
    """Table entry for a builtin function.

    Attributes:
        function: (Function) Identity of the builtin
        min_args: (int) Fewest arguments accepted
        max_args: (int) Most arguments accepted
        special: (bool) Arguments are passed unevaluated
        implementation: (Callable) Called with (evaluator, args) to
            produce the resulting Value
    """

    function: mudstuck.Function
    min_args: int
    max_args: int
    special: bool
    implementation: Callable

    @property
    def name(self):
        """(str) Name templates call the builtin by."""
        return self.function.value

    def value(self):
        """(FunctionValue) Runtime value referring to this builtin."""
        return mudstuck.FunctionValue(
            self.function, self.name, self.special, self.min_args, self.max_args
        )


def _if(evaluator, args):
    """Evaluate the condition, then only the chosen branch."""
    condition = evaluator.force(args[0], "if condition")
    if not isinstance(condition, mudstuck.BoolValue):
        raise mudstuck.EvalError("if expects boolean expression as first argument")
    branch = args[1] if condition.flag else args[2]
    return evaluator.force(branch, "if expression")


def _attribute_predicate(name, kind, field):
    """Create a builtin reading a boolean attribute, false when missing."""

    def predicate(evaluator, args):
        reference = args[0]
        if not isinstance(reference, mudstuck.EntityReference):
            raise mudstuck.EvalError(f"function {name} requires a name of an entity")
        attr = evaluator.world.attribute(reference.entity_id, kind)
        if attr is None:
            return mudstuck.BoolValue(False)
        return mudstuck.BoolValue(getattr(attr, field))

    predicate.__name__ = f"_{name}"
    predicate.__doc__ = f"Report the {field} flag of an entity."
    return predicate


BUILTINS = {
    builtin.name: builtin
    for builtin in [
        Builtin(mudstuck.Function.IF, 3, 3, True, _if),
        Builtin(
            mudstuck.Function.CLOSED, 1, 1, False,
            _attribute_predicate("closed", mudstuck.Closable, "closed"),
        ),
        Builtin(
            mudstuck.Function.LOCKED, 1, 1, False,
            _attribute_predicate("locked", mudstuck.Lockable, "locked"),
        ),
    ]
}


def lookup_builtin(name):
    """Find a builtin by its reserved name.

    Args:
        name: (str) Identifier text

    Returns:
        (Builtin | None) Table entry, None if the name is not reserved
    """
    return BUILTINS.get(name)
