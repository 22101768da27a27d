"""Runtime values produced by evaluating templates."""

__all__ = [
    "Function",
    "Value",
    "StringValue",
    "BoolValue",
    "FunctionValue",
    "EntityReference",
    "DeferredExpression",
]

import enum
from dataclasses import dataclass
from collections.abc import Hashable
from typing import Any


class Function(enum.Enum):
    """Identity of each builtin function."""

    IF = "if"
    CLOSED = "closed"
    LOCKED = "locked"


class Value:
    """Base class of template runtime values.

    Values are immutable. Only `StringValue` may be the final result of
    rendering a template; the other kinds exist while evaluating.
    """

    __slots__ = ()

    def format(self):
        """Convert value to a short description for messages.

        Returns:
            (str) String representation suitable for display
        """
        return repr(self)


@dataclass(frozen=True)
class StringValue(Value):
    """Text value."""

    text: str

    def format(self):
        return repr(self.text)


@dataclass(frozen=True)
class BoolValue(Value):
    """Truth value, produced by predicates like `closed`."""

    flag: bool

    def format(self):
        return "true" if self.flag else "false"


@dataclass(frozen=True)
class FunctionValue(Value):
    """Reference to a builtin function.

    Attributes:
        function: (Function) Which builtin this is
        name: (str) Name the function is called by
        special: (bool) Arguments are passed unevaluated
        min_args: (int) Fewest arguments accepted
        max_args: (int) Most arguments accepted
    """

    function: Function
    name: str
    special: bool
    min_args: int
    max_args: int

    def format(self):
        return f"function {self.name}"


@dataclass(frozen=True)
class EntityReference(Value):
    """Result of resolving a name path to an entity."""

    entity_id: Hashable

    def format(self):
        return f"entity {self.entity_id}"


@dataclass(frozen=True)
class DeferredExpression(Value):
    """Unevaluated argument handed to a special form.

    Attributes:
        node: (ast.AstNode) Argument expression to evaluate on demand
    """

    node: Any

    def format(self):
        return f"deferred {self.node.unparse()}"
