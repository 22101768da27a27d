"""Error classes and helpers"""

__all__ = ["ArityError", "CommandError", "EvalError", "ParseError"]


class ParseError(Exception):
    """Exception raised for template syntax errors.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class EvalError(Exception):
    """Error evaluating a template against the world."""


class ArityError(EvalError):
    """Function called with the wrong number of arguments.

    Args:
        function: (str) Name of the called function
        bound: (str) Violated bound, either "min" or "max"
        limit: (int) Value of the violated bound
        count: (int) Number of arguments actually given

    Attributes:
        function: (str) Name of the called function
        bound: (str) Violated bound, either "min" or "max"
        limit: (int) Value of the violated bound
        count: (int) Number of arguments actually given
    """

    def __init__(self, function, bound, limit, count):
        self.function = function
        self.bound = bound
        self.limit = limit
        self.count = count
        qualifier = "at least" if bound == "min" else "at most"
        super().__init__(
            f"function {function} requires {qualifier} {limit} arguments, got {count}"
        )


class CommandError(Exception):
    """Player command sentence that cannot be parsed."""

    def __init__(self, message):
        self.message = message
        super().__init__(f"cannot parse command: {message}")
