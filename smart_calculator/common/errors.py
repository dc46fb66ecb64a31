"""Error kinds reported by the calculator, one per user-facing message."""


class CalculatorError(Exception):
    """
    Base class of every recoverable calculator failure.

    Subclasses define the message printed to the user; a more specific
    detail may be passed for logging, but ``str()`` always returns the
    user-facing message.
    """

    message: str = "Calculator error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class InvalidExpression(CalculatorError):
    """Malformed tokens, unbalanced parentheses, misplaced operator or stack underflow."""

    message = "Invalid expression"


class InvalidIdentifier(CalculatorError):
    """The left-hand side of an assignment is not a single identifier."""

    message = "Invalid identifier"


class InvalidAssignment(CalculatorError):
    """The right-hand side of an assignment is not a valid expression."""

    message = "Invalid assignment"


class UnknownVariable(CalculatorError):
    """A referenced variable was never assigned."""

    message = "Unknown variable"


class DivisionByZero(CalculatorError):
    message = "Division by zero"
