"""Errors raised by the arithmetic evaluator."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an operand it cannot accept (a zero divisor)."""
