"""Pydantic models for arithmetic operation requests and results."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from arithmetic_evaluator.common.errors import InvalidArgumentError


class Operation(str, Enum):
    """The four operations supported by the evaluator."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        """Infix symbol used when displaying the operation."""
        return OPERATION_SYMBOLS[self]


OPERATION_SYMBOLS: dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}


# Signed 64-bit operand range
OPERAND_MIN: int = -(2**63)
OPERAND_MAX: int = 2**63 - 1


class OperandPair(BaseModel):
    """Two fixed-width signed integer operands passed by value to a single operation."""

    model_config = ConfigDict(frozen=True)

    first: StrictInt = Field(..., ge=OPERAND_MIN, le=OPERAND_MAX, description="Left-hand operand")
    second: StrictInt = Field(..., ge=OPERAND_MIN, le=OPERAND_MAX, description="Right-hand operand")


class OperationRequest(OperandPair):
    """Represents a single arithmetic operation to evaluate."""

    operation: Operation = Field(..., description="Operation applied to the operand pair")


class OperationResult(OperationRequest):
    """
    Tagged result of an evaluated operation.

    Exactly one of ``result`` and ``error`` is set: ``result`` on success,
    ``error`` with a human-readable description when the operation was rejected.
    """

    result: Optional[Union[int, float]] = Field(default=None, description="Computed value")
    error: Optional[str] = Field(default=None, description="Reason the operation failed")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure the result carries either a value or an error, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("OperationResult requires exactly one of 'result' or 'error'")
        return self

    @property
    def ok(self) -> bool:
        """True when the operation produced a value."""
        return self.error is None

    def unwrap(self) -> Union[int, float]:
        """
        Return the computed value, or raise the error the operation reported.

        :return: Computed value
        :rtype: Union[int, float]
        :raises InvalidArgumentError: If the result carries an error
        """
        if self.error is not None:
            raise InvalidArgumentError(self.error)
        return self.result

    def describe(self) -> str:
        """
        Format the result as a single display line.

        :return: ``"a op b = value"`` or ``"a op b -> ERROR: message"``
        :rtype: str
        """
        expression = f"{self.first} {self.operation.symbol} {self.second}"
        if self.ok:
            return f"{expression} = {self.result}"
        return f"{expression} -> ERROR: {self.error}"
