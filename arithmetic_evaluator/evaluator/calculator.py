"""Stateless evaluator for the four basic integer operations."""
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict

from arithmetic_evaluator.common.errors import InvalidArgumentError
from arithmetic_evaluator.common.models import Operation, OperationRequest, OperationResult


class ArithmeticEvaluator(BaseModel):
    """
    Evaluate add, subtract, multiply and divide on integer operands.

    Design constraints:
        - No state: the instance has no fields and every call is independent
        - No side effects: operations never log, print or mutate anything
        - Integer results use native ``int`` arithmetic, no overflow checks
        - Division returns a float computed as ``float(a) / float(b)``

    A failed division leaves the evaluator fully usable for further calls.
    """

    # No fields: every operation is a pure function of its arguments
    model_config = ConfigDict(frozen=True)

    def add(self, first: int, second: int) -> int:
        """Return ``first + second``."""
        return first + second

    def subtract(self, first: int, second: int) -> int:
        """Return ``first - second``."""
        return first - second

    def multiply(self, first: int, second: int) -> int:
        """Return ``first * second``."""
        return first * second

    def divide(self, first: int, second: int) -> float:
        """
        Divide ``first`` by ``second`` using floating-point division.

        The dividend is converted to float before dividing, so ``divide(7, 2)``
        is ``3.5`` and not the integer quotient.

        :param int first: Dividend
        :param int second: Divisor

        :return: ``float(first) / float(second)``
        :rtype: float
        :raises InvalidArgumentError: If ``second`` is zero
        """
        if second == 0:
            raise InvalidArgumentError("Division by zero")
        return float(first) / float(second)

    def _dispatch(self, operation: Operation) -> Callable[[int, int], Union[int, float]]:
        """
        Map an operation to the bound method implementing it.

        :param Operation operation: Requested operation

        :return: Bound evaluator method
        :rtype: Callable[[int, int], Union[int, float]]
        """
        return {
            Operation.ADD: self.add,
            Operation.SUBTRACT: self.subtract,
            Operation.MULTIPLY: self.multiply,
            Operation.DIVIDE: self.divide,
        }[operation]

    def evaluate(self, request: OperationRequest) -> OperationResult:
        """
        Evaluate a request and return a tagged result instead of raising.

        A zero divisor is reported through ``OperationResult.error``; callers
        that prefer an exception can call ``unwrap()`` on the result.

        :param OperationRequest request: Operation and operand pair

        :return: Result carrying either the value or the error message
        :rtype: OperationResult
        """
        fields = request.model_dump()
        try:
            value = self._dispatch(request.operation)(request.first, request.second)
        except InvalidArgumentError as exc:
            return OperationResult(**fields, error=str(exc))
        return OperationResult(**fields, result=value)
