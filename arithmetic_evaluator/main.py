"""
Demonstration entrypoint.

This script:
- Builds one request per operation on a fixed operand pair
- Evaluates each request with the arithmetic evaluator
- Prints every result to standard output

It accepts no input and exits with status 0.
"""

import argparse
from typing import List, Optional

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import (
    OperandPair,
    Operation,
    OperationRequest,
    OperationResult,
)
from arithmetic_evaluator.evaluator.calculator import ArithmeticEvaluator


DEMO_OPERANDS = OperandPair(first=5, second=3)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    The demo takes no arguments; parsing only provides ``--help`` and rejects
    anything else.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Parsed (empty) namespace
    :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(
        description="Print the four arithmetic operations applied to two fixed operands"
    )
    return parser.parse_args(argv)


def run_demo(evaluator: ArithmeticEvaluator, operands: OperandPair = DEMO_OPERANDS) -> List[OperationResult]:
    """
    Evaluate every operation on the given operand pair.

    :param ArithmeticEvaluator evaluator: Evaluator used for all operations
    :param OperandPair operands: Operand pair shared by the four operations

    :return: One result per operation, in declaration order
    :rtype: List[OperationResult]
    """
    return [
        evaluator.evaluate(
            OperationRequest(operation=operation, first=operands.first, second=operands.second)
        )
        for operation in Operation
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed from the command line.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Process exit status
    :rtype: int
    """
    parse_args(argv)
    logger.info("Running calculator demo on %d and %d", DEMO_OPERANDS.first, DEMO_OPERANDS.second)

    print("Calculator Demo")
    for result in run_demo(ArithmeticEvaluator()):
        print(result.describe())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
