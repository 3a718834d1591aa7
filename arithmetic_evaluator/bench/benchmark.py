"""
Micro-benchmarks for the arithmetic evaluator.

Each case calls one evaluator operation repeatedly on fixed operands and
reports the total elapsed time and the mean cost per call.
"""
import argparse
import time
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import OperandPair, Operation
from arithmetic_evaluator.evaluator.calculator import ArithmeticEvaluator


DEFAULT_ITERATIONS: int = 100_000


class BenchmarkCase(BaseModel):
    """A named operation timed on a single operand pair."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Case identifier shown in reports")
    operation: Operation = Field(..., description="Evaluator operation under test")
    operands: OperandPair = Field(..., description="Operands passed on every call")


class BenchmarkResult(BaseModel):
    """Timing collected for one benchmark case."""

    model_config = ConfigDict(frozen=True)

    name: str
    iterations: PositiveInt
    total_seconds: float = Field(..., ge=0)

    @property
    def ns_per_call(self) -> float:
        """Mean wall time per call, in nanoseconds."""
        return self.total_seconds * 1e9 / self.iterations


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    iterations : PositiveInt
        Number of calls timed for every case.
    """

    iterations: PositiveInt = DEFAULT_ITERATIONS


def _pair(first: int, second: int) -> OperandPair:
    return OperandPair(first=first, second=second)


# Argument pairs timed for the ranged addition case
ADD_RANGE_ARGS: List[Tuple[int, int]] = [(8, 32), (64, 128), (512, 1024)]

DEFAULT_CASES: List[BenchmarkCase] = [
    BenchmarkCase(name="add_basic", operation=Operation.ADD, operands=_pair(42, 17)),
    BenchmarkCase(name="subtract_basic", operation=Operation.SUBTRACT, operands=_pair(42, 17)),
    BenchmarkCase(name="multiply_basic", operation=Operation.MULTIPLY, operands=_pair(42, 17)),
    BenchmarkCase(name="divide_basic", operation=Operation.DIVIDE, operands=_pair(42, 17)),
] + [
    BenchmarkCase(name=f"add_range/{first}/{second}", operation=Operation.ADD, operands=_pair(first, second))
    for first, second in ADD_RANGE_ARGS
]


def run_case(
    evaluator: ArithmeticEvaluator, case: BenchmarkCase, iterations: int = DEFAULT_ITERATIONS
) -> BenchmarkResult:
    """
    Time ``iterations`` calls of the case's operation.

    :param ArithmeticEvaluator evaluator: Evaluator under test
    :param BenchmarkCase case: Case to run
    :param int iterations: Number of timed calls

    :return: Collected timing
    :rtype: BenchmarkResult
    """
    # Bound method resolved outside the timed loop
    operation = getattr(evaluator, case.operation.value)
    first, second = case.operands.first, case.operands.second

    start = time.perf_counter()
    for _ in range(iterations):
        operation(first, second)
    elapsed = time.perf_counter() - start

    return BenchmarkResult(name=case.name, iterations=iterations, total_seconds=elapsed)


def run_benchmarks(
    cases: Optional[List[BenchmarkCase]] = None, iterations: int = DEFAULT_ITERATIONS
) -> List[BenchmarkResult]:
    """
    Run every case with a single shared evaluator.

    :param list cases: Cases to run, defaults to ``DEFAULT_CASES``
    :param int iterations: Number of timed calls per case

    :return: One result per case, in input order
    :rtype: List[BenchmarkResult]
    """
    evaluator = ArithmeticEvaluator()
    results: List[BenchmarkResult] = []
    for case in cases if cases is not None else DEFAULT_CASES:
        result = run_case(evaluator, case, iterations)
        logger.info("⏱️ %s: %.1f ns/call", result.name, result.ns_per_call)
        results.append(result)
    return results


def format_report(results: List[BenchmarkResult]) -> str:
    """
    Render results as a fixed-width table.

    :param list results: Benchmark results

    :return: Report text, one line per case after the header
    :rtype: str
    """
    width = max([len("Benchmark")] + [len(r.name) for r in results])
    lines = [f"{'Benchmark':<{width}}  {'Iterations':>10}  {'Time (s)':>10}  {'ns/call':>10}"]
    for r in results:
        lines.append(
            f"{r.name:<{width}}  {r.iterations:>10}  {r.total_seconds:>10.4f}  {r.ns_per_call:>10.1f}"
        )
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Arithmetic evaluator micro-benchmarks")
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help="Number of timed calls per benchmark case",
    )
    args = parser.parse_args(argv)

    try:
        return CliArgs(iterations=args.iterations)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the default benchmark suite and print the report.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    logger.info("🏁 Running %d benchmark cases", len(DEFAULT_CASES))
    print(format_report(run_benchmarks(iterations=cli_args.iterations)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
