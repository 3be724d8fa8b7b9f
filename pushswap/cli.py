"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.algorithms import choose_strategy, sort_complex, sort_medium, sort_simple
from pushswap.bench import print_bench
from pushswap.parsing import Settings, Strategy, compute_disorder, parse
from pushswap.stack import PushSwapError, Stacks

_SORTERS = {
    Strategy.SIMPLE: sort_simple,
    Strategy.MEDIUM: sort_medium,
    Strategy.COMPLEX: sort_complex,
}


def start_algo(stacks: Stacks, settings: Settings, disorder: float) -> Strategy:
    """Sort ``stacks`` with the chosen strategy and report if benchmarking.

    When the strategy is adaptive, the one picked is stored in ``settings``.
    Nothing is sorted when ``disorder`` is zero. Returns the strategy used.
    """
    strategy = choose_strategy(settings, len(stacks.a), disorder)
    settings.strategy = strategy
    sorter = _SORTERS.get(strategy)
    if sorter is not None and disorder > 0:
        sorter(stacks)
    if settings.bench:
        print_bench(stacks, settings, disorder)
    return strategy


def run_checker(stacks: Stacks, lines: Iterable[str]) -> str:
    """Apply each instruction line to ``stacks`` and return ``"OK"`` or ``"KO"``.

    Every line must be an operation name followed by a newline; any other
    line raises PushSwapError.
    """
    for line in lines:
        if not line.endswith("\n"):
            raise PushSwapError(f"unterminated instruction: {line!r}")
        stacks.apply(line[:-1])
    if stacks.b:
        return "KO"
    return "OK" if compute_disorder(list(stacks.a)) == 0 else "KO"


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the given numbers."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values, settings = parse(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 0
    stacks = Stacks(values, show=True, output=sys.stdout)
    disorder = compute_disorder(values)
    start_algo(stacks, settings, disorder)
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and tell whether they sort the numbers."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values, _settings = parse(args, checker=True)
        stacks = Stacks(values, show=False)
        verdict = run_checker(stacks, sys.stdin)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(f"{verdict}\n")
    return 0