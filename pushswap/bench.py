"""Benchmark report on the operations performed while sorting."""

from __future__ import annotations

import struct
import sys
from typing import TextIO

from pushswap.parsing import Settings, Strategy
from pushswap.stack import Stacks

_NAMES = {
    Strategy.SIMPLE: "Simple",
    Strategy.MEDIUM: "Medium",
    Strategy.COMPLEX: "Complex",
}

_COMPLEXITY = {
    Strategy.SIMPLE: "O(n²)",
    Strategy.MEDIUM: "O(n√n)",
    Strategy.COMPLEX: "O(n log n)",
}


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def format_percent(value: float) -> str:
    """Format ``value`` as its integer part, a dot and its truncated hundredths.

    The hundredths are written without padding; zero is written ``0.0``.
    """
    if not value:
        return "0.0"
    whole = int(value)
    hundredths = int((value - whole) * 100)
    return f"{whole}.{hundredths}"


def algorithm_name(settings: Settings) -> str:
    """Return the display name of the chosen algorithm."""
    if settings.adaptive:
        return "Adaptive"
    return _NAMES.get(settings.strategy, "NONE")


def complexity_label(strategy: Strategy) -> str:
    """Return the complexity class of ``strategy``."""
    return _COMPLEXITY.get(strategy, "NONE")


def format_bench(stacks: Stacks, settings: Settings, disorder: float) -> str:
    """Build the benchmark report for the sort just performed."""
    ops = stacks.counts
    percent = format_percent(_float32(disorder * 100))
    return (
        f"[bench] disorder: {percent}%\n"
        f"[bench] strategy: {algorithm_name(settings)} / "
        f"{complexity_label(settings.strategy)}\n"
        f"[bench] total_ops: {ops.all}\n"
        f"[bench] sa:  {ops.sa}  sb:  {ops.sb}  ss:  {ops.ss}  "
        f"pa:  {ops.pa}  pb  {ops.pb}\n"
        f"[bench] ra:  {ops.ra}  rb:  {ops.rb}  rr:  {ops.rr}  "
        f"rra: {ops.rra}  rrb {ops.rrb}  rrr: {ops.rrr}\n"
    )


def print_bench(
    stacks: Stacks,
    settings: Settings,
    disorder: float,
    output: TextIO | None = None,
) -> None:
    """Write the benchmark report, to standard error by default."""
    stream = output if output is not None else sys.stderr
    stream.write(format_bench(stacks, settings, disorder))