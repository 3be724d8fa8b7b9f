import io

import pytest

from pushswap.bench import (
    algorithm_name,
    complexity_label,
    format_bench,
    format_percent,
    print_bench,
)
from pushswap.parsing import Settings, Strategy, compute_disorder
from pushswap.stack import Stacks


def test_format_percent_zero():
    assert format_percent(0.0) == "0.0"


@pytest.mark.parametrize("whole", [1, 7, 12, 100])
def test_format_percent_whole_numbers(whole):
    assert format_percent(float(whole)) == f"{whole}.0"


def test_format_percent_hundredths_truncated():
    assert format_percent(45.5) == "45.50"


@pytest.mark.parametrize(
    "settings, expected",
    [
        (Settings(strategy=Strategy.SIMPLE, adaptive=True), "Adaptive"),
        (Settings(strategy=Strategy.SIMPLE), "Simple"),
        (Settings(strategy=Strategy.MEDIUM), "Medium"),
        (Settings(strategy=Strategy.COMPLEX), "Complex"),
        (Settings(strategy=Strategy.NONE), "NONE"),
    ],
)
def test_algorithm_name(settings, expected):
    assert algorithm_name(settings) == expected


@pytest.mark.parametrize(
    "strategy, expected",
    [
        (Strategy.SIMPLE, "O(n²)"),
        (Strategy.MEDIUM, "O(n√n)"),
        (Strategy.COMPLEX, "O(n log n)"),
        (Strategy.ADAPTIVE, "NONE"),
        (Strategy.NONE, "NONE"),
    ],
)
def test_complexity_label(strategy, expected):
    assert complexity_label(strategy) == expected


def test_format_bench_untouched_stacks():
    stacks = Stacks([1, 2, 3], show=False)
    report = format_bench(stacks, Settings(strategy=Strategy.SIMPLE), 0.0)
    lines = report.splitlines()
    assert lines[0] == "[bench] disorder: 0.0%"
    assert lines[1] == "[bench] strategy: Simple / O(n²)"
    assert lines[2] == "[bench] total_ops: 0"
    assert lines[3] == "[bench] sa:  0  sb:  0  ss:  0  pa:  0  pb  0"
    assert lines[4] == "[bench] ra:  0  rb:  0  rr:  0  rra: 0  rrb 0  rrr: 0"
    assert report.endswith("\n")


def test_format_bench_counts_operations():
    stacks = Stacks([3, 2, 1], show=False)
    for name in ("pb", "pb", "sa", "rra", "pa"):
        stacks.apply(name)
    report = format_bench(stacks, Settings(strategy=Strategy.COMPLEX), 1.0)
    assert f"[bench] total_ops: {stacks.counts.all}" in report
    assert f"pb  {stacks.counts.pb}" in report
    assert f"rra: {stacks.counts.rra}" in report
    assert "[bench] disorder: 100.0%" in report


def test_format_bench_single_precision_disorder():
    disorder = compute_disorder([1, 3, 2])
    report = format_bench(Stacks(), Settings(strategy=Strategy.MEDIUM), disorder)
    assert report.splitlines()[0] == "[bench] disorder: 33.33%"


def test_print_bench_writes_report():
    stacks = Stacks([2, 1], show=False)
    stacks.swap_a()
    settings = Settings(strategy=Strategy.SIMPLE, adaptive=True)
    out = io.StringIO()
    print_bench(stacks, settings, 0.5, out)
    assert out.getvalue() == format_bench(stacks, settings, 0.5)
    assert "Adaptive / O(n²)" in out.getvalue()