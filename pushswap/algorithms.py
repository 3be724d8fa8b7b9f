"""Sorting strategies that solve the puzzle using only the stack operations."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pushswap.parsing import Settings, Strategy
from pushswap.stack import Stacks

_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31


def _wrap32(number: int) -> int:
    """Reduce ``number`` to the signed 32-bit range, wrapping on overflow."""
    return (number + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def _extreme(values: Sequence[int], pick: Callable[..., int]) -> tuple[int, bool]:
    items = list(values)
    if not items:
        raise ValueError("empty stack")
    position = pick(range(len(items)), key=items.__getitem__)
    return position, position <= len(items) // 2


def find_min(values: Sequence[int]) -> tuple[int, bool]:
    """Return the position of the smallest value and whether rotating forward reaches it.

    The second item is false when reverse rotations are the shorter way.
    """
    return _extreme(values, min)


def find_max(values: Sequence[int]) -> tuple[int, bool]:
    """Return the position of the largest value and whether rotating forward reaches it."""
    return _extreme(values, max)


def rounded_sqrt(nb: int) -> int:
    """Return the integer nearest to the square root of ``nb``; 1 when ``nb`` <= 0.

    A tie between two neighbours goes to the larger one.
    """
    if nb <= 0:
        return 1
    upper = 0
    while upper * upper <= nb:
        upper += 1
    lower = upper - 1
    if nb - lower * lower < upper * upper - nb:
        return lower
    return upper


def _bring_to_top(
    length: int,
    position: int,
    forward: bool,
    rotate: Callable[[], None],
    reverse: Callable[[], None],
) -> None:
    steps = position if forward else length - position
    step = rotate if forward else reverse
    for _ in range(steps):
        step()


def _is_sorted(values: Sequence[int]) -> bool:
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def sort_simple(stacks: Stacks) -> None:
    """Selection sort: move the minimum to the top of ``a`` and push it to ``b``."""
    while stacks.a:
        position, forward = find_min(stacks.a)
        _bring_to_top(
            len(stacks.a), position, forward, stacks.rotate_a, stacks.reverse_rotate_a
        )
        if _is_sorted(stacks.a):
            break
        stacks.push_b()
    while stacks.b:
        stacks.push_a()


def sort_medium(stacks: Stacks) -> None:
    """Bucket sort: push ``a`` to ``b`` bucket by bucket, then pull back maxima."""
    if not stacks.a:
        return
    total = len(stacks.a)
    low = min(stacks.a)
    high = max(stacks.a)
    count = rounded_sqrt(total)
    width = _trunc_div(_wrap32(high - low), count) + 1

    def bucket_of(value: int) -> int:
        index = _trunc_div(_wrap32(value - low), width)
        return min(max(index, 0), count - 1)

    def first_in_bucket(current: int) -> int | None:
        return next(
            (pos for pos, value in enumerate(stacks.a) if bucket_of(value) == current),
            None,
        )

    for current in range(count):
        while (position := first_in_bucket(current)) is not None:
            length = len(stacks.a)
            _bring_to_top(
                length,
                position,
                position <= length // 2,
                stacks.rotate_a,
                stacks.reverse_rotate_a,
            )
            stacks.push_b()

    while stacks.b:
        position, forward = find_max(stacks.b)
        _bring_to_top(
            len(stacks.b), position, forward, stacks.rotate_b, stacks.reverse_rotate_b
        )
        stacks.push_a()


def sort_complex(stacks: Stacks) -> None:
    """Binary radix sort on the rank of each value."""
    size = len(stacks.a)
    ranks = {value: rank for rank, value in enumerate(sorted(stacks.a))}
    bits = max(size - 1, 0).bit_length()
    for bit in range(bits):
        for _ in range(size):
            if not stacks.a:
                break
            if (ranks[stacks.a[0]] >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate_a()
        while stacks.b:
            stacks.push_a()


def choose_strategy(settings: Settings, size: int, disorder: float) -> Strategy:
    """Return the strategy to run, deciding it from size and disorder when adaptive."""
    if not settings.adaptive:
        return settings.strategy
    if size <= 6 or disorder < 0.2:
        return Strategy.SIMPLE
    if disorder < 0.5:
        return Strategy.MEDIUM
    return Strategy.COMPLEX