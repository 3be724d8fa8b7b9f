"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Callable, TextIO


class PushSwapError(Exception):
    """Raised for invalid input or an unknown operation."""


@dataclass
class OperationCounts:
    """How many times each operation has been performed."""

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0
    all: int = 0

    def as_dict(self) -> dict[str, int]:
        """Return the counters keyed by operation name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


class Stacks:
    """Stack ``a`` holding the values to sort and the auxiliary stack ``b``.

    The top of each stack is the left end of its deque.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        show: bool = True,
        output: TextIO | None = None,
    ) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.counts = OperationCounts()
        self.show = show
        self._output = output

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _record(self, name: str) -> None:
        setattr(self.counts, name, getattr(self.counts, name) + 1)
        self.counts.all += 1
        if self.show:
            self.output.write(f"{name}\n")

    # push

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    # swap

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    def swap_a(self) -> None:
        """Exchange the two top values of ``a``."""
        if self._swap(self.a):
            self._record("sa")

    def swap_b(self) -> None:
        """Exchange the two top values of ``b``."""
        if self._swap(self.b):
            self._record("sb")

    def swap_both(self) -> None:
        """Swap both stacks; counted even when neither stack changes."""
        self._swap(self.b)
        self._swap(self.a)
        self._record("ss")

    # rotate

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._record("ra")

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._record("rb")

    def rotate_both(self) -> None:
        """Rotate both stacks; counted even when neither stack changes."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self._record("rr")

    # reverse rotate

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._record("rra")

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._record("rrb")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks; counted even when neither stack changes."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self._record("rrr")

    # dispatch

    def _operations(self) -> dict[str, Callable[[], None]]:
        return {
            "pa": self.push_a,
            "pb": self.push_b,
            "rra": self.reverse_rotate_a,
            "rrb": self.reverse_rotate_b,
            "rrr": self.reverse_rotate_both,
            "ra": self.rotate_a,
            "rb": self.rotate_b,
            "rr": self.rotate_both,
            "sa": self.swap_a,
            "sb": self.swap_b,
            "ss": self.swap_both,
        }

    def apply(self, name: str) -> None:
        """Perform the operation called ``name``, such as ``"pa"`` or ``"rrr"``."""
        try:
            operation = self._operations()[name]
        except KeyError:
            raise PushSwapError(f"unknown operation: {name!r}") from None
        operation()