"""Command-line parsing: numbers to sort, strategy flags and the disorder metric."""

from __future__ import annotations

import struct
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from pushswap.stack import PushSwapError

INT_MAX = 2147483647
_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_ZERO_SPELLINGS = ("0", "-0", "+0")

_STRATEGY_FLAGS: dict[str, "Strategy"] = {}


class Strategy(Enum):
    """Sorting strategy chosen on the command line."""

    NONE = 0
    ADAPTIVE = 1
    SIMPLE = 2
    MEDIUM = 3
    COMPLEX = 4


_STRATEGY_FLAGS.update(
    {
        "--simple": Strategy.SIMPLE,
        "--medium": Strategy.MEDIUM,
        "--complex": Strategy.COMPLEX,
        "--adaptive": Strategy.ADAPTIVE,
    }
)


@dataclass
class Settings:
    """Options taken from the command-line flags."""

    strategy: Strategy = Strategy.NONE
    adaptive: bool = False
    bench: bool = False


def split_arguments(argv: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them on spaces into words."""
    return [word for word in " ".join(argv).split(" ") if word]


def atoi(text: str) -> int:
    """Convert ``text`` to an int, or return 0 if it is not a valid 32-bit integer.

    Leading whitespace and one sign are allowed; anything other than digits
    after them, or a value outside the 32-bit range, gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    limit = INT_MAX + 1 if negative else INT_MAX
    number = 0
    for char in rest:
        if char not in _DIGITS:
            return 0
        number = number * 10 + _DIGITS.index(char)
        if number > limit:
            return 0
    return -number if negative else number


def check_number(text: str, values: Collection[int]) -> bool:
    """Tell whether ``text`` is a valid integer not already among ``values``."""
    number = atoi(text)
    if number == 0 and not any(spelling.startswith(text) for spelling in _ZERO_SPELLINGS):
        return False
    return number not in values


def find_strategy(args: Iterable[str]) -> Settings:
    """Read the ``--`` flags among ``args``.

    Raises PushSwapError for an unknown flag, a repeated ``--bench`` or more
    than one strategy flag. Without a strategy flag the adaptive one is used.
    """
    settings = Settings()
    for arg in args:
        if arg == "--bench":
            if settings.bench:
                raise PushSwapError("--bench given twice")
            settings.bench = True
        elif arg in _STRATEGY_FLAGS:
            if settings.strategy is not Strategy.NONE:
                raise PushSwapError("more than one strategy given")
            settings.strategy = _STRATEGY_FLAGS[arg]
            if settings.strategy is Strategy.ADAPTIVE:
                settings.adaptive = True
        elif arg.startswith("--"):
            raise PushSwapError(f"unknown option: {arg!r}")
    if settings.strategy is Strategy.NONE:
        settings.adaptive = True
    return settings


def parse_values(args: Iterable[str], checker: bool = False) -> list[int]:
    """Convert the numeric arguments into the values of stack ``a``.

    Arguments starting with ``--`` are skipped unless ``checker`` is true,
    in which case they must be numbers like the rest.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if arg.startswith("--") and not checker:
            continue
        if not check_number(arg, seen):
            raise PushSwapError(f"invalid number: {arg!r}")
        number = atoi(arg)
        values.append(number)
        seen.add(number)
    return values


def parse(argv: Sequence[str], checker: bool = False) -> tuple[list[int], Settings]:
    """Parse the program arguments (without the program name)."""
    args = split_arguments(argv)
    settings = find_strategy(args)
    return parse_values(args, checker), settings


def compute_disorder(values: Sequence[int]) -> float:
    """Return the share of pairs that are out of order, from 0.0 to 1.0."""
    size = len(values)
    if size <= 1:
        return 0.0
    mistakes = sum(
        1
        for i, first in enumerate(values)
        for second in values[i + 1 :]
        if first > second
    )
    pairs = size * (size - 1) // 2
    # The metric is kept in single precision.
    return struct.unpack("f", struct.pack("f", mistakes / pairs))[0]