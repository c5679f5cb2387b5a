"""Name tags, token purchases and validated positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: no blanks, no underscores, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


class CreationError(ValueError):
    """A value could not be turned into a positive, nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Build the integer, raising CreationError when it is zero or negative."""
        return cls(value)


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    qty = _parse_int(item_quantity, 32)
    return qty * COST_PER_ITEM + PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


def read_and_validate(stream: TextIO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive, nonzero integer."""
    line = stream.readline()
    return PositiveNonzeroInteger.new(_parse_int(line.strip(), 64))


def pop_too_much() -> bool:
    """Pop two items from a one-item list without failing on the second."""
    values = [3]
    print(f"The last item in the list is {values.pop()}")
    if values:
        print(f"The second-to-last item in the list is {values.pop()}")
    return True