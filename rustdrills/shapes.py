"""Messages that change a state, colour records and orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError(f"{value} does not fit in 0..=255")


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to an RGB triple."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


Message = Quit | Echo | Move | ChangeColor


@dataclass
class Point:
    """A position on a byte-sized grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass
class State:
    """Colour, position and quit flag, changed by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                print(text)
            case Move(x, y):
                self.position = Point(x, y)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message {message!r}")


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position."""

    name: str
    hex: str


class UnitStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
    """A shop order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the default order to derive others from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )