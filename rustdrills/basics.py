"""Small functions on numbers, characters and strings."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_apple_price(amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    return amount if amount > 40 else 2 * amount


def times_two(num: int) -> int:
    """Return twice the number."""
    return num * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def is_even(num: int) -> bool:
    """Tell whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num


def call_me(num: int) -> None:
    """Print one ring line for each call."""
    for i in range(1, num + 1):
        print(f"Ring! Call number {i}")


def classify_char(ch: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS