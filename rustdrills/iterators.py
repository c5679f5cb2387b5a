"""Capitalising words, checked division and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable


class DivisionError(ArithmeticError):
    """A division that cannot give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def capitalize_first(text: str) -> str:
    """Upper-case the first character and keep the rest."""
    return text[:1].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalise each word and join them together."""
    return "".join(capitalize_first(word) for word in words)


def divide(a: int, b: int) -> int:
    """Divide a by b when the division is exact."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number; the first failure is raised."""
    return [divide(n, divisor) for n in numbers]


def factorial(num: int) -> int:
    """Return num!, for num not below zero."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))