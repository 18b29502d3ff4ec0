"""Small integer utilities: base conversion, digit tricks, divisors and arithmetic."""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

__all__ = [
    "binary_to_decimal",
    "decimal_to_binary",
    "is_palindrome_number",
    "is_perfect_number",
    "prime_factors",
    "fibonacci",
    "fibonacci_series",
    "reverse_digits",
    "quotient_remainder",
    "cyclic_swap",
    "calculate",
]


def binary_to_decimal(number: int) -> int:
    """Read the decimal digits of ``number`` as binary place values.

    Each digit is weighted by a power of two, so ``1011`` becomes eleven.
    Digits other than 0 and 1 are weighted the same way.
    """
    sign = -1 if number < 0 else 1
    value = 0
    for digit in str(abs(number)):
        value = value * 2 + int(digit)
    return sign * value


def decimal_to_binary(number: int) -> str:
    """Binary digits of a positive integer; an empty string for zero or less."""
    return format(number, "b") if number > 0 else ""


def is_palindrome_number(number: int) -> bool:
    """Report whether a non-negative integer reads the same backwards."""
    if number < 0:
        return False
    digits = str(number)
    return digits == digits[::-1]


def is_perfect_number(number: int) -> bool:
    """Report whether ``number`` equals the sum of its divisors below itself."""
    return sum(d for d in range(1, number) if number % d == 0) == number


def prime_factors(number: int) -> List[int]:
    """Distinct prime factors of ``number`` in ascending order."""
    factors: List[int] = []
    remaining = number
    candidate = 2
    while candidate * candidate <= remaining:
        if remaining % candidate == 0:
            factors.append(candidate)
            while remaining % candidate == 0:
                remaining //= candidate
        candidate += 1
    if remaining > 1:
        factors.append(remaining)
    return factors


def fibonacci(index: int) -> int:
    """The Fibonacci number at ``index``, counting F(0) = 0 and F(1) = 1.

    Raises ValueError for a negative index.
    """
    if index < 0:
        raise ValueError("index must not be negative")
    current, following = 0, 1
    for _ in range(index):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> List[int]:
    """The first ``count`` Fibonacci numbers."""
    series: List[int] = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def reverse_digits(number: int) -> str:
    """Digits of a positive integer in reverse order, leading zeros kept.

    Zero and negative numbers give an empty string.
    """
    return str(number)[::-1] if number > 0 else ""


def quotient_remainder(dividend: int, divisor: int) -> Tuple[int, int]:
    """Quotient truncated toward zero and the remainder that carries the dividend's sign.

    Raises ZeroDivisionError for a zero divisor.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - divisor * quotient


def cyclic_swap(a, b, c) -> tuple:
    """Rotate three values: ``a`` takes ``c``, ``b`` takes ``a``, ``c`` takes ``b``."""
    return c, a, b


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


def calculate(operator: str, left: float, right: float) -> float:
    """Apply one of ``+ - * /`` to two numbers.

    Division by zero follows floating-point rules and yields an infinity or NaN.
    Raises ValueError for any other operator.
    """
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"operator is not correct: {operator!r}") from None
    return operation(float(left), float(right))