"""Numeric helpers."""

from typing import TypeVar, Union

Number = TypeVar("Number", int, float)


def absolute(n: Number) -> Number:
    """Return the absolute value of n."""
    return -n if n < 0 else n


def maximum(a: Number, b: Number) -> Number:
    """Return the larger of a and b, preferring b on ties."""
    return a if a > b else b


def minimum(a: Number, b: Number) -> Number:
    """Return the smaller of a and b, preferring b on ties."""
    return a if a < b else b


def clamp(low: Number, n: Number, high: Number) -> Number:
    """Clamp n into the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"clamp: low cannot be > high: {low} > {high}")
    return maximum(minimum(n, high), low)


def manhattan_distance(x1: Number, y1: Number, x2: Number, y2: Number) -> Number:
    """Return the Manhattan distance between (x1, y1) and (x2, y2)."""
    return absolute(x2 - x1) + absolute(y2 - y1)


def _truncated_rem(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm using truncated remainders."""
    while b != 0:
        a, b = b, _truncated_rem(a, b)
    return a


def _lcm(a: int, b: int) -> int:
    product = a * b
    divisor = gcd(a, b)
    quotient = abs(product) // abs(divisor)
    return quotient if (product < 0) == (divisor < 0) else -quotient


def lcm(*args: int) -> int:
    """Least common multiple of two or more integers."""
    if len(args) < 2:
        raise ValueError("need at least 2 inputs")
    result = args[0]
    for value in args[1:]:
        result = _lcm(result, value)
    return result


def sign(value: Union[int, float]) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    if value < 0:
        return -1
    if value == 0:
        return 0
    return 1