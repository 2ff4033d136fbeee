"""Small number-theory and recurrence helpers."""

from __future__ import annotations

from math import isqrt

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def count_primes(n: int) -> int:
    """Return how many primes are strictly less than ``n``."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring."""
    if x == 1:
        return 1.0
    base = float(x)
    exponent = n
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if that leaves the 32-bit range."""
    digits = int(str(abs(x))[::-1])
    result = -digits if x < 0 else digits
    return result if INT32_MIN <= result <= INT32_MAX else 0


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 return ``n``."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def is_palindrome_text(s: str) -> bool:
    """Tell whether ``s`` is a palindrome over its ASCII letters and digits, ignoring case."""
    cleaned = [ch for ch in s.lower() if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking 1 or 2 steps at a time."""
    current, previous = 1, 1
    for _ in range(2, n + 1):
        current, previous = current + previous, current
    return current