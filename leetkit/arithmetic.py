"""Number puzzles: lines through points, factorial zeros, bits, happy numbers and primes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import gcd, isqrt

_WORD_BITS = 32


def _check_word(n: int) -> None:
    if not 0 <= n < 1 << _WORD_BITS:
        raise ValueError(f"{n} is not an unsigned {_WORD_BITS}-bit integer")


def max_points(points: Iterable[Sequence[int]]) -> int:
    """Return the largest number of the points that lie on one straight line.

    Repeated points lie on every line through them.
    """
    coords = [(x, y) for x, y in points]
    best = 0
    for index, (x1, y1) in enumerate(coords):
        directions: Counter[tuple[int, int]] = Counter()
        duplicates = 0
        for x2, y2 in coords[index + 1 :]:
            dx, dy = x2 - x1, y2 - y1
            if dx == 0 and dy == 0:
                duplicates += 1
                continue
            divisor = gcd(dx, dy)
            dx, dy = dx // divisor, dy // divisor
            if dx < 0 or (dx == 0 and dy < 0):
                dx, dy = -dx, -dy
            directions[(dx, dy)] += 1
        best = max(best, 1 + duplicates + max(directions.values(), default=0))
    return best


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    zeroes = 0
    while n:
        n //= 5
        zeroes += n
    return zeroes


def reverse_bits(n: int) -> int:
    """Reverse the bits of an unsigned 32-bit integer."""
    _check_word(n)
    return int(format(n, f"0{_WORD_BITS}b")[::-1], 2)


def hamming_weight(n: int) -> int:
    """Return the number of set bits of an unsigned 32-bit integer."""
    _check_word(n)
    return bin(n).count("1")


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n)) if n > 0 else 0


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing the squares of the digits of ``n`` reaches 1."""
    slow = fast = n
    while True:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
        if slow == fast:
            return fast == 1


def count_primes(n: int) -> int:
    """Return how many primes are less than ``n``, by the sieve of Eratosthenes."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for value in range(2, isqrt(n - 1) + 1):
        if sieve[value]:
            sieve[value * value :: value] = bytes(len(range(value * value, n, value)))
    return sum(sieve)


def count_primes_trial(n: int) -> int:
    """Return how many primes are less than ``n``, testing each by trial division."""
    return sum(
        1
        for candidate in range(2, n)
        if all(candidate % divisor for divisor in range(2, isqrt(candidate) + 1))
    )