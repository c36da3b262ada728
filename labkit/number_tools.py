"""Number utilities: sorting, Fibonacci numbers, prime ranges and divisor analysis."""

from __future__ import annotations

import argparse
import math
import sys
from functools import lru_cache
from itertools import compress
from typing import Iterable, Iterator

MOD = 1_000_000_007
PRIME_LIMIT = 1_000_000
ANALYZER_LIMIT = 10_000


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number (F(1) = F(2) = 1) modulo 1 000 000 007."""
    if n < 1:
        raise ValueError("n must be at least 1")
    current, following = 0, 1  # F(k), F(k+1) with k = 0
    for bit in bin(n)[2:]:
        doubled = current * ((2 * following - current) % MOD) % MOD
        doubled_next = (current * current + following * following) % MOD
        if bit == "1":
            current, following = doubled_next, (doubled + doubled_next) % MOD
        else:
            current, following = doubled, doubled_next
    return current


@lru_cache(maxsize=None)
def _sieve(limit: int) -> tuple[int, ...]:
    """All primes up to and including limit."""
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return tuple(compress(range(limit + 1), flags))


class PrimeCalculator:
    """Primes in a range, found with a segmented sieve over primes up to a million."""

    def __init__(self) -> None:
        self.primes = _sieve(PRIME_LIMIT)

    def primes_between(self, low: int, high: int) -> list[int]:
        """Primes in [low, high], ascending.

        Only 1 is struck out as a non-prime below 2, and only when low is 1.
        """
        if low < 0:
            raise ValueError("low must not be negative")
        if high < low:
            raise ValueError("high must not be below low")
        segment = bytearray([1]) * (high - low + 1)
        if low == 1:
            segment[0] = 0
        for prime in self.primes:
            if prime * prime > high:
                break
            start = max(prime * prime, -(-low // prime) * prime)
            if start <= high:
                segment[start - low :: prime] = bytes(len(range(start, high + 1, prime)))
        return list(compress(range(low, high + 1), segment))

    def prime_sum(self, low: int, high: int) -> int:
        """Sum of the primes in [low, high]."""
        return sum(self.primes_between(low, high))


class NumberAnalyzer:
    """Factorisation-based questions about a number, using primes up to 10 000."""

    def __init__(self) -> None:
        self.primes = _sieve(ANALYZER_LIMIT)

    def factorize(self, x: int) -> list[tuple[int, int]]:
        """(factor, power) pairs; whatever is left after the small primes counts as one factor."""
        if x < 1:
            raise ValueError("x must be positive")
        factors: list[tuple[int, int]] = []
        for prime in self.primes:
            if prime * prime > x:
                break
            power = 0
            while x % prime == 0:
                power += 1
                x //= prime
            if power:
                factors.append((prime, power))
        if x != 1:
            factors.append((x, 1))
        return factors

    def is_square_free(self, x: int) -> bool:
        return all(power <= 1 for _, power in self.factorize(x))

    def count_divisors(self, x: int) -> int:
        return math.prod(power + 1 for _, power in self.factorize(x))

    def sum_of_divisors(self, x: int) -> int:
        return math.prod(
            (factor ** (power + 1) - 1) // (factor - 1) for factor, power in self.factorize(x)
        )


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def run_program(text: str) -> str:
    """Run one task read from text and return what it prints."""
    tokens = iter(text.split())
    task = _take_int(tokens)
    out: list[str] = []
    if task == 1:
        rows = []
        for _ in range(_take_int(tokens)):
            size = _take_int(tokens)
            rows.append([_take_int(tokens) for _ in range(size)])
        for row in rows:
            out.append("".join(f"{value} " for value in quick_sort(row)))
    elif task == 2:
        count = _take_int(tokens)
        indices = [_take_int(tokens) for _ in range(count)]
        out.extend(str(fibonacci(i)) for i in indices)
    elif task == 3:
        calculator = PrimeCalculator()
        for _ in range(_take_int(tokens)):
            command, low, high = _take(tokens), _take_int(tokens), _take_int(tokens)
            if command == "printPrimes":
                out.append("".join(f"{p} " for p in calculator.primes_between(low, high)))
            elif command == "printPrimeSum":
                out.append(str(calculator.prime_sum(low, high)))
    elif task == 4:
        analyzer = NumberAnalyzer()
        for _ in range(_take_int(tokens)):
            command, x = _take(tokens), _take_int(tokens)
            if command == "isSquareFree":
                out.append("yes" if analyzer.is_square_free(x) else "no")
            elif command == "countDivisors":
                out.append(str(analyzer.count_divisors(x)))
            elif command == "sumOfDivisors":
                out.append(str(analyzer.sum_of_divisors(x)))
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a number task read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())