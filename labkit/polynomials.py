"""Polynomial multiplication, evaluation and differentiation over several coefficient types."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence


@dataclass(frozen=True)
class ComplexInt:
    """A complex number with integer parts."""

    real: int = 0
    imag: int = 0

    def __add__(self, other: Any) -> ComplexInt:
        if isinstance(other, int):
            other = ComplexInt(other)
        if not isinstance(other, ComplexInt):
            return NotImplemented
        return ComplexInt(self.real + other.real, self.imag + other.imag)

    __radd__ = __add__

    def __mul__(self, other: Any) -> ComplexInt:
        if isinstance(other, int):
            return ComplexInt(self.real * other, self.imag * other)
        if not isinstance(other, ComplexInt):
            return NotImplemented
        return ComplexInt(
            self.real * other.real - self.imag * other.imag,
            self.imag * other.real + self.real * other.imag,
        )

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.real} {self.imag}"


def _split_product(a: list, b: list) -> list:
    size = len(a)
    if size == 1:
        return [a[0] * b[0]]
    mid = size // 2
    a_low, a_high, b_low, b_high = a[:mid], a[mid:], b[:mid], b[mid:]
    low = _split_product(a_low, b_low)
    high = _split_product(a_high, b_high)
    cross_one = _split_product(a_low, b_high)
    cross_two = _split_product(a_high, b_low)

    result = [low[0] * 0] * (2 * size - 1)
    for i, (value, cross) in enumerate(zip(low, cross_two)):
        result[i] += value
        result[i + mid] += cross
    for i, (value, cross) in enumerate(zip(high, cross_one)):
        result[i + size] += value
        result[i + mid] += cross
    return result


def karatsuba(a: Sequence, b: Sequence) -> list:
    """Product of two coefficient lists of the same power-of-two length, by halving."""
    a, b = list(a), list(b)
    size = len(a)
    if size != len(b) or size == 0 or size & (size - 1):
        raise ValueError("both lists must share a power-of-two length")
    return _split_product(a, b)


def multiply(a: Sequence, b: Sequence) -> list:
    """Coefficients of the product of two polynomials, lowest degree first."""
    a, b = list(a), list(b)
    if not a or not b:
        raise ValueError("polynomials must have at least one coefficient")
    size = 1
    while size < max(len(a), len(b)):
        size *= 2
    zero = a[0] * 0
    padded_a = a + [zero] * (size - len(a))
    padded_b = b + [zero] * (size - len(b))
    return _split_product(padded_a, padded_b)[: len(a) + len(b) - 1]


def evaluate(coeffs: Sequence, x: int) -> Any:
    """Value at x; for string coefficients each term repeats its word and goes in front."""
    if not coeffs:
        raise ValueError("polynomial has no coefficients")
    result = coeffs[0]
    for power, coeff in enumerate(coeffs[1:], start=1):
        result = coeff * x**power + result
    return result


def differentiate(coeffs: Sequence) -> list:
    """Coefficients of the derivative, lowest degree first."""
    return [coeff * power for power, coeff in enumerate(coeffs) if power > 0]


def format_value(value: Any) -> str:
    """Render a coefficient: floats with six decimals, anything else as is."""
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


_READERS: dict[str, Callable[[Iterator[str]], Any]] = {
    "integer": _take_int,
    "float": lambda tokens: float(_take(tokens)),
    "complex": lambda tokens: ComplexInt(_take_int(tokens), _take_int(tokens)),
    "string": _take,
}

_MULTIPLY_KINDS = ("integer", "float", "complex")
_EVALUATE_KINDS = ("integer", "float", "string")
_DIFFERENTIATE_KINDS = ("integer", "float")


def _read_coeffs(tokens: Iterator[str], kind: str, count: int) -> list:
    reader = _READERS[kind]
    return [reader(tokens) for _ in range(count)]


def _line(values: Sequence) -> str:
    return "".join(f"{format_value(v)} " for v in values)


def run_program(text: str) -> str:
    """Run the queries read from text and return what they print."""
    tokens = iter(text.split())
    out: list[str] = []
    for _ in range(_take_int(tokens)):
        op = _take_int(tokens)
        if op == 1:
            kind = _take(tokens)
            if kind in _MULTIPLY_KINDS:
                first = _read_coeffs(tokens, kind, _take_int(tokens))
                second = _read_coeffs(tokens, kind, _take_int(tokens))
                out.append(_line(multiply(first, second)))
        elif op == 2:
            kind = _take(tokens)
            count = _take_int(tokens)
            if kind in _EVALUATE_KINDS:
                coeffs = _read_coeffs(tokens, kind, count)
                out.append(format_value(evaluate(coeffs, _take_int(tokens))))
        elif op == 3:
            kind = _take(tokens)
            count = _take_int(tokens)
            if kind in _DIFFERENTIATE_KINDS:
                out.append(_line(differentiate(_read_coeffs(tokens, kind, count))))
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run polynomial queries read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())