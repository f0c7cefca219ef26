"""Exact fractions over Python's arbitrary-precision integers.

Every value is kept in lowest terms with a positive denominator, so two equal
rationals always have identical fields. Shares and secrets are exact integers;
interpolating them through floats would silently corrupt large values.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Union

from .errors import DivisionByZero

Number = Union["Rational", int]


@dataclass(frozen=True, eq=False)
class Rational:
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num, den = self.numerator, self.denominator
        if den == 0:
            raise DivisionByZero(f"zero denominator for numerator {num}")
        if den < 0:
            num, den = -num, -den
        g = gcd(num, den)
        if g > 1:
            num, den = num // g, den // g
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def from_int(cls, value: int) -> Rational:
        return cls(value, 1)

    @staticmethod
    def _coerce(value: Number) -> Rational:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value, 1)
        raise TypeError(f"cannot combine Rational with {type(value).__name__}")

    def add(self, other: Number) -> Rational:
        o = self._coerce(other)
        return Rational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def sub(self, other: Number) -> Rational:
        o = self._coerce(other)
        return Rational(
            self.numerator * o.denominator - o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def mul(self, other: Number) -> Rational:
        o = self._coerce(other)
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def div(self, other: Number) -> Rational:
        o = self._coerce(other)
        if o.numerator == 0:
            raise DivisionByZero(f"division of {self} by zero")
        return Rational(self.numerator * o.denominator, self.denominator * o.numerator)

    def neg(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def to_integer_if_exact(self) -> int | None:
        """Return the integer value, or ``None`` when the fraction is not whole."""
        if self.numerator % self.denominator == 0:
            return self.numerator // self.denominator
        return None

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg

    def __radd__(self, other: int) -> Rational:
        return self._coerce(other).add(self)

    def __rsub__(self, other: int) -> Rational:
        return self._coerce(other).sub(self)

    def __rmul__(self, other: int) -> Rational:
        return self._coerce(other).mul(self)

    def __rtruediv__(self, other: int) -> Rational:
        return self._coerce(other).div(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, int):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


ZERO = Rational(0)
ONE = Rational(1)


__all__ = ["Rational", "ZERO", "ONE"]
