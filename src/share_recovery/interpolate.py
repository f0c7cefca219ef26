"""Lagrange interpolation in exact rationals."""
from __future__ import annotations

from typing import Iterable, Sequence

from .rational import ONE, ZERO, Rational
from .share import Share


def evaluate(subset: Sequence[Share], x: int) -> Rational:
    """Evaluate the polynomial through ``subset`` at ``x``.

    The polynomial is the unique one of degree ``len(subset) - 1`` or less that
    passes through every share in the subset. Two shares with the same ``x``
    make the subset degenerate and raise :class:`DivisionByZero`.
    """
    total = ZERO
    for i, si in enumerate(subset):
        basis = ONE
        for j, sj in enumerate(subset):
            if i == j:
                continue
            basis = basis * Rational(x - sj.x).div(Rational(si.x - sj.x))
        total = total + basis * si.y
    return total


def evaluate_many(subset: Sequence[Share], xs: Iterable[int]) -> list[Rational]:
    return [evaluate(subset, x) for x in xs]


def secret_of(subset: Sequence[Share]) -> Rational:
    return evaluate(subset, 0)


__all__ = ["evaluate", "evaluate_many", "secret_of"]
