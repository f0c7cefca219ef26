"""Tamper-tolerant recovery of Shamir-style secrets over the rationals."""

from __future__ import annotations

from .errors import (
    DivisionByZero,
    NoValidPolynomial,
    SearchSpaceTooLarge,
    ShareCountMismatch,
    ShareFormatError,
    ShareRecoveryError,
)
from .interpolate import evaluate
from .rational import Rational
from .search import RecoveryResult, recover
from .share import Share

__all__ = [
    "DivisionByZero",
    "NoValidPolynomial",
    "SearchSpaceTooLarge",
    "ShareCountMismatch",
    "ShareFormatError",
    "ShareRecoveryError",
    "Rational",
    "Share",
    "RecoveryResult",
    "evaluate",
    "recover",
]
