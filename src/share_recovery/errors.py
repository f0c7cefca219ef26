"""Exception and warning types raised while recovering a secret."""
from __future__ import annotations


class ShareRecoveryError(Exception):
    """Base class for every fatal recovery condition."""


class DivisionByZero(ShareRecoveryError, ZeroDivisionError):
    """A rational denominator or divisor would be zero."""


class NoValidPolynomial(ShareRecoveryError):
    """No combination of shares produced a usable polynomial."""


class SearchSpaceTooLarge(ShareRecoveryError):
    def __init__(self, combinations: int, limit: int) -> None:
        super().__init__(f"{combinations} share combinations exceed the configured limit of {limit}")
        self.combinations = combinations
        self.limit = limit


class ShareFormatError(ShareRecoveryError, ValueError):
    """The share document could not be turned into integer shares."""


class ShareCountMismatch(UserWarning):
    """The declared share count differs from the number of shares present."""


__all__ = [
    "ShareRecoveryError",
    "DivisionByZero",
    "NoValidPolynomial",
    "SearchSpaceTooLarge",
    "ShareFormatError",
    "ShareCountMismatch",
]
