"""Text and JSON renderings of a recovery result."""
from __future__ import annotations

from typing import Any, Iterable

from .rational import Rational
from .search import RecoveryResult

NONE_MISMATCHED = "None"


def format_secret(secret: Rational) -> str:
    value = secret.to_integer_if_exact()
    if value is not None:
        return str(value)
    return f"{secret.numerator}/{secret.denominator}"


def format_mismatched(identifiers: Iterable[str]) -> str:
    joined = ",".join(identifiers)
    return joined or NONE_MISMATCHED


def render(result: RecoveryResult) -> str:
    return "\n".join(
        [
            f"Secret: {format_secret(result.secret)}",
            f"Wrong shares: {format_mismatched(result.mismatched)}",
        ]
    )


def to_dict(result: RecoveryResult) -> dict[str, Any]:
    return {
        "secret": format_secret(result.secret),
        "exact": result.exact,
        "wrong_shares": list(result.mismatched),
        "matches": result.matches,
        "total": result.total,
        "subset": list(result.subset),
    }


__all__ = ["NONE_MISMATCHED", "format_secret", "format_mismatched", "render", "to_dict"]
