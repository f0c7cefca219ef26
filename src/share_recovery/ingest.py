"""Loading share documents into :class:`Share` records.

A share document is a JSON object with a ``keys`` entry declaring ``n`` and
``k``; every other entry is one share keyed by its decimal x coordinate::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }
"""
from __future__ import annotations

import json
import logging
import string
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .errors import ShareCountMismatch, ShareFormatError
from .share import Share

_logger = logging.getLogger(__name__)

KEYS_ENTRY = "keys"
DIGITS = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    shares: tuple[Share, ...]


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ShareFormatError(f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ShareFormatError(f"{what} must be an integer, got {value!r}") from exc


def _is_numeral(text: str, base: int) -> bool:
    digits = text[1:] if text[:1] in "+-" else text
    return bool(digits) and all(ch in DIGITS[:base] for ch in digits)


def parse_value(value: str, base: int) -> int:
    """Parse ``value`` written in radix ``base``.

    Only an optional sign followed by ASCII digits of the radix is accepted;
    underscores, radix prefixes and surrounding whitespace are rejected. A
    value that fails to parse is retried once in lower case before giving up.
    """
    if not 2 <= base <= 36:
        raise ShareFormatError(f"unsupported base {base}")
    if not isinstance(value, str):
        raise ShareFormatError(f"{value!r} is not a base-{base} string")
    for text in (value, value.lower()):
        if _is_numeral(text, base):
            return int(text, base)
    raise ShareFormatError(f"{value!r} is not a valid base-{base} number")


def parse_share(identifier: str, entry: Any) -> Share:
    if not isinstance(entry, Mapping):
        raise ShareFormatError(f"share {identifier!r} must be an object")
    if not _is_numeral(identifier, 10):
        raise ShareFormatError(f"share key {identifier!r} is not a decimal integer")
    x = int(identifier, 10)
    if "base" not in entry or "value" not in entry:
        raise ShareFormatError(f"share {identifier!r} needs both 'base' and 'value'")
    base = _as_int(entry["base"], f"base of share {identifier!r}")
    try:
        y = parse_value(entry["value"], base)
    except ShareFormatError as exc:
        raise ShareFormatError(f"share {identifier!r}: {exc}") from exc
    return Share(identifier=identifier, x=x, y=y)


def parse_document(data: Mapping[str, Any]) -> ShareDocument:
    """Build a :class:`ShareDocument`, keeping shares in document order.

    A declared ``n`` that differs from the number of shares present emits a
    :class:`ShareCountMismatch` warning; the actual count wins.
    """
    if not isinstance(data, Mapping):
        raise ShareFormatError("share document must be a JSON object")
    keys = data.get(KEYS_ENTRY)
    if not isinstance(keys, Mapping):
        raise ShareFormatError(f"share document is missing the {KEYS_ENTRY!r} object")
    declared_n = _as_int(keys.get("n"), "keys.n")
    k = _as_int(keys.get("k"), "keys.k")

    shares = tuple(parse_share(key, entry) for key, entry in data.items() if key != KEYS_ENTRY)
    if len(shares) != declared_n:
        warnings.warn(
            f"actual share count ({len(shares)}) != n ({declared_n})",
            ShareCountMismatch,
            stacklevel=2,
        )
    _logger.debug("Parsed %d shares (declared n=%d, k=%d)", len(shares), declared_n, k)
    return ShareDocument(n=len(shares), k=k, shares=shares)


def loads(text: str) -> ShareDocument:
    if not text.strip():
        raise ShareFormatError("share document is empty")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ShareFormatError(f"share document is not valid JSON: {exc}") from exc
    return parse_document(data)


def load_document(path: str | Path) -> ShareDocument:
    return loads(Path(path).read_text(encoding="utf-8"))


__all__ = ["ShareDocument", "parse_value", "parse_share", "parse_document", "loads", "load_document"]
