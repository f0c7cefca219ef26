"""Share records fed to the interpolation core."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Share:
    """One sample ``(x, y)`` of the hidden polynomial.

    ``identifier`` is the key the share is reported under. In the ingested
    documents ``x`` is derived from it, but the core never relies on that.
    """

    identifier: str
    x: int
    y: int


__all__ = ["Share"]
