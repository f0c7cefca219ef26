"""Runtime tunables for the recovery search.

Values can be overridden through environment variables so batch deployments
can cap the search or enable parallel scoring without code changes. Malformed
values fall back to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if isinstance(logging.getLevelName(value), int):
        return value
    return default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds limits and defaults shared by the search and the CLI."""

    workers: int = 1
    max_combinations: int = 5_000_000
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        workers=max(1, _load_int("SHARE_RECOVERY_WORKERS", 1)),
        max_combinations=max(0, _load_int("SHARE_RECOVERY_MAX_COMBINATIONS", 5_000_000)),
        log_level=_load_level("SHARE_RECOVERY_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
