"""Best-fit search over every threshold-sized subset of shares.

Each subset of ``k`` shares defines one candidate polynomial. The candidate is
scored by how many of the ``n`` shares it reproduces exactly, and the first
candidate (in lexicographic order of share indices) with the highest score
wins. The shares it does not reproduce are reported as mismatched.
"""
from __future__ import annotations

import itertools
import logging
import math
import multiprocessing
from dataclasses import dataclass
from functools import partial
from typing import Iterable, Iterator, Optional, Sequence

from tqdm import tqdm

from . import policy as _policy_module
from .errors import DivisionByZero, NoValidPolynomial, SearchSpaceTooLarge
from .interpolate import evaluate_many, secret_of
from .rational import Rational
from .share import Share

_logger = logging.getLogger(__name__)

# Work items handed to each pool worker in one batch.
CHUNKSIZE = 64


@dataclass(frozen=True)
class Candidate:
    indices: tuple[int, ...]
    secret: Rational
    agreement: tuple[bool, ...]
    matches: int


@dataclass(frozen=True)
class RecoveryResult:
    """Outcome of a successful search.

    ``mismatched`` and ``subset`` hold share identifiers in the order the
    shares were supplied.
    """

    secret: Rational
    mismatched: tuple[str, ...]
    subset: tuple[str, ...]
    matches: int
    total: int

    @property
    def secret_int(self) -> int | None:
        return self.secret.to_integer_if_exact()

    @property
    def exact(self) -> bool:
        return self.secret_int is not None


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every ``k``-subset of ``range(n)`` in lexicographic order.

    The order decides ties between equally scored subsets, so it must stay
    the same as a recursive choose-with-increasing-start enumeration, which
    is exactly what :func:`itertools.combinations` produces.
    """
    return itertools.combinations(range(n), k)


def score(shares: Sequence[Share], indices: tuple[int, ...]) -> Optional[Candidate]:
    """Interpolate the subset at ``indices`` and check it against every share.

    Returns ``None`` when two shares in the subset have the same ``x``.
    """
    subset = [shares[i] for i in indices]
    try:
        secret = secret_of(subset)
    except DivisionByZero:
        _logger.debug("Skipping subset %s: colliding x coordinates", indices)
        return None

    predicted = evaluate_many(subset, (s.x for s in shares))
    agreement = tuple(p.to_integer_if_exact() == s.y for p, s in zip(predicted, shares))
    return Candidate(indices=indices, secret=secret, agreement=agreement, matches=sum(agreement))


def _select(candidates: Iterable[Optional[Candidate]], n: int) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    for candidate in candidates:
        if candidate is None:
            continue
        if best is None or candidate.matches > best.matches:
            _logger.debug("Subset %s agrees with %d/%d shares", candidate.indices, candidate.matches, n)
            best = candidate
            if best.matches == n:
                # Nothing later can score strictly higher.
                break
    return best


def recover(
    shares: Sequence[Share],
    k: int,
    *,
    workers: int | None = None,
    progress: bool = False,
    max_combinations: int | None = None,
) -> RecoveryResult:
    """Recover the secret from ``shares`` with reconstruction threshold ``k``.

    ``workers`` and ``max_combinations`` default to the active
    :class:`~share_recovery.policy.RecoveryPolicy`. Raises
    :class:`NoValidPolynomial` when there is nothing to interpolate and
    :class:`SearchSpaceTooLarge` when the enumeration would exceed the limit.
    """
    config = _policy_module.policy
    workers = config.workers if workers is None else workers
    limit = config.max_combinations if max_combinations is None else max_combinations

    shares = tuple(shares)
    n = len(shares)
    if n == 0:
        raise NoValidPolynomial("no shares were supplied")
    if k < 1 or k > n:
        raise NoValidPolynomial(f"threshold k={k} is not satisfiable with {n} shares")

    total = math.comb(n, k)
    if limit and total > limit:
        raise SearchSpaceTooLarge(total, limit)
    _logger.info("Searching %d subsets of %d shares (k=%d, workers=%d)", total, n, k, workers)

    with tqdm(combinations(n, k), total=total, desc="subsets", unit="subset", disable=not progress) as indices:
        if workers > 1:
            with multiprocessing.Pool(workers) as pool:
                # imap keeps enumeration order, which the tie-break depends on.
                best = _select(pool.imap(partial(score, shares), indices, chunksize=CHUNKSIZE), n)
        else:
            best = _select((score(shares, combo) for combo in indices), n)

    if best is None:
        raise NoValidPolynomial("every subset of shares has colliding x coordinates")

    mismatched = tuple(s.identifier for s, ok in zip(shares, best.agreement) if not ok)
    subset = tuple(shares[i].identifier for i in best.indices)
    _logger.info("Best subset %s agrees with %d/%d shares", ",".join(subset), best.matches, n)
    if best.secret.to_integer_if_exact() is None:
        _logger.warning("Recovered secret is not an integer; the shares may be malformed")
    return RecoveryResult(
        secret=best.secret,
        mismatched=mismatched,
        subset=subset,
        matches=best.matches,
        total=n,
    )


__all__ = ["Candidate", "RecoveryResult", "combinations", "score", "recover"]
