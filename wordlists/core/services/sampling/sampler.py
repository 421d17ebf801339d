from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from ...errors.base import AppError, ErrorCode


def _check_size(k: int, available: int) -> None:
    if k < 0:
        raise AppError(ErrorCode.INVALID_ARGUMENT, f"sample size must be >= 0, got {k}")
    if k > available:
        raise AppError(
            ErrorCode.INVALID_ARGUMENT,
            f"sample size {k} exceeds the {available} available lines",
        )


def sample_lines(lines: Sequence[str], k: int, *, rng: random.Random) -> list[str]:
    """Draw ``k`` lines without replacement, in random order.

    With ``k == len(lines)`` this is a uniform random permutation.
    """
    _check_size(k, len(lines))
    if k == 0:
        return []
    return rng.sample(list(lines), k)


def reservoir_sample(lines: Iterable[str], k: int, *, rng: random.Random) -> list[str]:
    """Draw ``k`` lines without replacement from a stream of unknown length.

    Algorithm R keeps every line in the reservoir with equal probability, but
    the first ``k`` lines enter in input order, so the reservoir is shuffled
    before it is returned.
    """
    if k < 0:
        _check_size(k, 0)
    if k == 0:
        return []
    reservoir: list[str] = []
    i = 0
    for s in lines:
        i += 1
        if len(reservoir) < k:
            reservoir.append(s)
        else:
            j = rng.randint(1, i)
            if j <= k:
                reservoir[j - 1] = s
    _check_size(k, i)
    rng.shuffle(reservoir)
    return reservoir
