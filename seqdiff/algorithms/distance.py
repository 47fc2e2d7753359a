"""Edit distances computed with a single rolling dynamic-programming row."""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Sequence, Tuple

from seqdiff.types.config import DISTANCE_MODES
from seqdiff.types.equivalence import Equivalencer, resolve_equivalencer
from seqdiff.types.sequence import snapshot

DistanceMode = Literal["levenshtein", "lcs"]


def _validate_mode(mode: str) -> None:
    if mode not in DISTANCE_MODES:
        raise ValueError(f"Unknown mode: {mode}. Choose from {list(DISTANCE_MODES)}")


def _rolling_distance(
    s: Tuple[Any, ...],
    t: Tuple[Any, ...],
    equivalencer: Equivalencer,
    allow_substitution: bool,
) -> int:
    """Wagner-Fischer recurrence over ``t`` keeping one row of ``len(s) + 1``."""
    n = len(s)
    m = len(t)

    if n == 0:
        return m
    if m == 0:
        return n

    if n > m:
        # Keep the row as short as possible
        return _rolling_distance(t, s, equivalencer.swap(), allow_substitution)

    p: List[int] = list(range(n + 1))

    for j in range(1, m + 1):
        upper_left = p[0]
        t_j = t[j - 1]
        p[0] = j

        for i in range(1, n + 1):
            upper = p[i]
            cost_base = min(p[i - 1] + 1, upper + 1)
            if allow_substitution:
                cost_sub = 0 if equivalencer.equivalent(s[i - 1], t_j) else 1
                p[i] = min(cost_base, upper_left + cost_sub)
            elif equivalencer.equivalent(s[i - 1], t_j):
                # Without substitutions only a match may take the diagonal
                p[i] = min(cost_base, upper_left)
            else:
                p[i] = cost_base
            upper_left = upper

    return p[n]


def compute_distance(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
    mode: DistanceMode = "levenshtein",
) -> int:
    """Return the edit distance between two sequences.

    Args:
        x_seq: Front sequence.
        y_seq: Back sequence.
        equivalencer: Relation deciding element equality. Defaults to the
            basic value-equality relation.
        mode: "levenshtein" counts insertions, deletions and substitutions;
            "lcs" counts insertions and deletions only, which equals
            ``len(x) + len(y) - 2 * lcs_length``.

    Returns:
        Non-negative integer distance.
    """
    _validate_mode(mode)
    return _rolling_distance(
        snapshot(x_seq),
        snapshot(y_seq),
        resolve_equivalencer(equivalencer),
        allow_substitution=(mode == "levenshtein"),
    )


def levenshtein_distance(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> int:
    """Levenshtein distance (unit-cost insert, delete, substitute)."""
    return compute_distance(x_seq, y_seq, equivalencer, mode="levenshtein")


def lcs_distance(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> int:
    """Longest-common-subsequence distance (unit-cost insert and delete)."""
    return compute_distance(x_seq, y_seq, equivalencer, mode="lcs")


def _max_distance(n: int, m: int, mode: str) -> int:
    return max(n, m) if mode == "levenshtein" else n + m


def similarity(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
    mode: DistanceMode = "levenshtein",
) -> int:
    """Maximum possible distance minus the actual distance."""
    _validate_mode(mode)
    x = snapshot(x_seq)
    y = snapshot(y_seq)
    return _max_distance(len(x), len(y), mode) - compute_distance(
        x, y, equivalencer, mode
    )


def normalized_distance(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
    mode: DistanceMode = "levenshtein",
) -> float:
    """Distance scaled to [0, 1] by the maximum possible distance."""
    _validate_mode(mode)
    x = snapshot(x_seq)
    y = snapshot(y_seq)
    maximum = _max_distance(len(x), len(y), mode)
    if maximum == 0:
        return 0.0
    return compute_distance(x, y, equivalencer, mode) / maximum


def normalized_similarity(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
    mode: DistanceMode = "levenshtein",
) -> float:
    """One minus the normalized distance."""
    return 1.0 - normalized_distance(x_seq, y_seq, equivalencer, mode)


__all__ = [
    "DistanceMode",
    "DISTANCE_MODES",
    "compute_distance",
    "levenshtein_distance",
    "lcs_distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
