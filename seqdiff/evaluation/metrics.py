"""Pairwise comparison metrics and helpers."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from seqdiff.algorithms.distance import (
    compute_distance,
    normalized_distance,
)
from seqdiff.algorithms.lcs import longest_common_subsequence_length
from seqdiff.types.equivalence import Equivalencer

MetricFunction = Callable[[Sequence[Any], Sequence[Any], Optional[Equivalencer]], float]


def levenshtein(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> float:
    """Levenshtein distance as a float."""
    return float(compute_distance(x_seq, y_seq, equivalencer, mode="levenshtein"))


def lcs(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> float:
    """Insertion/deletion distance as a float."""
    return float(compute_distance(x_seq, y_seq, equivalencer, mode="lcs"))


def normalized_levenshtein(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> float:
    """Levenshtein distance divided by the longer length."""
    return normalized_distance(x_seq, y_seq, equivalencer, mode="levenshtein")


def normalized_lcs(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> float:
    """Insertion/deletion distance divided by the total length."""
    return normalized_distance(x_seq, y_seq, equivalencer, mode="lcs")


def lcs_length(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> float:
    """Length of a longest common subsequence."""
    return float(longest_common_subsequence_length(x_seq, y_seq, equivalencer))


__all__ = [
    "MetricFunction",
    "levenshtein",
    "lcs",
    "normalized_levenshtein",
    "normalized_lcs",
    "lcs_length",
]
