"""Subsequences extracted from LCS alignments.

The multi-mask operations align the base sequence against each mask in turn
and vote on every position of the base:

    - intersection: a position survives when it is matched in every mask's
      alignment;
    - union: a position survives when it is matched in at least one mask's
      alignment.

Since a pair of sequences can have several longest common subsequences, the
results depend on which alignment the engine picks. Every surviving element
has an equivalent counterpart in the masks it was matched against, but the
intersection is not guaranteed to be the longest subsequence common to all
sequences.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Set, Tuple

from seqdiff.algorithms.lcs import diff
from seqdiff.types import Alignment
from seqdiff.types.equivalence import Equivalencer, resolve_equivalencer
from seqdiff.types.sequence import snapshot


def longest_common_subsequence(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> Tuple[Any, ...]:
    """Return a longest common subsequence, drawing elements from ``x_seq``."""
    return tuple(pair.front for pair in diff(x_seq, y_seq, equivalencer) if pair.has_both)


def _matched_flags(
    base: Tuple[Any, ...],
    mask: Sequence[Any],
    equivalencer: Equivalencer,
) -> List[bool]:
    """For each base position, whether the alignment with ``mask`` matches it."""
    flags: List[bool] = []
    for pair in diff(base, mask, equivalencer):
        if pair.has_front:
            flags.append(pair.has_both)
    return flags


def longest_common_subsequence_intersection(
    base_seq: Sequence[Any],
    masks: Iterable[Sequence[Any]],
    equivalencer: Optional[Equivalencer] = None,
) -> Tuple[Any, ...]:
    """Elements of ``base_seq`` matched in the alignment with every mask."""
    equivalencer = resolve_equivalencer(equivalencer)
    base = snapshot(base_seq)
    keeps = [True] * len(base)

    for mask in masks:
        for j, matched in enumerate(_matched_flags(base, mask, equivalencer)):
            if not matched:
                keeps[j] = False

    return tuple(item for item, keep in zip(base, keeps) if keep)


def longest_common_subsequence_union(
    base_seq: Sequence[Any],
    masks: Iterable[Sequence[Any]],
    equivalencer: Optional[Equivalencer] = None,
) -> Tuple[Any, ...]:
    """Elements of ``base_seq`` matched in the alignment with at least one mask."""
    equivalencer = resolve_equivalencer(equivalencer)
    base = snapshot(base_seq)
    keeps = [False] * len(base)

    for mask in masks:
        for j, matched in enumerate(_matched_flags(base, mask, equivalencer)):
            if matched:
                keeps[j] = True

    return tuple(item for item, keep in zip(base, keeps) if keep)


def extract_aligned_pairs(alignment: Alignment) -> Set[Tuple[int, int]]:
    """Return the set of index pairs matched by the alignment.

    Indexing is zero-based with respect to the front and back sequences.
    Unmatched records only advance their own index.
    """
    idx_x = idx_y = 0
    pairs: Set[Tuple[int, int]] = set()

    for pair in alignment:
        if pair.has_both:
            pairs.add((idx_x, idx_y))
        if pair.has_front:
            idx_x += 1
        if pair.has_back:
            idx_y += 1

    return pairs


__all__ = [
    "longest_common_subsequence",
    "longest_common_subsequence_intersection",
    "longest_common_subsequence_union",
    "extract_aligned_pairs",
]
