"""Sequence wrapper exposing every comparison as a method."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

from seqdiff.algorithms.distance import compute_distance
from seqdiff.algorithms.lcs import diff
from seqdiff.operations import (
    common_prefix_length,
    common_suffix_length,
    longest_common_subsequence,
    longest_common_subsequence_intersection,
    longest_common_subsequence_union,
)
from seqdiff.types.equivalence import Equivalencer
from seqdiff.types.pair import DiffPair
from seqdiff.types.sequence import SequenceView


class DiffingSequence(SequenceView):
    """A read-only sequence that can be compared with other sequences.

    Every comparison accepts an optional equivalencer; when omitted, elements
    are compared by value and ``None`` only matches ``None``. This sequence
    always plays the front role.
    """

    @classmethod
    def wrap(cls, seq: Any) -> "DiffingSequence":
        """Return ``seq`` itself if already wrapped, a new wrapper otherwise."""
        if isinstance(seq, cls):
            return seq
        return cls(seq)

    def diff(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> Iterator[DiffPair]:
        """One-shot iterator over an LCS alignment with ``other``."""
        return diff(self.elements, other, equivalencer)

    def distance_lcs(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> int:
        """Insertion/deletion distance to ``other``."""
        return compute_distance(self.elements, other, equivalencer, mode="lcs")

    def distance_levenshtein(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> int:
        """Levenshtein distance to ``other``."""
        return compute_distance(self.elements, other, equivalencer, mode="levenshtein")

    def longest_common_prefix(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> int:
        """Length of the common prefix with ``other``."""
        return common_prefix_length(self.elements, other, equivalencer)

    def longest_common_suffix(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> int:
        """Length of the common suffix with ``other``."""
        return common_suffix_length(self.elements, other, equivalencer)

    def longest_common_subsequence(
        self, other: Sequence[Any], equivalencer: Optional[Equivalencer] = None
    ) -> "DiffingSequence":
        """A longest common subsequence with ``other``, drawn from this sequence."""
        return DiffingSequence(
            longest_common_subsequence(self.elements, other, equivalencer)
        )

    def longest_common_subsequence_intersection(
        self,
        masks: Iterable[Sequence[Any]],
        equivalencer: Optional[Equivalencer] = None,
    ) -> "DiffingSequence":
        """Elements matched in the alignment with every mask."""
        return DiffingSequence(
            longest_common_subsequence_intersection(self.elements, masks, equivalencer)
        )

    def longest_common_subsequence_union(
        self,
        masks: Iterable[Sequence[Any]],
        equivalencer: Optional[Equivalencer] = None,
    ) -> "DiffingSequence":
        """Elements matched in the alignment with at least one mask."""
        return DiffingSequence(
            longest_common_subsequence_union(self.elements, masks, equivalencer)
        )

    def to_tuple(self) -> Tuple[Any, ...]:
        """The wrapped elements as a plain tuple."""
        return self.elements


__all__ = ["DiffingSequence"]
