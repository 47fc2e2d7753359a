"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from seqdiff.types import AlignmentResult, Equivalencer


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        equivalencer: Equivalencer,
        x_seq: Sequence[Any],
        y_seq: Sequence[Any],
    ) -> AlignmentResult:
        """Align two sequences using the provided equivalence relation."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
