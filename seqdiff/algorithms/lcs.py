"""Longest common subsequence alignment of two sequences."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from seqdiff.algorithms.base import PairwiseAligner
from seqdiff.types import Alignment, AlignmentResult
from seqdiff.types.equivalence import Equivalencer, resolve_equivalencer
from seqdiff.types.pair import BackOnly, Both, DiffPair, FrontOnly
from seqdiff.types.sequence import snapshot


class LcsAligner(PairwiseAligner):
    """Alignment whose matched pairs form a longest common subsequence.

    The full ``(n+1) x (m+1)`` table of prefix LCS lengths is built, then
    walked back from the bottom-right corner. When a cell can be reached
    from above or from the left with the same value, the walk moves left
    (emitting an unmatched back element), so the output is deterministic.
    """

    def __init__(self, keep_table: bool = False) -> None:
        """Initialize the aligner.

        Args:
            keep_table: Attach the LCS length table to the result.
        """
        self.keep_table = keep_table

    def _initialize_dp_table(self, n: int, m: int) -> np.ndarray:
        """Allocate the LCS length table; row 0 and column 0 stay zero."""
        return np.zeros((n + 1, m + 1), dtype=np.int64)

    def _fill_table(
        self,
        dp: np.ndarray,
        equivalencer: Equivalencer,
        x: Tuple[Any, ...],
        y: Tuple[Any, ...],
        n: int,
        m: int,
    ) -> int:
        """Fill the table row by row and return the LCS length."""
        previous: List[int] = [0] * (m + 1)
        for i in range(1, n + 1):
            current: List[int] = [0] * (m + 1)
            x_i = x[i - 1]
            for j in range(1, m + 1):
                if equivalencer.equivalent(x_i, y[j - 1]):
                    current[j] = previous[j - 1] + 1
                else:
                    current[j] = max(previous[j], current[j - 1])
            dp[i, :] = current
            previous = current
        return int(dp[n, m])

    def _traceback(
        self,
        dp: np.ndarray,
        equivalencer: Equivalencer,
        x: Tuple[Any, ...],
        y: Tuple[Any, ...],
        n: int,
        m: int,
    ) -> List[DiffPair]:
        """Walk back from (n, m) to (0, 0) collecting pair records."""
        pairs: List[DiffPair] = []
        i, j = n, m

        while i > 0 or j > 0:
            if (
                i > 0
                and j > 0
                and dp[i - 1, j - 1] + 1 == dp[i, j]
                and equivalencer.equivalent(x[i - 1], y[j - 1])
            ):
                pairs.append(Both(x[i - 1], y[j - 1]))
                i -= 1
                j -= 1
            elif j > 0 and (i == 0 or dp[i, j - 1] >= dp[i - 1, j]):
                pairs.append(BackOnly(y[j - 1]))
                j -= 1
            else:
                pairs.append(FrontOnly(x[i - 1]))
                i -= 1

        pairs.reverse()
        return pairs

    def align(
        self,
        equivalencer: Optional[Equivalencer],
        x_seq: Sequence[Any],
        y_seq: Sequence[Any],
    ) -> AlignmentResult:
        """Compute an LCS alignment of ``x_seq`` (front) and ``y_seq`` (back)."""
        equivalencer = resolve_equivalencer(equivalencer)
        x = snapshot(x_seq)
        y = snapshot(y_seq)
        n = len(x)
        m = len(y)

        if n == 0 or m == 0:
            pairs: List[DiffPair] = [FrontOnly(item) for item in x]
            pairs.extend(BackOnly(item) for item in y)
            table = self._initialize_dp_table(n, m) if self.keep_table else None
            return AlignmentResult(alignment=Alignment(pairs), score=0, table=table)

        dp = self._initialize_dp_table(n, m)
        score = self._fill_table(dp, equivalencer, x, y, n, m)
        pairs = self._traceback(dp, equivalencer, x, y, n, m)

        return AlignmentResult(
            alignment=Alignment(pairs),
            score=score,
            table=dp if self.keep_table else None,
        )


def diff(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> Iterator[DiffPair]:
    """Yield the pair records of an LCS alignment, front first.

    The alignment is computed when the first record is requested. The
    iterator is one-shot: call ``diff`` again to traverse a second time.
    """
    result = LcsAligner().align(equivalencer, x_seq, y_seq)
    yield from result.alignment


def longest_common_subsequence_length(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> int:
    """Length of a longest common subsequence of the two sequences."""
    return LcsAligner().align(equivalencer, x_seq, y_seq).score


__all__ = ["LcsAligner", "diff", "longest_common_subsequence_length"]
