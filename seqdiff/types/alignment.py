"""Alignment types."""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple
import numpy as np

from .pair import BackOnly, Both, DiffPair, FrontOnly

DEFAULT_GAP = "-"


@dataclass(frozen=True)
class Alignment:
    """Ordered pair records relating a front sequence to a back sequence."""

    pairs: Tuple[DiffPair, ...]

    def __post_init__(self):
        # Accept any iterable of pairs but store a tuple
        pairs = tuple(self.pairs)
        object.__setattr__(self, "pairs", pairs)

        invalid = [p for p in pairs if not isinstance(p, (FrontOnly, BackOnly, Both))]
        if invalid:
            raise ValueError(f"Alignment contains non-pair records: {invalid[:3]}")

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[DiffPair]:
        return iter(self.pairs)

    def fronts(self) -> Tuple[Any, ...]:
        """Front elements in order; equal to the front sequence."""
        return tuple(p.front for p in self.pairs if p.has_front)

    def backs(self) -> Tuple[Any, ...]:
        """Back elements in order; equal to the back sequence."""
        return tuple(p.back for p in self.pairs if p.has_back)

    def common(self) -> Tuple[Any, ...]:
        """Front elements of matched pairs: a longest common subsequence."""
        return tuple(p.front for p in self.pairs if p.has_both)

    @property
    def num_matches(self) -> int:
        """Number of ``Both`` records."""
        return sum(1 for p in self.pairs if p.has_both)

    def gapped(self, gap: Any = DEFAULT_GAP) -> Tuple[List[Any], List[Any]]:
        """Return the two alignment rows with ``gap`` filling empty slots."""
        row_x: List[Any] = []
        row_y: List[Any] = []
        for pair in self.pairs:
            row_x.append(pair.front if pair.has_front else gap)
            row_y.append(pair.back if pair.has_back else gap)
        return row_x, row_y

    def rows(self, gap: Any = DEFAULT_GAP) -> Tuple[str, str]:
        """Return the two gapped rows as text, one padded cell per column."""
        row_x, row_y = self.gapped(gap)
        cells_x = [str(item) for item in row_x]
        cells_y = [str(item) for item in row_y]
        widths = [max(len(a), len(b)) for a, b in zip(cells_x, cells_y)]
        line_x = " ".join(cell.ljust(w) for cell, w in zip(cells_x, widths))
        line_y = " ".join(cell.ljust(w) for cell, w in zip(cells_y, widths))
        return line_x.rstrip(), line_y.rstrip()

    def render(self, gap: Any = DEFAULT_GAP) -> str:
        """Summary line followed by the front and back rows."""
        line_x, line_y = self.rows(gap)
        return (
            f"columns: {len(self.pairs)}, matches: {self.num_matches}\n"
            f"front: {line_x}\n"
            f"back:  {line_y}"
        )

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        line_x, line_y = self.rows()
        return (
            f"{class_name} (\n"
            f"   columns: {len(self.pairs)}, matches: {self.num_matches}\n"
            f"   front: {line_x}\n"
            f"   back:  {line_y}\n"
            f")"
        )


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment algorithm.

    Attributes:
        alignment: The pair records relating the two sequences
        score: Length of the longest common subsequence
        table: Optional (n+1) x (m+1) matrix of LCS lengths of prefixes
    """

    alignment: Alignment
    score: int
    table: Optional[np.ndarray] = None


__all__ = ["Alignment", "AlignmentResult", "DEFAULT_GAP"]
