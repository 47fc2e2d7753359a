"""Common prefix and suffix scans."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from seqdiff.types.equivalence import Equivalencer, resolve_equivalencer
from seqdiff.types.sequence import snapshot


def common_prefix_length(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> int:
    """Number of leading positions where the two sequences are equivalent."""
    equivalencer = resolve_equivalencer(equivalencer)
    x = snapshot(x_seq)
    y = snapshot(y_seq)
    n = min(len(x), len(y))
    for i in range(n):
        if not equivalencer.equivalent(x[i], y[i]):
            return i
    return n


def common_suffix_length(
    x_seq: Sequence[Any],
    y_seq: Sequence[Any],
    equivalencer: Optional[Equivalencer] = None,
) -> int:
    """Number of trailing positions where the two sequences are equivalent."""
    equivalencer = resolve_equivalencer(equivalencer)
    x = snapshot(x_seq)
    y = snapshot(y_seq)
    x_len = len(x)
    y_len = len(y)
    n = min(x_len, y_len)
    for i in range(1, n + 1):
        if not equivalencer.equivalent(x[x_len - i], y[y_len - i]):
            return i - 1
    return n


__all__ = ["common_prefix_length", "common_suffix_length"]
