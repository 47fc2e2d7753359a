"""Operations derived from alignments and direct scans."""

from .affixes import common_prefix_length, common_suffix_length
from .subsequences import (
    extract_aligned_pairs,
    longest_common_subsequence,
    longest_common_subsequence_intersection,
    longest_common_subsequence_union,
)

__all__ = [
    "common_prefix_length",
    "common_suffix_length",
    "longest_common_subsequence",
    "longest_common_subsequence_intersection",
    "longest_common_subsequence_union",
    "extract_aligned_pairs",
]
