"""Alignment and edit distances for arbitrary sequences.

    levenshtein_distance([1, 2, 3, 4], [2, 1, 3, 4])  -> 2
    lcs_distance("abcd", "acbd")                      -> 2
    list(diff("abc", "abd"))  -> [Both('a', 'a'), Both('b', 'b'),
                                  FrontOnly('c'), BackOnly('d')]

Elements are compared with an equivalencer; by default, value equality where
``None`` only matches ``None``.
"""

from seqdiff.types import (
    Alignment,
    AlignmentResult,
    BackOnly,
    BASIC_EQUIVALENCER,
    BasicEquivalencer,
    Both,
    DiffConfig,
    DiffPair,
    Equivalencer,
    FrontOnly,
    FunctionEquivalencer,
    InvalidIndexError,
    KeyEquivalencer,
    SequenceView,
)
from seqdiff.algorithms import (
    LcsAligner,
    compute_distance,
    diff,
    lcs_distance,
    levenshtein_distance,
    longest_common_subsequence_length,
    normalized_distance,
    normalized_similarity,
    similarity,
)
from seqdiff.operations import (
    common_prefix_length,
    common_suffix_length,
    extract_aligned_pairs,
    longest_common_subsequence,
    longest_common_subsequence_intersection,
    longest_common_subsequence_union,
)
from seqdiff.diffing import DiffingSequence

__version__ = "0.1.0"
__all__ = [
    "Alignment", "AlignmentResult", "DiffPair", "FrontOnly", "BackOnly", "Both",
    "Equivalencer", "BasicEquivalencer", "BASIC_EQUIVALENCER",
    "FunctionEquivalencer", "KeyEquivalencer",
    "InvalidIndexError", "SequenceView", "DiffingSequence", "DiffConfig",
    "LcsAligner", "diff", "longest_common_subsequence_length",
    "compute_distance", "levenshtein_distance", "lcs_distance",
    "similarity", "normalized_distance", "normalized_similarity",
    "common_prefix_length", "common_suffix_length",
    "longest_common_subsequence",
    "longest_common_subsequence_intersection",
    "longest_common_subsequence_union",
    "extract_aligned_pairs",
]
