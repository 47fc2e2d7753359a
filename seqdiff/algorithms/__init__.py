"""Algorithms for the project."""

from .base import PairwiseAligner
from .lcs import LcsAligner, diff, longest_common_subsequence_length
from .distance import (
    DistanceMode,
    compute_distance,
    lcs_distance,
    levenshtein_distance,
    normalized_distance,
    normalized_similarity,
    similarity,
)


__all__ = [
    "PairwiseAligner",
    "LcsAligner",
    "diff",
    "longest_common_subsequence_length",
    "DistanceMode",
    "compute_distance",
    "levenshtein_distance",
    "lcs_distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
