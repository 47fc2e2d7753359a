"""Unit tests for prefix/suffix scans and LCS-derived subsequences."""

from __future__ import annotations

import pytest

from seqdiff.algorithms.lcs import LcsAligner
from seqdiff.operations import (
    common_prefix_length,
    common_suffix_length,
    extract_aligned_pairs,
    longest_common_subsequence,
    longest_common_subsequence_intersection,
    longest_common_subsequence_union,
)
from seqdiff.types.equivalence import FunctionEquivalencer, KeyEquivalencer


@pytest.mark.parametrize(
    "x,y,prefix,suffix",
    [
        ([1, 2, 3], [1, 2, 9], 2, 0),
        ([1, 2, 3], [9, 2, 3], 0, 2),
        ([1, 2, 3], [1, 2, 3], 3, 3),
        ([1, 2, 3], [1, 2, 3, 4], 3, 0),
        ([], [1], 0, 0),
        ("abcxyz", "abxyz", 2, 3),
    ],
)
def test_common_prefix_and_suffix(x, y, prefix, suffix):
    """Scans stop at the first mismatch from either end."""
    assert common_prefix_length(x, y) == prefix
    assert common_suffix_length(x, y) == suffix


def test_prefix_and_suffix_use_relation():
    """A custom relation decides what counts as a match."""
    eq = KeyEquivalencer(front_key=str.lower)
    assert common_prefix_length(["A", "b"], ["a", "B", "c"], eq) == 2
    assert common_suffix_length(["x", "Y"], ["y"], eq) == 1


def test_prefix_scan_stops_before_mismatch_comparisons():
    """No comparison is made past the first mismatch."""
    calls = []

    def tracking(a, b):
        calls.append((a, b))
        return a == b

    assert common_prefix_length([1, 5, 3], [1, 2, 3], FunctionEquivalencer(tracking)) == 1
    assert calls == [(1, 1), (5, 2)]


def test_longest_common_subsequence_draws_from_front():
    """The subsequence is built from the front sequence's elements."""
    assert longest_common_subsequence([1, 2, 3, 4], [1, 3, 4, 5]) == (1, 3, 4)
    assert longest_common_subsequence([], [1, 2]) == ()

    eq = KeyEquivalencer(front_key=str.lower)
    assert longest_common_subsequence(["A", "x", "B"], ["a", "b"], eq) == ("A", "B")

    lcs = longest_common_subsequence("abcbdab", "bdcaba")
    assert len(lcs) == 4


def test_intersection_keeps_elements_matched_by_every_mask():
    """Elements must be matched against all masks to survive."""
    base = [1, 2, 3, 4]
    assert longest_common_subsequence_intersection(base, [[1, 2, 3], [2, 3, 4]]) == (2, 3)
    assert longest_common_subsequence_intersection(base, [[1], [4]]) == ()
    assert longest_common_subsequence_intersection(base, [[1, 2, 3, 4]]) == (1, 2, 3, 4)


def test_union_keeps_elements_matched_by_any_mask():
    """Elements matched against at least one mask survive."""
    base = [1, 2, 3, 4]
    assert longest_common_subsequence_union(base, [[1, 2, 3], [2, 3, 4]]) == (1, 2, 3, 4)
    assert longest_common_subsequence_union(base, [[1], [4]]) == (1, 4)
    assert longest_common_subsequence_union(base, [[9]]) == ()


def test_masks_without_entries():
    """No masks: the intersection is the whole base, the union is empty."""
    assert longest_common_subsequence_intersection([1, 2], []) == (1, 2)
    assert longest_common_subsequence_union([1, 2], []) == ()


def test_masks_may_be_a_one_shot_iterable():
    """Masks are consumed once, in order."""
    masks = (mask for mask in ([1, 2], [2, 3]))
    assert longest_common_subsequence_intersection([1, 2, 3], masks) == (2,)

    masks = (mask for mask in ([1, 2], [2, 3]))
    assert longest_common_subsequence_union([1, 2, 3], masks) == (1, 2, 3)


def test_mask_operations_with_duplicates_and_none():
    """Duplicates and None carry no special meaning."""
    base = [None, 1, 1, None]
    # the walk starts from the end, so the single None matches the last one
    assert longest_common_subsequence_union(base, [[None], [1, 1]]) == (1, 1, None)
    assert longest_common_subsequence_intersection(base, [[None, 1, 1, None]]) == (
        None,
        1,
        1,
        None,
    )


def test_extract_aligned_pairs():
    """Matched records map to zero-based index pairs."""
    alignment = LcsAligner().align(None, [1, 2, 3, 4], [2, 1, 3, 4]).alignment
    assert extract_aligned_pairs(alignment) == {(1, 0), (2, 2), (3, 3)}

    empty = LcsAligner().align(None, [], [1]).alignment
    assert extract_aligned_pairs(empty) == set()
