"""Unit tests for the distance evaluation framework."""

from __future__ import annotations

import math

import pytest

from seqdiff.evaluation import SequencePair, all_pairs, evaluate_all_metrics
from seqdiff.evaluation.evaluation import evaluate_multiple, evaluate_single
from seqdiff.evaluation.metrics import (
    lcs,
    lcs_length,
    levenshtein,
    normalized_lcs,
    normalized_levenshtein,
)
from seqdiff.types import EvaluationResult, MetricResult
from seqdiff.types.equivalence import KeyEquivalencer


def test_metric_functions():
    """Metrics are floats derived from the engines."""
    assert levenshtein("kitten", "sitting") == 3.0
    assert lcs("abc", "abd") == 2.0
    assert normalized_levenshtein("kitten", "sitting") == pytest.approx(3 / 7)
    assert normalized_lcs("abc", "abd") == pytest.approx(1 / 3)
    assert lcs_length("abcbdab", "bdcaba") == 4.0


def test_all_pairs_enumerates_unordered_pairs():
    """Each unordered pair appears once, in insertion order."""
    pairs = all_pairs({"a": [1], "b": [2], "c": [3]})
    assert [(p.x_id, p.y_id) for p in pairs] == [("a", "b"), ("a", "c"), ("b", "c")]
    assert all_pairs({"only": [1]}) == []


def test_evaluate_single_records_ids_and_name():
    """A single evaluation carries the metric name and sequence ids."""
    pair = SequencePair("x", [1, 2, 3, 4], "y", [2, 1, 3, 4])
    result = evaluate_single(pair, levenshtein)
    assert result == MetricResult(metric="levenshtein", value=2.0, sequence_ids=("x", "y"))

    named = evaluate_single(pair, levenshtein, metric_name="edit")
    assert named.metric == "edit"


def test_evaluate_multiple_aggregates():
    """Mean, population std, min and max over all pairs."""
    pairs = [
        SequencePair("a", "abc", "b", "abc"),
        SequencePair("a", "abc", "c", "abd"),
        SequencePair("a", "abc", "d", "xyz"),
    ]
    result = evaluate_multiple(pairs, levenshtein)

    assert isinstance(result, EvaluationResult)
    assert result.count == 3
    assert [r.value for r in result.per_pair] == [0.0, 1.0, 3.0]
    assert result.mean == pytest.approx(4 / 3)
    assert result.std == pytest.approx(math.sqrt(((4 / 3) ** 2 + (1 / 3) ** 2 + (5 / 3) ** 2) / 3))
    assert result.minimum == 0.0
    assert result.maximum == 3.0


def test_evaluate_multiple_edge_counts():
    """Empty input yields NaNs; one pair has no std."""
    empty = evaluate_multiple([], levenshtein)
    assert empty.count == 0
    assert math.isnan(empty.mean)
    assert empty.std is None

    single = evaluate_multiple([SequencePair("a", [1], "b", [2])], levenshtein)
    assert single.count == 1
    assert single.std is None
    assert single.mean == 1.0


def test_evaluate_all_metrics_default_suite_and_relation():
    """The default suite covers every metric and honours the relation."""
    pairs = [SequencePair("a", ["A", "b"], "b", ["a", "B"])]

    results = evaluate_all_metrics(pairs)
    assert set(results) == {
        "levenshtein",
        "lcs",
        "normalized_levenshtein",
        "normalized_lcs",
        "lcs_length",
    }
    assert results["levenshtein"].mean == 2.0

    relaxed = evaluate_all_metrics(pairs, equivalencer=KeyEquivalencer(front_key=str.lower))
    assert relaxed["levenshtein"].mean == 0.0
    assert relaxed["lcs_length"].mean == 2.0
