"""Framework for evaluating distance metrics over many sequence pairs."""

from __future__ import annotations

import math
from statistics import fmean, pstdev
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from seqdiff.evaluation.metrics import (
    MetricFunction,
    lcs,
    lcs_length,
    levenshtein,
    normalized_lcs,
    normalized_levenshtein,
)
from seqdiff.types.equivalence import Equivalencer
from seqdiff.types.evaluation import EvaluationResult, MetricResult


class SequencePair(NamedTuple):
    """Two identified sequences to be compared."""

    x_id: str
    x_seq: Sequence[Any]
    y_id: str
    y_seq: Sequence[Any]


def _resolve_metric_name(metric_fn: MetricFunction, metric_name: str | None) -> str:
    """Return a human-friendly metric name."""
    if metric_name:
        return metric_name
    func_name = getattr(metric_fn, "__name__", None)
    return func_name if func_name else "metric"


def evaluate_single(
    pair: SequencePair,
    metric_fn: MetricFunction,
    metric_name: str | None = None,
    equivalencer: Optional[Equivalencer] = None,
) -> MetricResult:
    """Evaluate a single sequence pair with the provided metric function."""
    resolved_name = _resolve_metric_name(metric_fn, metric_name)
    value = metric_fn(pair.x_seq, pair.y_seq, equivalencer)

    return MetricResult(
        metric=resolved_name,
        value=value,
        sequence_ids=(pair.x_id, pair.y_id),
    )


def _summarize(values: List[float]) -> Tuple[float, Optional[float], float, float]:
    """Mean, population std, min and max; NaN when empty, no std below two."""
    if not values:
        return math.nan, None, math.nan, math.nan
    spread = pstdev(values) if len(values) > 1 else None
    return fmean(values), spread, min(values), max(values)


def evaluate_multiple(
    pairs: List[SequencePair],
    metric_fn: MetricFunction,
    metric_name: str | None = None,
    equivalencer: Optional[Equivalencer] = None,
) -> EvaluationResult:
    """Evaluate multiple sequence pairs with the provided metric function."""
    resolved_name = _resolve_metric_name(metric_fn, metric_name)
    per_pair = [
        evaluate_single(pair, metric_fn, resolved_name, equivalencer) for pair in pairs
    ]
    mean, spread, lowest, highest = _summarize([result.value for result in per_pair])

    return EvaluationResult(
        metric=resolved_name,
        per_pair=per_pair,
        mean=mean,
        std=spread,
        minimum=lowest,
        maximum=highest,
        count=len(per_pair),
    )


def evaluate_all_metrics(
    pairs: List[SequencePair],
    metric_fns: Dict[str, MetricFunction] | None = None,
    equivalencer: Optional[Equivalencer] = None,
) -> Dict[str, EvaluationResult]:
    """Evaluate a suite of metrics and return results keyed by metric name."""
    if metric_fns is None:
        metric_fns = {
            "levenshtein": levenshtein,
            "lcs": lcs,
            "normalized_levenshtein": normalized_levenshtein,
            "normalized_lcs": normalized_lcs,
            "lcs_length": lcs_length,
        }

    results: Dict[str, EvaluationResult] = {}
    for name, metric_fn in metric_fns.items():
        results[name] = evaluate_multiple(pairs, metric_fn, name, equivalencer)

    return results


def all_pairs(named_sequences: Dict[str, Sequence[Any]]) -> List[SequencePair]:
    """Every unordered pair of the named sequences, in insertion order."""
    items: List[Tuple[str, Sequence[Any]]] = list(named_sequences.items())
    pairs: List[SequencePair] = []
    for idx, (x_id, x_seq) in enumerate(items):
        for y_id, y_seq in items[idx + 1 :]:
            pairs.append(SequencePair(x_id, x_seq, y_id, y_seq))
    return pairs


__all__ = [
    "SequencePair",
    "evaluate_single",
    "evaluate_multiple",
    "evaluate_all_metrics",
    "all_pairs",
]
