"""Evaluation result data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class MetricResult:
    """Metric outcome for a single sequence pair."""

    metric: str
    value: float
    sequence_ids: Tuple[str, str]


@dataclass(frozen=True)
class EvaluationResult:
    """Aggregate evaluation results for a given metric."""

    metric: str
    per_pair: List[MetricResult]
    mean: float
    std: Optional[float]
    minimum: float
    maximum: float
    count: int


__all__ = ["MetricResult", "EvaluationResult"]
