"""Evaluation module for the project."""

from . import metrics
from .evaluation import SequencePair, all_pairs, evaluate_all_metrics

__all__ = [
    "SequencePair",
    "all_pairs",
    "evaluate_all_metrics",
    "metrics",
]
