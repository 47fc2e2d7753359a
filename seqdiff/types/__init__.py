"""Types for the project."""

from .sequence import InvalidIndexError, SequenceView
from .equivalence import (
    BASIC_EQUIVALENCER,
    BasicEquivalencer,
    Equivalencer,
    FunctionEquivalencer,
    KeyEquivalencer,
)
from .pair import BackOnly, Both, DiffPair, FrontOnly, PairRecord
from .alignment import Alignment, AlignmentResult
from .evaluation import MetricResult, EvaluationResult
from .config import DiffConfig


__all__ = [
    "InvalidIndexError",
    "SequenceView",
    "Equivalencer",
    "BasicEquivalencer",
    "BASIC_EQUIVALENCER",
    "FunctionEquivalencer",
    "KeyEquivalencer",
    "DiffPair",
    "FrontOnly",
    "BackOnly",
    "Both",
    "PairRecord",
    "Alignment",
    "AlignmentResult",
    "MetricResult",
    "EvaluationResult",
    "DiffConfig",
]
