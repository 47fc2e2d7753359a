"""Constants for the project."""

from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Data directories
# ============================================================================
DATA_FOLDER = PROJECT_ROOT / "data"
SEQUENCES_FOLDER = DATA_FOLDER / "sequences"
SEQUENCE_SUFFIX = ".txt"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Comparison settings (mode, case and whitespace handling, gap marker)
CONFIG_YAML = RESULTS_FOLDER / "config" / "diff.yaml"

# Distance evaluation metrics (CSV files from evaluate_distances.py)
EVALUATION_METRICS_FOLDER = RESULTS_FOLDER / "metrics"

# ============================================================================
# Output formatting
# ============================================================================
PRECISION = 4
METRIC_NAMES: List[str] = [
    "levenshtein",
    "lcs",
    "normalized_levenshtein",
    "normalized_lcs",
    "lcs_length",
]
