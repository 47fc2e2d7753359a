#!/usr/bin/env python3
"""Compute pairwise distances for a folder of text files and write CSV reports."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Sequence

import pandas as pd

from .constants import (
    CONFIG_YAML,
    EVALUATION_METRICS_FOLDER,
    METRIC_NAMES,
    PRECISION,
    SEQUENCE_SUFFIX,
    SEQUENCES_FOLDER,
)

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from seqdiff.algorithms import compute_distance
from seqdiff.evaluation import all_pairs, evaluate_all_metrics
from seqdiff.types import DiffConfig, Equivalencer, EvaluationResult
from seqdiff.utils import collect_sequences, load_config


def _distance_matrix(
    sequences: Dict[str, Sequence[str]],
    equivalencer: Equivalencer,
    mode: str,
) -> pd.DataFrame:
    """Square matrix of distances between every pair of named sequences."""
    names = list(sequences)
    rows = [
        [
            compute_distance(sequences[row], sequences[col], equivalencer, mode=mode)
            for col in names
        ]
        for row in names
    ]
    return pd.DataFrame(rows, index=names, columns=names)


def _aggregate_frame(results: Dict[str, EvaluationResult]) -> pd.DataFrame:
    aggregate_rows: List[Dict[str, float | str]] = []
    for metric_name in METRIC_NAMES:
        evaluation = results[metric_name]
        aggregate_rows.append(
            {
                "Metric": metric_name,
                "Mean": evaluation.mean,
                "Std": evaluation.std if evaluation.std is not None else float("nan"),
                "Min": evaluation.minimum,
                "Max": evaluation.maximum,
                "Count": evaluation.count,
            }
        )
    return pd.DataFrame(aggregate_rows)


def _per_pair_frame(results: Dict[str, EvaluationResult]) -> pd.DataFrame:
    rows: List[Dict[str, float | str]] = []
    for metric_name in METRIC_NAMES:
        for result in results[metric_name].per_pair:
            rows.append(
                {
                    "Front": result.sequence_ids[0],
                    "Back": result.sequence_ids[1],
                    "Metric": metric_name,
                    "Value": result.value,
                }
            )
    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame
    return frame.pivot_table(
        index=["Front", "Back"], columns="Metric", values="Value"
    ).reset_index()


def main() -> None:
    """Evaluate every pair of sequences in a folder and dump CSV reports."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-d",
        "--sequences",
        type=str,
        default=str(SEQUENCES_FOLDER),
        help="Folder of line-oriented text files.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=str(CONFIG_YAML),
        help="YAML comparison settings (defaults apply when missing).",
    )
    args = parser.parse_args()

    folder = Path(args.sequences)
    if not folder.exists():
        raise FileNotFoundError(f"Sequences directory not found: {folder}")

    config_path = Path(args.config)
    config = load_config(config_path) if config_path.exists() else DiffConfig()
    equivalencer = config.equivalencer()

    sequences = collect_sequences(str(folder), suffix=SEQUENCE_SUFFIX)
    if len(sequences) < 2:
        raise ValueError(f"At least 2 '{SEQUENCE_SUFFIX}' files are required in {folder}")
    print(f"Loaded {len(sequences)} sequences from {folder}")

    pairs = all_pairs(sequences)
    print(f"Evaluating {len(pairs)} pairs...")
    results = evaluate_all_metrics(pairs, equivalencer=equivalencer)

    EVALUATION_METRICS_FOLDER.mkdir(parents=True, exist_ok=True)

    aggregate_df = _aggregate_frame(results)
    print("\nAggregate metrics:")
    print(
        aggregate_df.to_string(index=False, float_format=lambda x: f"{x:.{PRECISION}f}")
    )
    aggregate_path = EVALUATION_METRICS_FOLDER / "aggregate.csv"
    aggregate_df.to_csv(aggregate_path, index=False)

    per_pair_path = EVALUATION_METRICS_FOLDER / "per_pair.csv"
    _per_pair_frame(results).to_csv(per_pair_path, index=False)

    matrix_path = EVALUATION_METRICS_FOLDER / f"{config.mode}_matrix.csv"
    _distance_matrix(sequences, equivalencer, config.mode).to_csv(matrix_path)

    print(f"\nWrote {aggregate_path}, {per_pair_path} and {matrix_path}")


if __name__ == "__main__":
    main()
