#!/usr/bin/env python3
"""Diff two line-oriented text files and print the alignment and distances."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .constants import CONFIG_YAML

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from seqdiff.algorithms import LcsAligner, compute_distance
from seqdiff.operations import common_prefix_length, common_suffix_length
from seqdiff.types import DiffConfig
from seqdiff.utils import load_config, read_lines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Align two text files line by line and report distances."
    )
    parser.add_argument("front", type=str, help="Front (original) file.")
    parser.add_argument("back", type=str, help="Back (modified) file.")
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help=f"YAML comparison settings (default: {CONFIG_YAML} if present).",
    )
    args = parser.parse_args()

    front_path = Path(args.front)
    back_path = Path(args.back)
    for path in (front_path, back_path):
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

    config_path = Path(args.config) if args.config else CONFIG_YAML
    if args.config and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    config = load_config(config_path) if config_path.exists() else DiffConfig()

    front = read_lines(str(front_path))
    back = read_lines(str(back_path))
    equivalencer = config.equivalencer()

    result = LcsAligner().align(equivalencer, front, back)

    print(f"Comparing {front_path} ({len(front)} lines) with {back_path} ({len(back)} lines)")
    print(f"Settings: {config}\n")
    print(result.alignment.render(config.gap))

    print(f"\nCommon prefix: {common_prefix_length(front, back, equivalencer)}")
    print(f"Common suffix: {common_suffix_length(front, back, equivalencer)}")
    print(f"LCS length: {result.score}")
    print(
        f"Levenshtein distance: "
        f"{compute_distance(front, back, equivalencer, mode='levenshtein')}"
    )
    print(f"LCS distance: {compute_distance(front, back, equivalencer, mode='lcs')}")


if __name__ == "__main__":
    main()
