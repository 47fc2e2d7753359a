"""Functions for reading line-oriented text files as sequences."""

import os
from typing import Dict, List


def read_lines(file_path: str, keep_blank: bool = True) -> List[str]:
    """Read a text file and return its lines without trailing newlines."""
    with open(file_path, "r", encoding="utf-8") as fh:
        lines = [line.rstrip("\r\n") for line in fh]
    if not keep_blank:
        lines = [line for line in lines if line.strip()]
    return lines


def collect_sequences(folder: str, suffix: str = ".txt") -> Dict[str, List[str]]:
    """Read every file in ``folder`` ending with ``suffix``, keyed by file name.

    Files are visited in sorted order so that results are stable.
    """
    sequences: Dict[str, List[str]] = {}
    for name in sorted(os.listdir(folder)):
        path = os.path.join(folder, name)
        if os.path.isfile(path) and name.endswith(suffix):
            sequences[name] = read_lines(path)
    return sequences


__all__ = ["read_lines", "collect_sequences"]
