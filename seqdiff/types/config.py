"""
This module defines the configuration of a comparison: which distance to
report, how elements are normalised before they are compared, and how gaps
are rendered when an alignment is displayed. The configuration is loaded from
YAML by ``seqdiff.utils.serialization`` and turned into an equivalencer by
:meth:`DiffConfig.equivalencer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .equivalence import BASIC_EQUIVALENCER, Equivalencer, KeyEquivalencer

DISTANCE_MODES: Tuple[str, str] = ("levenshtein", "lcs")


def _normalize_element(value: Any, ignore_case: bool, ignore_whitespace: bool) -> Any:
    if not isinstance(value, str):
        return value
    if ignore_whitespace:
        value = "".join(value.split())
    if ignore_case:
        value = value.casefold()
    return value


@dataclass(frozen=True)
class DiffConfig:
    """Options controlling how two sequences are compared and displayed."""

    mode: str = "levenshtein"
    ignore_case: bool = False
    ignore_whitespace: bool = False
    gap: str = "-"

    def __post_init__(self) -> None:
        if self.mode not in DISTANCE_MODES:
            raise ValueError(
                f"Unknown mode: {self.mode}. Choose from {list(DISTANCE_MODES)}"
            )
        if not isinstance(self.gap, str) or not self.gap:
            raise ValueError("gap must be a non-empty string.")

    def equivalencer(self) -> Equivalencer:
        """Build the equivalence relation described by this configuration."""
        if not (self.ignore_case or self.ignore_whitespace):
            return BASIC_EQUIVALENCER

        ignore_case = self.ignore_case
        ignore_whitespace = self.ignore_whitespace

        def key(value: Any) -> Any:
            return _normalize_element(value, ignore_case, ignore_whitespace)

        return KeyEquivalencer(front_key=key)


__all__ = ["DiffConfig", "DISTANCE_MODES"]
