"""Pair records: the units of an alignment between two sequences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Union


class DiffPair(ABC):
    """Base class of the three pair shapes.

    A pair carries an element of the front sequence, of the back sequence, or
    of both. Elements may be ``None``; the shape, not the value, says which
    slots are filled.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def has_front(self) -> bool:
        """True when the front slot is filled."""
        raise NotImplementedError

    @property
    @abstractmethod
    def has_back(self) -> bool:
        """True when the back slot is filled."""
        raise NotImplementedError

    @property
    def has_both(self) -> bool:
        return self.has_front and self.has_back


@dataclass(frozen=True)
class FrontOnly(DiffPair):
    """Element of the front sequence with no counterpart in the back one."""

    front: Any

    @property
    def has_front(self) -> bool:
        return True

    @property
    def has_back(self) -> bool:
        return False


@dataclass(frozen=True)
class BackOnly(DiffPair):
    """Element of the back sequence with no counterpart in the front one."""

    back: Any

    @property
    def has_front(self) -> bool:
        return False

    @property
    def has_back(self) -> bool:
        return True


@dataclass(frozen=True)
class Both(DiffPair):
    """Matched elements, equivalent under the relation used for the diff."""

    front: Any
    back: Any

    @property
    def has_front(self) -> bool:
        return True

    @property
    def has_back(self) -> bool:
        return True


PairRecord = Union[FrontOnly, BackOnly, Both]


__all__ = ["DiffPair", "FrontOnly", "BackOnly", "Both", "PairRecord"]
