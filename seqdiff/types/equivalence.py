"""Equivalence relations used to compare elements of two sequences.

An equivalencer decides whether an element of the *front* sequence counts as
equal to an element of the *back* sequence. Every equivalencer also knows how
to produce its mirror image through :meth:`Equivalencer.swap`, so that the
engines can exchange the roles of the two sequences without changing the
outcome of any comparison.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

Predicate = Callable[[Any, Any], bool]
KeyFunction = Callable[[Any], Any]


class Equivalencer(ABC):
    """Pure, deterministic predicate over one element of each sequence."""

    @abstractmethod
    def equivalent(self, front: Any, back: Any) -> bool:
        """Return True when ``front`` and ``back`` count as equal."""
        raise NotImplementedError

    @abstractmethod
    def swap(self) -> "Equivalencer":
        """Return the relation with the argument order exchanged."""
        raise NotImplementedError


def _basic_equal(front: Any, back: Any) -> bool:
    # Identity first, so an element such as NaN matches itself
    if front is back:
        return True
    if front is None or back is None:
        return False
    return bool(front == back)


class BasicEquivalencer(Equivalencer):
    """Value equality where ``None`` only matches ``None``."""

    def equivalent(self, front: Any, back: Any) -> bool:
        return _basic_equal(front, back)

    def swap(self) -> "BasicEquivalencer":
        return self

    def __repr__(self) -> str:
        return "BasicEquivalencer()"


BASIC_EQUIVALENCER = BasicEquivalencer()


@dataclass(frozen=True)
class FunctionEquivalencer(Equivalencer):
    """Adapt a two-argument predicate into an equivalencer.

    Attributes:
        predicate: Callable invoked as ``predicate(front, back)``.
        swapped: Whether the arguments are passed to ``predicate`` in
            reverse order.
    """

    predicate: Predicate
    swapped: bool = False

    def equivalent(self, front: Any, back: Any) -> bool:
        if self.swapped:
            return bool(self.predicate(back, front))
        return bool(self.predicate(front, back))

    def swap(self) -> "FunctionEquivalencer":
        return FunctionEquivalencer(predicate=self.predicate, swapped=not self.swapped)


@dataclass(frozen=True)
class KeyEquivalencer(Equivalencer):
    """Compare elements after projecting each side through a key function."""

    front_key: KeyFunction
    back_key: Optional[KeyFunction] = None

    def equivalent(self, front: Any, back: Any) -> bool:
        back_key = self.back_key if self.back_key is not None else self.front_key
        return _basic_equal(self.front_key(front), back_key(back))

    def swap(self) -> "KeyEquivalencer":
        if self.back_key is None:
            return self
        return KeyEquivalencer(front_key=self.back_key, back_key=self.front_key)


def resolve_equivalencer(equivalencer: Optional[Equivalencer]) -> Equivalencer:
    """Return ``equivalencer`` or the basic one when None is given."""
    return BASIC_EQUIVALENCER if equivalencer is None else equivalencer


__all__ = [
    "Equivalencer",
    "BasicEquivalencer",
    "BASIC_EQUIVALENCER",
    "FunctionEquivalencer",
    "KeyEquivalencer",
    "resolve_equivalencer",
    "Predicate",
    "KeyFunction",
]
