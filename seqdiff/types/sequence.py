"""Sequence types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Tuple


class InvalidIndexError(IndexError):
    """Raised when a sequence is accessed outside ``[0, size())``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for sequence of size {size}")
        self.index = index
        self.size = size


def _has_size_and_get(obj: Any) -> bool:
    return callable(getattr(obj, "size", None)) and callable(getattr(obj, "get", None))


def snapshot(seq: Any) -> Tuple[Any, ...]:
    """Return an immutable copy of the elements of ``seq``.

    Accepts objects exposing ``size()``/``get(index)`` as well as any
    ``collections.abc.Sequence``.
    """
    if isinstance(seq, tuple):
        return seq
    if _has_size_and_get(seq):
        return tuple(seq.get(i) for i in range(seq.size()))
    if isinstance(seq, Sequence):
        return tuple(seq)
    raise TypeError(
        f"Expected a random-access sequence or an object with size()/get(), "
        f"got {type(seq).__name__}"
    )


@dataclass(frozen=True)
class SequenceView:
    """Finite, zero-indexed, read-only view over a snapshot of elements."""

    elements: Tuple[Any, ...]

    def __init__(self, seq: Any) -> None:
        object.__setattr__(self, "elements", snapshot(seq))

    def size(self) -> int:
        """Number of elements in the view."""
        return len(self.elements)

    def get(self, index: int) -> Any:
        """Return the element at ``index``; negative indices are rejected."""
        if index < 0 or index >= len(self.elements):
            raise InvalidIndexError(index, len(self.elements))
        return self.elements[index]

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)


__all__ = ["InvalidIndexError", "SequenceView", "snapshot"]
