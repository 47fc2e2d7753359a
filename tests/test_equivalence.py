"""Unit tests for equivalence relations."""

from __future__ import annotations

import pytest

from seqdiff.types.equivalence import (
    BASIC_EQUIVALENCER,
    BasicEquivalencer,
    FunctionEquivalencer,
    KeyEquivalencer,
    resolve_equivalencer,
)


def test_basic_equivalencer_uses_value_equality():
    """Equal values are equivalent, different values are not."""
    eq = BasicEquivalencer()
    assert eq.equivalent(1, 1)
    assert eq.equivalent("abc", "abc")
    assert eq.equivalent((1, 2), (1, 2))
    assert not eq.equivalent(1, 2)
    assert not eq.equivalent("a", "A")


def test_basic_equivalencer_none_only_matches_none():
    """None is equivalent to None and never to a non-None value."""
    eq = BasicEquivalencer()
    assert eq.equivalent(None, None)
    assert not eq.equivalent(None, 0)
    assert not eq.equivalent("", None)
    assert not eq.equivalent(None, [])


def test_basic_equivalencer_matches_identical_objects():
    """An object is equivalent to itself even when == says otherwise."""
    eq = BasicEquivalencer()
    nan = float("nan")
    assert eq.equivalent(nan, nan)
    assert not eq.equivalent(nan, float("nan"))
    assert not eq.equivalent(nan, 1.0)


def test_basic_equivalencer_swap_is_itself():
    """Value equality is symmetric so the swap is the same relation."""
    assert BASIC_EQUIVALENCER.swap() is BASIC_EQUIVALENCER


def test_resolve_equivalencer_defaults_to_basic():
    """None resolves to the shared basic relation."""
    custom = FunctionEquivalencer(lambda a, b: a == b)
    assert resolve_equivalencer(None) is BASIC_EQUIVALENCER
    assert resolve_equivalencer(custom) is custom


def test_function_equivalencer_swap_mirrors_arguments():
    """swapped.equivalent(b, a) must equal original.equivalent(a, b)."""
    def divides(a, b):
        return b % a == 0

    eq = FunctionEquivalencer(divides)
    swapped = eq.swap()

    for a in range(1, 6):
        for b in range(1, 13):
            assert swapped.equivalent(b, a) == eq.equivalent(a, b)

    assert swapped.swap() == eq
    assert eq.equivalent(3, 9)
    assert not swapped.equivalent(3, 9)
    assert swapped.equivalent(9, 3)


def test_function_equivalencer_propagates_errors():
    """Errors raised by the predicate are not swallowed."""

    def broken(a, b):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        FunctionEquivalencer(broken).equivalent(1, 2)


def test_key_equivalencer_projects_each_side():
    """Keys are applied before comparing, with separate keys per side."""
    eq = KeyEquivalencer(front_key=str.lower)
    assert eq.equivalent("Hello", "hELLO")
    assert not eq.equivalent("Hello", "world")
    assert eq.swap() is eq

    mixed = KeyEquivalencer(front_key=str, back_key=str.strip)
    assert mixed.equivalent(7, " 7 ")
    swapped = mixed.swap()
    assert swapped.equivalent(" 7 ", 7)
    assert not swapped.equivalent(" 8 ", 7)
