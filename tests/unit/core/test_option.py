"""Unit tests for the option type."""

from __future__ import annotations

import pytest

from core.errors import OptionEmptyError
from core.option import Empty, Valued, empty, valued


def test_valued_option_reports_presence() -> None:
    """Valued options should be valued and not empty."""
    option = valued(3)

    assert option.is_valued
    assert not option.is_empty


def test_options_compare_structurally() -> None:
    """Options should be equal when their contents are equal."""
    assert valued((1, 2)) == Valued((1, 2))
    assert empty() == Empty()
    assert valued(None) != empty()


def test_match_calls_only_the_matching_branch() -> None:
    """Match should dispatch on presence."""
    assert valued(2).match(lambda value: value * 10, lambda: -1) == 20
    assert empty().match(lambda value: value * 10, lambda: -1) == -1


def test_get_or_else_is_lazy_for_valued_option() -> None:
    """Factory should not run when a value is present."""
    calls: list[int] = []

    result = valued("kept").get_or_else(lambda: calls.append(1) or "fallback")

    assert result == "kept"
    assert calls == []


def test_get_or_default_returns_default_for_empty_option() -> None:
    """Empty options should yield the eager default."""
    assert empty().get_or_default(7) == 7


def test_map_transforms_only_present_values() -> None:
    """Map should apply to values and leave empties empty."""
    assert valued(4).map(lambda value: value + 1) == valued(5)
    assert empty().map(lambda value: value + 1) == empty()


def test_get_raises_for_empty_option() -> None:
    """Reading an empty option should fail loudly."""
    with pytest.raises(OptionEmptyError):
        empty().get()


def test_options_support_match_statement() -> None:
    """Options should destructure in match statements."""
    match valued("cell"):
        case Valued(value):
            matched = value
        case _:
            matched = None

    assert matched == "cell"
