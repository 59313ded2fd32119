"""Optional value type.

This module defines a small sum type over a present value or absence.
Cube lookups return it instead of None so stored None values stay visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from core.errors import OptionEmptyError

T = TypeVar("T")
R = TypeVar("R")


class Option(Generic[T]):
    """Either a ``Valued`` wrapper or ``Empty``."""

    __slots__ = ()

    @property
    def is_valued(self) -> bool:
        return isinstance(self, Valued)

    @property
    def is_empty(self) -> bool:
        return not self.is_valued

    def match(self, if_valued: Callable[[T], R], if_empty: Callable[[], R]) -> R:
        """Apply exactly one of the two branches.

        Args:
            if_valued: Called with the wrapped value when present.
            if_empty: Called without arguments when absent.

        Returns:
            Result of the invoked branch.
        """
        if isinstance(self, Valued):
            return if_valued(self.value)
        return if_empty()

    def get_or_else(self, factory: Callable[[], T]) -> T:
        """Return the value, or the result of ``factory`` when empty."""
        return self.match(lambda value: value, factory)

    def get_or_default(self, default: T) -> T:
        """Return the value, or ``default`` when empty."""
        return self.match(lambda value: value, lambda: default)

    def get(self) -> T:
        """Return the value.

        Raises:
            OptionEmptyError: If the option is empty.
        """
        return self.match(lambda value: value, _raise_empty)

    def map(self, mapper: Callable[[T], R]) -> "Option[R]":
        return self.match(lambda value: Valued(mapper(value)), empty)


@dataclass(frozen=True)
class Valued(Option[T]):
    """Present value."""

    value: T


@dataclass(frozen=True)
class Empty(Option[T]):
    """Absent value."""


def valued(value: T) -> Option[T]:
    """Wrap a present value."""
    return Valued(value)


def empty() -> Option[T]:
    """Return an empty option."""
    return Empty()


def _raise_empty() -> T:
    raise OptionEmptyError("Option is empty; use get_or_else or match to handle absence.")
