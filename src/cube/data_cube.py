"""Generic sparse data cube.

This module defines the position-to-value container used by every cube.
Positions are hashable tuples compared structurally; values are opaque.
Iteration order over the index is not part of the contract.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, ItemsView, KeysView, TypeVar, ValuesView

from core.logging_config import get_logger
from core.option import Option, empty, valued

PositionT = TypeVar("PositionT", bound=Hashable)
NewPositionT = TypeVar("NewPositionT", bound=Hashable)
ValueT = TypeVar("ValueT")

Aggregator = Callable[[ValueT, ValueT], ValueT]

_LOGGER = get_logger(__name__)


class DataCube(Generic[PositionT, ValueT]):
    """Sparse mapping from positions to values.

    ``set`` is the only raw write into the index, and ``remove`` the only
    raw delete. Subclasses that keep per-axis domain counters override
    both so every other mutation stays in lockstep with the counters.
    The cube is not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._index: dict[PositionT, ValueT] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, position: object) -> bool:
        return position in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._index!r})"

    def is_empty(self) -> bool:
        """Return whether the cube holds no values."""
        return not self._index

    def contains(self, position: PositionT) -> bool:
        """Return whether a value is stored at ``position``."""
        return position in self._index

    def positions(self) -> KeysView[PositionT]:
        """Live view over positions of all stored values."""
        return self._index.keys()

    def values(self) -> ValuesView[ValueT]:
        """Live view over all stored values."""
        return self._index.values()

    def items(self) -> ItemsView[PositionT, ValueT]:
        """Live view over ``(position, value)`` pairs."""
        return self._index.items()

    def get(self, position: PositionT) -> Option[ValueT]:
        """Return the value at ``position`` wrapped in an option.

        Args:
            position: Position to look up.

        Returns:
            ``Valued`` with the stored value, or ``Empty`` when absent.
        """
        if position in self._index:
            return valued(self._index[position])
        return empty()

    def get_or_else_set(self, position: PositionT, setter: Callable[[], ValueT]) -> ValueT:
        """Return the value at ``position``, storing ``setter()`` if absent.

        Args:
            position: Position to look up.
            setter: Called at most once, only when ``position`` is absent.

        Returns:
            The existing value or the newly stored one.
        """
        return self.get(position).get_or_else(lambda: self.set(position, setter()))

    def set(self, position: PositionT, value: ValueT) -> ValueT:
        """Store ``value`` at ``position``, overwriting any present value.

        Args:
            position: Target position.
            value: Value to store.

        Returns:
            The stored value.
        """
        self._index[position] = value
        return value

    def set_or_else_update(
        self,
        position: PositionT,
        value: ValueT,
        updater: Aggregator[ValueT],
    ) -> ValueT:
        """Store ``value``, or combine it with the value already present.

        The container assumes nothing about ``updater``; it is applied once
        as ``updater(existing, value)`` when ``position`` is occupied.

        Args:
            position: Target position.
            value: Incoming value.
            updater: Combines the present value with the incoming one.

        Returns:
            The stored value.
        """
        return self.set(
            position,
            self.get(position).match(
                lambda existing: updater(existing, value),
                lambda: value,
            ),
        )

    def remove(self, position: PositionT) -> Option[ValueT]:
        """Delete the value at ``position``.

        Args:
            position: Position to clear.

        Returns:
            The removed value, or ``Empty`` when nothing was stored.
        """
        if position not in self._index:
            return empty()
        return valued(self._index.pop(position))

    def for_each(self, visitor: Callable[[PositionT, ValueT], object]) -> None:
        """Invoke ``visitor(position, value)`` once for every stored value.

        The visitor must not mutate this cube.
        """
        for position, value in self._index.items():
            visitor(position, value)

    def transform(
        self,
        position_mapper: Callable[[PositionT], NewPositionT],
        aggregator: Aggregator[ValueT],
        cube_factory: Callable[[], "DataCube[NewPositionT, ValueT]"] | None = None,
    ) -> "DataCube[NewPositionT, ValueT]":
        """Project this cube into a new position space.

        Every value is stored in a fresh cube at ``position_mapper(position)``.
        Values whose positions map onto the same new position are folded
        with ``aggregator`` in this cube's iteration order, so the result is
        deterministic only when ``aggregator`` is commutative and associative.

        Args:
            position_mapper: Maps positions of this cube to new positions.
            aggregator: Combines colliding values.
            cube_factory: Builds the empty result cube. Defaults to ``DataCube``.

        Returns:
            The newly built cube.
        """
        factory = cube_factory if cube_factory is not None else DataCube
        result = factory()
        self.for_each(
            lambda position, value: result.set_or_else_update(
                position_mapper(position), value, aggregator
            )
        )
        _LOGGER.debug(
            "cube_transformed",
            source_type=type(self).__name__,
            result_type=type(result).__name__,
            source_size=len(self),
            result_size=len(result),
        )
        return result
