"""Fixed-arity cubes with per-axis domains.

Each cube keeps one domain counter map per coordinate slot, updated in
lockstep with the index, so ``domain(slot)`` answers which coordinate
values occur along an axis without scanning stored positions.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Hashable, TypeVar

from core.config import CubeConfig, load_config
from core.errors import CubeArityError
from core.option import Option
from cube.data_cube import Aggregator, DataCube
from cube.domain import DomainCounts, add_domain, audit_domain, domain_values, remove_domain

ValueT = TypeVar("ValueT")
FixedCubeT = TypeVar("FixedCubeT", bound="FixedArityCube[Any]")

Position = tuple[Hashable, ...]


class FixedArityCube(DataCube[Position, ValueT]):
    """Cube whose positions are tuples of exactly ``arity`` coordinates."""

    arity: ClassVar[int] = 0

    def __init__(self, config: CubeConfig | None = None) -> None:
        super().__init__()
        self._config = config if config is not None else load_config()
        self._domains: tuple[DomainCounts, ...] = tuple({} for _ in range(self.arity))

    def set(self, position: Position, value: ValueT) -> ValueT:
        """Store ``value`` at ``position`` and count new coordinates.

        Raises:
            CubeArityError: If ``position`` has the wrong number of coordinates.
        """
        self._require_arity(position)
        if position not in self._index:
            for counts, coordinate in zip(self._domains, position):
                add_domain(counts, coordinate)
        super().set(position, value)
        self._audit()
        return value

    def remove(self, position: Position) -> Option[ValueT]:
        """Delete the value at ``position`` and release its coordinates."""
        removed = super().remove(position)
        if removed.is_valued:
            for counts, coordinate in zip(self._domains, position):
                remove_domain(counts, coordinate)
            self._audit()
        return removed

    def domain(self, slot: int) -> tuple[Any, ...]:
        """Return distinct coordinate values stored along zero-based ``slot``."""
        return domain_values(self._domains[self._require_slot(slot)])

    def slice(self: FixedCubeT, slot: int, coordinate: Hashable) -> FixedCubeT:
        """Return a cube holding only entries whose ``slot`` equals ``coordinate``.

        Args:
            slot: Zero-based coordinate slot.
            coordinate: Coordinate value to keep.

        Returns:
            New cube of the same type and arity.
        """
        self._require_slot(slot)
        result = type(self)(self._config)
        for position, value in self._index.items():
            if position[slot] == coordinate:
                result.set(position, value)
        return result

    def roll_up(self, slot: int, aggregator: Aggregator[ValueT]) -> DataCube[Position, ValueT]:
        """Drop one axis, folding values that collide with ``aggregator``.

        Args:
            slot: Zero-based coordinate slot to remove.
            aggregator: Combines values that share the remaining coordinates.

        Returns:
            Cube of the next lower arity.

        Raises:
            CubeArityError: If this cube has a single axis.
        """
        self._require_slot(slot)
        lower_cube = _LOWER_ARITY_CUBES.get(self.arity)
        if lower_cube is None:
            raise CubeArityError(
                f"Cannot roll up {type(self).__name__}: it has no lower-arity cube."
            )
        config = self._config
        return self.transform(
            lambda position: position[:slot] + position[slot + 1 :],
            aggregator,
            cube_factory=lambda: lower_cube(config),
        )

    def _require_arity(self, position: Position) -> None:
        if not isinstance(position, tuple) or len(position) != self.arity:
            raise CubeArityError(
                f"{type(self).__name__} expects positions of {self.arity} coordinates, "
                f"got {position!r}."
            )

    def _require_slot(self, slot: int) -> int:
        if not 0 <= slot < self.arity:
            raise CubeArityError(
                f"{type(self).__name__} has slots 0..{self.arity - 1}, got {slot}."
            )
        return slot

    def _audit(self) -> None:
        if not self._config.audit_domains:
            return
        for slot, counts in enumerate(self._domains):
            audit_domain(counts, self._index, slot)


class DataCube1(FixedArityCube[ValueT]):
    """Cube over one-coordinate positions ``(first,)``."""

    arity = 1

    def domain1(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the first axis."""
        return self.domain(0)

    def contains_at(self, first: Hashable) -> bool:
        """Return whether a value is stored at the given coordinates."""
        return self.contains((first,))

    def get_at(self, first: Hashable) -> Option[ValueT]:
        """Return the value at the given coordinates wrapped in an option."""
        return self.get((first,))

    def set_at(self, first: Hashable, value: ValueT) -> ValueT:
        """Store ``value`` at the given coordinates."""
        return self.set((first,), value)


class DataCube2(FixedArityCube[ValueT]):
    """Cube over two-coordinate positions ``(first, second)``."""

    arity = 2

    def domain1(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the first axis."""
        return self.domain(0)

    def domain2(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the second axis."""
        return self.domain(1)

    def contains_at(self, first: Hashable, second: Hashable) -> bool:
        """Return whether a value is stored at the given coordinates."""
        return self.contains((first, second))

    def get_at(self, first: Hashable, second: Hashable) -> Option[ValueT]:
        """Return the value at the given coordinates wrapped in an option."""
        return self.get((first, second))

    def set_at(self, first: Hashable, second: Hashable, value: ValueT) -> ValueT:
        """Store ``value`` at the given coordinates."""
        return self.set((first, second), value)


class DataCube3(FixedArityCube[ValueT]):
    """Cube over three-coordinate positions ``(first, second, third)``."""

    arity = 3

    def domain1(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the first axis."""
        return self.domain(0)

    def domain2(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the second axis."""
        return self.domain(1)

    def domain3(self) -> tuple[Any, ...]:
        """Return distinct coordinates along the third axis."""
        return self.domain(2)

    def contains_at(self, first: Hashable, second: Hashable, third: Hashable) -> bool:
        """Return whether a value is stored at the given coordinates."""
        return self.contains((first, second, third))

    def get_at(self, first: Hashable, second: Hashable, third: Hashable) -> Option[ValueT]:
        """Return the value at the given coordinates wrapped in an option."""
        return self.get((first, second, third))

    def set_at(self, first: Hashable, second: Hashable, third: Hashable, value: ValueT) -> ValueT:
        """Store ``value`` at the given coordinates."""
        return self.set((first, second, third), value)


_LOWER_ARITY_CUBES: dict[int, Callable[[CubeConfig], FixedArityCube[Any]]] = {
    2: DataCube1,
    3: DataCube2,
}
