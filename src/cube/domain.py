"""Domain counter helpers for fixed-arity cubes.

A domain counter map records, for one coordinate slot, how many stored
positions carry each coordinate value. Keys are 1-tuples ``(coordinate,)``
and no zero counts are kept. Subclasses call ``add_domain`` for every
inserted position and ``remove_domain`` for every removed one; the
generic cube does not know which slots a subclass tracks.

These helpers are internal to the cube package and are not re-exported
from the public ``datacube`` module.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable

from core.errors import DomainCounterError
from core.logging_config import get_logger

DomainCounts = dict[tuple[Any], int]

_LOGGER = get_logger(__name__)


def add_domain(counts: DomainCounts, coordinate: Hashable) -> None:
    """Record one more stored position carrying ``coordinate``.

    Args:
        counts: Counter map of one tracked slot.
        coordinate: Coordinate value of the inserted position in that slot.
    """
    key = (coordinate,)
    counts[key] = counts.get(key, 0) + 1


def remove_domain(counts: DomainCounts, coordinate: Hashable) -> None:
    """Record one fewer stored position carrying ``coordinate``.

    The entry is deleted once its count reaches zero.

    Args:
        counts: Counter map of one tracked slot.
        coordinate: Coordinate value of the removed position in that slot.

    Raises:
        DomainCounterError: If ``coordinate`` has no counter, meaning the
            counters no longer reflect the index.
    """
    key = (coordinate,)
    if key not in counts:
        _LOGGER.error("domain_counter_missing", coordinate=repr(coordinate))
        raise DomainCounterError(
            f"No domain counter for coordinate {coordinate!r}: "
            "remove_domain must pair with an earlier add_domain."
        )
    count = counts[key]
    if count == 1:
        del counts[key]
    else:
        counts[key] = count - 1


def domain_values(counts: DomainCounts) -> tuple[Any, ...]:
    """Return the distinct coordinate values recorded in ``counts``."""
    return tuple(key[0] for key in counts)


def count_domain(positions: Iterable[tuple[Any, ...]], slot: int) -> DomainCounts:
    """Recount a slot's domain directly from stored positions.

    Args:
        positions: Positions currently in the index.
        slot: Zero-based coordinate slot to count.

    Returns:
        Fresh counter map for the slot.
    """
    counts: DomainCounts = {}
    for position in positions:
        add_domain(counts, position[slot])
    return counts


def audit_domain(
    counts: DomainCounts,
    positions: Iterable[tuple[Any, ...]],
    slot: int,
) -> None:
    """Check maintained counters of one slot against a full recount.

    Args:
        counts: Maintained counter map of the slot.
        positions: Positions currently in the index.
        slot: Zero-based coordinate slot the counters track.

    Raises:
        DomainCounterError: If the maintained counters differ.
    """
    expected = count_domain(positions, slot)
    if counts == expected:
        return
    drifted = sorted(
        repr(key[0])
        for key in set(counts) | set(expected)
        if counts.get(key) != expected.get(key)
    )
    _LOGGER.error("domain_audit_failed", slot=slot, drifted=drifted)
    raise DomainCounterError(
        f"Domain counters for slot {slot} drifted from the index "
        f"at coordinates: {', '.join(drifted)}."
    )
