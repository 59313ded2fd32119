"""Unit tests for domain counter helpers."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from core.errors import DataCubeError, DomainCounterError
from cube.domain import (
    DomainCounts,
    add_domain,
    audit_domain,
    count_domain,
    domain_values,
    remove_domain,
)


def _tracked_first_slot() -> DomainCounts:
    counts: DomainCounts = {}
    for position in [(1, 1), (1, 2), (2, 1)]:
        add_domain(counts, position[0])
    return counts


def test_add_domain_counts_occurrences() -> None:
    """Counters should record how many positions carry each coordinate."""
    counts = _tracked_first_slot()

    assert counts == {(1,): 2, (2,): 1}


def test_replacing_coordinate_moves_one_count() -> None:
    """Swapping coordinate 1 for 3 should decrement one and add the other."""
    counts = _tracked_first_slot()

    remove_domain(counts, 1)
    add_domain(counts, 3)

    assert counts == {(1,): 1, (2,): 1, (3,): 1}


def test_remove_domain_drops_exhausted_counter() -> None:
    """The last removal of a coordinate should delete its entry."""
    counts = _tracked_first_slot()

    remove_domain(counts, 2)

    assert (2,) not in counts
    assert 0 not in counts.values()


def test_remove_domain_fails_for_untracked_coordinate() -> None:
    """Removing a coordinate that was never added should fail loudly."""
    counts = _tracked_first_slot()

    with pytest.raises(DomainCounterError) as raised:
        remove_domain(counts, 5)

    assert isinstance(raised.value, DataCubeError)
    assert isinstance(raised.value, LookupError)
    assert counts == {(1,): 2, (2,): 1}


def test_domain_values_unwraps_keys() -> None:
    """Domain values should list distinct coordinates."""
    assert sorted(domain_values(_tracked_first_slot())) == [1, 2]


def test_count_domain_recounts_from_positions() -> None:
    """Recount should match incremental bookkeeping."""
    counts = count_domain([(1, 1), (1, 2), (2, 1)], slot=1)

    assert counts == {(1,): 2, (2,): 1}


def test_audit_domain_accepts_consistent_counters() -> None:
    """Audit should pass silently when counters match the index."""
    audit_domain(_tracked_first_slot(), [(1, 1), (1, 2), (2, 1)], slot=0)


def test_audit_domain_reports_drift() -> None:
    """Audit should name coordinates whose counts drifted."""
    counts = _tracked_first_slot()
    add_domain(counts, 9)

    with pytest.raises(DomainCounterError, match="9"):
        audit_domain(counts, [(1, 1), (1, 2), (2, 1)], slot=0)


def test_remove_domain_logs_missing_counter() -> None:
    """A missing counter should be logged as an error before raising."""
    counts = _tracked_first_slot()

    with capture_logs() as logs:
        with pytest.raises(DomainCounterError):
            remove_domain(counts, 5)

    assert [(log["event"], log["log_level"]) for log in logs] == [
        ("domain_counter_missing", "error")
    ]
    assert logs[0]["coordinate"] == "5"


def test_audit_domain_logs_drifted_slot() -> None:
    """A failed audit should log the slot and drifted coordinates."""
    counts = _tracked_first_slot()
    add_domain(counts, 9)

    with capture_logs() as logs:
        with pytest.raises(DomainCounterError):
            audit_domain(counts, [(1, 1), (1, 2), (2, 1)], slot=0)

    assert logs == [
        {"event": "domain_audit_failed", "log_level": "error", "slot": 0, "drifted": ["9"]}
    ]
