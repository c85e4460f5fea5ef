"""Tests for per-tenant session state."""

from __future__ import annotations

import pytest

from prizedraw.errors import ValidationError
from prizedraw.models import TenantSession


@pytest.fixture
def session() -> TenantSession:
    return TenantSession("tenant-a", now=0.0)


def test_duplicate_participant_id_keeps_first(session):
    assert session.add_participant("1", "Alice") is True
    assert session.add_participant("1", "Mallory") is False

    participants = session.participants
    assert len(participants) == 1
    assert participants[0].name == "Alice"


def test_duplicate_prize_names_allowed_and_first_wins(session):
    session.add_prize("Grand", "TV", 1, False)
    session.add_prize("Grand", "Car", 3, True)

    assert len(session.prizes) == 2
    found = session.find_prize("Grand")
    assert found is not None
    assert found.item == "TV"


def test_negative_quantity_rejected(session):
    with pytest.raises(ValidationError):
        session.add_prize("Broken", "Nothing", -1, False)
    assert session.prizes == []


def test_accessors_return_snapshots(session):
    session.add_prize("Grand", "TV", 1, False)
    session.add_participant("1", "Alice")

    session.prizes[0].quantity = 99
    session.participants.clear()

    assert session.prizes[0].quantity == 1
    assert len(session.participants) == 1


def test_record_win_accumulates(session):
    session.record_win("1", "Grand")
    session.record_win("1", "Special")
    session.record_win("1", "Grand")

    assert session.wins_of("1") == frozenset({"Grand", "Special"})
    assert session.wins_of("2") == frozenset()


def test_find_missing_prize_returns_none(session):
    assert session.find_prize("Nope") is None
