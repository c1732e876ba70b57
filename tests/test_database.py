from datetime import date

import pytest

from database import create_database, load_events, load_members, store_events, store_members
from models import AdminEvent, Member


def test_members_round_trip_through_sqlite(tmp_path, family):
    conn = create_database(tmp_path / "family.db")
    store_members(conn, family)

    loaded = load_members(conn)
    conn.close()

    assert loaded == sorted(family, key=lambda m: (m.generation, m.id))
    assert loaded[0].anniversary_date == date(1975, 6, 20)
    assert next(m for m in loaded if m.id == 8).death_date == date(1981, 11, 1)


def test_store_members_rejects_duplicate_ids(tmp_path):
    conn = create_database(tmp_path / "family.db")

    with pytest.raises(ValueError, match="Duplicate member ids: \\[2\\]"):
        store_members(conn, [Member(1, "A"), Member(2, "B"), Member(2, "C")])

    assert load_members(conn) == []
    conn.close()


def test_store_members_replaces_existing_record(tmp_path):
    conn = create_database(tmp_path / "family.db")
    store_members(conn, [Member(1, "Old name", date(1990, 1, 1))])
    store_members(conn, [Member(1, "New name", date(1990, 1, 1))])

    assert [m.name for m in load_members(conn)] == ["New name"]
    conn.close()


def test_load_events_filters_by_inclusive_range(tmp_path):
    conn = create_database(tmp_path / "family.db")
    store_events(conn, [
        AdminEvent("Last of May", date(2024, 5, 31)),
        AdminEvent("Midsummer", date(2024, 6, 21), "Bonfire", "Beach", "holiday"),
        AdminEvent("First of June", date(2024, 6, 1), event_type=None),
        AdminEvent("End of June", date(2024, 6, 30)),
    ])

    june = load_events(conn, date(2024, 6, 1), date(2024, 6, 30))
    assert [e.title for e in june] == ["First of June", "Midsummer", "End of June"]
    assert june[0].event_type == "event"
    assert june[1] == AdminEvent("Midsummer", date(2024, 6, 21), "Bonfire", "Beach", "holiday")

    assert len(load_events(conn)) == 4
    assert [e.title for e in load_events(conn, end=date(2024, 5, 31))] == ["Last of May"]
    conn.close()
