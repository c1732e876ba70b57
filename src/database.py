"""SQLite storage for family members and admin events."""

from collections import Counter
from datetime import date
from pathlib import Path
import sqlite3

from models import AdminEvent, Member
from parsing import format_date, parse_iso_date


def create_database(db_path: Path) -> sqlite3.Connection:
    """Create SQLite database with family_member and event tables."""
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS family_member (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            birth_date TEXT,
            death_date TEXT,
            gender TEXT NOT NULL,
            parent_id INTEGER,
            spouse_id INTEGER,
            generation INTEGER NOT NULL DEFAULT 0,
            anniversary_date TEXT,
            avatar TEXT NOT NULL DEFAULT '',
            nickname TEXT NOT NULL DEFAULT '',
            email TEXT,
            occupation TEXT NOT NULL DEFAULT '',
            location TEXT NOT NULL DEFAULT ''
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS event (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            description TEXT,
            date TEXT NOT NULL,
            location TEXT,
            event_type TEXT NOT NULL DEFAULT 'event'
        )
    """)

    conn.commit()
    return conn


def _date_or_none(d: date | None) -> str | None:
    return format_date(d) if d is not None else None


def store_members(conn: sqlite3.Connection, members: list[Member]):
    """
    Insert or replace members. Duplicate ids within the batch are rejected
    rather than letting the last record silently replace the others.
    """
    duplicates = sorted(i for i, n in Counter(m.id for m in members).items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate member ids: {duplicates}")

    cursor = conn.cursor()
    cursor.executemany(
        """
        INSERT OR REPLACE INTO family_member
        (id, name, birth_date, death_date, gender, parent_id, spouse_id, generation,
         anniversary_date, avatar, nickname, email, occupation, location)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (
                m.id,
                m.name,
                _date_or_none(m.birth_date),
                _date_or_none(m.death_date),
                m.gender,
                m.parent_id,
                m.spouse_id,
                m.generation,
                _date_or_none(m.anniversary_date),
                m.avatar,
                m.nickname,
                m.email,
                m.occupation,
                m.location,
            )
            for m in members
        ],
    )
    conn.commit()


def store_events(conn: sqlite3.Connection, events: list[AdminEvent]):
    cursor = conn.cursor()
    cursor.executemany(
        """
        INSERT INTO event (title, description, date, location, event_type)
        VALUES (?, ?, ?, ?, ?)
        """,
        [
            (e.title, e.description, format_date(e.date), e.location, e.event_type or "event")
            for e in events
        ],
    )
    conn.commit()


def load_members(conn: sqlite3.Connection) -> list[Member]:
    """The member snapshot, ordered by generation then id."""
    cursor = conn.cursor()
    cursor.execute("""
        SELECT id, name, birth_date, death_date, gender, parent_id, spouse_id, generation,
               anniversary_date, avatar, nickname, email, occupation, location
        FROM family_member
        ORDER BY generation, id
    """)
    return [
        Member(
            id=row[0],
            name=row[1],
            birth_date=parse_iso_date(row[2]),
            death_date=parse_iso_date(row[3]),
            gender=row[4],
            parent_id=row[5],
            spouse_id=row[6],
            generation=row[7],
            anniversary_date=parse_iso_date(row[8]),
            avatar=row[9],
            nickname=row[10],
            email=row[11],
            occupation=row[12],
            location=row[13],
        )
        for row in cursor.fetchall()
    ]


def load_events(
    conn: sqlite3.Connection, start: date | None = None, end: date | None = None
) -> list[AdminEvent]:
    """Admin events dated within [start, end] (either bound optional), by date."""
    query = "SELECT title, description, date, location, event_type FROM event"
    clauses = []
    params = []
    # ISO dates compare correctly as strings
    if start is not None:
        clauses.append("date >= ?")
        params.append(format_date(start))
    if end is not None:
        clauses.append("date <= ?")
        params.append(format_date(end))
    if clauses:
        query += " WHERE " + " AND ".join(clauses)
    query += " ORDER BY date, id"

    cursor = conn.cursor()
    cursor.execute(query, params)
    return [
        AdminEvent(
            title=row[0],
            description=row[1],
            date=parse_iso_date(row[2]),
            location=row[3],
            event_type=row[4],
        )
        for row in cursor.fetchall()
    ]
