"""Projection of yearly recurring events (birthdays, anniversaries) onto concrete dates."""

from datetime import date

from anniversary import anniversary_reference
from index import MemberIndex
from models import CalendarEvent, Member
from parsing import clamp_date

UPCOMING_HORIZON_DAYS = 30
UPCOMING_LIMIT = 5


def check_month(month: int) -> None:
    """Months are 1-12 throughout."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")


def birthday_event(member: Member, on: date) -> CalendarEvent:
    return CalendarEvent(
        type="birthday",
        date=on,
        title=f"{member.name}'s Birthday",
        member_id=member.id,
        member_name=member.name,
        avatar=member.avatar,
        birth_date=member.birth_date,
        age=on.year - member.birth_date.year,
    )


def anniversary_event(member: Member, spouse: Member, reference: date, on: date) -> CalendarEvent:
    return CalendarEvent(
        type="anniversary",
        date=on,
        title=f"{member.name} & {spouse.name}'s Anniversary",
        member1_id=member.id,
        member2_id=spouse.id,
        member1_name=member.name,
        member2_name=spouse.name,
        anniversary_date=reference,
        years_together=on.year - reference.year,
    )


def _living_with_birthday(members: list[Member]):
    for member in members:
        if member.birth_date is not None and member.death_date is None:
            yield member


def _couples(members: list[Member]):
    """
    Yield (member, spouse, reference_date) once per couple.

    Pairs are keyed by the sorted id tuple, so a symmetric spouse link
    is only visited from whichever partner comes first in the snapshot.
    """
    index = MemberIndex.build(members)
    processed: set[tuple[int, int]] = set()

    for member in members:
        if member.spouse_id is None:
            continue

        pair_key = tuple(sorted((member.id, member.spouse_id)))
        if pair_key in processed:
            continue

        spouse = index.by_id(member.spouse_id)
        if spouse is None:
            continue
        processed.add(pair_key)

        reference = anniversary_reference(index, member)
        if reference is None:
            continue

        yield member, spouse, reference


def project_birthdays(members: list[Member], month: int, year: int) -> list[CalendarEvent]:
    """
    Birthdays of living members falling in (month, year), in snapshot order.
    Years before the birth year have none.
    """
    check_month(month)
    return [
        birthday_event(member, clamp_date(year, month, member.birth_date.day))
        for member in _living_with_birthday(members)
        if member.birth_date.month == month and year >= member.birth_date.year
    ]


def project_anniversaries(members: list[Member], month: int, year: int) -> list[CalendarEvent]:
    """
    Couple anniversaries falling in (month, year), one event per couple.
    Years before the anniversary date itself have none.
    """
    check_month(month)
    return [
        anniversary_event(member, spouse, reference, clamp_date(year, month, reference.day))
        for member, spouse, reference in _couples(members)
        if reference.month == month and year >= reference.year
    ]


# ============================================================================
# Upcoming events (dashboard)
# ============================================================================


def next_occurrence(reference: date, today: date) -> date:
    """The first yearly recurrence of `reference` on or after `today`."""
    occurrence = clamp_date(today.year, reference.month, reference.day)
    if occurrence < today:
        occurrence = clamp_date(today.year + 1, reference.month, reference.day)
    return occurrence


def _closest(events: list[CalendarEvent], horizon_days: int, limit: int) -> list[CalendarEvent]:
    within = [e for e in events if e.days_until <= horizon_days]
    within.sort(key=lambda e: e.days_until)
    return within[:limit]


def upcoming_birthdays(
    members: list[Member],
    today: date,
    horizon_days: int = UPCOMING_HORIZON_DAYS,
    limit: int = UPCOMING_LIMIT,
) -> list[CalendarEvent]:
    """The next `limit` birthdays within `horizon_days` of today, soonest first."""
    events = []
    for member in _living_with_birthday(members):
        occurrence = next_occurrence(member.birth_date, today)
        if occurrence.year < member.birth_date.year:
            continue
        event = birthday_event(member, occurrence)
        event.days_until = (event.date - today).days
        events.append(event)
    return _closest(events, horizon_days, limit)


def upcoming_anniversaries(
    members: list[Member],
    today: date,
    horizon_days: int = UPCOMING_HORIZON_DAYS,
    limit: int = UPCOMING_LIMIT,
) -> list[CalendarEvent]:
    """The next `limit` couple anniversaries within `horizon_days` of today."""
    events = []
    for member, spouse, reference in _couples(members):
        occurrence = next_occurrence(reference, today)
        if occurrence.year < reference.year:
            continue
        event = anniversary_event(member, spouse, reference, occurrence)
        event.days_until = (event.date - today).days
        events.append(event)
    return _closest(events, horizon_days, limit)
