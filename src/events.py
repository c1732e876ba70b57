"""Calendar aggregation: recurring family events merged with admin events."""

from dataclasses import asdict
from datetime import date

from models import AdminEvent, CalendarEvent, Member
from parsing import camel_case, format_date, last_day_of_month
from projection import check_month, project_anniversaries, project_birthdays

# Fields serialized for every event, then per type.
COMMON_FIELDS = ("type", "date", "title")
TYPE_FIELDS = {
    "birthday": ("member_id", "member_name", "avatar", "birth_date", "age"),
    "anniversary": (
        "member1_id",
        "member2_id",
        "member1_name",
        "member2_name",
        "anniversary_date",
        "years_together",
    ),
}
ADMIN_FIELDS = ("description", "location")


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """First and last day of the month, both inclusive."""
    check_month(month)
    return date(year, month, 1), date(year, month, last_day_of_month(year, month))


def admin_calendar_events(admin_events: list[AdminEvent], month: int, year: int) -> list[CalendarEvent]:
    """Admin events dated inside the month, in input order."""
    start, end = month_bounds(month, year)
    return [
        CalendarEvent(
            type=event.event_type or "event",
            date=event.date,
            title=event.title,
            description=event.description,
            location=event.location,
        )
        for event in admin_events
        if start <= event.date <= end
    ]


def aggregate(
    members: list[Member],
    admin_events: list[AdminEvent],
    month: int,
    year: int,
    include_birthdays: bool = True,
    include_anniversaries: bool = True,
) -> list[CalendarEvent]:
    """
    All calendar events for (month, year), sorted by date.

    The sort is stable, so events sharing a date keep the order
    birthdays, anniversaries, admin events.
    """
    events: list[CalendarEvent] = []
    if include_birthdays:
        events.extend(project_birthdays(members, month, year))
    if include_anniversaries:
        events.extend(project_anniversaries(members, month, year))
    events.extend(admin_calendar_events(admin_events, month, year))

    events.sort(key=lambda e: e.date)
    return events


def event_key(event: CalendarEvent) -> tuple:
    """Identity of an event, for callers grouping same-day events."""
    if event.type == "birthday":
        return (event.type, event.date, event.member_id)
    if event.type == "anniversary":
        return (event.type, event.date, event.member1_id, event.member2_id)
    return (event.type, event.date, event.title)


def event_to_dict(event: CalendarEvent) -> dict:
    """
    JSON-ready event: camelCase keys, YYYY-MM-DD dates, and only the fields
    belonging to the event's type.
    """
    data = asdict(event)
    fields = COMMON_FIELDS + TYPE_FIELDS.get(event.type, ADMIN_FIELDS)
    if event.days_until is not None:
        fields += ("days_until",)

    out = {}
    for field in fields:
        value = data[field]
        out[camel_case(field)] = format_date(value) if isinstance(value, date) else value
    return out


def calendar_response(events: list[CalendarEvent], month: int, year: int) -> dict:
    return {
        "success": True,
        "month": month,
        "year": year,
        "count": len(events),
        "data": [event_to_dict(e) for e in events],
    }
