"""Data classes for family members, admin events and calendar events."""

from dataclasses import dataclass
from datetime import date

GENDERS = ("male", "female", "other")
ADMIN_EVENT_TYPES = ("event", "holiday", "other")
CALENDAR_EVENT_TYPES = ("birthday", "anniversary") + ADMIN_EVENT_TYPES


@dataclass
class Member:
    id: int
    name: str
    birth_date: date | None = None
    death_date: date | None = None
    gender: str = "other"
    parent_id: int | None = None
    spouse_id: int | None = None
    generation: int = 0
    anniversary_date: date | None = None  # explicit, overrides the derived date
    avatar: str = ""
    nickname: str = ""
    email: str | None = None
    occupation: str = ""
    location: str = ""


@dataclass
class AdminEvent:
    title: str
    date: date
    description: str | None = None
    location: str | None = None
    event_type: str | None = "event"


@dataclass
class CalendarEvent:
    type: str  # birthday, anniversary, event, holiday, other
    date: date
    title: str
    # birthday
    member_id: int | None = None
    member_name: str | None = None
    avatar: str | None = None
    birth_date: date | None = None
    age: int | None = None
    # anniversary
    member1_id: int | None = None
    member2_id: int | None = None
    member1_name: str | None = None
    member2_name: str | None = None
    anniversary_date: date | None = None
    years_together: int | None = None
    # dashboard (upcoming) events
    days_until: int | None = None
    # admin events
    description: str | None = None
    location: str | None = None
