"""Dashboard summary: member counts and upcoming family events."""

from datetime import date

from events import event_to_dict
from models import Member
from projection import upcoming_anniversaries, upcoming_birthdays


def dashboard_stats(members: list[Member], today: date) -> dict:
    return {
        "totalMembers": len(members),
        "totalGenerations": len({m.generation for m in members}),
        "upcomingBirthdays": [event_to_dict(e) for e in upcoming_birthdays(members, today)],
        "upcomingAnniversaries": [
            event_to_dict(e) for e in upcoming_anniversaries(members, today)
        ],
    }
