from datetime import date

from dashboard import dashboard_stats


def test_dashboard_stats(family):
    stats = dashboard_stats(family, date(2024, 6, 1))

    assert stats["totalMembers"] == 8
    assert stats["totalGenerations"] == 2
    assert stats["upcomingBirthdays"] == [
        {
            "type": "birthday",
            "date": "2024-06-15",
            "title": "Charlie's Birthday",
            "memberId": 4,
            "memberName": "Charlie",
            "avatar": "",
            "birthDate": "1977-06-15",
            "age": 47,
            "daysUntil": 14,
        }
    ]
    assert [e["daysUntil"] for e in stats["upcomingAnniversaries"]] == [19]
    assert stats["upcomingAnniversaries"][0]["date"] == "2024-06-20"


def test_dashboard_stats_empty_family():
    stats = dashboard_stats([], date(2024, 6, 1))
    assert stats == {
        "totalMembers": 0,
        "totalGenerations": 0,
        "upcomingBirthdays": [],
        "upcomingAnniversaries": [],
    }
