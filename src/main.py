"""
1) Import the family from the "family.ged" GEDCOM file (if present) into SQLite.
2) Load the member snapshot and this month's admin events from SQLite.
3) Validate the snapshot for dangling links, cycles and impossible dates.
4) Print this month's calendar and the dashboard's upcoming events.
5) Plot the family tree.
"""

from datetime import date
from pathlib import Path

from database import create_database, load_events, load_members, store_members
from dashboard import dashboard_stats
from events import aggregate, month_bounds
from graph import build_graph
from parsing import format_date, normalize_data, parse_gedcom
from plotting import plot_graph
from validation import validate_members


def main():
    # Paths
    project_root = Path(__file__).parent.parent
    gedcom_path = project_root / "family.ged"
    db_path = project_root / "family_tree.db"
    plot_path = project_root / "family_tree.png"
    today = date.today()

    conn = create_database(db_path)

    if gedcom_path.exists():
        print(f"Importing GEDCOM file: {gedcom_path}")
        members = normalize_data(parse_gedcom(gedcom_path))
        print(f"  Found {len(members)} members")
        store_members(conn, members)

    print(f"Loading snapshot from: {db_path}")
    members = load_members(conn)
    admin_events = load_events(conn, *month_bounds(today.month, today.year))
    print(f"  {len(members)} members, {len(admin_events)} admin events this month")

    print("Validating snapshot...")
    warnings = validate_members(members)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    print(f"Calendar for {today.year}-{today.month:02d}:")
    for event in aggregate(members, admin_events, today.month, today.year):
        print(f"  {format_date(event.date)}  [{event.type}] {event.title}")

    stats = dashboard_stats(members, today)
    print(f"{stats['totalMembers']} members across {stats['totalGenerations']} generations")
    for key in ("upcomingBirthdays", "upcomingAnniversaries"):
        for event in stats[key]:
            print(f"  in {event['daysUntil']} days: {event['title']}")

    if members:
        print(f"Plotting family tree to: {plot_path}")
        plot_graph(build_graph(members), plot_path)

    conn.close()
    print("Done!")


if __name__ == "__main__":
    main()
