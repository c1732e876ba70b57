"""Date handling utilities and GEDCOM import into member records."""

from calendar import monthrange
from datetime import date
from pathlib import Path
import re

from ged4py import GedcomReader

from models import Member


# Month name mappings (handle abbreviations and full names)
MONTH_MAP = {
    "JAN": 1,
    "JANUARY": 1,
    "FEB": 2,
    "FEBRUARY": 2,
    "MAR": 3,
    "MARCH": 3,
    "APR": 4,
    "APRIL": 4,
    "MAY": 5,
    "JUN": 6,
    "JUNE": 6,
    "JUL": 7,
    "JULY": 7,
    "AUG": 8,
    "AUGUST": 8,
    "SEP": 9,
    "SEPT": 9,
    "SEPTEMBER": 9,
    "OCT": 10,
    "OCTOBER": 10,
    "NOV": 11,
    "NOVEMBER": 11,
    "DEC": 12,
    "DECEMBER": 12,
}

GEDCOM_SEX = {"M": "male", "F": "female"}


# ============================================================================
# Calendar dates
# ============================================================================


def last_day_of_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def clamp_date(year: int, month: int, day: int) -> date:
    """
    Build a date, clamping the day to the last valid day of the month.

    A Feb 29 projected onto a non-leap year becomes Feb 28, and a 31st
    projected onto a 30-day month becomes the 30th.
    """
    return date(year, month, min(day, last_day_of_month(year, month)))


def add_years(d: date, years: int) -> date:
    """Shift a date by whole calendar years (Feb 29 clamps to Feb 28)."""
    return clamp_date(d.year + years, d.month, d.day)


def format_date(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def camel_case(name: str) -> str:
    """Field name to JSON key: "member1_id" -> "member1Id"."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def parse_iso_date(value: str | date | None) -> date | None:
    """
    Parse a YYYY-MM-DD string (a trailing time part is ignored).
    Returns None for empty or invalid values.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return value
    match = re.match(r"^\s*(\d{4})-(\d{2})-(\d{2})", str(value))
    if not match:
        return None
    return _make_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def _make_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_string(date_str: str | None) -> date | None:
    """
    Parse a free-form genealogy date string into a date.
    Returns None if the date cannot be parsed.

    Handles formats like:
    - "25 NOV 1954"
    - "1698"
    - "ABOUT 1905"
    - "JAN 1905"
    - "(01-27-1920)"
    - "(02 May1838)"
    - "(04 05 1911)"
    - "(1839-08-29)"
    - "(SEPT. 17,1910)"
    - "(May, 1837)"
    - "(1789?)"
    - "(About:1746-00-00)"
    - "(08 March 1893)"
    - "(April 17, 1850)"

    Missing day or month default to 1.
    """
    if not date_str:
        return None

    # Clean up the string
    s = date_str.strip()
    s = s.strip("()")
    s = s.rstrip("?")
    # Remove qualifiers (ABT, ABOUT, BEF, AFT, EST, CAL, AROUND, etc.) - with optional colon
    s = re.sub(
        r"^(ABT\.?|ABOUT|BEF\.?|BEFORE|AFT\.?|AFTER|EST\.?|CAL\.?|FROM|TO|BET\.?|AND|CIRCA|CA\.?|AROUND):?\s*",
        "",
        s,
        flags=re.IGNORECASE,
    )
    s = s.strip()

    if not s:
        return None

    # YYYY-MM-DD, 00 month/day as defaults
    match = re.match(r"^(\d{4})-(\d{2})-(\d{2})$", s)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _make_date(year, month or 1, day or 1)

    # "25 NOV 1954", "08 March 1893", "11 Aug. 1968", "02 May1838"
    match = re.match(r"^(\d{1,2})\s+([A-Za-z]+)\.?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(2).upper())
        if month:
            return _make_date(int(match.group(3)), month, int(match.group(1)))

    # "NOV 1954", "November 1954", "May, 1837"
    match = re.match(r"^([A-Za-z]+)\.?,?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(1).upper())
        if month:
            return _make_date(int(match.group(2)), month, 1)

    # "1698"
    match = re.match(r"^(\d{4})$", s)
    if match:
        return _make_date(int(match.group(1)), 1, 1)

    # "01-27-1920", "01/27/1920", "04 05 1911" (month first)
    match = re.match(r"^(\d{1,2})[-/\s]+(\d{1,2})[-/\s]+(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), int(match.group(1)), int(match.group(2)))

    # "April 17, 1850", "SEPT. 17,1910", "Oct.12,1929"
    match = re.match(r"^([A-Za-z]+)\.?\s*(\d{1,2}),?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(1).upper())
        if month:
            return _make_date(int(match.group(3)), month, int(match.group(2)))

    return None


# ============================================================================
# GEDCOM import
# ============================================================================


def extract_numeric_id(xref_id: str) -> int:
    """Extract numeric part from GEDCOM xref_id like '@I_347421849@' or 'I674624289'."""
    digits = re.sub(r"[^0-9]", "", xref_id)
    if not digits:
        raise ValueError(f"No numeric ID found in: {xref_id}")
    return int(digits)


def parse_gedcom(filepath: Path) -> GedcomReader:
    """Parse a GEDCOM file and return the reader object."""
    return GedcomReader(str(filepath))


def extract_name(indi) -> str:
    """Extract the display name from an individual record."""
    name_rec = indi.sub_tag("NAME")
    if name_rec is None or name_rec.value is None:
        return "Unknown"

    # ged4py returns NAME as tuple: (given, surname, suffix)
    if isinstance(name_rec.value, tuple):
        parts = [p for p in name_rec.value if p]
        return " ".join(parts) if parts else "Unknown"

    # Fallback: string format "Given /Surname/"
    return " ".join(str(name_rec.value).replace("/", " ").split()) or "Unknown"


def extract_event_date(rec, tag: str) -> date | None:
    """Extract and parse the DATE of an event tag (BIRT, DEAT, MARR)."""
    event = rec.sub_tag(tag)
    if event is None:
        return None
    date_rec = event.sub_tag("DATE")
    if date_rec is None or not date_rec.value:
        return None
    # ged4py may return DateValue objects
    return parse_date_string(str(date_rec.value))


def extract_gender(indi) -> str:
    sex_rec = indi.sub_tag("SEX")
    return GEDCOM_SEX.get(sex_rec.value if sex_rec else None, "other")


def assign_generations(members: list[Member]) -> None:
    """
    Set `generation` as the depth below the root ancestors.

    Members without a parent take their spouse's generation when the spouse
    descends from someone in the snapshot, otherwise they are generation 0.
    """
    by_id = {m.id: m for m in members}
    depths: dict[int, int] = {}

    def depth(member: Member, seen: set[int]) -> int:
        if member.id in depths:
            return depths[member.id]
        if member.id in seen:
            return 0
        seen.add(member.id)

        parent = by_id.get(member.parent_id) if member.parent_id is not None else None
        spouse = by_id.get(member.spouse_id) if member.spouse_id is not None else None
        if parent is not None:
            result = depth(parent, seen) + 1
        elif spouse is not None and spouse.parent_id in by_id:
            result = depth(spouse, seen)
        else:
            result = 0

        depths[member.id] = result
        return result

    for member in members:
        member.generation = depth(member, set())


def family_parent(husband: Member | None, wife: Member | None) -> Member | None:
    """
    The partner children of a family link to through `parent_id`.

    It must be a partner whose `spouse_id` is the other one, so the
    co-parent found through the spouse link is this family's other parent
    and not a partner from another marriage.
    """
    if husband and wife:
        if husband.spouse_id == wife.id:
            return husband
        if wife.spouse_id == husband.id:
            return wife
    return husband or wife


def normalize_data(reader: GedcomReader) -> list[Member]:
    """
    Convert GEDCOM individuals and families into member records.

    Each family links husband and wife through `spouse_id` (first family
    wins) and stores the marriage date as `anniversary_date`. Children point
    at one parent through `parent_id`, chosen by `family_parent`; the other
    parent is reached through the spouse link.
    """
    members: list[Member] = []
    by_id: dict[int, Member] = {}

    for rec in reader.records0("INDI"):
        if rec.xref_id is None:
            continue

        member = Member(
            id=extract_numeric_id(rec.xref_id),
            name=extract_name(rec),
            birth_date=extract_event_date(rec, "BIRT"),
            death_date=extract_event_date(rec, "DEAT"),
            gender=extract_gender(rec),
        )
        members.append(member)
        by_id[member.id] = member

    for rec in reader.records0("FAM"):
        husb = rec.sub_tag("HUSB")
        wife = rec.sub_tag("WIFE")

        husb_member = by_id.get(extract_numeric_id(husb.xref_id)) if husb and husb.xref_id else None
        wife_member = by_id.get(extract_numeric_id(wife.xref_id)) if wife and wife.xref_id else None

        if husb_member and wife_member:
            married = extract_event_date(rec, "MARR")
            for partner, other in ((husb_member, wife_member), (wife_member, husb_member)):
                if partner.spouse_id is None:
                    partner.spouse_id = other.id
                    partner.anniversary_date = married

        parent = family_parent(husb_member, wife_member)
        if parent is None:
            continue
        for child in rec.sub_tags("CHIL"):
            if not child.xref_id:
                continue
            child_member = by_id.get(extract_numeric_id(child.xref_id))
            if child_member is not None and child_member.parent_id is None:
                child_member.parent_id = parent.id

    assign_generations(members)
    return members
