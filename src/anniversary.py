"""Anniversary dates for couples."""

from datetime import date

from index import MemberIndex
from models import Member
from parsing import add_years

# Wedding dates are not part of the base member record; couples without an
# explicit anniversary get one this many years after the earlier birth date.
FALLBACK_ANNIVERSARY_YEARS = 25


def derive_anniversary(index: MemberIndex, member_id: int) -> date | None:
    """
    Fallback anniversary: the earlier of the two partners' birth dates
    plus FALLBACK_ANNIVERSARY_YEARS. None when the member, the spouse or
    either birth date is missing.
    """
    member = index.by_id(member_id)
    if member is None:
        return None
    spouse = index.by_id(member.spouse_id)
    if spouse is None:
        return None
    if member.birth_date is None or spouse.birth_date is None:
        return None

    earlier = min(member.birth_date, spouse.birth_date)
    return add_years(earlier, FALLBACK_ANNIVERSARY_YEARS)


def anniversary_reference(index: MemberIndex, member: Member) -> date | None:
    """The stored anniversary date if any, else the derived one."""
    if member.anniversary_date is not None:
        return member.anniversary_date
    return derive_anniversary(index, member.id)
