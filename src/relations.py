"""Relationships derived from the parent_id / spouse_id links of a snapshot."""

from dataclasses import asdict
from datetime import date

from index import MemberIndex
from models import Member
from parsing import camel_case, format_date


def get_parents(index: MemberIndex, member_id: int) -> list[Member]:
    """
    Return the member's parents: the linked parent first, then that
    parent's spouse as co-parent when the spouse is in the snapshot.
    """
    member = index.by_id(member_id)
    if member is None or member.parent_id is None:
        return []

    parent = index.by_id(member.parent_id)
    if parent is None:
        return []

    co_parent = index.by_id(parent.spouse_id)
    return [parent, co_parent] if co_parent is not None else [parent]


def get_spouse(index: MemberIndex, member_id: int) -> Member | None:
    member = index.by_id(member_id)
    if member is None:
        return None
    return index.by_id(member.spouse_id)


def get_children(index: MemberIndex, member_id: int) -> list[Member]:
    """Members whose parent_id is member_id, in snapshot order."""
    return [m for m in index.members if m.parent_id == member_id]


def get_siblings(index: MemberIndex, member_id: int) -> list[Member]:
    """Members sharing the member's parent_id, excluding the member itself."""
    member = index.by_id(member_id)
    if member is None or member.parent_id is None:
        return []

    return [
        m for m in index.members if m.id != member_id and m.parent_id == member.parent_id
    ]


def members_by_generation(members: list[Member], generation: int) -> list[Member]:
    return sorted((m for m in members if m.generation == generation), key=lambda m: m.id)


def search_members(members: list[Member], text: str | None) -> list[Member]:
    """
    Members whose name or email contains `text`, ignoring case, ordered by
    generation then id. Blank text lists everyone.
    """
    needle = (text or "").strip().casefold()
    found = [
        m
        for m in members
        if not needle or needle in m.name.casefold() or needle in (m.email or "").casefold()
    ]
    return sorted(found, key=lambda m: (m.generation, m.id))


def member_to_dict(member: Member) -> dict:
    """Serialize a member with camelCase keys and YYYY-MM-DD dates."""
    return {
        camel_case(key): format_date(value) if isinstance(value, date) else value
        for key, value in asdict(member).items()
    }


def member_profile(index: MemberIndex, member_id: int) -> dict | None:
    """
    Base member fields plus `parents`, `spouse` and `children`.
    Returns None when the member is not in the snapshot.
    """
    member = index.by_id(member_id)
    if member is None:
        return None

    spouse = get_spouse(index, member_id)
    profile = member_to_dict(member)
    profile["parents"] = [member_to_dict(p) for p in get_parents(index, member_id)]
    profile["spouse"] = member_to_dict(spouse) if spouse is not None else None
    profile["children"] = [member_to_dict(c) for c in get_children(index, member_id)]
    return profile
