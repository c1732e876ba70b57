from datetime import date

from index import MemberIndex
from models import Member
from relations import (
    get_children,
    get_parents,
    get_siblings,
    get_spouse,
    member_profile,
    members_by_generation,
    search_members,
)


def _names(members):
    return [m.name for m in members]


def test_index_lookup_and_last_duplicate_wins():
    first = Member(1, "First")
    second = Member(1, "Second")
    index = MemberIndex.build([first, Member(2, "Other"), second])

    assert index.by_id(1) is second
    assert index.by_id(3) is None
    assert index.by_id(None) is None
    assert 2 in index
    assert len(index) == 3  # the snapshot itself keeps every record


def test_get_parents_includes_co_parent_after_linked_parent(family):
    index = MemberIndex.build(family)

    assert _names(get_parents(index, 3)) == ["Arthur", "Molly"]
    # Ginny is linked to her mother, so Molly comes first
    assert _names(get_parents(index, 7)) == ["Molly", "Arthur"]
    assert get_parents(index, 1) == []


def test_get_parents_single_parent_and_dangling_reference():
    index = MemberIndex.build([
        Member(1, "Parent"),
        Member(2, "Child", parent_id=1),
        Member(3, "Orphan", parent_id=99),
        Member(4, "Widowed", spouse_id=98),
        Member(5, "Grandchild", parent_id=4),
    ])

    assert _names(get_parents(index, 2)) == ["Parent"]
    assert get_parents(index, 3) == []
    # A dangling spouse link on the parent just drops the co-parent
    assert _names(get_parents(index, 5)) == ["Widowed"]
    assert get_parents(index, 42) == []


def test_get_spouse_is_symmetric(family):
    index = MemberIndex.build(family)

    for member in family:
        spouse = get_spouse(index, member.id)
        if member.spouse_id is None:
            assert spouse is None
        else:
            assert spouse.id == member.spouse_id
            assert get_spouse(index, spouse.id) is member


def test_get_spouse_tolerates_dangling_and_unknown_ids():
    index = MemberIndex.build([Member(1, "Alone", spouse_id=2)])
    assert get_spouse(index, 1) is None
    assert get_spouse(index, 5) is None


def test_get_children_in_snapshot_order(family):
    index = MemberIndex.build(family)

    assert _names(get_children(index, 1)) == ["Bill", "Charlie", "Percy"]
    assert _names(get_children(index, 2)) == ["Ginny"]
    assert get_children(index, 8) == []

    for member in family:
        if member.parent_id is not None:
            assert member in get_children(index, member.parent_id)


def test_get_siblings_excludes_self(family):
    index = MemberIndex.build(family)

    assert _names(get_siblings(index, 3)) == ["Charlie", "Percy"]
    assert get_siblings(index, 7) == []  # different linked parent
    for member in family:
        assert member not in get_siblings(index, member.id)


def test_unlinked_member_has_no_relatives(family):
    index = MemberIndex.build(family)

    assert get_parents(index, 8) == []
    assert get_siblings(index, 8) == []
    assert get_spouse(index, 8) is None


def test_member_profile_serializes_relatives(family):
    index = MemberIndex.build(family)
    profile = member_profile(index, 1)

    assert profile["id"] == 1
    assert profile["birthDate"] == "1950-03-10"
    assert profile["anniversaryDate"] == "1975-06-20"
    assert profile["deathDate"] is None
    assert profile["parents"] == []
    assert profile["spouse"]["name"] == "Molly"
    assert [c["name"] for c in profile["children"]] == ["Bill", "Charlie", "Percy"]

    bill = member_profile(index, 3)
    assert [p["id"] for p in bill["parents"]] == [1, 2]
    assert bill["spouse"]["spouseId"] == 3

    assert member_profile(index, 404) is None


def test_members_by_generation_sorted_by_id(family):
    shuffled = list(reversed(family))
    assert [m.id for m in members_by_generation(shuffled, 0)] == [1, 2, 8]
    assert [m.id for m in members_by_generation(shuffled, 1)] == [3, 4, 5, 6, 7]
    assert members_by_generation(family, 5) == []


def test_relations_do_not_mutate_snapshot(family):
    before = [(m.id, m.parent_id, m.spouse_id) for m in family]
    index = MemberIndex.build(family)
    for member in family:
        get_parents(index, member.id)
        get_siblings(index, member.id)
        member_profile(index, member.id)
    assert [(m.id, m.parent_id, m.spouse_id) for m in family] == before
    assert family[0].birth_date == date(1950, 3, 10)


def test_search_members_matches_name_or_email_ignoring_case(family):
    members = family + [Member(9, "Ron", generation=1, email="KING@burrow.example")]

    assert [m.name for m in search_members(members, "  arTHur ")] == ["Arthur"]
    assert [m.name for m in search_members(members, "king@")] == ["Ron"]
    assert [m.name for m in search_members(members, "R")] == [
        "Arthur", "Charlie", "Percy", "Fleur", "Ron"
    ]
    assert search_members(members, "nobody") == []
    assert [m.id for m in search_members(list(reversed(members)), "")] == [1, 2, 8, 3, 4, 5, 6, 7, 9]
    assert len(search_members(members, None)) == 9
