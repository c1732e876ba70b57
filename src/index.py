"""Lookup of family members by their numeric id."""

from collections.abc import Iterable, Iterator

from models import Member


class MemberIndex:
    """
    A read-only snapshot of members plus a dict keyed by member id.

    `members` keeps the snapshot in input order for linear scans
    (children, siblings); `by_id` is the O(1) lookup used to resolve
    `parent_id` and `spouse_id` references. When ids repeat, the last
    record with that id is the one `by_id` returns.
    """

    def __init__(self, members: list[Member], lookup: dict[int, Member]):
        self.members = members
        self._lookup = lookup

    @classmethod
    def build(cls, members: Iterable[Member]) -> "MemberIndex":
        snapshot = list(members)
        return cls(snapshot, {m.id: m for m in snapshot})

    def by_id(self, member_id: int | None) -> Member | None:
        if member_id is None:
            return None
        return self._lookup.get(member_id)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._lookup

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)
