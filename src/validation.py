"""Snapshot validation for family member data."""

from collections import Counter

import networkx as nx

from index import MemberIndex
from models import Member


def validate_members(members: list[Member]) -> list[str]:
    """
    Validate a member snapshot for:
    - Duplicate ids
    - Dangling, self-referencing or one-sided parent/spouse links
    - Cycles in parent-child links
    - Impossible ages (child born before parent)
    - Death before birth

    Returns a list of warning messages. The relationship and calendar
    functions tolerate all of these; the warnings are for whoever curates
    the data.
    """
    warnings: list[str] = []
    index = MemberIndex.build(members)

    for member_id, count in Counter(m.id for m in members).items():
        if count > 1:
            warnings.append(f"Duplicate id {member_id} used by {count} members")

    for m in members:
        if m.parent_id is not None:
            if m.parent_id == m.id:
                warnings.append(f"Impossible: {m.name} is their own parent")
            elif m.parent_id not in index:
                warnings.append(f"Dangling: {m.name} has unknown parent id {m.parent_id}")

        if m.spouse_id is not None:
            spouse = index.by_id(m.spouse_id)
            if m.spouse_id == m.id:
                warnings.append(f"Impossible: {m.name} is their own spouse")
            elif spouse is None:
                warnings.append(f"Dangling: {m.name} has unknown spouse id {m.spouse_id}")
            elif spouse.spouse_id != m.id:
                warnings.append(f"Asymmetric: {m.name} lists {spouse.name} as spouse but not vice versa")

    # Cycle detection on the parent_id links only
    parent_graph = nx.DiGraph(
        (m.parent_id, m.id) for m in members if m.parent_id is not None and m.parent_id != m.id
    )
    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for child in members:
        parent = index.by_id(child.parent_id)
        if parent is None or parent is child:
            continue
        if parent.birth_date is None or child.birth_date is None:
            continue

        if child.birth_date < parent.birth_date:
            warnings.append(f"Impossible: {child.name} born before parent {parent.name}")
        elif child.birth_date.year - parent.birth_date.year < 12:
            warnings.append(
                f"Suspicious: {parent.name} was less than 12 years old when {child.name} was born"
            )

    for m in members:
        if m.birth_date and m.death_date and m.death_date < m.birth_date:
            warnings.append(f"Impossible: {m.name} died before being born")

    return warnings
