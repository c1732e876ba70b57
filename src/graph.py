"""NetworkX graph building and operations over a member snapshot."""

import itertools

import networkx as nx

from index import MemberIndex
from models import Member
from relations import get_parents


def build_graph(members: list[Member]) -> nx.DiGraph:
    """
    Build a directed graph from the member snapshot.

    PARENT_OF edges run from each parent returned by `get_parents` (linked
    parent and co-parent) to the child. SPOUSE_OF edges follow `spouse_id`.
    References to members outside the snapshot are left out.
    """
    G = nx.DiGraph()
    index = MemberIndex.build(members)

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for m in index.members:
        G.add_node(
            m.id,
            person_name=m.name,
            gender=m.gender,
            birth_date=m.birth_date,
            death_date=m.death_date,
            generation=m.generation,
        )

    for m in index.members:
        for parent in get_parents(index, m.id):
            G.add_edge(parent.id, m.id, relationship_type="PARENT_OF")
        if m.spouse_id is not None and m.spouse_id in index:
            G.add_edge(m.id, m.spouse_id, relationship_type="SPOUSE_OF")

    return G


def build_union_layout_graph(G: nx.DiGraph) -> nx.DiGraph:
    """
    Build a layout graph using the union-node model.

    "Family nodes" connect spouse pairs to their children, so spouses sit
    on the same rank and siblings hang from a shared node.

    Args:
        G: Graph with PARENT_OF and SPOUSE_OF edges

    Returns:
        A new graph with family nodes suitable for hierarchical layout
    """
    H = nx.DiGraph()

    for n, data in G.nodes(data=True):
        H.add_node(n, node_type="person", **data)

    # Spouse pairs, sorted so a symmetric link is one pair
    spouse_pairs: set[tuple[int, int]] = set()
    for u, v, edata in G.edges(data=True):
        if edata.get("relationship_type") == "SPOUSE_OF":
            spouse_pairs.add(tuple(sorted((u, v))))

    fam_for_pair: dict[tuple[int, int], str] = {}
    for a, b in sorted(spouse_pairs):
        fam_id = f"FAM_{a}_{b}"
        fam_for_pair[(a, b)] = fam_id
        H.add_node(fam_id, node_type="family", spouses=(a, b))
        H.add_edge(a, fam_id, edge_type="spouse_to_family")
        H.add_edge(b, fam_id, edge_type="spouse_to_family")

    parents_by_child: dict[int, list[int]] = {}
    for parent, child, edata in G.edges(data=True):
        if edata.get("relationship_type") == "PARENT_OF":
            parents_by_child.setdefault(child, []).append(parent)

    for child, parents in parents_by_child.items():
        parents = list(dict.fromkeys(parents))
        fam_id = None

        for p1, p2 in itertools.combinations(parents, 2):
            pair = tuple(sorted((p1, p2)))
            if pair in fam_for_pair:
                fam_id = fam_for_pair[pair]
                break

        # Single parent (or parents who are not a couple)
        if fam_id is None:
            fam_id = f"FAM_{'_'.join(map(str, sorted(parents)))}"
            if fam_id not in H:
                H.add_node(fam_id, node_type="family", spouses=tuple(parents))
                for p in parents:
                    H.add_edge(p, fam_id, edge_type="spouse_to_family")

        H.add_edge(fam_id, child, edge_type="family_to_child")

    return H
