"""Family tree rendering."""

from pathlib import Path

import networkx as nx
import pydot

from graph import build_union_layout_graph

GENDER_COLORS = {"male": "lightblue", "female": "lightpink"}


def person_label(data: dict) -> str:
    """Name over the birth-death years, e.g. "Ada\\n1950-"."""
    birth = data.get("birth_date")
    death = data.get("death_date")
    birth_year = str(birth.year) if birth else ""
    death_year = str(death.year) if death else ""
    return f"{data.get('person_name', '')}\n{birth_year}-{death_year}"


def build_dot(G: nx.DiGraph) -> pydot.Dot:
    """
    Build the Graphviz chart for a member graph:
    - Parents above children
    - Spouses aligned on the same rank
    - Siblings hanging from their family node
    """
    H = build_union_layout_graph(G)

    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    couples: list[tuple] = []

    for node, data in H.nodes(data=True):
        if data.get("node_type") == "family":
            P.add_node(pydot.Node(str(node), shape="point", width="0.1", height="0.1", label=""))
            spouses = data.get("spouses", ())
            if len(spouses) == 2:
                couples.append(spouses)
        else:
            P.add_node(
                pydot.Node(
                    str(node),
                    label=person_label(data),
                    shape="box",
                    style="rounded,filled",
                    fillcolor=GENDER_COLORS.get(data.get("gender"), "lightgray"),
                    fontsize="10",
                )
            )

    for u, v, data in H.edges(data=True):
        if data.get("edge_type") == "spouse_to_family":
            P.add_edge(pydot.Edge(str(u), str(v), dir="none", color="darkgray"))
        elif data.get("edge_type") == "family_to_child":
            P.add_edge(pydot.Edge(str(u), str(v), color="darkgray"))

    for i, (a, b) in enumerate(couples):
        sg = pydot.Subgraph(f"couple_{i}", rank="same")
        sg.add_node(pydot.Node(str(a)))
        sg.add_node(pydot.Node(str(b)))
        P.add_subgraph(sg)

    return P


def plot_graph(G: nx.DiGraph, output_path: Path | None = None):
    """
    Render the family tree with Graphviz.

    Args:
        G: Member graph from `graph.build_graph`
        output_path: PNG/SVG/PDF path. If None, displays interactively.
    """
    P = build_dot(G)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
        print(f"Family tree saved to {output_path}")
    else:
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            P.write(f.name, format="png")
            img = mpimg.imread(f.name)
            plt.figure(figsize=(20, 16))
            plt.imshow(img)
            plt.axis("off")
            plt.tight_layout()
            plt.show()
