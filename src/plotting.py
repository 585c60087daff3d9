"""Visualization functions for family trees."""

from pathlib import Path

import pydot

from graph import build_union_layout_graph
from models import FamilyTree


def build_dot(tree: FamilyTree) -> pydot.Dot:
    """
    Build a Graphviz chart of the tree using the union-node model.

    - Parents appear above children (ancestors at top)
    - Spouses are aligned horizontally on the same rank
    - Siblings hang from their mother's family node in list order
    """
    H = build_union_layout_graph(tree)

    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")  # Top-to-bottom (ancestors at top)
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    spouse_pairs: list[tuple] = []

    for node, data in H.nodes(data=True):
        if data.get("node_type") == "family":
            P.add_node(
                pydot.Node(str(node), shape="point", width="0.1", height="0.1", label="")
            )
            spouses = data.get("spouses", ())
            if len(spouses) == 2:
                spouse_pairs.append(spouses)
        else:
            label = f"{data.get('given_name', '')}\n{data.get('surname', '')}"
            fillcolor = "lightblue" if data.get("sex") == "M" else "lightpink"
            P.add_node(
                pydot.Node(
                    str(node),
                    label=label,
                    shape="box",
                    style="rounded,filled",
                    fillcolor=fillcolor,
                    fontsize="10",
                )
            )

    for u, v, data in H.edges(data=True):
        if data.get("edge_type") == "spouse_to_family":
            P.add_edge(pydot.Edge(str(u), str(v), dir="none", color="darkgray"))
        else:
            P.add_edge(pydot.Edge(str(u), str(v), color="darkgray"))

    for i, (a, b) in enumerate(spouse_pairs):
        sg = pydot.Subgraph(f"couple_{i}", rank="same")
        sg.add_node(pydot.Node(str(a)))
        sg.add_node(pydot.Node(str(b)))
        P.add_subgraph(sg)

    return P


def plot_tree(tree: FamilyTree, output_path: Path | None = None):
    """
    Render the tree with Graphviz.

    Args:
        tree: The family tree
        output_path: Path to save the output image (png, svg or pdf). If None, displays interactively.
    """
    P = build_dot(tree)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
        print(f"Chart saved to {output_path}")
    else:
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            image_path = Path(f.name)
        try:
            P.write(str(image_path), format="png")
            img = mpimg.imread(image_path)
        finally:
            image_path.unlink(missing_ok=True)

        plt.figure(figsize=(12, 10))
        plt.imshow(img)
        plt.axis("off")
        plt.tight_layout()
        plt.show()
