"""NetworkX graph building from a family tree."""

import networkx as nx

from models import FamilyTree, Man, Woman
from naming import full_name, resolve_surname


def build_graph(tree: FamilyTree) -> nx.DiGraph:
    """Build a NetworkX directed graph from the tree."""
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for person in tree:
        G.add_node(
            person.id,
            person_name=full_name(tree, person),
            sex="M" if isinstance(person, Man) else "F",
            given_name=person.first_name,
            surname=resolve_surname(tree, person),
        )

    for person in tree:
        spouse = tree.spouse_of(person)
        if spouse is not None:
            G.add_edge(person.id, spouse.id, relationship_type="SPOUSE_OF")
        if isinstance(person, Woman):
            for child in tree.children_of(person):
                G.add_edge(person.id, child.id, relationship_type="PARENT_OF")
        if person.father_id is not None:
            G.add_edge(person.father_id, person.id, relationship_type="PARENT_OF")

    return G


def build_union_layout_graph(tree: FamilyTree) -> nx.DiGraph:
    """
    Build a layout graph using the union-node model for better family tree visualization.

    Every woman with children gets a "family node" joined to her and to her
    husband, and her children hang from it in list order. Since children are
    only recorded under the mother, each child hangs from exactly one family
    node.

    Args:
        tree: The family tree

    Returns:
        A new graph with family nodes suitable for hierarchical layout
    """
    G = build_graph(tree)
    H = nx.DiGraph()

    for n, data in G.nodes(data=True):
        H.add_node(n, node_type="person", **data)

    # Couples without children still get a family node so spouses share a rank
    couples: dict[int, int | None] = {}
    for person in tree:
        if isinstance(person, Woman):
            husband = tree.husband_of(person)
            if husband is not None or tree.children_ids_of(person):
                couples[person.id] = husband.id if husband is not None else None

    for woman_id, husband_id in couples.items():
        fam_id = f"FAM_{woman_id}"
        spouses = (woman_id,) if husband_id is None else (husband_id, woman_id)
        H.add_node(fam_id, node_type="family", spouses=spouses)
        for spouse_id in spouses:
            H.add_edge(spouse_id, fam_id, edge_type="spouse_to_family")
        for child_id in tree.children_ids_of(tree.get(woman_id)):
            H.add_edge(fam_id, child_id, edge_type="family_to_child")

    return H
