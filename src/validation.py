"""Tree validation for family tree data."""

from collections import Counter

import networkx as nx

from models import FamilyTree, Woman


def validate_tree(tree: FamilyTree) -> list[str]:
    """
    Validate the family tree for:
    - Spouse links that are not mutual
    - Persons listed as a child more than once
    - Children listed under a woman who is not their recorded mother
    - Cycles through children lists (a traversal would never end)

    Nothing is repaired. Returns a list of warning messages.
    """
    warnings: list[str] = []

    for person in tree:
        spouse = tree.spouse_of(person)
        if spouse is not None and tree.spouse_of(spouse) is not person:
            warnings.append(
                f"Inconsistent: {person.first_name} is married to {spouse.first_name} "
                f"but not the other way round"
            )

    listings = Counter()
    child_edges = []
    for woman in tree:
        if not isinstance(woman, Woman):
            continue
        for child in tree.children_of(woman):
            listings[child.id] += 1
            child_edges.append((woman.id, child.id))
            if child.mother_id is not None and child.mother_id != woman.id:
                warnings.append(
                    f"Inconsistent: {child.first_name} is listed under {woman.first_name} "
                    f"but their mother is {tree.get(child.mother_id).first_name}"
                )

    for person_id, count in listings.items():
        if count > 1:
            warnings.append(
                f"Duplicate: {tree.get(person_id).first_name} is listed as a child {count} times"
            )

    # Check for cycles
    try:
        cycle = nx.find_cycle(nx.DiGraph(child_edges), orientation="original")
        cycle_names = [tree.get(edge[0]).first_name for edge in cycle]
        warnings.append(f"Cycle detected in children lists: {cycle_names}")
    except nx.NetworkXNoCycle:
        pass

    return warnings
