"""
1) Build the sample family tree in memory.
2) Validate the tree for broken spouse links, duplicate children and cycles.
3) Walk the tree from Mary with each visitor and print the results:
    - name list
    - children list
    - maiden names
    - name holdings (status, parents, siblings)
4) Plot the tree.
"""

from pathlib import Path

from computations import ChildrenPrinter, MaidenNamePrinter, NameHolder, NamePrinter
from plotting import plot_tree
from rendering import (
    format_children,
    format_maiden_name,
    format_name,
    format_name_holding,
    render_section,
)
from sample import build_sample_tree
from traversal import accept
from validation import validate_tree


def main():
    project_root = Path(__file__).parent.parent
    plot_path = project_root / "family_tree.png"

    print("Building sample tree...")
    tree, mary = build_sample_tree()
    print(f"  Tree has {len(tree)} persons")

    print("Validating tree...")
    warnings = validate_tree(tree)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings:
            print(f"    - {w}")
    else:
        print("  No validation issues found")
    print()

    names = NamePrinter(tree)
    accept(tree, mary, names)
    lines = render_section("Name list", [format_name(r) for r in names.records])

    children = ChildrenPrinter(tree)
    accept(tree, mary, children)
    lines += render_section("Children list", [format_children(r) for r in children.records])

    maiden_names = MaidenNamePrinter(tree)
    accept(tree, mary, maiden_names)
    lines += render_section(
        "Maiden names", [format_maiden_name(r) for r in maiden_names.records]
    )

    holder = NameHolder(tree)
    accept(tree, mary, holder)
    lines += render_section(
        "Name holdings", [format_name_holding(r) for r in holder.records]
    )

    for line in lines:
        print(line)

    print(f"Plotting tree to: {plot_path}")
    plot_tree(tree, plot_path)
    print("Done!")


if __name__ == "__main__":
    main()
