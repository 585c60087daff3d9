"""Visitor capability and the double-dispatch walk over a family tree."""

from abc import ABC, abstractmethod

from models import FamilyTree, InvalidRootError, Man, Person, Woman


class PersonVisitor(ABC):
    """A computation applied to every person reached by accept()."""

    @abstractmethod
    def visit_man(self, man: Man):
        ...

    @abstractmethod
    def visit_woman(self, woman: Woman):
        ...


def accept(tree: FamilyTree, root: Person | int | None, visitor: PersonVisitor):
    """
    Apply visitor to root and to every descendant recorded under it.

    A man is visited on his own. A woman is visited first, then each entry of
    her children list in order, recursively (pre-order, depth first).

    Children are only recorded under their mother, so a walk started from an
    ancestress reaches each descendant exactly once. A walk started from a man
    stops at him even when his wife has children: root the traversal at the
    woman holding the descendants to cover the whole subtree.

    Raises:
        InvalidRootError: if root is None
        KeyError: if root is an id that is not in the tree
    """
    if root is None:
        raise InvalidRootError("Traversal requires a root person")
    if isinstance(root, int) and not isinstance(root, bool):
        root = tree.get(root)

    if isinstance(root, Woman):
        visitor.visit_woman(root)
        for child in tree.children_of(root):
            accept(tree, child, visitor)
    elif isinstance(root, Man):
        visitor.visit_man(root)
    else:
        raise TypeError(f"Cannot traverse {root!r}")


def accept_roots(tree: FamilyTree, visitor: PersonVisitor):
    """Run accept() from every person that is nobody's listed child, in creation order."""
    for root in tree.roots():
        accept(tree, root, visitor)


class VisitRecorder(PersonVisitor):
    """Records the ids of visited persons in visiting order."""

    def __init__(self):
        self.visited: list[int] = []

    def visit_man(self, man: Man):
        self.visited.append(man.id)

    def visit_woman(self, woman: Woman):
        self.visited.append(woman.id)
