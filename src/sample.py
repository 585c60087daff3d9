"""The sample Smith/Johnson family used by the demo program and the tests.

    James Smith  <--spouse-->  Mary
                                 |
                  +--------------+-------------+
                  |              |             |
 William Johnson <--> Patricia  Robert Smith  Linda
                          |
                  +-------+---------+
                  |                 |
 Jennifer <--> Michael Johnson   Barbara
     |
   Susan
"""

from models import FamilyTree, Woman


def build_sample_tree() -> tuple[FamilyTree, Woman]:
    """Build the sample family and return the tree with its root, Mary."""
    tree = FamilyTree()

    # First generation
    james = tree.make_man("Smith", "James")
    mary = tree.make_woman([], "Mary")
    tree.marry(mary, james)

    # Second generation
    patricia = tree.make_woman([], "Patricia", father=james, mother=mary)
    william = tree.make_man("Johnson", "William")
    tree.marry(patricia, william)

    robert = tree.make_man("Smith", "Robert", father=james, mother=mary)
    linda = tree.make_woman([], "Linda", father=james, mother=mary)
    tree.set_children(mary, [patricia, robert, linda])

    # Third generation
    michael = tree.make_man("Johnson", "Michael", father=william, mother=patricia)
    barbara = tree.make_woman([], "Barbara", father=william, mother=patricia)
    tree.set_children(patricia, [michael, barbara])

    jennifer = tree.make_woman([], "Jennifer")
    susan = tree.make_woman([], "Susan", father=michael, mother=jennifer)
    tree.marry(jennifer, michael)
    tree.set_children(jennifer, [susan])

    return tree, mary
