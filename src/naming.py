"""Surname resolution shared by every computation over the tree."""

from models import FamilyTree, Man, Person, Woman

# Used when a woman has neither a husband nor a known father
DEFAULT_SURNAME = "Doe"


def resolve_surname(tree: FamilyTree, person: Person) -> str:
    """
    Return the family name a person currently goes by.

    A man carries his own family name. A woman takes her husband's family
    name if she is married, otherwise her father's, otherwise DEFAULT_SURNAME.
    Recomputed on every call so it follows the latest spouse link.
    """
    if isinstance(person, Man):
        return person.family_name

    husband = tree.husband_of(person)
    if husband is not None:
        return husband.family_name
    return maiden_surname(tree, person)


def maiden_surname(tree: FamilyTree, woman: Woman) -> str:
    """Return the father's family name, or DEFAULT_SURNAME when the father is unknown."""
    father = tree.father_of(woman)
    if father is not None:
        return father.family_name
    return DEFAULT_SURNAME


def full_name(tree: FamilyTree, person: Person) -> str:
    return f"{person.first_name} {resolve_surname(tree, person)}"
