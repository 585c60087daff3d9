"""Concrete visitors that derive facts about the persons of a tree.

Each visitor appends structured records to a list (its own, or one passed
in by the caller) instead of writing text; see rendering.py for output.
"""

from dataclasses import dataclass, field

from models import FamilyTree, Man, Person, Woman
from naming import full_name, maiden_surname, resolve_surname
from traversal import PersonVisitor


@dataclass
class NameRecord:
    person_id: int
    first_name: str
    surname: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"


@dataclass
class MaidenNameRecord:
    subject_id: int  # person being visited
    person_id: int  # woman whose maiden name was derived (the subject's wife for a man)
    first_name: str
    surname: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"


@dataclass
class ChildrenRecord:
    person_id: int
    first_name: str
    children: list[str] = field(default_factory=list)


@dataclass
class NameHolding:
    person_id: int
    name: str
    married: bool = False
    parents: list[str | None] = field(default_factory=lambda: [None, None])  # [father, mother]
    siblings: list[str] = field(default_factory=list)


class NamePrinter(PersonVisitor):
    """Current full name of every visited person."""

    def __init__(self, tree: FamilyTree, records: list[NameRecord] | None = None):
        self.tree = tree
        self.records = records if records is not None else []

    def visit_man(self, man: Man):
        self.records.append(NameRecord(man.id, man.first_name, man.family_name))

    def visit_woman(self, woman: Woman):
        self.records.append(
            NameRecord(woman.id, woman.first_name, resolve_surname(self.tree, woman))
        )


class MaidenNamePrinter(PersonVisitor):
    """
    Maiden name of every visited woman.

    A visited man stands in for his wife: the record for him carries her
    maiden name. An unmarried man produces no record.
    """

    def __init__(self, tree: FamilyTree, records: list[MaidenNameRecord] | None = None):
        self.tree = tree
        self.records = records if records is not None else []

    def visit_man(self, man: Man):
        wife = self.tree.wife_of(man)
        if wife is not None:
            self._record(man, wife)

    def visit_woman(self, woman: Woman):
        self._record(woman, woman)

    def _record(self, subject: Person, woman: Woman):
        self.records.append(
            MaidenNameRecord(
                subject.id, woman.id, woman.first_name, maiden_surname(self.tree, woman)
            )
        )


class ChildrenPrinter(PersonVisitor):
    """First names of the children of every visited person."""

    def __init__(self, tree: FamilyTree, records: list[ChildrenRecord] | None = None):
        self.tree = tree
        self.records = records if records is not None else []

    def visit_man(self, man: Man):
        # A man's children are recorded on his wife's list
        wife = self.tree.wife_of(man)
        children = self.tree.children_of(wife) if wife is not None else []
        self.records.append(self._make_record(man, children))

    def visit_woman(self, woman: Woman):
        self.records.append(self._make_record(woman, self.tree.children_of(woman)))

    @staticmethod
    def _make_record(person: Person, children: list[Person]) -> ChildrenRecord:
        return ChildrenRecord(person.id, person.first_name, [c.first_name for c in children])


class NameHolder(PersonVisitor):
    """
    Name, marital status, parents and siblings of every visited person.

    Married persons only get their name and status. For the others, the
    father slot holds the father's full name and the mother slot holds the
    father's wife's first name with the father's family name. Both slots
    stay None when the father is unknown, even if the mother is recorded.
    """

    def __init__(self, tree: FamilyTree, records: list[NameHolding] | None = None):
        self.tree = tree
        self.records = records if records is not None else []

    def visit_man(self, man: Man):
        self._hold(man)

    def visit_woman(self, woman: Woman):
        self._hold(woman)

    @property
    def last(self) -> NameHolding | None:
        return self.records[-1] if self.records else None

    def _hold(self, person: Person):
        holding = NameHolding(person.id, full_name(self.tree, person))
        self.records.append(holding)

        if self.tree.spouse_of(person) is not None:
            holding.married = True
            return

        father = self.tree.father_of(person)
        if father is not None:
            holding.parents[0] = f"{father.first_name} {father.family_name}"
            fathers_wife = self.tree.wife_of(father)
            if fathers_wife is not None:
                holding.parents[1] = f"{fathers_wife.first_name} {father.family_name}"

        mother = self.tree.mother_of(person)
        if mother is not None:
            holding.siblings = [
                sibling.first_name
                for sibling in self.tree.children_of(mother)
                if sibling.id != person.id
            ]
