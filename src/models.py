"""Data classes for family tree entities and the arena that owns them."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class InvalidRootError(ValueError):
    """Raised when a traversal is started without a root person."""


@dataclass(frozen=True, kw_only=True)
class Person:
    id: int
    first_name: str
    father_id: int | None = None
    mother_id: int | None = None

    def __post_init__(self):
        if type(self) is Person:
            raise TypeError("Person is abstract, create a Man or a Woman")


@dataclass(frozen=True, kw_only=True)
class Man(Person):
    family_name: str


@dataclass(frozen=True, kw_only=True)
class Woman(Person):
    pass


class FamilyTree:
    """
    Arena holding every Person of a tree by id.

    Records are immutable. The links that may change after construction
    (spouse for anybody, the ordered children list of a Woman) live here,
    keyed by person id, so every relationship is a non-owning id reference.

    Children are only recorded under the mother. Spouse links are not kept
    mutual automatically: callers that use set_spouse() are responsible for
    updating both sides (or use marry()).
    """

    def __init__(self):
        self._persons: dict[int, Person] = {}
        self._spouses: dict[int, int | None] = {}
        self._children: dict[int, list[int]] = {}
        self._next_id = 1

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def make_man(
        self,
        family_name: str,
        first_name: str,
        spouse: Woman | None = None,
        father: Man | None = None,
        mother: Woman | None = None,
    ) -> Man:
        # Every argument is checked before the record enters the arena
        spouse_id = self._related_id(spouse, Woman, "wife")
        man = Man(
            id=self._allocate_id(),
            first_name=first_name,
            father_id=self._related_id(father, Man, "father"),
            mother_id=self._related_id(mother, Woman, "mother"),
            family_name=family_name,
        )
        self._persons[man.id] = man
        self._spouses[man.id] = spouse_id
        return man

    def make_woman(
        self,
        children: Iterable[Person],
        first_name: str,
        spouse: Man | None = None,
        father: Man | None = None,
        mother: Woman | None = None,
    ) -> Woman:
        child_ids = self._child_ids(children)
        spouse_id = self._related_id(spouse, Man, "husband")
        woman = Woman(
            id=self._allocate_id(),
            first_name=first_name,
            father_id=self._related_id(father, Man, "father"),
            mother_id=self._related_id(mother, Woman, "mother"),
        )
        self._persons[woman.id] = woman
        self._spouses[woman.id] = spouse_id
        self._children[woman.id] = child_ids
        return woman

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_spouse(self, person: Person, other: Person | None):
        """Point person's spouse link at other (or clear it). The other side is untouched."""
        self._require(person)
        if isinstance(person, Man):
            self._spouses[person.id] = self._related_id(other, Woman, "wife")
        else:
            self._spouses[person.id] = self._related_id(other, Man, "husband")

    def marry(self, a: Person, b: Person):
        """Set both spouse links of a couple."""
        self.set_spouse(a, b)
        self.set_spouse(b, a)

    def set_children(self, woman: Woman, children: Iterable[Person]):
        if not isinstance(woman, Woman):
            raise TypeError(f"Only a Woman holds a children list, got {woman!r}")
        self._require(woman)
        self._children[woman.id] = self._child_ids(children)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, person_id: int) -> Person:
        try:
            return self._persons[person_id]
        except KeyError:
            raise KeyError(f"Person ID {person_id} not found in tree") from None

    __getitem__ = get

    def __contains__(self, person: object) -> bool:
        if isinstance(person, Person):
            return self._persons.get(person.id) is person
        return person in self._persons

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons.values())

    def __len__(self) -> int:
        return len(self._persons)

    def spouse_of(self, person: Person) -> Person | None:
        spouse_id = self._spouses.get(person.id)
        return self._persons[spouse_id] if spouse_id is not None else None

    def wife_of(self, man: Man) -> Woman | None:
        spouse = self.spouse_of(man)
        return spouse if isinstance(spouse, Woman) else None

    def husband_of(self, woman: Woman) -> Man | None:
        spouse = self.spouse_of(woman)
        return spouse if isinstance(spouse, Man) else None

    def father_of(self, person: Person) -> Man | None:
        father = self._persons.get(person.father_id) if person.father_id is not None else None
        return father if isinstance(father, Man) else None

    def mother_of(self, person: Person) -> Woman | None:
        mother = self._persons.get(person.mother_id) if person.mother_id is not None else None
        return mother if isinstance(mother, Woman) else None

    def children_ids_of(self, woman: Woman) -> tuple[int, ...]:
        return tuple(self._children.get(woman.id, ()))

    def children_of(self, woman: Woman) -> list[Person]:
        return [self._persons[cid] for cid in self._children.get(woman.id, ())]

    def roots(self) -> list[Person]:
        """Persons that are not listed as anybody's child, in creation order."""
        listed = {cid for ids in self._children.values() for cid in ids}
        return [p for p in self._persons.values() if p.id not in listed]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _allocate_id(self) -> int:
        person_id = self._next_id
        self._next_id += 1
        return person_id

    def _require(self, person: Person):
        if self._persons.get(person.id) is not person:
            raise ValueError(f"{person!r} does not belong to this tree")

    def _related_id(self, relative: Person | None, variant: type, role: str) -> int | None:
        if relative is None:
            return None
        if not isinstance(relative, variant):
            raise TypeError(f"A {role} must be a {variant.__name__}, got {relative!r}")
        self._require(relative)
        return relative.id

    def _child_ids(self, children: Iterable[Person]) -> list[int]:
        ids = []
        for child in children:
            self._require(child)
            ids.append(child.id)
        return ids
