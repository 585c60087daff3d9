"""Tests for the concrete visitors and their text rendering."""

from computations import (
    ChildrenPrinter,
    MaidenNamePrinter,
    NameHolder,
    NameHolding,
    NamePrinter,
)
from models import FamilyTree
from rendering import (
    format_children,
    format_maiden_name,
    format_name,
    format_name_holding,
    render_section,
)
from traversal import accept, accept_roots


class TestNamePrinter:
    def test_names_from_mary(self, tree, mary):
        printer = NamePrinter(tree)
        accept(tree, mary, printer)

        assert [format_name(r) for r in printer.records] == [
            "Mary Smith",
            "Patricia Johnson",
            "Michael Johnson",
            "Barbara Johnson",
            "Robert Smith",
            "Linda Smith",
        ]

    def test_susan_is_named_after_her_father(self, tree, people):
        printer = NamePrinter(tree)
        accept(tree, people["Jennifer"], printer)

        assert [r.full_name for r in printer.records] == ["Jennifer Johnson", "Susan Johnson"]

    def test_records_go_to_caller_list(self, tree, mary):
        records = []
        accept(tree, mary, NamePrinter(tree, records))
        accept(tree, mary, NamePrinter(tree, records))
        assert len(records) == 12

    def test_idempotent(self, tree, mary):
        first, second = NamePrinter(tree), NamePrinter(tree)
        accept(tree, mary, first)
        accept(tree, mary, second)
        assert first.records == second.records


class TestMaidenNamePrinter:
    def test_maiden_names_from_mary(self, tree, mary, people):
        printer = MaidenNamePrinter(tree)
        accept(tree, mary, printer)

        assert [format_maiden_name(r) for r in printer.records] == [
            "Mary Doe",
            "Patricia Smith",
            "Jennifer Doe",
            "Barbara Johnson",
            "Linda Smith",
        ]

    def test_married_man_delegates_to_wife(self, tree, people):
        printer = MaidenNamePrinter(tree)
        accept(tree, people["Michael"], printer)

        (record,) = printer.records
        assert record.subject_id == people["Michael"].id
        assert record.person_id == people["Jennifer"].id
        assert record.full_name == "Jennifer Doe"

    def test_unmarried_man_produces_nothing(self, tree, people):
        printer = MaidenNamePrinter(tree)
        accept(tree, people["Robert"], printer)
        assert printer.records == []


class TestChildrenPrinter:
    def test_mary(self, tree, mary):
        printer = ChildrenPrinter(tree)
        accept(tree, mary, printer)

        assert format_children(printer.records[0]) == "Mary: Patricia, Robert, Linda, "

    def test_james_uses_wife_children(self, tree, people):
        printer = ChildrenPrinter(tree)
        accept(tree, people["James"], printer)

        assert [format_children(r) for r in printer.records] == [
            "James: Patricia, Robert, Linda, "
        ]

    def test_childless_persons(self, tree, mary):
        printer = ChildrenPrinter(tree)
        accept(tree, mary, printer)

        lines = [format_children(r) for r in printer.records]
        assert lines == [
            "Mary: Patricia, Robert, Linda, ",
            "Patricia: Michael, Barbara, ",
            "Michael: Susan, ",
            "Barbara: ",
            "Robert: ",
            "Linda: ",
        ]


class TestNameHolder:
    def test_married_person_gets_name_and_status_only(self, tree, people):
        holder = NameHolder(tree)
        accept(tree, people["Michael"], holder)

        assert holder.last == NameHolding(people["Michael"].id, "Michael Johnson", married=True)

    def test_unmarried_person_gets_parents_and_siblings(self, tree, people):
        holder = NameHolder(tree)
        accept(tree, people["Robert"], holder)

        holding = holder.last
        assert holding.name == "Robert Smith"
        assert holding.married is False
        assert holding.parents == ["James Smith", "Mary Smith"]
        assert holding.siblings == ["Patricia", "Linda"]

    def test_unknown_father_leaves_parent_slots_empty(self):
        tree = FamilyTree()
        woman = tree.make_woman([], "Jane")

        holder = NameHolder(tree)
        accept(tree, woman, holder)

        assert holder.last.name == "Jane Doe"
        assert holder.last.parents == [None, None]

    def test_unmarried_father_fills_first_slot_only(self):
        tree = FamilyTree()
        father = tree.make_man("Brown", "Tom")
        son = tree.make_man("Brown", "Tim", father=father)

        holder = NameHolder(tree)
        accept(tree, son, holder)

        assert holder.last.parents == ["Tom Brown", None]

    def test_second_parent_is_the_fathers_wife(self):
        tree = FamilyTree()
        father = tree.make_man("Brown", "Tom")
        wife = tree.make_woman([], "Ann")
        tree.marry(father, wife)
        mother = tree.make_woman([], "Mary")
        son = tree.make_man("Brown", "Tim", father=father, mother=mother)
        tree.set_children(mother, [son])

        holder = NameHolder(tree)
        accept(tree, son, holder)

        assert holder.last.parents == ["Tom Brown", "Ann Brown"]

    def test_one_record_per_visit_over_all_roots(self, tree):
        holder = NameHolder(tree)
        accept_roots(tree, holder)

        assert len(holder.records) == len(tree)
        lines = {r.name: format_name_holding(r) for r in holder.records}
        assert lines["Susan Johnson"] == (
            "Susan Johnson | unmarried | parents: Michael Johnson & Jennifer Johnson"
        )
        assert lines["Mary Smith"] == "Mary Smith | married"

    def test_empty_holder_has_no_last(self, tree):
        assert NameHolder(tree).last is None


def test_render_section():
    assert render_section("Name list", ["a", "b"]) == ["NAME LIST", "a", "b", ""]
