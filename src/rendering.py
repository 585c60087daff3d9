"""Console formatting of computation records."""

from computations import ChildrenRecord, MaidenNameRecord, NameHolding, NameRecord


def format_name(record: NameRecord) -> str:
    return record.full_name


def format_maiden_name(record: MaidenNameRecord) -> str:
    return record.full_name


def format_children(record: ChildrenRecord) -> str:
    """Format as 'Mary: Patricia, Robert, Linda, ' (every child followed by ', ')."""
    return f"{record.first_name}: " + "".join(f"{child}, " for child in record.children)


def format_name_holding(record: NameHolding) -> str:
    parts = [record.name, "married" if record.married else "unmarried"]
    father, mother = record.parents
    if father or mother:
        parts.append(f"parents: {father or '?'} & {mother or '?'}")
    if record.siblings:
        parts.append(f"siblings: {', '.join(record.siblings)}")
    return " | ".join(parts)


def render_section(title: str, lines: list[str]) -> list[str]:
    return [title.upper(), *lines, ""]
