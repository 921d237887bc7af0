"""Checks for the ASCII and Mermaid sketch renderers"""

import re

import pytest

from pattern_catalog import PatternCategory, PatternEntry, Role, RoleKind, get_catalog
from pattern_catalog.models import calls, composes, extends, has_a, implements
from pattern_catalog.renderer import group_levels, layout_rows, render, render_entry, render_mermaid
from pattern_catalog.renderer.ascii_renderer import COLUMN_GAP, MAX_COLUMNS


def make_entry(roles, name="Sketch") -> PatternEntry:
    return PatternEntry(
        name=name,
        category=PatternCategory.STRUCTURAL,
        summary="test sketch",
        roles=roles,
    )


def border_columns(line: str):
    """Start column of every box border on a '+---+' line"""
    return [i for i, ch in enumerate(line) if ch == "+" and (i == 0 or line[i - 1] == " ")]


def test_render_is_idempotent_for_every_entry():
    for entry in get_catalog().list():
        first = render(entry)
        second = render(entry)
        assert first == second
        assert entry.diagram == first


def test_boxes_show_stereotype_and_identifier():
    text = render(get_catalog().lookup("Command"))
    assert "<<interface>>" in text
    assert "RemoteControl" in text
    assert "Light" in text


def char_at(lines, y: int, x: int) -> str:
    if 0 <= y < len(lines) and 0 <= x < len(lines[y]):
        return lines[y][x]
    return " "


def box_name(line: str, x: int) -> str:
    """Text of the box cell covering column x on a '|  Name  |' line"""
    left = line.rfind("|", 0, x)
    right = line.find("|", x)
    return line[left + 1:right].strip()


def label_at(line: str, x: int) -> str:
    for match in re.finditer(r"\S+(?: \S+)*", line):
        if match.start() <= x < match.end():
            return match.group()
    return ""


def arrow_ends(lines, row: int, x: int):
    """Columns where the lines hanging off the '^' at (row, x) reach the labels"""
    ends = set()
    todo = [(row + 1, x, 0)]  # (line, column, horizontal step; 0 = moving down)
    seen = set()
    while todo:
        state = todo.pop()
        if state in seen:
            continue
        seen.add(state)
        y, col, step = state
        ch = char_at(lines, y, col)
        if ch == "-" or (ch == "|" and step):
            todo.append((y, col + step, step))
        elif ch in "|+":
            if ch == "+":
                todo += [(y, col + d, d) for d in (-1, 1) if char_at(lines, y, col + d) in "-+|"]
            if char_at(lines, y + 1, col) in "|+":
                todo.append((y + 1, col, 0))
            else:
                ends.add((y, col))
    return ends


def arrows(text: str):
    """Map each parent named above a '^' to the children its lines reach"""
    lines = text.splitlines()
    found = {}
    for row, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch != "^":
                continue
            assert char_at(lines, row - 1, x) == "-", (row, x)
            parent = box_name(lines[row - 2], x)
            children = found.setdefault(parent, set())
            for end_row, end_x in arrow_ends(lines, row, x):
                below = end_row + 1
                labels = []
                while char_at(lines, below, end_x) not in "+-":
                    labels.append(label_at(lines[below], end_x))
                    below += 1
                assert labels, (parent, end_row, end_x)
                child = box_name(lines[below + 2], end_x)
                assert f"implements {parent}" in labels or f"extends {parent}" in labels, (parent, child, labels)
                children.add(child)
            assert children, parent
    return found


def test_every_arrow_points_at_its_parent():
    for entry in get_catalog().list():
        by_id = {role.identifier: role for role in entry.roles}
        for parent, children in arrows(entry.diagram).items():
            for child in children:
                assert parent in by_id[child].parents(), (entry.name, parent, child)


def test_siblings_share_their_parents_arrow():
    prototype = arrows(get_catalog().lookup("Prototype").diagram)
    assert prototype == {"Prototype": {"Circle", "Rectangle"}}

    decorator = arrows(get_catalog().lookup("Decorator").diagram)
    assert decorator == {
        "Notifier": {"EmailNotifier", "NotifierDecorator"},
        "NotifierDecorator": {"SmsDecorator"},
    }

    state = arrows(get_catalog().lookup("State").diagram)
    assert state["DocumentState"] == {"DraftState", "ModerationState", "PublishedState"}


def test_children_sit_under_their_parent():
    rows = layout_rows(get_catalog().lookup("Decorator"))
    names = [[role.identifier if role else None for role in row] for row in rows]
    assert names == [
        ["Notifier", "App"],
        ["EmailNotifier", "NotifierDecorator"],
        [None, "SmsDecorator"],
    ]


def test_wrapped_parents_stay_next_to_their_children():
    rows = layout_rows(get_catalog().lookup("Abstract Factory"))
    names = [[role.identifier if role else None for role in row] for row in rows]
    assert names[:2] == [["SquadronFactory"], ["Mage", "Archer", "Warrior"]]
    assert names[2] == ["ElfMage", "ElfArcher", "ElfWarrior"]
    assert names[3] == ["ElfSquadronFactory"]

    drawn = arrows(get_catalog().lookup("Abstract Factory").diagram)
    assert "SquadronFactory" not in drawn
    assert drawn["Mage"] == {"ElfMage"}


def test_parent_out_of_reach_is_named_without_arrow():
    entry = get_catalog().lookup("Factory Method")
    drawn = arrows(entry.diagram)
    assert drawn["Archiver"] == {"ZipArchiver", "RarArchiver"}
    assert drawn["ArchiverCreator"] == {"ZipArchiverCreator"}
    assert entry.diagram.count("extends ArchiverCreator") == 2


def test_crossing_lines_do_not_merge():
    roles = [
        Role(identifier="Left", kind=RoleKind.INTERFACE),
        Role(identifier="Middle", kind=RoleKind.INTERFACE),
        Role(identifier="LeftA", kind=RoleKind.CONCRETE_CLASS, relations=[implements("Left")]),
        Role(identifier="MiddleA", kind=RoleKind.CONCRETE_CLASS, relations=[implements("Middle")]),
        Role(identifier="LeftB", kind=RoleKind.CONCRETE_CLASS, relations=[implements("Left")]),
    ]
    drawn = arrows(render(make_entry(roles)))
    assert drawn == {"Left": {"LeftA", "LeftB"}, "Middle": {"MiddleA"}}


def test_association_arrows():
    text = render(get_catalog().lookup("Command"))
    assert "RemoteControl" in text and "<-- has-a -->" in text
    assert "--execute()-->" in text

    composite = render(get_catalog().lookup("Composite"))
    assert "<== composes ==>" in composite
    assert "--print()-->" in composite


def test_calls_arrow_without_label_is_plain():
    entry = make_entry([
        Role(identifier="A", kind=RoleKind.CONCRETE_CLASS, relations=[calls("B", "")]),
        Role(identifier="B", kind=RoleKind.CONCRETE_CLASS),
    ])
    assert "---->" in render(entry)


def test_wide_level_wraps_without_breaking_alignment():
    roles = [Role(identifier="Base", kind=RoleKind.INTERFACE)]
    roles += [
        Role(identifier=f"Impl{i}", kind=RoleKind.CONCRETE_CLASS, relations=[implements("Base")])
        for i in range(7)
    ]
    entry = make_entry(roles)
    text = render(entry)
    lines = text.splitlines()

    border_lines = [line for line in lines if line.startswith("+")]
    # 1 row for Base, 3 rows for 7 implementations, two border lines per row
    assert len(border_lines) == 2 * (1 + 3)

    widths = {len(line) for line in border_lines if len(border_columns(line)) == 1}
    assert len(widths) == 1
    box_width = widths.pop()

    expected = [i * (box_width + COLUMN_GAP) for i in range(MAX_COLUMNS)]
    for line in border_lines:
        columns = border_columns(line)
        assert len(columns) <= MAX_COLUMNS
        assert columns == expected[:len(columns)]


def test_catalog_wrapping_entries_stay_aligned():
    for name in ("Factory Method", "Abstract Factory", "Visitor"):
        entry = get_catalog().lookup(name)
        assert any(len(level) > MAX_COLUMNS for level in group_levels(entry)), name
        border_lines = [l for l in entry.diagram.splitlines() if l.startswith("+")]
        box_width = len(border_lines[0].split(" ")[0])
        for line in border_lines:
            for column in border_columns(line):
                assert column % (box_width + COLUMN_GAP) == 0, (name, line)


def test_levels_follow_inheritance_depth():
    levels = group_levels(get_catalog().lookup("Decorator"))
    assert [r.identifier for r in levels[0]] == ["Notifier", "App"]
    assert [r.identifier for r in levels[1]] == ["EmailNotifier", "NotifierDecorator"]
    assert [r.identifier for r in levels[2]] == ["SmsDecorator"]


def test_long_identifiers_widen_every_box():
    entry = make_entry([
        Role(identifier="AVeryLongInterfaceNameIndeed", kind=RoleKind.INTERFACE),
        Role(identifier="Short", kind=RoleKind.CONCRETE_CLASS, relations=[extends("AVeryLongInterfaceNameIndeed")]),
    ])
    border_lines = [l for l in render(entry).splitlines() if l.startswith("+")]
    assert len({len(l) for l in border_lines}) == 1
    assert len(border_lines[0]) >= len("extends AVeryLongInterfaceNameIndeed") + 4


def test_mermaid_class_diagram():
    text = render_mermaid(get_catalog().lookup("Command"))
    lines = text.splitlines()
    assert lines[0] == "classDiagram"
    assert "        <<interface>>" in lines
    assert "    Command <|.. SwitchOnCommand" in lines
    assert "    RemoteControl o-- Command" in lines
    assert "    RemoteControl --> Command : execute()" in lines


def test_mermaid_extends_and_composes():
    entry = make_entry([
        Role(identifier="Base", kind=RoleKind.ABSTRACT_CLASS),
        Role(identifier="Child", kind=RoleKind.CONCRETE_CLASS, relations=[extends("Base"), composes("Part"), has_a("Base")]),
        Role(identifier="Part", kind=RoleKind.CONCRETE_CLASS),
    ])
    text = render_mermaid(entry)
    assert "<<abstract>>" in text
    assert "Base <|-- Child" in text
    assert "Child *-- Part" in text
    assert "Child o-- Base" in text


def test_render_entry_dispatch():
    entry = get_catalog().lookup("Strategy")
    assert render_entry(entry) == entry.diagram
    assert render_entry(entry, "mermaid").startswith("classDiagram")
    with pytest.raises(ValueError):
        render_entry(entry, "svg")


if __name__ == "__main__":
    print(get_catalog().lookup("Abstract Factory").diagram)
