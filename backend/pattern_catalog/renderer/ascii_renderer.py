# backend/pattern_catalog/renderer/ascii_renderer.py
"""
ASCII Sketch Renderer

Lays the roles of an entry out as fixed-width boxes, one hierarchy level
per band, with implements/extends drawn as arrows between bands.
Associations (has-a, composes, calls) are listed under the boxes.

Layout rules:
- A level holds at most MAX_COLUMNS boxes per row and wraps onto new rows.
- Children take the column of their parent when that cell is free.
- An arrow is only drawn up to a parent in the row directly above; the
  "implements X" / "extends X" label is always printed under the arrow
  block, so a parent further up is still named.

Output is a pure function of the entry's roles.
"""

from typing import Dict, List, Optional, Set, Tuple

from pattern_catalog.models import PatternEntry, Relation, RelationKind, Role, RoleKind

MAX_COLUMNS = 3
COLUMN_GAP = 4
MIN_BOX_WIDTH = 17  # "<<interface>>" plus borders and padding

STEREOTYPES = {
    RoleKind.INTERFACE: "<<interface>>",
    RoleKind.ABSTRACT_CLASS: "<<abstract>>",
    RoleKind.CONCRETE_CLASS: "",
}

HIERARCHY_VERBS = {
    RelationKind.IMPLEMENTS: "implements",
    RelationKind.EXTENDS: "extends",
}

Row = List[Optional[Role]]
Link = Tuple[int, int]  # (parent column, child column)


def render(entry: PatternEntry) -> str:
    """
    Render an entry's structural sketch as an ASCII diagram.

    Args:
        entry: A validated pattern entry

    Returns:
        Multi-line diagram text (no trailing newline)
    """
    width = _box_width(entry)
    lines: List[str] = []
    previous: Optional[Row] = None

    for row in layout_rows(entry):
        if previous is not None:
            arrows, labels = _render_connectors(previous, row, width)
            if not arrows:
                lines.append("")
            lines.extend(arrows + labels)
        lines.extend(_render_boxes(row, width))
        previous = row

    associations = _render_associations(entry)
    if associations:
        lines.append("")
        lines.extend(associations)

    return "\n".join(lines)


def assign_levels(entry: PatternEntry) -> Dict[str, int]:
    """Level 0 for roots; otherwise one below the deepest parent."""
    by_id = {role.identifier: role for role in entry.roles}
    levels: Dict[str, int] = {}

    def level_of(role_id: str) -> int:
        if role_id not in levels:
            parents = [p for p in by_id[role_id].parents() if p in by_id]
            levels[role_id] = 1 + max(level_of(p) for p in parents) if parents else 0
        return levels[role_id]

    for role in entry.roles:
        level_of(role.identifier)
    return levels


def group_levels(entry: PatternEntry) -> List[List[Role]]:
    """Roles grouped by hierarchy level, declaration order kept inside a level"""
    levels = assign_levels(entry)
    depth = max(levels.values(), default=-1) + 1
    grouped: List[List[Role]] = [[] for _ in range(depth)]
    for role in entry.roles:
        grouped[levels[role.identifier]].append(role)
    return grouped


def layout_rows(entry: PatternEntry) -> List[Row]:
    """
    Place every role in a grid cell, top row first.

    Empty cells are None. Trailing empty cells are dropped, so a row can be
    shorter than MAX_COLUMNS but never longer.
    """
    inherited = {parent for role in entry.roles for parent in role.parents()}
    rows: List[Row] = []

    for level, roles in enumerate(group_levels(entry)):
        if level == 0:
            rows.extend(_wrap_roots(roles, inherited))
        else:
            rows.extend(_place_under_parents(roles, rows[-1]))
    return rows


def _chunks(roles: List[Role]) -> List[Row]:
    return [list(roles[start:start + MAX_COLUMNS]) for start in range(0, len(roles), MAX_COLUMNS)]


def _wrap_roots(roles: List[Role], inherited: Set[str]) -> List[Row]:
    if len(roles) <= MAX_COLUMNS:
        return [list(roles)]
    if not any(role.identifier in inherited for role in roles):
        return _chunks(roles)

    # parents go to the last (full) row, right above their children
    ordered = [r for r in roles if r.identifier not in inherited] + [r for r in roles if r.identifier in inherited]
    head = len(ordered) % MAX_COLUMNS
    rows = [list(ordered[:head])] if head else []
    return rows + _chunks(ordered[head:])


def _place_under_parents(roles: List[Role], upper: Row) -> List[Row]:
    columns = {role.identifier: col for col, role in enumerate(upper) if role is not None}
    first: Row = [None] * MAX_COLUMNS
    pending: List[Role] = []

    for role in roles:
        parent_columns = [columns[p] for p in role.parents() if p in columns]
        if parent_columns and first[min(parent_columns)] is None:
            first[min(parent_columns)] = role
        else:
            pending.append(role)

    free = [col for col, cell in enumerate(first) if cell is None]
    for col, role in zip(free, pending):
        first[col] = role
    overflow = pending[len(free):]

    while first and first[-1] is None:
        first.pop()
    return [first] + _chunks(overflow)


def drawable_links(upper: Row, lower: Row) -> List[Link]:
    """
    Parent/child column pairs that get an arrow between two adjacent rows.

    A child straight under its parent is always linked. Any other link is
    routed along its own horizontal line and is skipped when one of its
    columns is already used by a different parent's lines, since the two
    drawings would merge.
    """
    columns = {role.identifier: col for col, role in enumerate(upper) if role is not None}
    candidates = [
        (columns[parent], col)
        for col, role in enumerate(lower) if role is not None
        for parent in role.parents() if parent in columns
    ]

    links = [(p, c) for p, c in candidates if p == c]
    used: Dict[int, Set[int]] = {p: {p} for p, _ in links}
    for parent, child in candidates:
        if parent == child:
            continue
        others = set()
        for owner, cols in used.items():
            if owner != parent:
                others |= cols
        if parent in others or child in others:
            continue
        links.append((parent, child))
        used.setdefault(parent, {parent}).add(child)
    return links


def _hierarchy_label(relation: Relation) -> str:
    return f"{HIERARCHY_VERBS[relation.kind]} {relation.target}"


def _box_width(entry: PatternEntry) -> int:
    widest = 0
    for role in entry.roles:
        widest = max(widest, len(role.identifier))
        for relation in role.relations:
            if relation.kind.is_hierarchy:
                widest = max(widest, len(_hierarchy_label(relation)))
    return max(MIN_BOX_WIDTH, widest + 4)


def _join_cells(cells: List[str]) -> str:
    return (" " * COLUMN_GAP).join(cells).rstrip()


def _render_boxes(row: Row, width: int) -> List[str]:
    inner = width - 2
    border = "+" + "-" * inner + "+"
    blank = " " * width

    def cells(text) -> List[str]:
        return [blank if role is None else text(role) for role in row]

    return [
        _join_cells(cells(lambda role: border)),
        _join_cells(cells(lambda role: "|" + STEREOTYPES[role.kind].center(inner) + "|")),
        _join_cells(cells(lambda role: "|" + role.identifier.center(inner) + "|")),
        _join_cells(cells(lambda role: border)),
    ]


def _render_connectors(upper: Row, lower: Row, width: int) -> Tuple[List[str], List[str]]:
    """
    Arrow block between two rows, and the hierarchy labels of the lower row.

    Each "^" sits right under a parent box. A parent with children in other
    columns gets a horizontal line of its own, joined with "+".
    """
    cell_labels = [
        [_hierarchy_label(r) for r in role.relations if r.kind.is_hierarchy] if role is not None else []
        for role in lower
    ]
    labels = [
        _join_cells([(cell[index] if index < len(cell) else "").center(width) for cell in cell_labels])
        for index in range(max((len(cell) for cell in cell_labels), default=0))
    ]

    links = drawable_links(upper, lower)
    if not links:
        return [], labels

    def center(col: int) -> int:
        return col * (width + COLUMN_GAP) + width // 2

    buses = sorted({p for p, c in links if p != c})
    bus_line = {parent: index + 1 for index, parent in enumerate(buses)}
    bottom = len(buses) + 1
    canvas = [[" "] * (max(len(upper), len(lower)) * (width + COLUMN_GAP)) for _ in range(bottom + 1)]

    junctions: Dict[int, List[int]] = {}
    for parent in buses:
        xs = [center(parent)] + [center(c) for p, c in links if p == parent]
        junctions[parent] = xs
        for x in range(min(xs), max(xs) + 1):
            canvas[bus_line[parent]][x] = "-"

    for parent, child in links:
        if parent == child:
            _vertical(canvas, center(parent), 1, bottom)
        else:
            _vertical(canvas, center(parent), 1, bus_line[parent])
            _vertical(canvas, center(child), bus_line[parent], bottom)

    for parent, xs in junctions.items():
        for x in xs:
            canvas[bus_line[parent]][x] = "+"
    for parent, _ in links:
        canvas[0][center(parent)] = "^"

    return ["".join(line).rstrip() for line in canvas], labels


def _vertical(canvas: List[List[str]], x: int, top: int, bottom: int) -> None:
    for y in range(top, bottom + 1):
        canvas[y][x] = "|"


def _association_arrow(relation: Relation) -> str:
    if relation.kind is RelationKind.HAS_A:
        return "<-- has-a -->"
    if relation.kind is RelationKind.COMPOSES:
        return "<== composes ==>"
    return f"--{relation.label}-->"


def _render_associations(entry: PatternEntry) -> List[str]:
    rows = [
        (role.identifier, _association_arrow(relation), relation.target)
        for role in entry.roles
        for relation in role.relations
        if not relation.kind.is_hierarchy
    ]
    if not rows:
        return []

    source_width = max(len(source) for source, _, _ in rows)
    arrow_width = max(len(arrow) for _, arrow, _ in rows)
    return [
        f"{source.ljust(source_width)}  {arrow.ljust(arrow_width)}  {target}"
        for source, arrow, target in rows
    ]
