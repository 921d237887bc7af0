# backend/pattern_catalog/renderer/mermaid_renderer.py

from pattern_catalog.models import PatternEntry, RelationKind, RoleKind

ANNOTATIONS = {
    RoleKind.INTERFACE: "<<interface>>",
    RoleKind.ABSTRACT_CLASS: "<<abstract>>",
}

# Mermaid arrows read "parent <|.. child", "whole o-- part"
EDGE_SYNTAX = {
    RelationKind.IMPLEMENTS: "<|..",
    RelationKind.EXTENDS: "<|--",
    RelationKind.HAS_A: "o--",
    RelationKind.COMPOSES: "*--",
}


def render_mermaid(entry: PatternEntry) -> str:
    """Converts a pattern sketch → Mermaid classDiagram."""
    lines = ["classDiagram"]

    # -------------------------
    # Classes
    # -------------------------
    for role in entry.roles:
        annotation = ANNOTATIONS.get(role.kind)
        if annotation:
            lines.append(f"    class {role.identifier} {{")
            lines.append(f"        {annotation}")
            lines.append("    }")
        else:
            lines.append(f"    class {role.identifier}")

    # -------------------------
    # Relations
    # -------------------------
    for role in entry.roles:
        for relation in role.relations:
            if relation.kind is RelationKind.CALLS:
                label = f" : {relation.label}" if relation.label else ""
                lines.append(f"    {role.identifier} --> {relation.target}{label}")
            elif relation.kind.is_hierarchy:
                lines.append(f"    {relation.target} {EDGE_SYNTAX[relation.kind]} {role.identifier}")
            else:
                lines.append(f"    {role.identifier} {EDGE_SYNTAX[relation.kind]} {relation.target}")

    return "\n".join(lines)
