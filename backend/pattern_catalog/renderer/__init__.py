from pattern_catalog.models import PatternEntry
from pattern_catalog.renderer.ascii_renderer import group_levels, layout_rows, render
from pattern_catalog.renderer.mermaid_renderer import render_mermaid

RENDERERS = {
    "ascii": render,
    "mermaid": render_mermaid,
}


def render_entry(entry: PatternEntry, fmt: str = "ascii") -> str:
    renderer = RENDERERS.get(fmt)
    if renderer is None:
        raise ValueError(f"Unknown diagram format '{fmt}' (expected one of: {', '.join(RENDERERS)})")
    return renderer(entry)


__all__ = [
    "RENDERERS",
    "group_levels",
    "layout_rows",
    "render",
    "render_entry",
    "render_mermaid",
]
