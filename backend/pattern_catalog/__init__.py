# backend/pattern_catalog/__init__.py
"""
Design Pattern Catalog

The twenty classic object-oriented design patterns, each with:
- A structural sketch (roles and typed relations)
- An ASCII or Mermaid diagram rendered from the sketch
- An optional demo interpreted from the sketch's Calls relations
"""

from pattern_catalog.errors import (
    CatalogError,
    MalformedEntryError,
    NoDemoAvailableError,
    NotFoundError,
)
from pattern_catalog.models import (
    DemoResult,
    PatternCategory,
    PatternEntry,
    Relation,
    RelationKind,
    Role,
    RoleKind,
)
from pattern_catalog.registry import (
    EntryView,
    PatternCatalog,
    get_catalog,
)
from pattern_catalog.renderer import render, render_entry, render_mermaid
from pattern_catalog.demo import DemoRunner, run

__all__ = [
    "CatalogError",
    "DemoResult",
    "DemoRunner",
    "EntryView",
    "MalformedEntryError",
    "NoDemoAvailableError",
    "NotFoundError",
    "PatternCatalog",
    "PatternCategory",
    "PatternEntry",
    "Relation",
    "RelationKind",
    "Role",
    "RoleKind",
    "get_catalog",
    "render",
    "render_entry",
    "render_mermaid",
    "run",
]
