"""
Pattern catalog verification: lookup, listing and catalog invariants
Run with: pytest test_patterns.py  (or python test_patterns.py)
"""

import dataclasses
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from pattern_catalog import (
    EntryView,
    NotFoundError,
    PatternCatalog,
    PatternCategory,
    RoleKind,
    get_catalog,
)
from pattern_catalog import registry
from pattern_catalog.catalog import PATTERN_CATALOG

CANONICAL_ORDER = [
    "Singleton",
    "Factory Method",
    "Abstract Factory",
    "Builder",
    "Prototype",
    "Adapter",
    "Decorator",
    "Facade",
    "Composite",
    "Proxy",
    "Chain of Responsibility",
    "Command",
    "Iterator",
    "Mediator",
    "Memento",
    "Observer",
    "State",
    "Strategy",
    "Template Method",
    "Visitor",
]


@pytest.fixture
def catalog():
    return get_catalog()


def test_list_returns_twenty_entries_in_canonical_order(catalog):
    entries = list(catalog.list())
    assert len(entries) == 20
    assert [e.name for e in entries] == CANONICAL_ORDER
    assert [e.number for e in entries] == list(range(1, 21))


def test_structural_filter(catalog):
    names = [e.name for e in catalog.list(PatternCategory.STRUCTURAL)]
    assert names == ["Adapter", "Decorator", "Facade", "Composite", "Proxy"]


def test_category_counts(catalog):
    assert len(catalog.list(PatternCategory.CREATIONAL)) == 5
    assert len(catalog.list(PatternCategory.STRUCTURAL)) == 5
    assert len(catalog.list(PatternCategory.BEHAVIORAL)) == 10


def test_category_accepts_string_value(catalog):
    assert [e.name for e in catalog.list("Structural")] == [
        e.name for e in catalog.list(PatternCategory.STRUCTURAL)
    ]


def test_unknown_category_is_not_found(catalog):
    with pytest.raises(NotFoundError) as exc:
        catalog.list("architectural")
    assert exc.value.what == "category"


def test_list_view_is_restartable(catalog):
    view = catalog.list(PatternCategory.BEHAVIORAL)
    assert isinstance(view, EntryView)
    first = [e.name for e in view]
    second = [e.name for e in view]
    assert first == second
    assert len(first) == 10


@pytest.mark.parametrize("name", CANONICAL_ORDER)
def test_lookup_returns_entry_with_same_name(catalog, name):
    assert catalog.lookup(name).name == name


def test_lookup_singleton_scenario(catalog):
    entry = catalog.lookup("Singleton")
    assert entry.category is PatternCategory.CREATIONAL
    assert len(entry.roles) == 1
    assert entry.roles[0].identifier == "SingletonClass"
    assert entry.roles[0].kind is RoleKind.CONCRETE_CLASS


def test_lookup_unknown_name(catalog):
    with pytest.raises(NotFoundError):
        catalog.lookup("Nonexistent")


def test_lookup_is_case_sensitive(catalog):
    with pytest.raises(NotFoundError) as exc:
        catalog.lookup("command")
    assert "Command" in exc.value.suggestions


def test_not_found_is_a_lookup_error(catalog):
    with pytest.raises(LookupError):
        catalog.lookup("Flyweight")


def test_global_catalog_is_created_once():
    assert get_catalog() is get_catalog()


def test_concurrent_first_calls_build_one_catalog(monkeypatch):
    built = []

    class SlowCatalog(PatternCatalog):
        def __init__(self, entries):
            time.sleep(0.05)
            built.append(self)
            super().__init__(entries)

    monkeypatch.setattr(registry, "_global_catalog", None)
    monkeypatch.setattr(registry, "PatternCatalog", SlowCatalog)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: get_catalog(), range(8)))

    assert len(built) == 1
    assert all(result is built[0] for result in results)


def test_entries_are_immutable(catalog):
    entry = catalog.lookup("Command")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "Order"
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.roles[0].identifier = "Other"
    assert isinstance(entry.roles, tuple)


def test_every_entry_has_roles_and_resolvable_relations(catalog):
    for entry in catalog.list():
        assert entry.roles, entry.name
        role_ids = {role.identifier for role in entry.roles}
        for role in entry.roles:
            for relation in role.relations:
                assert relation.target in role_ids, (entry.name, role.identifier, relation.target)


def test_definitions_are_left_untouched_by_catalog():
    PatternCatalog(PATTERN_CATALOG)
    assert all(entry.diagram == "" and entry.number == 0 for entry in PATTERN_CATALOG)


def test_names_and_contains(catalog):
    assert catalog.names() == CANONICAL_ORDER
    assert "Visitor" in catalog
    assert "Interpreter" not in catalog
    assert len(catalog) == 20


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
