"""
Pattern Registry - Central, read-only store for catalog entries
"""

import threading
from dataclasses import replace
from difflib import get_close_matches
from typing import Dict, Iterable, Iterator, List, Optional

from pattern_catalog.config import debug
from pattern_catalog.errors import NotFoundError
from pattern_catalog.models import PatternCategory, PatternEntry
from pattern_catalog.renderer import render
from pattern_catalog.validation import ValidationSeverity, raise_on_errors


class EntryView:
    """
    Lazy view over catalog entries in canonical order.

    Filtering happens on iteration, so the view can be iterated any
    number of times and always yields the same entries.
    """

    def __init__(self, entries: tuple, category: Optional[PatternCategory] = None):
        self._entries = entries
        self.category = category

    def __iter__(self) -> Iterator[PatternEntry]:
        for entry in self._entries:
            if self.category is None or entry.category is self.category:
                yield entry

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        category = self.category.value if self.category else "all"
        return f"EntryView({category}, {len(self)} entries)"


class PatternCatalog:
    """
    Registry of the classic design patterns

    Built once from static definitions: every entry is validated, numbered
    and given its rendered diagram. There is no mutation API.
    """

    def __init__(self, entries: Iterable[PatternEntry]):
        definitions = tuple(entries)
        result = raise_on_errors(definitions)
        for issue in result.issues:
            if issue.severity == ValidationSeverity.WARNING:
                debug("CATALOG", f"[{issue.code}] {issue.message}")

        self._entries = tuple(
            replace(entry, number=number, diagram=render(entry))
            for number, entry in enumerate(definitions, start=1)
        )
        self._by_name: Dict[str, PatternEntry] = {entry.name: entry for entry in self._entries}
        debug("CATALOG", f"PatternCatalog initialized with {len(self._entries)} entries")

    def lookup(self, name: str) -> PatternEntry:
        """Exact, case-sensitive lookup by canonical name"""
        entry = self._by_name.get(name)
        debug("CATALOG", f"lookup('{name}') -> {'Found' if entry else 'Not found'}")
        if entry is None:
            raise NotFoundError(name, suggestions=get_close_matches(name, self.names(), n=3, cutoff=0.5))
        return entry

    def list(self, category=None) -> EntryView:
        """Entries in canonical order, optionally restricted to one category"""
        if category is not None:
            category = PatternCategory.parse(category)
        return EntryView(self._entries, category)

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._entries)

    def __contains__(self, name) -> bool:
        return name in self._by_name


# Global catalog instance
_global_catalog: Optional[PatternCatalog] = None
_global_lock = threading.Lock()


def get_catalog() -> PatternCatalog:
    """Get or create the global pattern catalog (built once, even under concurrent first calls)"""
    global _global_catalog
    if _global_catalog is None:
        with _global_lock:
            if _global_catalog is None:
                debug("CATALOG", "Creating global PatternCatalog")
                from pattern_catalog.catalog import PATTERN_CATALOG
                _global_catalog = PatternCatalog(PATTERN_CATALOG)
    return _global_catalog
