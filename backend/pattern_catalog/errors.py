from typing import List, Optional


class CatalogError(Exception):
    """Base class for every failure raised by the pattern catalog"""


class NotFoundError(CatalogError, LookupError):
    """Unknown pattern name, category or role"""

    def __init__(self, key: str, what: str = "pattern", suggestions: Optional[List[str]] = None):
        self.key = key
        self.what = what
        self.suggestions = suggestions or []

        message = f"Unknown {what} '{key}'"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class NoDemoAvailableError(CatalogError):
    """The entry is a pure sketch: no concrete role calls anything"""

    def __init__(self, entry_name: str):
        self.entry_name = entry_name
        super().__init__(f"Pattern '{entry_name}' has no executable demo")


class MalformedEntryError(CatalogError):
    """Catalog integrity failure detected while the catalog is built"""

    def __init__(self, message: str, issues: Optional[list] = None):
        self.issues = list(issues or [])
        super().__init__(message)
