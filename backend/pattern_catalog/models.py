"""
Pattern Models - Entries, roles and relations of the catalog

Structural sketches are plain data: inheritance and dispatch are
expressed as typed relations between roles, never as real Python
class hierarchies.
"""

from dataclasses import dataclass, field
from difflib import get_close_matches
from enum import Enum
from typing import Optional, Tuple

from pattern_catalog.errors import NotFoundError


class PatternCategory(Enum):
    """The three families of classic design patterns"""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def parse(cls, value) -> "PatternCategory":
        """Accept an enum member or its (case-insensitive) string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise NotFoundError(str(value), what="category", suggestions=[c.value for c in cls]) from None


class RoleKind(Enum):
    INTERFACE = "interface"
    ABSTRACT_CLASS = "abstract_class"
    CONCRETE_CLASS = "concrete_class"


class RelationKind(Enum):
    IMPLEMENTS = "implements"
    EXTENDS = "extends"
    HAS_A = "has_a"
    COMPOSES = "composes"
    CALLS = "calls"

    @property
    def is_hierarchy(self) -> bool:
        return self in (RelationKind.IMPLEMENTS, RelationKind.EXTENDS)


@dataclass(frozen=True)
class Relation:
    """Typed edge from the owning role to another role of the same entry"""
    kind: RelationKind
    target: str
    label: str = ""  # operation name, only meaningful for CALLS
    argument: str = ""  # value passed along a CALLS edge, substituted for {arg} in actions


@dataclass(frozen=True)
class Role:
    """A type-like participant of a pattern (Creator, Product, Receiver...)"""
    identifier: str
    kind: RoleKind
    relations: Tuple[Relation, ...] = ()
    actions: Tuple[str, ...] = ()  # what the role "does" when a demo invokes it
    description: Optional[str] = None  # participant tag, e.g. "Invoker"
    refuses: Tuple[str, ...] = ()  # arguments that stop the call chain at this role
    refusal: str = ""  # line emitted instead of the role's calls when it refuses

    def __post_init__(self):
        object.__setattr__(self, "relations", tuple(self.relations))
        object.__setattr__(self, "actions", tuple(self.actions))
        object.__setattr__(self, "refuses", tuple(self.refuses))

    @property
    def is_concrete(self) -> bool:
        return self.kind is RoleKind.CONCRETE_CLASS

    def parents(self) -> Tuple[str, ...]:
        """Identifiers this role implements or extends"""
        return tuple(r.target for r in self.relations if r.kind.is_hierarchy)

    def calls(self) -> Tuple[Relation, ...]:
        return tuple(r for r in self.relations if r.kind is RelationKind.CALLS)


@dataclass(frozen=True)
class PatternEntry:
    """
    One catalogued design pattern

    `diagram` and `number` are filled in by the catalog when it is built;
    definitions leave them empty.
    """
    name: str
    category: PatternCategory
    summary: str
    roles: Tuple[Role, ...]
    explanation: str = ""
    diagram: str = ""
    number: int = 0

    def __post_init__(self):
        object.__setattr__(self, "roles", tuple(self.roles))

    def role(self, identifier: str) -> Role:
        """Role by identifier; NotFoundError suggests close identifiers"""
        for role in self.roles:
            if role.identifier == identifier:
                return role
        names = [role.identifier for role in self.roles]
        raise NotFoundError(identifier, what="role", suggestions=get_close_matches(identifier, names, n=3, cutoff=0.5))

    @property
    def has_demo(self) -> bool:
        return any(role.is_concrete and role.calls() for role in self.roles)


@dataclass(frozen=True)
class DemoResult:
    """Output captured from one demo run"""
    entry_name: str
    output_lines: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "output_lines", tuple(self.output_lines))


# ------------------------------------------------------------
# Relation shorthands used by the catalog definitions
# ------------------------------------------------------------

def implements(target: str) -> Relation:
    return Relation(RelationKind.IMPLEMENTS, target)


def extends(target: str) -> Relation:
    return Relation(RelationKind.EXTENDS, target)


def has_a(target: str) -> Relation:
    return Relation(RelationKind.HAS_A, target)


def composes(target: str) -> Relation:
    return Relation(RelationKind.COMPOSES, target)


def calls(target: str, label: str, argument: str = "") -> Relation:
    return Relation(RelationKind.CALLS, target, label, argument)
