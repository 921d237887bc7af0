"""
Entry Validator - Integrity checks run while the catalog is built.

Catches issues like:
- Entries without roles or without a name
- Duplicate role identifiers
- Relations pointing at roles the entry does not define
- Roles inheriting from themselves, directly or through a cycle
- Calls relations without an operation label
- Duplicate entry names across the catalog

Any ERROR aborts catalog construction with MalformedEntryError.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set
from enum import Enum
from collections import defaultdict

from pattern_catalog.errors import MalformedEntryError
from pattern_catalog.models import PatternEntry, RelationKind


class ValidationSeverity(Enum):
    ERROR = "error"      # Entry cannot be rendered or demoed
    WARNING = "warning"  # Entry works but reads badly


@dataclass
class ValidationIssue:
    """A single validation issue found in an entry"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    entry_name: Optional[str] = None
    role_id: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "entry_name": self.entry_name,
            "role_id": self.role_id,
            "suggestion": self.suggestion,
        }


@dataclass
class EntryValidationResult:
    """Result of validating one or more entries"""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        status = "Valid" if self.is_valid else "Invalid"
        return f"{status} | Errors: {self.error_count}, Warnings: {self.warning_count}"


class EntryValidator:
    """
    Validates pattern entries for internal consistency.

    Usage:
        validator = EntryValidator()
        result = validator.validate(entry)

        if not result.is_valid:
            for issue in result.issues:
                print(f"[{issue.severity.value}] {issue.message}")
    """

    def validate(self, entry: PatternEntry) -> EntryValidationResult:
        issues: List[ValidationIssue] = []

        issues.extend(self._check_name(entry))
        issues.extend(self._check_roles_present(entry))
        issues.extend(self._check_duplicate_role_ids(entry))
        issues.extend(self._check_dangling_relations(entry))
        issues.extend(self._check_self_inheritance(entry))
        issues.extend(self._check_inheritance_cycles(entry))
        issues.extend(self._check_call_labels(entry))
        issues.extend(self._check_refusals(entry))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        return EntryValidationResult(
            is_valid=not has_errors,
            issues=issues,
            stats=self._calculate_stats(entry),
        )

    def _check_name(self, entry: PatternEntry) -> List[ValidationIssue]:
        if entry.name and entry.name.strip():
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="EMPTY_NAME",
            message="Pattern entry has an empty name",
            suggestion="Give every entry its canonical pattern name",
        )]

    def _check_roles_present(self, entry: PatternEntry) -> List[ValidationIssue]:
        if entry.roles:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="NO_ROLES",
            message=f"Pattern '{entry.name}' has no roles",
            entry_name=entry.name,
            suggestion="Add at least one participant to the sketch",
        )]

    def _check_duplicate_role_ids(self, entry: PatternEntry) -> List[ValidationIssue]:
        issues = []
        seen: Dict[str, int] = defaultdict(int)
        for role in entry.roles:
            seen[role.identifier] += 1
        for role_id, count in seen.items():
            if count > 1:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="DUPLICATE_ROLE_ID",
                    message=f"Role '{role_id}' appears {count} times in '{entry.name}'",
                    entry_name=entry.name,
                    role_id=role_id,
                    suggestion="Ensure each role has a unique identifier",
                ))
        return issues

    def _check_dangling_relations(self, entry: PatternEntry) -> List[ValidationIssue]:
        issues = []
        role_ids = {role.identifier for role in entry.roles}
        for role in entry.roles:
            for relation in role.relations:
                if relation.target not in role_ids:
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="DANGLING_RELATION",
                        message=(
                            f"Role '{role.identifier}' {relation.kind.value} unknown role "
                            f"'{relation.target}' in '{entry.name}'"
                        ),
                        entry_name=entry.name,
                        role_id=role.identifier,
                        suggestion=f"Define role '{relation.target}' or fix the relation target",
                    ))
        return issues

    def _check_self_inheritance(self, entry: PatternEntry) -> List[ValidationIssue]:
        issues = []
        for role in entry.roles:
            if role.identifier in role.parents():
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="SELF_INHERITANCE",
                    message=f"Role '{role.identifier}' implements or extends itself",
                    entry_name=entry.name,
                    role_id=role.identifier,
                ))
        return issues

    def _check_inheritance_cycles(self, entry: PatternEntry) -> List[ValidationIssue]:
        """Detect cycles longer than one hop in the implements/extends graph"""
        parents = {role.identifier: [p for p in role.parents() if p != role.identifier] for role in entry.roles}
        issues = []
        visited: Set[str] = set()
        reported: Set[str] = set()

        def dfs(role_id: str, path: List[str]) -> None:
            if role_id in path:
                cycle = path[path.index(role_id):]
                key = ",".join(sorted(cycle))
                if key not in reported:
                    reported.add(key)
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="INHERITANCE_CYCLE",
                        message=f"Inheritance cycle in '{entry.name}': {' -> '.join(cycle + [role_id])}",
                        entry_name=entry.name,
                        role_id=role_id,
                        suggestion="Break the cycle: a role cannot be its own ancestor",
                    ))
                return
            if role_id in visited or role_id not in parents:
                return
            for parent in parents[role_id]:
                dfs(parent, path + [role_id])
            visited.add(role_id)

        for role_id in parents:
            dfs(role_id, [])
        return issues

    def _check_call_labels(self, entry: PatternEntry) -> List[ValidationIssue]:
        issues = []
        for role in entry.roles:
            for relation in role.calls():
                if not relation.label.strip():
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        code="CALL_WITHOUT_LABEL",
                        message=f"Role '{role.identifier}' calls '{relation.target}' without naming the operation",
                        entry_name=entry.name,
                        role_id=role.identifier,
                        suggestion="Label the call with the invoked operation, e.g. 'execute()'",
                    ))
        return issues

    def _check_refusals(self, entry: PatternEntry) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.WARNING,
                code="REFUSAL_WITHOUT_TEXT",
                message=f"Role '{role.identifier}' refuses arguments but has no refusal line",
                entry_name=entry.name,
                role_id=role.identifier,
                suggestion="Set refusal, e.g. 'Access Denied to {arg}'",
            )
            for role in entry.roles
            if role.refuses and not role.refusal.strip()
        ]

    def _calculate_stats(self, entry: PatternEntry) -> Dict[str, int]:
        relation_counts: Dict[RelationKind, int] = defaultdict(int)
        for role in entry.roles:
            for relation in role.relations:
                relation_counts[relation.kind] += 1
        return {
            "roles": len(entry.roles),
            "concrete_roles": sum(1 for r in entry.roles if r.is_concrete),
            "relations": sum(relation_counts.values()),
            "calls": relation_counts.get(RelationKind.CALLS, 0),
        }


def validate_entry(entry: PatternEntry) -> EntryValidationResult:
    """Convenience function to validate a single entry."""
    return EntryValidator().validate(entry)


def validate_entries(entries: Iterable[PatternEntry]) -> EntryValidationResult:
    """Validate every entry plus catalog-wide name uniqueness."""
    validator = EntryValidator()
    issues: List[ValidationIssue] = []
    names: Dict[str, int] = defaultdict(int)
    count = 0

    for entry in entries:
        count += 1
        names[entry.name] += 1
        issues.extend(validator.validate(entry).issues)

    for name, seen in names.items():
        if seen > 1:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="DUPLICATE_ENTRY_NAME",
                message=f"Pattern name '{name}' is defined {seen} times",
                entry_name=name,
                suggestion="Pattern names must be unique within the catalog",
            ))

    has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
    return EntryValidationResult(is_valid=not has_errors, issues=issues, stats={"entries": count})


def raise_on_errors(entries: Iterable[PatternEntry]) -> EntryValidationResult:
    """Validate entries and raise MalformedEntryError if errors are found."""
    result = validate_entries(entries)
    if not result.is_valid:
        errors = [i for i in result.issues if i.severity == ValidationSeverity.ERROR]
        raise MalformedEntryError(
            f"Catalog validation failed with {result.error_count} errors:\n"
            + "\n".join(f"[{i.code}] {i.message}" for i in errors),
            issues=errors,
        )
    return result
