from pattern_catalog.models import PatternEntry
from pattern_catalog.schemas import PatternDetail, PatternSummary, RelationModel, RoleModel


def serialize_summary(entry: PatternEntry) -> PatternSummary:
    return PatternSummary(
        number=entry.number,
        name=entry.name,
        category=entry.category.value,
        summary=entry.summary,
        has_demo=entry.has_demo,
    )


def serialize_entry(entry: PatternEntry) -> PatternDetail:
    """Full entry, roles and relations included. Deterministic."""
    return PatternDetail(
        **serialize_summary(entry).model_dump(),
        explanation=entry.explanation,
        roles=[
            RoleModel(
                identifier=role.identifier,
                kind=role.kind.value,
                description=role.description,
                relations=[
                    RelationModel(kind=r.kind.value, target=r.target, label=r.label, argument=r.argument)
                    for r in role.relations
                ],
                actions=list(role.actions),
                refuses=list(role.refuses),
                refusal=role.refusal,
            )
            for role in entry.roles
        ],
    )
