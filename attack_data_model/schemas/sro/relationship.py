"""Relationship."""

from typing import Literal

from attack_data_model.schemas.common import (
    ATTACK_BASE_FIELDS,
    Domains,
    ObjectMarkingRefs,
    RelationshipType,
    StixCreatedByRef,
    StixIdentifier,
    StixType,
    identifier,
    stix_domain_schema,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    RefinementContext,
    StixObject,
    optional,
    required,
)

# relationship type -> (allowed source types, allowed target types)
RELATIONSHIP_ENDPOINTS: dict[RelationshipType, tuple[frozenset[str], frozenset[str]]] = {
    RelationshipType.USES: (
        frozenset(
            {
                StixType.CAMPAIGN,
                StixType.INTRUSION_SET,
                StixType.MALWARE,
                StixType.TOOL,
            }
        ),
        frozenset({StixType.ATTACK_PATTERN, StixType.MALWARE, StixType.TOOL}),
    ),
    RelationshipType.MITIGATES: (
        frozenset({StixType.COURSE_OF_ACTION}),
        frozenset({StixType.ATTACK_PATTERN}),
    ),
    RelationshipType.SUBTECHNIQUE_OF: (
        frozenset({StixType.ATTACK_PATTERN}),
        frozenset({StixType.ATTACK_PATTERN}),
    ),
    RelationshipType.DETECTS: (
        frozenset({StixType.X_MITRE_DATA_COMPONENT}),
        frozenset({StixType.ATTACK_PATTERN}),
    ),
    RelationshipType.ATTRIBUTED_TO: (
        frozenset({StixType.CAMPAIGN}),
        frozenset({StixType.INTRUSION_SET}),
    ),
    RelationshipType.TARGETS: (
        frozenset({StixType.ATTACK_PATTERN}),
        frozenset({StixType.X_MITRE_ASSET}),
    ),
}


def _ref_type(ref: str) -> str:
    return ref.split("--", 1)[0]


def compatible_endpoints(obj: StixObject, ctx: RefinementContext) -> None:
    """Check the source and target types against the relationship type.

    A ``revoked-by`` relationship only requires both ends to share one type.
    """
    relationship_type = obj.get("relationship_type")
    source_type = _ref_type(obj.get("source_ref"))
    target_type = _ref_type(obj.get("target_ref"))
    if relationship_type == RelationshipType.REVOKED_BY:
        if source_type != target_type:
            ctx.add_issue(
                f"A revoked-by relationship must link objects of the same type, "
                f"got '{source_type}' and '{target_type}'.",
                path=("target_ref",),
            )
        return
    sources, targets = RELATIONSHIP_ENDPOINTS[relationship_type]
    if source_type not in sources:
        ctx.add_issue(
            f"Invalid source_ref type '{source_type}' for a '{relationship_type}' "
            f"relationship, expected one of: {', '.join(sorted(sources))}.",
            path=("source_ref",),
        )
    if target_type not in targets:
        ctx.add_issue(
            f"Invalid target_ref type '{target_type}' for a '{relationship_type}' "
            f"relationship, expected one of: {', '.join(sorted(targets))}.",
            path=("target_ref",),
        )


relationship_schema = SCHEMA_REGISTRY.register(
    stix_domain_schema.extend(
        {
            name: ATTACK_BASE_FIELDS[name]
            for name in (
                "description",
                "x_mitre_version",
                "x_mitre_attack_spec_version",
                "x_mitre_deprecated",
                "x_mitre_modified_by_ref",
            )
        },
        name="Relationship",
    )
    .extend(
        {
            "id": required(identifier("relationship")),
            "type": required(Literal["relationship"]),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "relationship_type": required(
                RelationshipType, "The type of the relationship."
            ),
            "source_ref": required(
                StixIdentifier, "The ID of the source of the relationship."
            ),
            "target_ref": required(
                StixIdentifier, "The ID of the target of the relationship."
            ),
            "x_mitre_domains": optional(Domains),
        }
    )
    .require(
        "created",
        "created_by_ref",
        "id",
        "modified",
        "object_marking_refs",
        "relationship_type",
        "source_ref",
        "spec_version",
        "target_ref",
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(compatible_endpoints)
)
