"""Matrix."""

from typing import Annotated, Literal

from pydantic import Field, Strict

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    RefinementContext,
    StixObject,
    required,
)

TacticRefs = Annotated[
    list[identifier("x-mitre-tactic")], Strict(), Field(min_length=1)
]


def unique_tactic_refs(obj: StixObject, ctx: RefinementContext) -> None:
    """Reject a tactic listed twice in the same matrix."""
    seen: set[str] = set()
    for index, tactic_ref in enumerate(obj.get("tactic_refs", [])):
        if tactic_ref in seen:
            ctx.add_issue(
                f"Duplicate tactic reference: {tactic_ref}",
                path=("tactic_refs", index),
            )
        seen.add(tactic_ref)


matrix_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-matrix")),
            "type": required(Literal["x-mitre-matrix"]),
            "description": required(NonEmptyString, "A description of the matrix."),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "tactic_refs": required(
                TacticRefs, "The tactics of the matrix, in display order."
            ),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the matrix belongs to."
            ),
        },
        name="Matrix",
    )
    .require(
        "created",
        "created_by_ref",
        "description",
        "external_references",
        "id",
        "modified",
        "name",
        "object_marking_refs",
        "spec_version",
        "tactic_refs",
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_domains",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(unique_tactic_refs)
)
