"""Tactic."""

from typing import Annotated, Literal

from pydantic import StringConstraints

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    StringList,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    AttackIdFormat,
    attack_id_refinement,
    optional,
    required,
)

TACTIC_ID_FORMAT = AttackIdFormat("TA", 4)

# Shortnames are the phase names used by the kill chain phases of techniques
TacticShortname = Annotated[
    str, StringConstraints(strict=True, pattern=r"^[a-z]+(-[a-z]+)*$")
]

tactic_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-tactic")),
            "type": required(Literal["x-mitre-tactic"]),
            "description": required(NonEmptyString, "A description of the tactic."),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the tactic belongs to."
            ),
            "x_mitre_shortname": required(
                TacticShortname,
                "The tactic shortname, referenced by the kill chain phases of "
                "techniques.",
            ),
            "x_mitre_contributors": optional(StringList),
        },
        name="Tactic",
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
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_domains",
        "x_mitre_modified_by_ref",
        "x_mitre_shortname",
        "x_mitre_version",
    )
    .strict()
    .refine(attack_id_refinement(TACTIC_ID_FORMAT))
)
