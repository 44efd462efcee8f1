"""Mitigation, the ATT&CK flavour of a STIX course of action."""

from typing import Literal

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

MITIGATION_ID_FORMAT = AttackIdFormat("M", 4)

mitigation_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("course-of-action")),
            "type": required(Literal["course-of-action"]),
            "description": required(
                NonEmptyString, "A description of the mitigation."
            ),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the mitigation belongs to."
            ),
            "x_mitre_contributors": optional(StringList),
        },
        name="Mitigation",
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
        "x_mitre_version",
    )
    .strict()
    .refine(attack_id_refinement(MITIGATION_ID_FORMAT))
)
