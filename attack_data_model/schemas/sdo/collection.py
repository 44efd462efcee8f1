"""Collection."""

from typing import Literal

from attack_data_model.schemas.common import (
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    XMitreContents,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    non_empty_refinement,
    optional,
    required,
)

collection_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-collection")),
            "type": required(Literal["x-mitre-collection"]),
            # Optional in STIX but required in ATT&CK
            "created_by_ref": required(StixCreatedByRef),
            # Optional in STIX but required in ATT&CK
            "object_marking_refs": required(ObjectMarkingRefs),
            "description": optional(
                NonEmptyString,
                "Details, context, and explanation about the purpose or contents of "
                "the collection.",
            ),
            "x_mitre_contents": required(
                XMitreContents, "Specifies the objects contained within the collection."
            ),
        },
        name="Collection",
    )
    .require(
        "created",
        "created_by_ref",
        "description",
        "id",
        "modified",
        "name",
        "object_marking_refs",
        "spec_version",
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_contents",
        "x_mitre_version",
    )
    .strict()
    .refine(
        non_empty_refinement(
            "x_mitre_contents", "At least one STIX object reference is required"
        )
    )
)
