"""Group, the ATT&CK flavour of a STIX intrusion set."""

from typing import Literal

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
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

GROUP_ID_FORMAT = AttackIdFormat("G", 4)

group_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("intrusion-set")),
            "type": required(Literal["intrusion-set"]),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "aliases": optional(
                StringList, "Alternative names used to identify the group."
            ),
            "x_mitre_domains": optional(
                Domains, "The ATT&CK domains the group belongs to."
            ),
            "x_mitre_contributors": optional(StringList),
        },
        name="Group",
    )
    .require(
        "created",
        "created_by_ref",
        "external_references",
        "id",
        "modified",
        "name",
        "object_marking_refs",
        "spec_version",
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(attack_id_refinement(GROUP_ID_FORMAT))
)
