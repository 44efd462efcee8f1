"""Software: the malware and tool objects of ATT&CK."""

from typing import Literal

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    ObjectMarkingRefs,
    Platforms,
    StixCreatedByRef,
    StrictBoolean,
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

SOFTWARE_ID_FORMAT = AttackIdFormat("S", 4)

SOFTWARE_FIELDS = {
    "created_by_ref": required(StixCreatedByRef),
    "object_marking_refs": required(ObjectMarkingRefs),
    "external_references": required(ExternalReferences),
    "x_mitre_platforms": optional(
        Platforms, "The platforms the software can run on."
    ),
    "x_mitre_aliases": optional(
        StringList, "Alternative names used to identify the software."
    ),
    "x_mitre_domains": required(
        Domains, "The ATT&CK domains the software belongs to."
    ),
    "x_mitre_contributors": optional(StringList),
}

SOFTWARE_REQUIRED_FIELDS = (
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
    "x_mitre_domains",
    "x_mitre_modified_by_ref",
    "x_mitre_version",
)

software_schema = (
    attack_base_schema.extend(SOFTWARE_FIELDS, name="Software")
    .require(*SOFTWARE_REQUIRED_FIELDS)
    .strict()
    .refine(attack_id_refinement(SOFTWARE_ID_FORMAT))
)

malware_schema = SCHEMA_REGISTRY.register(
    software_schema.extend(
        {
            "id": required(identifier("malware")),
            "type": required(Literal["malware"]),
            "is_family": required(
                StrictBoolean,
                "Whether the object represents a malware family or a malware instance.",
            ),
        },
        name="Malware",
    )
)

tool_schema = SCHEMA_REGISTRY.register(
    software_schema.extend(
        {
            "id": required(identifier("tool")),
            "type": required(Literal["tool"]),
        },
        name="Tool",
    )
)
