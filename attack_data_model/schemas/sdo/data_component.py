"""DataComponent."""

from typing import Literal

from attack_data_model.schemas.common import (
    Domains,
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import SCHEMA_REGISTRY, required

data_component_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-data-component")),
            "type": required(Literal["x-mitre-data-component"]),
            "description": required(
                NonEmptyString, "A description of the data component."
            ),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "x_mitre_data_source_ref": required(
                identifier("x-mitre-data-source"),
                "The ID of the data source the data component belongs to.",
            ),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the data component belongs to."
            ),
        },
        name="DataComponent",
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
        "x_mitre_data_source_ref",
        "x_mitre_domains",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
)
