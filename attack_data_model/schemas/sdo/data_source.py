"""DataSource."""

from typing import Literal

from attack_data_model.schemas.common import (
    CollectionLayers,
    Domains,
    ExternalReferences,
    NonEmptyString,
    ObjectMarkingRefs,
    Platforms,
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

DATA_SOURCE_ID_FORMAT = AttackIdFormat("DS", 4)

data_source_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-data-source")),
            "type": required(Literal["x-mitre-data-source"]),
            "description": required(
                NonEmptyString, "A description of the data source."
            ),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "x_mitre_platforms": optional(
                Platforms, "The platforms the data source can be collected on."
            ),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the data source belongs to."
            ),
            "x_mitre_collection_layers": required(
                CollectionLayers, "The layers where the data source can be collected."
            ),
            "x_mitre_contributors": optional(
                StringList, "People and organizations who contributed to the object."
            ),
        },
        name="DataSource",
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
        "x_mitre_collection_layers",
        "x_mitre_domains",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(attack_id_refinement(DATA_SOURCE_ID_FORMAT))
)
