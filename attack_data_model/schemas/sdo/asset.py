"""Asset."""

from typing import Annotated, Literal

from pydantic import Field, Strict

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    NonEmptyString,
    ObjectMarkingRefs,
    Platforms,
    StixCreatedByRef,
    StrictString,
    StringList,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    AttackIdFormat,
    StixProperty,
    attack_id_refinement,
    optional,
    required,
)

ASSET_ID_FORMAT = AttackIdFormat("A", 4)


class RelatedAsset(StixProperty):
    """Represents an asset commonly related to the described asset."""

    name: NonEmptyString = Field(
        description="The name of the related asset.",
    )
    related_asset_sectors: StringList = Field(
        default=None,
        description="The industry sectors the related asset is found in.",
    )
    description: StrictString = Field(
        default=None,
        description="How the related asset relates to the described asset.",
    )


asset_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("x-mitre-asset")),
            "type": required(Literal["x-mitre-asset"]),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "x_mitre_sectors": optional(
                StringList, "The industry sectors the asset is found in."
            ),
            "x_mitre_related_assets": optional(
                Annotated[list[RelatedAsset], Strict(), Field(min_length=1)],
                "Assets commonly related to this one.",
            ),
            "x_mitre_platforms": optional(Platforms),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the asset belongs to."
            ),
            "x_mitre_contributors": optional(StringList),
        },
        name="Asset",
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
        "x_mitre_domains",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(attack_id_refinement(ASSET_ID_FORMAT))
)
