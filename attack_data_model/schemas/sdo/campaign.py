"""Campaign."""

from typing import Literal

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    StixTimestampField,
    StringList,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    AttackIdFormat,
    attack_id_refinement,
    chronological_refinement,
    optional,
    required,
)

CAMPAIGN_ID_FORMAT = AttackIdFormat("C", 4)

campaign_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("campaign")),
            "type": required(Literal["campaign"]),
            "description": required(NonEmptyString, "A description of the campaign."),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "aliases": required(
                StringList, "Alternative names used to identify the campaign."
            ),
            "first_seen": required(
                StixTimestampField, "The time the campaign was first seen."
            ),
            "last_seen": required(
                StixTimestampField, "The time the campaign was last seen."
            ),
            "x_mitre_first_seen_citation": required(
                NonEmptyString, "The citations backing the first_seen time."
            ),
            "x_mitre_last_seen_citation": required(
                NonEmptyString, "The citations backing the last_seen time."
            ),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the campaign belongs to."
            ),
            "x_mitre_contributors": optional(StringList),
        },
        name="Campaign",
    )
    .require(
        "aliases",
        "created",
        "created_by_ref",
        "description",
        "external_references",
        "first_seen",
        "id",
        "last_seen",
        "modified",
        "name",
        "object_marking_refs",
        "spec_version",
        "type",
        "x_mitre_attack_spec_version",
        "x_mitre_domains",
        "x_mitre_first_seen_citation",
        "x_mitre_last_seen_citation",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(
        attack_id_refinement(CAMPAIGN_ID_FORMAT),
        chronological_refinement(
            "first_seen",
            "last_seen",
            "The last_seen timestamp must be later than or equal to the first_seen "
            "timestamp.",
        ),
    )
)
