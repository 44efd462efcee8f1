"""Technique, the ATT&CK flavour of a STIX attack pattern."""

from typing import Annotated, Literal

from pydantic import Field, Strict

from attack_data_model.schemas.common import (
    Domains,
    ExternalReferences,
    ImpactType,
    KillChainPhases,
    ObjectMarkingRefs,
    Permission,
    Platforms,
    StixCreatedByRef,
    StrictBoolean,
    StrictString,
    StringList,
    TacticType,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    AttackIdFormat,
    RefinementContext,
    StixObject,
    check_attack_id,
    optional,
    required,
)

TECHNIQUE_ID_FORMAT = AttackIdFormat("T", 4)
SUBTECHNIQUE_ID_FORMAT = AttackIdFormat("T", 4, sub_digits=3)


def technique_attack_id(obj: StixObject, ctx: RefinementContext) -> None:
    """Check the ATT&CK ID against the technique or sub-technique format."""
    if obj.get("x_mitre_is_subtechnique"):
        check_attack_id(obj, ctx, SUBTECHNIQUE_ID_FORMAT)
    else:
        check_attack_id(obj, ctx, TECHNIQUE_ID_FORMAT)


technique_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("attack-pattern")),
            "type": required(Literal["attack-pattern"]),
            "created_by_ref": required(StixCreatedByRef),
            "object_marking_refs": required(ObjectMarkingRefs),
            "external_references": required(ExternalReferences),
            "kill_chain_phases": optional(
                KillChainPhases, "The tactics the technique belongs to."
            ),
            "x_mitre_is_subtechnique": required(
                StrictBoolean, "Whether the technique is a sub-technique."
            ),
            "x_mitre_domains": required(
                Domains, "The ATT&CK domains the technique belongs to."
            ),
            "x_mitre_platforms": optional(Platforms),
            "x_mitre_detection": optional(
                StrictString, "Strategies for identifying if the technique was used."
            ),
            "x_mitre_data_sources": optional(
                StringList, "The data sources and components detecting the technique."
            ),
            "x_mitre_defense_bypassed": optional(StringList),
            "x_mitre_contributors": optional(StringList),
            "x_mitre_permissions_required": optional(
                Annotated[list[Permission], Strict(), Field(min_length=1)],
                "The lowest level of permissions required to perform the technique.",
            ),
            "x_mitre_effective_permissions": optional(
                Annotated[list[Permission], Strict(), Field(min_length=1)],
                "The level of permissions obtained by performing the technique.",
            ),
            "x_mitre_system_requirements": optional(StringList),
            "x_mitre_remote_support": optional(StrictBoolean),
            "x_mitre_network_requirements": optional(StrictBoolean),
            "x_mitre_impact_type": optional(
                Annotated[list[ImpactType], Strict(), Field(min_length=1)]
            ),
            "x_mitre_tactic_type": optional(
                Annotated[list[TacticType], Strict(), Field(min_length=1)],
                "The Mobile tactic types the technique belongs to.",
            ),
        },
        name="Technique",
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
        "x_mitre_is_subtechnique",
        "x_mitre_modified_by_ref",
        "x_mitre_version",
    )
    .strict()
    .refine(technique_attack_id)
)
