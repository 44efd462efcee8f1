"""Offer the building blocks shared by every object schema."""

from attack_data_model.schemas.common.enums import (
    X_MITRE_IDENTITY,
    X_MITRE_MARKING,
    AttackDomain,
    CollectionLayer,
    IdentityClass,
    ImpactType,
    KillChainName,
    Permission,
    Platform,
    RelationshipType,
    StixType,
    TacticType,
)
from attack_data_model.schemas.common.fields import (
    ATTACK_BASE_FIELDS,
    STIX_CORE_FIELDS,
    STIX_DOMAIN_FIELDS,
    attack_base_schema,
    stix_core_schema,
    stix_domain_schema,
)
from attack_data_model.schemas.common.primitives import (
    AttackSpecVersion,
    AttackVersion,
    CollectionLayers,
    Confidence,
    Domains,
    NonEmptyString,
    ObjectMarkingRefs,
    Platforms,
    StixCreatedByRef,
    StixCreatedTimestamp,
    StixCreatedTimestampField,
    StixIdentifier,
    StixIdentifierList,
    StixMarkingRef,
    StixModifiedTimestamp,
    StixModifiedTimestampField,
    StixSpecVersion,
    StixTimestamp,
    StixTimestampField,
    StrictBoolean,
    StrictString,
    StringList,
    check_identifier,
    check_timestamp,
    identifier,
    min_items,
)
from attack_data_model.schemas.common.properties import (
    ExternalReference,
    ExternalReferences,
    KillChainPhase,
    KillChainPhases,
    ObjectVersionReference,
    XMitreContents,
)

__all__ = [
    "ATTACK_BASE_FIELDS",
    "AttackDomain",
    "AttackSpecVersion",
    "AttackVersion",
    "CollectionLayer",
    "CollectionLayers",
    "Confidence",
    "Domains",
    "ExternalReference",
    "ExternalReferences",
    "IdentityClass",
    "ImpactType",
    "KillChainName",
    "KillChainPhase",
    "KillChainPhases",
    "NonEmptyString",
    "ObjectMarkingRefs",
    "ObjectVersionReference",
    "Permission",
    "Platform",
    "Platforms",
    "RelationshipType",
    "STIX_CORE_FIELDS",
    "STIX_DOMAIN_FIELDS",
    "StixCreatedByRef",
    "StixCreatedTimestamp",
    "StixCreatedTimestampField",
    "StixIdentifier",
    "StixIdentifierList",
    "StixMarkingRef",
    "StixModifiedTimestamp",
    "StixModifiedTimestampField",
    "StixSpecVersion",
    "StixTimestamp",
    "StixTimestampField",
    "StixType",
    "StrictBoolean",
    "StrictString",
    "StringList",
    "TacticType",
    "XMitreContents",
    "X_MITRE_IDENTITY",
    "X_MITRE_MARKING",
    "attack_base_schema",
    "check_identifier",
    "check_timestamp",
    "identifier",
    "min_items",
    "stix_core_schema",
    "stix_domain_schema",
]
