"""Offer the ATT&CK object schemas.

Importing this package registers every object schema in ``SCHEMA_REGISTRY``.
"""

from attack_data_model.schemas.bundle import (
    bundle_schema,
    parse_bundle,
    unique_objects,
    validate_bundle,
)
from attack_data_model.schemas.common import (
    ATTACK_BASE_FIELDS,
    STIX_CORE_FIELDS,
    STIX_DOMAIN_FIELDS,
    attack_base_schema,
    stix_core_schema,
    stix_domain_schema,
)
from attack_data_model.schemas.sdo import (
    asset_schema,
    campaign_schema,
    collection_schema,
    data_component_schema,
    data_source_schema,
    group_schema,
    identity_schema,
    malware_schema,
    matrix_schema,
    mitigation_schema,
    tactic_schema,
    technique_schema,
    tool_schema,
)
from attack_data_model.schemas.smo import marking_definition_schema
from attack_data_model.schemas.sro import relationship_schema

__all__ = [
    "ATTACK_BASE_FIELDS",
    "STIX_CORE_FIELDS",
    "STIX_DOMAIN_FIELDS",
    "asset_schema",
    "attack_base_schema",
    "bundle_schema",
    "campaign_schema",
    "collection_schema",
    "data_component_schema",
    "data_source_schema",
    "group_schema",
    "identity_schema",
    "malware_schema",
    "marking_definition_schema",
    "matrix_schema",
    "mitigation_schema",
    "parse_bundle",
    "relationship_schema",
    "stix_core_schema",
    "stix_domain_schema",
    "tactic_schema",
    "technique_schema",
    "tool_schema",
    "unique_objects",
    "validate_bundle",
]
