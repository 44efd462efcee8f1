"""Offer the STIX domain object schemas of ATT&CK."""

from attack_data_model.schemas.sdo.asset import asset_schema
from attack_data_model.schemas.sdo.campaign import campaign_schema
from attack_data_model.schemas.sdo.collection import collection_schema
from attack_data_model.schemas.sdo.data_component import data_component_schema
from attack_data_model.schemas.sdo.data_source import data_source_schema
from attack_data_model.schemas.sdo.group import group_schema
from attack_data_model.schemas.sdo.identity import identity_schema
from attack_data_model.schemas.sdo.matrix import matrix_schema
from attack_data_model.schemas.sdo.mitigation import mitigation_schema
from attack_data_model.schemas.sdo.software import malware_schema, tool_schema
from attack_data_model.schemas.sdo.tactic import tactic_schema
from attack_data_model.schemas.sdo.technique import technique_schema

__all__ = [
    "asset_schema",
    "campaign_schema",
    "collection_schema",
    "data_component_schema",
    "data_source_schema",
    "group_schema",
    "identity_schema",
    "malware_schema",
    "matrix_schema",
    "mitigation_schema",
    "tactic_schema",
    "technique_schema",
    "tool_schema",
]
