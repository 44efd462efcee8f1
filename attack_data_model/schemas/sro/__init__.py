"""Offer the STIX relationship object schemas of ATT&CK."""

from attack_data_model.schemas.sro.relationship import (
    RELATIONSHIP_ENDPOINTS,
    relationship_schema,
)

__all__ = [
    "RELATIONSHIP_ENDPOINTS",
    "relationship_schema",
]
