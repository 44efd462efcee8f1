"""Offer the STIX meta object schemas of ATT&CK."""

from attack_data_model.schemas.smo.marking_definition import (
    MarkingDefinitionContent,
    marking_definition_schema,
)

__all__ = [
    "MarkingDefinitionContent",
    "marking_definition_schema",
]
