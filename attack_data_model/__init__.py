"""Validate STIX objects of the MITRE ATT&CK knowledge base."""

from attack_data_model.exceptions import (
    AttackDataModelError,
    AttackValidationError,
    ConfigValidationError,
    SchemaDefinitionError,
    UnknownTypeError,
)
from attack_data_model.schemas import parse_bundle, validate_bundle
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    Issue,
    IssueCode,
    IssueKind,
    ObjectSchema,
    SafeParseFailure,
    SafeParseSuccess,
    parse_object,
    parse_objects,
    validate_object,
    validate_objects,
)

__version__ = "0.1.0"

__all__ = [
    "AttackDataModelError",
    "AttackValidationError",
    "ConfigValidationError",
    "Issue",
    "IssueCode",
    "IssueKind",
    "ObjectSchema",
    "SCHEMA_REGISTRY",
    "SafeParseFailure",
    "SafeParseSuccess",
    "SchemaDefinitionError",
    "UnknownTypeError",
    "parse_bundle",
    "parse_object",
    "parse_objects",
    "validate_bundle",
    "validate_object",
    "validate_objects",
]
