"""Offer the schema composition, refinement and dispatch machinery."""

from attack_data_model.validation.base import StixObject, StixProperty
from attack_data_model.validation.issues import (
    Issue,
    IssueCode,
    IssueKind,
    SafeParseFailure,
    SafeParseSuccess,
    ValidationResult,
)
from attack_data_model.validation.refinements import (
    ATTACK_SOURCE_NAME,
    AttackIdFormat,
    Refinement,
    RefinementContext,
    attack_id_refinement,
    check_attack_id,
    chronological_refinement,
    modified_not_before_created,
    non_empty_refinement,
)
from attack_data_model.validation.registry import (
    SCHEMA_REGISTRY,
    SchemaRegistry,
    parse_object,
    parse_objects,
    validate_object,
    validate_objects,
)
from attack_data_model.validation.schema import (
    FieldSpec,
    ObjectSchema,
    optional,
    required,
)

__all__ = [
    "ATTACK_SOURCE_NAME",
    "AttackIdFormat",
    "FieldSpec",
    "Issue",
    "IssueCode",
    "IssueKind",
    "ObjectSchema",
    "Refinement",
    "RefinementContext",
    "SCHEMA_REGISTRY",
    "SafeParseFailure",
    "SafeParseSuccess",
    "SchemaRegistry",
    "StixObject",
    "StixProperty",
    "ValidationResult",
    "attack_id_refinement",
    "check_attack_id",
    "chronological_refinement",
    "modified_not_before_created",
    "non_empty_refinement",
    "optional",
    "parse_object",
    "parse_objects",
    "required",
    "validate_object",
    "validate_objects",
]
