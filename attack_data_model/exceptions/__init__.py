"""Offer exceptions raised while defining schemas and validating objects."""

from .error import (
    AttackDataModelError,
    AttackValidationError,
    ConfigValidationError,
    SchemaDefinitionError,
    UnknownTypeError,
)

__all__ = [
    "AttackDataModelError",
    "AttackValidationError",
    "ConfigValidationError",
    "SchemaDefinitionError",
    "UnknownTypeError",
]
