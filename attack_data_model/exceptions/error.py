"""Offers a collection of custom exceptions for the ATT&CK data model."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from attack_data_model.validation.issues import Issue


class AttackDataModelError(Exception):
    """Base class for every error raised by the ATT&CK data model package."""


class ConfigValidationError(AttackDataModelError):
    """Raised when the validation settings cannot be loaded.

    It signals an actionable problem in configuration (environment variables or
    YAML file), never a problem with a validated document.
    """


class SchemaDefinitionError(AttackDataModelError):
    """Raised when a schema is composed incorrectly.

    This signals a programming mistake in a schema declaration (e.g. requiring a
    field that was never declared), never a problem with a validated document.
    """


class UnknownTypeError(AttackDataModelError, LookupError):
    """Raised when no schema is registered for a STIX type tag."""

    def __init__(self, type_tag: Any) -> None:
        """Initialize the error with the offending type tag."""
        self.type_tag = type_tag
        super().__init__(f"No schema registered for STIX type {type_tag!r}.")


class AttackValidationError(AttackDataModelError, ValueError):
    """Aggregate failure raised when a document does not satisfy its schema.

    It carries every issue found in the document, in a stable order, so that
    callers can either display them or assert on them.
    """

    def __init__(self, issues: Sequence[Issue], schema_name: str = "object") -> None:
        """Initialize the error with the collected issues."""
        self.issues: tuple[Issue, ...] = tuple(issues)
        self.schema_name = schema_name
        super().__init__(str(self))

    @property
    def issues_count(self) -> int:
        """Count the collected issues."""
        return len(self.issues)

    def errors(self) -> list[dict[str, Any]]:
        """Return the issues as plain dictionaries."""
        return [issue.to_dict() for issue in self.issues]

    def __str__(self) -> str:
        """Return a readable multi-line representation of every issue."""
        header = (
            f"{self.issues_count} validation issue{'s' if self.issues_count != 1 else ''} "
            f"for {self.schema_name}"
        )
        lines = [header]
        for issue in self.issues:
            lines.append(issue.location or "(root)")
            lines.append(f"  {issue.message} [code={issue.code.value}]")
        return os.linesep.join(lines)
