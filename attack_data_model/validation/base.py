"""Base pydantic models for validated STIX objects and their nested properties."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError


class _StixModel(BaseModel):
    """Common behaviour of every validated STIX structure."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,  # a validated object is never mutated afterwards
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        """Reject explicit nulls: an optional property is omitted, never null."""
        if value is None:
            raise PydanticCustomError(
                "invalid_type",
                "Expected a value, received null",
            )
        return value

    def __hash__(self) -> int:
        """Create a hash based on the model's json representation dynamically."""
        return hash(self.model_dump_json(exclude_unset=True))

    def __eq__(self, other: Any) -> bool:
        """Implement comparison between similar object."""
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def properties_set(self) -> set[str]:
        """Return the set of properties present in the validated document."""
        return set(self.model_fields_set)

    def to_dict(self) -> dict[str, Any]:
        """Return the validated document as a JSON-ready mapping.

        Only the properties present in the candidate are returned, so the result
        equals the candidate that was validated.
        """
        return self.model_dump(mode="json", exclude_unset=True)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a property value if it was present in the document."""
        if name in self.model_fields_set:
            return getattr(self, name)
        return default


class StixProperty(_StixModel):
    """Represent a nested STIX structure (external reference, kill chain phase...)."""


class StixObject(_StixModel):
    """Represent a validated STIX object.

    Concrete classes are compiled from an ``ObjectSchema`` field table and are
    never declared by hand.
    """
