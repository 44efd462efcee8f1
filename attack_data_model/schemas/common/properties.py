"""Nested STIX structures shared by several object types."""

from typing import Annotated

from pydantic import AfterValidator, Field, Strict

from attack_data_model.schemas.common.enums import KillChainName
from attack_data_model.schemas.common.primitives import (
    NonEmptyString,
    StixIdentifier,
    StixModifiedTimestampField,
    StrictString,
    min_items,
)
from attack_data_model.validation.base import StixProperty


class ExternalReference(StixProperty):
    """Represents an external reference to a source of information."""

    source_name: NonEmptyString = Field(
        description="The name of the source of the external reference.",
    )
    description: StrictString = Field(
        default=None,
        description="Description of the external reference.",
    )
    url: StrictString = Field(
        default=None,
        description="URL of the external reference.",
    )
    external_id: StrictString = Field(
        default=None,
        description="An identifier for the external reference content.",
    )


ExternalReferences = Annotated[list[ExternalReference], Strict(), Field(min_length=1)]


class KillChainPhase(StixProperty):
    """Represents a phase of an ATT&CK kill chain, i.e. a tactic."""

    kill_chain_name: KillChainName = Field(
        description="The name of the kill chain.",
    )
    phase_name: NonEmptyString = Field(
        description="The name of the phase in the kill chain (tactic shortname).",
    )


KillChainPhases = Annotated[list[KillChainPhase], Strict(), Field(min_length=1)]


class ObjectVersionReference(StixProperty):
    """Represents one entry of a collection: an object at a given version."""

    object_ref: StixIdentifier = Field(
        description="The ID of the referenced object.",
    )
    object_modified: StixModifiedTimestampField = Field(
        description="The modified time of the referenced object. It MUST be an exact "
        "match for the modified time of the STIX object being referenced.",
    )


XMitreContents = Annotated[
    list[ObjectVersionReference],
    Strict(),
    AfterValidator(min_items(1, "At least one STIX object reference is required.")),
]
