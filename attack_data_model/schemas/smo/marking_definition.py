"""MarkingDefinition."""

from typing import Literal

from pydantic import Field

from attack_data_model.schemas.common import (
    AttackSpecVersion,
    Domains,
    NonEmptyString,
    identifier,
    stix_core_schema,
)
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    RefinementContext,
    StixObject,
    StixProperty,
    optional,
    required,
)


class MarkingDefinitionContent(StixProperty):
    """Represents the content of a marking: a statement or a TLP level."""

    statement: NonEmptyString = Field(
        default=None,
        description="A statement (e.g., copyright, terms of use) applied to the content.",
    )
    tlp: Literal["white", "green", "amber", "red"] = Field(
        default=None,
        description="The TLP level applied to the content.",
    )


def definition_matches_type(obj: StixObject, ctx: RefinementContext) -> None:
    """Require the definition to carry exactly the property named by its type."""
    definition_type = obj.get("definition_type")
    if obj.definition.properties_set != {definition_type}:
        ctx.add_issue(
            f"A '{definition_type}' marking definition must only define "
            f"'{definition_type}'.",
            path=("definition",),
        )


marking_definition_schema = SCHEMA_REGISTRY.register(
    stix_core_schema.extend(
        {
            "id": required(identifier("marking-definition")),
            "type": required(Literal["marking-definition"]),
            "name": optional(NonEmptyString, "The name of the marking definition."),
            "definition_type": required(
                Literal["statement", "tlp"], "The type of the marking definition."
            ),
            "definition": required(
                MarkingDefinitionContent, "The content of the marking definition."
            ),
            "x_mitre_attack_spec_version": optional(AttackSpecVersion),
            "x_mitre_domains": optional(Domains),
        },
        name="MarkingDefinition",
    )
    .require(
        "created",
        "created_by_ref",
        "definition",
        "definition_type",
        "id",
        "spec_version",
        "type",
    )
    .strict()
    .refine(definition_matches_type)
)
