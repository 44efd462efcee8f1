"""Bundle: the envelope ATT&CK releases are distributed in.

A bundle is validated in three passes: its envelope (``type``, ``id`` and the
``objects`` array), then every object against the schema registered for its
type, then the bundle-wide rules. Issues found in an object are nested under
``("objects", index)``.
"""

from typing import Annotated, Any, Literal

from pydantic import Strict

from attack_data_model.exceptions import AttackValidationError
from attack_data_model.logger import get_logger
from attack_data_model.schemas.common import identifier
from attack_data_model.settings import get_settings
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    ObjectSchema,
    RefinementContext,
    SafeParseFailure,
    SafeParseSuccess,
    SchemaRegistry,
    StixObject,
    ValidationResult,
    required,
    validate_objects,
)


def unique_objects(bundle: StixObject, ctx: RefinementContext) -> None:
    """Reject an object version, i.e. an (id, modified) pair, listed twice."""
    first_seen: dict[tuple[str, str | None], int] = {}
    for index, obj in enumerate(bundle.objects):
        key = (obj.get("id"), obj.get("modified"))
        if key in first_seen:
            ctx.add_issue(
                f"Duplicate object {key[0]} (modified {key[1]}), already listed at "
                f"index {first_seen[key]}.",
                path=("objects", index),
            )
            continue
        first_seen[key] = index


bundle_schema = ObjectSchema(
    "Bundle",
    {
        "type": required(Literal["bundle"]),
        "id": required(identifier("bundle")),
        "objects": required(
            Annotated[list[Any], Strict()], "The objects contained in the bundle."
        ),
    },
).strict()

BUNDLE_REFINEMENTS = (unique_objects,)


def validate_bundle(
    document: Any,
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
) -> ValidationResult:
    """Validate a bundle and every object it contains.

    Returns:
        (ValidationResult): A success carrying the validated bundle, whose
            ``objects`` are the validated objects, or a failure carrying every issue.

    """
    if abort_early is None:
        abort_early = get_settings().abort_early
    envelope = bundle_schema.safe_parse(document, abort_early=abort_early)
    if isinstance(envelope, SafeParseFailure):
        return envelope

    contents = validate_objects(
        envelope.value.objects,
        abort_early=abort_early,
        registry=registry,
        path_prefix=("objects",),
    )
    if isinstance(contents, SafeParseFailure):
        return contents

    bundle = envelope.value.model_copy(update={"objects": contents.value})
    ctx = RefinementContext()
    for refinement in BUNDLE_REFINEMENTS:
        refinement(bundle, ctx)
    if ctx.issues:
        return SafeParseFailure(issues=ctx.issues[:1] if abort_early else ctx.issues)
    get_logger().info(
        "Bundle validated", {"id": bundle.id, "objects": len(bundle.objects)}
    )
    return SafeParseSuccess(value=bundle)


def parse_bundle(
    document: Any,
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
) -> StixObject:
    """Validate a bundle, raising on failure.

    Raises:
        AttackValidationError: Carrying every issue found in the bundle.

    """
    result = validate_bundle(document, abort_early=abort_early, registry=registry)
    if isinstance(result, SafeParseFailure):
        raise AttackValidationError(result.issues, schema_name="bundle")
    return result.value
