"""Validator registry and dispatch by STIX type tag."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from attack_data_model.exceptions import (
    AttackValidationError,
    SchemaDefinitionError,
    UnknownTypeError,
)
from attack_data_model.logger import get_logger
from attack_data_model.settings import get_settings
from attack_data_model.validation.base import StixObject
from attack_data_model.validation.issues import (
    Issue,
    IssueCode,
    SafeParseFailure,
    SafeParseSuccess,
    ValidationResult,
)
from attack_data_model.validation.schema import ObjectSchema


class SchemaRegistry:
    """Singleton registry mapping STIX type tags to object schemas.

    It is populated once, when the schema modules are imported, and only read
    afterwards.
    """

    _instance: SchemaRegistry | None = None
    _initialized: bool = False

    def __new__(cls) -> SchemaRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if SchemaRegistry._initialized:
            return
        self.schemas: dict[str, ObjectSchema] = {}
        SchemaRegistry._initialized = True

    def register(self, schema: ObjectSchema) -> ObjectSchema:
        """Register a schema under the literal type tag of its ``type`` field.

        Args:
            schema (ObjectSchema): The schema to register.

        Returns:
            ObjectSchema: The registered schema.

        Raises:
            SchemaDefinitionError: If the schema declares no literal type tag, or if
                another schema is already registered for it.

        """
        type_tag = schema.type_tag
        if type_tag is None:
            raise SchemaDefinitionError(
                f"Schema {schema.name!r} declares no literal 'type' field."
            )
        registered = self.schemas.get(type_tag)
        if registered is not None and registered is not schema:
            raise SchemaDefinitionError(
                f"Type {type_tag!r} is already registered by schema {registered.name!r}."
            )
        self.schemas[type_tag] = schema
        return schema

    def resolve(self, type_tag: Any) -> ObjectSchema:
        """Return the schema registered for a type tag.

        Raises:
            UnknownTypeError: If no schema is registered for the tag.

        """
        if not isinstance(type_tag, str) or type_tag not in self.schemas:
            raise UnknownTypeError(type_tag)
        return self.schemas[type_tag]

    def __contains__(self, type_tag: object) -> bool:
        return isinstance(type_tag, str) and type_tag in self.schemas

    @property
    def type_tags(self) -> tuple[str, ...]:
        """Return the registered type tags, sorted."""
        return tuple(sorted(self.schemas))


SCHEMA_REGISTRY = SchemaRegistry()


def _resolve_abort_early(abort_early: bool | None) -> bool:
    return get_settings().abort_early if abort_early is None else abort_early


def _dispatch(
    data: Any, registry: SchemaRegistry, abort_early: bool
) -> ValidationResult:
    if isinstance(data, StixObject):
        data = data.to_dict()
    if not isinstance(data, Mapping):
        return SafeParseFailure(
            issues=(
                Issue(
                    message=f"Expected object, received {type(data).__name__}",
                    code=IssueCode.INVALID_TYPE,
                ),
            )
        )
    type_tag = data.get("type")
    try:
        schema = registry.resolve(type_tag)
    except UnknownTypeError as err:
        get_logger().warning("Unknown STIX type", {"type": str(type_tag)})
        return SafeParseFailure(
            issues=(
                Issue(path=("type",), message=str(err), code=IssueCode.UNKNOWN_TYPE),
            )
        )
    return schema.safe_parse(data, abort_early=abort_early)


def validate_object(
    data: Any,
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
) -> ValidationResult:
    """Validate one object with the schema selected by its ``type`` tag."""
    abort_early = _resolve_abort_early(abort_early)
    get_logger().debug("Validating object", {"type": _type_of(data)})
    return _dispatch(data, registry, abort_early)


def validate_objects(
    items: Sequence[Any],
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
    path_prefix: tuple[str | int, ...] = (),
) -> ValidationResult:
    """Validate a heterogeneous sequence of objects.

    Each element is dispatched on its own ``type`` tag; the issues of every
    element are collected, their paths prefixed with the element index.
    Anything but an array fails with a single ``invalid_type`` issue.

    Returns:
        (ValidationResult): A success carrying the list of validated objects, or a
            failure carrying the issues of every invalid element.

    """
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        return SafeParseFailure(
            issues=(
                Issue(
                    path=path_prefix,
                    message=f"Expected array, received {type(items).__name__}",
                    code=IssueCode.INVALID_TYPE,
                ),
            )
        )
    abort_early = _resolve_abort_early(abort_early)
    logger = get_logger()
    validated: list[StixObject] = []
    issues: list[Issue] = []
    count = 0
    for index, item in enumerate(items):
        count += 1
        logger.debug("Validating object", {"type": _type_of(item), "index": index})
        result = _dispatch(item, registry, abort_early)
        if isinstance(result, SafeParseSuccess):
            validated.append(result.value)
            continue
        issues.extend(issue.prefixed(*path_prefix, index) for issue in result.issues)
        if abort_early:
            break
    logger.info("Objects validated", {"objects": count, "issues": len(issues)})
    if issues:
        return SafeParseFailure(issues=tuple(issues))
    return SafeParseSuccess(value=validated)


def parse_object(
    data: Any,
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
) -> StixObject:
    """Validate one object, raising on failure.

    Raises:
        AttackValidationError: Carrying the issues of the object.

    """
    result = validate_object(data, abort_early=abort_early, registry=registry)
    if isinstance(result, SafeParseFailure):
        raise AttackValidationError(result.issues, schema_name=_type_of(data))
    return result.value


def parse_objects(
    items: Sequence[Any],
    *,
    abort_early: bool | None = None,
    registry: SchemaRegistry = SCHEMA_REGISTRY,
) -> list[StixObject]:
    """Validate a heterogeneous sequence of objects, raising on failure.

    Raises:
        AttackValidationError: Carrying the issues of every invalid element.

    """
    result = validate_objects(items, abort_early=abort_early, registry=registry)
    if isinstance(result, SafeParseFailure):
        raise AttackValidationError(result.issues, schema_name="objects")
    return list(result.value)


def _type_of(data: Any) -> str:
    if isinstance(data, (Mapping, StixObject)):
        return str(data.get("type", "object"))
    return type(data).__name__
