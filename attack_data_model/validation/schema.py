"""Composable object schemas.

An ``ObjectSchema`` is an immutable table of field descriptors (name to rule,
required flag and description) plus an ordered list of refinements. Every
builder operation returns a new schema, the table being merged with simple
key-override semantics: the last declaration of a field wins. The table is
compiled once into a pydantic model, whose instances are the validated objects.

Examples:
    >>> from typing import Literal
    >>> note = ObjectSchema("Note").extend(
    ...     {"type": required(Literal["note"]), "content": optional(str)}
    ... ).strict()
    >>> note.safe_parse({"type": "note", "content": "hello"}).ok
    True
    >>> [issue.code.value for issue in note.safe_parse({"type": "note", "foo": 1}).issues]
    ['unrecognized_keys']

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Literal, get_args, get_origin

from pydantic import ConfigDict, Field, ValidationError, create_model

from attack_data_model.exceptions import AttackValidationError, SchemaDefinitionError
from attack_data_model.validation.base import StixObject
from attack_data_model.validation.issues import (
    Issue,
    IssueCode,
    SafeParseFailure,
    SafeParseSuccess,
    ValidationResult,
    issues_from_errors,
)
from attack_data_model.validation.refinements import Refinement, RefinementContext


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor of one field: its rule, whether it is required, its meaning."""

    annotation: Any
    required: bool = False
    description: str | None = None

    def describe(self, description: str) -> FieldSpec:
        """Return a copy of the descriptor with another description."""
        return replace(self, description=description)


def required(annotation: Any, description: str | None = None) -> FieldSpec:
    """Declare a required field."""
    return FieldSpec(annotation=annotation, required=True, description=description)


def optional(annotation: Any, description: str | None = None) -> FieldSpec:
    """Declare an optional field: absent is valid, null is not."""
    return FieldSpec(annotation=annotation, required=False, description=description)


class _PassthroughStixObject(StixObject):
    """Validated object silently dropping undeclared properties."""

    model_config = ConfigDict(extra="ignore")


class ObjectSchema:
    """Immutable, composable description of a STIX object type."""

    def __init__(
        self,
        name: str,
        fields: Mapping[str, FieldSpec | Any] | None = None,
        *,
        is_strict: bool = True,
        refinements: tuple[Refinement, ...] = (),
    ) -> None:
        """Initialize the schema.

        Args:
            name (str): Name of the compiled model, used in error reports.
            fields (Mapping): Field descriptors; bare annotations declare optional fields.
            is_strict (bool): Reject undeclared properties rather than dropping them.
            refinements (tuple): Cross-field rules, run in order after field validation.

        """
        self._name = name
        self._fields: dict[str, FieldSpec] = {
            field_name: spec if isinstance(spec, FieldSpec) else optional(spec)
            for field_name, spec in (fields or {}).items()
        }
        self._is_strict = is_strict
        self._refinements = tuple(refinements)
        self._model: type[StixObject] | None = None

    def __repr__(self) -> str:
        """Return a short representation of the schema."""
        return (
            f"ObjectSchema(name={self._name!r}, fields={len(self._fields)}, "
            f"strict={self._is_strict}, refinements={len(self._refinements)})"
        )

    @property
    def name(self) -> str:
        """Return the name of the schema."""
        return self._name

    @property
    def fields(self) -> Mapping[str, FieldSpec]:
        """Return a read-only view of the field table, in declaration order."""
        return MappingProxyType(self._fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        """Return the declared field names, in declaration order."""
        return tuple(self._fields)

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Return the required field names, in declaration order."""
        return tuple(name for name, spec in self._fields.items() if spec.required)

    @property
    def optional_fields(self) -> tuple[str, ...]:
        """Return the optional field names, in declaration order."""
        return tuple(name for name, spec in self._fields.items() if not spec.required)

    @property
    def is_strict(self) -> bool:
        """Tell whether undeclared properties are rejected."""
        return self._is_strict

    @property
    def refinements(self) -> tuple[Refinement, ...]:
        """Return the refinements, in declaration order."""
        return self._refinements

    @property
    def type_tag(self) -> str | None:
        """Return the literal STIX type declared by the ``type`` field, if any."""
        spec = self._fields.get("type")
        if spec is None or get_origin(spec.annotation) is not Literal:
            return None
        return str(get_args(spec.annotation)[0])

    def _copy(self, **changes: Any) -> ObjectSchema:
        arguments: dict[str, Any] = {
            "name": self._name,
            "fields": self._fields,
            "is_strict": self._is_strict,
            "refinements": self._refinements,
        }
        arguments.update(changes)
        return ObjectSchema(**arguments)

    def _check_declared(self, names: tuple[str, ...]) -> None:
        unknown = [name for name in names if name not in self._fields]
        if unknown:
            raise SchemaDefinitionError(
                f"Cannot change fields {unknown} of schema {self._name!r}: not declared."
            )

    def extend(
        self, fields: Mapping[str, FieldSpec | Any], name: str | None = None
    ) -> ObjectSchema:
        """Merge new field descriptors into the table.

        Fields already declared keep their position and take the new descriptor;
        new fields are appended in the given order.
        """
        merged = dict(self._fields)
        for field_name, spec in fields.items():
            merged[field_name] = spec if isinstance(spec, FieldSpec) else optional(spec)
        return self._copy(fields=merged, name=name or self._name)

    def require(self, *names: str) -> ObjectSchema:
        """Mark declared fields as required."""
        self._check_declared(names)
        return self._copy(
            fields={
                field_name: replace(spec, required=True) if field_name in names else spec
                for field_name, spec in self._fields.items()
            }
        )

    def optional(self, *names: str) -> ObjectSchema:
        """Mark declared fields as optional."""
        self._check_declared(names)
        return self._copy(
            fields={
                field_name: replace(spec, required=False) if field_name in names else spec
                for field_name, spec in self._fields.items()
            }
        )

    def strict(self) -> ObjectSchema:
        """Reject any property that is not declared."""
        return self._copy(is_strict=True)

    def passthrough(self) -> ObjectSchema:
        """Silently drop any property that is not declared."""
        return self._copy(is_strict=False)

    def refine(self, *refinements: Refinement) -> ObjectSchema:
        """Append cross-field rules."""
        return self._copy(refinements=(*self._refinements, *refinements))

    def named(self, name: str) -> ObjectSchema:
        """Rename the schema."""
        return self._copy(name=name)

    @property
    def model(self) -> type[StixObject]:
        """Return the pydantic model compiled from the field table."""
        if self._model is None:
            self._model = self._compile()
        return self._model

    def _compile(self) -> type[StixObject]:
        definitions: dict[str, Any] = {}
        for field_name, spec in self._fields.items():
            if spec.required:
                definitions[field_name] = (
                    spec.annotation,
                    Field(description=spec.description),
                )
            else:
                definitions[field_name] = (
                    spec.annotation,
                    Field(default=None, description=spec.description),
                )
        base = StixObject if self._is_strict else _PassthroughStixObject
        return create_model(self._name, __base__=base, **definitions)

    def safe_parse(self, data: Any, *, abort_early: bool = False) -> ValidationResult:
        """Validate a candidate object without raising.

        Args:
            data (Any): The candidate object, usually a deserialized JSON mapping.
            abort_early (bool): Keep only the first issue found.

        Returns:
            (ValidationResult): Either a success carrying the validated object, or a
                failure carrying every issue in field declaration order, then
                refinement order.

        """
        if isinstance(data, StixObject):
            data = data.to_dict()
        if not isinstance(data, Mapping):
            issue = Issue(
                path=(),
                message=f"Expected object, received {type(data).__name__}",
                code=IssueCode.INVALID_TYPE,
            )
            return SafeParseFailure(issues=(issue,))

        try:
            validated = self.model.model_validate(dict(data))
        except ValidationError as err:
            issues = issues_from_errors(err.errors(include_url=False))
            return SafeParseFailure(issues=tuple(issues[:1] if abort_early else issues))

        # refinements only see objects whose fields all passed their own rules
        ctx = RefinementContext()
        for refinement in self._refinements:
            refinement(validated, ctx)
            if abort_early and ctx.issues:
                return SafeParseFailure(issues=ctx.issues[:1])
        if ctx.issues:
            return SafeParseFailure(issues=ctx.issues)
        return SafeParseSuccess(value=validated)

    def parse(self, data: Any, *, abort_early: bool = False) -> StixObject:
        """Validate a candidate object.

        Raises:
            AttackValidationError: Carrying every issue found (only the first one
                when ``abort_early`` is set).

        """
        result = self.safe_parse(data, abort_early=abort_early)
        if isinstance(result, SafeParseFailure):
            raise AttackValidationError(result.issues, schema_name=self._name)
        return result.value
