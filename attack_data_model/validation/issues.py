"""Issues and validation results.

An issue is the structured representation of one violation found in a
candidate object: a path into the document, a human-readable message and a
categorical code. Validation results are discriminated on ``ok``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic_core import ErrorDetails

PathSegment = str | int

T = TypeVar("T")


class IssueKind(StrEnum):
    """Taxonomy of validation failures."""

    TYPE_MISMATCH = "TypeMismatch"
    FORMAT_MISMATCH = "FormatMismatch"
    ENUM_MISMATCH = "EnumMismatch"
    SIZE_VIOLATION = "SizeViolation"
    UNKNOWN_FIELD = "UnknownField"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    REFINEMENT_VIOLATION = "RefinementViolation"


class IssueCode(StrEnum):
    """Categorical codes attached to every issue."""

    INVALID_TYPE = "invalid_type"
    INVALID_STRING = "invalid_string"
    INVALID_DATE = "invalid_date"
    INVALID_LITERAL = "invalid_literal"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    UNKNOWN_TYPE = "unknown_type"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    UNRECOGNIZED_KEYS = "unrecognized_keys"
    REQUIRED = "required"
    CUSTOM = "custom"

    @property
    def kind(self) -> IssueKind:
        """Return the taxonomy kind of the code."""
        return _KINDS[self]


_KINDS: dict[IssueCode, IssueKind] = {
    IssueCode.INVALID_TYPE: IssueKind.TYPE_MISMATCH,
    IssueCode.INVALID_STRING: IssueKind.FORMAT_MISMATCH,
    IssueCode.INVALID_DATE: IssueKind.FORMAT_MISMATCH,
    IssueCode.INVALID_LITERAL: IssueKind.ENUM_MISMATCH,
    IssueCode.INVALID_ENUM_VALUE: IssueKind.ENUM_MISMATCH,
    IssueCode.UNKNOWN_TYPE: IssueKind.ENUM_MISMATCH,
    IssueCode.TOO_SMALL: IssueKind.SIZE_VIOLATION,
    IssueCode.TOO_BIG: IssueKind.SIZE_VIOLATION,
    IssueCode.UNRECOGNIZED_KEYS: IssueKind.UNKNOWN_FIELD,
    IssueCode.REQUIRED: IssueKind.MISSING_REQUIRED_FIELD,
    IssueCode.CUSTOM: IssueKind.REFINEMENT_VIOLATION,
}

# pydantic error types that do not follow the suffix conventions below
_PYDANTIC_CODES: dict[str, IssueCode] = {
    "missing": IssueCode.REQUIRED,
    "extra_forbidden": IssueCode.UNRECOGNIZED_KEYS,
    "literal_error": IssueCode.INVALID_LITERAL,
    "enum": IssueCode.INVALID_ENUM_VALUE,
    "string_pattern_mismatch": IssueCode.INVALID_STRING,
    "greater_than": IssueCode.TOO_SMALL,
    "greater_than_equal": IssueCode.TOO_SMALL,
    "less_than": IssueCode.TOO_BIG,
    "less_than_equal": IssueCode.TOO_BIG,
}

_CODE_VALUES = frozenset(code.value for code in IssueCode)


def code_from_pydantic(error_type: str) -> IssueCode:
    """Map a pydantic error type onto an issue code.

    Custom errors raised with one of the issue codes as error type are kept as
    is, so that primitive rules can choose their own code.

    Examples:
        >>> code_from_pydantic("missing")
        <IssueCode.REQUIRED: 'required'>
        >>> code_from_pydantic("string_too_short")
        <IssueCode.TOO_SMALL: 'too_small'>
        >>> code_from_pydantic("invalid_date")
        <IssueCode.INVALID_DATE: 'invalid_date'>

    """
    if error_type in _PYDANTIC_CODES:
        return _PYDANTIC_CODES[error_type]
    if error_type in _CODE_VALUES:
        return IssueCode(error_type)
    if error_type.endswith("too_short"):
        return IssueCode.TOO_SMALL
    if error_type.endswith("too_long"):
        return IssueCode.TOO_BIG
    return IssueCode.INVALID_TYPE


def format_path(path: Sequence[PathSegment]) -> str:
    """Render a path as ``field[0].nested``.

    Examples:
        >>> format_path(("x_mitre_contents", 2, "object_ref"))
        'x_mitre_contents[2].object_ref'
        >>> format_path(())
        ''

    """
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        else:
            rendered += f".{segment}" if rendered else segment
    return rendered


class Issue(BaseModel):
    """One violation found in a candidate object."""

    model_config = ConfigDict(frozen=True)

    path: tuple[PathSegment, ...] = Field(
        default=(),
        description="Ordered field-name/array-index segments leading to the offending value.",
    )
    message: str = Field(description="Human-readable description of the violation.")
    code: IssueCode = Field(description="Categorical code of the violation.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def kind(self) -> IssueKind:
        """Return the taxonomy kind of the issue."""
        return self.code.kind

    @property
    def location(self) -> str:
        """Return the path rendered as a string."""
        return format_path(self.path)

    def prefixed(self, *segments: PathSegment) -> Issue:
        """Return a copy of the issue nested under the given path segments."""
        return self.model_copy(update={"path": (*segments, *self.path)})

    def to_dict(self) -> dict[str, Any]:
        """Return the issue as a plain dictionary."""
        return {
            "path": list(self.path),
            "message": self.message,
            "code": self.code.value,
        }

    @classmethod
    def from_pydantic(cls, error: ErrorDetails) -> Issue:
        """Convert one pydantic error entry into an issue."""
        code = code_from_pydantic(error["type"])
        message = error["msg"]
        if code is IssueCode.REQUIRED:
            message = "Required"
        elif code is IssueCode.UNRECOGNIZED_KEYS:
            message = f"Unrecognized key in object: '{error['loc'][-1]}'"
        return cls(path=tuple(error["loc"]), message=message, code=code)


def issues_from_errors(errors: Iterable[ErrorDetails]) -> list[Issue]:
    """Convert pydantic error entries into issues, keeping their order."""
    return [Issue.from_pydantic(error) for error in errors]


class SafeParseSuccess(BaseModel, Generic[T]):
    """Successful validation result, carrying the validated object."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[True] = True
    value: T


class SafeParseFailure(BaseModel):
    """Failed validation result, carrying every issue found."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    issues: tuple[Issue, ...] = Field(min_length=1)

    def errors(self) -> list[dict[str, Any]]:
        """Return the issues as plain dictionaries."""
        return [issue.to_dict() for issue in self.issues]


ValidationResult = SafeParseSuccess | SafeParseFailure
