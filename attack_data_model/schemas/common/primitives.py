"""Reusable field rules for STIX and ATT&CK properties.

Each rule is an ``Annotated`` type: the base Python type, the constraint
metadata understood by pydantic, and an optional after-validator raising a
``PydanticCustomError`` whose error type is one of the issue codes.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import cache
from typing import Annotated, Any, NewType

from pydantic import AfterValidator, Field, Strict, StringConstraints
from pydantic_core import PydanticCustomError
from stix2.utils import parse_into_datetime

from attack_data_model.schemas.common.enums import (
    AttackDomain,
    CollectionLayer,
    Platform,
)

StixCreatedTimestamp = NewType("StixCreatedTimestamp", str)
StixModifiedTimestamp = NewType("StixModifiedTimestamp", str)
StixTimestamp = NewType("StixTimestamp", str)

_UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_STIX_TYPE_PATTERN = r"[a-z][a-z0-9-]*[a-z0-9]"
_TIMESTAMP_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?Z$")
_VERSION_REGEX = re.compile(r"^\d+\.\d+$")
_SEMVER_REGEX = re.compile(r"^\d+\.\d+\.\d+$")

StrictString = Annotated[str, Strict()]
NonEmptyString = Annotated[str, StringConstraints(strict=True, min_length=1)]
StrictBoolean = Annotated[bool, Strict()]


@cache
def _identifier_regex(prefix: str | None) -> re.Pattern[str]:
    type_pattern = re.escape(prefix) if prefix else _STIX_TYPE_PATTERN
    return re.compile(rf"^{type_pattern}--{_UUID_PATTERN}$")


def check_identifier(value: str, prefix: str | None = None) -> str:
    """Check that a value is a STIX identifier, optionally of a given type.

    The UUID part must be lowercase hexadecimal, as in every identifier ATT&CK
    publishes: an uppercase UUID is rejected rather than normalized.

    Raises:
        PydanticCustomError: ``invalid_string`` citing the expected format.

    Examples:
        >>> check_identifier("identity--c78cb6e5-0c4b-4611-8297-d1b8b55e40b5", "identity")
        'identity--c78cb6e5-0c4b-4611-8297-d1b8b55e40b5'

    """
    if not _identifier_regex(prefix).match(value):
        expected = f"{prefix}--<UUID>" if prefix else "<type>--<UUID>"
        raise PydanticCustomError(
            "invalid_string",
            "Invalid STIX Identifier: must comply with format '{expected}'",
            {"expected": expected},
        )
    return value


def identifier(prefix: str | None = None) -> Any:
    """Build an identifier rule, optionally restricted to one STIX type."""

    def _validate(value: str) -> str:
        return check_identifier(value, prefix)

    return Annotated[str, Strict(), AfterValidator(_validate)]


def check_timestamp(value: str) -> str:
    """Check that a value is a STIX timestamp (RFC 3339, UTC, ``Z`` suffix).

    Raises:
        PydanticCustomError: ``invalid_string`` when the text does not follow
            the format, ``invalid_date`` when it does but names no real date.

    """
    if not _TIMESTAMP_REGEX.match(value):
        raise PydanticCustomError(
            "invalid_string",
            "Invalid datetime: must comply with format 'YYYY-MM-DDTHH:mm:ss[.SSS]Z'",
        )
    try:
        parse_into_datetime(value)
    except ValueError as err:
        raise PydanticCustomError(
            "invalid_date",
            "Invalid date: {value} is not a valid calendar date-time",
            {"value": value},
        ) from err
    return value


def _pattern_rule(regex: re.Pattern[str], expected: str) -> Callable[[str], str]:
    def _validate(value: str) -> str:
        if not regex.match(value):
            raise PydanticCustomError(
                "invalid_string",
                "Must comply with format '{expected}'",
                {"expected": expected},
            )
        return value

    return _validate


def min_items(count: int, message: str) -> Callable[[list[Any]], list[Any]]:
    """Build a rule requiring a list to hold at least ``count`` entries."""

    def _validate(value: list[Any]) -> list[Any]:
        if len(value) < count:
            raise PydanticCustomError("too_small", message)
        return value

    return _validate


# Identifiers
StixIdentifier = identifier()
StixCreatedByRef = identifier("identity")
StixMarkingRef = identifier("marking-definition")
ObjectMarkingRefs = Annotated[list[StixMarkingRef], Strict(), Field(min_length=1)]
StixIdentifierList = Annotated[list[StixIdentifier], Strict(), Field(min_length=1)]

# Timestamps
StixCreatedTimestampField = Annotated[
    StixCreatedTimestamp, Strict(), AfterValidator(check_timestamp)
]
StixModifiedTimestampField = Annotated[
    StixModifiedTimestamp, Strict(), AfterValidator(check_timestamp)
]
StixTimestampField = Annotated[StixTimestamp, Strict(), AfterValidator(check_timestamp)]

# Versions
StixSpecVersion = Annotated[str, Strict(), Field(pattern=r"^2\.1$")]
AttackVersion = Annotated[
    str, Strict(), AfterValidator(_pattern_rule(_VERSION_REGEX, "major.minor"))
]
AttackSpecVersion = Annotated[
    str,
    Strict(),
    AfterValidator(_pattern_rule(_SEMVER_REGEX, "major.minor.patch")),
]

# Vocabularies
Domains = Annotated[list[AttackDomain], Strict(), Field(min_length=1)]
Platforms = Annotated[list[Platform], Strict(), Field(min_length=1)]
CollectionLayers = Annotated[list[CollectionLayer], Strict(), Field(min_length=1)]
StringList = Annotated[list[NonEmptyString], Strict()]
Confidence = Annotated[int, Strict(), Field(ge=0, le=100)]
