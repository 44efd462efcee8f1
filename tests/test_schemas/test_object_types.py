import pytest
from attack_data_model.schemas.common import StixType
from attack_data_model.validation import (
    SCHEMA_REGISTRY,
    Issue,
    IssueCode,
    IssueKind,
    SafeParseSuccess,
    StixObject,
)

REGISTERED_TYPES = {
    StixType.ATTACK_PATTERN,
    StixType.CAMPAIGN,
    StixType.COURSE_OF_ACTION,
    StixType.IDENTITY,
    StixType.INTRUSION_SET,
    StixType.MALWARE,
    StixType.MARKING_DEFINITION,
    StixType.RELATIONSHIP,
    StixType.TOOL,
    StixType.X_MITRE_ASSET,
    StixType.X_MITRE_COLLECTION,
    StixType.X_MITRE_DATA_COMPONENT,
    StixType.X_MITRE_DATA_SOURCE,
    StixType.X_MITRE_MATRIX,
    StixType.X_MITRE_TACTIC,
}


def test_every_object_type_has_a_registered_schema():
    """Test that importing the schemas registers every ATT&CK object type."""
    # Given the schema registry populated at import time
    # When listing the registered type tags
    type_tags = set(SCHEMA_REGISTRY.type_tags)
    # Then every ATT&CK object type should be registered, and only those
    assert type_tags == REGISTERED_TYPES


def test_schema_should_accept_minimal_valid_object(minimal_object):
    """Test that every schema accepts its minimal valid object unchanged."""
    # Given a minimal valid object and its schema
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    # When validating the object
    result = schema.safe_parse(minimal_object)
    # Then it should succeed and return a value equal to the input
    assert isinstance(result, SafeParseSuccess)
    assert result.ok is True
    assert isinstance(result.value, StixObject)
    assert result.value.to_dict() == minimal_object


def test_schema_should_revalidate_validated_object_without_drift(minimal_object):
    """Test that validating an already validated object yields the same value."""
    # Given a validated object
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    validated = schema.parse(minimal_object)
    # When validating it again
    revalidated = schema.parse(validated)
    # Then the values should be identical
    assert revalidated == validated
    assert revalidated.to_dict() == validated.to_dict() == minimal_object


def test_schema_should_reject_omission_of_each_required_field(minimal_object):
    """Test that removing any required field yields a single required issue."""
    # Given a minimal valid object and its schema
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    for field_name in schema.required_fields:
        # When removing one required field
        candidate = {
            key: value for key, value in minimal_object.items() if key != field_name
        }
        result = schema.safe_parse(candidate)
        # Then the only issue should be a missing required field on that path
        assert result.ok is False, field_name
        assert result.issues == (
            Issue(path=(field_name,), message="Required", code=IssueCode.REQUIRED),
        )
        assert result.issues[0].kind == IssueKind.MISSING_REQUIRED_FIELD


def test_schema_should_reject_unknown_properties(minimal_object):
    """Test that every schema is strict: undeclared properties are rejected."""
    # Given a minimal valid object with an undeclared property
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    candidate = {**minimal_object, "unknown_property": True}
    # When validating the object
    result = schema.safe_parse(candidate)
    # Then an unknown field issue should be reported on the property
    assert result.ok is False
    assert [issue.to_dict() for issue in result.issues] == [
        {
            "path": ["unknown_property"],
            "message": "Unrecognized key in object: 'unknown_property'",
            "code": "unrecognized_keys",
        }
    ]
    assert result.issues[0].kind == IssueKind.UNKNOWN_FIELD


def test_schema_should_reject_an_identifier_of_another_type(minimal_object):
    """Test that the type prefix of the identifier must match the object type."""
    # Given a minimal valid object whose id names another type
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    candidate = {
        **minimal_object,
        "id": "x-mitre-unknown--c78cb6e5-0c4b-4611-8297-d1b8b55e40b5",
    }
    # When validating the object
    result = schema.safe_parse(candidate)
    # Then a format issue should be reported on the id
    assert result.ok is False
    assert [(issue.path, issue.code) for issue in result.issues] == [
        (("id",), IssueCode.INVALID_STRING)
    ]
    assert result.issues[0].kind == IssueKind.FORMAT_MISMATCH
    assert f"{minimal_object['type']}--<UUID>" in result.issues[0].message


def test_schema_should_reject_explicit_null(minimal_object):
    """Test that an explicit null is not confused with an absent property."""
    # Given a minimal valid object whose spec_version is null
    schema = SCHEMA_REGISTRY.resolve(minimal_object["type"])
    candidate = {**minimal_object, "spec_version": None}
    # When validating the object
    result = schema.safe_parse(candidate)
    # Then a type issue should be reported on the property
    assert result.ok is False
    assert [(issue.path, issue.code) for issue in result.issues] == [
        (("spec_version",), IssueCode.INVALID_TYPE)
    ]


def test_schema_should_reject_modified_before_created(minimal_data_source):
    """Test that an object cannot be modified before it was created."""
    # Given a data source modified before it was created
    schema = SCHEMA_REGISTRY.resolve("x-mitre-data-source")
    candidate = {**minimal_data_source, "modified": "2016-06-01T00:00:00.000Z"}
    # When validating the object
    result = schema.safe_parse(candidate)
    # Then a refinement issue should be reported on modified
    assert result.ok is False
    assert result.issues == (
        Issue(
            path=("modified",),
            message="The modified timestamp must be later than or equal to the "
            "created timestamp.",
            code=IssueCode.CUSTOM,
        ),
    )
    assert result.issues[0].kind == IssueKind.REFINEMENT_VIOLATION


@pytest.mark.parametrize(
    "timestamp",
    [
        pytest.param("2017-06-01T00:00:00Z", id="seconds precision"),
        pytest.param("2017-06-01T00:00:00.1Z", id="decisecond precision"),
        pytest.param("2017-06-01T00:00:00.123456Z", id="microsecond precision"),
    ],
)
def test_schema_should_accept_timestamp_precisions(minimal_data_source, timestamp):
    """Test that timestamps may carry any sub-second precision up to microseconds."""
    # Given a data source created and modified at the given timestamp
    schema = SCHEMA_REGISTRY.resolve("x-mitre-data-source")
    candidate = {**minimal_data_source, "created": timestamp, "modified": timestamp}
    # When validating the object
    result = schema.safe_parse(candidate)
    # Then it should succeed and keep the timestamps as given
    assert result.ok is True
    assert result.value.created == timestamp
