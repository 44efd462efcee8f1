# pragma: no cover  # do not test coverage of tests...
# type: ignore
"""Provide fixtures for pytest: minimal valid objects of every ATT&CK type."""

from uuid import uuid4

import pytest

from attack_data_model.schemas.common import X_MITRE_IDENTITY, X_MITRE_MARKING

CREATED = "2017-06-01T00:00:00.000Z"
MODIFIED = "2017-06-01T00:00:00.000Z"


def _attack_object(type_tag: str, name: str, **properties) -> dict:
    return {
        "type": type_tag,
        "id": f"{type_tag}--{uuid4()}",
        "spec_version": "2.1",
        "created": CREATED,
        "modified": MODIFIED,
        "created_by_ref": X_MITRE_IDENTITY,
        "object_marking_refs": [X_MITRE_MARKING],
        "name": name,
        "x_mitre_attack_spec_version": "2.1.0",
        "x_mitre_version": "1.0",
        **properties,
    }


def _mitre_reference(external_id: str, path: str) -> list[dict]:
    return [
        {
            "source_name": "mitre-attack",
            "url": f"https://attack.mitre.org/{path}/{external_id}",
            "external_id": external_id,
        }
    ]


@pytest.fixture
def minimal_data_source() -> dict:
    """Fixture to create a minimal valid data source."""
    return {
        "type": "x-mitre-data-source",
        "id": f"x-mitre-data-source--{uuid4()}",
        "description": "Test data source description",
        "spec_version": "2.1",
        "created": CREATED,
        "created_by_ref": f"identity--{uuid4()}",
        "modified": MODIFIED,
        "name": "Network Connection Creation",
        "object_marking_refs": [X_MITRE_MARKING],
        "x_mitre_modified_by_ref": X_MITRE_IDENTITY,
        "external_references": [
            {
                "source_name": "mitre-attack",
                "url": "https://attack.mitre.org/datasources/DS0014",
                "external_id": "DS0014",
            }
        ],
        "x_mitre_attack_spec_version": "2.1.0",
        "x_mitre_domains": ["enterprise-attack"],
        "x_mitre_version": "1.0",
        "x_mitre_collection_layers": ["Host"],
    }


@pytest.fixture
def minimal_collection() -> dict:
    """Fixture to create a minimal valid collection."""
    return _attack_object(
        "x-mitre-collection",
        "Enterprise ATT&CK",
        description="ATT&CK for Enterprise provides a knowledge base of adversary behavior.",
        x_mitre_contents=[
            {"object_ref": f"attack-pattern--{uuid4()}", "object_modified": MODIFIED}
        ],
    )


@pytest.fixture
def minimal_data_component() -> dict:
    """Fixture to create a minimal valid data component."""
    return _attack_object(
        "x-mitre-data-component",
        "Network Connection Creation",
        description="Initial construction of a network connection.",
        x_mitre_data_source_ref=f"x-mitre-data-source--{uuid4()}",
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_technique() -> dict:
    """Fixture to create a minimal valid technique."""
    return _attack_object(
        "attack-pattern",
        "Phishing",
        external_references=_mitre_reference("T1566", "techniques"),
        x_mitre_is_subtechnique=False,
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_tactic() -> dict:
    """Fixture to create a minimal valid tactic."""
    return _attack_object(
        "x-mitre-tactic",
        "Initial Access",
        description="The adversary is trying to get into your network.",
        external_references=_mitre_reference("TA0001", "tactics"),
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
        x_mitre_shortname="initial-access",
    )


@pytest.fixture
def minimal_mitigation() -> dict:
    """Fixture to create a minimal valid mitigation."""
    return _attack_object(
        "course-of-action",
        "User Training",
        description="Train users to be aware of access or manipulation attempts.",
        external_references=_mitre_reference("M1017", "mitigations"),
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_group() -> dict:
    """Fixture to create a minimal valid group."""
    return _attack_object(
        "intrusion-set",
        "APT28",
        external_references=_mitre_reference("G0007", "groups"),
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_malware() -> dict:
    """Fixture to create a minimal valid malware."""
    return _attack_object(
        "malware",
        "X-Agent",
        is_family=True,
        external_references=_mitre_reference("S0161", "software"),
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_tool() -> dict:
    """Fixture to create a minimal valid tool."""
    return _attack_object(
        "tool",
        "Mimikatz",
        external_references=_mitre_reference("S0002", "software"),
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_campaign() -> dict:
    """Fixture to create a minimal valid campaign."""
    return _attack_object(
        "campaign",
        "Operation Dust Storm",
        description="Operation Dust Storm was a long-standing persistent cyber espionage campaign.",
        aliases=["Operation Dust Storm"],
        first_seen="2010-01-01T07:00:00.000Z",
        last_seen="2016-02-01T06:00:00.000Z",
        x_mitre_first_seen_citation="(Citation: Cylance Dust Storm)",
        x_mitre_last_seen_citation="(Citation: Cylance Dust Storm)",
        external_references=_mitre_reference("C0016", "campaigns"),
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_asset() -> dict:
    """Fixture to create a minimal valid asset."""
    return _attack_object(
        "x-mitre-asset",
        "Engineering Workstation",
        external_references=_mitre_reference("A0001", "assets"),
        x_mitre_domains=["ics-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_matrix() -> dict:
    """Fixture to create a minimal valid matrix."""
    return _attack_object(
        "x-mitre-matrix",
        "Enterprise ATT&CK",
        description="Below are the tactics and techniques representing the ATT&CK Matrix.",
        external_references=_mitre_reference("enterprise-attack", "matrices"),
        tactic_refs=[f"x-mitre-tactic--{uuid4()}", f"x-mitre-tactic--{uuid4()}"],
        x_mitre_domains=["enterprise-attack"],
        x_mitre_modified_by_ref=X_MITRE_IDENTITY,
    )


@pytest.fixture
def minimal_identity() -> dict:
    """Fixture to create a minimal valid identity."""
    return {
        "type": "identity",
        "id": X_MITRE_IDENTITY,
        "spec_version": "2.1",
        "created": CREATED,
        "modified": MODIFIED,
        "name": "The MITRE Corporation",
        "identity_class": "organization",
        "object_marking_refs": [X_MITRE_MARKING],
    }


@pytest.fixture
def minimal_marking_definition() -> dict:
    """Fixture to create a minimal valid marking definition."""
    return {
        "type": "marking-definition",
        "id": X_MITRE_MARKING,
        "spec_version": "2.1",
        "created": CREATED,
        "created_by_ref": X_MITRE_IDENTITY,
        "definition_type": "statement",
        "definition": {
            "statement": "Copyright 2015-2024, The MITRE Corporation. MITRE ATT&CK and "
            "ATT&CK are registered trademarks of The MITRE Corporation."
        },
    }


@pytest.fixture
def minimal_relationship() -> dict:
    """Fixture to create a minimal valid relationship."""
    return {
        "type": "relationship",
        "id": f"relationship--{uuid4()}",
        "spec_version": "2.1",
        "created": CREATED,
        "modified": MODIFIED,
        "created_by_ref": X_MITRE_IDENTITY,
        "object_marking_refs": [X_MITRE_MARKING],
        "relationship_type": "uses",
        "source_ref": f"intrusion-set--{uuid4()}",
        "target_ref": f"attack-pattern--{uuid4()}",
        "x_mitre_attack_spec_version": "2.1.0",
        "x_mitre_modified_by_ref": X_MITRE_IDENTITY,
        "x_mitre_version": "1.0",
    }


MINIMAL_OBJECT_FIXTURES = [
    "minimal_asset",
    "minimal_campaign",
    "minimal_collection",
    "minimal_data_component",
    "minimal_data_source",
    "minimal_group",
    "minimal_identity",
    "minimal_malware",
    "minimal_marking_definition",
    "minimal_matrix",
    "minimal_mitigation",
    "minimal_relationship",
    "minimal_tactic",
    "minimal_technique",
    "minimal_tool",
]


@pytest.fixture(params=MINIMAL_OBJECT_FIXTURES)
def minimal_object(request) -> dict:
    """Fixture iterating over a minimal valid object of every registered type."""
    return request.getfixturevalue(request.param)
