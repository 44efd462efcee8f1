import pytest
from attack_data_model.schemas import technique_schema
from attack_data_model.schemas.common import KillChainPhase
from attack_data_model.validation import IssueCode


def _with_attack_id(technique: dict, external_id: str, is_subtechnique: bool) -> dict:
    return {
        **technique,
        "x_mitre_is_subtechnique": is_subtechnique,
        "external_references": [
            {"source_name": "mitre-attack", "external_id": external_id}
        ],
    }


@pytest.mark.parametrize(
    "external_id,is_subtechnique",
    [
        pytest.param("T1566", False, id="technique"),
        pytest.param("T1566.001", True, id="sub-technique"),
    ],
)
def test_technique_should_accept_matching_attack_id(
    minimal_technique, external_id, is_subtechnique
):
    """Test that the ATT&CK ID follows the technique or sub-technique format."""
    # Given a technique whose ATT&CK ID matches its kind
    technique = _with_attack_id(minimal_technique, external_id, is_subtechnique)
    # When validating the technique
    result = technique_schema.safe_parse(technique)
    # Then it should succeed
    assert result.ok is True


@pytest.mark.parametrize(
    "external_id,is_subtechnique,expected_format",
    [
        pytest.param("T1566.001", False, "T####", id="technique with sub-technique id"),
        pytest.param("T1566", True, "T####.###", id="sub-technique with technique id"),
        pytest.param("TA0001", False, "T####", id="tactic id"),
    ],
)
def test_technique_should_reject_mismatching_attack_id(
    minimal_technique, external_id, is_subtechnique, expected_format
):
    """Test that the expected ATT&CK ID format depends on x_mitre_is_subtechnique."""
    # Given a technique whose ATT&CK ID does not match its kind
    technique = _with_attack_id(minimal_technique, external_id, is_subtechnique)
    # When validating the technique
    result = technique_schema.safe_parse(technique)
    # Then the issue should name the expected format
    assert [issue.message for issue in result.issues] == [
        "The first external_reference must match the ATT&CK ID format "
        f"{expected_format}."
    ]


def test_technique_should_find_attack_reference_after_other_sources(
    minimal_technique,
):
    """Test that the ATT&CK reference is looked up by its source name."""
    # Given a technique whose ATT&CK reference is not the first one
    technique = {
        **minimal_technique,
        "external_references": [
            {"source_name": "capec", "external_id": "CAPEC-98"},
            {"source_name": "mitre-attack", "external_id": "T15"},
        ],
    }
    # When validating the technique
    result = technique_schema.safe_parse(technique)
    # Then the issue should point at the ATT&CK reference
    assert [issue.path for issue in result.issues] == [
        ("external_references", 1, "external_id")
    ]


def test_technique_should_require_an_attack_reference(minimal_technique):
    """Test that a technique without ATT&CK reference is rejected."""
    # Given a technique whose references come from other sources only
    technique = {
        **minimal_technique,
        "external_references": [{"source_name": "capec", "external_id": "CAPEC-98"}],
    }
    # When validating the technique
    result = technique_schema.safe_parse(technique)
    # Then the ATT&CK ID should be reported as undefined
    assert [(issue.path, issue.message) for issue in result.issues] == [
        (("external_references",), "ATT&CK ID must be defined.")
    ]


def test_technique_should_validate_kill_chain_phases(minimal_technique):
    """Test that kill chain phases are validated against the ATT&CK kill chains."""
    # Given a technique with kill chain phases
    technique = {
        **minimal_technique,
        "kill_chain_phases": [
            {"kill_chain_name": "mitre-attack", "phase_name": "initial-access"}
        ],
    }
    invalid_technique = {
        **minimal_technique,
        "kill_chain_phases": [
            {"kill_chain_name": "lockheed-martin", "phase_name": "initial-access"}
        ],
    }
    # When validating the techniques
    validated = technique_schema.parse(technique)
    result = technique_schema.safe_parse(invalid_technique)
    # Then the ATT&CK kill chain should be accepted and any other rejected
    assert isinstance(validated.kill_chain_phases[0], KillChainPhase)
    assert [(issue.path, issue.code) for issue in result.issues] == [
        (("kill_chain_phases", 0, "kill_chain_name"), IssueCode.INVALID_ENUM_VALUE)
    ]


@pytest.mark.parametrize(
    "field_name,value",
    [
        pytest.param("x_mitre_permissions_required", ["root"], id="permissions"),
        pytest.param("x_mitre_impact_type", ["Availability"], id="impact type"),
        pytest.param(
            "x_mitre_tactic_type", ["Post-Adversary Device Access"], id="tactic type"
        ),
        pytest.param("x_mitre_platforms", ["Linux", "macOS"], id="platforms"),
    ],
)
def test_technique_should_accept_vocabulary_values(minimal_technique, field_name, value):
    """Test that optional vocabulary properties accept their members."""
    # Given a technique carrying a vocabulary property
    technique = {**minimal_technique, field_name: value}
    # When validating the technique
    validated = technique_schema.parse(technique)
    # Then the property should be kept as given
    assert validated.to_dict()[field_name] == value
