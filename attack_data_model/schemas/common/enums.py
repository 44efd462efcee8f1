"""Offer closed vocabularies for ATT&CK objects."""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "AttackDomain",
    "CollectionLayer",
    "IdentityClass",
    "ImpactType",
    "KillChainName",
    "Permission",
    "Platform",
    "RelationshipType",
    "StixType",
    "TacticType",
    "X_MITRE_IDENTITY",
    "X_MITRE_MARKING",
]

# Identity of The MITRE Corporation, author of every ATT&CK object
X_MITRE_IDENTITY = "identity--c78cb6e5-0c4b-4611-8297-d1b8b55e40b5"

# Copyright statement marking applied to ATT&CK content
X_MITRE_MARKING = "marking-definition--fa42a846-8d90-4e51-bc29-71d5b4802168"


class StixType(StrEnum):
    """STIX type tags used by the ATT&CK knowledge base.

    See https://docs.oasis-open.org/cti/stix/v2.1/os/stix-v2.1-os.html#_nrhq5e9nylke
    """

    ATTACK_PATTERN = "attack-pattern"
    BUNDLE = "bundle"
    CAMPAIGN = "campaign"
    COURSE_OF_ACTION = "course-of-action"
    IDENTITY = "identity"
    INTRUSION_SET = "intrusion-set"
    MALWARE = "malware"
    MARKING_DEFINITION = "marking-definition"
    RELATIONSHIP = "relationship"
    TOOL = "tool"
    X_MITRE_ASSET = "x-mitre-asset"
    X_MITRE_COLLECTION = "x-mitre-collection"
    X_MITRE_DATA_COMPONENT = "x-mitre-data-component"
    X_MITRE_DATA_SOURCE = "x-mitre-data-source"
    X_MITRE_MATRIX = "x-mitre-matrix"
    X_MITRE_TACTIC = "x-mitre-tactic"


class AttackDomain(StrEnum):
    """ATT&CK domains."""

    ENTERPRISE = "enterprise-attack"
    MOBILE = "mobile-attack"
    ICS = "ics-attack"


class KillChainName(StrEnum):
    """Kill chains of the ATT&CK domains, one per domain."""

    ENTERPRISE = "mitre-attack"
    MOBILE = "mitre-mobile-attack"
    ICS = "mitre-ics-attack"


class Platform(StrEnum):
    """Platforms supported by ATT&CK techniques, software and data sources."""

    ANDROID = "Android"
    AZURE_AD = "Azure AD"
    CONTAINERS = "Containers"
    CONTROL_SERVER = "Control Server"
    DATA_HISTORIAN = "Data Historian"
    EMBEDDED = "Embedded"
    ENGINEERING_WORKSTATION = "Engineering Workstation"
    ESXI = "ESXi"
    FIELD_CONTROLLER = "Field Controller/RTU/PLC/IED"
    GOOGLE_WORKSPACE = "Google Workspace"
    HUMAN_MACHINE_INTERFACE = "Human-Machine Interface"
    IAAS = "IaaS"
    IDENTITY_PROVIDER = "Identity Provider"
    INPUT_OUTPUT_SERVER = "Input/Output Server"
    IOS = "iOS"
    LINUX = "Linux"
    MACOS = "macOS"
    NETWORK = "Network"
    NETWORK_DEVICES = "Network Devices"
    NONE = "None"
    OFFICE_365 = "Office 365"
    OFFICE_SUITE = "Office Suite"
    PRE = "PRE"
    SAAS = "SaaS"
    SAFETY_INSTRUMENTED_SYSTEM = "Safety Instrumented System/Protection Relay"
    WINDOWS = "Windows"


class CollectionLayer(StrEnum):
    """Layers where a data source can be collected."""

    CLOUD_CONTROL_PLANE = "Cloud Control Plane"
    CONTAINER = "Container"
    DEVICE = "Device"
    HOST = "Host"
    NETWORK = "Network"
    OSINT = "OSINT"


class Permission(StrEnum):
    """Permissions required or obtained by techniques."""

    ADMINISTRATOR = "Administrator"
    ROOT = "root"
    SYSTEM = "SYSTEM"
    USER = "User"
    REMOTE_DESKTOP_USERS = "Remote Desktop Users"


class ImpactType(StrEnum):
    """Impact types of Impact tactic techniques."""

    AVAILABILITY = "Availability"
    INTEGRITY = "Integrity"


class TacticType(StrEnum):
    """Tactic types of Mobile techniques."""

    POST_ADVERSARY_DEVICE_ACCESS = "Post-Adversary Device Access"
    PRE_ADVERSARY_DEVICE_ACCESS = "Pre-Adversary Device Access"
    WITHOUT_ADVERSARY_DEVICE_ACCESS = "Without Adversary Device Access"


class IdentityClass(StrEnum):
    """Identity Class Open Vocabulary.

    See https://docs.oasis-open.org/cti/stix/v2.1/os/stix-v2.1-os.html#_be1dktvcmyu
    """

    INDIVIDUAL = "individual"
    GROUP = "group"
    SYSTEM = "system"
    ORGANIZATION = "organization"
    CLASS = "class"
    UNKNOWN = "unknown"


class RelationshipType(StrEnum):
    """Relationship types used between ATT&CK objects."""

    ATTRIBUTED_TO = "attributed-to"
    DETECTS = "detects"
    MITIGATES = "mitigates"
    REVOKED_BY = "revoked-by"
    SUBTECHNIQUE_OF = "subtechnique-of"
    TARGETS = "targets"
    USES = "uses"
