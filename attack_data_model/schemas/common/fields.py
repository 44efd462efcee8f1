"""Base field tables shared by every STIX and ATT&CK object type.

The tables only declare what the STIX specification requires in general. Each
concrete schema restates its own required set with ``ObjectSchema.require``.
"""

from attack_data_model.schemas.common.enums import StixType
from attack_data_model.schemas.common.primitives import (
    AttackSpecVersion,
    AttackVersion,
    Confidence,
    NonEmptyString,
    ObjectMarkingRefs,
    StixCreatedByRef,
    StixCreatedTimestampField,
    StixIdentifier,
    StixModifiedTimestampField,
    StixSpecVersion,
    StrictBoolean,
    StrictString,
    StringList,
)
from attack_data_model.schemas.common.properties import ExternalReferences
from attack_data_model.validation.refinements import modified_not_before_created
from attack_data_model.validation.schema import ObjectSchema, optional, required

STIX_CORE_FIELDS = {
    "id": required(StixIdentifier, "The unique identifier of the object."),
    "type": required(StixType, "The type of the object."),
    "spec_version": required(
        StixSpecVersion, "The version of the STIX specification used to represent the object."
    ),
    "created": required(
        StixCreatedTimestampField, "The time at which the object was originally created."
    ),
    "created_by_ref": optional(
        StixCreatedByRef, "The ID of the identity that created the object."
    ),
    "external_references": optional(
        ExternalReferences, "Non-STIX information related to the object."
    ),
    "object_marking_refs": optional(
        ObjectMarkingRefs, "The marking definitions that apply to the object."
    ),
}

STIX_DOMAIN_FIELDS = {
    **STIX_CORE_FIELDS,
    "modified": required(
        StixModifiedTimestampField, "The time at which the object was last modified."
    ),
    "labels": optional(StringList, "Terms describing the object."),
    "revoked": optional(StrictBoolean, "Whether the object has been revoked."),
    "confidence": optional(Confidence, "Confidence in the correctness of the object."),
    "lang": optional(NonEmptyString, "The language of the text content of the object."),
}

ATTACK_BASE_FIELDS = {
    **STIX_DOMAIN_FIELDS,
    "name": optional(NonEmptyString, "The name of the object."),
    "description": optional(StrictString, "A description of the object."),
    "x_mitre_version": optional(
        AttackVersion, "The version of the object, in 'major.minor' format."
    ),
    "x_mitre_attack_spec_version": optional(
        AttackSpecVersion, "The version of the ATT&CK specification used by the object."
    ),
    "x_mitre_old_attack_id": optional(
        NonEmptyString, "The ATT&CK ID the object had before being renumbered."
    ),
    "x_mitre_deprecated": optional(
        StrictBoolean, "Whether the object has been deprecated."
    ),
    "x_mitre_modified_by_ref": optional(
        StixCreatedByRef, "The ID of the identity that last modified the object."
    ),
}

stix_core_schema = ObjectSchema("StixCoreObject", STIX_CORE_FIELDS)

stix_domain_schema = ObjectSchema("StixDomainObject", STIX_DOMAIN_FIELDS).refine(
    modified_not_before_created
)

attack_base_schema = stix_domain_schema.extend(
    ATTACK_BASE_FIELDS, name="AttackBaseObject"
)
