"""Identity."""

from typing import Literal

from attack_data_model.schemas.common import (
    Domains,
    IdentityClass,
    ObjectMarkingRefs,
    StrictString,
    StringList,
    attack_base_schema,
    identifier,
)
from attack_data_model.validation import SCHEMA_REGISTRY, optional, required

identity_schema = SCHEMA_REGISTRY.register(
    attack_base_schema.extend(
        {
            "id": required(identifier("identity")),
            "type": required(Literal["identity"]),
            "object_marking_refs": required(ObjectMarkingRefs),
            "identity_class": required(
                IdentityClass, "The type of entity the identity describes."
            ),
            "roles": optional(StringList, "The roles the identity performs."),
            "sectors": optional(StringList, "The industry sectors of the identity."),
            "contact_information": optional(
                StrictString, "The contact information of the identity."
            ),
            "x_mitre_domains": optional(Domains),
        },
        name="Identity",
    )
    .require(
        "created",
        "id",
        "identity_class",
        "modified",
        "name",
        "object_marking_refs",
        "spec_version",
        "type",
    )
    .strict()
)
