"""Cross-field refinement rules.

A refinement is a callable receiving an object that already passed every field
rule, together with a ``RefinementContext`` collecting issues. Refinements never
mutate the object and always run in declaration order, so a single document may
surface several refinement issues at once.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import cached_property

from stix2.utils import parse_into_datetime

from attack_data_model.validation.base import StixObject
from attack_data_model.validation.issues import Issue, IssueCode, PathSegment

ATTACK_SOURCE_NAME = "mitre-attack"


class RefinementContext:
    """Collect the issues emitted by the refinements of one validation call."""

    def __init__(self) -> None:
        """Initialize an empty context."""
        self._issues: list[Issue] = []

    @property
    def issues(self) -> tuple[Issue, ...]:
        """Return the collected issues in emission order."""
        return tuple(self._issues)

    def add_issue(
        self,
        message: str,
        path: Sequence[PathSegment] = (),
        code: IssueCode = IssueCode.CUSTOM,
    ) -> None:
        """Record an issue."""
        self._issues.append(Issue(path=tuple(path), message=message, code=code))


Refinement = Callable[[StixObject, RefinementContext], None]


def non_empty_refinement(field_name: str, message: str) -> Refinement:
    """Require a list property, when present, to hold at least one entry."""

    def _refine(obj: StixObject, ctx: RefinementContext) -> None:
        value = obj.get(field_name)
        if value is not None and len(value) < 1:
            ctx.add_issue(message, path=(field_name,))

    _refine.__name__ = f"non_empty_{field_name}"
    return _refine


def chronological_refinement(
    start_field: str, end_field: str, message: str | None = None
) -> Refinement:
    """Require ``end_field`` to be later than or equal to ``start_field``."""
    message = (
        message or f"{end_field} must be later than or equal to {start_field}."
    )

    def _refine(obj: StixObject, ctx: RefinementContext) -> None:
        start = obj.get(start_field)
        end = obj.get(end_field)
        if start is None or end is None:
            return
        if parse_into_datetime(end) < parse_into_datetime(start):
            ctx.add_issue(message, path=(end_field,))

    _refine.__name__ = f"{start_field}_before_{end_field}"
    return _refine


modified_not_before_created = chronological_refinement(
    "created",
    "modified",
    "The modified timestamp must be later than or equal to the created timestamp.",
)


@dataclass(frozen=True)
class AttackIdFormat:
    """Shape of an ATT&CK ID: a prefix followed by a fixed number of digits.

    Examples:
        >>> str(AttackIdFormat("DS", 4))
        'DS####'
        >>> AttackIdFormat("T", 4, sub_digits=3).matches("T1234.001")
        True

    """

    prefix: str
    digits: int
    sub_digits: int | None = field(default=None)

    @cached_property
    def regex(self) -> re.Pattern[str]:
        """Return the compiled pattern of the format."""
        pattern = rf"^{re.escape(self.prefix)}\d{{{self.digits}}}"
        if self.sub_digits is not None:
            pattern += rf"\.\d{{{self.sub_digits}}}"
        return re.compile(pattern + "$")

    def matches(self, value: str) -> bool:
        """Tell whether a value follows the format."""
        return bool(self.regex.match(value))

    def __str__(self) -> str:
        """Return the format as ``PREFIX####``."""
        rendered = self.prefix + "#" * self.digits
        if self.sub_digits is not None:
            rendered += "." + "#" * self.sub_digits
        return rendered


def check_attack_id(
    obj: StixObject,
    ctx: RefinementContext,
    id_format: AttackIdFormat,
    source_name: str = ATTACK_SOURCE_NAME,
) -> None:
    """Check the ATT&CK ID carried by the canonical external reference."""
    references = obj.get("external_references")
    if not references:
        return
    index = next(
        (i for i, ref in enumerate(references) if ref.source_name == source_name),
        None,
    )
    if index is None:
        ctx.add_issue("ATT&CK ID must be defined.", path=("external_references",))
        return
    external_id = references[index].get("external_id")
    path = ("external_references", index, "external_id")
    if external_id is None:
        ctx.add_issue("ATT&CK ID must be defined.", path=path)
    elif not id_format.matches(external_id):
        ctx.add_issue(
            f"The first external_reference must match the ATT&CK ID format {id_format}.",
            path=path,
        )


def attack_id_refinement(
    id_format: AttackIdFormat, source_name: str = ATTACK_SOURCE_NAME
) -> Refinement:
    """Build the ATT&CK ID refinement for one object type."""

    def _refine(obj: StixObject, ctx: RefinementContext) -> None:
        check_attack_id(obj, ctx, id_format, source_name)

    _refine.__name__ = f"attack_id_{id_format.prefix.lower()}"
    return _refine
