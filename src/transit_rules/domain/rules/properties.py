"""Conditional update of a single text-like field."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from transit_rules.domain.model import ReportType

if TYPE_CHECKING:
    from collections.abc import Callable

    from transit_rules.domain.report import Report

    from .dto import PropertyRule

WILDCARD: Final[str] = "*"


def update_property(
    rule: PropertyRule,
    current: str | None,
    assign: Callable[[str], None],
    report: Report,
) -> bool:
    """Write ``rule.property_value`` through ``assign`` if the old value matches.

    The old value matches when it is the wildcard or equals ``current``, a missing
    old value matching only a missing current value. On mismatch nothing is written
    and a warning is reported. Returns whether the field was written.
    """

    old_value = rule.property_old_value
    if old_value == WILDCARD or old_value == current:
        assign(rule.property_value)
        return True

    report.add_warning(
        f"object_type={rule.object_type}, object_id={rule.object_id}, "
        f"property_name={rule.property_name}: "
        "property_old_value does not match the value found in the data",
        ReportType.OLD_PROPERTY_VALUE_DOES_NOT_MATCH,
    )
    return False
