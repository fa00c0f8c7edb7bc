"""Intra-batch deduplication of rule records.

Responsibilities of this stage:
- collapse records whose fields are all equal
- drop groups the validator rejects, before looking at their size
- detect groups carrying conflicting values for one property and drop them
- produce a canonical ordering independent of the order sources were read in

Runs on the complete set of rules, before anything is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transit_rules.domain.model import ReportType

from .validate import validate_property_groups

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transit_rules.domain.report import Report

    from .dto import ComplementaryCode, PropertyGroupKey, PropertyRule


def deduplicate_codes(codes: Iterable[ComplementaryCode]) -> list[ComplementaryCode]:
    """Return distinct complementary codes in canonical order."""

    return sorted(set(codes), key=lambda code: code.sort_key)


def group_property_rules(
    rules: Iterable[PropertyRule],
) -> dict[PropertyGroupKey, list[PropertyRule]]:
    """Group distinct rules by ``(object_type, object_id, property_name)``.

    Groups and the rules inside each group are sorted canonically.
    """

    groups: dict[PropertyGroupKey, set[PropertyRule]] = {}
    for rule in rules:
        groups.setdefault(rule.group_key, set()).add(rule)

    return {
        key: sorted(groups[key], key=lambda rule: rule.sort_key)
        for key in sorted(groups, key=lambda key: (key[0].rank, key[1], key[2]))
    }


def discard_ambiguous_groups(
    groups: dict[PropertyGroupKey, list[PropertyRule]],
    report: Report,
) -> list[PropertyRule]:
    """Keep groups holding exactly one rule; report and drop the others whole."""

    kept: list[PropertyRule] = []
    for (object_type, object_id, property_name), rules in groups.items():
        if len(rules) > 1:
            report.add_warning(
                f"object_type={object_type}, object_id={object_id}: "
                f"multiple values specified for the property {property_name}",
                ReportType.MULTIPLE_VALUE,
            )
            continue
        kept.extend(rules)
    return kept


def deduplicate_property_rules(
    rules: Iterable[PropertyRule],
    report: Report,
) -> list[PropertyRule]:
    """Collapse duplicate rules, then drop unsupported and ambiguous groups."""

    groups = validate_property_groups(group_property_rules(rules), report)
    return discard_ambiguous_groups(groups, report)
