"""Orchestrator for the apply phase.

Receives every rule record already read, deduplicates and validates them in
full, and only then mutates the model. Reading sources and persisting the
report are the caller's concern.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from transit_rules.domain.report import Report

from .apply import apply_property_rule, insert_code
from .deduplicate import deduplicate_codes, deduplicate_property_rules

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transit_rules.domain.model import Collections

    from .dto import ComplementaryCode, PropertyRule

log = getLogger(__name__)


def apply_rules(
    collections: Collections,
    *,
    codes: Iterable[ComplementaryCode] = (),
    properties: Iterable[PropertyRule] = (),
    report: Report | None = None,
) -> Report:
    """Apply complementary codes and property rules to ``collections``.

    Warnings go to ``report`` (a new one when omitted), which is returned.
    """

    active_report = report if report is not None else Report()

    unique_codes = deduplicate_codes(codes)
    rules = deduplicate_property_rules(properties, active_report)

    inserted = sum(insert_code(collections, code, active_report) for code in unique_codes)
    updated = sum(apply_property_rule(collections, rule, active_report) for rule in rules)

    log.info(
        "Rules applied: codes=%s/%s, properties=%s/%s, warnings=%s",
        inserted,
        len(unique_codes),
        updated,
        len(rules),
        len(active_report.warnings),
    )
    return active_report
