"""Diagnostics accumulated while applying rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transit_rules.domain.model import ReportType

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportRow:
    message: str
    category: ReportType


@dataclass(slots=True)
class Report:
    """Ordered accumulator threaded through every stage of a run.

    A fresh report is created per run; nothing is shared between runs.
    """

    warnings: list[ReportRow] = field(default_factory=list["ReportRow"])
    errors: list[ReportRow] = field(default_factory=list["ReportRow"])

    def add_warning(self, message: str, category: ReportType) -> None:
        log.debug("%s: %s", category, message)
        self.warnings.append(ReportRow(message=message, category=category))

    def add_error(self, message: str, category: ReportType) -> None:
        log.debug("%s: %s", category, message)
        self.errors.append(ReportRow(message=message, category=category))

    def warnings_of(self, category: ReportType) -> list[ReportRow]:
        return [row for row in self.warnings if row.category == category]
