"""Persist the diagnostics report as a JSON document."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from transit_rules.domain.model import ReportType

if TYPE_CHECKING:
    from pathlib import Path

    from transit_rules.domain.report import Report, ReportRow

log = getLogger(__name__)


class ReportWriteError(RuntimeError):
    """Raised when the report cannot be serialized or written."""


class ReportRowModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: ReportType
    message: str

    @classmethod
    def from_row(cls, row: ReportRow) -> ReportRowModel:
        return cls(category=row.category, message=row.message)


class ReportDocument(BaseModel):
    errors: list[ReportRowModel]
    warnings: list[ReportRowModel]

    @classmethod
    def from_report(cls, report: Report) -> ReportDocument:
        return cls(
            errors=[ReportRowModel.from_row(row) for row in report.errors],
            warnings=[ReportRowModel.from_row(row) for row in report.warnings],
        )


def serialize_report(report: Report) -> str:
    return ReportDocument.from_report(report).model_dump_json(indent=2)


def write_report(report: Report, path: Path) -> None:
    """Write ``report`` to ``path``; any failure is fatal."""

    try:
        serialized = serialize_report(report)
        path.write_text(serialized, encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ReportWriteError(f"Unable to write report to {path}: {exc}") from exc
    log.info("Report written to %s (%s warnings)", path, len(report.warnings))
