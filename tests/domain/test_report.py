from __future__ import annotations

from transit_rules.domain.model import ReportType
from transit_rules.domain.report import Report, ReportRow


def test_report_keeps_warnings_in_order() -> None:
    report = Report()

    report.add_warning("first", ReportType.OBJECT_NOT_FOUND)
    report.add_warning("second", ReportType.MULTIPLE_VALUE)
    report.add_warning("third", ReportType.OBJECT_NOT_FOUND)

    assert [row.message for row in report.warnings] == ["first", "second", "third"]
    assert report.warnings_of(ReportType.OBJECT_NOT_FOUND) == [
        ReportRow(message="first", category=ReportType.OBJECT_NOT_FOUND),
        ReportRow(message="third", category=ReportType.OBJECT_NOT_FOUND),
    ]
    assert report.errors == []


def test_reports_are_independent() -> None:
    first = Report()
    second = Report()

    first.add_warning("only here", ReportType.INVALID_FILE)

    assert second.warnings == []
