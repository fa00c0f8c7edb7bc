"""Read complementary code and property rule tables.

Every file is read to the end: a malformed row is reported as an
``invalid_file`` warning and skipped, while a file that cannot be opened
aborts the whole read.
"""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from transit_rules.adapters.tabular import encoding_error, field_count_error, open_table
from transit_rules.domain.model import ReportType

from .schema import ComplementaryCodeRow, PropertyRuleRow

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from transit_rules.domain.report import Report
    from transit_rules.domain.rules import ComplementaryCode, PropertyRule

log = getLogger(__name__)


class RuleFileError(RuntimeError):
    """Raised when a rule file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Error reading {path}: {reason}")


def read_complementary_code_rules(
    paths: Iterable[Path],
    report: Report,
) -> list[ComplementaryCode]:
    """Return every well-formed complementary code row from ``paths``, in file order."""

    log.info("Reading complementary code rules.")
    return [
        row.to_rule()
        for path in paths
        for row in _read_rows(path, ComplementaryCodeRow, report)
    ]


def read_property_rules(paths: Iterable[Path], report: Report) -> list[PropertyRule]:
    """Return every well-formed property rule row from ``paths``, in file order."""

    log.info("Reading property rules.")
    return [
        row.to_rule()
        for path in paths
        for row in _read_rows(path, PropertyRuleRow, report)
    ]


def _read_rows[TRow: BaseModel](
    path: Path,
    model: type[TRow],
    report: Report,
) -> Iterator[TRow]:
    try:
        with open_table(path) as reader:
            header_size = len(reader.fieldnames or ())
            rows = iter(reader)
            while True:
                try:
                    raw_row = next(rows)
                except StopIteration:
                    break
                except csv.Error as exc:
                    _report_invalid_row(report, path, reader.line_num, str(exc))
                    continue

                row_error = field_count_error(raw_row, header_size) or encoding_error(raw_row)
                if row_error is not None:
                    _report_invalid_row(report, path, reader.line_num, row_error)
                    continue
                try:
                    yield model.model_validate(raw_row)
                except ValidationError as exc:
                    _report_invalid_row(report, path, reader.line_num, _describe(exc))
    except OSError as exc:
        raise RuleFileError(path, str(exc)) from exc


def _report_invalid_row(report: Report, path: Path, line: int, reason: str) -> None:
    report.add_warning(
        f'Error reading "{path.name}": line {line}: {reason}',
        ReportType.INVALID_FILE,
    )


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
