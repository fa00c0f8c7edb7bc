"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from transit_rules.adapters.csv_rules import read_complementary_code_rules, read_property_rules
from transit_rules.adapters.ntfs import read_model, write_model
from transit_rules.adapters.report_json import write_report
from transit_rules.domain.report import Report
from transit_rules.domain.rules import apply_rules as apply_rules_to_model

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from transit_rules.domain.model import Collections
    from transit_rules.domain.ports import (
        ComplementaryCodeSource,
        PropertyRuleSource,
        ReportSink,
    )


log = getLogger(__name__)


def apply_rules(
    collections: Collections,
    *,
    complementary_code_rules_files: Sequence[Path] = (),
    property_rules_files: Sequence[Path] = (),
    report_path: Path,
    code_source: ComplementaryCodeSource | None = None,
    property_source: PropertyRuleSource | None = None,
    report_sink: ReportSink | None = None,
) -> Report:
    """Read every rule file, patch ``collections`` and write the report.

    Reading completes before anything is mutated. A rule file that cannot be
    opened or a report that cannot be written aborts the run.
    """

    log.info("Applying rules...")
    effective_code_source = code_source or read_complementary_code_rules
    effective_property_source = property_source or read_property_rules
    effective_sink = report_sink or write_report

    report = Report()
    codes = effective_code_source(complementary_code_rules_files, report)
    properties = effective_property_source(property_rules_files, report)

    apply_rules_to_model(collections, codes=codes, properties=properties, report=report)

    effective_sink(report, report_path)
    return report


def apply_rules_to_dataset(
    input_dir: Path,
    output_dir: Path,
    *,
    complementary_code_rules_files: Sequence[Path] = (),
    property_rules_files: Sequence[Path] = (),
    report_path: Path,
) -> Report:
    """Load a dataset directory, apply rules and write the patched dataset."""

    collections = read_model(input_dir)
    report = apply_rules(
        collections,
        complementary_code_rules_files=complementary_code_rules_files,
        property_rules_files=property_rules_files,
        report_path=report_path,
    )
    write_model(collections, output_dir)
    log.info(
        f"Finished applying rules: input={input_dir}, output={output_dir}, "
        f"warnings={len(report.warnings)}, report={report_path}"
    )
    return report
