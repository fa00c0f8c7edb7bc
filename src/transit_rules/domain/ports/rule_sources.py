"""Ports for reading rule records from external sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from transit_rules.domain.report import Report
    from transit_rules.domain.rules import ComplementaryCode, PropertyRule


@runtime_checkable
class ComplementaryCodeSource(Protocol):
    """Callable port reading complementary codes; malformed records go to ``report``."""

    def __call__(self, paths: Iterable[Path], report: Report) -> list[ComplementaryCode]: ...


@runtime_checkable
class PropertyRuleSource(Protocol):
    """Callable port reading property rules; malformed records go to ``report``."""

    def __call__(self, paths: Iterable[Path], report: Report) -> list[PropertyRule]: ...


@runtime_checkable
class ReportSink(Protocol):
    """Callable port persisting the final report."""

    def __call__(self, report: Report, path: Path) -> None: ...


__all__ = ["ComplementaryCodeSource", "PropertyRuleSource", "ReportSink"]
