"""Domain ports (interfaces) implemented by adapters."""

from __future__ import annotations

from .rule_sources import ComplementaryCodeSource, PropertyRuleSource, ReportSink

__all__ = ["ComplementaryCodeSource", "PropertyRuleSource", "ReportSink"]
