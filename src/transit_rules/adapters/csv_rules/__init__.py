"""Public interface for the CSV rule table adapter."""

from __future__ import annotations

from .reader import RuleFileError, read_complementary_code_rules, read_property_rules
from .schema import ComplementaryCodeRow, PropertyRuleRow

__all__ = [
    "ComplementaryCodeRow",
    "PropertyRuleRow",
    "RuleFileError",
    "read_complementary_code_rules",
    "read_property_rules",
]
