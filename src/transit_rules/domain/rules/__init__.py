"""Rule reconciliation engine.

Layered flow:
1) deduplicate rule records and group property rules
2) drop groups on unsupported object types or names, then ambiguous groups
3) insert complementary codes
4) apply property rules, reconciling geometries through the shape collection
"""

from __future__ import annotations

from .apply import apply_property_rule, insert_code
from .deduplicate import (
    deduplicate_codes,
    deduplicate_property_rules,
    group_property_rules,
)
from .dto import ComplementaryCode, PropertyGroupKey, PropertyRule
from .engine import apply_rules
from .geometry import InvalidGeometryError, parse_wkt, shapes_equal, update_geometry
from .properties import WILDCARD, update_property
from .validate import ROUTE_PROPERTIES, validate_property_groups

__all__ = [
    "ROUTE_PROPERTIES",
    "WILDCARD",
    "ComplementaryCode",
    "InvalidGeometryError",
    "PropertyGroupKey",
    "PropertyRule",
    "apply_property_rule",
    "apply_rules",
    "deduplicate_codes",
    "deduplicate_property_rules",
    "group_property_rules",
    "insert_code",
    "parse_wkt",
    "shapes_equal",
    "update_geometry",
    "update_property",
    "validate_property_groups",
]
