"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ObjectType(StrEnum):
    """Transit object kinds that rules may target.

    Declaration order is the canonical sort order for rules.
    """

    LINE = "line"
    ROUTE = "route"
    STOP_POINT = "stop_point"
    STOP_AREA = "stop_area"

    @property
    def rank(self) -> int:
        return _OBJECT_TYPE_RANK[self]


_OBJECT_TYPE_RANK: dict[ObjectType, int] = {
    object_type: rank for rank, object_type in enumerate(ObjectType)
}


class ReportType(StrEnum):
    """Category attached to every diagnostics row."""

    INVALID_FILE = "invalid_file"
    UNKNOWN_PROPERTY_NAME = "unknown_property_name"
    MULTIPLE_VALUE = "multiple_value"
    OBJECT_NOT_FOUND = "object_not_found"
    OLD_PROPERTY_VALUE_DOES_NOT_MATCH = "old_property_value_does_not_match"
    GEOMETRY_NOT_VALID = "geometry_not_valid"
