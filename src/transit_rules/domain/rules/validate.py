"""Reject property rule groups the engine cannot apply."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from transit_rules.domain.model import ObjectType, ReportType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from transit_rules.domain.report import Report

    from .dto import PropertyGroupKey, PropertyRule

log = getLogger(__name__)

ROUTE_NAME: Final[str] = "route_name"
DIRECTION_TYPE: Final[str] = "direction_type"
ROUTE_GEOMETRY: Final[str] = "route_geometry"
DESTINATION_ID: Final[str] = "destination_id"

ROUTE_PROPERTIES: Final[frozenset[str]] = frozenset(
    {ROUTE_NAME, DIRECTION_TYPE, ROUTE_GEOMETRY, DESTINATION_ID}
)


def validate_property_groups(
    groups: Mapping[PropertyGroupKey, list[PropertyRule]],
    report: Report,
) -> dict[PropertyGroupKey, list[PropertyRule]]:
    """Keep the groups targeting a supported object type and property name.

    Each rejected group is reported or logged once, whatever its size.
    """

    return {key: rules for key, rules in groups.items() if _is_supported(key, report)}


def _is_supported(key: PropertyGroupKey, report: Report) -> bool:
    object_type, object_id, property_name = key
    match object_type:
        case ObjectType.ROUTE:
            if property_name in ROUTE_PROPERTIES:
                return True
            report.add_warning(
                f"object_type={object_type}, object_id={object_id}: "
                f"unknown property_name {property_name} defined",
                ReportType.UNKNOWN_PROPERTY_NAME,
            )
            return False
        case ObjectType.LINE | ObjectType.STOP_POINT | ObjectType.STOP_AREA:
            log.warning("Changing properties for %s is not yet possible.", object_type)
            return False
