"""Apply rule records to the transit model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from transit_rules.domain.model import ReportType

from .geometry import update_geometry
from .properties import update_property
from .validate import DESTINATION_ID, DIRECTION_TYPE, ROUTE_GEOMETRY, ROUTE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

    from transit_rules.domain.model import Collections
    from transit_rules.domain.report import Report

    from .dto import ComplementaryCode, PropertyRule

# property name -> Route attribute, for the plain text fields
_ROUTE_ATTRIBUTES: Final[dict[str, str]] = {
    ROUTE_NAME: "name",
    DIRECTION_TYPE: "direction_type",
    DESTINATION_ID: "destination_id",
}


def insert_code(collections: Collections, code: ComplementaryCode, report: Report) -> bool:
    """Add the code to its target object; return whether the object exists."""

    target = collections.collection_for(code.object_type).get(code.object_id)
    if target is None:
        report.add_warning(
            "Error inserting code: object_codes.txt: "
            f"object={code.object_type},  object_id={code.object_id} not found",
            ReportType.OBJECT_NOT_FOUND,
        )
        return False
    target.add_code(code.object_system, code.object_code)
    return True


def apply_property_rule(collections: Collections, rule: PropertyRule, report: Report) -> bool:
    """Apply one route rule kept by ``validate_property_groups``.

    Returns whether a field was written.
    """

    route = collections.routes.get(rule.object_id)
    if route is None:
        report.add_warning(
            f"{rule.object_type} {rule.object_id} not found in the data",
            ReportType.OBJECT_NOT_FOUND,
        )
        return False

    if rule.property_name == ROUTE_GEOMETRY:
        return update_geometry(rule, route, collections.geometries, report)

    attribute = _ROUTE_ATTRIBUTES[rule.property_name]
    return update_property(rule, getattr(route, attribute), _setter(route, attribute), report)


def _setter(target: object, attribute: str) -> Callable[[str], None]:
    def assign(value: str) -> None:
        setattr(target, attribute, value)

    return assign
