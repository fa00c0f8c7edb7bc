"""Reconcile ``route_geometry`` rules against the shape collection.

A route only stores the id of its shape. The rule's old and new values are WKT
text, so the old value is compared to the referenced shape by geometric content,
the new shape is upserted under ``<object_type>:<object_id>`` and the rule is then
rewritten to shape ids before the generic field update decides on the route's
``geometry_id``.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from shapely import wkt
from shapely.errors import ShapelyError

from transit_rules.domain.model import Geometry, ReportType

from .properties import WILDCARD, update_property

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry

    from transit_rules.domain.model import CollectionWithId, Route
    from transit_rules.domain.report import Report

    from .dto import PropertyRule

log = getLogger(__name__)


class InvalidGeometryError(ValueError):
    """Raised when WKT text cannot be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"invalid WKT {text!r}: {reason}")


def parse_wkt(text: str) -> BaseGeometry:
    try:
        return wkt.loads(text)
    except (ShapelyError, ValueError) as exc:
        raise InvalidGeometryError(text, str(exc)) from exc


def shapes_equal(left: BaseGeometry, right: BaseGeometry) -> bool:
    """Compare by content: same type and coordinates, whatever the WKT formatting."""

    return bool(left.equals_exact(right, 0.0))


def shape_id_for(rule: PropertyRule) -> str:
    return f"{rule.object_type}:{rule.object_id}"


def upsert_geometry(
    geometries: CollectionWithId[Geometry],
    shape_id: str,
    shape: BaseGeometry,
) -> Geometry:
    existing = geometries.get(shape_id)
    if existing is not None:
        existing.geometry = shape
        return existing
    return geometries.push(Geometry(id=shape_id, geometry=shape))


def update_geometry(
    rule: PropertyRule,
    route: Route,
    geometries: CollectionWithId[Geometry],
    report: Report,
) -> bool:
    """Apply a ``route_geometry`` rule to ``route``; return whether it was written."""

    expected_shape_id: str | None
    match (rule.property_old_value, route.geometry_id):
        case (None, None):
            expected_shape_id = None
        case (str(old_value), str(current_shape_id)):
            if old_value == WILDCARD:
                # TODO(rules): confirm with rule authors whether the wildcard should
                # replace an existing shape like it does for scalar properties.
                log.debug(
                    "Wildcard geometry rule ignored for %s %s: shape %s already set",
                    rule.object_type,
                    rule.object_id,
                    current_shape_id,
                )
                return False
            old_shape = _parse_rule_geometry(old_value, rule, report)
            if old_shape is None:
                return False
            current = geometries.get(current_shape_id)
            if current is None:
                report.add_warning(
                    f"object_type={rule.object_type}, object_id={rule.object_id}: "
                    f"geometry {current_shape_id} not found",
                    ReportType.OBJECT_NOT_FOUND,
                )
                return False
            expected_shape_id = (
                current_shape_id if shapes_equal(old_shape, current.geometry) else None
            )
        case _:
            expected_shape_id = None

    new_shape = _parse_rule_geometry(rule.property_value, rule, report)
    if new_shape is None:
        return False
    shape = upsert_geometry(geometries, shape_id_for(rule), new_shape)

    def assign(shape_id: str) -> None:
        route.geometry_id = shape_id

    rewritten = replace(rule, property_old_value=expected_shape_id, property_value=shape.id)
    return update_property(rewritten, route.geometry_id, assign, report)


def _parse_rule_geometry(
    text: str,
    rule: PropertyRule,
    report: Report,
) -> BaseGeometry | None:
    try:
        shape = parse_wkt(text)
    except InvalidGeometryError:
        report.add_warning(
            f"object_type={rule.object_type}, object_id={rule.object_id}: invalid geometry",
            ReportType.GEOMETRY_NOT_VALID,
        )
        return None
    if shape.is_empty:
        log.warning(
            "Empty geometry ignored for %s %s: %s", rule.object_type, rule.object_id, text
        )
        return None
    return shape
