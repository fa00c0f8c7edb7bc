from __future__ import annotations

import logging

import pytest

from tests.helpers.model import route_rule
from transit_rules.domain.model import ObjectType, ReportType
from transit_rules.domain.report import Report
from transit_rules.domain.rules import (
    ROUTE_PROPERTIES,
    group_property_rules,
    validate_property_groups,
)


def test_supported_route_properties_pass() -> None:
    report = Report()
    groups = group_property_rules(
        route_rule("R1", name, None, "x") for name in sorted(ROUTE_PROPERTIES)
    )

    assert validate_property_groups(groups, report) == groups
    assert report.warnings == []
    assert ROUTE_PROPERTIES == {"route_name", "direction_type", "route_geometry", "destination_id"}


def test_unknown_route_property_is_reported() -> None:
    report = Report()
    groups = group_property_rules([route_rule("R1", "route_color", None, "FF0000")])

    kept = validate_property_groups(groups, report)

    assert kept == {}
    assert [row.category for row in report.warnings] == [ReportType.UNKNOWN_PROPERTY_NAME]
    assert report.warnings[0].message == (
        "object_type=route, object_id=R1: unknown property_name route_color defined"
    )


def test_unknown_route_property_is_reported_once_per_group() -> None:
    report = Report()
    groups = group_property_rules(
        [
            route_rule("R1", "route_color", None, "FF0000"),
            route_rule("R1", "route_color", None, "00FF00"),
        ]
    )

    assert validate_property_groups(groups, report) == {}
    assert [row.category for row in report.warnings] == [ReportType.UNKNOWN_PROPERTY_NAME]


@pytest.mark.parametrize(
    "object_type",
    [ObjectType.LINE, ObjectType.STOP_POINT, ObjectType.STOP_AREA],
)
def test_other_object_types_are_only_logged(
    object_type: ObjectType,
    caplog: pytest.LogCaptureFixture,
) -> None:
    report = Report()
    caplog.set_level(logging.WARNING, logger="transit_rules.domain.rules.validate")
    groups = group_property_rules([route_rule("X1", "name", None, "x", object_type=object_type)])

    kept = validate_property_groups(groups, report)

    assert kept == {}
    assert report.warnings == []
    assert f"Changing properties for {object_type} is not yet possible." in caplog.messages
