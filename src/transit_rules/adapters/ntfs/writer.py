"""Write a patched ``Collections`` back as NTFS tables."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from transit_rules.adapters.tabular import write_table
from transit_rules.domain.model import ObjectType

from .schema import (
    GEOMETRIES_FILE,
    LINES_FILE,
    OBJECT_CODES_FILE,
    ROUTES_FILE,
    STOP_AREA_LOCATION,
    STOP_POINT_LOCATION,
    STOPS_FILE,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from transit_rules.domain.model import Collections

log = getLogger(__name__)


class ModelWriteError(RuntimeError):
    """Raised when the dataset directory cannot be written."""


def write_model(collections: Collections, directory: Path) -> None:
    """Write every table read by ``read_model`` into ``directory``."""

    log.info("Writing model to %s", directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        write_table(
            directory / LINES_FILE,
            ("line_id", "line_name"),
            ({"line_id": line.id, "line_name": line.name} for line in collections.lines),
        )
        write_table(
            directory / ROUTES_FILE,
            (
                "route_id",
                "route_name",
                "line_id",
                "direction_type",
                "destination_id",
                "geometry_id",
            ),
            (
                {
                    "route_id": route.id,
                    "route_name": route.name,
                    "line_id": route.line_id,
                    "direction_type": route.direction_type,
                    "destination_id": route.destination_id,
                    "geometry_id": route.geometry_id,
                }
                for route in collections.routes
            ),
        )
        write_table(
            directory / STOPS_FILE,
            ("stop_id", "stop_name", "location_type", "parent_station"),
            _stop_rows(collections),
        )
        write_table(
            directory / OBJECT_CODES_FILE,
            ("object_type", "object_id", "object_system", "object_code"),
            _code_rows(collections),
        )
        write_table(
            directory / GEOMETRIES_FILE,
            ("geometry_id", "geometry_wkt"),
            (
                {"geometry_id": geometry.id, "geometry_wkt": geometry.geometry.wkt}
                for geometry in collections.geometries
            ),
        )
    except OSError as exc:
        raise ModelWriteError(f"Unable to write model to {directory}: {exc}") from exc


def _stop_rows(collections: Collections) -> Iterator[dict[str, str | int | None]]:
    for stop_area in collections.stop_areas:
        yield {
            "stop_id": stop_area.id,
            "stop_name": stop_area.name,
            "location_type": STOP_AREA_LOCATION,
            "parent_station": None,
        }
    for stop_point in collections.stop_points:
        yield {
            "stop_id": stop_point.id,
            "stop_name": stop_point.name,
            "location_type": STOP_POINT_LOCATION,
            "parent_station": stop_point.stop_area_id,
        }


def _code_rows(collections: Collections) -> Iterator[dict[str, str | int | None]]:
    for object_type in ObjectType:
        for obj in collections.collection_for(object_type):
            for system, code in obj.sorted_codes():
                yield {
                    "object_type": object_type,
                    "object_id": obj.id,
                    "object_system": system,
                    "object_code": code,
                }
