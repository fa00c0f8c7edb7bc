"""Pydantic models describing the NTFS tables the rule engine works with."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from transit_rules.domain.model import ObjectType

LINES_FILE: Final[str] = "lines.txt"
ROUTES_FILE: Final[str] = "routes.txt"
STOPS_FILE: Final[str] = "stops.txt"
OBJECT_CODES_FILE: Final[str] = "object_codes.txt"
GEOMETRIES_FILE: Final[str] = "geometries.txt"

STOP_POINT_LOCATION: Final[int] = 0
STOP_AREA_LOCATION: Final[int] = 1


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class NtfsRowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class LineRow(NtfsRowModel):
    line_id: str
    line_name: str = ""


class RouteRow(NtfsRowModel):
    route_id: str
    route_name: str = ""
    line_id: str
    direction_type: str | None = None
    destination_id: str | None = None
    geometry_id: str | None = None

    _normalize_optional = field_validator(
        "direction_type", "destination_id", "geometry_id", mode="before"
    )(_blank_to_none)


class StopRow(NtfsRowModel):
    stop_id: str
    stop_name: str = ""
    location_type: int = STOP_POINT_LOCATION
    parent_station: str | None = None

    _normalize_parent = field_validator("parent_station", mode="before")(_blank_to_none)

    @field_validator("location_type", mode="before")
    @classmethod
    def _blank_location(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return STOP_POINT_LOCATION
        return value


class ObjectCodeRow(NtfsRowModel):
    object_type: ObjectType
    object_id: str
    object_system: str
    object_code: str


class GeometryRow(NtfsRowModel):
    geometry_id: str
    geometry_wkt: str
