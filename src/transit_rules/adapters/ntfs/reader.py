"""Load the rule-relevant subset of an NTFS directory into ``Collections``."""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from transit_rules.adapters.tabular import encoding_error, field_count_error, open_table
from transit_rules.domain.model import (
    Collections,
    DuplicateIdentifierError,
    Geometry,
    Line,
    Route,
    StopArea,
    StopPoint,
)
from transit_rules.domain.rules import InvalidGeometryError, parse_wkt

from .schema import (
    GEOMETRIES_FILE,
    LINES_FILE,
    OBJECT_CODES_FILE,
    ROUTES_FILE,
    STOP_AREA_LOCATION,
    STOPS_FILE,
    GeometryRow,
    LineRow,
    ObjectCodeRow,
    RouteRow,
    StopRow,
)

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


class ModelReadError(RuntimeError):
    """Raised when the dataset directory cannot be loaded."""


def read_model(directory: Path) -> Collections:
    """Read lines, routes, stops and, when present, codes and geometries."""

    log.info("Reading model from %s", directory)
    collections = Collections()
    try:
        for line in _read_table(directory / LINES_FILE, LineRow):
            collections.lines.push(Line(id=line.line_id, name=line.line_name))
        for stop in _read_table(directory / STOPS_FILE, StopRow):
            _push_stop(collections, stop)
        for route in _read_table(directory / ROUTES_FILE, RouteRow):
            collections.routes.push(
                Route(
                    id=route.route_id,
                    name=route.route_name,
                    line_id=route.line_id,
                    direction_type=route.direction_type,
                    destination_id=route.destination_id,
                    geometry_id=route.geometry_id,
                )
            )
        geometries_path = directory / GEOMETRIES_FILE
        if geometries_path.exists():
            for geometry in _read_table(geometries_path, GeometryRow):
                collections.geometries.push(
                    Geometry(id=geometry.geometry_id, geometry=parse_wkt(geometry.geometry_wkt))
                )
        codes_path = directory / OBJECT_CODES_FILE
        if codes_path.exists():
            for code in _read_table(codes_path, ObjectCodeRow):
                _attach_code(collections, code)
    except (DuplicateIdentifierError, InvalidGeometryError) as exc:
        raise ModelReadError(f"Invalid dataset in {directory}: {exc}") from exc

    log.info(
        "Model loaded: lines=%s, routes=%s, stop_points=%s, stop_areas=%s, geometries=%s",
        len(collections.lines),
        len(collections.routes),
        len(collections.stop_points),
        len(collections.stop_areas),
        len(collections.geometries),
    )
    return collections


def _push_stop(collections: Collections, stop: StopRow) -> None:
    if stop.location_type == STOP_AREA_LOCATION:
        collections.stop_areas.push(StopArea(id=stop.stop_id, name=stop.stop_name))
    else:
        collections.stop_points.push(
            StopPoint(id=stop.stop_id, name=stop.stop_name, stop_area_id=stop.parent_station)
        )


def _attach_code(collections: Collections, code: ObjectCodeRow) -> None:
    target = collections.collection_for(code.object_type).get(code.object_id)
    if target is None:
        log.warning(
            "Code %s/%s ignored: %s %s not found",
            code.object_system,
            code.object_code,
            code.object_type,
            code.object_id,
        )
        return
    target.add_code(code.object_system, code.object_code)


def _read_table[TRow: BaseModel](path: Path, model: type[TRow]) -> list[TRow]:
    rows: list[TRow] = []
    try:
        with open_table(path) as reader:
            header_size = len(reader.fieldnames or ())
            for raw_row in reader:
                row_error = field_count_error(raw_row, header_size) or encoding_error(raw_row)
                if row_error is not None:
                    raise ModelReadError(f"{path.name}:{reader.line_num}: {row_error}")
                rows.append(model.model_validate(raw_row))
    except (ValidationError, csv.Error) as exc:
        raise ModelReadError(f"{path.name}: {exc}") from exc
    except OSError as exc:
        raise ModelReadError(f"Unable to read {path}: {exc}") from exc
    return rows
