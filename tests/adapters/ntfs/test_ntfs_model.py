from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.model import R2_SHAPE_ID, R2_WKT, make_collections, write_lines
from transit_rules.adapters.ntfs import ModelReadError, read_model, write_model
from transit_rules.domain.rules import parse_wkt, shapes_equal

if TYPE_CHECKING:
    from pathlib import Path


def _write_minimal_dataset(directory: Path) -> None:
    write_lines(directory / "lines.txt", "line_id,line_name", "L1,Line 1")
    write_lines(
        directory / "stops.txt",
        "stop_id,stop_name,location_type,parent_station",
        "SA1,Gare,1,",
        "SP1,Gare quai 1,0,SA1",
        "SP2,Place,,",
    )
    write_lines(
        directory / "routes.txt",
        "route_id,route_name,line_id,direction_type,destination_id,geometry_id",
        "R1,A,L1,forward,SA1,",
        f"R2,B,L1,,,{R2_SHAPE_ID}",
    )


def test_read_model_without_optional_tables(tmp_path: Path) -> None:
    _write_minimal_dataset(tmp_path)

    collections = read_model(tmp_path)

    r1 = collections.routes.get("R1")
    r2 = collections.routes.get("R2")
    sp2 = collections.stop_points.get("SP2")
    assert r1 is not None
    assert r2 is not None
    assert sp2 is not None
    assert (r1.name, r1.direction_type, r1.destination_id, r1.geometry_id) == (
        "A",
        "forward",
        "SA1",
        None,
    )
    assert r2.geometry_id == R2_SHAPE_ID
    assert collections.stop_areas.ids() == ["SA1"]
    assert collections.stop_points.ids() == ["SP1", "SP2"]
    assert sp2.stop_area_id is None
    assert len(collections.geometries) == 0


def test_read_model_attaches_codes_and_geometries(tmp_path: Path) -> None:
    _write_minimal_dataset(tmp_path)
    write_lines(
        tmp_path / "object_codes.txt",
        "object_type,object_id,object_system,object_code",
        "stop_point,SP1,uic,871",
        "route,R9,gtfs,9",
    )
    write_lines(
        tmp_path / "geometries.txt",
        "geometry_id,geometry_wkt",
        f'{R2_SHAPE_ID},"{R2_WKT}"',
    )

    collections = read_model(tmp_path)

    sp1 = collections.stop_points.get("SP1")
    shape = collections.geometries.get(R2_SHAPE_ID)
    assert sp1 is not None
    assert sp1.codes == {("uic", "871")}
    assert shape is not None
    assert shapes_equal(shape.geometry, parse_wkt(R2_WKT))


def test_missing_mandatory_table_is_fatal(tmp_path: Path) -> None:
    write_lines(tmp_path / "lines.txt", "line_id,line_name", "L1,Line 1")

    with pytest.raises(ModelReadError):
        read_model(tmp_path)


def test_duplicate_identifiers_are_fatal(tmp_path: Path) -> None:
    _write_minimal_dataset(tmp_path)
    write_lines(tmp_path / "lines.txt", "line_id,line_name", "L1,Line 1", "L1,Again")

    with pytest.raises(ModelReadError, match="L1"):
        read_model(tmp_path)


def test_invalid_utf8_in_a_table_is_fatal(tmp_path: Path) -> None:
    _write_minimal_dataset(tmp_path)
    (tmp_path / "lines.txt").write_bytes(b"line_id,line_name\nL1,Ligne \xe9\n")

    with pytest.raises(ModelReadError, match="lines.txt:2: invalid UTF-8 in field line_name"):
        read_model(tmp_path)


def test_written_model_reads_back(tmp_path: Path) -> None:
    collections = make_collections()
    route = collections.routes.get("R1")
    assert route is not None
    route.add_code("gtfs", "42")
    route.add_code("gtfs", "41")

    write_model(collections, tmp_path / "out")
    reloaded = read_model(tmp_path / "out")

    reloaded_route = reloaded.routes.get("R1")
    assert reloaded_route is not None
    assert reloaded_route.codes == {("gtfs", "41"), ("gtfs", "42")}
    assert reloaded.routes.ids() == ["R1", "R2"]
    assert reloaded.stop_areas.ids() == ["SA1"]
    assert (tmp_path / "out" / "object_codes.txt").read_text(encoding="utf-8").splitlines() == [
        "object_type,object_id,object_system,object_code",
        "route,R1,gtfs,41",
        "route,R1,gtfs,42",
    ]
    shape = reloaded.geometries.get(R2_SHAPE_ID)
    assert shape is not None
    assert shapes_equal(shape.geometry, parse_wkt(R2_WKT))
