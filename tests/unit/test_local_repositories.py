from __future__ import annotations

import json
from pathlib import Path

from src.adapters.persistence import (
    LocalRouteGeometryRepository,
    LocalStopRepository,
    LocalTimetableRepository,
)
from src.domain.models import GeoPoint, OperatingDays, SchoolRestriction


def _write(base: Path, name: str, payload) -> None:
    (base / name).write_text(json.dumps(payload), encoding="utf-8")


def test_timetable_repository_parses_entries_and_skips_unknown_codes(
    tmp_path: Path,
) -> None:
    _write(
        tmp_path,
        "stop_details.json",
        {
            "1001": {
                "id": "1001",
                "buses": [
                    {
                        "time": "08:15",
                        "line": "3",
                        "destination": "Osiedle",
                        "operating_days": "mon_fri",
                        "school_restriction": "school_only",
                    },
                    {
                        "time": "xx",
                        "line": "3",
                        "destination": "Osiedle",
                        "operating_days": "sun",
                        "school_restriction": "none",
                    },
                    {
                        "time": "09:00",
                        "line": "3",
                        "destination": "Osiedle",
                        "operating_days": "holidays",
                        "school_restriction": "none",
                    },
                ],
            },
            "1002": {"id": "1002", "buses": []},
        },
    )
    repo = LocalTimetableRepository(base_path=tmp_path)

    entries = repo.timetable_for(stop_id="1001")

    assert entries is not None
    assert len(entries) == 2
    assert entries[0].operating_days is OperatingDays.WEEKDAY
    assert entries[0].school_restriction is SchoolRestriction.SCHOOL_ONLY
    # Bad time text is kept here and dropped when a board is built.
    assert entries[1].departure_time == "xx"
    assert repo.timetable_for(stop_id="1002") == ()
    assert repo.timetable_for(stop_id="9999") is None


def test_stop_repository_reads_env_path_and_skips_bad_rows(
    tmp_path: Path, monkeypatch
) -> None:
    _write(
        tmp_path,
        "stops.json",
        [
            {"id": "2", "name": "Rynek", "city": "Bielawa", "lat": 50.69, "lon": 16.62},
            {"id": "1", "name": "Dworzec", "city": "Bielawa", "lat": 50.70, "lon": 16.63},
            {"id": "3", "name": "Broken", "lat": "n/a", "lon": 16.0},
            {"name": "No id", "lat": 50.0, "lon": 16.0},
        ],
    )
    monkeypatch.setenv("TRANSIT_DATA_PATH", str(tmp_path))
    repo = LocalStopRepository()

    stops = repo.list_stops()

    assert [s.id for s in stops] == ["1", "2"]
    assert repo.location_of("2") == GeoPoint(lat=50.69, lon=16.62)
    assert repo.location_of("3") is None


def test_route_geometry_repository_keeps_file_order(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "routes.json",
        {
            "R1": [
                {"id": "c1", "stop_id": "A", "order": "1", "lat": 50.7, "lon": 16.6},
                {"id": "c2", "stop_id": "B", "order": 2},
                {"id": "c3", "order": 3},
            ]
        },
    )
    repo = LocalRouteGeometryRepository(base_path=tmp_path)

    checkpoints = repo.checkpoints_for(route_id="R1")

    assert [c.stop_id for c in checkpoints] == ["A", "B"]
    assert checkpoints[0].sequence_order == "1"
    assert checkpoints[0].location == GeoPoint(lat=50.7, lon=16.6)
    assert checkpoints[1].location is None
    assert repo.checkpoints_for(route_id="R9") == ()
