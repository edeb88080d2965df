from __future__ import annotations

from typing import Any, Mapping

from ..backend.connection import ApiConnection
from ..backend.http_base import fetch_json
from .model import FacultyStats
from .repository import StatsRepository


def _pick(data: Mapping[str, Any], *keys: str) -> int:
    for key in keys:
        if data.get(key) is not None:
            return int(round(float(data[key])))
    return 0


class HttpStatsRepository(StatsRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_for_year(self, year_of_study: int) -> FacultyStats:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/stats",
            params={"year": int(year_of_study)},
            error_message="Failed to fetch stats",
        )
        data = data if isinstance(data, dict) else {}
        return FacultyStats(
            total_students=_pick(data, "totalStudents", "total_students"),
            attendance_today=_pick(data, "attendanceToday", "attendance_today"),
            avg_attendance=_pick(data, "avgAttendance", "avg_attendance"),
            total_subjects=_pick(data, "totalSubjects", "total_subjects"),
        )
