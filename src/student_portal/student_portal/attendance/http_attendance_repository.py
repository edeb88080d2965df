from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from ..backend.connection import ApiConnection
from ..backend.http_base import as_list, fetch_json, record_id, ref_id
from ..common.datetime_utils import parse_iso_date
from ..core.constants import TOTAL_PERIODS
from ..core.enums import DayStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _to_record(row: Dict[str, Any]) -> Optional[AttendanceRecord]:
    raw_date = row.get("date")
    try:
        work_date = parse_iso_date(str(raw_date))
    except ValueError:
        logger.warning("Skipping attendance row %s with unreadable date %r", record_id(row), raw_date)
        return None

    return AttendanceRecord(
        student_id=ref_id(row.get("student_id")),
        work_date=work_date,
        periods_present=int(row.get("periods_present") or 0),
        total_periods=int(row.get("total_periods") or TOTAL_PERIODS),
        status=DayStatus.from_label(row.get("status")),
        marked_by=ref_id(row.get("marked_by")) or None,
        record_id=record_id(row) or None,
    )


def _to_records(data: Any) -> List[AttendanceRecord]:
    out = []
    for row in as_list(data, "data"):
        rec = _to_record(row)
        if rec is not None:
            out.append(rec)
    return out


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_for_date(self, work_date: date) -> List[AttendanceRecord]:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/attendance",
            params={"date": work_date.isoformat()},
            error_message="Failed to fetch attendance",
        )
        return _to_records(data)

    def list_for_student(
        self,
        student_id: str,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[AttendanceRecord]:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/attendance",
            params={"student_id": student_id, "month": month, "year": year},
            error_message="Failed to fetch attendance",
        )
        return _to_records(data)

    def save_day(self, *, work_date: date, records: Sequence[AttendanceRecord]) -> None:
        fetch_json(
            self._conn,
            "POST",
            "/api/attendance",
            json={"records": [r.to_payload() for r in records], "date": work_date.isoformat()},
            error_message="Failed to save attendance",
        )
