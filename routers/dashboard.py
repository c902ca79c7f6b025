from collections import Counter

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from routers.attendance import attendance_out, recent_attendance
from schemas.attendance import AttendanceStatus
from utils.datetime_utils import utc_day_bounds

router = APIRouter(prefix="/dashboard", tags=["대시보드"])

RECENT_LIMIT = 10


# ✅ [SUMMARY] 오늘 출결 현황 (전체 학생 수 + 상태별 건수 + 최근 기록 10건)
@router.get("/summary")
def get_dashboard_summary(db: Session = Depends(get_db)):
    start, end = utc_day_bounds()

    total_students = db.query(StudentModel).count()
    statuses = (
        db.query(AttendanceModel.status)
        .filter(AttendanceModel.timestamp >= start, AttendanceModel.timestamp < end)
        .all()
    )
    status_counter = Counter(s for (s,) in statuses)

    return {
        "success": True,
        "data": {
            "date": start.date().isoformat(),
            "total_students": total_students,
            "present": status_counter.get(AttendanceStatus.PRESENT.value, 0),
            "late": status_counter.get(AttendanceStatus.LATE.value, 0),
            "absent": status_counter.get(AttendanceStatus.ABSENT.value, 0),
            "recent": [attendance_out(r, s) for r, s in recent_attendance(db, RECENT_LIMIT)],
        },
    }
