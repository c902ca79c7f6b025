from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database.db import get_db
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from schemas.attendance import AttendanceStudent, AttendanceWithStudent
from utils.datetime_utils import to_iso

router = APIRouter(prefix="/attendance", tags=["attendance"])


def attendance_out(r: AttendanceModel, s: StudentModel = None) -> dict:
    return AttendanceWithStudent(
        id=r.id,
        student_id=r.student_id,
        fingerprint_id=r.fingerprint_id,
        status=r.status,
        timestamp=to_iso(r.timestamp),
        device_id=r.device_id,
        created_at=to_iso(r.created_at),
        students=AttendanceStudent(
            name=s.name,
            roll_number=s.roll_number,
            class_name=s.class_name,
            section=s.section,
        ) if s is not None else None,
    ).model_dump(mode="json", by_alias=True)


def recent_attendance(db: Session, limit: int):
    """최신 출결 기록 + 학생 정보 (학생 없는 지문 원시 로그 포함)"""
    return (
        db.query(AttendanceModel, StudentModel)
        .outerjoin(StudentModel, AttendanceModel.student_id == StudentModel.id)
        .order_by(AttendanceModel.timestamp.desc())
        .limit(limit)
        .all()
    )


# ==========================================================
# [1단계] 조회 라우터
# ==========================================================

# ✅ [READ] 최근 출결 기록 조회
@router.get("/")
def read_attendance_list(
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    rows = recent_attendance(db, limit)
    return {"success": True, "data": [attendance_out(r, s) for r, s in rows]}


# ✅ [READ] 지문 원시 로그 (log-fingerprint 경로로 들어온 행)
@router.get("/fingerprints")
def read_fingerprint_logs(
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    records = (
        db.query(AttendanceModel)
        .filter(AttendanceModel.fingerprint_id.isnot(None))
        .order_by(AttendanceModel.created_at.desc())
        .limit(limit)
        .all()
    )
    return {"success": True, "data": [attendance_out(r) for r in records]}


# ==========================================================
# [2단계] 동적 라우터
# ==========================================================

# ✅ [DELETE] 출결 기록 삭제 (관리자 수동 삭제만 허용, 수정 라우터 없음)
@router.delete("/{attendance_id}")
def delete_attendance(attendance_id: str, db: Session = Depends(get_db)):
    attendance = db.query(AttendanceModel).filter(AttendanceModel.id == attendance_id).first()
    if not attendance:
        raise HTTPException(status_code=404, detail="Attendance record not found")

    db.delete(attendance)
    db.commit()
    return {
        "success": True,
        "data": {"attendance_id": attendance_id},
        "message": "Attendance record deleted successfully",
    }
