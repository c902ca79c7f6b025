from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database.db import get_db
from models.students import Student as StudentModel
from schemas.students import Student as StudentSchema, StudentCreate
from utils.datetime_utils import to_iso

router = APIRouter(prefix="/students", tags=["학생 정보"])


def _student_out(s: StudentModel) -> dict:
    return StudentSchema(
        id=s.id,
        name=s.name,
        admin_no=s.admin_no,
        roll_number=s.roll_number,
        class_name=s.class_name,
        section=s.section,
        parent_phone=s.parent_phone,
        finger_id=s.finger_id,
        created_at=to_iso(s.created_at),
    ).model_dump(by_alias=True)


def _get_or_404(student_id: str, db: Session) -> StudentModel:
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학생 정보 추가
@router.post("/", status_code=201)
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    db_student = StudentModel(**student.model_dump())
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    return {
        "success": True,
        "data": _student_out(db_student),
        "message": "Student added successfully",
    }


# ✅ [READ] 학생 목록 조회 (출석 번호순, 이름/번호 검색 + 학년/분반 필터)
@router.get("/")
def read_students(
    q: Optional[str] = Query(None, description="이름 또는 출석 번호 검색어"),
    class_name: Optional[str] = Query(None, alias="class"),
    section: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(StudentModel)
    if q:
        query = query.filter(or_(StudentModel.name.contains(q), StudentModel.roll_number.contains(q)))
    if class_name:
        query = query.filter(StudentModel.class_name == class_name)
    if section:
        query = query.filter(StudentModel.section == section)
    records = query.order_by(StudentModel.roll_number.asc()).all()
    return {"success": True, "data": [_student_out(r) for r in records]}


# ==========================================================
# [2단계] 동적 라우터 (개별 조회/수정/삭제)
# ==========================================================

# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}")
def read_student(student_id: str, db: Session = Depends(get_db)):
    return {"success": True, "data": _student_out(_get_or_404(student_id, db))}


# ✅ [UPDATE] 특정 학생 정보 수정
@router.put("/{student_id}")
def update_student(student_id: str, updated: StudentCreate, db: Session = Depends(get_db)):
    student = _get_or_404(student_id, db)
    for key, value in updated.model_dump().items():
        setattr(student, key, value)

    db.commit()
    db.refresh(student)
    return {
        "success": True,
        "data": _student_out(student),
        "message": "Student updated successfully",
    }


# ✅ [DELETE] 특정 학생 삭제
@router.delete("/{student_id}")
def delete_student(student_id: str, db: Session = Depends(get_db)):
    student = _get_or_404(student_id, db)
    db.delete(student)
    db.commit()
    return {
        "success": True,
        "data": {"student_id": student_id},
        "message": "Student deleted successfully",
    }
