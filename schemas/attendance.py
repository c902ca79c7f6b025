from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AttendanceStatus(str, Enum):
    """저장/표시용 출결 상태 (attendance.status 컬럼 값)"""
    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class Attendance(BaseModel):
    id: str                                  # 출결 고유 ID
    student_id: Optional[str] = None         # 학생 ID (지문 원시 로그는 None)
    fingerprint_id: Optional[int] = None     # 지문 ID (원시 로그 경로)
    status: Optional[str] = None             # 출결 상태 (present/late/absent, 저장값 그대로)
    timestamp: Optional[str] = None          # 출결 시각 (ISO8601)
    device_id: Optional[str] = None          # 스캐너 장치 ID
    created_at: Optional[str] = None         # 생성 시각


class AttendanceStudent(BaseModel):
    """출결 목록에 붙는 학생 요약 정보"""
    name: str
    roll_number: Optional[str] = None
    class_name: Optional[str] = Field(default=None, serialization_alias="class")
    section: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class AttendanceWithStudent(Attendance):
    students: Optional[AttendanceStudent] = None
