from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from schemas.scanner import FINGERPRINT_ID_MAX


# ✅ 입력용 (POST/PUT 등)
class StudentCreate(BaseModel):
    name: str                                              # 학생 이름
    admin_no: str                                          # 입학번호
    roll_number: Optional[str] = None                      # 출석 번호
    class_name: Optional[str] = Field(default=None, alias="class")  # 학년(반)
    section: Optional[str] = None                          # 분반
    parent_phone: Optional[str] = None                     # 보호자 연락처
    finger_id: Optional[int] = Field(default=None, ge=0, le=FINGERPRINT_ID_MAX)  # 스캐너 지문 ID

    model_config = ConfigDict(populate_by_name=True)


# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(StudentCreate):
    id: str
    admin_no: Optional[str] = None                         # 입학번호 없이 등록된 학생도 조회
    created_at: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
