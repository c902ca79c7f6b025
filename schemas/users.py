from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.scanner import FINGERPRINT_ID_MAX


class UserRole(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


# ✅ 입력용 (POST/PUT)
class UserCreate(BaseModel):
    name: str                                              # 이름
    email: Optional[str] = None                            # 이메일
    role: UserRole = UserRole.STUDENT                      # 역할
    admn_no: Optional[str] = None                          # 학번
    class_name: Optional[str] = Field(default=None, alias="class")  # 학년(반)
    section: Optional[str] = None                          # 분반
    fingerprint_id: Optional[int] = Field(default=None, ge=0, le=FINGERPRINT_ID_MAX)  # 지문 ID

    model_config = ConfigDict(populate_by_name=True)


# ✅ 출력용
class User(UserCreate):
    id: str
    created_at: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
