"""
schemas/scanner.py

- 지문 스캐너/출결 웹훅 요청·응답 스키마
- 요청 검증 실패 메시지는 그대로 400 응답의 "error" 로 내려감
  (middlewares/error_handler.py 참고)
"""

import math
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from schemas.attendance import Attendance, AttendanceStatus

FINGERPRINT_REQUIRED = "fingerprint_id is required"
FINGERPRINT_NOT_NUMBER = "fingerprint_id must be a number"
MARK_FIELDS_REQUIRED = "Missing required fields: admin_no and status are required"
MARK_STATUS_INVALID = "Invalid status. Must be PRESENT or ABSENT"

# fingerprint_id 컬럼(Integer) 에 들어갈 수 있는 범위
FINGERPRINT_ID_MAX = 2**31 - 1


def _in_range(number: int) -> int:
    if not 0 <= number <= FINGERPRINT_ID_MAX:
        raise ValueError(FINGERPRINT_NOT_NUMBER)
    return number


def parse_fingerprint_id(value: Any) -> int:
    """
    스캐너가 보내는 fingerprint_id 를 정수로 변환
    - None / "" → 필수값 누락
    - 7, 7.0, "7", " 7 " → 7 (소수는 버림)
    - bool, 숫자가 아닌 문자열, NaN/inf, 0..FINGERPRINT_ID_MAX 범위 밖 → 숫자 아님
    """
    if value is None or value == "":
        raise ValueError(FINGERPRINT_REQUIRED)
    if isinstance(value, bool):
        raise ValueError(FINGERPRINT_NOT_NUMBER)
    if isinstance(value, int):
        return _in_range(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(FINGERPRINT_NOT_NUMBER)
        return _in_range(int(value))
    if isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            pass
        else:
            return _in_range(number)
        try:
            number = float(text)
        except ValueError:
            raise ValueError(FINGERPRINT_NOT_NUMBER)
        if not math.isfinite(number):
            raise ValueError(FINGERPRINT_NOT_NUMBER)
        return _in_range(int(number))
    raise ValueError(FINGERPRINT_NOT_NUMBER)


# =========================================================
# 요청 스키마
# =========================================================

class RawFingerprintEvent(BaseModel):
    """POST /log-fingerprint"""
    fingerprint_id: int

    @model_validator(mode="before")
    @classmethod
    def _coerce_fingerprint(cls, data: Any):
        if isinstance(data, dict):
            data = dict(data)
            data["fingerprint_id"] = parse_fingerprint_id(data.get("fingerprint_id"))
        return data


class FingerprintEvent(RawFingerprintEvent):
    """POST /finger-login"""
    device_id: Optional[str] = None

    @field_validator("device_id", mode="before")
    @classmethod
    def _blank_device_is_none(cls, v):
        # 빈 문자열 장치 ID 는 기록하지 않음
        if v == "":
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class MarkStatus(str, Enum):
    """출결 웹훅이 받는 상태값 (대문자). LATE 는 받지 않음"""
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    def to_attendance_status(self) -> AttendanceStatus:
        return AttendanceStatus(self.value.lower())


class MarkAttendanceRequest(BaseModel):
    """POST /mark-attendance"""
    admin_no: str
    status: MarkStatus

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, data: Any):
        if isinstance(data, dict):
            admin_no = data.get("admin_no")
            status = data.get("status")
            if not admin_no or not status:
                raise ValueError(MARK_FIELDS_REQUIRED)
            if not isinstance(status, str) or status not in {s.value for s in MarkStatus}:
                raise ValueError(MARK_STATUS_INVALID)
            if isinstance(admin_no, (int, float)) and not isinstance(admin_no, bool):
                data = {**data, "admin_no": str(admin_no)}
        return data


# =========================================================
# 응답 스키마
# =========================================================

class FingerLoginUser(BaseModel):
    id: str
    name: str
    role: str
    class_name: Optional[str] = Field(default=None, serialization_alias="class")
    section: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class FingerLoginSuccess(BaseModel):
    success: bool = True
    user: FingerLoginUser
    fingerprint_id: int
    logged_in_at: str


class FingerLoginUnknown(BaseModel):
    success: bool = False
    error: str = "Unknown fingerprint"
    fingerprint_id: int
    logged_in_at: str


class RawFingerprintLogged(BaseModel):
    success: bool = True
    data: Attendance


class MarkAttendanceData(BaseModel):
    student_name: str
    admin_no: str
    status: MarkStatus
    timestamp: str
    whatsapp_sent: bool


class MarkAttendanceSuccess(BaseModel):
    success: bool = True
    message: str = "Attendance marked successfully"
    data: MarkAttendanceData
