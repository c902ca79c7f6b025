from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginLogUser(BaseModel):
    name: str
    role: str
    class_name: Optional[str] = Field(default=None, serialization_alias="class")
    section: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class FingerLoginLog(BaseModel):
    id: str                                  # 로그 ID
    fingerprint_id: int                      # 스캔된 지문 ID
    user_id: Optional[str] = None            # 매칭된 사용자 ID
    device_id: Optional[str] = None          # 장치 ID
    login_time: str                          # 로그인 시각 (ISO8601)
    users: Optional[LoginLogUser] = None     # 매칭된 사용자 요약
