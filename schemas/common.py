"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 에러 응답 표준: ErrorResponse
  (대시보드 성공 응답은 라우터에서 {"success", "data", "message"} 형태로 직접 구성)
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러/웹훅 라우터가 내려주는 표준 에러 응답
    - error: 사람이 읽을 수 있는 메시지
    - details: 원인 상세 (출결 웹훅 등 일부 경로에서만)
    """
    error: str = Field(..., description="에러 메시지")
    details: Optional[str] = Field(default=None, description="원인 상세")

    model_config = ConfigDict(extra="ignore")

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
