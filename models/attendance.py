import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from database.db import Base
from utils.datetime_utils import utc_now


class Attendance(Base):
    __tablename__ = "attendance"  # 출결 기록 테이블 (append-only)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))  # 출결 고유 ID
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), index=True)  # 학생 ID (지문 원시 로그는 NULL)
    fingerprint_id = Column(Integer, index=True)                      # 지문 스캐너 ID (원시 로그 경로)
    status = Column(String(20))                                       # 출결 상태 (present, late, absent)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)  # 출결 시각
    device_id = Column(String(100))                                   # 스캐너 장치 ID
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)  # 생성 시각
