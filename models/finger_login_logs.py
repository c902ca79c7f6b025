import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from database.db import Base
from utils.datetime_utils import utc_now


class FingerLoginLog(Base):
    __tablename__ = "finger_login_logs"  # 지문 로그인 시도 기록 (매칭 여부와 무관, append-only)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))  # 로그 고유 ID
    fingerprint_id = Column(Integer, nullable=False, index=True)      # 스캔된 지문 ID
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"))  # 매칭된 사용자 ID (미등록이면 NULL)
    device_id = Column(String(100))                                   # 스캐너 장치 ID
    login_time = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)  # 로그인 시각
