import uuid

from sqlalchemy import Column, DateTime, Integer, String

from database.db import Base
from utils.datetime_utils import utc_now


class User(Base):
    __tablename__ = "users"  # 관리자/교사/학생 계정 테이블 (지문 로그인 대상)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))  # 고유 ID (uuid)
    name = Column(String(100), nullable=False)                        # 이름
    email = Column(String(200))                                       # 이메일
    role = Column(String(20), nullable=False, default="student")      # 역할 (admin, teacher, student)
    admn_no = Column(String(50))                                      # 학번/입학번호
    class_name = Column("class", String(20))                          # 학년(반)
    section = Column(String(10))                                      # 분반 (A, B, ...)
    fingerprint_id = Column(Integer, index=True)                      # 지문 스캐너 ID (유일성은 강제하지 않음)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)  # 생성 시각
