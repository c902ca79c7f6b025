import uuid

from sqlalchemy import Column, DateTime, Integer, String

from database.db import Base
from utils.datetime_utils import utc_now


class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))  # 고유 학생 ID (uuid)
    name = Column(String(100), nullable=False)                        # 학생 이름
    admin_no = Column(String(50), index=True)                         # 입학번호 (출석 체크 키)
    roll_number = Column(String(50))                                  # 출석 번호
    class_name = Column("class", String(20))                          # 학년(반)
    section = Column(String(10))                                      # 분반
    parent_phone = Column(String(30))                                 # 보호자 연락처 (WhatsApp 알림)
    finger_id = Column(Integer, index=True)                           # 스캐너 지문 ID
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)  # 생성 시각
