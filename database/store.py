"""
database/store.py

- 지문/출결 웹훅 핸들러가 사용하는 DB 접근 객체
- 요청마다 세션을 받아 명시적으로 생성하고 핸들러에 주입 (전역 클라이언트 사용 안 함)
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Query, Session

from models.attendance import Attendance
from models.finger_login_logs import FingerLoginLog
from models.students import Student
from models.users import User

logger = logging.getLogger(__name__)


def _at_most_one(query: Query, what: str):
    """0건 → None, 1건 → 해당 행, 2건 이상 → 경고 후 None"""
    rows = query.limit(2).all()
    if len(rows) > 1:
        logger.warning(f"{what}: 중복 매칭되어 미확인 처리")
        return None
    return rows[0] if rows else None


class AttendanceStore:
    def __init__(self, db: Session):
        self.db = db

    # ==========================================================
    # 조회
    # ==========================================================
    def find_user_by_fingerprint(self, fingerprint_id: int) -> Optional[User]:
        query = self.db.query(User).filter(User.fingerprint_id == fingerprint_id)
        return _at_most_one(query, f"fingerprint_id={fingerprint_id}")

    def find_student_by_admin_no(self, admin_no: str) -> Optional[Student]:
        query = self.db.query(Student).filter(Student.admin_no == admin_no)
        return _at_most_one(query, f"admin_no={admin_no}")

    # ==========================================================
    # 기록 (append-only)
    # ==========================================================
    def add_login_log(
        self,
        fingerprint_id: int,
        user_id: Optional[str],
        device_id: Optional[str],
        login_time: datetime,
    ) -> FingerLoginLog:
        log = FingerLoginLog(
            fingerprint_id=fingerprint_id,
            user_id=user_id,
            device_id=device_id,
            login_time=login_time,
        )
        return self._save(log)

    def add_raw_fingerprint(self, fingerprint_id: int) -> Attendance:
        return self._save(Attendance(fingerprint_id=fingerprint_id))

    def add_attendance(self, student_id: str, status: str, timestamp: datetime) -> Attendance:
        return self._save(Attendance(student_id=student_id, status=status, timestamp=timestamp))

    def rollback(self) -> None:
        self.db.rollback()

    def _save(self, row):
        self.db.add(row)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return row
