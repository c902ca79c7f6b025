import logging

from sqlalchemy.exc import SQLAlchemyError

from database.store import AttendanceStore
from schemas.attendance import Attendance as AttendanceSchema
from schemas.scanner import RawFingerprintEvent, RawFingerprintLogged
from services.scanner_handlers.base import EventError
from utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)


def handle_log_fingerprint(event: RawFingerprintEvent, store: AttendanceStore) -> RawFingerprintLogged:
    """학생 매칭 없이 attendance 테이블에 지문 ID만 기록"""
    try:
        row = store.add_raw_fingerprint(event.fingerprint_id)
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        raise EventError.of(500, "Failed to log fingerprint")

    logger.info(f"Fingerprint logged: {event.fingerprint_id}")
    return RawFingerprintLogged(
        data=AttendanceSchema(
            id=row.id,
            student_id=row.student_id,
            fingerprint_id=row.fingerprint_id,
            status=row.status,
            timestamp=to_iso(row.timestamp),
            device_id=row.device_id,
            created_at=to_iso(row.created_at),
        )
    )
