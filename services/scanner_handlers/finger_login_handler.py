import logging

from sqlalchemy.exc import SQLAlchemyError

from database.store import AttendanceStore
from schemas.scanner import FingerLoginSuccess, FingerLoginUnknown, FingerLoginUser, FingerprintEvent
from services.scanner_handlers.base import EventError
from utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)


def handle_finger_login(event: FingerprintEvent, store: AttendanceStore) -> FingerLoginSuccess:
    """
    지문 로그인 처리
    - 사용자 조회 실패(DB 오류)는 로그만 남기고 미등록으로 간주
    - 매칭 여부와 무관하게 로그인 로그 1건을 반드시 기록
    - 미등록 지문은 404 (EventError)
    """
    fingerprint_id = event.fingerprint_id
    logger.info(f"Looking up fingerprint ID: {fingerprint_id}")

    try:
        user = store.find_user_by_fingerprint(fingerprint_id)
    except SQLAlchemyError as e:
        logger.error(f"Error looking up user: {e}")
        store.rollback()
        user = None

    login_time = utc_now()

    try:
        store.add_login_log(
            fingerprint_id=fingerprint_id,
            user_id=user.id if user else None,
            device_id=event.device_id,
            login_time=login_time,
        )
    except SQLAlchemyError as e:
        logger.error(f"Error inserting log: {e}")
        raise EventError.of(500, "Failed to log fingerprint")

    logged_in_at = to_iso(login_time)

    if user is None:
        logger.info(f"Unknown fingerprint: {fingerprint_id}")
        body = FingerLoginUnknown(fingerprint_id=fingerprint_id, logged_in_at=logged_in_at)
        raise EventError(404, body.model_dump())

    logger.info(f"User found: {user.name} ({user.role})")
    return FingerLoginSuccess(
        user=FingerLoginUser(
            id=user.id,
            name=user.name,
            role=user.role,
            class_name=user.class_name,
            section=user.section,
        ),
        fingerprint_id=fingerprint_id,
        logged_in_at=logged_in_at,
    )
