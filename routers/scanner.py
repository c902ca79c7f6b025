"""
routers/scanner.py

- 지문 스캐너/출결 단말에서 호출하는 웹훅 엔드포인트
  POST /finger-login, POST /log-fingerprint, POST /mark-attendance
- 모든 응답에 CORS 헤더 포함
- OPTIONS 는 middlewares/preflight.py 가 빈 200 으로 응답
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from database.store import AttendanceStore
from dependencies.providers import get_notifier, get_store
from schemas.common import ErrorResponse
from schemas.scanner import FingerprintEvent, MarkAttendanceRequest, RawFingerprintEvent
from services.scanner_handlers.base import EventError
from services.scanner_handlers.finger_login_handler import handle_finger_login
from services.scanner_handlers.mark_attendance_handler import handle_mark_attendance
from services.scanner_handlers.raw_fingerprint_handler import handle_log_fingerprint
from services.whatsapp_client import Notifier

logger = logging.getLogger(__name__)

router = APIRouter(tags=["지문 스캐너 웹훅"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

SCANNER_PATHS = ("/finger-login", "/log-fingerprint", "/mark-attendance")


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


# ==========================================================
# [1] 지문 로그인
# ==========================================================

# ✅ 지문 ID → 사용자 매칭 + 로그인 로그 기록
@router.post("/finger-login")
def finger_login(event: FingerprintEvent, store: AttendanceStore = Depends(get_store)):
    try:
        result = handle_finger_login(event, store)
    except EventError as e:
        return _json(e.status_code, e.payload)
    except Exception:
        logger.exception("finger-login 처리 실패")
        return _json(500, ErrorResponse(error="Internal server error").to_content())
    return _json(200, result.model_dump(by_alias=True))


# ==========================================================
# [2] 지문 원시 로그
# ==========================================================

# ✅ 학생 매칭 없이 attendance 테이블에 지문 ID만 기록
@router.post("/log-fingerprint")
def log_fingerprint(event: RawFingerprintEvent, store: AttendanceStore = Depends(get_store)):
    try:
        result = handle_log_fingerprint(event, store)
    except EventError as e:
        return _json(e.status_code, e.payload)
    except Exception:
        logger.exception("log-fingerprint 처리 실패")
        return _json(500, ErrorResponse(error="Internal server error").to_content())
    return _json(200, result.model_dump(mode="json"))


# ==========================================================
# [3] 출결 체크 + 보호자 알림
# ==========================================================

# ✅ 입학번호로 출석/결석 기록 후 WhatsApp 알림
@router.post("/mark-attendance")
def mark_attendance(
    request: MarkAttendanceRequest,
    store: AttendanceStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        result = handle_mark_attendance(request, store, notifier)
    except EventError as e:
        return _json(e.status_code, e.payload)
    except Exception as e:
        logger.exception("mark-attendance 처리 실패")
        return _json(500, ErrorResponse(error="Internal server error", details=str(e)).to_content())
    return _json(200, result.model_dump(mode="json"))
