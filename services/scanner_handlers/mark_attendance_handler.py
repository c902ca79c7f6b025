import logging

from sqlalchemy.exc import SQLAlchemyError

from database.store import AttendanceStore
from schemas.scanner import MarkAttendanceData, MarkAttendanceRequest, MarkAttendanceSuccess
from services.scanner_handlers.base import EventError
from services.whatsapp_client import Notifier
from utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)


def build_parent_message(student_name: str, status: str) -> str:
    return f"Your child {student_name} is {status} today."


def handle_mark_attendance(
    request: MarkAttendanceRequest,
    store: AttendanceStore,
    notifier: Notifier,
) -> MarkAttendanceSuccess:
    """
    입학번호로 학생을 찾아 출결 기록 후 보호자에게 WhatsApp 알림
    - 학생이 없으면 404, 출결 행은 기록하지 않음
    - 알림 실패는 whatsapp_sent=False 로만 표시 (요청은 성공)
    """
    admin_no = request.admin_no
    status = request.status
    logger.info(f"Processing attendance for admin_no: {admin_no}, status: {status.value}")

    student = store.find_student_by_admin_no(admin_no)
    if student is None:
        logger.warning(f"Student not found: admin_no={admin_no}")
        raise EventError.of(404, f"Student with admin_no {admin_no} not found")

    logger.info(f"Found student: {student.name}")

    try:
        attendance = store.add_attendance(
            student_id=student.id,
            status=status.to_attendance_status().value,
            timestamp=utc_now(),
        )
    except SQLAlchemyError as e:
        logger.error(f"Error inserting attendance: {e}")
        raise EventError.of(500, "Failed to mark attendance", details=str(e))

    logger.info(f"Attendance marked successfully: {attendance.id}")

    whatsapp_sent = False
    if student.parent_phone:
        message = build_parent_message(student.name, status.value)
        whatsapp_sent = notifier.try_send(student.parent_phone, message)
    else:
        logger.warning("No parent phone number found for student")

    return MarkAttendanceSuccess(
        data=MarkAttendanceData(
            student_name=student.name,
            admin_no=student.admin_no,
            status=status,
            timestamp=to_iso(attendance.timestamp),
            whatsapp_sent=whatsapp_sent,
        )
    )
