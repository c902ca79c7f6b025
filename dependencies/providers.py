from fastapi import Depends
from sqlalchemy.orm import Session

from database.db import get_db
from database.store import AttendanceStore
from services.whatsapp_client import Notifier, whatsapp_client


def get_store(db: Session = Depends(get_db)) -> AttendanceStore:
    """요청 단위 저장소 (세션을 감싼 객체를 핸들러에 주입)"""
    return AttendanceStore(db)


def get_notifier() -> Notifier:
    return whatsapp_client
