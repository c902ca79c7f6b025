from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from models.finger_login_logs import FingerLoginLog as LogModel
from models.users import User as UserModel
from schemas.finger_login_logs import FingerLoginLog as LogSchema, LoginLogUser
from utils.datetime_utils import to_iso

router = APIRouter(prefix="/finger-login-logs", tags=["지문 로그인 기록"])


# ✅ [READ] 최근 지문 로그인 기록 (미등록 지문 포함)
@router.get("/")
def read_login_logs(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    rows = (
        db.query(LogModel, UserModel)
        .outerjoin(UserModel, LogModel.user_id == UserModel.id)
        .order_by(LogModel.login_time.desc())
        .limit(limit)
        .all()
    )
    return {
        "success": True,
        "data": [
            LogSchema(
                id=log.id,
                fingerprint_id=log.fingerprint_id,
                user_id=log.user_id,
                device_id=log.device_id,
                login_time=to_iso(log.login_time),
                users=LoginLogUser(
                    name=user.name,
                    role=user.role,
                    class_name=user.class_name,
                    section=user.section,
                ) if user is not None else None,
            ).model_dump(by_alias=True)
            for log, user in rows
        ],
    }
