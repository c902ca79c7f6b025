from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from schemas.users import User as UserSchema, UserCreate
from utils.datetime_utils import to_iso

router = APIRouter(prefix="/users", tags=["사용자 관리"])


def _user_out(u: UserModel) -> dict:
    return UserSchema(
        id=u.id,
        name=u.name,
        email=u.email,
        role=u.role,
        admn_no=u.admn_no,
        class_name=u.class_name,
        section=u.section,
        fingerprint_id=u.fingerprint_id,
        created_at=to_iso(u.created_at),
    ).model_dump(mode="json", by_alias=True)


def _get_or_404(user_id: str, db: Session) -> UserModel:
    user = db.query(UserModel).filter(UserModel.id == user_id).first()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# ✅ [CREATE] 사용자 등록 (지문 ID 할당 포함)
@router.post("/", status_code=201)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    db_user = UserModel(**user.model_dump(mode="json"))
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return {"success": True, "data": _user_out(db_user), "message": "User created successfully"}


# ✅ [READ] 전체 사용자 조회 (최신 등록순)
@router.get("/")
def read_users(db: Session = Depends(get_db)):
    records = db.query(UserModel).order_by(UserModel.created_at.desc()).all()
    return {"success": True, "data": [_user_out(r) for r in records]}


# ✅ [READ] 사용자 상세
@router.get("/{user_id}")
def read_user(user_id: str, db: Session = Depends(get_db)):
    return {"success": True, "data": _user_out(_get_or_404(user_id, db))}


# ✅ [UPDATE] 사용자 수정
@router.put("/{user_id}")
def update_user(user_id: str, updated: UserCreate, db: Session = Depends(get_db)):
    user = _get_or_404(user_id, db)
    for key, value in updated.model_dump(mode="json").items():
        setattr(user, key, value)

    db.commit()
    db.refresh(user)
    return {"success": True, "data": _user_out(user), "message": "User updated successfully"}


# ✅ [DELETE] 사용자 삭제
@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    user = _get_or_404(user_id, db)
    db.delete(user)
    db.commit()
    return {"success": True, "data": {"user_id": user_id}, "message": "User deleted successfully"}
