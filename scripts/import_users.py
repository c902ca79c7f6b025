import csv
import sys

from sqlalchemy.orm import Session

from database.db import SessionLocal
from models.users import User as UserModel  # ✅ 모델 import

CSV_PATH = "data/users.csv"  # ✅ 기본 파일 경로


def _blank_to_none(value):
    return value.strip() or None if value is not None else None


def migrate_users(csv_path: str = CSV_PATH) -> int:
    db: Session = SessionLocal()
    count = 0
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                fingerprint_id = _blank_to_none(row.get("fingerprint_id"))
                user = UserModel(
                    name=row["name"].strip(),                            # 이름
                    email=_blank_to_none(row.get("email")),              # 이메일
                    role=(_blank_to_none(row.get("role")) or "student").lower(),  # 역할
                    admn_no=_blank_to_none(row.get("admn_no")),          # 학번
                    class_name=_blank_to_none(row.get("class")),         # 학년(반)
                    section=_blank_to_none(row.get("section")),          # 분반
                    fingerprint_id=int(fingerprint_id) if fingerprint_id else None,  # 지문 ID
                )
                db.add(user)
                count += 1
        db.commit()
    finally:
        db.close()
    return count


if __name__ == "__main__":
    n = migrate_users(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
    print(f"✅ 사용자 CSV → DB 마이그레이션 완료 ({n}건)")
