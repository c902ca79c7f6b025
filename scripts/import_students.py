import csv
import sys

from sqlalchemy.orm import Session

from database.db import SessionLocal
from models.students import Student as StudentModel  # ✅ 모델 import

CSV_PATH = "data/students.csv"  # ✅ 기본 파일 경로


def _blank_to_none(value):
    return value.strip() or None if value is not None else None


def _to_int(value):
    value = _blank_to_none(value)
    return int(value) if value is not None else None


def migrate_students(csv_path: str = CSV_PATH) -> int:
    db: Session = SessionLocal()
    count = 0
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                student = StudentModel(
                    name=row["name"].strip(),                           # 학생 이름
                    admin_no=row["admin_no"].strip(),                   # 입학번호
                    roll_number=_blank_to_none(row.get("roll_number")),  # 출석 번호
                    class_name=_blank_to_none(row.get("class")),        # 학년(반)
                    section=_blank_to_none(row.get("section")),         # 분반
                    parent_phone=_blank_to_none(row.get("parent_phone")),  # 보호자 연락처
                    finger_id=_to_int(row.get("finger_id")),              # 스캐너 지문 ID
                )
                db.add(student)
                count += 1
        db.commit()
    finally:
        db.close()
    return count


if __name__ == "__main__":
    n = migrate_students(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
    print(f"✅ 학생 CSV → DB 마이그레이션 완료 ({n}건)")
