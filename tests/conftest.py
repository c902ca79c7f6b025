import os

# settings 는 임포트 시점에 읽히므로 앱 임포트 전에 테스트용 DB 지정
os.environ.setdefault("DB_DSN", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from dependencies.providers import get_notifier
from main import app
from models.students import Student
from models.users import User


class RecordingNotifier:
    """try_send 호출을 기록하고 미리 정한 결과를 돌려주는 가짜 알림기"""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls = []

    def try_send(self, number: str, message: str) -> bool:
        self.calls.append((number, message))
        return self.result


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(session_factory, notifier):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(**kwargs):
        fields = {"name": "Asha Rao", "role": "student", "class_name": "7", "section": "B"}
        fields.update(kwargs)
        user = User(**fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_student(db):
    def _make(**kwargs):
        fields = {
            "name": "Ravi Kumar",
            "admin_no": "ADM-101",
            "roll_number": "12",
            "class_name": "5",
            "section": "A",
            "parent_phone": "+919800000001",
        }
        fields.update(kwargs)
        student = Student(**fields)
        db.add(student)
        db.commit()
        db.refresh(student)
        return student

    return _make
