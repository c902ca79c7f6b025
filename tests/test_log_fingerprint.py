from sqlalchemy.exc import OperationalError

from database.store import AttendanceStore
from dependencies.providers import get_store
from main import app
from models.attendance import Attendance


def test_logs_only_the_fingerprint(client, db):
    resp = client.post("/log-fingerprint", json={"fingerprint_id": 7})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["fingerprint_id"] == 7
    assert body["data"]["student_id"] is None
    assert body["data"]["status"] is None
    assert body["data"]["timestamp"]

    rows = db.query(Attendance).all()
    assert len(rows) == 1
    assert rows[0].fingerprint_id == 7
    assert rows[0].student_id is None
    assert rows[0].status is None
    assert rows[0].timestamp is not None
    assert body["data"]["id"] == rows[0].id


def test_duplicate_scans_write_duplicate_rows(client, db):
    client.post("/log-fingerprint", json={"fingerprint_id": 7})
    client.post("/log-fingerprint", json={"fingerprint_id": 7})

    assert db.query(Attendance).filter(Attendance.fingerprint_id == 7).count() == 2


def test_missing_fingerprint_is_rejected(client, db):
    resp = client.post("/log-fingerprint", json={"fingerprint_id": None})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id is required"}
    assert db.query(Attendance).count() == 0


def test_boolean_fingerprint_is_rejected(client):
    resp = client.post("/log-fingerprint", json={"fingerprint_id": True})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id must be a number"}


def test_out_of_range_fingerprint_is_rejected(client, db):
    resp = client.post("/log-fingerprint", json={"fingerprint_id": -1})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id must be a number"}
    assert db.query(Attendance).count() == 0


class _BrokenStore(AttendanceStore):
    def add_raw_fingerprint(self, fingerprint_id):
        raise OperationalError("INSERT", {}, Exception("read-only"))


def test_storage_failure_returns_500(client, session_factory):
    app.dependency_overrides[get_store] = lambda: _BrokenStore(session_factory())

    resp = client.post("/log-fingerprint", json={"fingerprint_id": 7})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to log fingerprint"}
