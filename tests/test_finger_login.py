from sqlalchemy.exc import OperationalError

from dependencies.providers import get_store
from database.store import AttendanceStore
from main import app
from models.finger_login_logs import FingerLoginLog


def test_known_fingerprint_returns_user_and_logs(client, db, make_user):
    user = make_user(name="Meera Iyer", role="teacher", class_name="9", section="C", fingerprint_id=42)

    resp = client.post("/finger-login", json={"fingerprint_id": 42, "device_id": "gate-1"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["user"] == {
        "id": user.id,
        "name": "Meera Iyer",
        "role": "teacher",
        "class": "9",
        "section": "C",
    }
    assert body["fingerprint_id"] == 42
    assert body["logged_in_at"].endswith("Z")

    logs = db.query(FingerLoginLog).all()
    assert len(logs) == 1
    assert logs[0].user_id == user.id
    assert logs[0].device_id == "gate-1"
    assert logs[0].fingerprint_id == 42


def test_unknown_fingerprint_returns_404_and_still_logs(client, db):
    resp = client.post("/finger-login", json={"fingerprint_id": 999})

    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Unknown fingerprint"
    assert body["fingerprint_id"] == 999
    assert "logged_in_at" in body

    logs = db.query(FingerLoginLog).all()
    assert len(logs) == 1
    assert logs[0].user_id is None
    assert logs[0].device_id is None


def test_numeric_string_fingerprint_is_accepted(client, make_user):
    make_user(fingerprint_id=7)

    resp = client.post("/finger-login", json={"fingerprint_id": "7"})

    assert resp.status_code == 200
    assert resp.json()["fingerprint_id"] == 7


def test_zero_is_a_valid_fingerprint(client, db):
    resp = client.post("/finger-login", json={"fingerprint_id": 0})

    assert resp.status_code == 404
    assert db.query(FingerLoginLog).count() == 1


def test_missing_fingerprint_is_rejected(client, db):
    resp = client.post("/finger-login", json={"device_id": "gate-1"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id is required"}
    assert db.query(FingerLoginLog).count() == 0


def test_non_numeric_fingerprint_is_rejected(client, db):
    resp = client.post("/finger-login", json={"fingerprint_id": "abc"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id must be a number"}
    assert db.query(FingerLoginLog).count() == 0


def test_out_of_range_fingerprint_is_rejected(client, db):
    resp = client.post("/finger-login", json={"fingerprint_id": 2**63})

    assert resp.status_code == 400
    assert resp.json() == {"error": "fingerprint_id must be a number"}
    assert db.query(FingerLoginLog).count() == 0


def test_duplicate_fingerprint_is_treated_as_unknown(client, db, make_user):
    make_user(name="A", fingerprint_id=5)
    make_user(name="B", fingerprint_id=5)

    resp = client.post("/finger-login", json={"fingerprint_id": 5})

    assert resp.status_code == 404
    assert db.query(FingerLoginLog).one().user_id is None


class _BrokenLookupStore(AttendanceStore):
    def find_user_by_fingerprint(self, fingerprint_id):
        raise OperationalError("SELECT", {}, Exception("connection reset"))


def test_lookup_failure_is_logged_as_unknown(client, db, session_factory):
    app.dependency_overrides[get_store] = lambda: _BrokenLookupStore(session_factory())

    resp = client.post("/finger-login", json={"fingerprint_id": 3})

    assert resp.status_code == 404
    assert resp.json()["error"] == "Unknown fingerprint"
    assert db.query(FingerLoginLog).count() == 1


class _BrokenLogStore(AttendanceStore):
    def add_login_log(self, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk full"))


def test_log_write_failure_returns_500(client, session_factory):
    app.dependency_overrides[get_store] = lambda: _BrokenLogStore(session_factory())

    resp = client.post("/finger-login", json={"fingerprint_id": 3})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to log fingerprint"}


class _ExplodingStore(AttendanceStore):
    def find_user_by_fingerprint(self, fingerprint_id):
        raise RuntimeError("boom")


def test_unexpected_failure_returns_generic_500(client, session_factory):
    app.dependency_overrides[get_store] = lambda: _ExplodingStore(session_factory())

    resp = client.post("/finger-login", json={"fingerprint_id": 3})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
