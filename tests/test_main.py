from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

import main


class RecordingDB:
    instances = []

    def __init__(self, fail=False):
        self.fail = fail
        self.initialized = False
        self.closed = False
        self.records = type("Records", (), {"full_name": "rainfall_monitor.scada_data"})()
        RecordingDB.instances.append(self)

    def initialize(self):
        if self.fail:
            raise ServerSelectionTimeoutError("no servers available")
        self.initialized = True

    def close(self):
        self.closed = True


def test_startup_initializes_collection(monkeypatch):
    RecordingDB.instances.clear()
    monkeypatch.delenv("SKIP_DB_INIT", raising=False)
    monkeypatch.setattr(main, "ScadaDatabase", RecordingDB)
    with TestClient(main.create_app()) as client:
        assert client.get("/health").status_code == 200
    db = RecordingDB.instances[-1]
    assert db.initialized and db.closed


def test_startup_survives_unreachable_database(monkeypatch):
    RecordingDB.instances.clear()
    monkeypatch.delenv("SKIP_DB_INIT", raising=False)
    monkeypatch.setattr(main, "ScadaDatabase", lambda: RecordingDB(fail=True))
    with TestClient(main.create_app()) as client:
        assert client.get("/health").status_code == 200
    assert RecordingDB.instances[-1].closed


def test_startup_can_skip_initialization(monkeypatch):
    RecordingDB.instances.clear()
    monkeypatch.setenv("SKIP_DB_INIT", "yes")
    monkeypatch.setattr(main, "ScadaDatabase", RecordingDB)
    with TestClient(main.create_app()):
        pass
    assert RecordingDB.instances == []
