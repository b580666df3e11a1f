from taskflow.backend import main


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_health_db_reports_connection_failure(client, monkeypatch):
    class _BrokenEngine:
        def connect(self):
            raise ConnectionError("db down")

    assert client.get("/health/db").json() == {"ok": True}

    monkeypatch.setattr(main, "engine", _BrokenEngine())
    r = client.get("/health/db")
    assert r.status_code == 500
    assert r.json() == {"detail": "Database connection failed"}
