"""
Database connector: fatal configuration/connection errors, success output, close.
"""
from types import SimpleNamespace

import pytest

from app.db import mongodb


class FakeClient:
    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False
        self.admin = SimpleNamespace(command=lambda name: {"ok": 1.0})

    def get_default_database(self, default=None):
        return SimpleNamespace(name="school")

    def close(self):
        self.closed = True


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGO_DB_URI", raising=False)
    return monkeypatch


def test_missing_uri_exits_1(isolated_env, capsys):
    with pytest.raises(SystemExit) as exc:
        mongodb.connect_db()
    assert exc.value.code == 1
    assert "MONGO_DB_URI is not defined" in capsys.readouterr().err
    assert mongodb._client is None


def test_unreachable_server_exits_1(isolated_env, capsys):
    isolated_env.setenv("MONGO_DB_URI", "mongodb://127.0.0.1:1/school")
    isolated_env.setenv("MONGO_TIMEOUT_MS", "100")
    with pytest.raises(SystemExit) as exc:
        mongodb.connect_db()
    assert exc.value.code == 1
    assert "MongoDB connection error" in capsys.readouterr().err


def test_invalid_uri_exits_1(isolated_env):
    isolated_env.setenv("MONGO_DB_URI", "postgres://nope")
    with pytest.raises(SystemExit) as exc:
        mongodb.connect_db()
    assert exc.value.code == 1


def test_connect_reports_database_and_close_releases(isolated_env, capsys):
    isolated_env.setenv("MONGO_DB_URI", "mongodb://db.internal:27017/school")
    isolated_env.setattr(mongodb, "MongoClient", FakeClient)

    db = mongodb.connect_db()

    assert db.name == "school"
    client = mongodb._client
    assert client.uri == "mongodb://db.internal:27017/school"
    assert client.kwargs["serverSelectionTimeoutMS"] == 5000
    out = capsys.readouterr().out
    assert "MongoDB connected successfully" in out
    assert "Database: school" in out

    mongodb.close_db()
    assert client.closed
    assert mongodb._client is None
    assert "MongoDB connection closed" in capsys.readouterr().out

    # second close is a no-op
    mongodb.close_db()
    assert capsys.readouterr().out == ""


def test_connection_check_without_uri_is_false(isolated_env):
    assert mongodb.test_mongo_connection() is False
