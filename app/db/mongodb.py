"""
MongoDB Connection Utility

One MongoClient per process:
- connect_db() opens it before the server starts listening (fatal on failure)
- close_db() releases it on shutdown
- get_collection() hands collections to the services

MongoDB stores the `students` collection. Documents are flat records,
so no joins and no schema migrations are needed.
"""
import sys
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, PyMongoError

from app.core.config import get_settings

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# Collection name constants (avoid typos)
COLLECTIONS = {
    "students": "students",
}


def _open_client() -> MongoClient:
    settings = get_settings()
    if not settings.mongo_db_uri:
        raise ConfigurationError("MONGO_DB_URI is not defined in environment variables")
    return MongoClient(
        settings.mongo_db_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms
    )


def open_db() -> Database:
    """
    Open the process-wide connection and verify it with a ping.

    Single attempt, no retry. Raises PyMongoError (ConfigurationError
    for a missing or bad URI) and leaves nothing open on failure.
    """
    global _client, _db
    client = _open_client()
    client.admin.command("ping")
    _client = client
    _db = client.get_default_database(get_settings().mongodb_db)

    print("✅ MongoDB connected successfully")
    print("📊 Database:", _db.name)
    return _db


def connect_db() -> Database:
    """
    open_db() for the process entrypoint: any failure (missing URI,
    bad URI, unreachable server) is fatal, the error is printed and
    the process exits with status 1.
    """
    try:
        return open_db()
    except PyMongoError as e:
        print(f"❌ MongoDB connection error: {e}", file=sys.stderr)
        sys.exit(1)


def is_connected() -> bool:
    return _client is not None


def close_db() -> None:
    """Close the connection opened by connect_db(). No-op when nothing is open."""
    global _client, _db
    if _client is None:
        return
    _client.close()
    _client = None
    _db = None
    print("✅ MongoDB connection closed")


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = _open_client()
    return _client


def get_mongo_db() -> Database:
    """Get the configured database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client.get_default_database(get_settings().mongodb_db)
    return _db


def get_collection(name: str) -> Collection:
    """
    Get a specific collection.
    Collections we'll use:
    - students: student records served under /api/students
    """
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        print(f"MongoDB connection failed: {e}", file=sys.stderr)
        return False


def init_mongo_indexes():
    """
    Create indexes for the student collection.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # One student per email address
    db[COLLECTIONS["students"]].create_index("email", unique=True)

    # Newest-first listing
    db[COLLECTIONS["students"]].create_index([("created_at", -1)])
