#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the MongoDB connection and the students collection.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from app.db.mongodb import test_mongo_connection, get_mongo_db, COLLECTIONS
from app.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("STUDENT MANAGEMENT API - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    if not settings.mongo_db_uri:
        print("    ❌ MONGO_DB_URI is not set (.env or environment)")
        sys.exit(1)

    print(f"    Timeout: {settings.mongo_timeout_ms}ms")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        sys.exit(1)
    print("    ✅ MongoDB: CONNECTED")

    db = get_mongo_db()
    print(f"    Database: {db.name}")

    print("\n[2] Checking students collection...")
    students = db[COLLECTIONS["students"]]
    print(f"    Documents: {students.count_documents({})}")
    print(f"    Indexes: {sorted(students.index_information())}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
