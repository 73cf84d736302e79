"""
Database module - MongoDB connection.
"""
from app.db.mongodb import (
    connect_db,
    close_db,
    get_collection,
    get_mongo_db,
    test_mongo_connection
)

__all__ = [
    "connect_db",
    "close_db",
    "get_collection",
    "get_mongo_db",
    "test_mongo_connection"
]
