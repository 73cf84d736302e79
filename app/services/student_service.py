"""
Student Service - CRUD operations for the students collection.

Documents look like:
{
    "_id": ObjectId(...),
    "name": "Jane Doe",
    "email": "jane@example.com",
    "age": 21,
    "course": "Computer Science",
    "grade": "A",
    "phone": "+1-555-0100",
    "created_at": datetime,
    "updated_at": datetime
}
"""

from datetime import datetime
from typing import Optional, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from app.db.mongodb import get_collection, COLLECTIONS


class InvalidStudentId(ValueError):
    """Raised when a path id is not a valid ObjectId."""


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(student_id: str) -> ObjectId:
    try:
        return ObjectId(student_id)
    except (InvalidId, TypeError):
        raise InvalidStudentId(student_id)


# ============================================================
# STUDENTS COLLECTION
# ============================================================

class StudentService:
    """
    Handles student record storage.
    Duplicate emails surface as pymongo DuplicateKeyError (unique index).
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(COLLECTIONS["students"])
        self.collection: Collection = collection

    def list_all(self) -> List[dict]:
        """All students, most recently created first."""
        cursor = self.collection.find().sort("created_at", DESCENDING)
        return serialize_docs(list(cursor))

    def get_by_id(self, student_id: str) -> Optional[dict]:
        doc = self.collection.find_one({"_id": to_object_id(student_id)})
        return serialize_doc(doc)

    def create(self, data: dict) -> dict:
        """
        Insert a student record.

        Args:
            data: validated fields (StudentCreate.model_dump())

        Returns:
            The stored document with its id as string
        """
        now = datetime.utcnow()
        doc = {**data, "created_at": now, "updated_at": now}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def update(self, student_id: str, changes: dict) -> Optional[dict]:
        """Apply a partial update. Returns the updated document, or None if missing."""
        oid = to_object_id(student_id)
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {**changes, "updated_at": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        return serialize_doc(doc)

    def delete(self, student_id: str) -> bool:
        result = self.collection.delete_one({"_id": to_object_id(student_id)})
        return result.deleted_count > 0


def get_student_service() -> StudentService:
    """FastAPI dependency: service bound to the live students collection."""
    return StudentService()
