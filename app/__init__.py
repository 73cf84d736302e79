"""
Student Management System API
REST wrapper exposing CRUD operations over a MongoDB `students` collection.

Architecture:
- FastAPI: HTTP surface, middleware, error envelopes
- MongoDB: single `students` collection via pymongo
"""

__version__ = "1.0.0"
