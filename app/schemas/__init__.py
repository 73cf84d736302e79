"""
Schemas module - Request/Response schemas for API endpoints.
"""

from app.schemas.schemas import (
    StudentCreate,
    StudentUpdate,
    MessageResponse,
    ApiInfoResponse
)

__all__ = ["StudentCreate", "StudentUpdate", "MessageResponse", "ApiInfoResponse"]
