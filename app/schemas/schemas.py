"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, Dict


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    age: Optional[int] = Field(None, ge=1, le=120)
    course: Optional[str] = Field(None, max_length=100)
    grade: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=20)

class StudentUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(None, ge=1, le=120)
    course: Optional[str] = Field(None, max_length=100)
    grade: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=20)


# ============================================================
# COMMON SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class ApiInfoResponse(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
    status: str
