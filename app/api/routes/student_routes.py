"""
Student Routes

GET /students - List all students
GET /students/{student_id} - Get student by ID
POST /students - Create new student
PUT /students/{student_id} - Update student
DELETE /students/{student_id} - Delete student

Bodies may be JSON or URL-encoded forms.
"""

from fastapi import APIRouter, HTTPException, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from pymongo.errors import DuplicateKeyError
from typing import Any, Dict, Type

from app.services.student_service import StudentService, InvalidStudentId, get_student_service
from app.utils.request_body import read_payload
from app.schemas.schemas import StudentCreate, StudentUpdate, MessageResponse

router = APIRouter(prefix="/students", tags=["Students"])

STUDENT_NOT_FOUND = "Student not found"
INVALID_ID = "Invalid student ID"
DUPLICATE_EMAIL = "Student with this email already exists"


def _validate(schema: Type[BaseModel], payload: Dict[str, Any]) -> BaseModel:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


@router.get("")
def list_students(service: StudentService = Depends(get_student_service)):
    """Get all students, newest first."""
    return service.list_all()


@router.get("/{student_id}")
def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    """Get a single student by its ObjectId."""
    try:
        student = service.get_by_id(student_id)
    except InvalidStudentId:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    if student is None:
        raise HTTPException(status_code=404, detail=STUDENT_NOT_FOUND)
    return student


@router.post("", status_code=201)
def create_student(
    payload: Dict[str, Any] = Depends(read_payload),
    service: StudentService = Depends(get_student_service)
):
    """Create a student. Email must be unique."""
    data = _validate(StudentCreate, payload)
    try:
        return service.create(data.model_dump(mode="json", exclude_none=True))
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail=DUPLICATE_EMAIL)


@router.put("/{student_id}")
def update_student(
    student_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    service: StudentService = Depends(get_student_service)
):
    """Update a student. Only provided fields are updated."""
    data = _validate(StudentUpdate, payload)
    changes = data.model_dump(mode="json", exclude_none=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    try:
        student = service.update(student_id, changes)
    except InvalidStudentId:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail=DUPLICATE_EMAIL)

    if student is None:
        raise HTTPException(status_code=404, detail=STUDENT_NOT_FOUND)
    return student


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    """Delete a student."""
    try:
        deleted = service.delete(student_id)
    except InvalidStudentId:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    if not deleted:
        raise HTTPException(status_code=404, detail=STUDENT_NOT_FOUND)
    return MessageResponse(message="Student deleted successfully")
