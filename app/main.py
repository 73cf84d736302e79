"""
Student Management System API - Main Application

FastAPI backend with:
- MongoDB `students` collection (pymongo)
- JSON and URL-encoded bodies up to 10MB
- Permissive CORS

Run: python -m app
(or: uvicorn app.main:app --reload; the lifespan connects and aborts startup on failure)
"""

import sys
import traceback
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.routes import api_router
from app.db.mongodb import (
    connect_db, open_db, close_db, is_connected, init_mongo_indexes, test_mongo_connection
)
from app.schemas.schemas import ApiInfoResponse
from app.utils.request_body import BodySizeLimitMiddleware
from app.core.config import get_settings

settings = get_settings()

API_INFO = {
    "message": "Student Management System API",
    "version": __version__,
    "endpoints": {
        "GET /api/students": "Get all students",
        "GET /api/students/:id": "Get student by ID",
        "POST /api/students": "Create new student",
        "PUT /api/students/:id": "Update student",
        "DELETE /api/students/:id": "Delete student"
    },
    "status": "Running"
}


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Connect (if run() has not), index setup, connection release on shutdown."""
    if not is_connected():
        try:
            open_db()
        except PyMongoError as e:
            print(f"❌ MongoDB connection error: {e}", file=sys.stderr)
            raise

    try:
        init_mongo_indexes()
        print("✅ MongoDB indexes initialized")
    except PyMongoError as e:
        print(f"⚠️ MongoDB index initialization failed: {e}")

    print("🚀 Server is running on port", settings.port)
    print("🌐 API URL:", settings.api_url)
    print("📖 Documentation:", settings.api_url + "/")
    try:
        yield
    finally:
        print("\n🔄 Shutting down gracefully...")
        close_db()


# Create FastAPI app
app = FastAPI(
    title="Student Management System API",
    description="""
    CRUD API over a single MongoDB `students` collection.

    ## Endpoints
    - **GET /api/students**: list all students
    - **GET /api/students/{id}**: get one student
    - **POST /api/students**: create a student
    - **PUT /api/students/{id}**: update a student
    - **DELETE /api/students/{id}**: delete a student
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# JSON / urlencoded body ceiling
app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_size)

# CORS middleware (allow all)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# --- Error envelopes: every error body is {"message": ...} ---

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 404 with no endpoint in scope: no path matched. 405: path matched, method did not.
    if exc.status_code == 405 or (exc.status_code == 404 and "endpoint" not in request.scope):
        return JSONResponse(status_code=404, content={"message": "Route not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the stack trace, never leak the error text to the client."""
    traceback.print_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(status_code=500, content={"message": "Something went wrong!"})


@app.get("/", response_model=ApiInfoResponse, tags=["Info"])
async def root():
    """Describe the API and its endpoints."""
    return API_INFO


@app.get("/health", tags=["Health"])
def health_check():
    """MongoDB reachability check."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }


def run() -> None:
    """
    Process entrypoint: connect once (exit 1 on failure), then serve.

    SIGINT is handled by uvicorn; the lifespan closes the connection
    and run() returns normally, so the process exits 0.
    """
    connect_db()
    uvicorn.run(app, host=settings.host, port=settings.port)
