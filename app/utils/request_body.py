"""
Request Body Utility - size ceiling and JSON/form parsing.

Supported body types:
- JSON (application/json)
- URL-encoded forms (application/x-www-form-urlencoded)

Max body size: 10MB (MAX_BODY_SIZE)
"""

import json
from typing import Any, Dict

from fastapi import HTTPException, Request
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


JSON_TYPE = "application/json"
FORM_TYPE = "application/x-www-form-urlencoded"
LIMITED_TYPES = (JSON_TYPE, FORM_TYPE)

MAX_BODY_SIZE_MB = 10
MAX_BODY_SIZE_BYTES = MAX_BODY_SIZE_MB * 1024 * 1024

PAYLOAD_TOO_LARGE = "Payload too large"


def _media_type(headers: Headers) -> str:
    return headers.get("content-type", "").split(";")[0].strip().lower()


class BodySizeLimitMiddleware:
    """
    Reject JSON and urlencoded bodies over `max_bytes` with 413.

    A declared Content-Length is checked up front. Chunked bodies are
    counted as they are read; the route handler never sees the overflow.
    """

    def __init__(self, app: ASGIApp, max_bytes: int = MAX_BODY_SIZE_BYTES):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if _media_type(headers) not in LIMITED_TYPES:
            await self.app(scope, receive, send)
            return

        declared = headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_bytes:
            response = JSONResponse({"message": PAYLOAD_TOO_LARGE}, status_code=413)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise HTTPException(status_code=413, detail=PAYLOAD_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    FastAPI dependency - parse the request body as a flat dict.

    URL-encoded forms become {field: value} (empty values dropped),
    JSON bodies must be an object. Any other content type is rejected,
    so only bodies covered by BodySizeLimitMiddleware are ever parsed.

    Raises:
        HTTPException 400 on malformed bodies
    """
    media_type = _media_type(request.headers)
    if media_type == FORM_TYPE:
        form = await request.form()
        return {key: value for key, value in form.items() if value != ""}
    if media_type != JSON_TYPE:
        raise HTTPException(status_code=400, detail="Malformed request body")

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Malformed request body")

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Malformed request body")
    return payload
