"""
ASGI middleware that logs every API request with its outcome.

Written as plain ASGI (not BaseHTTPMiddleware) so it wraps streaming
responses without buffering them. One line is logged per request:
INFO for 2xx/3xx, WARNING for 4xx, ERROR for 5xx and unhandled exceptions.
Error responses also carry the ``detail`` from their JSON body, which is
where denied and missing-record outcomes end up.
"""

import json
import logging
import time
import uuid
from typing import Iterable, List, Optional
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..core.logging_config import filter_sensitive_data, truncate_large_data

logger = logging.getLogger(__name__)


def _extract_error_reason(body: bytes) -> Optional[str]:
    """Pull a short reason out of an error response body."""
    text = body.decode("utf-8", errors="ignore")
    if not text:
        return None
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return truncate_large_data(text, max_length=500)

    if isinstance(payload, dict) and payload.get("detail"):
        return truncate_large_data(str(payload["detail"]), max_length=500)
    return truncate_large_data(json.dumps(payload, ensure_ascii=False), max_length=500)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware:
    """Pure ASGI middleware to log API requests and their responses."""

    def __init__(self, app: ASGIApp, exclude_paths: Optional[Iterable[str]] = None):
        """
        Args:
            app: The ASGI application
            exclude_paths: Paths that are passed through without logging
        """
        self.app = app
        self.exclude_paths = set(exclude_paths) if exclude_paths is not None else {"/health", "/"}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path", "") in self.exclude_paths:
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        request_id = uuid.uuid4().hex[:12]
        method = scope.get("method", "UNKNOWN")
        path = scope.get("path", "")
        headers = {
            k.decode("latin-1"): v.decode("latin-1")
            for k, v in scope.get("headers", [])
        }
        client = scope.get("client")

        status_code = 0
        error_chunks: List[bytes] = []

        async def logging_send(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 0)
            elif message["type"] == "http.response.body" and status_code >= 400:
                error_chunks.append(message.get("body", b""))
            await send(message)

        fields = {
            "request_id": request_id,
            "method": method,
            "path": path,
            "client": client[0] if client else None,
            "headers": filter_sensitive_data(headers),
        }

        try:
            await self.app(scope, receive, logging_send)
        except Exception as e:
            fields["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                f"Request failed: {method} {path} - {e}",
                exc_info=True,
                extra={"extra_fields": fields}
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        error_reason = _extract_error_reason(b"".join(error_chunks)) if error_chunks else None
        fields.update(status_code=status_code, duration_ms=duration_ms, error_reason=error_reason)

        message = f"Request completed: {method} {path} - {status_code} ({duration_ms:.2f}ms)"
        if error_reason:
            message += f" | error_reason={error_reason}"

        logger.log(_level_for(status_code), message, extra={"extra_fields": fields})
