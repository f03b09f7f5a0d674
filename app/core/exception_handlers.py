# app/core/exception_handlers.py

"""
저장소 계층에서 그대로 전파된 DB 예외를 HTTP 응답으로 변환하는 전역 예외 핸들러 모듈입니다.

- IntegrityError (고유/외래 키/복합 키 제약 조건 위반) -> 409 Conflict
- OperationalError (DB 연결 실패 등) -> 503 Service Unavailable
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """FastAPI 애플리케이션에 DB 예외 핸들러를 등록합니다."""

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        reason = str(exc.orig) if exc.orig is not None else str(exc)
        logger.warning("Constraint violation on %s: %s", request.url.path, reason)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": f"Constraint violation: {reason}"},
        )

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError):
        logger.warning("Database unavailable on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database unavailable"},
        )
