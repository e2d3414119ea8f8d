"""
Error Handlers: 전역 예외 핸들러.

- RequestHandlingError → 에러 코드별 상태 코드 + 구조화 JSON
- RequestValidationError (FastAPI 기본 바인딩 실패) → 400 + 필드 단위 상세
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.errors import ErrorCodes, RequestHandlingError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """앱에 전역 에러 핸들러 등록."""

    @app.exception_handler(RequestHandlingError)
    async def request_handling_error_handler(
        request: Request, exc: RequestHandlingError,
    ) -> JSONResponse:
        logger.warning(
            f"Request handling failed on {request.method} {request.url.path}: {exc}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=build_error_body(request, exc.code, exc.http_status, str(exc), exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_body(
                request,
                ErrorCodes.VALIDATION_ERROR,
                status.HTTP_400_BAD_REQUEST,
                "Invalid request data",
                {"details": details},
            ),
        )


def build_error_body(
    request: Request,
    code: str,
    status_code: int,
    message: str,
    context: dict[str, Any],
) -> dict[str, Any]:
    """에러 응답 바디."""
    return {
        "error": {
            "code": code,
            "message": message,
            "status": status_code,
            "path": request.url.path,
            **context,
        },
    }
