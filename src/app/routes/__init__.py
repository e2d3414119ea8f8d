"""
FastAPI Routes.

요청 매핑, 요청 파라미터/바디, 응답 바디/뷰 예제 라우트
"""

from . import (
    log_test,
    mapping,
    request_body_json,
    request_body_string,
    request_param,
    response_body,
    response_view,
)

__all__ = [
    "log_test",
    "mapping",
    "request_body_json",
    "request_body_string",
    "request_param",
    "response_body",
    "response_view",
]
