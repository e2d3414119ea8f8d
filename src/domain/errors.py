"""
Error definitions for request handling.

규칙:
- 바인딩 실패는 조용히 넘기지 않음 → RequestHandlingError로 명시적 실패
- HTTP 상태 코드는 에러 코드로부터 결정됨 (ErrorCodes.HTTP_STATUS)
"""

from typing import Any


class ErrorCodes:
    """에러 코드 상수. 새 코드 추가 시 HTTP_STATUS에도 상태 코드 추가."""

    # === Binding ===
    MISSING_REQUEST_PARAMETER = "MISSING_REQUEST_PARAMETER"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    MALFORMED_BODY = "MALFORMED_BODY"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # === Mapping Conditions ===
    UNSATISFIED_PARAMETER_CONDITION = "UNSATISFIED_PARAMETER_CONDITION"
    HEADER_CONDITION_NOT_MET = "HEADER_CONDITION_NOT_MET"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
    NOT_ACCEPTABLE = "NOT_ACCEPTABLE"

    # === Views ===
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"

    HTTP_STATUS = {
        MISSING_REQUEST_PARAMETER: 400,
        TYPE_MISMATCH: 400,
        MALFORMED_BODY: 400,
        VALIDATION_ERROR: 400,
        UNSATISFIED_PARAMETER_CONDITION: 400,
        HEADER_CONDITION_NOT_MET: 404,
        UNSUPPORTED_MEDIA_TYPE: 415,
        NOT_ACCEPTABLE: 406,
        VIEW_NOT_FOUND: 500,
    }


class RequestHandlingError(Exception):
    """
    요청 바인딩/매핑 실패 시 발생하는 에러.

    사용되는 경우:
    - 필수 요청 파라미터 누락
    - 파라미터 타입 변환 실패
    - 요청 바디 JSON 파싱 실패
    - params/headers/consumes/produces 매핑 조건 불일치
    - 뷰 템플릿 없음

    Usage:
        raise RequestHandlingError("MISSING_REQUEST_PARAMETER", parameter="username")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    @property
    def http_status(self) -> int:
        return ErrorCodes.HTTP_STATUS.get(self.code, 500)

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }
