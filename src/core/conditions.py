"""
Request mapping conditions: params / headers / consumes / produces

URL + HTTP 메소드 외 추가 매핑 조건을 FastAPI 의존성으로 표현.

표현식:
- params / headers
  - "mode"        → mode 존재
  - "!mode"       → mode 없음
  - "mode=debug"  → mode 값이 debug
  - "mode!=debug" → mode 값이 debug가 아님 (없어도 매칭)
- consumes (Content-Type) / produces (Accept)
  - "application/json", "application/*", "*/*"
  - "!application/json" → 부정

조건 불일치 시 상태 코드:
- params   → 400
- headers  → 404
- consumes → 415
- produces → 406
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from fastapi import Request

from src.core.binding import first_values, read_request_params
from src.domain.constants import ALL_MEDIA, APPLICATION_OCTET_STREAM
from src.domain.errors import ErrorCodes, RequestHandlingError

# =============================================================================
# Name/Value Expressions (params, headers)
# =============================================================================


@dataclass(frozen=True)
class NameValueExpression:
    """params/headers 조건 표현식 하나."""
    name: str
    value: str | None = None
    negated: bool = False

    @classmethod
    def parse(cls, expression: str) -> "NameValueExpression":
        expression = expression.strip()

        if "!=" in expression:
            name, _, value = expression.partition("!=")
            return cls(name=name.strip(), value=value.strip(), negated=True)

        if "=" in expression:
            name, _, value = expression.partition("=")
            return cls(name=name.strip(), value=value.strip())

        if expression.startswith("!"):
            return cls(name=expression[1:].strip(), negated=True)

        return cls(name=expression)

    def match(self, values: Mapping[str, str]) -> bool:
        """
        조건 매칭.

        Args:
            values: 요청 파라미터 또는 요청 헤더 (대소문자 무시 매핑이면 그대로 적용)
        """
        if self.value is not None:
            return (values.get(self.name) == self.value) != self.negated
        return (self.name in values) != self.negated

    def __str__(self) -> str:
        if self.value is not None:
            op = "!=" if self.negated else "="
            return f"{self.name}{op}{self.value}"
        return f"!{self.name}" if self.negated else self.name


# =============================================================================
# Media Types (consumes, produces)
# =============================================================================


@dataclass(frozen=True)
class MediaType:
    """type/subtype (파라미터 무시)."""
    type: str
    subtype: str

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """
        "type/subtype; charset=..." 파싱.

        Raises:
            ValueError: 잘못된 형식
        """
        mime = value.split(";", 1)[0].strip().lower()
        if mime == "*":
            mime = ALL_MEDIA

        type_, sep, subtype = mime.partition("/")
        if not sep or not type_ or not subtype:
            raise ValueError(f"Invalid media type: {value!r}")
        if type_ == "*" and subtype != "*":
            raise ValueError(f"Wildcard type is legal only in '*/*': {value!r}")

        return cls(type=type_, subtype=subtype)

    @property
    def is_wildcard_type(self) -> bool:
        return self.type == "*"

    def includes(self, other: "MediaType") -> bool:
        """self가 other를 포함하는지 (application/* ⊇ application/json)."""
        if self.is_wildcard_type:
            return True
        if self.type != other.type:
            return False
        if self.subtype == other.subtype or self.subtype == "*":
            return True
        # *+json ⊇ vnd.api+json
        if self.subtype.startswith("*+"):
            return other.subtype.endswith(self.subtype[1:])
        return False

    def is_compatible_with(self, other: "MediaType") -> bool:
        """양방향 포함 관계."""
        return self.includes(other) or other.includes(self)

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}"


@dataclass(frozen=True)
class MediaTypeExpression:
    """consumes/produces 조건 표현식 하나."""
    media_type: MediaType
    negated: bool = False

    @classmethod
    def parse(cls, expression: str) -> "MediaTypeExpression":
        expression = expression.strip()
        negated = expression.startswith("!")
        if negated:
            expression = expression[1:]
        return cls(media_type=MediaType.parse(expression), negated=negated)

    def __str__(self) -> str:
        return f"!{self.media_type}" if self.negated else str(self.media_type)


def _quality(item: str) -> float:
    for param in item.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "q":
            try:
                return float(value)
            except ValueError:
                return 1.0
    return 1.0


def parse_accept(header: str | None) -> list[MediaType]:
    """
    Accept 헤더 → MediaType 목록.

    - 헤더 없음/빈 값 → [*/*]
    - q=0 항목 제외

    Raises:
        ValueError: 잘못된 미디어 타입
    """
    if not header or not header.strip():
        return [MediaType.parse(ALL_MEDIA)]

    accepted = []
    for item in header.split(","):
        if not item.strip():
            continue
        if _quality(item) <= 0:
            continue
        accepted.append(MediaType.parse(item))
    return accepted


# =============================================================================
# FastAPI Dependencies
# =============================================================================


def params_condition(*expressions: str) -> Callable[[Request], Awaitable[None]]:
    """요청 파라미터 조건. 하나라도 불일치 → 400."""
    parsed = [NameValueExpression.parse(e) for e in expressions]

    async def dependency(request: Request) -> None:
        params = first_values(await read_request_params(request))
        for expr in parsed:
            if not expr.match(params):
                raise RequestHandlingError(
                    ErrorCodes.UNSATISFIED_PARAMETER_CONDITION,
                    condition=str(expr),
                    actual=params,
                )

    return dependency


def headers_condition(*expressions: str) -> Callable[[Request], Awaitable[None]]:
    """요청 헤더 조건 (헤더 이름 대소문자 무시). 하나라도 불일치 → 404."""
    parsed = [NameValueExpression.parse(e) for e in expressions]

    async def dependency(request: Request) -> None:
        for expr in parsed:
            if not expr.match(request.headers):
                raise RequestHandlingError(
                    ErrorCodes.HEADER_CONDITION_NOT_MET,
                    condition=str(expr),
                )

    return dependency


def consumes(*expressions: str) -> Callable[[Request], Awaitable[None]]:
    """
    Content-Type 조건. 표현식 중 하나라도 매칭되면 통과, 아니면 415.

    Content-Type 없음 → application/octet-stream으로 간주.
    """
    parsed = [MediaTypeExpression.parse(e) for e in expressions]

    async def dependency(request: Request) -> None:
        raw = request.headers.get("content-type") or APPLICATION_OCTET_STREAM
        try:
            content_type = MediaType.parse(raw)
        except ValueError:
            raise RequestHandlingError(
                ErrorCodes.UNSUPPORTED_MEDIA_TYPE,
                content_type=raw,
                supported=[str(e) for e in parsed],
            ) from None

        for expr in parsed:
            if expr.media_type.includes(content_type) != expr.negated:
                return

        raise RequestHandlingError(
            ErrorCodes.UNSUPPORTED_MEDIA_TYPE,
            content_type=str(content_type),
            supported=[str(e) for e in parsed],
        )

    return dependency


def produces(*expressions: str) -> Callable[[Request], Awaitable[None]]:
    """
    Accept 조건. 표현식 중 하나라도 Accept와 호환되면 통과, 아니면 406.

    Accept 없음 → */*.
    """
    parsed = [MediaTypeExpression.parse(e) for e in expressions]

    async def dependency(request: Request) -> None:
        raw = request.headers.get("accept")
        try:
            accepted = parse_accept(raw)
        except ValueError:
            accepted = []

        for expr in parsed:
            compatible = any(a.is_compatible_with(expr.media_type) for a in accepted)
            if compatible != expr.negated:
                return

        raise RequestHandlingError(
            ErrorCodes.NOT_ACCEPTABLE,
            accept=raw,
            producible=[str(e) for e in parsed],
        )

    return dependency
