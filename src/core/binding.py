"""
Request binding: 요청 파라미터 / 요청 바디 → 핸들러 인자

요청 파라미터 = URL 쿼리 스트링 + form 바디(x-www-form-urlencoded, multipart)
- 쿼리 스트링 값이 먼저, form 값이 뒤에 병합됨
- 요청 바디(텍스트/JSON)는 요청 파라미터 조회와 무관

FastAPI 의존성(Depends)으로 사용:
    username: str = Depends(request_param("username"))
    hello_data: HelloData = Depends(model_attribute(HelloData))
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError
from starlette.datastructures import ImmutableMultiDict

from src.domain.constants import (
    APPLICATION_FORM_URLENCODED,
    DEFAULT_CHARSET,
    MULTIPART_FORM_DATA,
)
from src.domain.errors import ErrorCodes, RequestHandlingError

M = TypeVar("M", bound=BaseModel)

_TRUE_VALUES = {"true", "on", "yes", "1"}
_FALSE_VALUES = {"false", "off", "no", "0"}

# =============================================================================
# Request Parameters
# =============================================================================


async def read_request_params(request: Request) -> ImmutableMultiDict:
    """
    쿼리 스트링과 form 바디를 하나의 multi-value 매핑으로 병합.

    Args:
        request: Starlette/FastAPI Request

    Returns:
        요청 파라미터 (동일 키 다중 값 허용)
    """
    items: list[tuple[str, Any]] = list(request.query_params.multi_items())

    content_type = request.headers.get("content-type", "")
    if content_type.startswith((APPLICATION_FORM_URLENCODED, MULTIPART_FORM_DATA)):
        form = await request.form()
        # 업로드 파일은 요청 파라미터가 아님
        items.extend((key, value) for key, value in form.multi_items() if isinstance(value, str))

    return ImmutableMultiDict(items)


def first_value(params: ImmutableMultiDict, name: str) -> str | None:
    """같은 키가 여러 번 오면 첫 번째 값 (쿼리 스트링 값이 form 값보다 우선)."""
    values = params.getlist(name)
    return values[0] if values else None


def first_values(params: ImmutableMultiDict) -> dict[str, str]:
    """키마다 첫 번째 값만 남긴 dict."""
    result: dict[str, str] = {}
    for key, value in params.multi_items():
        result.setdefault(key, value)
    return result


def convert_value(name: str, raw: str, type_: type) -> Any:
    """
    문자열 파라미터 값을 대상 타입으로 변환.

    지원 타입: str, int, float, bool

    Raises:
        RequestHandlingError: TYPE_MISMATCH
    """
    if type_ is str:
        return raw

    value = raw.strip()
    try:
        if type_ is bool:
            lowered = value.lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(raw)
        if type_ in (int, float):
            return type_(value)
    except ValueError:
        raise RequestHandlingError(
            ErrorCodes.TYPE_MISMATCH,
            parameter=name,
            value=raw,
            expected=type_.__name__,
        ) from None

    raise TypeError(f"Unsupported parameter type: {type_!r}")


def request_param(
    name: str,
    *,
    required: bool = True,
    default: str | None = None,
    type_: type = str,
) -> Callable[[Request], Awaitable[Any]]:
    """
    요청 파라미터 하나를 바인딩하는 의존성 생성.

    - default 지정 시: 값이 없거나 빈 문자열이면 default 사용 (required 무의미)
    - str 외 타입: 빈 문자열 = 누락
    - 누락 + required → MISSING_REQUEST_PARAMETER
    - 누락 + not required → None

    Args:
        name: 요청 파라미터 이름 (핸들러 인자 이름과 달라도 됨)
        required: 필수 여부
        default: 기본 값 (문자열, type_으로 변환됨)
        type_: 변환 대상 타입
    """

    async def dependency(request: Request) -> Any:
        params = await read_request_params(request)
        raw = first_value(params, name)

        if not raw and default is not None:
            raw = default

        if raw is None or (raw == "" and type_ is not str):
            if required:
                raise RequestHandlingError(
                    ErrorCodes.MISSING_REQUEST_PARAMETER,
                    parameter=name,
                    expected=type_.__name__,
                )
            return None

        return convert_value(name, raw, type_)

    return dependency


async def request_param_map(request: Request) -> dict[str, str]:
    """모든 요청 파라미터를 dict로 (키마다 첫 번째 값)."""
    return first_values(await read_request_params(request))


def model_attribute(model: type[M]) -> Callable[[Request], Awaitable[M]]:
    """
    요청 파라미터로 모델 객체를 바인딩하는 의존성 생성.

    동작:
    1. 모델 필드 이름과 같은 요청 파라미터를 찾음
    2. 필드 타입으로 값 변환 후 객체 생성
    - 필드에 없는 파라미터는 무시
    - 없는 필드는 모델 기본값 사용
    """

    async def dependency(request: Request) -> M:
        params = await read_request_params(request)
        values = {
            field_name: first_value(params, field_name)
            for field_name in model.model_fields
            if field_name in params
        }
        try:
            return model.model_validate(values)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else ""
            raise RequestHandlingError(
                ErrorCodes.TYPE_MISMATCH,
                parameter=field_name,
                value=values.get(field_name),
                reason=error["msg"],
            ) from e

    return dependency


# =============================================================================
# Request Body
# =============================================================================


def _charset_of(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    for part in content_type.split(";")[1:]:
        key, _, value = part.strip().partition("=")
        if key.lower() == "charset" and value:
            return value.strip('"')
    return DEFAULT_CHARSET


def _decode(data: bytes, charset: str) -> str:
    try:
        return data.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        raise RequestHandlingError(
            ErrorCodes.MALFORMED_BODY,
            charset=charset,
            reason=str(e),
        ) from e


async def read_body_text(request: Request) -> str:
    """요청 바디 전체를 문자열로 (Content-Type charset, 기본 UTF-8)."""
    body = await request.body()
    return _decode(body, _charset_of(request))


async def read_stream_text(request: Request) -> str:
    """요청 바디를 청크 단위 스트림으로 읽어 문자열로."""
    chunks = []
    async for chunk in request.stream():
        chunks.append(chunk)
    return _decode(b"".join(chunks), _charset_of(request))


def parse_json(model: type[M], text: str) -> M:
    """
    JSON 문자열 → 모델 객체.

    Raises:
        RequestHandlingError: MALFORMED_BODY (JSON 문법 오류, 스키마 불일치)
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise RequestHandlingError(
            ErrorCodes.MALFORMED_BODY,
            model=model.__name__,
            errors=[
                {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ],
        ) from e

