"""
Request Param Routes: 요청 파라미터 조회.

요청 파라미터 = 쿼리 스트링(GET) + form 바디(POST x-www-form-urlencoded)
- 모든 HTTP 메소드 허용, 응답은 "ok" (text/plain)

- /request-param-v1 → Request 직접 사용
- /request-param-v2 → request_param("username") (이름 지정)
- /request-param-v3 → Query() (인자 이름 = 파라미터 이름)
- /request-param-v4 → 표시 없이 단순 타입 인자
- /request-param-required → 필수/선택
- /request-param-default → 기본 값
- /request-param-map → 전체 파라미터 dict
- /model-attribute-v1 → model_attribute(HelloData)
- /model-attribute-v2 → Query() 모델 (FastAPI 기본 바인딩)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from src.core.binding import (
    convert_value,
    first_value,
    model_attribute,
    read_request_params,
    request_param,
    request_param_map,
)
from src.domain.constants import ALL_METHODS, DEFAULT_AGE, DEFAULT_USERNAME, OK
from src.domain.errors import ErrorCodes, RequestHandlingError
from src.domain.schemas import HelloData

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.api_route("/request-param-v1", methods=ALL_METHODS)
async def request_param_v1(request: Request) -> PlainTextResponse:
    """Request에서 직접 조회 + 응답도 직접 생성."""
    params = await read_request_params(request)
    username = first_value(params, "username")
    raw_age = first_value(params, "age")
    if raw_age is None:
        raise RequestHandlingError(ErrorCodes.MISSING_REQUEST_PARAMETER, parameter="age")
    age = convert_value("age", raw_age, int)

    logger.info(f"username = {username}, age = {age}")

    return PlainTextResponse(OK)


@router.api_route("/request-param-v2", methods=ALL_METHODS)
async def request_param_v2(
    member_name: str = Depends(request_param("username")),
    member_age: int = Depends(request_param("age", type_=int)),
) -> str:
    """파라미터 이름과 인자 이름이 달라도 됨."""
    logger.info(f"username = {member_name}, age = {member_age}")
    return OK


@router.api_route("/request-param-v3", methods=ALL_METHODS)
async def request_param_v3(
    username: str = Query(),
    age: int = Query(),
) -> str:
    """인자 이름 = 쿼리 파라미터 이름. 둘 다 필수."""
    logger.info(f"username = {username}, age = {age}")
    return OK


@router.api_route("/request-param-v4", methods=ALL_METHODS)
async def request_param_v4(username: str | None = None, age: int | None = None) -> str:
    """표시 없는 단순 타입 인자 → 선택 쿼리 파라미터."""
    logger.info(f"username = {username}, age = {age}")
    return OK


@router.api_route("/request-param-required", methods=ALL_METHODS)
async def request_param_required(
    username: str = Depends(request_param("username", required=True)),
    age: int | None = Depends(request_param("age", required=False, type_=int)),
) -> str:
    """
    필수/선택 파라미터.

    - username 누락 → 400, 빈 문자열("")은 통과
    - age 누락 → None
    """
    logger.info(f"username = {username}, age = {age}")
    return OK


@router.api_route("/request-param-default", methods=ALL_METHODS)
async def request_param_default(
    username: str = Depends(request_param("username", default=DEFAULT_USERNAME)),
    age: int = Depends(request_param("age", required=False, default=DEFAULT_AGE, type_=int)),
) -> str:
    """기본 값. 누락뿐 아니라 빈 문자열도 기본 값으로 대체."""
    logger.info(f"username = {username}, age = {age}")
    return OK


@router.api_route("/request-param-map", methods=ALL_METHODS)
async def request_param_map_handler(
    param_map: dict[str, str] = Depends(request_param_map),
) -> str:
    """전체 파라미터를 dict로 조회 (키마다 첫 번째 값)."""
    logger.info(f"username = {param_map.get('username')}, age = {param_map.get('age')}")
    return OK


@router.api_route("/model-attribute-v1", methods=ALL_METHODS)
async def model_attribute_v1(
    hello_data: HelloData = Depends(model_attribute(HelloData)),
) -> str:
    """
    요청 파라미터 → HelloData 바인딩.

    1. HelloData 생성
    2. 필드 이름과 같은 요청 파라미터 값을 필드 타입으로 변환해 입력
    """
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
    logger.info(f"hello_data = {hello_data!r}")
    return OK


@router.api_route("/model-attribute-v2", methods=ALL_METHODS)
async def model_attribute_v2(hello_data: Annotated[HelloData, Query()]) -> str:
    """쿼리 파라미터 모델 (FastAPI 기본 바인딩, 쿼리 스트링만)."""
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
    logger.info(f"hello_data = {hello_data!r}")
    return OK
