"""
Request Mapping Routes: URL / HTTP 메소드 / 추가 조건 매핑.

- /hello-basic, /hello-go → 모든 HTTP 메소드
- GET /mapping-get-v1, /mapping-get-v2 → GET만 (그 외 405)
- GET /mapping/{user_id} → 경로 변수
- GET /mapping/users/{user_id}/orders/{order_id} → 경로 변수 다중
- GET /mapping-param → 요청 파라미터 조건 (mode=debug)
- GET /mapping-header → 요청 헤더 조건 (mode=debug)
- POST /mapping-consume → Content-Type 조건 (application/json)
- POST /mapping-produce → Accept 조건 (text/plain)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.core.conditions import consumes, headers_condition, params_condition, produces
from src.domain.constants import ALL_METHODS, APPLICATION_JSON, OK, TEXT_PLAIN

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.api_route("/hello-basic", methods=ALL_METHODS)
@router.api_route("/hello-go", methods=ALL_METHODS, include_in_schema=False)
async def hello_basic() -> str:
    """URL 다중 매핑. 메소드 지정 없음 → 전부 허용."""
    logger.info("helloBasic")
    return OK


@router.api_route("/mapping-get-v1", methods=["GET"])
async def mapping_get_v1() -> str:
    """methods로 특정 HTTP 메소드만 허용."""
    logger.info("mappingGetV1")
    return OK


@router.get("/mapping-get-v2")
async def mapping_get_v2() -> str:
    """축약 데코레이터 (get/post/put/patch/delete)."""
    logger.info("mappingGetV2")
    return OK


@router.get("/mapping/{user_id}")
async def mapping_path(user_id: str) -> str:
    """경로 변수 (/mapping/userA)."""
    logger.info(f"mappingPath user_id = {user_id}")
    return OK


@router.get("/mapping/users/{user_id}/orders/{order_id}")
async def mapping_path_multi(user_id: str, order_id: int) -> str:
    """경로 변수 다중 (/mapping/users/userA/orders/1)."""
    logger.info(f"mappingPath user_id = {user_id}, order_id = {order_id}")
    return OK


@router.get("/mapping-param", dependencies=[Depends(params_condition("mode=debug"))])
async def mapping_param() -> str:
    """
    요청 파라미터 조건 매핑.

    다른 표현식: "mode", "!mode", "mode!=debug"
    """
    logger.info("mappingParam")
    return OK


@router.get("/mapping-header", dependencies=[Depends(headers_condition("mode=debug"))])
async def mapping_header() -> str:
    """요청 헤더 조건 매핑."""
    logger.info("mappingHeader")
    return OK


@router.post("/mapping-consume", dependencies=[Depends(consumes(APPLICATION_JSON))])
async def mapping_consumes() -> str:
    """
    Content-Type 조건 매핑.

    다른 표현식: "!application/json", "application/*", "*/*"
    """
    logger.info("mappingConsumes")
    return OK


@router.post("/mapping-produce", dependencies=[Depends(produces(TEXT_PLAIN))])
async def mapping_produces() -> str:
    """Accept 조건 매핑. 응답 Content-Type은 text/plain."""
    logger.info("mappingProduces")
    return OK
