"""
Request Body (JSON) Routes: 메시지 바디 JSON 조회.

{"username": "hello", "age": 20}
Content-Type: application/json

- POST /request-body-json-v1 → Request.body() + parse_json
- POST /request-body-json-v2 → 바디 문자열 주입 + parse_json
- POST /request-body-json-v3 → HelloData 바디 파라미터 (FastAPI 기본 바인딩)
- POST /request-body-json-v4 → HttpEntity[HelloData]
- POST /request-body-json-v5 → HelloData 바디 → HelloData JSON 응답
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from src.core.binding import parse_json, read_body_text
from src.core.entity import HttpEntity, json_entity
from src.domain.constants import OK, TEXT_PLAIN
from src.domain.schemas import HelloData

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.post("/request-body-json-v1")
async def request_body_json_v1(request: Request) -> Response:
    """Request에서 바디를 읽어 직접 JSON 파싱."""
    message_body = await read_body_text(request)
    logger.info(f"message_body = {message_body}")

    hello_data = parse_json(HelloData, message_body)
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")

    return Response(content=OK, media_type=TEXT_PLAIN)


@router.post("/request-body-json-v2")
async def request_body_json_v2(message_body: str = Depends(read_body_text)) -> str:
    """바디 문자열 주입 후 직접 JSON 파싱."""
    logger.info(f"message_body = {message_body}")

    hello_data = parse_json(HelloData, message_body)
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")

    return OK


@router.post("/request-body-json-v3")
async def request_body_json_v3(hello_data: HelloData) -> str:
    """
    모델 타입 바디 파라미터.

    pydantic 모델 인자는 요청 바디(JSON)로 바인딩됨 (쿼리 파라미터 아님).
    """
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
    return OK


@router.post("/request-body-json-v4")
async def request_body_json_v4(
    http_entity: HttpEntity[HelloData] = Depends(json_entity(HelloData)),
) -> str:
    """HttpEntity[HelloData]: 헤더 + 바인딩된 바디."""
    hello_data = http_entity.body
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
    return OK


@router.post("/request-body-json-v5", response_model=HelloData, response_class=JSONResponse)
async def request_body_json_v5(hello_data: HelloData) -> HelloData:
    """바디로 받은 객체를 그대로 JSON 응답."""
    logger.info(f"username = {hello_data.username}, age = {hello_data.age}")
    return hello_data
