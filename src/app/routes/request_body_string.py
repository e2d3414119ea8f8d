"""
Request Body (String) Routes: 메시지 바디 문자열 조회.

HTTP API에서 주로 사용 (JSON, XML, TEXT / POST, PUT, PATCH).
메시지 바디 조회는 요청 파라미터(쿼리/form) 조회와 무관.

- POST /request-body-string-v1 → Request.body()
- POST /request-body-string-v2 → Request.stream() (청크 단위)
- POST /request-body-string-v3 → HttpEntity[str] → HttpEntity
- POST /request-body-string-v3-2 → RequestEntity[str] → ResponseEntity (201)
- POST /request-body-string-v4 → 바디 문자열 + 헤더 주입
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from src.core.binding import read_body_text, read_stream_text
from src.core.entity import (
    HttpEntity,
    RequestEntity,
    ResponseEntity,
    render_entity,
    text_entity,
    text_request_entity,
)
from src.domain.constants import OK, TEXT_PLAIN

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.post("/request-body-string-v1")
async def request_body_string_v1(request: Request) -> Response:
    """Request에서 바디 전체를 읽어 직접 응답."""
    message_body = await read_body_text(request)

    logger.info(f"message_body = {message_body}")

    return Response(content=OK, media_type=TEXT_PLAIN)


@router.post("/request-body-string-v2")
async def request_body_string_v2(request: Request) -> Response:
    """바디를 스트림으로 읽음."""
    message_body = await read_stream_text(request)

    logger.info(f"message_body = {message_body}")

    return Response(content=OK, media_type=TEXT_PLAIN)


@router.post("/request-body-string-v3")
async def request_body_string_v3(
    http_entity: HttpEntity[str] = Depends(text_entity),
) -> Response:
    """
    HttpEntity: 헤더, 바디 조회.

    응답에도 사용 가능 (바디 직접 반환, 헤더 포함 가능, 뷰 조회 X).
    """
    message_body = http_entity.body

    logger.info(f"message_body = {message_body}")

    return render_entity(HttpEntity(OK))


@router.post("/request-body-string-v3-2")
async def request_body_string_v3_2(
    request_entity: RequestEntity[str] = Depends(text_request_entity),
) -> Response:
    """RequestEntity: 메소드/URL 정보 추가. ResponseEntity: 상태 코드 지정."""
    message_body = request_entity.body

    logger.info(f"{request_entity.method} {request_entity.url} message_body = {message_body}")

    return render_entity(ResponseEntity(OK, status_code=status.HTTP_201_CREATED))


@router.post("/request-body-string-v4")
async def request_body_string_v4(
    request: Request,
    message_body: str = Depends(read_body_text),
) -> str:
    """바디 문자열 주입 + 헤더 조회."""
    logger.info(f"headers = {dict(request.headers)}")
    logger.info(f"message_body = {message_body}")

    return OK
