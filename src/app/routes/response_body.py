"""
Response Body Routes: HTTP 응답 바디 (문자열 / JSON).

- GET /response-body-string-v1 → Response 직접 생성
- GET /response-body-string-v2 → ResponseEntity (상태 코드 지정)
- GET /response-body-string-v3 → str 반환 (PlainTextResponse)
- GET /response-body-json-v1 → ResponseEntity[HelloData]
- GET /response-body-json-v2 → status_code + response_model
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from src.core.entity import ResponseEntity, render_entity
from src.domain.constants import OK, SAMPLE_AGE, SAMPLE_USERNAME, TEXT_PLAIN
from src.domain.schemas import HelloData

router = APIRouter()


def _sample_hello_data() -> HelloData:
    return HelloData(username=SAMPLE_USERNAME, age=SAMPLE_AGE)


@router.get("/response-body-string-v1")
async def response_body_v1() -> Response:
    """Response 직접 생성."""
    return Response(content=OK, media_type=TEXT_PLAIN)


@router.get("/response-body-string-v2")
async def response_body_v2() -> Response:
    """ResponseEntity: 바디 + 상태 코드."""
    return render_entity(ResponseEntity(OK, status_code=status.HTTP_200_OK))


@router.get("/response-body-string-v3", response_class=PlainTextResponse)
async def response_body_v3() -> str:
    """반환 값이 그대로 응답 바디."""
    return OK


@router.get("/response-body-json-v1")
async def response_body_json_v1() -> Response:
    """ResponseEntity 사용 시 상태 코드를 동적으로 지정 가능."""
    return render_entity(ResponseEntity(_sample_hello_data(), status_code=status.HTTP_200_OK))


@router.get(
    "/response-body-json-v2",
    status_code=status.HTTP_200_OK,
    response_model=HelloData,
    response_class=JSONResponse,
)
async def response_body_json_v2() -> HelloData:
    """
    데코레이터로 상태 코드 고정.

    조건에 따라 상태 코드를 바꿔야 하면 ResponseEntity 사용.
    """
    return _sample_hello_data()
