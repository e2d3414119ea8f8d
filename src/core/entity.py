"""
HTTP entities: 헤더 + 바디 묶음

- HttpEntity: 헤더, 바디 조회 (요청/응답 공용)
- RequestEntity: + HTTP 메소드, URL
- ResponseEntity: + HTTP 상태 코드

요청 파라미터(쿼리/form)와는 무관하게 메시지 바디만 다룸.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fastapi import Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from src.core.binding import parse_json, read_body_text

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass
class HttpEntity(Generic[T]):
    """헤더 + 바디."""
    body: T
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class RequestEntity(HttpEntity[T]):
    """요청 엔티티: HTTP 메소드와 URL 정보 추가."""
    method: str = "GET"
    url: str = ""


@dataclass
class ResponseEntity(HttpEntity[T]):
    """응답 엔티티: HTTP 상태 코드 지정 가능."""
    status_code: int = 200


# =============================================================================
# Request → Entity
# =============================================================================


async def text_entity(request: Request) -> HttpEntity[str]:
    """요청 바디 문자열 + 헤더."""
    return HttpEntity(
        body=await read_body_text(request),
        headers=dict(request.headers),
    )


async def text_request_entity(request: Request) -> RequestEntity[str]:
    """요청 바디 문자열 + 헤더 + 메소드/URL."""
    return RequestEntity(
        body=await read_body_text(request),
        headers=dict(request.headers),
        method=request.method,
        url=str(request.url),
    )


def json_entity(model: type[M]) -> Callable[[Request], Awaitable[HttpEntity[M]]]:
    """요청 바디 JSON → HttpEntity[model] 의존성 생성."""

    async def dependency(request: Request) -> HttpEntity[M]:
        return HttpEntity(
            body=parse_json(model, await read_body_text(request)),
            headers=dict(request.headers),
        )

    return dependency


# =============================================================================
# Entity → Response
# =============================================================================


def render_entity(entity: HttpEntity[Any]) -> Response:
    """
    엔티티 → Starlette Response.

    - str 바디 → text/plain
    - pydantic 모델 / dict / list → application/json
    - ResponseEntity면 상태 코드 반영, 아니면 200
    """
    status_code = entity.status_code if isinstance(entity, ResponseEntity) else 200
    body = entity.body

    if isinstance(body, str):
        return PlainTextResponse(body, status_code=status_code, headers=entity.headers)

    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")

    return JSONResponse(body, status_code=status_code, headers=entity.headers)
