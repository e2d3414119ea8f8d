"""
Response View Routes: 뷰 템플릿 렌더링.

뷰 템플릿 경로: views.directory (기본 src/app/templates)
뷰 이름 "response/hello" → response/hello.html

- /response-view-v1 → ModelAndView 반환
- /response-view-v2 → 모델 dict + 뷰 이름
- /response/hello → URL 경로 = 뷰 이름
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.core.views import ModelAndView, ViewResolver, get_view_resolver, view_name_from_path
from src.domain.constants import ALL_METHODS, VIEW_DATA

router = APIRouter(default_response_class=HTMLResponse)

HELLO_VIEW = "response/hello"


@router.api_route("/response-view-v1", methods=ALL_METHODS)
async def response_view_v1(
    request: Request,
    resolver: ViewResolver = Depends(get_view_resolver),
) -> HTMLResponse:
    """ModelAndView로 뷰 이름과 모델 지정."""
    mav = ModelAndView(HELLO_VIEW).add_object("data", VIEW_DATA)

    return resolver.render_model_and_view(request, mav)


@router.api_route("/response-view-v2", methods=ALL_METHODS)
async def response_view_v2(
    request: Request,
    resolver: ViewResolver = Depends(get_view_resolver),
) -> HTMLResponse:
    """모델 dict에 데이터를 담고 뷰 이름으로 렌더링."""
    model: dict[str, Any] = {"data": VIEW_DATA}

    return resolver.render(request, HELLO_VIEW, model)


@router.api_route(f"/{HELLO_VIEW}", methods=ALL_METHODS)
async def response_view_v3(
    request: Request,
    resolver: ViewResolver = Depends(get_view_resolver),
) -> HTMLResponse:
    """뷰 이름 생략: URL 경로와 뷰 경로가 같으면 경로를 뷰 이름으로 사용."""
    model: dict[str, Any] = {"data": VIEW_DATA}

    return resolver.render(request, view_name_from_path(request.url.path), model)
