"""
View resolution: 뷰 이름 → Jinja2 템플릿 렌더링

- 뷰 이름 "response/hello" → 템플릿 파일 "response/hello.html"
- 렌더링은 fastapi.templating.Jinja2Templates 사용
- 핸들러가 뷰 이름을 반환하지 않으면 URL 경로를 뷰 이름으로 사용
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.domain.errors import ErrorCodes, RequestHandlingError


@dataclass
class ModelAndView:
    """뷰 이름 + 뷰 템플릿에 전달할 모델 데이터."""
    view_name: str
    model: dict[str, Any] = field(default_factory=dict)

    def add_object(self, name: str, value: Any) -> "ModelAndView":
        self.model[name] = value
        return self


def view_name_from_path(path: str) -> str:
    """URL 경로 → 뷰 이름 (/response/hello → response/hello)."""
    return path.strip("/")


class ViewResolver:
    """
    뷰 이름으로 템플릿을 찾아 렌더링.

    Usage:
        resolver = ViewResolver(Path("src/app/templates"))
        return resolver.render(request, "response/hello", {"data": "hello!"})
    """

    def __init__(self, directory: Path, suffix: str = ".html") -> None:
        self.directory = Path(directory)
        self.suffix = suffix
        self.templates = Jinja2Templates(directory=str(self.directory))

    def resolve(self, view_name: str) -> str:
        """
        뷰 이름 → 템플릿 파일 이름 (directory 기준 상대 경로).

        Raises:
            RequestHandlingError: VIEW_NOT_FOUND
        """
        template_name = f"{view_name.strip('/')}{self.suffix}"
        template_path = (self.directory / template_name).resolve()

        # directory 밖 경로 금지
        if not template_path.is_relative_to(self.directory.resolve()) or not template_path.is_file():
            raise RequestHandlingError(ErrorCodes.VIEW_NOT_FOUND, view_name=view_name)

        return template_name

    def render(
        self,
        request: Request,
        view_name: str,
        model: dict[str, Any] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """뷰 렌더링 → HTML 응답."""
        template_name = self.resolve(view_name)
        return self.templates.TemplateResponse(
            request,
            template_name,
            model or {},
            status_code=status_code,
        )

    def render_model_and_view(self, request: Request, mav: ModelAndView) -> HTMLResponse:
        return self.render(request, mav.view_name, mav.model)


def get_view_resolver(request: Request) -> ViewResolver:
    """Request에서 ViewResolver 가져오기 (lifespan에서 app.state에 등록)."""
    return request.app.state.view_resolver
