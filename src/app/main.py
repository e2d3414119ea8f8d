"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import copy
import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from fastapi import FastAPI

from src.app.error_handlers import register_error_handlers
from src.app.middleware import AccessLogMiddleware

# Routes
from src.app.routes import (
    log_test,
    mapping,
    request_body_json,
    request_body_string,
    request_param,
    response_body,
    response_view,
)
from src.core.logging import configure_logger_levels, setup_logging
from src.core.views import ViewResolver

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG: dict[str, Any] = {
    "app": {"title": "HTTP Binding Examples"},
    "logging": {"level": "INFO", "format": "text", "levels": {}},
    "views": {"directory": "src/app/templates", "suffix": ".html"},
    "server": {"host": "127.0.0.1", "port": 8080},
}

# 환경 변수 → (섹션, 키)
ENV_OVERRIDES = {
    "APP_LOG_LEVEL": ("logging", "level"),
    "APP_LOG_FORMAT": ("logging", "format"),
}


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    default.yaml 값이 DEFAULT_CONFIG 위에 섹션 단위로 병합됨.
    파일이 없으면 DEFAULT_CONFIG 그대로.
    """
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    config = copy.deepcopy(DEFAULT_CONFIG)
    if not config_path.exists():
        return config

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}

    for section, values in data.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def apply_env_overrides(config: dict, environ: dict[str, str] | None = None) -> dict:
    """환경 변수(.env 포함)로 설정 덮어쓰기."""
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            config.setdefault(section, {})[key] = value
    return config


def resolve_views_dir(config: dict) -> Path:
    """views.directory (상대 경로면 프로젝트 루트 기준)."""
    directory = Path(config["views"]["directory"])
    return directory if directory.is_absolute() else PROJECT_ROOT / directory


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 로깅 설정, 뷰 리졸버 생성
    """
    # Startup
    config = apply_env_overrides(load_config())
    app.state.config = config

    log_config = config["logging"]
    setup_logging(log_config["level"], log_config["format"])
    configure_logger_levels(log_config.get("levels"))

    app.state.view_resolver = ViewResolver(
        resolve_views_dir(config),
        suffix=config["views"]["suffix"],
    )
    logger.info(f"{config['app']['title']} started")

    yield

    # Shutdown
    logger.info(f"{config['app']['title']} shutting down")


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="HTTP Binding Examples",
    description="요청 파라미터, 요청 바디, 응답 바디/뷰 바인딩 예제",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(AccessLogMiddleware)
register_error_handlers(app)


# =============================================================================
# Routes
# =============================================================================

app.include_router(log_test.router, tags=["Logging"])
app.include_router(mapping.router, tags=["Request Mapping"])
app.include_router(request_param.router, tags=["Request Param"])
app.include_router(request_body_string.router, tags=["Request Body (String)"])
app.include_router(request_body_json.router, tags=["Request Body (JSON)"])
app.include_router(response_body.router, tags=["Response Body"])
app.include_router(response_view.router, tags=["Response View"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """엔드포인트 그룹 목록."""
    return {
        "message": "HTTP Binding Examples",
        "endpoints": {
            "logging": ["/log-test"],
            "mapping": ["/hello-basic", "/mapping-get-v1", "/mapping/{user_id}"],
            "request_param": ["/request-param-v1", "/model-attribute-v1"],
            "request_body": ["/request-body-string-v1", "/request-body-json-v1"],
            "response": ["/response-body-string-v1", "/response-body-json-v1", "/response-view-v1"],
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = apply_env_overrides(load_config())["server"]
    uvicorn.run(
        "src.app.main:app",
        host=server_config["host"],
        port=int(server_config["port"]),
        reload=True,
    )
