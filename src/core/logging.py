"""
Logging: 레벨, 포맷, 핸들러 설정

규칙:
- 모듈마다 logger = logging.getLogger(__name__)
- TRACE(5) 레벨 추가: DEBUG보다 상세한 로그
- 핸들러는 root에 하나만 (setup_logging 재호출 시 교체)
- 로거별 레벨은 설정(logging.levels)으로 지정
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

TEXT_FORMAT = "%(asctime)s %(levelname)-5s %(name)s : %(message)s"

# extra로 넘겨받아 JSON 로그에 포함할 키
EXTRA_KEYS = ("method", "path", "status_code", "elapsed_ms", "error_code")

# =============================================================================
# Formatters
# =============================================================================


class JSONFormatter(logging.Formatter):
    """JSON 한 줄 로그."""

    def format(self, record: logging.LogRecord) -> str:
        log: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            value = record.__dict__.get(key)
            if value is not None:
                log[key] = value
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


# =============================================================================
# Setup
# =============================================================================


def parse_level(level: str | int) -> int:
    """
    레벨 이름/숫자 → logging 레벨 값.

    "trace", "DEBUG", "warn", 10 등 허용. 알 수 없는 값 → INFO.
    """
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str | int = "INFO", fmt: str = "text") -> logging.Handler:
    """
    root 로거 설정.

    Args:
        level: root 레벨
        fmt: "text" (사람용) 또는 "json" (구조화 로그)

    Returns:
        설치된 핸들러
    """
    root = logging.getLogger()

    # 이전에 설치한 핸들러 교체 (중복 출력 방지)
    for handler in list(root.handlers):
        if getattr(handler, "_installed_by_setup_logging", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._installed_by_setup_logging = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.addHandler(handler)
    root.setLevel(parse_level(level))
    return handler


def configure_logger_levels(levels: dict[str, str | int] | None) -> None:
    """
    로거별 레벨 적용.

    예: {"src.app.routes": "DEBUG", "uvicorn.access": "WARNING"}
    """
    for name, level in (levels or {}).items():
        logging.getLogger(name).setLevel(parse_level(level))
