"""
Core layer: 요청 바인딩/매핑/응답 변환 공용 모듈.

역할:
- 요청 파라미터, 요청 바디 바인딩 (binding)
- HTTP 엔티티 (entity)
- params/headers/consumes/produces 매핑 조건 (conditions)
- 뷰 이름 해석 및 렌더링 (views)
- 로깅 설정 (logging)
"""

from .binding import (
    first_value,
    first_values,
    model_attribute,
    parse_json,
    read_body_text,
    read_request_params,
    read_stream_text,
    request_param,
    request_param_map,
)
from .conditions import consumes, headers_condition, params_condition, produces
from .entity import (
    HttpEntity,
    RequestEntity,
    ResponseEntity,
    json_entity,
    render_entity,
    text_entity,
    text_request_entity,
)
from .logging import TRACE, configure_logger_levels, setup_logging
from .views import ModelAndView, ViewResolver, get_view_resolver, view_name_from_path

__all__ = [
    # binding
    "read_request_params",
    "first_value",
    "first_values",
    "request_param",
    "request_param_map",
    "model_attribute",
    "read_body_text",
    "read_stream_text",
    "parse_json",
    # conditions
    "params_condition",
    "headers_condition",
    "consumes",
    "produces",
    # entity
    "HttpEntity",
    "RequestEntity",
    "ResponseEntity",
    "text_entity",
    "text_request_entity",
    "json_entity",
    "render_entity",
    # logging
    "TRACE",
    "setup_logging",
    "configure_logger_levels",
    # views
    "ModelAndView",
    "ViewResolver",
    "get_view_resolver",
    "view_name_from_path",
]
