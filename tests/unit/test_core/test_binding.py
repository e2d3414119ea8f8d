"""
test_binding.py - 요청 파라미터 / 바디 바인딩 테스트

검증 포인트:
1. 쿼리 스트링 + form 바디 병합 (업로드 파일 제외)
2. request_param: 필수/선택/기본 값, 빈 문자열 처리, 타입 변환
3. model_attribute: 필드 이름 매칭, 기본값, 타입 불일치 400
4. 바디 문자열 디코딩 (charset), JSON 파싱 실패 400
"""

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from starlette.datastructures import ImmutableMultiDict

from src.app.error_handlers import register_error_handlers
from src.core.binding import (
    convert_value,
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
from src.domain.errors import ErrorCodes, RequestHandlingError
from src.domain.schemas import HelloData

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def app() -> FastAPI:
    """바인딩 의존성만 붙인 테스트용 앱."""
    app = FastAPI()
    register_error_handlers(app)

    @app.api_route("/params", methods=["GET", "POST"])
    async def params(request: Request) -> dict:
        merged = await read_request_params(request)
        return {key: merged.getlist(key) for key in merged.keys()}

    @app.api_route("/required", methods=["GET", "POST"])
    async def required(
        username: str = Depends(request_param("username")),
        age: int = Depends(request_param("age", type_=int)),
    ) -> dict:
        return {"username": username, "age": age}

    @app.get("/optional")
    async def optional(
        age: int | None = Depends(request_param("age", required=False, type_=int)),
    ) -> dict:
        return {"age": age}

    @app.get("/default")
    async def default(
        username: str = Depends(request_param("username", default="guest")),
        age: int = Depends(request_param("age", required=False, default="-1", type_=int)),
    ) -> dict:
        return {"username": username, "age": age}

    @app.get("/map")
    async def param_map(params: dict = Depends(request_param_map)) -> dict:
        return params

    @app.api_route("/model", methods=["GET", "POST"])
    async def model(hello_data: HelloData = Depends(model_attribute(HelloData))) -> dict:
        return hello_data.model_dump()

    @app.post("/text")
    async def text(body: str = Depends(read_body_text)) -> dict:
        return {"body": body}

    @app.post("/stream")
    async def stream(request: Request) -> dict:
        return {"body": await read_stream_text(request)}

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """테스트 클라이언트."""
    return TestClient(app)


# =============================================================================
# read_request_params 테스트
# =============================================================================


class TestReadRequestParams:
    """쿼리 스트링 + form 병합 테스트."""

    def test_query_string(self, client):
        """GET 쿼리 스트링."""
        response = client.get("/params?username=hello&age=20")

        assert response.json() == {"username": ["hello"], "age": ["20"]}

    def test_form_body(self, client):
        """POST x-www-form-urlencoded."""
        response = client.post("/params", data={"username": "hello", "age": "20"})

        assert response.json() == {"username": ["hello"], "age": ["20"]}

    def test_query_values_first(self, client):
        """같은 키 → 쿼리 값이 먼저, form 값이 뒤."""
        response = client.post("/params?username=query", data={"username": "form"})

        assert response.json()["username"] == ["query", "form"]

    def test_multipart_excludes_files(self, client):
        """multipart 업로드 파일은 요청 파라미터 아님."""
        response = client.post(
            "/params",
            data={"username": "hello"},
            files={"upload": ("a.txt", b"content", "text/plain")},
        )

        assert response.json() == {"username": ["hello"]}

    def test_json_body_is_not_params(self, client):
        """JSON 바디는 요청 파라미터로 읽지 않음."""
        response = client.post("/params", json={"username": "hello"})

        assert response.json() == {}


# =============================================================================
# first_value / first_values 테스트
# =============================================================================


class TestFirstValue:
    """같은 키 다중 값 → 첫 번째 값."""

    def test_first_of_many(self):
        params = ImmutableMultiDict([("username", "first"), ("username", "second")])

        assert first_value(params, "username") == "first"

    def test_missing(self):
        assert first_value(ImmutableMultiDict(), "username") is None

    def test_first_values(self):
        params = ImmutableMultiDict([("mode", "debug"), ("age", "1"), ("mode", "info")])

        assert first_values(params) == {"mode": "debug", "age": "1"}


# =============================================================================
# convert_value 테스트
# =============================================================================


class TestConvertValue:
    """문자열 → 타입 변환 테스트."""

    def test_str_unchanged(self):
        assert convert_value("name", " hello ", str) == " hello "

    def test_int_strips_whitespace(self):
        assert convert_value("age", " 20 ", int) == 20

    def test_float(self):
        assert convert_value("ratio", "0.5", float) == 0.5

    @pytest.mark.parametrize("raw,expected", [("true", True), ("on", True), ("0", False), ("No", False)])
    def test_bool(self, raw, expected):
        assert convert_value("flag", raw, bool) is expected

    def test_int_mismatch_raises(self):
        """변환 실패 → TYPE_MISMATCH."""
        with pytest.raises(RequestHandlingError) as exc_info:
            convert_value("age", "abc", int)

        assert exc_info.value.code == ErrorCodes.TYPE_MISMATCH
        assert exc_info.value.context["parameter"] == "age"
        assert exc_info.value.http_status == 400

    def test_unsupported_type(self):
        """지원하지 않는 타입 → TypeError (프로그래밍 오류)."""
        with pytest.raises(TypeError):
            convert_value("items", "a,b", list)


# =============================================================================
# request_param 테스트
# =============================================================================


class TestRequestParam:
    """request_param 의존성 테스트."""

    def test_binds_and_converts(self, client):
        response = client.get("/required?username=hello&age=20")

        assert response.status_code == 200
        assert response.json() == {"username": "hello", "age": 20}

    def test_binds_form_params(self, client):
        response = client.post("/required", data={"username": "hello", "age": "20"})

        assert response.json() == {"username": "hello", "age": 20}

    def test_missing_required_returns_400(self, client):
        """필수 파라미터 누락 → 400 MISSING_REQUEST_PARAMETER."""
        response = client.get("/required?age=20")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == ErrorCodes.MISSING_REQUEST_PARAMETER
        assert error["parameter"] == "username"

    def test_empty_string_allowed_for_str(self, client):
        """str 파라미터의 빈 문자열은 누락이 아님."""
        response = client.get("/required?username=&age=20")

        assert response.status_code == 200
        assert response.json()["username"] == ""

    def test_empty_string_is_missing_for_int(self, client):
        """int 파라미터의 빈 문자열은 누락."""
        response = client.get("/required?username=hello&age=")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == ErrorCodes.MISSING_REQUEST_PARAMETER

    def test_type_mismatch_returns_400(self, client):
        response = client.get("/required?username=hello&age=abc")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == ErrorCodes.TYPE_MISMATCH

    def test_optional_missing_is_none(self, client):
        response = client.get("/optional")

        assert response.json() == {"age": None}

    def test_default_when_missing(self, client):
        response = client.get("/default")

        assert response.json() == {"username": "guest", "age": -1}

    def test_default_when_empty(self, client):
        """빈 문자열도 기본 값으로 대체."""
        response = client.get("/default?username=&age=")

        assert response.json() == {"username": "guest", "age": -1}

    def test_default_not_used_when_present(self, client):
        response = client.get("/default?username=hello&age=20")

        assert response.json() == {"username": "hello", "age": 20}

    def test_repeated_key_binds_first(self, client):
        response = client.get("/required?username=first&username=second&age=1&age=2")

        assert response.json() == {"username": "first", "age": 1}

    def test_query_before_form(self, client):
        """쿼리 값과 form 값이 겹치면 쿼리 값."""
        response = client.post("/required?username=query", data={"username": "form", "age": "20"})

        assert response.json() == {"username": "query", "age": 20}

    def test_binds_multipart_fields(self, client):
        """multipart 문자열 필드만 바인딩, 같은 이름의 업로드 파일은 무시."""
        response = client.post(
            "/required",
            data={"username": "hello", "age": "20"},
            files={"age": ("age.txt", b"99", "text/plain")},
        )

        assert response.status_code == 200
        assert response.json() == {"username": "hello", "age": 20}


class TestRequestParamMap:
    """request_param_map 테스트."""

    def test_first_value_per_key(self, client):
        response = client.get("/map?username=a&age=1&username=b")

        assert response.json() == {"username": "a", "age": "1"}

    def test_empty(self, client):
        assert client.get("/map").json() == {}


# =============================================================================
# model_attribute 테스트
# =============================================================================


class TestModelAttribute:
    """요청 파라미터 → 모델 바인딩 테스트."""

    def test_binds_matching_fields(self, client):
        response = client.get("/model?username=hello&age=20")

        assert response.json() == {"username": "hello", "age": 20}

    def test_binds_form_params(self, client):
        response = client.post("/model", data={"username": "hello", "age": "20"})

        assert response.json() == {"username": "hello", "age": 20}

    def test_missing_fields_use_defaults(self, client):
        response = client.get("/model")

        assert response.json() == {"username": None, "age": 0}

    def test_unknown_params_ignored(self, client):
        response = client.get("/model?username=hello&nickname=hi")

        assert response.status_code == 200
        assert response.json() == {"username": "hello", "age": 0}

    def test_type_mismatch_returns_400(self, client):
        response = client.get("/model?username=hello&age=abc")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == ErrorCodes.TYPE_MISMATCH
        assert error["parameter"] == "age"
        assert error["value"] == "abc"


# =============================================================================
# Request Body 테스트
# =============================================================================


class TestReadBody:
    """바디 문자열 읽기 테스트."""

    def test_utf8_default(self, client):
        response = client.post("/text", content="안녕 hello".encode())

        assert response.json() == {"body": "안녕 hello"}

    def test_charset_from_content_type(self, client):
        response = client.post(
            "/text",
            content="héllo".encode("latin-1"),
            headers={"content-type": "text/plain; charset=latin-1"},
        )

        assert response.json() == {"body": "héllo"}

    def test_undecodable_body_returns_400(self, client):
        response = client.post("/text", content=b"\xff\xfe\xfa")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == ErrorCodes.MALFORMED_BODY

    def test_unknown_charset_returns_400(self, client):
        response = client.post(
            "/text",
            content=b"hello",
            headers={"content-type": "text/plain; charset=no-such-charset"},
        )

        assert response.status_code == 400

    def test_stream_reads_whole_body(self, client):
        response = client.post("/stream", content=b"chunked body")

        assert response.json() == {"body": "chunked body"}

    def test_empty_body(self, client):
        assert client.post("/text").json() == {"body": ""}


class TestParseJson:
    """JSON 문자열 → 모델 파싱 테스트."""

    def test_valid(self):
        hello_data = parse_json(HelloData, '{"username": "hello", "age": 20}')

        assert hello_data == HelloData(username="hello", age=20)

    def test_malformed_json(self):
        with pytest.raises(RequestHandlingError) as exc_info:
            parse_json(HelloData, '{"username": ')

        assert exc_info.value.code == ErrorCodes.MALFORMED_BODY
        assert exc_info.value.context["model"] == "HelloData"

    def test_schema_mismatch(self):
        """age가 정수가 아님 → MALFORMED_BODY + 필드 정보."""
        with pytest.raises(RequestHandlingError) as exc_info:
            parse_json(HelloData, '{"username": "hello", "age": "twenty"}')

        errors = exc_info.value.context["errors"]
        assert errors[0]["field"] == "age"
