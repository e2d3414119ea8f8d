"""
test_middleware.py - 접근 로그 미들웨어 테스트

검증 포인트:
1. 요청마다 메소드, 경로, 상태 코드, 처리 시간 로그
2. 제외 경로(/health)는 로그 없음
"""

import logging

ACCESS_LOGGER = "src.app.middleware"


def _access_records(caplog):
    return [r for r in caplog.records if r.name == ACCESS_LOGGER]


class TestAccessLogMiddleware:
    def test_logs_request(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            client.get("/response-body-string-v3")

        records = _access_records(caplog)
        assert len(records) == 1
        record = records[0]
        assert record.method == "GET"
        assert record.path == "/response-body-string-v3"
        assert record.status_code == 200
        assert record.elapsed_ms >= 0
        assert "GET /response-body-string-v3 -> 200" in record.getMessage()

    def test_logs_error_status(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            client.get("/mapping-header")

        assert _access_records(caplog)[0].status_code == 404

    def test_health_exempt(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            client.get("/health")

        assert _access_records(caplog) == []
