"""
Domain Constants: 예제 전역 상수.

응답 문자열, 미디어 타입, 예제 값 등 라우트 전반에서 사용되는 값들.
"""

# =============================================================================
# Acknowledgement (응답 확인 문자열)
# =============================================================================

OK = "ok"

# =============================================================================
# HTTP Methods
# =============================================================================
# method를 지정하지 않은 매핑은 아래 메소드 전체를 허용

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# =============================================================================
# Media Types
# =============================================================================

APPLICATION_JSON = "application/json"
APPLICATION_OCTET_STREAM = "application/octet-stream"
APPLICATION_FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM_DATA = "multipart/form-data"
TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"
ALL_MEDIA = "*/*"

DEFAULT_CHARSET = "utf-8"

# =============================================================================
# Example Values (예제 값)
# =============================================================================

DEFAULT_USERNAME = "guest"
DEFAULT_AGE = "-1"

SAMPLE_USERNAME = "userA"
SAMPLE_AGE = 20

VIEW_DATA = "hello!"
