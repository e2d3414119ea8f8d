"""
Data schemas for the examples.

HelloData: 요청 파라미터/JSON 바디 바인딩과 JSON 응답에 공통으로 쓰이는 값 객체.
요청마다 생성되고 버려짐 (불변식 없음).
"""

from pydantic import BaseModel


class HelloData(BaseModel):
    """
    username + age 값 객체.

    JSON 예시: {"username": "userA", "age": 20}
    - username 누락 → None
    - age 누락 → 0
    """

    username: str | None = None
    age: int = 0
