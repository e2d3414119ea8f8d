"""
App layer: HTTP 서버 (FastAPI).

역할:
- 라우트 등록, 전역 에러 핸들러, 접근 로그 미들웨어
- 바인딩/매핑 로직은 core에 위임

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (뷰 템플릿)
- src/app/routes/ → 라우트 (요청 처리)
"""
