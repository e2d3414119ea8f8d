"""
Pytest fixtures for the example routes.

구성:
- 경로/설정 fixture
- TestClient fixture (lifespan 실행 → 설정, 로깅, 뷰 리졸버 준비)
- HelloData 샘플
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """전체 앱 TestClient (lifespan 포함)."""
    from src.app.main import app

    with TestClient(app) as client:
        yield client


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def sample_hello_data() -> dict:
    """정상 케이스 HelloData JSON."""
    return {"username": "userA", "age": 20}
