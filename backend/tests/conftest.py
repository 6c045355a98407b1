"""
Test Configuration and Fixtures
================================

Central configuration for pytest with all shared fixtures.

Features:
- Isolated Settings instances (no .env, no real API key)
- Builders for chat completion bodies
- A mocked httpx.AsyncClient patched into the analysis client
"""

import json
from typing import Any, Dict, Generator, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from phishhunter.core.config import Settings, reset_settings


ANALYSIS_CLIENT_HTTPX = "phishhunter.services.analysis_client.httpx.AsyncClient"


# =====================================
# Settings Fixtures
# =====================================

@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Keep real credentials and cached settings out of every test.
    """
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("PHISHHUNTER_OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("PHISHHUNTER_SYSTEM_PROMPT_PATH", raising=False)
    reset_settings()
    yield
    reset_settings()


def make_settings(**overrides: Any) -> Settings:
    """Build Settings without reading any .env file."""
    values: Dict[str, Any] = {"OPENAI_API_KEY": "test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """
    Settings with a dummy API key.

    Returns:
        Settings instance
    """
    return make_settings()


@pytest.fixture
def settings_without_key() -> Settings:
    """Settings with no API key configured."""
    return make_settings(OPENAI_API_KEY=None)


# =====================================
# Completion Builders
# =====================================

def make_payload(
    risk_score: Any = 95,
    risk_level: Any = "HIGH",
    reasons: Optional[List[str]] = None,
    action_guide: Optional[List[str]] = None,
    keywords: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build a five-field analysis payload as the model would return it."""
    return {
        "riskScore": risk_score,
        "riskLevel": risk_level,
        "reasons": reasons if reasons is not None else ["카카오 유사 도메인 사용", "긴급성 문구 포함"],
        "actionGuide": action_guide if action_guide is not None else ["링크를 클릭하지 마세요", "메시지를 삭제하세요"],
        "keywords": keywords if keywords is not None else ["즉시", "계정 정지"],
    }


def make_completion(content: Optional[str]) -> Dict[str, Any]:
    """Wrap content in a chat completion response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def completion_for(payload: Dict[str, Any]) -> Dict[str, Any]:
    return make_completion(json.dumps(payload, ensure_ascii=False))


# =====================================
# HTTP Client Fixtures
# =====================================

def build_mock_client(response_body: Any = None) -> AsyncMock:
    """
    Build an AsyncMock standing in for httpx.AsyncClient.

    Args:
        response_body: What response.json() returns

    Returns:
        Mock client usable as an async context manager
    """
    mock_response = MagicMock()
    mock_response.json.return_value = response_body
    mock_response.raise_for_status = MagicMock()

    mock_client = AsyncMock()
    mock_client.post.return_value = mock_response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def mock_http_client() -> Generator[AsyncMock, None, None]:
    """
    Patch httpx.AsyncClient in the analysis client.

    The default reply is a HIGH risk completion; tests adjust
    mock_http_client.post.return_value as needed.
    """
    mock_client = build_mock_client(completion_for(make_payload()))
    with patch(ANALYSIS_CLIENT_HTTPX, return_value=mock_client):
        yield mock_client
