import pytest
from unittest.mock import AsyncMock, Mock
from httpx import Response
from src.core.config import Settings


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test-key", _env_file=None)


@pytest.fixture
def settings_without_key():
    return Settings(GEMINI_API_KEY=None, _env_file=None)


@pytest.fixture
def solved_result():
    return {
        "candidates": [
            {
                "content": {
                    "parts": [{"text": "$$ x = 2 \\quad \\text{(Simplify)} $$"}],
                    "role": "model"
                },
                "finishReason": "STOP"
            }
        ]
    }


@pytest.fixture
def upstream_error_result():
    return {
        "error": {
            "code": 400,
            "message": "API key not valid. Please pass a valid API key to the service.",
            "status": "INVALID_ARGUMENT"
        }
    }


@pytest.fixture
def mock_httpx_client(mocker, solved_result):
    """Mock httpx.AsyncClient completely"""
    mock_client = mocker.Mock()

    mock_post_response = Mock(spec=Response)
    mock_post_response.json.return_value = solved_result

    mock_client.post = AsyncMock(return_value=mock_post_response)
    mock_client.aclose = AsyncMock(return_value=None)

    mocker.patch("httpx.AsyncClient", return_value=mock_client)
    return mock_client
