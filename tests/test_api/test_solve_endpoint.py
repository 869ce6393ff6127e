import pytest
from fastapi.testclient import TestClient
from src.api.dependencies import get_settings_dependency
from src.main import app


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(settings_without_key):
    app.dependency_overrides[get_settings_dependency] = lambda: settings_without_key
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_solve_returns_latex_solution(client, mock_httpx_client, solved_result):
    response = client.post("/api/solve", json={"userQuery": "2x = 4"})

    assert response.status_code == 200
    assert response.json() == {
        "solution": solved_result["candidates"][0]["content"]["parts"][0]["text"]
    }
    mock_httpx_client.post.assert_awaited_once()


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
def test_wrong_method_gets_message_body(client, mock_httpx_client, method):
    response = client.request(method, "/api/solve")

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}
    mock_httpx_client.post.assert_not_called()


def test_missing_key_returns_configuration_error(unconfigured_client, mock_httpx_client):
    response = unconfigured_client.post("/api/solve", json={"userQuery": "2x = 4"})

    assert response.status_code == 500
    assert response.json() == {"message": "Server configuration error: API Key missing."}
    mock_httpx_client.post.assert_not_called()


def test_upstream_error_returns_solution_markup(client, mock_httpx_client, upstream_error_result):
    mock_httpx_client.post.return_value.json.return_value = upstream_error_result

    response = client.post("/api/solve", json={"userQuery": "2x = 4"})

    assert response.status_code == 500
    assert response.json()["solution"].startswith("$$ \\text{API Error: } ")


def test_malformed_body_returns_generic_error(client, mock_httpx_client):
    response = client.post(
        "/api/solve",
        content=b"{userQuery: oops",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error during computation."}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_plain_options_is_not_allowed(client, mock_httpx_client):
    response = client.options("/api/solve")

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}


def test_cors_preflight_is_answered_by_middleware(client, mock_httpx_client):
    response = client.options(
        "/api/solve",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
    mock_httpx_client.post.assert_not_called()
