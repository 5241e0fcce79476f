"""
Integration tests for MCP tool endpoints.

get_menu is static data, so no mocks are needed.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.menu_service import MENU_NOT_FOUND


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_mcp_list_tools(client: TestClient) -> None:
    """GET /mcp/tools returns the declared tools with their input schema."""
    response = client.get("/mcp/tools")
    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [t["name"] for t in tools] == ["get_menu"]
    assert tools[0]["input_schema"]["required"] == ["category"]


def test_mcp_get_menu_returns_menu(client: TestClient) -> None:
    """POST /mcp/tools/get_menu resolves the category like the agent's tool does."""
    response = client.post("/mcp/tools/get_menu", json={"category": "Evening Snacks"})
    assert response.status_code == 200
    assert response.json() == {"menu": "Samosa, Chutney, Tea, Biscuits"}


def test_mcp_get_menu_unknown_category(client: TestClient) -> None:
    response = client.post("/mcp/tools/get_menu", json={"category": "brunch"})
    assert response.status_code == 200
    assert response.json() == {"menu": MENU_NOT_FOUND}


def test_mcp_get_menu_missing_body_returns_422(client: TestClient) -> None:
    """Outside /api/chat, validation errors keep FastAPI's 422."""
    response = client.post("/mcp/tools/get_menu")
    assert response.status_code == 422
