"""
Tests for the user management HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from user_api.api.app import create_app


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "User Management API"
    assert data["endpoints"]["save_user"] == "/api/user/saveUser"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database_healthy": True}


def test_health_unavailable(make_db):
    """Health reports 503 when the database is unreachable."""
    with TestClient(create_app(database=make_db(fail=True))) as client:
        response = client.get("/health")
    assert response.status_code == 503


def test_save_user_creates(client):
    """Scenario: new user via JSON body."""
    response = client.post("/api/user/saveUser", json={"name": "Alice", "loginName": "alice01"})
    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "success", "data": {"success": True}}

    detail = client.post("/api/user/getDetail", json={"id": "1"}).json()
    assert detail == {
        "code": 200,
        "message": "success",
        "data": {"id": 1, "name": "Alice", "login_name": "alice01"},
    }


def test_save_user_missing_login_name(client):
    """Scenario: id and name but no loginName."""
    response = client.post("/api/user/saveUser", json={"id": "5", "name": "Bob"})
    assert response.json() == {"code": 400, "message": "Name and login name are required", "data": None}


def test_save_user_form_encoded_update(client):
    """Form-encoded bodies are accepted and an id triggers an update."""
    client.post("/api/user/saveUser", data={"name": "Bob", "loginName": "bob5"})
    response = client.post("/api/user/saveUser", data={"id": "1", "name": "Robert", "loginName": "rob5"})
    assert response.json()["code"] == 200

    detail = client.post("/api/user/getDetail", data={"id": "1"}).json()
    assert detail["data"] == {"id": 1, "name": "Robert", "login_name": "rob5"}


def test_get_detail_not_found(client):
    """Scenario: no row with the requested id."""
    response = client.post("/api/user/getDetail", json={"id": "5"})
    assert response.status_code == 200
    assert response.json() == {"code": 404, "message": "User not found", "data": None}


@pytest.mark.parametrize("body", [{}, {"id": "0"}, {"id": "abc"}])
def test_get_detail_requires_id(client, body):
    response = client.post("/api/user/getDetail", json=body)
    assert response.json() == {"code": 400, "message": "User ID is required", "data": None}


def test_query_string_params_are_read(client):
    client.post("/api/user/saveUser", json={"name": "Eve", "loginName": "eve"})
    response = client.post("/api/user/getDetail?id=1")
    assert response.json()["data"]["login_name"] == "eve"


def test_non_object_json_body_is_ignored(client):
    response = client.post("/api/user/saveUser", json=["Alice", "alice01"])
    assert response.json()["code"] == 400


def test_malformed_json_body_is_ignored(client):
    response = client.post(
        "/api/user/getDetail",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.json() == {"code": 400, "message": "User ID is required", "data": None}


def test_persistence_failure_returns_500_envelope(make_db):
    """Store failures surface as a 500 envelope without the store's message."""
    with TestClient(create_app(database=make_db(fail=True))) as client:
        response = client.post("/api/user/saveUser", json={"name": "Alice", "loginName": "alice01"})
    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": "Internal server error", "data": None}


def test_oversized_id_gets_400_envelope(client):
    """Ids beyond the 64-bit range are rejected before reaching SQLite."""
    big_id = "99999999999999999999"

    detail = client.post("/api/user/getDetail", json={"id": big_id})
    assert detail.status_code == 200
    assert detail.json() == {"code": 400, "message": "User ID is required", "data": None}

    saved = client.post("/api/user/saveUser", json={"id": big_id, "name": "Bob", "loginName": "bob5"})
    assert saved.status_code == 200
    assert saved.json() == {"code": 400, "message": "User ID must be an integer", "data": None}


def test_falsy_name_is_rejected(client):
    response = client.post("/api/user/saveUser", json={"name": False, "loginName": "x"})
    assert response.json() == {"code": 400, "message": "Name and login name are required", "data": None}
