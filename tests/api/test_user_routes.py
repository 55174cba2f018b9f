"""API tests for user profile routes."""

import pytest


PROFILE = {
    "id": "u1",
    "login": "jdoe",
    "email": "jdoe@example.com",
    "password_hash": "secret-hash",
    "first_name": "John",
    "last_name": "Doe",
}


@pytest.fixture
def stored_profile(client, auth_headers):
    response = client.post("/users", json=PROFILE, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/users"),
        ("get", "/users/u1"),
        ("get", "/users/by-login/jdoe"),
        ("get", "/users/by-email/jdoe@example.com"),
        ("delete", "/users/u1"),
    ],
)
def test_every_user_route_requires_token(client, method, path):
    response = client.request(method.upper(), path)

    assert response.status_code == 401


def test_create_requires_token(client):
    assert client.post("/users", json=PROFILE).status_code == 401


def test_password_hash_is_never_returned(client, auth_headers, stored_profile):
    assert "password_hash" not in stored_profile
    assert "password_hash" not in client.get("/users/u1", headers=auth_headers).json()
    assert all("password_hash" not in user for user in client.get("/users", headers=auth_headers).json())


def test_lookups(client, auth_headers, stored_profile):
    assert client.get("/users/u1", headers=auth_headers).json()["login"] == "jdoe"
    assert client.get("/users/by-login/jdoe", headers=auth_headers).json()["id"] == "u1"
    assert client.get("/users/by-email/jdoe@example.com", headers=auth_headers).json()["id"] == "u1"


def test_lookups_when_absent(client, auth_headers):
    assert client.get("/users/u1", headers=auth_headers).status_code == 404
    assert client.get("/users/by-login/nobody", headers=auth_headers).status_code == 404
    assert client.get("/users/by-email/nobody@example.com", headers=auth_headers).status_code == 404


def test_replace(client, auth_headers, stored_profile):
    response = client.put("/users/u1", json={**PROFILE, "first_name": "Jane"}, headers=auth_headers)

    assert response.status_code == 200
    assert client.get("/users/u1", headers=auth_headers).json()["first_name"] == "Jane"


def test_replace_missing(client, auth_headers):
    response = client.put("/users/u1", json=PROFILE, headers=auth_headers)

    assert response.status_code == 404
    assert client.get("/users/u1", headers=auth_headers).status_code == 404


def test_replace_with_other_id(client, auth_headers, stored_profile):
    response = client.put("/users/u1", json={**PROFILE, "id": "u2"}, headers=auth_headers)

    assert response.status_code == 400


def test_delete(client, auth_headers, stored_profile):
    assert client.delete("/users/u1", headers=auth_headers).status_code == 204
    assert client.delete("/users/u1", headers=auth_headers).status_code == 404


def test_validate_password_is_not_implemented(client, auth_headers):
    response = client.post("/users/validate-password", json={"password": "secret"}, headers=auth_headers)

    assert response.status_code == 501
    assert response.json()["error"]["code"] == "NOT_IMPLEMENTED"
