from datetime import timedelta

from conftest import API, bearer, register
from vyeya.core.security import create_access_token

ME = f"{API}/auth/me"


def test_missing_header_is_unauthenticated(client):
    response = client.get(ME)
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_bearer_without_token_is_unauthenticated(client):
    response = client.get(ME, headers={"Authorization": "Bearer"})
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_non_bearer_scheme_is_unauthenticated(client):
    response = client.get(ME, headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_tampered_token_is_forbidden(client):
    token = register(client, "a@example.com")["token"]
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    response = client.get(ME, headers=bearer(".".join([header, payload, flipped])))
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_expired_token_is_forbidden(client):
    user_id = register(client, "a@example.com")["user"]["id"]
    token = create_access_token(user_id, expires_delta=timedelta(seconds=-5))
    response = client.get(ME, headers=bearer(token))
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_garbage_token_is_forbidden(client):
    response = client.get(ME, headers=bearer("garbage"))
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_valid_token_for_unknown_user(client):
    response = client.get(ME, headers=bearer(create_access_token("no-such-user")))
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


def test_valid_token_attaches_user(client):
    body = register(client, "a@example.com", name="A")
    response = client.get(ME, headers=bearer(body["token"]))
    assert response.status_code == 200
    assert response.json()["user"]["id"] == body["user"]["id"]
    assert response.json()["user"]["email"] == "a@example.com"
