"""Registration, login and the access-token lifecycle."""

from tests.conftest import DEFAULT_PASSWORD, bearer


def test_health_routes(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "healthy"}


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"

    generated = client.get("/health").headers["X-Correlation-ID"]
    assert generated


def test_register_returns_user_summary_and_token(client):
    response = client.post(
        "/auth/register",
        json={"email": "Alice@Example.com", "password": DEFAULT_PASSWORD, "fullName": "Alice"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["fullName"] == "Alice"
    assert "password" not in str(body["user"]).lower()
    assert body["token"]


def test_register_duplicate_email_is_422_on_email(client):
    payload = {"email": "bob@example.com", "password": DEFAULT_PASSWORD}
    assert client.post("/auth/register", json=payload).status_code == 201

    response = client.post(
        "/auth/register", json={"email": "BOB@example.com", "password": DEFAULT_PASSWORD}
    )

    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] == "email"


def test_register_rejects_short_password_and_bad_email(client):
    response = client.post("/auth/register", json={"email": "nope", "password": "short"})

    assert response.status_code == 422
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"email", "password"} <= fields


def test_login_with_valid_and_invalid_credentials(client, register):
    user = register("carol")

    ok = client.post("/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == user.id

    wrong = client.post("/auth/login", json={"email": user.email, "password": "wrong-password"})
    unknown = client.post(
        "/auth/login", json={"email": "ghost@example.com", "password": DEFAULT_PASSWORD}
    )
    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json() == unknown.json()


def test_protected_route_requires_token(client):
    assert client.get("/conversations").status_code == 401
    assert client.get("/conversations", headers=bearer("garbage")).status_code == 401


def test_multiple_live_tokens_per_user(client, register):
    user = register("dave")
    second = client.post(
        "/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    ).json()["token"]

    assert client.get("/conversations", headers=user.headers).status_code == 200
    assert client.get("/conversations", headers=bearer(second)).status_code == 200


def test_logout_revokes_only_presented_token(client, register):
    user = register("erin")
    other = client.post(
        "/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    ).json()["token"]

    assert client.post("/auth/logout", headers=user.headers).status_code == 204

    assert client.get("/conversations", headers=user.headers).status_code == 401
    assert client.get("/conversations", headers=bearer(other)).status_code == 200


def test_refresh_rotates_token(client, register):
    user = register("frank")

    response = client.post("/auth/refresh", headers=user.headers)

    assert response.status_code == 200
    new_token = response.json()["token"]
    assert new_token != user.token
    assert client.get("/conversations", headers=user.headers).status_code == 401
    assert client.get("/conversations", headers=bearer(new_token)).status_code == 200


def test_guest_token(client):
    response = client.post("/auth/guest")

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["expiresAt"]

    listing = client.get("/conversations", headers=bearer(body["token"]))
    assert listing.status_code == 200
    assert listing.json() == []


def test_refreshing_guest_token_keeps_it_usable(client):
    token = client.post("/auth/guest").json()["token"]

    refreshed = client.post("/auth/refresh", headers=bearer(token))

    assert refreshed.status_code == 200
    assert client.get("/conversations", headers=bearer(refreshed.json()["token"])).status_code == 200
