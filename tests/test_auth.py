# =============================================================================
# tests/test_auth.py - Auth Resource Tests
# =============================================================================
# Tests for ?route=auth (login) and ?route=auth/verify.
# =============================================================================

import pytest


@pytest.fixture
def registered(client, sample_user):
    """A user created through the API."""
    client.post("/", params={"route": "user"}, json=sample_user)
    return sample_user


def _login(client, correo, password):
    return client.post("/", params={"route": "auth"}, json={"correo": correo, "password": password})


class TestLogin:
    """Test POST ?route=auth."""

    def test_login_issues_token(self, client, token_service, registered):
        response = _login(client, registered["correo"], registered["password"])

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token_type"] == "Bearer"
        assert data["expires_in"] == 3600

        claims = token_service.validate({"Authorization": f"Bearer {data['token']}"})
        assert claims == {"user_id": 1, "rol": 1}

    def test_wrong_password(self, client, registered):
        response = _login(client, registered["correo"], "wrong")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials."

    def test_unknown_email_same_answer(self, client, registered):
        unknown = _login(client, "nobody@example.com", "whatever")
        wrong = _login(client, registered["correo"], "wrong")

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_missing_fields_is_422(self, client):
        response = client.post("/", params={"route": "auth"}, json={"correo": "a@b.c"})
        assert response.status_code == 422

    def test_get_not_allowed(self, client):
        assert client.get("/", params={"route": "auth"}).status_code == 405

    def test_unknown_sub_route(self, client):
        assert client.post("/", params={"route": "auth/refresh"}, json={}).status_code == 404

    def test_store_failure_is_500(self, client, fake_db):
        fake_db.fail = True
        assert _login(client, "a@b.c", "x").status_code == 500


class TestVerify:
    """Test POST ?route=auth/verify."""

    def test_valid_token(self, client, auth_headers):
        response = client.post("/", params={"route": "auth/verify"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"claims": {"user_id": 1}}

    @pytest.mark.parametrize(
        "headers,message",
        [
            ({}, "Authorization header is missing."),
            ({"Authorization": "Basic abc"}, "Authorization header must be 'Bearer <token>'."),
            ({"Authorization": "Bearer abc"}, "Token is malformed."),
        ],
    )
    def test_rejected(self, client, headers, message):
        response = client.post("/", params={"route": "auth/verify"}, headers=headers)

        assert response.status_code == 401
        assert response.json()["message"] == message

    def test_token_from_other_secret(self, client):
        from app.auth.tokens import TokenService

        token = TokenService.encode("another-secret", {"user_id": 1})
        response = client.post(
            "/",
            params={"route": "auth/verify"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Token signature is invalid."
